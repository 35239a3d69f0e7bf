# tests/adapters/test_api_endpoints.py
import pytest
from dependency_injector import providers
from fastapi import status
from fastapi.testclient import TestClient

from enellerett.adapters.api.main import create_app
from enellerett.adapters.persistence.memory_store import InMemoryLexiconStore
from enellerett.adapters.persistence.word_list_loader import load_lexicon
from enellerett.core.domain.exceptions import LexiconLoadError
from enellerett.shared.config import settings
from enellerett.shared.container import Container

BROWSER_UA = "Mozilla/5.0 (X11; Linux x86_64; rv:134.0) Gecko/20100101 Firefox/134.0"
CURL_UA = "curl/8.5.0"


@pytest.fixture
def client(container):
    """
    Returns a FastAPI TestClient.

    The 'container' fixture (from conftest.py) has already replaced the
    bundled lexicon with the small test word lists.
    """
    app = create_app(container)
    with TestClient(app, headers={"User-Agent": CURL_UA}) as c:
        yield c


@pytest.fixture
def browser(client):
    client.headers["User-Agent"] = BROWSER_UA
    return client


class TestCommandLineLookup:

    def test_root_gives_usage_hint(self, client):
        response = client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert "No input given" in response.text
        assert "/stol" in response.text

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("/stol", "En stol"),
            ("/STOL", "En stol"),
            ("/stoL", "En stol"),
            ("/stol ", "En stol"),
            ("/ stol", "En stol"),
            ("/Stol", "En stol"),
            ("/bok", "En bok"),
            ("/penna", "En penna"),
            ("/öl", "En eller ett öl beroende på kontext"),
            ("/bord", "Ett bord"),
            ("/äpple", "Ett äpple"),
        ],
    )
    def test_input_output_table(self, client, path, expected):
        response = client.get(path)

        assert response.status_code == status.HTTP_200_OK
        assert expected in response.text

    def test_exact_message(self, client):
        assert client.get("/stol").text == "En stol\n"
        assert client.get("/bord").text == "Ett bord\n"

    def test_plain_text_content_type(self, client):
        response = client.get("/stol")
        assert response.headers["content-type"].startswith("text/plain")

    def test_unknown_word_echoes_input(self, client):
        response = client.get("/okänd")

        assert response.status_code == status.HTTP_200_OK
        assert "Kunde inte hitta" in response.text
        assert "okänd" in response.text

    def test_swedish_characters_in_path(self, client):
        response = client.get("/öäå")

        assert response.status_code == status.HTTP_200_OK
        assert "öäå" in response.text

    def test_body_is_not_parsed_for_command_line_clients(self, client):
        response = client.post(
            "/stol",
            content=b"garbage",
            headers={"Content-Type": "multipart/form-data"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.text == "En stol\n"

    def test_search_field_is_ignored(self, client):
        response = client.post("/x", data={"s": "stol"})
        assert response.text == "Kunde inte hitta substantivet 'x'\n"

    def test_markup_is_echoed_verbatim(self, client):
        response = client.get("/<b>")
        assert response.text == "Kunde inte hitta substantivet '<b>'\n"

    @pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE"])
    def test_any_method_looks_up_path(self, client, method):
        response = client.request(method, "/stol", content=b"name=test")

        assert response.status_code == status.HTTP_200_OK
        assert "En stol" in response.text

    def test_query_params_are_ignored(self, client):
        response = client.get("/stol", params={"q": "☃️", "z": "😈"})

        assert response.status_code == status.HTTP_200_OK
        assert "En stol" in response.text

    @pytest.mark.parametrize(
        "path",
        [
            "/../../../etc/passwd",
            "/..//..//..//..//windows/system32",
            "/../.../.../../",
        ],
    )
    def test_path_traversal_is_just_an_unknown_word(self, client, path):
        response = client.get(path)

        assert response.status_code == status.HTTP_200_OK
        assert "Kunde inte hitta" in response.text


class TestBrowserLookup:

    def test_root_serves_index_page(self, browser):
        response = browser.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert response.headers["content-type"].startswith("text/html")
        assert "<body>" in response.text

    def test_search_form_field(self, browser):
        response = browser.post("/search", data={"s": " Bord"})

        assert response.status_code == status.HTTP_200_OK
        assert response.text == "Ett bord\n"

    def test_search_query_field(self, browser):
        response = browser.get("/search", params={"s": "äpple"})
        assert response.text == "Ett äpple\n"

    def test_empty_field_returns_empty_body(self, browser):
        response = browser.post("/search", data={"s": ""})

        assert response.status_code == status.HTTP_200_OK
        assert response.text == ""

    def test_path_used_without_field(self, browser):
        assert browser.get("/stol").text == "En stol\n"

    def test_echoed_query_is_escaped(self, browser):
        response = browser.post("/search", data={"s": "<img src=x onerror=alert(1)>"})

        assert response.status_code == status.HTTP_200_OK
        assert "<img" not in response.text
        assert "&lt;img src=x onerror=alert(1)&gt;" in response.text
        assert response.text.startswith("Kunde inte hitta substantivet '")


class TestHitCounting:

    def test_lookups_increment_hits(self, client, container, store):
        for _ in range(4):
            client.get("/stol")
        client.get("/okänd")
        container.hit_recorder().drain()

        assert store.read("stol")[0].hit_count == 4


class TestGame:

    def test_random_word_is_known(self, client, store):
        for _ in range(20):
            response = client.get("/game/random")
            assert response.status_code == status.HTTP_200_OK
            assert response.text in store

    def test_random_word_varies(self, client):
        words = {client.get("/game/random").text for _ in range(60)}
        assert len(words) > 1

    def test_check_en_correct(self, client):
        response = client.post("/game/check/en", data={"randomNoun": "stol"})

        assert response.status_code == status.HTTP_200_OK
        assert response.text == "&#9989; en stol<br>"
        assert response.headers["HX-Trigger"] == "newRandom"

    def test_check_ett_wrong(self, client):
        response = client.post("/game/check/ett", data={"randomNoun": "stol"})
        assert response.text == "&#10060; ett stol<br>"

    def test_check_ett_correct(self, client):
        response = client.post("/game/check/ett", data={"randomNoun": "bord"})
        assert response.text == "&#9989; ett bord<br>"

    def test_ett_guess_on_ambiguous_word_is_wrong(self, client):
        response = client.post("/game/check/ett", data={"randomNoun": "öl"})
        assert response.text.startswith("&#10060;")

    def test_check_accepts_query_string(self, client):
        response = client.get("/game/check/en", params={"randomNoun": "bok"})
        assert response.text == "&#9989; en bok<br>"

    def test_unknown_noun_fails_only_that_request(self, client):
        response = client.post("/game/check/en", data={"randomNoun": "okänd"})
        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["status"] == "error"

        # The service keeps answering.
        assert client.get("/stol").text == "En stol\n"


class TestSiteAndHealth:

    def test_robots(self, client):
        response = client.get("/robots.txt")

        assert response.status_code == status.HTTP_200_OK
        assert "User-agent: *" in response.text
        assert f"Sitemap: {settings.SITE_URL}/sitemap.xml" in response.text

    def test_sitemap(self, client):
        response = client.get("/sitemap.xml")

        assert response.headers["content-type"].startswith("application/xml")
        assert f"<loc>{settings.SITE_URL}/</loc>" in response.text
        assert settings.SITEMAP_LASTMOD in response.text

    def test_favicon(self, client):
        response = client.get("/favicon.ico")

        assert response.headers["content-type"].startswith("image/svg+xml")
        assert response.text.startswith("<svg")

    def test_liveness(self, client):
        response = client.get("/health/live")
        assert response.json()["status"] == "ok"

    def test_readiness_reports_entries(self, client, store):
        response = client.get("/health/ready")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"lexicon": "up", "entries": len(store)}


def test_startup_fails_without_word_lists(tmp_path):
    container = Container()
    container.lexicon_store.override(
        providers.Singleton(load_lexicon, tmp_path / "no_en.txt", tmp_path / "no_ett.txt")
    )
    app = create_app(container)

    with pytest.raises(LexiconLoadError):
        with TestClient(app):
            pass


def test_readiness_fails_for_empty_lexicon():
    container = Container()
    container.lexicon_store.override(providers.Object(InMemoryLexiconStore({})))
    app = create_app(container)

    with TestClient(app) as c:
        response = c.get("/health/ready")

    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    assert response.json() == {"lexicon": "empty", "entries": 0}
    container.lexicon_store.reset_override()
