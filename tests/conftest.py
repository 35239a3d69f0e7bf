# tests/conftest.py
import pytest
from dependency_injector import providers
from unittest.mock import MagicMock

from enellerett.adapters.hit_recorder import QueuedHitRecorder
from enellerett.adapters.persistence.word_list_loader import load_lexicon
from enellerett.core.ports.hit_recorder import IHitRecorder
from enellerett.shared.container import Container

EN_WORDS = ["stol", "bok", "penna", "öl", "bil"]
ETT_WORDS = ["bord", "äpple", "öl", "hus"]


def write_word_list(path, words):
    path.write_text("".join(f"{w}\n" for w in words), encoding="utf-8")
    return path


@pytest.fixture
def word_lists(tmp_path):
    """Writes a small en/ett pair. 'öl' is in both lists."""
    en = write_word_list(tmp_path / "en.txt", EN_WORDS)
    ett = write_word_list(tmp_path / "ett.txt", ETT_WORDS)
    return en, ett


@pytest.fixture
def store(word_lists):
    en, ett = word_lists
    return load_lexicon(en, ett)


@pytest.fixture
def recorder(store):
    """A running hit recorder over the test store."""
    rec = QueuedHitRecorder(store, max_pending=1000)
    rec.start()
    yield rec
    rec.stop()


@pytest.fixture
def mock_hits():
    """Returns a mock Hit Recorder that accepts every hit."""
    hits = MagicMock(spec=IHitRecorder)
    hits.record.return_value = True
    return hits


@pytest.fixture
def container(store):
    """
    Sets up the Dependency Injection Container for testing.
    The lexicon is the small fixture store instead of the bundled word lists.
    """
    container = Container()
    container.lexicon_store.override(providers.Object(store))

    yield container

    container.reset_singletons()
    container.lexicon_store.reset_override()
