# enellerett/adapters/api/dependencies.py
from functools import lru_cache
from pathlib import Path
from typing import Awaitable, Callable, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends, Request

from enellerett.adapters.api.user_agent import is_browser
from enellerett.core.ports.lexicon_store import ILexiconStore
from enellerett.core.use_cases.lookup_noun import LookupNoun
from enellerett.core.use_cases.quiz import Quiz
from enellerett.shared.config import settings
from enellerett.shared.container import Container


# -----------------------------------------------------------------------------
# Use case injection
# -----------------------------------------------------------------------------
@inject
def get_lookup_use_case(
    use_case: LookupNoun = Depends(Provide[Container.lookup_noun_use_case]),
) -> LookupNoun:
    """Dependency to inject the LookupNoun interactor (container-managed)."""
    return use_case


@inject
def get_quiz_use_case(
    use_case: Quiz = Depends(Provide[Container.quiz_use_case]),
) -> Quiz:
    """Dependency to inject the Quiz interactor (container-managed)."""
    return use_case


@inject
def get_lexicon_store(
    store: ILexiconStore = Depends(Provide[Container.lexicon_store]),
) -> ILexiconStore:
    return store


# -----------------------------------------------------------------------------
# Request inspection
# -----------------------------------------------------------------------------
def client_is_browser(request: Request) -> bool:
    return is_browser(request.headers.get("user-agent"))


async def read_field(request: Request, name: str) -> Optional[str]:
    """
    Field `name` from the request body (urlencoded or multipart) or, failing
    that, from the query string. None when the field is absent in both.
    """
    form = await request.form()
    value = form.get(name)
    if isinstance(value, str):
        return value
    return request.query_params.get(name)


def form_value(name: str) -> Callable[[Request], Awaitable[Optional[str]]]:
    """Builds a dependency returning `read_field(request, name)`."""

    async def _dependency(request: Request) -> Optional[str]:
        return await read_field(request, name)

    return _dependency


async def search_field(
    request: Request,
    browser: bool = Depends(client_is_browser),
) -> Optional[str]:
    """
    The search form field `s`, read for browsers only.

    Command-line clients never send it, and their request bodies are not
    parsed at all.
    """
    if not browser:
        return None
    return await read_field(request, "s")


# -----------------------------------------------------------------------------
# Static pages
# -----------------------------------------------------------------------------
@lru_cache(maxsize=4)
def _read_page(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


def get_index_page() -> str:
    """The landing page served to browsers, read once per process."""
    return _read_page(settings.INDEX_PAGE_PATH)
