# enellerett/adapters/api/routers/lookup.py
import html
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from enellerett.adapters.api.dependencies import (
    client_is_browser,
    get_index_page,
    get_lookup_use_case,
    search_field,
)
from enellerett.core.use_cases.lookup_noun import LookupNoun

router = APIRouter(tags=["Lookup"])

# Every method is treated the same way: only the path or the `s` field matters.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

NO_INPUT_HINT = "No input given. Try something like this:\n\t{host}/stol\n"


@router.api_route("/", methods=ALL_METHODS)
def root(request: Request, browser: bool = Depends(client_is_browser)) -> Response:
    """Landing page for browsers, a usage hint for command-line clients."""
    if browser:
        return HTMLResponse(content=get_index_page())

    host = request.headers.get("host", "")
    return PlainTextResponse(NO_INPUT_HINT.format(host=host))


@router.api_route("/{query:path}", methods=ALL_METHODS, response_class=PlainTextResponse)
def lookup(
    query: str,
    browser: bool = Depends(client_is_browser),
    field: Optional[str] = Depends(search_field),
    use_case: LookupNoun = Depends(get_lookup_use_case),
) -> str:
    """
    Answers "en" or "ett" for a noun.

    * Command-line clients put the noun in the path: `curl host/stol`.
    * Browsers submit the search form, which sends it as field `s`;
      a bare path is used when the field is missing. The page swaps the
      answer into its markup, so browsers get it HTML-escaped.

    Unknown nouns get a "Kunde inte hitta" message with status 200.
    """
    if not browser:
        return use_case.execute(query.lower().strip())

    answer = use_case.execute(field if field is not None else query.lower().strip())
    return html.escape(answer, quote=False)
