# enellerett/adapters/api/routers/game.py
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Response
from fastapi.responses import HTMLResponse, PlainTextResponse

from enellerett.adapters.api.dependencies import form_value, get_quiz_use_case
from enellerett.core.domain.models import Gender
from enellerett.core.use_cases.quiz import Quiz

logger = structlog.get_logger()

router = APIRouter(prefix="/game", tags=["Game"])

# htmx event that makes the page fetch the next word.
NEXT_WORD_TRIGGER = {"HX-Trigger": "newRandom"}


@router.get("/random", response_class=PlainTextResponse)
def random_word(quiz: Quiz = Depends(get_quiz_use_case)) -> str:
    """One random noun from the lexicon, as plain text."""
    return quiz.random_word()


def _check(quiz: Quiz, guess: Gender, noun: Optional[str]) -> Response:
    fragment = quiz.check_guess(guess, noun or "")
    return HTMLResponse(content=fragment, headers=NEXT_WORD_TRIGGER)


@router.api_route("/check/en", methods=["GET", "POST"], response_class=HTMLResponse)
def check_en(
    noun: Optional[str] = Depends(form_value("randomNoun")),
    quiz: Quiz = Depends(get_quiz_use_case),
) -> Response:
    """Scores the guess "en" for the word the client was given."""
    return _check(quiz, Gender.EN, noun)


@router.api_route("/check/ett", methods=["GET", "POST"], response_class=HTMLResponse)
def check_ett(
    noun: Optional[str] = Depends(form_value("randomNoun")),
    quiz: Quiz = Depends(get_quiz_use_case),
) -> Response:
    """Scores the guess "ett" for the word the client was given."""
    return _check(quiz, Gender.ETT, noun)
