# enellerett/core/use_cases/quiz.py
import html
import random
from typing import Optional

import structlog

from enellerett.core.domain.exceptions import EmptyLexiconError, KeyNotFoundError
from enellerett.core.domain.models import Gender
from enellerett.core.ports.lexicon_store import ILexiconStore
from enellerett.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

CORRECT_MARK = "&#9989;"
WRONG_MARK = "&#10060;"


class Quiz:
    """
    Use Case: The "en or ett?" guessing game.

    The client is handed a random noun, guesses its article, and gets back an
    HTML fragment marking the guess right or wrong.
    """

    def __init__(self, store: ILexiconStore, rng: Optional[random.Random] = None):
        self.store = store
        self.rng = rng or random.Random()

    def random_word(self) -> str:
        """Uniform pick over every word in the lexicon, ignoring hits and gender."""
        words = self.store.keys()
        if not words:
            raise EmptyLexiconError()
        return self.rng.choice(words)

    def check_guess(self, guess: Gender, noun: str) -> str:
        """
        Scores a guess against the store.

        Only `has_en` is consulted, so an "ett" guess on a word that takes
        both articles is scored wrong.

        Raises:
            KeyNotFoundError: `noun` did not come from `random_word`.
        """
        with tracer.start_as_current_span("use_case.quiz_check") as span:
            span.set_attribute("app.guess", guess.value)

            entry, found = self.store.read(noun)
            if not found:
                raise KeyNotFoundError(noun)

            correct = (guess is Gender.EN) == entry.has_en
            span.set_attribute("app.correct", correct)
            logger.info("quiz_checked", noun=noun, guess=guess.value, correct=correct)

            mark = CORRECT_MARK if correct else WRONG_MARK
            return f"{mark} {guess.value} {html.escape(noun)}<br>"
