# enellerett/core/use_cases/lookup_noun.py
import structlog

from enellerett.core.domain.models import NOT_FOUND_MESSAGE
from enellerett.core.domain.normalization import canonicalize
from enellerett.core.ports.hit_recorder import IHitRecorder
from enellerett.core.ports.lexicon_store import ILexiconStore
from enellerett.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class LookupNoun:
    """
    Use Case: Tells the caller whether a noun takes "en" or "ett".

    Responsibilities:
    1. Canonicalizes the raw query (whitespace removed, lowercased).
    2. Reads the classification from the store.
    3. Schedules a hit increment for found words without waiting for it.
    """

    def __init__(self, store: ILexiconStore, hits: IHitRecorder):
        self.store = store
        self.hits = hits

    def execute(self, raw_query: str) -> str:
        """
        Args:
            raw_query: The word exactly as the client sent it.

        Returns:
            The precomputed message for a known word, a "not found" message
            echoing `raw_query` for an unknown one, or "" for blank input.
        """
        with tracer.start_as_current_span("use_case.lookup_noun") as span:
            clean = canonicalize(raw_query)
            span.set_attribute("app.query", clean)

            if not clean:
                return ""

            entry, found = self.store.read(clean)
            span.set_attribute("app.found", found)

            if not found:
                logger.info("lookup_miss", query=raw_query)
                return NOT_FOUND_MESSAGE.format(query=raw_query)

            self.hits.record(clean)
            return entry.message
