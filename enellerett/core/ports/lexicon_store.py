# enellerett/core/ports/lexicon_store.py
from typing import List, Optional, Protocol, Tuple

from enellerett.core.domain.models import LexiconEntry


class ILexiconStore(Protocol):
    """
    Port for the in-memory word classification table.

    Implementations must be safe to call from many threads at once.
    """

    def read(self, key: str) -> Tuple[Optional[LexiconEntry], bool]:
        """
        Looks up a canonical word.

        Returns:
            (entry, True) if the word is known, (None, False) otherwise.
        """
        ...

    def increment_hits(self, key: str) -> None:
        """
        Adds one to the hit count of a word.

        Raises:
            KeyNotFoundError: if the word is not in the table.
        """
        ...

    def keys(self) -> List[str]:
        """Snapshot of every canonical word in the table."""
        ...

    def __len__(self) -> int:
        ...
