# enellerett/adapters/persistence/memory_store.py
from threading import Lock
from typing import Dict, List, Mapping, Optional, Tuple

from enellerett.core.domain.exceptions import KeyNotFoundError
from enellerett.core.domain.models import LexiconEntry
from enellerett.core.ports.lexicon_store import ILexiconStore


class InMemoryLexiconStore(ILexiconStore):
    """
    Word -> classification table held in process memory.

    One lock covers the whole dict. The key set is fixed at construction;
    only hit counts change afterwards.
    """

    def __init__(self, entries: Mapping[str, LexiconEntry]):
        self._data: Dict[str, LexiconEntry] = dict(entries)
        self._lock = Lock()

    def read(self, key: str) -> Tuple[Optional[LexiconEntry], bool]:
        with self._lock:
            entry = self._data.get(key)
        return entry, entry is not None

    def increment_hits(self, key: str) -> None:
        with self._lock:
            entry = self._data.get(key)
            if entry is None:
                raise KeyNotFoundError(key)
            self._data[key] = entry.with_hit()

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._data)

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data
