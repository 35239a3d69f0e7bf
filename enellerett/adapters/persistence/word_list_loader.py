# enellerett/adapters/persistence/word_list_loader.py
"""
Builds the lexicon from two plain word lists.

File format
-----------
UTF-8 text, one noun per line, no header and no metadata. One file lists the
"en" nouns, the other the "ett" nouns. Blank lines are ignored.

Merge rules
-----------
1. Every word of the en list becomes an "En <word>" entry.
2. Every word of the ett list becomes an "Ett <word>" entry, unless it is
   already present from the en list, in which case the entry is replaced by
   the ambiguous "En eller ett <word> beroende på kontext" form.

Keys go through `canonicalize`, the same function used for queries. Source
files are expected to be lowercase already; lines that needed rewriting are
counted and reported so a badly prepared file shows up in the startup log.

Error behaviour
---------------
Any failure to open or decode either file raises `LexiconLoadError`. Nothing
is returned on failure, so a partially loaded table can never be served.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterator, Union

import structlog

from enellerett.adapters.persistence.memory_store import InMemoryLexiconStore
from enellerett.core.domain.exceptions import LexiconLoadError
from enellerett.core.domain.models import LexiconEntry
from enellerett.core.domain.normalization import canonicalize

logger = structlog.get_logger()

PathLike = Union[str, Path]


def _read_words(path: Path, stats: Dict[str, int]) -> Iterator[str]:
    """Yield canonical words from `path`, one per non-blank line."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                raw = line.rstrip("\r\n")
                word = canonicalize(raw)
                if not word:
                    stats["blank"] += 1
                    continue
                if word != raw:
                    stats["rewritten"] += 1
                yield word
    except (OSError, UnicodeDecodeError) as e:
        raise LexiconLoadError(str(path), str(e)) from e


def load_lexicon(en_path: PathLike, ett_path: PathLike) -> InMemoryLexiconStore:
    """
    Read both word lists and return a ready store.

    Raises:
        LexiconLoadError: either file is missing, unreadable or not UTF-8.
    """
    en_path, ett_path = Path(en_path), Path(ett_path)
    stats = {"blank": 0, "rewritten": 0}
    table: Dict[str, LexiconEntry] = {}

    for word in _read_words(en_path, stats):
        table[word] = LexiconEntry.en(word)

    for word in _read_words(ett_path, stats):
        existing = table.get(word)
        if existing is not None and existing.has_en:
            table[word] = LexiconEntry.ambiguous(word)
        else:
            table[word] = LexiconEntry.ett(word)

    ambiguous = sum(1 for entry in table.values() if entry.is_ambiguous)

    if stats["rewritten"]:
        logger.warning(
            "lexicon_source_not_normalized",
            rewritten=stats["rewritten"],
            en_path=str(en_path),
            ett_path=str(ett_path),
        )

    logger.info(
        "lexicon_loaded",
        entries=len(table),
        ambiguous=ambiguous,
        skipped_blank=stats["blank"],
    )
    return InMemoryLexiconStore(table)
