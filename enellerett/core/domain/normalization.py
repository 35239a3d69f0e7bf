# enellerett/core/domain/normalization.py
"""
Canonical form of a noun.

The same function builds the lexicon keys at load time and the lookup keys at
query time, so the two can never disagree.
"""

from __future__ import annotations

import re

_WS_RE = re.compile(r"\s+")


def canonicalize(raw: str | None) -> str:
    """Drop every whitespace character, then lowercase."""
    if not raw:
        return ""
    return _WS_RE.sub("", raw).lower()
