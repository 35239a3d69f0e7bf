# enellerett/core/domain/__init__.py
"""
Domain entities, errors and the canonical word form.
"""

from .exceptions import DomainError, EmptyLexiconError, KeyNotFoundError, LexiconLoadError
from .models import Gender, LexiconEntry
from .normalization import canonicalize

__all__ = [
    "DomainError",
    "EmptyLexiconError",
    "KeyNotFoundError",
    "LexiconLoadError",
    "Gender",
    "LexiconEntry",
    "canonicalize",
]
