# enellerett/core/use_cases/__init__.py
"""
Core Use Cases (Application Logic).

Each use case receives its ports through the constructor and holds no state
of its own besides them.
"""

from .lookup_noun import LookupNoun
from .quiz import Quiz

__all__ = [
    "LookupNoun",
    "Quiz",
]
