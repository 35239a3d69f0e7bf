# enellerett/core/ports/__init__.py
"""
Core Ports (Interfaces).

Protocols the adapters implement so the use cases never depend on a concrete
store or queue.
"""

from .hit_recorder import IHitRecorder
from .lexicon_store import ILexiconStore

__all__ = [
    "IHitRecorder",
    "ILexiconStore",
]
