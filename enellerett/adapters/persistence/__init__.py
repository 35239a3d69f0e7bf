# enellerett/adapters/persistence/__init__.py
"""
Driven adapters for the lexicon: the word-list loader and the in-memory store.
"""

from .memory_store import InMemoryLexiconStore
from .word_list_loader import load_lexicon

__all__ = ["InMemoryLexiconStore", "load_lexicon"]
