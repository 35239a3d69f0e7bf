# enellerett/__init__.py
"""
En eller ett - Swedish noun gender lookup service.

This package follows Hexagonal Architecture (Ports & Adapters):
- `core`: lexicon entities, lookup and quiz use cases.
- `adapters`: word-list loader, in-memory store, hit recorder, HTTP API.
- `shared`: settings, logging, tracing and the DI container.
"""

__version__ = "1.0.0"
