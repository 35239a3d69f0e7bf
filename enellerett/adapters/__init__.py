# enellerett/adapters/__init__.py
"""
Infrastructure Adapters.

Concrete implementations of the Ports defined in `enellerett.core.ports`:
- `api`: The Primary Adapter (Driving) - FastAPI web server.
- `persistence`: Secondary Adapter (Driven) - word-list loader and in-memory store.
- `hit_recorder`: Secondary Adapter (Driven) - single-writer hit counting.

Dependencies point INWARD: these modules depend on `enellerett.core`,
but `enellerett.core` never imports from here.
"""
