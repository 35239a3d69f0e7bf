# enellerett/adapters/api/__init__.py
"""
HTTP Adapter.

FastAPI entry point for the lookup service. It resolves use cases through
`enellerett.shared.container` and contains no business logic.
"""

from .main import create_app

__all__ = ["create_app"]
