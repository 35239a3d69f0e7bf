# enellerett/adapters/api/routers/__init__.py
"""
API Route Definitions.

- `lookup`: the noun lookup (path or form field) and the landing page.
- `game`: the en/ett quiz.
- `site`: robots.txt, sitemap.xml, favicon.
- `health`: liveness and readiness probes.
"""

from .game import router as game_router
from .health import router as health_router
from .lookup import router as lookup_router
from .site import router as site_router

__all__ = [
    "game_router",
    "health_router",
    "lookup_router",
    "site_router",
]
