# enellerett/adapters/api/user_agent.py
from typing import Optional

BROWSER_MARKERS = ("mozilla", "chrome", "safari", "apple", "webkit")


def is_browser(user_agent: Optional[str]) -> bool:
    """True if the agent string looks like a web browser rather than curl & co."""
    ua = (user_agent or "").lower()
    return any(marker in ua for marker in BROWSER_MARKERS)
