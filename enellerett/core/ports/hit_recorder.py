# enellerett/core/ports/hit_recorder.py
from typing import Protocol


class IHitRecorder(Protocol):
    """
    Port for counting successful lookups off the request path.
    """

    def record(self, key: str) -> bool:
        """
        Schedules one hit for `key` without blocking.

        Returns False if the hit was dropped.
        """
        ...
