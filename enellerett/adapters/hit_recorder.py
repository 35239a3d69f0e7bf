# enellerett/adapters/hit_recorder.py
from __future__ import annotations

import queue
import threading
from typing import Optional

import structlog

from enellerett.core.domain.exceptions import KeyNotFoundError
from enellerett.core.ports.hit_recorder import IHitRecorder
from enellerett.core.ports.lexicon_store import ILexiconStore
from enellerett.shared.config import settings

logger = structlog.get_logger()

_STOP = object()


class QueuedHitRecorder(IHitRecorder):
    """
    Single-writer hit counter.

    Request threads enqueue keys; one daemon thread applies them to the store
    in order. The queue is bounded: when it is full, hits are dropped rather
    than blocking a request. Hit counts are best-effort telemetry.
    """

    def __init__(
        self,
        store: ILexiconStore,
        max_pending: int = settings.HIT_QUEUE_SIZE,
    ) -> None:
        self._store = store
        self._queue: "queue.Queue[object]" = queue.Queue(maxsize=max_pending)
        self._thread: Optional[threading.Thread] = None
        self._dropped = 0
        self._dropped_lock = threading.Lock()

    @property
    def dropped(self) -> int:
        with self._dropped_lock:
            return self._dropped

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._thread = threading.Thread(
            target=self._run, name="hit-recorder", daemon=True
        )
        self._thread.start()
        logger.info("hit_recorder_started", max_pending=self._queue.maxsize)

    def stop(self, timeout: float = 5.0) -> None:
        """Apply what is already queued, then stop the writer thread."""
        if not self.running:
            return
        # Blocking put: the sentinel must not be dropped on a full queue.
        self._queue.put(_STOP)
        self._thread.join(timeout)
        if self._thread.is_alive():
            # Keep the reference so start() cannot add a second writer.
            logger.warning("hit_recorder_stop_timeout", timeout=timeout)
            return
        self._thread = None
        logger.info("hit_recorder_stopped", dropped=self.dropped)

    def record(self, key: str) -> bool:
        try:
            self._queue.put_nowait(key)
        except queue.Full:
            with self._dropped_lock:
                self._dropped += 1
                dropped = self._dropped
            logger.warning("hit_dropped", key=key, dropped=dropped)
            return False
        return True

    def drain(self) -> None:
        """Block until every queued hit has been applied."""
        self._queue.join()

    def _run(self) -> None:
        while True:
            item = self._queue.get()
            try:
                if item is _STOP:
                    return
                self._store.increment_hits(item)
            except KeyNotFoundError as e:
                logger.error("hit_for_unknown_key", key=e.key)
            except Exception as e:
                logger.error("hit_increment_failed", key=item, error=str(e), exc_info=True)
            finally:
                self._queue.task_done()
