# File: src/services/background_writer.py
"""
Fire-and-forget write queue.

A single worker thread runs submitted writes in order, so the last
submitted value for a key is the one that ends up stored. Failures are
logged and dropped; callers never wait and never see an error.
"""

from concurrent.futures import Future, ThreadPoolExecutor, wait
from threading import Lock
from typing import Callable, List, Optional

from src.utils.logger import setup_logger

logger = setup_logger(__name__)


class BackgroundWriter:
    """Serialized best-effort background task queue."""

    def __init__(self):
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="planner-writer")
        self._pending: List[Future] = []
        self._lock = Lock()
        self._closed = False

    def submit(self, description: str, write: Callable[[], None]) -> None:
        """Queue a write. Returns immediately."""
        if self._closed:
            logger.debug(f"Writer closed, dropping write: {description}")
            return

        def run():
            try:
                write()
            except Exception as e:
                logger.debug(f"Background write failed ({description}): {e}")

        future = self._executor.submit(run)
        with self._lock:
            self._pending = [f for f in self._pending if not f.done()]
            self._pending.append(future)

    def flush(self, timeout: Optional[float] = None) -> None:
        """Block until every write queued so far has finished."""
        with self._lock:
            pending = list(self._pending)
        wait(pending, timeout=timeout)

    def close(self) -> None:
        """Finish pending writes and stop the worker."""
        if self._closed:
            return
        self._closed = True
        self._executor.shutdown(wait=True)
