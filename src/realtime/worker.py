"""
Hand Cricket - Enrichment Worker

Runs optional provider calls (commentary, coach tips, voice, venue) off
the UI thread. Uses a background thread with an asyncio event loop so
Streamlit's synchronous reruns never wait on the network.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from concurrent.futures import Future
from functools import lru_cache
from typing import Any, Callable, Coroutine, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EnrichmentWorker:
    """Schedules coroutines on a daemon-thread event loop.

    Result callbacks are invoked from that background thread; callers
    should handle thread safety. A job that raises is logged and its
    callback receives ``None``, so callers always get a chance to fall
    back to local content.
    """

    def __init__(self) -> None:
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    def _ensure_loop(self) -> asyncio.AbstractEventLoop:
        """Start the background event loop if not running."""
        with self._lock:
            if self._loop is None or self._thread is None or not self._thread.is_alive():
                loop = asyncio.new_event_loop()
                self._loop = loop
                self._thread = threading.Thread(
                    target=self._run_loop, args=(loop,), daemon=True, name="enrichment-loop"
                )
                self._thread.start()
            return self._loop

    @staticmethod
    def _run_loop(loop: asyncio.AbstractEventLoop) -> None:
        """Run the asyncio event loop in the background thread."""
        asyncio.set_event_loop(loop)
        loop.run_forever()

    def submit(
        self,
        coro: Coroutine[Any, Any, T],
        on_result: Callable[[T | None], None] | None = None,
    ) -> Future:
        """Schedule a coroutine and deliver its result to ``on_result``.

        Returns:
            A concurrent Future resolving to the job's result (or None).
        """
        loop = self._ensure_loop()
        return asyncio.run_coroutine_threadsafe(self._run_job(coro, on_result), loop)

    async def _run_job(
        self,
        coro: Coroutine[Any, Any, T],
        on_result: Callable[[T | None], None] | None,
    ) -> T | None:
        result: T | None
        try:
            result = await coro
        except Exception:
            logger.exception("Enrichment job failed")
            result = None

        if on_result is not None:
            try:
                on_result(result)
            except Exception:
                logger.exception("Enrichment callback failed")
        return result

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def shutdown(self) -> None:
        """Stop the background event loop and clean up."""
        with self._lock:
            loop, thread = self._loop, self._thread
            self._loop = None
            self._thread = None
        if loop and loop.is_running():
            loop.call_soon_threadsafe(loop.stop)
        if thread and thread.is_alive():
            thread.join(timeout=5)
        if loop and not loop.is_running():
            loop.close()


@lru_cache(maxsize=1)
def get_enrichment_worker() -> EnrichmentWorker:
    """Process-wide worker shared by all sessions."""
    return EnrichmentWorker()
