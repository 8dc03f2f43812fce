"""
Reports polling loop.

Fires the refresh callback every interval until stopped. A firing does not
wait for the previous refresh to finish, so slow fetches can overlap.
"""
import asyncio
import logging
from typing import Awaitable, Callable, Optional, Set

logger = logging.getLogger(__name__)


class ReportPoller:

    def __init__(self, refresh: Callable[[], Awaitable[object]], interval_seconds: float = 30):
        self._refresh = refresh
        self.interval_seconds = interval_seconds
        self._task: Optional[asyncio.Task] = None
        self._inflight: Set[asyncio.Task] = set()

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, interval_seconds: Optional[float] = None) -> None:
        """Start (or restart with a new interval). Must be called from a running event loop."""
        if interval_seconds is not None:
            self.interval_seconds = interval_seconds
        self.stop()
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.info(f"Report auto-refresh started every {self.interval_seconds}s")

    def stop(self) -> None:
        if self._task is None:
            return
        if not self._task.done():
            self._task.cancel()
            logger.info("Report auto-refresh stopped")
        self._task = None

    async def shutdown(self) -> None:
        """Stop polling and cancel refreshes still in flight, waiting for them to end."""
        self.stop()
        pending = list(self._inflight)
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
            logger.info(f"Cancelled {len(pending)} in-flight report refresh(es)")

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            task = asyncio.get_running_loop().create_task(self._fire())
            self._inflight.add(task)
            task.add_done_callback(self._inflight.discard)

    async def _fire(self) -> None:
        try:
            await self._refresh()
        except Exception:
            logger.exception("Scheduled report refresh failed")
