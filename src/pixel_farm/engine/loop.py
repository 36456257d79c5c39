"""Asyncio actor that serializes intents and scheduled ticks.

FarmEngine itself is synchronous. FarmLoop puts it behind a queue so that
intents from any number of coroutines, and the fixed-period tick, are
applied one at a time in arrival order. Nothing in the engine awaits, so a
queued command always runs to completion before the next one starts.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Callable
from functools import partial
from typing import Any, TypeVar

from pixel_farm.core.logging import (
    bind_context,
    configure_logging_from_settings,
    get_logger,
    is_configured,
)
from pixel_farm.engine.farm import FarmEngine, Notification


logger = get_logger(__name__)

T = TypeVar("T")

_STOP = object()


class FarmLoop:
    """Single-writer command loop around a FarmEngine.

    Example:
        >>> async with FarmLoop(engine) as loop:
        ...     await loop.submit(engine.plant, 114, "WHEAT")
        ...     await asyncio.sleep(5)
    """

    def __init__(
        self,
        engine: FarmEngine,
        *,
        tick_seconds: float | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the loop.

        Args:
            engine: Engine whose state this loop drives.
            tick_seconds: Tick period. Defaults to the engine's settings.
            clock: Timestamp source passed to scheduled ticks.
        """
        self._engine = engine
        self._tick_seconds = tick_seconds or engine.settings.simulation.tick_seconds
        self._clock = clock
        self._queue: asyncio.Queue[Any] | None = None
        self._worker: asyncio.Task[None] | None = None
        self._ticker: asyncio.Task[None] | None = None
        self._tick_count = 0
        self._stopping = False

    @property
    def engine(self) -> FarmEngine:
        return self._engine

    @property
    def is_running(self) -> bool:
        return self._worker is not None and not self._worker.done() and not self._stopping

    @property
    def tick_count(self) -> int:
        """Scheduled ticks applied so far."""
        return self._tick_count

    async def start(self, *, schedule_ticks: bool = True) -> None:
        """Start the command worker and, unless disabled, the tick timer.

        Logging is configured from the engine settings if the process has
        not configured it already.
        """
        if self.is_running:
            return
        if not is_configured():
            configure_logging_from_settings(self._engine.settings)
        self._stopping = False
        self._queue = asyncio.Queue()
        self._worker = asyncio.create_task(self._run_worker())
        if schedule_ticks:
            self._ticker = asyncio.create_task(self._run_ticker())
        logger.info("FarmLoop started", tick_seconds=self._tick_seconds, ticks=schedule_ticks)

    async def stop(self) -> None:
        """Stop ticking, apply every already queued command, then stop.

        Submissions made once stopping has begun are refused.
        """
        self._stopping = True
        if self._ticker is not None:
            self._ticker.cancel()
            try:
                await self._ticker
            except asyncio.CancelledError:
                pass
            self._ticker = None

        if self._queue is not None and self._worker is not None:
            await self._queue.put(_STOP)
            await self._worker
        self._worker = None
        self._queue = None
        self._stopping = False
        logger.info("FarmLoop stopped", ticks=self._tick_count)

    async def __aenter__(self) -> FarmLoop:
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()

    async def submit(self, intent: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Queue a call and wait for its result.

        Exceptions raised by the call (typically a PixelFarmError) are
        re-raised here.

        Raises:
            RuntimeError: If the loop is not running or is stopping.
        """
        if self._queue is None or not self.is_running:
            raise RuntimeError("FarmLoop is not running")
        future: asyncio.Future[T] = asyncio.get_running_loop().create_future()
        await self._queue.put((partial(intent, *args, **kwargs), future))
        return await future

    async def tick(self) -> list[Notification]:
        """Queue one tick at the current clock time."""
        notifications = await self.submit(self._engine.tick, self._clock())
        self._tick_count += 1
        return notifications

    async def _run_worker(self) -> None:
        bind_context(component="farm_loop")
        assert self._queue is not None
        while True:
            command = await self._queue.get()
            try:
                if command is _STOP:
                    return
                call, future = command
                if future.cancelled():
                    continue
                try:
                    result = call()
                except Exception as exc:
                    future.set_exception(exc)
                else:
                    future.set_result(result)
            finally:
                self._queue.task_done()

    async def _run_ticker(self) -> None:
        while True:
            await asyncio.sleep(self._tick_seconds)
            try:
                await self.tick()
            except Exception:
                logger.exception("Scheduled tick failed")


__all__ = ["FarmLoop"]
