from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Scheduler(Protocol):
    """The slice of tk.Misc the loop needs; tk.Tk satisfies it."""

    def after(self, ms: int, func: Callable[[], Any]) -> str:
        ...

    def after_cancel(self, id: str) -> None:
        ...


class FrameLoop:
    """
    Calls tick_fn once per frame until it returns False.

    Game speed is counted in ticks, so a slower host simply runs the game slower.
    """

    def __init__(
        self,
        *,
        scheduler: Scheduler,
        tick_fn: Callable[[], bool],
        fps: int = 60,
        cancel_errors: tuple[type[BaseException], ...] = (),
    ) -> None:
        self._scheduler = scheduler
        self._tick_fn = tick_fn
        self._target_ms = max(1, int(1000 / max(1, fps)))
        # Host errors tolerated by after_cancel during shutdown, e.g. tk.TclError.
        self._cancel_errors = cancel_errors

        self._running = False
        self._after_id: str | None = None

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        logger.debug("frame loop started (%d ms/frame)", self._target_ms)
        self._schedule_next()

    def stop(self) -> None:
        self._running = False
        if self._after_id is not None:
            try:
                self._scheduler.after_cancel(self._after_id)
            except self._cancel_errors:
                # Root may already be destroyed; ignore during shutdown.
                logger.debug("after_cancel failed during stop", exc_info=True)
            finally:
                self._after_id = None
        logger.debug("frame loop stopped")

    def _schedule_next(self) -> None:
        self._after_id = self._scheduler.after(self._target_ms, self._tick)

    def _tick(self) -> None:
        self._after_id = None
        if not self._running:
            return

        try:
            keep_going = self._tick_fn()
        except Exception:
            # Fail fast rather than keep ticking a corrupt state.
            self.stop()
            raise

        if keep_going:
            self._schedule_next()
        else:
            self._running = False
            logger.debug("frame loop reached a terminal tick")


def run_headless(tick_fn: Callable[[], bool], *, max_ticks: int | None = None) -> int:
    """
    Drive tick_fn synchronously with no host. Returns the number of ticks run.
    """
    ticks = 0
    while max_ticks is None or ticks < max_ticks:
        ticks += 1
        if not tick_fn():
            break
    return ticks
