"""
PhotoGrid - Auto-Scroll Loop

Keeps the grid scrolling while the pointer rests near an edge during a
drag. Move events alone cannot drive this: a finger held still near the
bottom edge produces no events, yet the grid must keep moving.

The loop follows the scroll speed value. Every change removes the
running GLib timeout and, for a non-zero speed, scrolls once right away
and then again on every tick.
"""

from collections.abc import Callable

from photogrid.config import DEFAULT_AUTO_SCROLL_INTERVAL_MS
from photogrid.ui.photo_grid.viewport import ViewportScroller
from photogrid.utils.logger import logger
from photogrid.utils.timer import TimerManager


class ScrollSpeedSignal:
    """Scroll speed value that notifies listeners when it changes.

    Writing the current value again is ignored, so the loop is not
    restarted for redundant updates.
    """

    def __init__(self, value: float = 0.0) -> None:
        self._value = value
        self._listeners: list[Callable[[float], None]] = []

    @property
    def value(self) -> float:
        return self._value

    def set(self, value: float) -> bool:
        """Store a new speed.

        Returns:
            True if the value changed and listeners were notified
        """
        if value == self._value:
            return False
        self._value = value
        for callback in list(self._listeners):
            callback(value)
        return True

    def reset(self) -> bool:
        return self.set(0.0)

    def connect(self, callback: Callable[[float], None]) -> None:
        self._listeners.append(callback)

    def disconnect(self, callback: Callable[[float], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)


class AutoScrollLoop:
    """Timed scrolling driven by a ScrollSpeedSignal."""

    TIMER_NAME = "auto-scroll"

    def __init__(
        self,
        scroller: ViewportScroller,
        speed: ScrollSpeedSignal,
        interval_ms: int = DEFAULT_AUTO_SCROLL_INTERVAL_MS,
        timer_manager: TimerManager | None = None,
    ) -> None:
        self._scroller = scroller
        self._speed = speed
        self._interval_ms = interval_ms
        self._owns_timers = timer_manager is None
        self._timers = timer_manager or TimerManager()
        self._speed.connect(self.restart)

        if speed.value != 0:
            self.restart(speed.value)

    @property
    def is_running(self) -> bool:
        return self._timers.has_timer(self.TIMER_NAME)

    def restart(self, speed: float) -> None:
        """Replace the running loop with one scrolling at ``speed``."""
        self.stop()
        if speed == 0:
            return

        logger.debug(f"Auto-scroll running at {speed:+.1f} px per tick")
        self._scroller.scroll_by(speed)

        def _tick() -> bool:
            self._scroller.scroll_by(speed)
            return True

        self._timers.add_timeout(self.TIMER_NAME, self._interval_ms, _tick)

    def stop(self) -> None:
        self._timers.remove_timer(self.TIMER_NAME)

    def dispose(self) -> None:
        """Stop scrolling and stop following the speed signal."""
        self._speed.disconnect(self.restart)
        if self._owns_timers:
            self._timers.remove_all()
        else:
            self.stop()
