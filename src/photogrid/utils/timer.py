"""
PhotoGrid - Timer Utilities

Named GLib timeout sources. Adding a timer under a name that is already
in use removes the old source first, so each name maps to at most one
live source on the main loop.
"""

from collections.abc import Callable

from gi import require_version

require_version("GLib", "2.0")
from gi.repository import GLib  # noqa: E402

from photogrid.utils.logger import logger  # noqa: E402


def safe_remove_source(source_id: int | None) -> bool:
    """Remove a GLib source if it is still attached to the default context.

    Args:
        source_id: The GLib source ID to remove

    Returns:
        True if the source was removed, False otherwise
    """
    if source_id is None or source_id <= 0:
        return False

    context = GLib.MainContext.default()
    if context.find_source_by_id(source_id) is None:
        return False
    return bool(GLib.source_remove(source_id))


class TimerManager:
    """Tracks named GLib timeouts for one owner.

    Callbacks follow the GLib convention: return True to keep firing,
    False to stop. A callback that stops itself is forgotten on its own.
    """

    def __init__(self) -> None:
        self._timers: dict[str, int] = {}

    def add_timeout(
        self,
        name: str,
        interval_ms: int,
        callback: Callable[[], bool],
    ) -> int:
        """Start a repeating timeout, replacing any timer with the same name.

        Args:
            name: Unique identifier for this timer
            interval_ms: Interval in milliseconds
            callback: Function to call when the timer fires

        Returns:
            The GLib source ID
        """
        self.remove_timer(name)

        def _tick() -> bool:
            keep_going = callback()
            if not keep_going and self._timers.get(name) == timer_id:
                del self._timers[name]
            return keep_going

        timer_id = GLib.timeout_add(interval_ms, _tick)
        self._timers[name] = timer_id
        logger.debug(f"Timer '{name}' started every {interval_ms} ms (source {timer_id})")
        return timer_id

    def remove_timer(self, name: str) -> bool:
        """Remove a specific timer by name.

        Args:
            name: The timer name to remove

        Returns:
            True if timer was removed, False otherwise
        """
        timer_id = self._timers.pop(name, None)
        if timer_id is None:
            return False

        logger.debug(f"Timer '{name}' removed (source {timer_id})")
        return safe_remove_source(timer_id)

    def remove_all(self) -> int:
        """Remove all tracked timers.

        Returns:
            Number of timers removed
        """
        return sum(1 for name in tuple(self._timers) if self.remove_timer(name))

    def has_timer(self, name: str) -> bool:
        return name in self._timers
