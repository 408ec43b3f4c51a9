"""
PhotoGrid - Drag Controller

Turns long-press/drag gestures into selection changes and an
auto-scroll speed.

The controller is idle until a long press lands on an unselected item.
That item becomes the anchor; each move then re-selects the contiguous
key range between the anchor and the item under the pointer, and
updates the scroll speed from the pointer's distance to the top and
bottom edges of the viewport.
"""

from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum

from photogrid.config import DEFAULT_AUTO_SCROLL_THRESHOLD
from photogrid.ui.photo_grid.auto_scroll import ScrollSpeedSignal
from photogrid.ui.photo_grid.grid_query import key_at_position
from photogrid.ui.photo_grid.selection_model import SelectionModel
from photogrid.ui.photo_grid.viewport import ViewportScroller
from photogrid.utils.exceptions import DragContractError
from photogrid.utils.logger import logger

Point = tuple[float, float]


class DragState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass
class DragSession:
    """Endpoints of the drag in progress.

    Attributes:
        anchor_key: Item under the pointer when the drag started
        last_key: Item under the pointer at the latest move
    """

    anchor_key: Hashable | None = None
    last_key: Hashable | None = None


def compute_scroll_speed(y: float, viewport_height: float, threshold: float) -> float:
    """Auto-scroll speed for a pointer at vertical position ``y``.

    Inside ``threshold`` of the bottom edge the speed is positive (scroll
    down), inside ``threshold`` of the top edge it is negative (scroll
    up), and zero elsewhere. The magnitude grows linearly as the pointer
    approaches the edge. The bottom edge wins when both apply.
    """
    dist_from_bottom = viewport_height - y
    dist_from_top = y

    if dist_from_bottom < threshold:
        return threshold - dist_from_bottom
    if dist_from_top < threshold:
        return -(threshold - dist_from_top)
    return 0.0


class DragController:
    """Gesture handler for drag-to-select on one grid.

    Events for one drag must arrive in order: ``long_press``, any number
    of ``move`` calls, then ``end`` or ``cancel``.
    """

    def __init__(
        self,
        viewport: ViewportScroller,
        selection: SelectionModel,
        scroll_speed: ScrollSpeedSignal,
        auto_scroll_threshold: float = DEFAULT_AUTO_SCROLL_THRESHOLD,
    ) -> None:
        self._viewport = viewport
        self._selection = selection
        self._scroll_speed = scroll_speed
        self._threshold = auto_scroll_threshold
        self._state = DragState.IDLE
        self._session = DragSession()

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def is_dragging(self) -> bool:
        return self._state is DragState.DRAGGING

    @property
    def session(self) -> DragSession:
        return self._session

    @property
    def selection(self) -> SelectionModel:
        return self._selection

    def _key_at(self, point: Point) -> Hashable | None:
        return key_at_position(point, self._viewport.current_visible_cells())

    def long_press(self, point: Point) -> bool:
        """Start a drag at ``point``.

        Returns:
            True if a drag started. Nothing happens over empty space or
            over an item that is already selected.
        """
        if self.is_dragging:
            logger.warning("Long press received during an active drag; resetting drag")
            self.cancel()

        key = self._key_at(point)
        if key is None or self._selection.is_selected(key):
            return False

        self._session = DragSession(anchor_key=key, last_key=key)
        self._selection.add(key)
        self._state = DragState.DRAGGING
        logger.debug(f"Drag started at item {key}")
        return True

    def move(self, point: Point) -> None:
        """Handle a pointer move while the finger is down."""
        if not self.is_dragging:
            return

        anchor = self._session.anchor_key
        last = self._session.last_key
        if anchor is None or last is None:
            raise DragContractError("pointer moved while dragging without an anchor", anchor, last)

        self._scroll_speed.set(
            compute_scroll_speed(point[1], self._viewport.viewport_height(), self._threshold)
        )

        key = self._key_at(point)
        if key is not None and key != last:
            self._selection.replace_range(anchor, last, anchor, key)
            self._session.last_key = key

    def end(self) -> None:
        """Finish the drag, keeping the selection as it is."""
        if self.is_dragging:
            logger.debug(
                f"Drag ended at item {self._session.last_key} "
                f"({len(self._selection)} selected)"
            )
        self._reset()

    def cancel(self) -> None:
        """Abort the drag. The selection made so far is kept."""
        if self.is_dragging:
            logger.debug("Drag cancelled")
        self._reset()

    def _reset(self) -> None:
        self._session = DragSession()
        self._state = DragState.IDLE
        self._scroll_speed.set(0.0)

    def tap(self, point: Point) -> Hashable | None:
        """Toggle the item under ``point`` while in selection mode.

        Outside selection mode taps leave the selection alone.

        Returns:
            The key under the pointer, if any
        """
        key = self._key_at(point)
        if key is not None and self._selection.in_selection_mode:
            self._selection.toggle(key)
        return key

    def select_action(self, key: Hashable) -> bool:
        """Accessibility "Select" action, offered only outside selection mode."""
        if self._selection.in_selection_mode:
            return False
        self._selection.add(key)
        return True
