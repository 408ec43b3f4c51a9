"""
PhotoGrid - Gesture Wiring

Connects GTK4 gestures on the grid's scrolled window to a DragController.
Coordinates reported by the gestures are relative to that widget, which
is the viewport the controller hit-tests against.
"""

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk  # noqa: E402

from photogrid.ui.photo_grid.drag_controller import DragController  # noqa: E402
from photogrid.utils.logger import logger  # noqa: E402


class DragSelectGestures:
    """Long-press, drag and click gestures feeding one DragController.

    The three gestures share one group so they all see the same touch
    sequence: the long press starts the drag, drag updates move it, and
    a click that did not turn into a long press counts as a tap.
    """

    def __init__(self, widget: Gtk.Widget, controller: DragController) -> None:
        self._widget = widget
        self._controller = controller
        self._drag_start: tuple[float, float] | None = None
        self._long_pressed = False

        self._long_press = Gtk.GestureLongPress()
        self._long_press.connect("pressed", self._on_long_press)
        self._long_press.connect("cancelled", self._on_cancel)

        self._drag = Gtk.GestureDrag()
        self._drag.connect("drag-begin", self._on_drag_begin)
        self._drag.connect("drag-update", self._on_drag_update)
        self._drag.connect("drag-end", self._on_drag_end)
        self._drag.connect("cancel", self._on_cancel)

        self._click = Gtk.GestureClick()
        self._click.connect("released", self._on_click_released)

        self._drag.group(self._long_press)
        self._click.group(self._long_press)

        self._gestures = (self._long_press, self._drag, self._click)
        for gesture in self._gestures:
            widget.add_controller(gesture)

    def detach(self) -> None:
        """Remove the gestures from the widget and drop any drag in progress."""
        self._controller.cancel()
        for gesture in self._gestures:
            self._widget.remove_controller(gesture)

    def _on_drag_begin(self, _gesture: Gtk.GestureDrag, x: float, y: float) -> None:
        self._drag_start = (x, y)
        self._long_pressed = False

    def _on_long_press(self, gesture: Gtk.GestureLongPress, x: float, y: float) -> None:
        self._long_pressed = True
        if self._controller.long_press((x, y)):
            # Grouped gestures share the claim, so the scrolled window stops panning
            gesture.set_state(Gtk.EventSequenceState.CLAIMED)
            logger.debug(f"Drag selection started at ({x:.0f}, {y:.0f})")

    def _on_drag_update(self, _gesture: Gtk.GestureDrag, offset_x: float, offset_y: float) -> None:
        if self._drag_start is None or not self._controller.is_dragging:
            return
        start_x, start_y = self._drag_start
        self._controller.move((start_x + offset_x, start_y + offset_y))

    def _on_drag_end(self, _gesture: Gtk.GestureDrag, _offset_x: float, _offset_y: float) -> None:
        self._drag_start = None
        self._controller.end()

    def _on_cancel(self, *_args) -> None:
        self._drag_start = None
        self._controller.cancel()

    def _on_click_released(
        self, _gesture: Gtk.GestureClick, n_press: int, x: float, y: float
    ) -> None:
        if n_press != 1 or self._long_pressed:
            return
        self._controller.tap((x, y))
