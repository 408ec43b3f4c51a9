"""
PhotoGrid - FlowBox Viewport

Viewport scroller backed by a Gtk.FlowBox inside a Gtk.ScrolledWindow.
"""

from collections.abc import Callable, Hashable

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk  # noqa: E402

from photogrid.ui.photo_grid.grid_query import VisibleCell  # noqa: E402


class FlowBoxViewport:
    """Reports FlowBox cells in viewport coordinates and scrolls the window.

    Child allocations are relative to the FlowBox, which sits at
    ``content_offset`` inside the scrolled content (margins of the boxes
    around it).
    """

    def __init__(
        self,
        scrolled_window: Gtk.ScrolledWindow,
        flowbox: Gtk.FlowBox,
        key_for_index: Callable[[int], Hashable] | None = None,
        content_offset: tuple[float, float] = (0.0, 0.0),
    ) -> None:
        self._scrolled_window = scrolled_window
        self._flowbox = flowbox
        self._key_for_index = key_for_index or (lambda index: index)
        self._content_offset = content_offset

    def current_visible_cells(self) -> list[VisibleCell]:
        vadj = self._scrolled_window.get_vadjustment()
        scroll_y = vadj.get_value()
        page_size = vadj.get_page_size()
        offset_x, offset_y = self._content_offset

        cells: list[VisibleCell] = []
        index = 0
        while (child := self._flowbox.get_child_at_index(index)) is not None:
            alloc = child.get_allocation()
            top = offset_y + alloc.y - scroll_y
            if top + alloc.height > 0 and top < page_size:
                cells.append(
                    VisibleCell(
                        key=self._key_for_index(index),
                        offset=(offset_x + alloc.x, top),
                        size=(alloc.width, alloc.height),
                    )
                )
            index += 1
        return cells

    def viewport_height(self) -> float:
        return self._scrolled_window.get_allocated_height()

    def scroll_by(self, delta: float) -> None:
        vadj = self._scrolled_window.get_vadjustment()
        current = vadj.get_value()

        # Clamp
        min_val = vadj.get_lower()
        max_val = vadj.get_upper() - vadj.get_page_size()
        new_value = max(min_val, min(current + delta, max_val))

        if new_value != current:
            vadj.set_value(new_value)
