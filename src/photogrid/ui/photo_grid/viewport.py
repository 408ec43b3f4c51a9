"""
PhotoGrid - Viewport Scroller Contract

What the drag engine needs from the widget that lays out and scrolls
the grid.
"""

from typing import Protocol

from photogrid.ui.photo_grid.grid_query import VisibleCell


class ViewportScroller(Protocol):
    """Layout queries and programmatic scrolling of the grid viewport.

    ``scroll_by`` takes a positive delta to move further down the
    content and a negative delta to move back up, matching the sign of
    the auto-scroll speed.
    """

    def current_visible_cells(self) -> list[VisibleCell]: ...

    def viewport_height(self) -> float: ...

    def scroll_by(self, delta: float) -> None: ...
