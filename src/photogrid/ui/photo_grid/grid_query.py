"""
PhotoGrid - Grid Viewport Query

Hit-testing of a pointer position against the cells the grid currently
shows on screen.
"""

from collections.abc import Hashable, Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class VisibleCell:
    """Layout of one on-screen grid cell for the current frame.

    Attributes:
        key: Stable item key (integer ids in grid order)
        offset: Top-left corner (x, y) in viewport coordinates
        size: Cell (width, height)
    """

    key: Hashable
    offset: tuple[float, float]
    size: tuple[float, float]

    def contains(self, x: float, y: float) -> bool:
        """Check whether a viewport point falls inside this cell.

        The point is rounded and moved into the cell's local space; the
        left/top edges are inclusive and the right/bottom edges exclusive.
        """
        local_x = round(x) - self.offset[0]
        local_y = round(y) - self.offset[1]
        width, height = self.size
        return 0 <= local_x < width and 0 <= local_y < height


def key_at_position(
    point: tuple[float, float], visible_cells: Iterable[VisibleCell]
) -> Hashable | None:
    """Find the key of the first visible cell under a point.

    Args:
        point: (x, y) in viewport coordinates
        visible_cells: Cells in layout order

    Returns:
        The cell key, or None when the point is over empty space
    """
    x, y = point
    for cell in visible_cells:
        if cell.contains(x, y):
            return cell.key
    return None
