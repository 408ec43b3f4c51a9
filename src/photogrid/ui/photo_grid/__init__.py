"""
PhotoGrid - Photo Grid Module

Drag-to-select for a scrolling photo grid.

Main Components:
- key_at_position: hit-test a point against the visible cells
- SelectionModel: set of selected keys, selection mode
- DragController: long-press/drag state machine
- AutoScrollLoop: GLib-timed scrolling near the viewport edges
- DragSelectSession: wires the above for one grid
"""

from photogrid.ui.photo_grid.auto_scroll import AutoScrollLoop, ScrollSpeedSignal
from photogrid.ui.photo_grid.drag_controller import (
    DragController,
    DragSession,
    DragState,
    compute_scroll_speed,
)
from photogrid.ui.photo_grid.grid_query import VisibleCell, key_at_position
from photogrid.ui.photo_grid.photo_model import Photo, build_sample_photos
from photogrid.ui.photo_grid.selection_model import SelectionModel
from photogrid.ui.photo_grid.session import DragSelectSession
from photogrid.ui.photo_grid.viewport import ViewportScroller

__all__ = [
    "AutoScrollLoop",
    "ScrollSpeedSignal",
    "DragController",
    "DragSession",
    "DragState",
    "compute_scroll_speed",
    "VisibleCell",
    "key_at_position",
    "Photo",
    "build_sample_photos",
    "SelectionModel",
    "DragSelectSession",
    "ViewportScroller",
]
