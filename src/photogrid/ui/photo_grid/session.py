"""
PhotoGrid - Drag Selection Session

One set of drag-to-select state per grid widget: the selection, the
scroll speed, the auto-scroll loop and the gesture controller.
"""

from photogrid.ui.photo_grid.auto_scroll import AutoScrollLoop, ScrollSpeedSignal
from photogrid.ui.photo_grid.drag_controller import DragController
from photogrid.ui.photo_grid.selection_model import SelectionModel
from photogrid.ui.photo_grid.viewport import ViewportScroller
from photogrid.utils.config_manager import DragSelectConfig
from photogrid.utils.timer import TimerManager


class DragSelectSession:
    """Owns the drag-to-select collaborators for one viewport."""

    def __init__(
        self,
        viewport: ViewportScroller,
        config: DragSelectConfig | None = None,
        timer_manager: TimerManager | None = None,
    ) -> None:
        self.config = config or DragSelectConfig()
        self.selection = SelectionModel()
        self.scroll_speed = ScrollSpeedSignal()
        self.auto_scroll = AutoScrollLoop(
            viewport,
            self.scroll_speed,
            interval_ms=self.config.auto_scroll_interval_ms,
            timer_manager=timer_manager,
        )
        self.controller = DragController(
            viewport,
            self.selection,
            self.scroll_speed,
            auto_scroll_threshold=self.config.auto_scroll_threshold,
        )

    def dispose(self) -> None:
        """Tear down: drop any drag and stop scrolling."""
        self.controller.cancel()
        self.auto_scroll.dispose()
