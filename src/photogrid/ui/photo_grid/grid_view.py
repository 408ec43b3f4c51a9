"""
PhotoGrid - Photo Grid View

A scrolled FlowBox of photo tiles with drag-to-select attached. Tiles
are plain placeholders; image loading is left to the host.
"""

from collections.abc import Hashable

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gio, Gtk  # noqa: E402

from photogrid.ui.photo_grid.drag_controller import DragController  # noqa: E402
from photogrid.ui.photo_grid.flowbox_viewport import FlowBoxViewport  # noqa: E402
from photogrid.ui.photo_grid.gestures import DragSelectGestures  # noqa: E402
from photogrid.ui.photo_grid.photo_model import Photo  # noqa: E402
from photogrid.ui.photo_grid.selection_model import SelectionModel  # noqa: E402
from photogrid.ui.photo_grid.session import DragSelectSession  # noqa: E402
from photogrid.utils.a11y import set_a11y_description, set_a11y_label  # noqa: E402
from photogrid.utils.config_manager import DragSelectConfig  # noqa: E402

GRID_CSS = b"""
.photo-tile { background: alpha(currentColor, 0.08); }
flowboxchild.selected { padding: 10px; }
flowboxchild.selected .photo-tile { border-radius: 16px; background: alpha(@accent_bg_color, 0.4); }
.selection-mode flowboxchild:not(.selected) .photo-tile {
    box-shadow: inset 0 0 0 2px alpha(white, 0.7);
}
"""

TILE_ACTION_GROUP = "tile"
SELECT_ACTION = "select"


class TileSelectAction:
    """The "Select" action of one tile, offered outside selection mode.

    Installed as ``tile.select`` on the tile and fired when the FlowBox
    activates the tile (Enter, or activation from a screen reader).
    """

    def __init__(self, tile: Gtk.Widget, key: Hashable, controller: DragController) -> None:
        self._key = key
        self._controller = controller

        self._action = Gio.SimpleAction.new(SELECT_ACTION, None)
        self._action.connect("activate", self._on_activate)
        group = Gio.SimpleActionGroup()
        group.add_action(self._action)
        tile.insert_action_group(TILE_ACTION_GROUP, group)

        set_a11y_label(tile, f"Photo {key}")
        self.update(controller.selection.in_selection_mode)

    @property
    def enabled(self) -> bool:
        return self._action.get_enabled()

    def activate(self) -> None:
        self._action.activate(None)

    def update(self, in_selection_mode: bool) -> None:
        self._action.set_enabled(not in_selection_mode)

    def _on_activate(self, _action: Gio.SimpleAction, _param: None) -> None:
        self._controller.select_action(self._key)


class PhotoGridView(Gtk.ScrolledWindow):
    """Grid of photos with long-press drag selection and edge auto-scroll."""

    def __init__(
        self,
        photos: list[Photo],
        config: DragSelectConfig | None = None,
        cell_size: int = 128,
        spacing: int = 4,
    ) -> None:
        super().__init__()
        self._photos = photos

        self.set_policy(Gtk.PolicyType.NEVER, Gtk.PolicyType.AUTOMATIC)
        self.set_vexpand(True)
        self.set_hexpand(True)

        self._flowbox = Gtk.FlowBox()
        self._flowbox.set_selection_mode(Gtk.SelectionMode.NONE)  # Manual selection
        self._flowbox.set_homogeneous(True)
        self._flowbox.set_row_spacing(spacing)
        self._flowbox.set_column_spacing(spacing)
        self._flowbox.set_min_children_per_line(1)
        self._flowbox.set_max_children_per_line(30)
        self._flowbox.set_valign(Gtk.Align.START)
        set_a11y_description(
            self._flowbox, "Long press and drag to select photos. Activate a photo to select it."
        )
        self._flowbox.connect("child-activated", self._on_child_activated)
        self.set_child(self._flowbox)

        viewport = FlowBoxViewport(self, self._flowbox, key_for_index=lambda i: photos[i].id)
        self.session = DragSelectSession(viewport, config)

        self._tile_actions: list[TileSelectAction] = []
        for photo in photos:
            tile = Gtk.Label(label=str(photo.id))
            tile.set_size_request(cell_size, cell_size)
            tile.set_tooltip_text(photo.url)
            tile.add_css_class("photo-tile")
            self._flowbox.append(tile)
            self._tile_actions.append(TileSelectAction(tile, photo.id, self.session.controller))

        self.session.selection.connect(self._on_selection_changed)
        self._gestures = DragSelectGestures(self, self.session.controller)

    @property
    def selection(self) -> SelectionModel:
        return self.session.selection

    @property
    def tile_actions(self) -> list[TileSelectAction]:
        return self._tile_actions

    def _on_child_activated(self, _flowbox: Gtk.FlowBox, child: Gtk.FlowBoxChild) -> None:
        index = child.get_index()
        if 0 <= index < len(self._tile_actions):
            self._tile_actions[index].activate()

    def _on_selection_changed(self, selection: SelectionModel) -> None:
        for index, photo in enumerate(self._photos):
            self._tile_actions[index].update(selection.in_selection_mode)
            child = self._flowbox.get_child_at_index(index)
            if child is None:
                continue
            if selection.is_selected(photo.id):
                child.add_css_class("selected")
            else:
                child.remove_css_class("selected")

        if selection.in_selection_mode:
            self.add_css_class("selection-mode")
        else:
            self.remove_css_class("selection-mode")

    def shutdown(self) -> None:
        """Detach gestures and stop the auto-scroll timer."""
        self._gestures.detach()
        self.session.dispose()
