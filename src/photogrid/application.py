"""
PhotoGrid - Application Module

GTK application showing a sample photo grid with drag-to-select.
"""

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Adw, Gdk, Gtk  # noqa: E402

from photogrid.config import APP_ID, APP_NAME  # noqa: E402
from photogrid.ui.photo_grid.grid_view import GRID_CSS, PhotoGridView  # noqa: E402
from photogrid.ui.photo_grid.photo_model import build_sample_photos  # noqa: E402
from photogrid.utils.config_manager import get_config_manager, load_settings  # noqa: E402
from photogrid.utils.logger import logger  # noqa: E402


class PhotoGridApp(Adw.Application):
    """Application hosting one PhotoGridView window."""

    def __init__(self) -> None:
        super().__init__(application_id=APP_ID)
        self.connect("activate", self.on_activate)

    def on_activate(self, app: Adw.Application) -> None:
        win = self.get_active_window()
        if win:
            win.present()
            return

        drag_config, grid_config = load_settings(get_config_manager())
        photos = build_sample_photos(grid_config.sample_photo_count)

        provider = Gtk.CssProvider()
        provider.load_from_data(GRID_CSS)
        Gtk.StyleContext.add_provider_for_display(
            Gdk.Display.get_default(),
            provider,
            Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION,
        )

        grid = PhotoGridView(
            photos,
            drag_config,
            cell_size=grid_config.min_cell_size,
            spacing=grid_config.spacing,
        )

        win = Adw.ApplicationWindow(application=app, title=APP_NAME)
        win.set_default_size(820, 600)
        win.set_content(grid)
        win.connect("close-request", lambda *_: grid.shutdown() or False)
        win.present()
        logger.info(f"Started {APP_NAME} with {len(photos)} photos")
