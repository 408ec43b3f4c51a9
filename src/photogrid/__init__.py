"""
PhotoGrid - Drag-to-select photo grid for GTK4

This package provides the interaction engine behind a multi-select photo
grid: long-press an item, drag across others, and let the view scroll
by itself while the pointer rests near the top or bottom edge.
"""

import sys

__version__ = "1.0.0"
__author__ = "PhotoGrid Team"
__license__ = "GPL-3.0"


def main() -> int:
    """Main entry point for the application.

    Returns:
        The application exit code.
    """
    from photogrid.application import PhotoGridApp
    from photogrid.utils.exceptions import PhotoGridError
    from photogrid.utils.logger import logger

    try:
        app = PhotoGridApp()
        return app.run(sys.argv)
    except PhotoGridError as e:
        logger.error(f"Critical error starting application: {e}")
        return 1


__all__ = ["main", "__version__", "__author__", "__license__"]
