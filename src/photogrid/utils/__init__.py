"""
PhotoGrid - Utils Package

Utility modules for the application.
"""

from photogrid.utils.logger import logger

__all__ = ["logger"]
