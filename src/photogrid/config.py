"""
PhotoGrid - Configuration Module

This module contains all configuration constants and paths used by the application.
"""

import logging
import os
from typing import Final

# ============================================================================
# Application Constants
# ============================================================================

APP_NAME: Final[str] = "Photo Grid"
APP_ID: Final[str] = "br.com.shido.photogrid"
APP_VERSION: Final[str] = "1.0.0"


# ============================================================================
# Configuration Directory
# ============================================================================

CONFIG_DIR: Final[str] = os.path.expanduser("~/.config/photogrid")
CONFIG_FILE_PATH: Final[str] = os.path.join(CONFIG_DIR, "settings.json")


# ============================================================================
# Drag Selection Defaults
# ============================================================================

# Distance (px) from the top/bottom edge where auto-scroll kicks in
DEFAULT_AUTO_SCROLL_THRESHOLD: Final[float] = 40.0

# Delay between two scroll steps while auto-scroll is running
DEFAULT_AUTO_SCROLL_INTERVAL_MS: Final[int] = 10

DEFAULT_SAMPLE_PHOTO_COUNT: Final[int] = 100


# ============================================================================
# Logging Configuration
# ============================================================================

LOG_LEVEL: int = logging.INFO
LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOGGER_NAME: Final[str] = "PhotoGrid"
