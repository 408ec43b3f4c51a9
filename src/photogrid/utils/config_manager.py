"""
PhotoGrid - Configuration Manager

This module provides centralized JSON-based configuration management.
It handles loading, saving, and upgrading the settings file.
"""

import copy
import json
import os
from dataclasses import dataclass
from typing import Any, Final

from photogrid.config import (
    CONFIG_FILE_PATH,
    DEFAULT_AUTO_SCROLL_INTERVAL_MS,
    DEFAULT_AUTO_SCROLL_THRESHOLD,
    DEFAULT_SAMPLE_PHOTO_COUNT,
)
from photogrid.utils.exceptions import ConfigurationError
from photogrid.utils.logger import logger

# Default configuration values
DEFAULT_CONFIG: Final[dict[str, Any]] = {
    "version": 1,
    "drag_select": {
        "auto_scroll_threshold": DEFAULT_AUTO_SCROLL_THRESHOLD,
        "auto_scroll_interval_ms": DEFAULT_AUTO_SCROLL_INTERVAL_MS,
    },
    "grid": {
        "sample_photo_count": DEFAULT_SAMPLE_PHOTO_COUNT,
        "min_cell_size": 128,
        "spacing": 4,
    },
}


class ConfigManager:
    """Manages application configuration in JSON format.

    This class provides a centralized way to load, save, and access
    configuration settings.
    """

    def __init__(self, config_path: str | None = None) -> None:
        """Initialize the configuration manager.

        Args:
            config_path: Optional path to the configuration file.
                        Defaults to CONFIG_FILE_PATH.
        """
        self.config_path = config_path or CONFIG_FILE_PATH
        self._config: dict[str, Any] = {}

        os.makedirs(os.path.dirname(self.config_path), exist_ok=True)

        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from file or create default."""
        if os.path.exists(self.config_path):
            try:
                with open(self.config_path, encoding="utf-8") as f:
                    self._config = json.load(f)
                logger.info("Configuration loaded from JSON")

                self._upgrade_config()

            except (OSError, json.JSONDecodeError) as e:
                logger.error(f"Error loading config: {e}")
                self._config = self._get_default_config()
        else:
            self._config = self._get_default_config()
            self.save()

    def _get_default_config(self) -> dict[str, Any]:
        """Get a copy of the default configuration.

        Returns:
            Deep copy of default configuration dictionary.
        """
        return copy.deepcopy(DEFAULT_CONFIG)

    def _upgrade_config(self) -> None:
        """Upgrade configuration to latest version if needed."""
        current_version = self._config.get("version", 0)

        if current_version < DEFAULT_CONFIG["version"]:
            self._merge_defaults(self._config, self._get_default_config())
            self._config["version"] = DEFAULT_CONFIG["version"]
            logger.info(f"Configuration upgraded to version {DEFAULT_CONFIG['version']}")

    def _merge_defaults(self, config: dict, defaults: dict) -> None:
        """Merge default values into config for missing keys.

        Args:
            config: Current configuration dictionary.
            defaults: Default configuration dictionary.
        """
        for key, value in defaults.items():
            if key not in config:
                config[key] = value
            elif isinstance(value, dict) and isinstance(config.get(key), dict):
                self._merge_defaults(config[key], value)

    def save(self) -> bool:
        """Save configuration to file.

        Returns:
            True if save was successful, False otherwise.
        """
        try:
            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(self._config, f, indent=2, ensure_ascii=False)
            logger.debug("Configuration saved to JSON")
            return True
        except OSError as e:
            logger.error(f"Error saving config: {e}")
            return False

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get a configuration value by dot-separated path.

        Args:
            key_path: Dot-separated path to the config value (e.g., "drag_select.auto_scroll_threshold")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value = self._config

        for key in key_path.split("."):
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def set(self, key_path: str, value: Any, save_immediately: bool = True) -> None:
        """Set a configuration value by dot-separated path.

        Args:
            key_path: Dot-separated path to the config value
            value: Value to set
            save_immediately: Whether to save to file immediately
        """
        keys = key_path.split(".")
        config = self._config

        for key in keys[:-1]:
            if key not in config:
                config[key] = {}
            config = config[key]

        config[keys[-1]] = value

        if save_immediately:
            self.save()


@dataclass(frozen=True)
class DragSelectConfig:
    """Tunables of the drag-to-select gesture.

    Attributes:
        auto_scroll_threshold: Edge distance (px) below which auto-scroll starts
        auto_scroll_interval_ms: Delay between two auto-scroll steps
    """

    auto_scroll_threshold: float = DEFAULT_AUTO_SCROLL_THRESHOLD
    auto_scroll_interval_ms: int = DEFAULT_AUTO_SCROLL_INTERVAL_MS

    def __post_init__(self) -> None:
        if self.auto_scroll_threshold <= 0:
            raise ConfigurationError("drag_select.auto_scroll_threshold", "must be positive")
        if self.auto_scroll_interval_ms < 1:
            raise ConfigurationError(
                "drag_select.auto_scroll_interval_ms", "must be at least 1 ms"
            )

    @classmethod
    def from_config_manager(cls, config_manager: ConfigManager) -> "DragSelectConfig":
        """Build the drag settings from the JSON configuration.

        Raises:
            ConfigurationError: If a stored value is not a usable number
        """
        threshold = config_manager.get(
            "drag_select.auto_scroll_threshold", DEFAULT_AUTO_SCROLL_THRESHOLD
        )
        interval = config_manager.get(
            "drag_select.auto_scroll_interval_ms", DEFAULT_AUTO_SCROLL_INTERVAL_MS
        )
        try:
            return cls(
                auto_scroll_threshold=float(threshold),
                auto_scroll_interval_ms=int(interval),
            )
        except (TypeError, ValueError) as e:
            logger.error(f"Invalid drag_select settings: {e}")
            raise ConfigurationError("drag_select", str(e)) from e


@dataclass(frozen=True)
class GridConfig:
    """Layout settings of the photo grid.

    Attributes:
        sample_photo_count: Number of placeholder photos to show
        min_cell_size: Tile edge length (px)
        spacing: Gap between tiles (px)
    """

    sample_photo_count: int = DEFAULT_SAMPLE_PHOTO_COUNT
    min_cell_size: int = DEFAULT_CONFIG["grid"]["min_cell_size"]
    spacing: int = DEFAULT_CONFIG["grid"]["spacing"]

    def __post_init__(self) -> None:
        for name in ("sample_photo_count", "min_cell_size", "spacing"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigurationError(f"grid.{name}", "must be a non-negative integer")

    @classmethod
    def from_config_manager(cls, config_manager: ConfigManager) -> "GridConfig":
        defaults = cls()
        return cls(
            sample_photo_count=config_manager.get(
                "grid.sample_photo_count", defaults.sample_photo_count
            ),
            min_cell_size=config_manager.get("grid.min_cell_size", defaults.min_cell_size),
            spacing=config_manager.get("grid.spacing", defaults.spacing),
        )


def load_settings(config_manager: ConfigManager) -> tuple[DragSelectConfig, GridConfig]:
    """Read the drag and grid settings, repairing invalid sections.

    A section that fails validation is logged, reset to its defaults in
    the settings file, and replaced by the defaults for this run.
    """
    try:
        drag_config = DragSelectConfig.from_config_manager(config_manager)
    except ConfigurationError as e:
        logger.error(f"{e}; using default drag settings")
        config_manager.set("drag_select", copy.deepcopy(DEFAULT_CONFIG["drag_select"]))
        drag_config = DragSelectConfig()

    try:
        grid_config = GridConfig.from_config_manager(config_manager)
    except ConfigurationError as e:
        logger.error(f"{e}; using default grid settings")
        config_manager.set("grid", copy.deepcopy(DEFAULT_CONFIG["grid"]))
        grid_config = GridConfig()

    return drag_config, grid_config


# Singleton instance for global access
_config_manager: ConfigManager | None = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance.

    Returns:
        The singleton ConfigManager instance
    """
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
