"""
ConfigService - Events configuration file management.

Loads and saves EventsConfig as JSON or YAML, chosen by file suffix.
"""

import json
import os
from pathlib import Path
from typing import Optional, Dict, Any

import yaml

from ..events.errors import ConfigError
from ..events.logging import get_logger
from ..models.config import EventsConfig

logger = get_logger("config_service")

YAML_SUFFIXES = (".yaml", ".yml")


class ConfigService:
    """
    Service for managing events configuration.

    Provides:
    - Loading/saving events.json or events.yaml
    - Defaults when the file does not exist
    - ConfigError on malformed files
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the config service.

        Args:
            config_path: Path to the config file. Defaults to 'events.json' in current dir.
        """
        self._config_path = config_path or "events.json"
        self._config: Optional[EventsConfig] = None

    def get_config_path(self) -> str:
        """Get the path to the configuration file."""
        return self._config_path

    def _is_yaml(self) -> bool:
        return Path(self._config_path).suffix.lower() in YAML_SUFFIXES

    def load(self) -> EventsConfig:
        """
        Load configuration from disk.

        If the file doesn't exist, returns default config.

        Returns:
            EventsConfig instance

        Raises:
            ConfigError: If the file cannot be parsed
        """
        if not os.path.exists(self._config_path):
            self._config = EventsConfig()
            return self._config

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                if self._is_yaml():
                    raw_data = yaml.safe_load(f)
                else:
                    raw_data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigError(f"Invalid config file {self._config_path}: {e}") from e

        if raw_data is None:
            raw_data = {}
        if not isinstance(raw_data, dict):
            raise ConfigError(
                f"Config file {self._config_path} must contain a mapping, "
                f"got {type(raw_data).__name__}"
            )

        ignored = raw_data.get("ignored_attrs", [])
        if not isinstance(ignored, (list, tuple)) or not all(isinstance(n, str) for n in ignored):
            raise ConfigError("ignored_attrs must be a list of attribute names")

        self._config = EventsConfig.from_dict(raw_data)
        logger.debug(f"Loaded events config from {self._config_path}")
        return self._config

    def save(self, config: Optional[EventsConfig] = None) -> None:
        """
        Save configuration to disk.

        Args:
            config: EventsConfig to save. Uses cached config if None.
        """
        if config is not None:
            self._config = config

        if self._config is None:
            self._config = EventsConfig()

        self._save_raw(self._config.to_dict())

    def _save_raw(self, data: Dict[str, Any]) -> None:
        """Save raw dictionary to config file."""
        with open(self._config_path, "w", encoding="utf-8") as f:
            if self._is_yaml():
                yaml.safe_dump(data, f, sort_keys=False)
            else:
                json.dump(data, f, indent=4)


class MockConfigService(ConfigService):
    """
    Mock ConfigService for testing.

    Stores config in memory instead of disk.
    """

    def __init__(self, config: Optional[EventsConfig] = None):
        super().__init__("/dev/null")  # Won't actually be used
        self._config = config or EventsConfig()
        self._saved_configs: list = []

    def load(self) -> EventsConfig:
        return self._config

    def save(self, config: Optional[EventsConfig] = None) -> None:
        if config is not None:
            self._config = config
        self._saved_configs.append(self._config.to_dict())

    def get_saved_configs(self) -> list:
        """Get list of all configs that were saved (for testing)."""
        return self._saved_configs
