"""Configuration loading from defaults, files and environment variables."""
import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from pattern_gallery._package import ENV_PREFIX
from pattern_gallery.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_NESTED_SEPARATOR = "__"

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "environment": "development",
    "debug": False,
    "logging": {
        "level": "WARNING",
        "destination": "stderr",
        "file_path": None,
        "max_size_mb": 10,
        "backup_count": 3,
    },
    "output": {
        "format": "text",
        "color": True,
        "width": 120,
    },
    "demo": {
        "seed": 42,
        "default_variant": "refactored",
    },
}


class ConfigurationLoader:
    """
    Builds the raw configuration dictionary.

    Sources, lowest priority first:
    - built-in defaults
    - a JSON or YAML configuration file
    - ``PATTERN_GALLERY_*`` environment variables, with ``__`` separating
      nested keys (``PATTERN_GALLERY_LOGGING__LEVEL=DEBUG``)
    """

    def __init__(self, environ: Optional[Dict[str, str]] = None):
        self._environ = environ if environ is not None else os.environ

    def load_configuration(self, config_file: Optional[str] = None) -> Dict[str, Any]:
        """Load defaults, merge an optional file and apply environment overrides."""
        config = copy.deepcopy(DEFAULT_CONFIG)
        if config_file:
            self.merge(config, self.load_from_file(config_file))
        return self.apply_environment_overrides(config)

    def load_from_file(self, config_file: str) -> Dict[str, Any]:
        """
        Read a JSON or YAML configuration file.

        Raises:
            ConfigurationError: If the file is missing, unreadable or not a mapping
        """
        path = Path(config_file)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_file}",
                                     {"path": config_file})
        try:
            with path.open("r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yaml", ".yml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration: {e}",
                                     {"path": config_file}) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration file must contain a mapping",
                                     {"path": config_file})
        logger.debug("Loaded configuration from %s", config_file)
        return data

    def apply_environment_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply ``PATTERN_GALLERY_*`` variables on top of ``config``."""
        for name, raw_value in self._environ.items():
            if not name.startswith(ENV_PREFIX):
                continue
            path = tuple(
                part.lower()
                for part in name[len(ENV_PREFIX):].split(ENV_NESTED_SEPARATOR)
                if part
            )
            if not path:
                continue
            self._set_nested_value(config, path, self._coerce(raw_value))
            logger.debug("Applied environment override %s", name)
        return config

    @staticmethod
    def merge(target: Dict[str, Any], source: Dict[str, Any]) -> None:
        """Deep-merge ``source`` into ``target`` in place."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                ConfigurationLoader.merge(target[key], value)
            else:
                target[key] = value

    @staticmethod
    def _set_nested_value(config: Dict[str, Any], path: tuple, value: Any) -> None:
        """Set a nested configuration value."""
        current = config
        for key in path[:-1]:
            nested = current.get(key)
            if not isinstance(nested, dict):
                nested = {}
                current[key] = nested
            current = nested
        current[path[-1]] = value

    @staticmethod
    def _coerce(value: str) -> Any:
        """Turn environment strings into booleans, integers or null where they look like one.

        Only ``null`` means null; ``none`` is a valid value for several string settings.
        """
        lowered = value.strip().lower()
        if lowered in ("true", "yes", "on"):
            return True
        if lowered in ("false", "no", "off"):
            return False
        if lowered == "null":
            return None
        try:
            return int(value)
        except ValueError:
            return value
