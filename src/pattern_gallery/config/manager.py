"""Typed, lazily loaded access to the merged configuration."""
from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from pattern_gallery.config.loader import ConfigurationLoader
from pattern_gallery.config.schemas import AppConfig, DemoConfig, LoggingConfig, OutputConfig, validate_config
from pattern_gallery.domain.base.exceptions import ConfigurationError

T = TypeVar('T')
logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Single source of truth for configuration.

    Configuration is loaded lazily on first access and cached; typed
    sections are looked up with :meth:`get_typed`.
    """

    _TYPE_MAPPING = {
        LoggingConfig: 'logging',
        OutputConfig: 'output',
        DemoConfig: 'demo',
    }

    def __init__(self, config_file: Optional[str] = None,
                 loader: Optional[ConfigurationLoader] = None):
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._raw_config: Optional[Dict[str, Any]] = None
        self._loader = loader
        self._overrides: Dict[str, Any] = {}

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    @property
    def loader(self) -> ConfigurationLoader:
        """Loader used for every (re)load; a default one is created on demand."""
        if self._loader is None:
            self._loader = ConfigurationLoader()
        return self._loader

    @property
    def app_config(self) -> AppConfig:
        """Validated configuration, loaded on first access."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Merge defaults, file, environment and overrides, then validate."""
        raw = self.loader.load_configuration(self._config_file)
        ConfigurationLoader.merge(raw, self._overrides)
        try:
            app_config = validate_config(raw)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}",
                                     {"errors": e.errors(include_url=False)}) from e
        self._raw_config = raw
        logger.debug("Configuration loaded (environment=%s)", app_config.environment)
        return app_config

    def get_typed(self, config_type: Type[T]) -> T:
        """Section of the configuration modelled by ``config_type``."""
        if config_type is AppConfig:
            return self.app_config  # type: ignore[return-value]
        attr_name = self._TYPE_MAPPING.get(config_type)
        if attr_name is None:
            raise ValueError(f"Unknown configuration type: {config_type.__name__}")
        return getattr(self.app_config, attr_name)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a raw value by dotted key.

        Args:
            key: Dotted path such as ``demo.seed``
            default: Returned when any part of the path is missing
        """
        value: Any = self.get_raw_config()
        for part in key.split('.'):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default
        return value

    def get_raw_config(self) -> Dict[str, Any]:
        """Return the merged configuration dictionary the typed model was built from."""
        _ = self.app_config
        return dict(self._raw_config or {})

    def override(self, key: str, value: Any) -> None:
        """
        Override a dotted key (``logging.level``) and reload on next access.

        Used for command line flags, which take precedence over every other source.
        """
        with self._lock:
            ConfigurationLoader._set_nested_value(self._overrides, tuple(key.split('.')), value)
            self._app_config = None

    def reload(self) -> None:
        """Forget the cached configuration so the next access reads every source again."""
        with self._lock:
            self._app_config = None
            self._raw_config = None


def get_config_manager(config_path: Optional[str] = None) -> ConfigurationManager:
    """
    Get the process-wide configuration manager.

    A different ``config_path`` replaces the cached manager.
    """
    from pattern_gallery.infrastructure.patterns import SingletonRegistry, get_singleton

    registry = SingletonRegistry.get_instance()
    if registry.has(ConfigurationManager):
        manager = registry.get(ConfigurationManager)
        if config_path is None or manager.config_file == config_path:
            return manager
        registry.reset(ConfigurationManager)
    return get_singleton(ConfigurationManager, config_path)
