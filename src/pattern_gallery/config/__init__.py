"""Configuration package: schemas, loader and manager."""
from .loader import DEFAULT_CONFIG, ConfigurationLoader
from .manager import ConfigurationManager, get_config_manager
from .schemas import AppConfig, DemoConfig, LoggingConfig, OutputConfig, validate_config

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "OutputConfig",
    "DemoConfig",
    "validate_config",
    "ConfigurationLoader",
    "DEFAULT_CONFIG",
    "ConfigurationManager",
    "get_config_manager",
]
