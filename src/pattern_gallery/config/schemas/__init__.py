"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .common_schema import OUTPUT_FORMATS, DemoConfig, OutputConfig
from .logging_schema import LoggingConfig

__all__ = [
    "AppConfig",
    "validate_config",
    "LoggingConfig",
    "OutputConfig",
    "DemoConfig",
    "OUTPUT_FORMATS",
]
