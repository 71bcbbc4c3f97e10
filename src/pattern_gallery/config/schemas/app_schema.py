"""Top-level configuration model."""
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from .common_schema import DemoConfig, OutputConfig
from .logging_schema import LoggingConfig

ENVIRONMENTS = ("development", "testing", "production")


class AppConfig(BaseModel):
    """Everything the gallery reads from defaults, the config file and the environment."""

    version: str = Field("1.0.0", description="Configuration version")
    environment: str = Field("development", description="Deployment environment")
    debug: bool = Field(False, description="Debug mode")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    demo: DemoConfig = Field(default_factory=DemoConfig)

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        if v not in ENVIRONMENTS:
            raise ValueError(f"Environment must be one of {list(ENVIRONMENTS)}")
        return v


def validate_config(config: Dict[str, Any]) -> AppConfig:
    """
    Build an :class:`AppConfig` from a raw mapping.

    Raises:
        pydantic.ValidationError: If a section or value is invalid
    """
    return AppConfig.model_validate(config)
