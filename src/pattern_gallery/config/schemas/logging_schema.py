"""Logging configuration schema."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_DESTINATIONS = ["stdout", "stderr", "file", "both", "none"]


class LoggingConfig(BaseModel):
    """Logging configuration."""
    model_config = ConfigDict(extra="forbid")

    level: str = Field("WARNING", description="Root log level")
    destination: str = Field("stderr", description="Where log records go (stdout, stderr, file, both, none)")
    file_path: Optional[str] = Field(None, description="Log file path, required for file destinations")
    max_size_mb: int = Field(10, description="Rotate the log file after this many megabytes")
    backup_count: int = Field(3, description="Number of rotated log files to keep")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """
        Validate log level.

        Raises:
            ValueError: If the level is not a standard logging level name
        """
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LOG_LEVELS}")
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v not in VALID_DESTINATIONS:
            raise ValueError(f"Log destination must be one of {VALID_DESTINATIONS}")
        return v

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Log rotation settings must not be negative")
        return v

    @model_validator(mode="after")
    def ensure_file_path(self) -> "LoggingConfig":
        """File destinations need somewhere to write."""
        if self.writes_to_file and not self.file_path:
            raise ValueError(f"Log destination '{self.destination}' requires file_path")
        return self

    @property
    def writes_to_file(self) -> bool:
        return self.destination in ("file", "both")
