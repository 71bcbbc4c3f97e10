"""Output and demo configuration schemas."""
from typing import Optional

from pydantic import BaseModel, Field, field_validator

OUTPUT_FORMATS = ["text", "json", "yaml", "table", "list"]


class OutputConfig(BaseModel):
    """CLI output configuration."""

    format: str = Field("text", description="Default output format")
    color: bool = Field(True, description="Use colors when writing to a terminal")
    width: int = Field(120, description="Console width used for tables")

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"Output format must be one of {OUTPUT_FORMATS}")
        return v

    @field_validator("width")
    @classmethod
    def validate_width(cls, v: int) -> int:
        if v < 40:
            raise ValueError("Console width must be at least 40 columns")
        return v


class DemoConfig(BaseModel):
    """Settings applied to every example run."""

    seed: Optional[int] = Field(42, description="Seed for the random source handed to examples")
    default_variant: str = Field("refactored", description="Variant run when none is requested")

    @field_validator("default_variant")
    @classmethod
    def validate_variant(cls, v: str) -> str:
        if v not in ("basic", "refactored"):
            raise ValueError("Default variant must be 'basic' or 'refactored'")
        return v
