"""Commands that run example programs."""
from typing import Optional

from pydantic import field_validator

from pattern_gallery.application.dto.base import BaseCommand
from pattern_gallery.domain.catalog import PatternName, Variant


class RunExampleCommand(BaseCommand):
    """Run one variant of one example."""
    pattern: PatternName
    slug: str
    variant: Optional[Variant] = None
    seed: Optional[int] = None

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Example slug must not be empty")
        return v.strip()


class CompareExampleCommand(BaseCommand):
    """Run the basic and refactored variants of an example side by side."""
    pattern: PatternName
    slug: str
    seed: Optional[int] = None


class RunAllExamplesCommand(BaseCommand):
    """Run every example, optionally filtered by pattern and variant."""
    pattern: Optional[PatternName] = None
    variant: Optional[Variant] = None
    seed: Optional[int] = None
