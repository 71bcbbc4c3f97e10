"""Outcome of running one example variant."""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from pattern_gallery.domain.catalog.value_objects import PatternName, Variant


class RunResult(BaseModel):
    """Recorded console output and status of a single example run."""
    model_config = ConfigDict(frozen=True)

    pattern: PatternName
    slug: str
    variant: Variant
    lines: List[str] = Field(default_factory=list)
    success: bool = True
    error: Optional[str] = None
    error_type: Optional[str] = None
    duration_ms: float = 0.0

    @property
    def output(self) -> str:
        return "\n".join(self.lines)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
