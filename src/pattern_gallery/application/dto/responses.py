"""Response DTOs returned by catalog queries and run commands."""
from typing import Any, Dict, List, Optional

from pydantic import Field

from pattern_gallery.application.dto.base import BaseDTO, BaseResponse
from pattern_gallery.domain.catalog import ExampleDescriptor, RunResult


class PatternDTO(BaseDTO):
    """Summary of one design pattern."""
    name: str
    category: str
    example_count: int
    examples: List[str] = Field(default_factory=list)


class ExampleDTO(BaseDTO):
    """Public view of an example descriptor."""
    pattern: str
    category: str
    slug: str
    title: str
    summary: str
    variants: List[str]
    modules: Dict[str, str]

    @classmethod
    def from_descriptor(cls, descriptor: ExampleDescriptor) -> "ExampleDTO":
        return cls(**descriptor.to_dict())


class RunResultDTO(BaseDTO):
    """Outcome of a single example run."""
    pattern: str
    slug: str
    variant: str
    success: bool
    lines: List[str]
    error: Optional[str] = None
    error_type: Optional[str] = None
    duration_ms: float = 0.0

    @classmethod
    def from_result(cls, result: RunResult) -> "RunResultDTO":
        return cls(
            pattern=result.pattern.value,
            slug=result.slug,
            variant=result.variant.value,
            success=result.success,
            lines=list(result.lines),
            error=result.error,
            error_type=result.error_type,
            duration_ms=round(result.duration_ms, 3),
        )


class ComparisonDTO(BaseDTO):
    """Basic and refactored outputs of the same example."""
    pattern: str
    slug: str
    basic: RunResultDTO
    refactored: RunResultDTO


class RunSummaryResponse(BaseResponse):
    """Aggregate outcome of running many examples."""
    total: int = 0
    passed: int = 0
    failed: int = 0
    results: List[RunResultDTO] = Field(default_factory=list)

    def failures(self) -> List[RunResultDTO]:
        return [result for result in self.results if not result.success]

    def to_summary_dict(self) -> Dict[str, Any]:
        """Summary without the recorded output lines."""
        return {
            "success": self.success,
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "runs": [
                {
                    "example": f"{r.pattern}/{r.slug}",
                    "variant": r.variant,
                    "success": r.success,
                    "lines": len(r.lines),
                    "error": r.error,
                }
                for r in self.results
            ],
        }
