"""Example descriptor - the catalog entry every example package declares."""
import re
from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pattern_gallery.domain.catalog.exceptions import VariantNotAvailableError
from pattern_gallery.domain.catalog.value_objects import PatternCategory, PatternName, Variant

_SLUG_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


class ExampleDescriptor(BaseModel):
    """
    Describes one before/after example.

    The basic and refactored programs live in the ``basic`` and
    ``refactored`` submodules of ``package``.
    """
    model_config = ConfigDict(frozen=True)

    pattern: PatternName
    slug: str
    title: str
    summary: str
    package: str
    variants: Tuple[Variant, ...] = Field(default=(Variant.BASIC, Variant.REFACTORED))

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        """Slugs are lower-case words joined by hyphens."""
        if not _SLUG_PATTERN.match(v):
            raise ValueError(f"Invalid example slug: {v!r}")
        return v

    @field_validator("variants")
    @classmethod
    def validate_variants(cls, v: Tuple[Variant, ...]) -> Tuple[Variant, ...]:
        if not v:
            raise ValueError("An example must provide at least one variant")
        return v

    @property
    def category(self) -> PatternCategory:
        return self.pattern.category

    @property
    def key(self) -> str:
        return f"{self.pattern.value}/{self.slug}"

    def has_variant(self, variant: Variant) -> bool:
        return variant in self.variants

    def module_path(self, variant: Variant) -> str:
        """Return the dotted module path of a variant."""
        if not self.has_variant(variant):
            raise VariantNotAvailableError(self.pattern.value, self.slug, variant.value)
        return f"{self.package}.{variant.value}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pattern": self.pattern.value,
            "category": self.category.value,
            "slug": self.slug,
            "title": self.title,
            "summary": self.summary,
            "variants": [variant.value for variant in self.variants],
            "modules": {variant.value: self.module_path(variant) for variant in self.variants},
        }
