"""Tests for example descriptors, run results and catalog value objects."""
import random

import pytest
from pydantic import ValidationError as PydanticValidationError

from pattern_gallery.domain.catalog import (
    DemoContext,
    ExampleDescriptor,
    PatternCategory,
    PatternName,
    RunResult,
    Variant,
    VariantNotAvailableError,
)
from pattern_gallery.infrastructure.console import RecordingConsole


def make_descriptor(**overrides):
    data = {
        "pattern": PatternName.BUILDER,
        "slug": "pizza",
        "title": "Pizza builder",
        "summary": "Build pizzas step by step.",
        "package": "pattern_gallery.patterns.builder.pizza",
    }
    data.update(overrides)
    return ExampleDescriptor(**data)


class TestPatternName:
    """Test pattern names and categories."""

    def test_every_pattern_has_a_category(self):
        for pattern in PatternName:
            assert isinstance(pattern.category, PatternCategory)

    @pytest.mark.parametrize("pattern,category", [
        (PatternName.SINGLETON, PatternCategory.CREATIONAL),
        (PatternName.PROXY, PatternCategory.STRUCTURAL),
        (PatternName.OBSERVER, PatternCategory.BEHAVIORAL),
    ])
    def test_known_categories(self, pattern, category):
        assert pattern.category == category

    def test_fourteen_patterns(self):
        assert len(list(PatternName)) == 14


class TestExampleDescriptor:
    """Test the catalog entry model."""

    def test_key_and_category(self):
        descriptor = make_descriptor()

        assert descriptor.key == "builder/pizza"
        assert descriptor.category == PatternCategory.CREATIONAL

    def test_default_variants(self):
        descriptor = make_descriptor()

        assert descriptor.variants == (Variant.BASIC, Variant.REFACTORED)
        assert descriptor.has_variant(Variant.BASIC)

    def test_module_path(self):
        descriptor = make_descriptor()

        assert descriptor.module_path(Variant.REFACTORED) == "pattern_gallery.patterns.builder.pizza.refactored"

    def test_module_path_for_missing_variant(self):
        descriptor = make_descriptor(variants=(Variant.REFACTORED,))

        with pytest.raises(VariantNotAvailableError, match="no 'basic' variant"):
            descriptor.module_path(Variant.BASIC)

    @pytest.mark.parametrize("slug", ["Pizza", "pizza_builder", "-pizza", "pizza-", ""])
    def test_invalid_slugs_are_rejected(self, slug):
        with pytest.raises(PydanticValidationError):
            make_descriptor(slug=slug)

    def test_empty_variants_rejected(self):
        with pytest.raises(PydanticValidationError, match="at least one variant"):
            make_descriptor(variants=())

    def test_descriptor_is_frozen(self):
        descriptor = make_descriptor()

        with pytest.raises(PydanticValidationError):
            descriptor.slug = "calzone"

    def test_to_dict(self):
        data = make_descriptor().to_dict()

        assert data["pattern"] == "builder"
        assert data["category"] == "creational"
        assert data["variants"] == ["basic", "refactored"]
        assert data["modules"]["basic"].endswith("pizza.basic")


class TestRunResult:
    """Test the run outcome model."""

    def test_output_joins_lines(self):
        result = RunResult(pattern=PatternName.FACTORY, slug="shapes", variant=Variant.BASIC,
                           lines=["first", "second"])

        assert result.output == "first\nsecond"
        assert result.success is True

    def test_to_dict_uses_enum_values(self):
        result = RunResult(pattern=PatternName.FACTORY, slug="shapes", variant=Variant.BASIC,
                           success=False, error="boom", error_type="RuntimeError")

        data = result.to_dict()

        assert data["pattern"] == "factory"
        assert data["variant"] == "basic"
        assert data["error_type"] == "RuntimeError"


class TestDemoContext:
    """Test context construction."""

    def test_seeded_context_is_reproducible(self):
        first = DemoContext.seeded(RecordingConsole(), seed=7)
        second = DemoContext.seeded(RecordingConsole(), seed=7)

        assert [first.rng.random() for _ in range(3)] == [second.rng.random() for _ in range(3)]

    def test_seeded_context_uses_given_clock(self, fixed_clock):
        context = DemoContext.seeded(RecordingConsole(), seed=1, clock=fixed_clock)

        assert context.clock() == fixed_clock()
        assert isinstance(context.rng, random.Random)
