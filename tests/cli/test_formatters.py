"""Tests for CLI output formatting."""
import json

import yaml

from pattern_gallery.cli.formatters import (
    format_examples_table,
    format_output,
    format_patterns_table,
    format_run_text,
)

PATTERNS = {"patterns": [
    {"name": "builder", "category": "creational", "example_count": 1, "examples": ["pizza"]},
    {"name": "observer", "category": "behavioral", "example_count": 2,
     "examples": ["stock-market", "weather-station"]},
]}

SUMMARY = {"summary": {
    "success": False, "total": 2, "passed": 1, "failed": 1,
    "runs": [
        {"example": "builder/pizza", "variant": "basic", "success": True, "lines": 12, "error": None},
        {"example": "builder/pizza", "variant": "refactored", "success": False, "lines": 3,
         "error": "Pizza size is required"},
    ],
}}


class TestFormatOutput:
    """Test format dispatch."""

    def test_json(self):
        assert json.loads(format_output(PATTERNS, "json")) == PATTERNS

    def test_yaml(self):
        assert yaml.safe_load(format_output(PATTERNS, "yaml")) == PATTERNS

    def test_unknown_format_falls_back_to_json(self):
        assert json.loads(format_output({"a": 1}, "xml")) == {"a": 1}

    def test_patterns_table(self):
        output = format_output(PATTERNS, "table", width=100)

        assert "Pattern" in output
        assert "creational" in output
        assert "stock-market, weather-station" in output

    def test_patterns_list(self):
        output = format_output(PATTERNS, "list")

        assert output.startswith("builder:\n  category: creational")
        assert "  examples: stock-market, weather-station" in output

    def test_summary_text(self):
        output = format_output(SUMMARY, "text")

        assert output.splitlines() == [
            "PASS  builder/pizza (basic)",
            "FAIL  builder/pizza (refactored): Pizza size is required",
            "1/2 example runs succeeded",
        ]

    def test_summary_table_has_caption(self):
        output = format_output(SUMMARY, "table")

        assert "FAIL" in output
        assert "1/2 example runs succeeded" in output

    def test_comparison_text(self):
        data = {"comparison": {
            "pattern": "decorator", "slug": "coffee",
            "basic": {"lines": ["Simple coffee: 5.00"], "success": True},
            "refactored": {"lines": ["Simple coffee, with milk: 6.00"], "success": True},
        }}

        output = format_output(data, "text")

        assert output.splitlines() == [
            "===== decorator/coffee - basic =====",
            "Simple coffee: 5.00",
            "",
            "===== decorator/coffee - refactored =====",
            "Simple coffee, with milk: 6.00",
        ]

    def test_error_text(self):
        assert format_output({"error": "ENTITY_NOT_FOUND", "message": "Pattern not found: visitor"},
                             "text") == "Error: Pattern not found: visitor"


def test_run_text_appends_failure():
    result = {"lines": ["Building pizza..."], "success": False,
              "error": "Pizza size is required", "error_type": "PizzaValidationError"}

    assert format_run_text(result) == "Building pizza...\n!! PizzaValidationError: Pizza size is required"


def test_empty_tables():
    assert format_patterns_table([]) == "No patterns found."
    assert format_examples_table([]) == "No examples found."
