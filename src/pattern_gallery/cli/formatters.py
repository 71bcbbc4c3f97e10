"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML serialisation
- Rich tables for patterns, examples and run summaries
- List formatting for detailed views
- Plain text for recorded example output
"""

import json
from typing import Any, Dict, List

import yaml
from rich import box
from rich.console import Console
from rich.table import Table

DEFAULT_WIDTH = 120


def format_output(data: Any, format_type: str, width: int = DEFAULT_WIDTH) -> str:
    """Format data according to the specified format type."""
    if format_type == "json":
        return json.dumps(data, indent=2, default=str)
    elif format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    elif format_type == "table":
        return format_table_output(data, width)
    elif format_type == "list":
        return format_list_output(data)
    elif format_type == "text":
        return format_text_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any, width: int = DEFAULT_WIDTH) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_table(data["patterns"], width)
    elif isinstance(data, dict) and "examples" in data:
        return format_examples_table(data["examples"], width)
    elif isinstance(data, dict) and "summary" in data:
        return format_summary_table(data["summary"], width)
    elif isinstance(data, dict) and "example" in data:
        return _render(_key_value_table(data["example"]), width)
    else:
        return format_text_output(data)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "patterns" in data:
        return _format_items(data["patterns"], title_key="name")
    elif isinstance(data, dict) and "examples" in data:
        return _format_items(data["examples"], title_key="slug")
    elif isinstance(data, dict) and "example" in data:
        return _format_items([data["example"]], title_key="slug")
    elif isinstance(data, dict) and "summary" in data:
        return _format_items(data["summary"]["runs"], title_key="example")
    else:
        return format_text_output(data)


def format_text_output(data: Any) -> str:
    """Plain text: recorded example output, or a readable fallback."""
    if isinstance(data, dict) and "result" in data:
        return format_run_text(data["result"])
    elif isinstance(data, dict) and "comparison" in data:
        comparison = data["comparison"]
        return "\n".join([
            _banner(f"{comparison['pattern']}/{comparison['slug']} - basic"),
            format_run_text(comparison["basic"]),
            "",
            _banner(f"{comparison['pattern']}/{comparison['slug']} - refactored"),
            format_run_text(comparison["refactored"]),
        ])
    elif isinstance(data, dict) and "summary" in data:
        summary = data["summary"]
        lines = [
            f"{'PASS' if run['success'] else 'FAIL'}  {run['example']} ({run['variant']})"
            + (f": {run['error']}" if run["error"] else "")
            for run in summary["runs"]
        ]
        lines.append(f"{summary['passed']}/{summary['total']} example runs succeeded")
        return "\n".join(lines)
    elif isinstance(data, dict) and ("patterns" in data or "examples" in data or "example" in data):
        return format_list_output(data)
    elif isinstance(data, dict) and "error" in data:
        return f"Error: {data.get('message', data['error'])}"
    return json.dumps(data, indent=2, default=str)


def format_run_text(result: Dict[str, Any]) -> str:
    """Recorded lines of one run, followed by the error when it failed."""
    lines = list(result.get("lines", []))
    if not result.get("success", True):
        lines.append(f"!! {result.get('error_type') or 'Error'}: {result.get('error')}")
    return "\n".join(lines)


def format_patterns_table(patterns: List[Dict[str, Any]], width: int = DEFAULT_WIDTH) -> str:
    """Format patterns as a rich table."""
    if not patterns:
        return "No patterns found."

    table = Table(show_header=True, header_style="bold magenta", box=box.SIMPLE_HEAVY)
    table.add_column("Pattern", style="cyan")
    table.add_column("Category", style="green")
    table.add_column("Examples", style="yellow", justify="right")
    table.add_column("Slugs", style="blue")

    for pattern in patterns:
        table.add_row(
            pattern["name"],
            pattern["category"],
            str(pattern["example_count"]),
            ", ".join(pattern.get("examples", [])),
        )
    return _render(table, width)


def format_examples_table(examples: List[Dict[str, Any]], width: int = DEFAULT_WIDTH) -> str:
    """Format examples as a rich table."""
    if not examples:
        return "No examples found."

    table = Table(show_header=True, header_style="bold magenta", box=box.SIMPLE_HEAVY)
    table.add_column("Pattern", style="cyan")
    table.add_column("Slug", style="green")
    table.add_column("Title")
    table.add_column("Variants", style="yellow")

    for example in examples:
        table.add_row(
            example["pattern"],
            example["slug"],
            example["title"],
            ", ".join(example["variants"]),
        )
    return _render(table, width)


def format_summary_table(summary: Dict[str, Any], width: int = DEFAULT_WIDTH) -> str:
    """Format a run-all summary as a rich table."""
    table = Table(show_header=True, header_style="bold magenta", box=box.SIMPLE_HEAVY,
                  caption=f"{summary['passed']}/{summary['total']} example runs succeeded")
    table.add_column("Example", style="cyan")
    table.add_column("Variant", style="green")
    table.add_column("Status")
    table.add_column("Lines", justify="right")
    table.add_column("Error", style="red")

    for run in summary["runs"]:
        table.add_row(
            run["example"],
            run["variant"],
            "PASS" if run["success"] else "FAIL",
            str(run["lines"]),
            run["error"] or "",
        )
    return _render(table, width)


def _key_value_table(item: Dict[str, Any]) -> Table:
    table = Table(show_header=False, box=box.SIMPLE)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for key, value in item.items():
        table.add_row(key, _stringify(value))
    return table


def _format_items(items: List[Dict[str, Any]], title_key: str) -> str:
    if not items:
        return "No items found."
    blocks = []
    for item in items:
        lines = [f"{item.get(title_key, '')}:"]
        for key, value in item.items():
            if key == title_key:
                continue
            lines.append(f"  {key}: {_stringify(value)}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def _stringify(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    if isinstance(value, dict):
        return ", ".join(f"{k}={v}" for k, v in value.items())
    return "" if value is None else str(value)


def _banner(title: str) -> str:
    return f"===== {title} ====="


def _render(renderable: Any, width: int) -> str:
    """Capture rich output as a string."""
    console = Console(width=width, legacy_windows=False, force_terminal=False, no_color=True)
    with console.capture() as capture:
        console.print(renderable)
    return capture.get().rstrip("\n")
