"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing (resource/action structure)
- Command routing onto the query and command buses
- Output formatting and error reporting
"""
import argparse
import os
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple

from pattern_gallery import __version__
from pattern_gallery.application.dto import (
    CompareExampleCommand,
    GetExampleQuery,
    ListExamplesQuery,
    ListPatternsQuery,
    RunAllExamplesCommand,
    RunExampleCommand,
)
from pattern_gallery.cli.formatters import format_output
from pattern_gallery.config.manager import ConfigurationManager
from pattern_gallery.config.schemas import OUTPUT_FORMATS
from pattern_gallery.domain.base.exceptions import DomainException
from pattern_gallery.domain.catalog import PatternName, Variant
from pattern_gallery.infrastructure.console import RichConsole
from pattern_gallery.infrastructure.error import (
    ErrorCategory,
    ExceptionContext,
    get_exception_handler,
)
from pattern_gallery.infrastructure.logging.logger import get_logger
from pattern_gallery.infrastructure.patterns.singleton_registry import SingletonRegistry

PATTERN_CHOICES = [pattern.value for pattern in PatternName]
VARIANT_CHOICES = [variant.value for variant in Variant]

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its resource-action structure."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "pattern-gallery",
        description="Pattern Gallery - paired before/after examples of classic design patterns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s patterns list                               # List all patterns
  %(prog)s examples list --pattern observer            # Examples of one pattern
  %(prog)s examples show builder pizza                 # Describe an example
  %(prog)s examples run builder pizza                  # Run the refactored variant
  %(prog)s examples run builder pizza --variant basic  # Run the basic variant
  %(prog)s examples compare strategy shopping-cart     # Run both variants
  %(prog)s examples run-all --format table             # Run every example
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--format', choices=OUTPUT_FORMATS, help='Output format')
    parser.add_argument('--output', help='Output file (default: stdout)')
    parser.add_argument('--quiet', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='resource', help='Available resources')

    # Patterns resource
    patterns_parser = subparsers.add_parser('patterns', help='Browse design patterns')
    patterns_subparsers = patterns_parser.add_subparsers(dest='action', help='Pattern actions')
    patterns_subparsers.add_parser('list', help='List all patterns')

    # Examples resource
    examples_parser = subparsers.add_parser('examples', help='Browse and run examples')
    examples_subparsers = examples_parser.add_subparsers(dest='action', help='Example actions')

    examples_list = examples_subparsers.add_parser('list', help='List examples')
    examples_list.add_argument('--pattern', choices=PATTERN_CHOICES, help='Filter by pattern')

    examples_show = examples_subparsers.add_parser('show', help='Show example details')
    examples_show.add_argument('pattern', choices=PATTERN_CHOICES, help='Pattern name')
    examples_show.add_argument('slug', help='Example slug')

    examples_run = examples_subparsers.add_parser('run', help='Run one example')
    examples_run.add_argument('pattern', choices=PATTERN_CHOICES, help='Pattern name')
    examples_run.add_argument('slug', help='Example slug')
    examples_run.add_argument('--variant', choices=VARIANT_CHOICES, help='Variant to run')
    examples_run.add_argument('--seed', type=int, help='Seed for the random source')

    examples_compare = examples_subparsers.add_parser('compare', help='Run both variants of an example')
    examples_compare.add_argument('pattern', choices=PATTERN_CHOICES, help='Pattern name')
    examples_compare.add_argument('slug', help='Example slug')
    examples_compare.add_argument('--seed', type=int, help='Seed for the random source')

    examples_run_all = examples_subparsers.add_parser('run-all', help='Run every example')
    examples_run_all.add_argument('--pattern', choices=PATTERN_CHOICES, help='Filter by pattern')
    examples_run_all.add_argument('--variant', choices=VARIANT_CHOICES, help='Only run this variant')
    examples_run_all.add_argument('--seed', type=int, help='Seed for the random source')

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def _optional_variant(value: Optional[str]) -> Optional[Variant]:
    return Variant(value) if value else None


def _optional_pattern(value: Optional[str]) -> Optional[PatternName]:
    return PatternName(value) if value else None


def _list_patterns(args: argparse.Namespace, app: Any) -> Tuple[Dict[str, Any], bool]:
    patterns = app.get_query_bus().execute(ListPatternsQuery())
    return {"patterns": [p.to_dict() for p in patterns]}, True


def _list_examples(args: argparse.Namespace, app: Any) -> Tuple[Dict[str, Any], bool]:
    examples = app.get_query_bus().execute(ListExamplesQuery(pattern=_optional_pattern(args.pattern)))
    return {"examples": [e.to_dict() for e in examples]}, True


def _show_example(args: argparse.Namespace, app: Any) -> Tuple[Dict[str, Any], bool]:
    example = app.get_query_bus().execute(
        GetExampleQuery(pattern=PatternName(args.pattern), slug=args.slug))
    return {"example": example.to_dict()}, True


def _run_example(args: argparse.Namespace, app: Any) -> Tuple[Dict[str, Any], bool]:
    result = app.get_command_bus().execute(RunExampleCommand(
        pattern=PatternName(args.pattern), slug=args.slug,
        variant=_optional_variant(args.variant), seed=args.seed))
    return {"result": result.to_dict()}, result.success


def _compare_example(args: argparse.Namespace, app: Any) -> Tuple[Dict[str, Any], bool]:
    comparison = app.get_command_bus().execute(CompareExampleCommand(
        pattern=PatternName(args.pattern), slug=args.slug, seed=args.seed))
    ok = comparison.basic.success and comparison.refactored.success
    return {"comparison": comparison.to_dict()}, ok


def _run_all(args: argparse.Namespace, app: Any) -> Tuple[Dict[str, Any], bool]:
    summary = app.get_command_bus().execute(RunAllExamplesCommand(
        pattern=_optional_pattern(args.pattern),
        variant=_optional_variant(args.variant), seed=args.seed))
    return {"summary": summary.to_summary_dict()}, summary.success


COMMAND_HANDLERS: Dict[Tuple[str, str], Callable[[argparse.Namespace, Any], Tuple[Dict[str, Any], bool]]] = {
    ('patterns', 'list'): _list_patterns,
    ('examples', 'list'): _list_examples,
    ('examples', 'show'): _show_example,
    ('examples', 'run'): _run_example,
    ('examples', 'compare'): _compare_example,
    ('examples', 'run-all'): _run_all,
}


def execute_command(args: argparse.Namespace, app: Any) -> Tuple[Dict[str, Any], bool]:
    """Route parsed arguments to the matching handler. Returns (payload, success)."""
    handler_key = (args.resource, args.action)
    if handler_key not in COMMAND_HANDLERS:
        raise ValueError(f"Unknown command: {args.resource} {args.action}")
    return COMMAND_HANDLERS[handler_key](args, app)


def _create_app(args: argparse.Namespace) -> Any:
    from pattern_gallery.bootstrap import Application

    config_manager = ConfigurationManager(args.config)
    if args.log_level:
        config_manager.override("logging.level", args.log_level)
    SingletonRegistry.get_instance().register(ConfigurationManager, config_manager)
    return Application(args.config, config_manager=config_manager).initialize()


def _write(text: str, args: argparse.Namespace, color: bool = True) -> None:
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(text + "\n")
        if not args.quiet:
            print(f"Output written to {args.output}")
    else:
        RichConsole(color=color).print(text)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    args = parse_args(argv)
    logger = get_logger(__name__)

    if not args.resource:
        print("Error: No resource specified. Use --help for usage information.", file=sys.stderr)
        return EXIT_FAILURE

    if not args.action:
        print(f"Error: No action specified for {args.resource}. Use --help for usage information.",
              file=sys.stderr)
        return EXIT_FAILURE

    error_handler = get_exception_handler()
    output_format = args.format or "text"
    color = True

    try:
        app = _create_app(args)
        color = app.config.output.color
        output_format = args.format or app.config.output.format
        payload, success = execute_command(args, app)
        _write(format_output(payload, output_format, app.config.output.width), args, color)
        return EXIT_OK if success else EXIT_FAILURE

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        if isinstance(e, DomainException):
            logger.debug(f"Domain error: {e}")
        response = error_handler.handle(e, ExceptionContext(f"{args.resource} {args.action}", "cli"))
        if not args.quiet:
            if response.category == ErrorCategory.INTERNAL:
                print(f"Unexpected error: {e}", file=sys.stderr)
            else:
                structured = output_format if output_format in ("json", "yaml") else "text"
                RichConsole(color=color).error(format_output(response.to_dict(), structured))
        return response.exit_code


if __name__ == "__main__":
    sys.exit(main())
