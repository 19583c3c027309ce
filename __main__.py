"""CLI entry point for boxlayout.

This module acts as the central entry point for the project's CLI tools.
It delegates commands to the appropriate submodules or runs specific tasks.
"""

import argparse
import json
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from boxlayout.config import EnvVar, get_environment, get_log_level
from boxlayout.core import LayoutError, get_logger, setup_logging
from boxlayout.ir import LayoutNodeRoot, export_json_schema
from boxlayout.layout import resolve_layout
from boxlayout.output import format_layout_tree, layout_to_dict
from boxlayout.validation import validate_layout

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")

OUTPUT_FORMATS = ["json", "tree"]


# =============================================================================
# Input Helpers
# =============================================================================


def _read_source(source: str) -> str:
    """Read a layout document from a path, or stdin when source is '-'."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _load_root(source: str) -> LayoutNodeRoot:
    """Load and validate a root node from a JSON document."""
    return LayoutNodeRoot.model_validate_json(_read_source(source))


def _write_result(text: str, output: Path | None) -> None:
    """Write text to a file, or print it when no output path is given."""
    if output:
        output.write_text(text + "\n", encoding="utf-8")
        logger.info(f"Layout saved to {output}")
    else:
        print(text)


# =============================================================================
# Resolve Command
# =============================================================================


def cmd_resolve(args: argparse.Namespace) -> int:
    """Handle the resolve command."""
    try:
        root = _load_root(args.source)
        layout = resolve_layout(root, strict=args.strict)
    except (LayoutError, ValidationError, OSError) as e:
        logger.error(f"Layout resolution failed: {e}")
        return 1

    if args.format == "tree":
        result_text = format_layout_tree(root, layout)
    else:
        result_text = json.dumps(layout_to_dict(layout), indent=args.indent or None)

    _write_result(result_text, args.output)
    logger.info(f"Resolved {len(layout)} blocks from '{root.id}'")
    return 0


def _configured_output_format() -> str:
    """Get the default output format, falling back to json when unknown."""
    configured = get_environment(EnvVar.BOXLAYOUT_OUTPUT_FORMAT)
    if configured not in OUTPUT_FORMATS:
        logger.warning(
            f"Unknown BOXLAYOUT_OUTPUT_FORMAT '{configured}', using 'json' "
            f"(expected one of: {', '.join(OUTPUT_FORMATS)})"
        )
        return "json"
    return configured


def handle_resolve_command(argv: list[str]) -> int:
    """Handle resolve-specific arguments."""
    parser = argparse.ArgumentParser(
        prog="python . resolve",
        description="Compute absolute geometry for every box of a layout",
    )
    parser.add_argument(
        "source",
        type=str,
        help="Path to a JSON layout document, or '-' for stdin",
    )
    parser.add_argument(
        "--format",
        "-f",
        type=str,
        default=_configured_output_format(),
        choices=OUTPUT_FORMATS,
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=get_environment(EnvVar.BOXLAYOUT_JSON_INDENT),
        help="JSON indentation, 0 for compact output (default: 2)",
    )
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=get_environment(EnvVar.BOXLAYOUT_STRICT_IDS),
        help="Fail on duplicate node IDs instead of overwriting",
    )

    args = parser.parse_args(argv)
    return cmd_resolve(args)


# =============================================================================
# Validate Command
# =============================================================================


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle the validate command."""
    try:
        root = _load_root(args.source)
    except (ValidationError, OSError) as e:
        logger.error(f"Could not load layout: {e}")
        return 1

    issues = validate_layout(root)
    if not issues:
        print(f"Layout '{root.id}' is valid")
        return 0

    for issue in issues:
        print(f"{issue.node_id}: [{issue.issue_type}] {issue.message}")
    logger.warning(f"Found {len(issues)} issue(s)")
    return 1


def handle_validate_command(argv: list[str]) -> int:
    """Handle validate-specific arguments."""
    parser = argparse.ArgumentParser(
        prog="python . validate",
        description="Report structural issues in a layout without resolving it",
    )
    parser.add_argument(
        "source",
        type=str,
        help="Path to a JSON layout document, or '-' for stdin",
    )

    args = parser.parse_args(argv)
    return cmd_validate(args)


# =============================================================================
# Schema Command
# =============================================================================


def handle_schema_command(argv: list[str]) -> int:
    """Print the JSON Schema of a layout document."""
    parser = argparse.ArgumentParser(
        prog="python . schema",
        description="Print the JSON Schema of a layout document",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    args = parser.parse_args(argv)

    indent = get_environment(EnvVar.BOXLAYOUT_JSON_INDENT)
    _write_result(json.dumps(export_json_schema(), indent=indent or None), args.output)
    return 0


# =============================================================================
# Dev Commands
# =============================================================================


def cmd_test(extra_args: list[str]) -> int:
    """Run pytest with provided arguments and test tier options.

    Usage:
        python . dev test                # Run all tests
        python . dev test --unit         # Run only unit tests
        python . dev test --integration  # Run CLI/subprocess tests
        python . dev test -k "overflow"  # Run tests matching pattern

    Test Tiers:
        unit        - Fast tests with no I/O
        integration - Tests running the CLI in a subprocess
    """
    tier_markers = {
        "--unit": ["-m", "unit"],
        "--integration": ["-m", "integration"],
        "--all": [],
    }

    pytest_args: list[str] = []
    remaining_args: list[str] = []

    for arg in extra_args:
        if arg in tier_markers:
            pytest_args.extend(tier_markers[arg])
        else:
            remaining_args.append(arg)

    cmd = [sys.executable, "-m", "pytest", *pytest_args, *remaining_args]
    logger.info(f"Running: {' '.join(cmd)}")

    try:
        return subprocess.call(cmd)
    except KeyboardInterrupt:
        return 130


def handle_dev_command(argv: list[str]) -> int:
    """Handle development commands.

    Usage:
        python . dev test [args]       # Run pytest
    """
    if not argv or argv[0] in ("-h", "--help"):
        print("Usage: python . dev {command} [args]")
        print("\nCommands:")
        print("  test       Run pytest with tier options")
        return 0 if argv else 1

    command, rest = argv[0], argv[1:]
    if command == "test":
        return cmd_test(rest)

    logger.error(f"Unknown dev command: {command}")
    return 1


# =============================================================================
# Main
# =============================================================================


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python . {command} [args]")
    print("\n=== Layout ===")
    print("  resolve    Compute absolute geometry for a layout document")
    print("  validate   Report structural issues in a layout document")
    print("  schema     Print the JSON Schema of a layout document")
    print("\n=== Development ===")
    print("  dev        Development workflows (test)")
    print("\nExamples:")
    print("  python . resolve page.json               # Print blocks as JSON")
    print("  python . resolve page.json -f tree       # Print an annotated tree")
    print("  cat page.json | python . resolve -       # Read from stdin")
    print("  python . validate page.json")
    print("  python . dev test --unit")


def main() -> int:
    """Main entry point for the CLI."""
    if len(sys.argv) < 2:
        show_help()
        return 1

    command = sys.argv[1]
    rest_args = sys.argv[2:]

    if command in ("-h", "--help"):
        show_help()
        return 0

    commands = {
        "resolve": lambda: handle_resolve_command(rest_args),
        "validate": lambda: handle_validate_command(rest_args),
        "schema": lambda: handle_schema_command(rest_args),
        "dev": lambda: handle_dev_command(rest_args),
    }

    if command in commands:
        setup_logging(get_log_level())
        return commands[command]()

    logger.error(f"Unknown command: {command}")
    show_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
