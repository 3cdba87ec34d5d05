#!/usr/bin/env python3
"""
Command-line entry point: resolve a responsive option from JSON files.

Usage:
    responsive-query sticky_header --settings widget.json
    responsive-query sticky_header --settings widget.json --suffix "and (hover: hover)"
    responsive-query sticky_header --settings widget.json --check
    responsive-query sticky_header --settings widget.json --selector ".header" \\
        --declaration position:sticky --declaration top:0

Exit codes:
    0: Success (with --check: option enabled somewhere)
    1: With --check: option enabled nowhere
    2: Invalid input files or configuration
"""

import argparse
import json
import sys
from pathlib import Path

from .core.logging_config import get_logger, setup_logging
from .domain.breakpoints import BreakpointRegistry
from .domain.settings import MappingSettingsSource
from .framework.css_rules import render_responsive_rule
from .framework.responsive import ResponsiveOptions
from .secure_config import ConfigurationError, get_config, load_breakpoints_file

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_NOT_ENABLED = 1
EXIT_INVALID_INPUT = 2


def parse_declaration(text: str) -> tuple[str, str]:
    """Parse ``property:value`` into a declaration pair."""
    prop, sep, value = text.partition(":")
    if not sep or not prop.strip() or not value.strip():
        raise argparse.ArgumentTypeError(f"declaration must look like property:value, got {text!r}")
    return prop.strip(), value.strip()


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="responsive-query",
        description="Build the CSS media query for a responsive page-builder option",
    )

    parser.add_argument("option", help="Base option name (e.g. sticky_header)")
    parser.add_argument("--settings", type=Path, required=True, help="JSON object of widget settings")
    parser.add_argument(
        "--breakpoints",
        type=Path,
        default=None,
        help="JSON breakpoint config (default: RESPONSIVE_BREAKPOINTS_FILE or standard breakpoints)",
    )
    parser.add_argument("--suffix", default="", help="Condition appended to every query fragment")
    parser.add_argument("--enabled-value", default=None, help="Value marking the option as enabled")
    parser.add_argument("--check", action="store_true", help="Only report whether the option is enabled anywhere")
    parser.add_argument("--selector", default=None, help="Wrap the query in an @media rule for this selector")
    parser.add_argument(
        "--declaration",
        action="append",
        type=parse_declaration,
        default=[],
        help="property:value declaration for --selector (repeatable)",
    )
    parser.add_argument("--log-level", default=None, help="Log level (default: RESPONSIVE_LOG_LEVEL or INFO)")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON structured logs")

    return parser.parse_args(argv)


def load_settings(path: Path) -> MappingSettingsSource:
    """
    Load widget settings from a JSON object file.

    Raises:
        ConfigurationError: If the file is unreadable or not a JSON object
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read settings file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file {path} must contain a JSON object")

    return MappingSettingsSource(data)


def main(argv: list[str] | None = None) -> int:
    """
    Run the CLI.

    Returns:
        int: Process exit code
    """
    args = parse_arguments(argv)

    try:
        config = get_config()
        responsive_config = config.get_responsive_config()
        setup_logging(level=args.log_level or responsive_config.log_level, json_output=args.json_logs)

        registry: BreakpointRegistry = (
            load_breakpoints_file(args.breakpoints) if args.breakpoints else config.get_registry()
        )
        settings_source = load_settings(args.settings)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_INVALID_INPUT

    options = ResponsiveOptions(
        registry,
        settings_source,
        enabled_value=args.enabled_value or responsive_config.enabled_value,
    )

    if args.check:
        enabled = options.has_enabled_anywhere(args.option)
        print("true" if enabled else "false")
        return EXIT_OK if enabled else EXIT_NOT_ENABLED

    if args.selector:
        print(render_responsive_rule(options, args.option, args.selector, args.declaration, args.suffix))
    else:
        print(options.get_media_query_string(args.option, args.suffix))

    logger.info(f"Resolved responsive option '{args.option}'")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
