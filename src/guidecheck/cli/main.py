"""CLI entrypoint for the Guidecheck style rule checker."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from guidecheck import __version__
from guidecheck.checker import check_files
from guidecheck.constants.branding import CLI_DESCRIPTION
from guidecheck.constants.reporting import (
    EXIT_CLEAN,
    EXIT_CONFIG_ERROR,
    EXIT_VIOLATIONS,
    OUTPUT_FORMAT_JSON,
    OUTPUT_FORMAT_TEXT,
    VALID_OUTPUT_FORMATS,
)
from guidecheck.exceptions import ConfigurationError, FactFileError
from guidecheck.exceptions.validation import format_errors
from guidecheck.reporting import StdoutReporter, render_json_report, write_report
from guidecheck.rules import builtin_rule_descriptions
from guidecheck.validation import preflight_validate

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="guidecheck",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Check fact files against the enabled style rules")
    check.add_argument("facts", nargs="+", type=Path, help="Fact files (.json, .yaml, .yml)")
    check.add_argument("-r", "--root", type=Path, default=Path("."), help="Project root holding guidecheck.yaml")
    check.add_argument("-c", "--config", type=Path, help="Explicit config file")
    check.add_argument(
        "-e",
        "--enable",
        action="append",
        default=[],
        metavar="RULE_ID",
        help="Enable a rule for this run (repeat flag for multiple values)",
    )
    check.add_argument(
        "-d",
        "--disable",
        action="append",
        default=[],
        metavar="RULE_ID",
        help="Disable a rule for this run (repeat flag for multiple values)",
    )
    check.add_argument(
        "-F",
        "--format",
        choices=VALID_OUTPUT_FORMATS,
        default=OUTPUT_FORMAT_TEXT,
        help="Stdout format: text (default) or json",
    )
    check.add_argument("-o", "--output", type=Path, default=None, help="Also write a JSON report to this path")
    check.add_argument("--no-color", action="store_true", help="Disable colored output")
    check.add_argument("-v", "--verbose", action="store_true", help="Show run summary and debug logging")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without checking")
    validate.add_argument("-r", "--root", type=Path, default=Path("."), help="Project root holding guidecheck.yaml")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    subparsers.add_parser("list-rules", help="List built-in rules")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    verbose = getattr(args, "verbose", False)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return _handle_validate_config(args)
    if args.command == "list-rules":
        return _handle_list_rules()
    if args.command != "check":
        parser.error(f"Unsupported command: {args.command}")

    validation_errors = preflight_validate(root=args.root, config_path=args.config)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return EXIT_CONFIG_ERROR

    try:
        result = check_files(
            args.facts,
            root=args.root,
            config_path=args.config,
            enable_rules=tuple(args.enable),
            disable_rules=tuple(args.disable),
        )
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except FactFileError as exc:
        print(f"Fact file error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if args.output is not None:
        write_report(args.output, result)
        logger.info("Wrote report to %s", args.output)

    if args.format == OUTPUT_FORMAT_JSON:
        print(render_json_report(result))
    else:
        use_color = not args.no_color and sys.stdout.isatty()
        print(StdoutReporter(result, color=use_color, verbose=verbose).render())

    return EXIT_VIOLATIONS if result.violations else EXIT_CLEAN


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = preflight_validate(root=args.root, config_path=args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return EXIT_CONFIG_ERROR

    print("Configuration is valid.")
    return EXIT_CLEAN


def _handle_list_rules() -> int:
    """Print the built-in rule catalog in registration order."""
    rows = builtin_rule_descriptions()
    width = max(len(rule_id) for rule_id, _, _ in rows)
    for rule_id, kind, description in rows:
        print(f"{rule_id:<{width}}  {kind:<13}  {description}")
    return EXIT_CLEAN


if __name__ == "__main__":
    raise SystemExit(main())
