# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Command-line interface for the html_accessibility_checker package.

This module provides the ``a11y-check`` command: ``check`` scans (and
optionally fixes) HTML files or URLs, ``init`` writes a default
configuration file.
"""

import os
import sys
import argparse
import logging
from copy import deepcopy
from typing import Any, Dict, List, Optional

from html_accessibility_checker import __version__
from html_accessibility_checker.checker import AccessibilityChecker
from html_accessibility_checker.utils.config import (
    config_manager,
    save_config,
    DEFAULT_CONFIG_FILENAME,
)
from html_accessibility_checker.utils.logging_helper import (
    setup_logger,
    ConfigurationError,
    DocumentAccessibilityError,
)
from html_accessibility_checker.utils.report_generator import (
    REPORT_FORMATS,
    NO_AUTOFIX_ACTIONS,
    render_output,
    save_results,
)
from html_accessibility_checker.utils.report_models import (
    AuditCategory,
    DocumentResult,
    FixMode,
)

# Set up module-level logger
logger = setup_logger(__name__)

PACKAGE_LOGGER_PREFIX = "html_accessibility_checker"


def configure_logging(debug: bool = False, quiet: bool = False) -> None:
    """Configure logging based on debug and quiet flags."""
    if quiet:
        level = logging.ERROR
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level)

    # Package loggers set their own level when created
    for name in list(logging.Logger.manager.loggerDict):
        if name.startswith(PACKAGE_LOGGER_PREFIX):
            logger_obj = logging.getLogger(name)
            logger_obj.setLevel(level)
            for handler in logger_obj.handlers:
                handler.setLevel(level)


def parse_rule_list(value: Optional[str]) -> Optional[List[str]]:
    """Split a comma-separated rule list, dropping blanks."""
    if not value:
        return None
    rules = [rule.strip() for rule in value.split(",") if rule.strip()]
    return rules or None


def _add_check_arguments(parser: argparse.ArgumentParser) -> None:
    """Add arguments for the check command."""
    parser.add_argument("inputs", nargs="+", help="HTML files or http(s) URLs to check")
    parser.add_argument(
        "--format",
        "-f",
        choices=REPORT_FORMATS,
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--rules",
        help="Comma-separated list of rules to fix (e.g. image-alt,label,region)",
    )
    parser.add_argument(
        "--disable-rule",
        help="Comma-separated list of rules never to fix (e.g. color-contrast,tabindex)",
    )
    parser.add_argument("--output", "-o", help="Output file path")
    parser.add_argument(
        "--fix", action="store_true", help="Attempt to auto-fix common accessibility issues"
    )
    parser.add_argument(
        "--fix-dry-run",
        dest="fix_dry_run",
        action="store_true",
        help="Show what would be fixed without changing files (default when --fix is set)",
    )
    parser.add_argument(
        "--no-fix-dry-run",
        dest="fix_dry_run",
        action="store_false",
        help="Write fixes to disk, keeping a .bak backup (use with --fix)",
    )
    parser.set_defaults(fix_dry_run=None)
    parser.add_argument(
        "--template",
        help="Template file with {{results}} and/or {{json}} placeholders",
    )
    parser.add_argument("--config", "-c", help="Path to configuration file")
    parser.add_argument("--verbose", action="store_true", help="Verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Debug output (implies --verbose)"
    )
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Only log errors"
    )


def _add_init_arguments(parser: argparse.ArgumentParser) -> None:
    """Add arguments for the init command."""
    parser.add_argument(
        "--path",
        default=DEFAULT_CONFIG_FILENAME,
        help="Where to write the configuration file",
    )
    parser.add_argument(
        "--force", action="store_true", help="Overwrite an existing configuration file"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="a11y-check",
        description="Accessibility testing for HTML files and URLs, with optional auto-fix.",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    check_parser = subparsers.add_parser(
        "check", help="Run accessibility checks on HTML files or URLs"
    )
    _add_check_arguments(check_parser)

    init_parser = subparsers.add_parser(
        "init", help="Initialize accessibility configuration"
    )
    _add_init_arguments(init_parser)

    # Version information
    parser.add_argument(
        "--version", action="store_true", help="Show version information"
    )

    return parser


def load_configuration(config_path: Optional[str]) -> None:
    """
    Load a configuration file into the shared config manager.

    Without an explicit path, ``.a11ycheckrc.yaml`` in the working directory
    is used when present.

    Raises:
        ConfigurationError: If the file cannot be loaded
    """
    if config_path:
        logger.info(f"Loading configuration from {config_path}")
        config_manager.load_file(config_path)
    elif os.path.isfile(DEFAULT_CONFIG_FILENAME):
        logger.debug(f"Loading configuration from {DEFAULT_CONFIG_FILENAME}")
        config_manager.load_file(DEFAULT_CONFIG_FILENAME)


def build_checker_options(args: Dict[str, Any]) -> Dict[str, Any]:
    """
    Translate parsed check arguments into checker options.

    Options left unset are None so configuration values apply.
    """
    fix = True if args.get("fix") else None
    verbose = True if args.get("verbose") or args.get("debug") else None
    return {
        "fix": fix,
        "dry_run": args.get("fix_dry_run") if fix else None,
        "include_rules": parse_rule_list(args.get("rules")),
        "exclude_rules": parse_rule_list(args.get("disable_rule")),
        "verbose": verbose,
    }


def count_autofix_actions(results: List[DocumentResult]) -> Dict[str, int]:
    """
    Count applied and skipped autofix entries across a batch.

    A document with an empty autofix log counts as one skipped action.
    """
    fixed = 0
    skipped = 0
    for result in results:
        if not result.autofix_log:
            skipped += 1
            continue
        for entry in result.autofix_log:
            if entry.category == AuditCategory.APPLIED.value:
                fixed += 1
            elif entry.category == AuditCategory.SKIPPED.value:
                skipped += 1
    return {"fixed": fixed, "skipped": skipped, "files": len(results)}


def format_autofix_summary(results: List[DocumentResult], verbose: bool = False) -> str:
    """
    Build the per-file autofix log listing and the batch summary.

    Args:
        results: Per-document results
        verbose: Show diagnostic and uncategorized entries

    Returns:
        The text to print after the report
    """
    lines = []
    for result in results:
        lines.append(f"Autofix log for {result.file}:")
        if not result.autofix_log:
            lines.append(f"  {NO_AUTOFIX_ACTIONS}")
            continue
        for entry in result.autofix_log:
            if entry.category == AuditCategory.DEBUG.value:
                if verbose:
                    lines.append(f"  \U0001F41E {entry.message}")
            elif entry.category == AuditCategory.APPLIED.value:
                lines.append(f"  ✔ {entry.message}")
            elif entry.category == AuditCategory.SKIPPED.value:
                lines.append(f"  ⚠ {entry.message}")
            elif verbose:
                lines.append(f"  {entry.message}")

    counts = count_autofix_actions(results)
    lines.extend(
        [
            "",
            "Summary:",
            f"  ✔ Fixed: {counts['fixed']}",
            f"  ⚠ Skipped/No action: {counts['skipped']}",
            f"  Files processed: {counts['files']}",
        ]
    )
    return "\n".join(lines)


def run_check_command(args: Dict[str, Any]) -> int:
    """Run the accessibility check command."""
    try:
        load_configuration(args.get("config"))

        options = build_checker_options(args)
        checker = AccessibilityChecker(options)
        output_config = config_manager.get_config(
            {
                "format": args.get("format"),
                "template": args.get("template"),
                "verbose": options["verbose"],
            },
            section="output",
        )
        report_format = output_config.get("format", "table")
        template = output_config.get("template")
        autofix = checker.mode != FixMode.REPORT_ONLY

        results = checker.check_files(args["inputs"])

        if args.get("output"):
            save_results(results, args["output"], report_format, autofix, template)
            label = "Autofix log" if autofix else "Results"
            print(f"{label} saved to: {args['output']}")

        print(render_output(results, report_format, autofix, template))
        print(format_autofix_summary(results, verbose=bool(output_config.get("verbose"))))
        return 0

    except DocumentAccessibilityError as e:
        logger.error(f"Error running accessibility checks: {e}")
        print(f"Error: {e}")
        return 1
    except Exception as e:
        logger.error(f"Unexpected error running accessibility checks: {e}", exc_info=True)
        print(f"Error: {e}")
        return 1


def run_init_command(args: Dict[str, Any]) -> int:
    """Write the default configuration file."""
    path = args.get("path") or DEFAULT_CONFIG_FILENAME
    if os.path.exists(path) and not args.get("force"):
        print(f"Error: {path} already exists (use --force to overwrite)")
        return 1

    print("Initializing accessibility configuration...")
    try:
        save_config(deepcopy(config_manager.defaults), path)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        print(f"Error: {e}")
        return 1

    print(f"Configuration initialized: {path}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"a11y-check v{__version__}")
        return 0

    if args.command is None:
        parser.print_help()
        return 0

    args_dict = vars(args)
    configure_logging(debug=args_dict.get("debug", False), quiet=args_dict.get("quiet", False))

    if args.command == "check":
        return run_check_command(args_dict)
    elif args.command == "init":
        return run_init_command(args_dict)

    print("No command specified")
    return 1


if __name__ == "__main__":
    sys.exit(main())
