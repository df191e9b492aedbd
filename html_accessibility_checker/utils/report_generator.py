# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Render checker results in various formats.

Every format has two views: the scan results view and, for ``--fix`` runs,
the autofix log view. Output can also be wrapped in a user template that
contains ``{{results}}`` and/or ``{{json}}`` placeholders.
"""

import json
import os
import re
from typing import Any, Dict, List, Optional

from flask import Flask, render_template

from html_accessibility_checker.utils.logging_helper import (
    setup_logger,
    ConfigurationError,
    PersistenceError,
)
from html_accessibility_checker.utils.report_models import DocumentResult

# Set up module-level logger
logger = setup_logger(__name__)

REPORT_FORMATS = ["table", "json", "html", "markdown"]

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")

RESULTS_TITLE = "Accessibility Check Results"
AUTOFIX_TITLE = "Autofix Logs"
NO_AUTOFIX_ACTIONS = "(No autofix actions performed)"

RESULTS_PLACEHOLDER = re.compile(r"\{\{\s*results\s*\}\}")
JSON_PLACEHOLDER = re.compile(r"\{\{\s*json\s*\}\}")


def format_results(
    results: List[DocumentResult], report_format: str = "table", autofix: bool = False
) -> str:
    """
    Render results in the requested format.

    Args:
        results: Per-document results
        report_format: One of 'table', 'json', 'html' or 'markdown'
        autofix: Render the autofix log view instead of the results view

    Returns:
        The rendered text
    """
    report_format = (report_format or "table").lower()
    if report_format == "json":
        return format_as_json(results)
    elif report_format == "html":
        return format_as_html(results, autofix)
    elif report_format == "markdown":
        return format_as_markdown(results, autofix)
    elif report_format != "table":
        logger.warning(f"Unknown report format: {report_format}, using table")
    return format_as_table(results, autofix)


def format_as_json(results: List[DocumentResult]) -> str:
    return json.dumps([r.to_report_dict() for r in results], indent=2)


def format_as_table(results: List[DocumentResult], autofix: bool = False) -> str:
    """
    Render a plain-text summary, one block per document.

    Args:
        results: Per-document results
        autofix: Render the autofix log view

    Returns:
        The rendered text
    """
    lines = ["", AUTOFIX_TITLE if autofix else RESULTS_TITLE, "=" * 50, ""]

    for result in results:
        lines.append(f"File: {result.file}")
        if autofix:
            if result.autofix_log:
                lines.extend(f"  - {entry.message}" for entry in result.autofix_log)
            else:
                lines.append(f"  {NO_AUTOFIX_ACTIONS}")
        else:
            if result.error:
                lines.append(f"  Error: {result.error}")
            lines.append(f"  Passes: {len(result.passes)}")
            lines.append(f"  Violations: {len(result.violations)}")
            lines.append(f"  Incomplete: {len(result.incomplete)}")
            lines.append(f"  Not applicable: {len(result.inapplicable)}")
            if result.violations:
                rule_ids = ", ".join(f.id for f in result.violations)
                lines.append(f"  Violating rules: {rule_ids}")
        lines.append("")

    return "\n".join(lines)


def format_as_markdown(results: List[DocumentResult], autofix: bool = False) -> str:
    """
    Render a Markdown report with a heading and tables per document.

    Args:
        results: Per-document results
        autofix: Render the autofix log view

    Returns:
        The rendered Markdown
    """
    lines = [f"# {AUTOFIX_TITLE if autofix else RESULTS_TITLE}", ""]

    for result in results:
        lines.extend([f"## `{result.file}`", ""])

        if autofix:
            if result.autofix_log:
                lines.extend(f"- {_md_cell(entry.message)}" for entry in result.autofix_log)
            else:
                lines.append(f"_{NO_AUTOFIX_ACTIONS}_")
            lines.append("")
            continue

        if result.error:
            lines.extend([f"**Error:** {result.error}", ""])

        lines.extend(
            [
                "| Outcome | Count |",
                "|---|---|",
                f"| Passes | {len(result.passes)} |",
                f"| Violations | {len(result.violations)} |",
                f"| Incomplete | {len(result.incomplete)} |",
                f"| Not applicable | {len(result.inapplicable)} |",
                "",
            ]
        )

        if result.violations:
            lines.extend(
                [
                    "### Violations",
                    "",
                    "| Rule | Impact | Nodes | Help |",
                    "|---|---|---|---|",
                ]
            )
            for finding in result.violations:
                lines.append(
                    f"| {finding.id} | {finding.impact or ''} | {len(finding.nodes)} "
                    f"| [{_md_cell(finding.help)}]({finding.help_url}) |"
                )
            lines.append("")

    return "\n".join(lines)


def format_as_html(results: List[DocumentResult], autofix: bool = False) -> str:
    """
    Render an HTML report using Flask's render_template.

    Args:
        results: Per-document results
        autofix: Render the autofix log view

    Returns:
        The rendered HTML document
    """
    app = Flask(__name__, template_folder=TEMPLATE_DIR)
    with app.app_context():
        return render_template(
            "report.html",
            title=AUTOFIX_TITLE if autofix else RESULTS_TITLE,
            results=[_template_data(r) for r in results],
            autofix=autofix,
            no_actions=NO_AUTOFIX_ACTIONS,
        )


def apply_template(template_text: str, rendered: str, json_text: str) -> str:
    """
    Substitute rendered output into a user template.

    Args:
        template_text: Template containing ``{{results}}`` and/or ``{{json}}``
        rendered: Output in the requested format
        json_text: JSON rendering of the same results

    Returns:
        The filled-in template
    """
    text = RESULTS_PLACEHOLDER.sub(lambda _: rendered, template_text)
    return JSON_PLACEHOLDER.sub(lambda _: json_text, text)


def render_output(
    results: List[DocumentResult],
    report_format: str = "table",
    autofix: bool = False,
    template_path: Optional[str] = None,
) -> str:
    """
    Render results, optionally through a user template file.

    Raises:
        ConfigurationError: If the template file cannot be read
    """
    rendered = format_results(results, report_format, autofix)
    if not template_path:
        return rendered

    try:
        with open(template_path, "r", encoding="utf-8") as f:
            template_text = f.read()
    except OSError as e:
        raise ConfigurationError(f"Cannot read template {template_path}: {e}") from e

    return apply_template(template_text, rendered, format_as_json(results))


def save_results(
    results: List[DocumentResult],
    output_path: str,
    report_format: str = "json",
    autofix: bool = False,
    template_path: Optional[str] = None,
) -> None:
    """
    Render results and write them to a file.

    Args:
        results: Per-document results
        output_path: Destination file
        report_format: Output format
        autofix: Render the autofix log view
        template_path: Optional user template

    Raises:
        PersistenceError: If the file cannot be written
    """
    text = render_output(results, report_format, autofix, template_path)

    output_dir = os.path.dirname(output_path)
    try:
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise PersistenceError(f"Cannot write results to {output_path}: {e}") from e

    logger.info(f"Results saved to: {output_path}")


def _template_data(result: DocumentResult) -> Dict[str, Any]:
    data = result.to_report_dict()
    data["counts"] = {
        "passes": len(result.passes),
        "violations": len(result.violations),
        "incomplete": len(result.incomplete),
        "inapplicable": len(result.inapplicable),
    }
    return data


def _md_cell(text: str) -> str:
    return (text or "").replace("|", "\\|").replace("\n", " ")
