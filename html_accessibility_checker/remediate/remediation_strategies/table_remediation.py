# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Table remediation strategies.

This module provides remediation strategies for table-related accessibility issues.
"""

from bs4 import Tag

from html_accessibility_checker.utils.html_utils import get_unique_selector
from html_accessibility_checker.utils.logging_helper import setup_logger
from html_accessibility_checker.remediate.remediation_context import (
    RemediationContext,
    describe_element,
)

# Set up module-level logger
logger = setup_logger(__name__)


def promote_header_row(context: RemediationContext, element: Tag) -> None:
    """
    Turn the first row of a table without header cells into a header row.

    The reported element may be the table itself or any cell inside it.

    Args:
        context: The remediation pass context
        element: The reported element
    """
    table = element if element.name == "table" else element.find_parent("table")
    if table is None:
        context.debug(f"No table found for {describe_element(element)}")
        return

    description = describe_element(table)
    if table.find("th") is not None:
        context.skip(f"{description} already has header cells, skipped")
        return

    first_row = table.find("tr")
    cells = first_row.find_all("td", recursive=False) if first_row is not None else []
    if not cells:
        context.debug(f"{description} has no data cells in its first row")
        return

    for cell in cells:
        cell.name = "th"
        cell["scope"] = "col"

    context.record_fix(
        "table-headers",
        get_unique_selector(table),
        f'Fixed {description}: promoted {len(cells)} first-row cells to <th scope="col">',
        extra={"cells": len(cells)},
    )
