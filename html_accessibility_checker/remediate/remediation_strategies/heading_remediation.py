# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Heading remediation strategies.

This module provides remediation strategies for heading-related accessibility issues.
"""

from html_accessibility_checker.utils.logging_helper import setup_logger
from html_accessibility_checker.utils.html_utils import get_unique_selector
from html_accessibility_checker.remediate.remediation_context import RemediationContext
from html_accessibility_checker.remediate.remediation_strategies.landmark_remediation import (
    get_primary_main,
)

# Set up module-level logger
logger = setup_logger(__name__)


def ensure_top_level_heading(context: RemediationContext) -> None:
    """
    Add an <h1> at the start of the main landmark when the document has none.

    The heading text comes from the document title, or the configured default
    heading when there is no title.

    Args:
        context: The remediation pass context
    """
    tree = context.tree
    if tree.query_all("h1"):
        context.skip("Top-level heading already present, skipped")
        return

    heading = tree.create_element("h1", _heading_text(context))
    container = get_primary_main(tree) or tree.body
    container.insert(0, heading)
    context.record_fix(
        "page-has-heading-one",
        get_unique_selector(heading),
        f"Added <h1> '{heading.string}' to <{container.name}>",
    )


def relocate_top_level_headings(context: RemediationContext) -> None:
    """
    Move <h1> elements that sit outside the main landmark into it.

    Relocated headings keep their relative order and go to the start of the
    landmark. A heading that contains the landmark is left alone.

    Args:
        context: The remediation pass context
    """
    tree = context.tree
    main = get_primary_main(tree)
    if main is None:
        context.debug("No main landmark; top-level headings not relocated")
        return

    outside = []
    for heading in tree.query_all("h1"):
        if any(parent is main for parent in heading.parents):
            continue
        if any(parent is heading for parent in main.parents):
            continue
        outside.append(heading)

    if not outside:
        context.skip("Top-level headings already inside main landmark, skipped")
        return

    for position, heading in enumerate(outside):
        main.insert(position, heading.extract())
        context.record_fix(
            "heading-relocation",
            get_unique_selector(heading),
            "Fixed <h1> outside main landmark: moved into <main>",
        )


def add_missing_h1(context: RemediationContext) -> None:
    """
    Insert a default <h1> as the first body child if the document has no <h1>.

    Args:
        context: The remediation pass context
    """
    tree = context.tree
    if tree.query_all("h1"):
        context.skip("Heading order: <h1> already present, skipped")
        return

    heading = tree.create_element("h1", context.option("default_heading", "Main content"))
    tree.body.insert(0, heading)
    context.record_fix(
        "heading-order",
        get_unique_selector(heading),
        f"Added missing <h1> '{heading.string}' as first body element",
    )


def _heading_text(context: RemediationContext) -> str:
    title = context.tree.query_one("title")
    if title is not None and title.get_text(strip=True):
        return title.get_text(" ", strip=True)
    return context.option("default_heading", "Main content")
