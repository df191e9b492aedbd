# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Duplicate id remediation strategy.
"""

from bs4 import Tag

from html_accessibility_checker.utils.html_utils import generate_unique_id, get_unique_selector
from html_accessibility_checker.utils.logging_helper import setup_logger
from html_accessibility_checker.remediate.remediation_context import (
    RemediationContext,
    describe_element,
)

# Set up module-level logger
logger = setup_logger(__name__)


def resolve_duplicate_id(context: RemediationContext, element: Tag) -> None:
    """
    Rename every later holder of the element's id.

    The first element in document order keeps the id; each later one gets a
    fresh ``<id>-<n>`` value. An id value is resolved at most once per pass.

    Args:
        context: The remediation pass context
        element: Any element reported as carrying a duplicate id
    """
    value = element.get("id")
    if not value:
        context.debug(f"{describe_element(element)} has no id to deduplicate")
        return

    if value in context.seen_ids:
        context.debug(f'id "{value}" already resolved in this pass')
        return

    holders = context.tree.soup.find_all(attrs={"id": value})
    if len(holders) <= 1:
        context.skip(f'id "{value}" already unique, skipped')
        return

    context.seen_ids.add(value)
    for holder in holders[1:]:
        new_id = generate_unique_id(context.tree, value)
        holder["id"] = new_id
        context.record_fix(
            "duplicate-id",
            get_unique_selector(holder),
            f'Fixed duplicate id "{value}" on <{holder.name}>: renamed to "{new_id}"',
            extra={"original": value, "renamed": new_id},
        )
