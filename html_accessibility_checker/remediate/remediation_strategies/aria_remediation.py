# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
ARIA and keyboard-focus remediation strategies.
"""

from bs4 import Tag

from html_accessibility_checker.utils.logging_helper import setup_logger
from html_accessibility_checker.utils.html_utils import get_unique_selector, has_valid_role
from html_accessibility_checker.remediate.remediation_context import (
    RemediationContext,
    describe_element,
)

# Set up module-level logger
logger = setup_logger(__name__)

DEFAULT_ROLE = "region"


def add_region_role(context: RemediationContext, element: Tag) -> None:
    """
    Give an element role="region" unless it already has a valid ARIA role.

    An unknown role value counts as no role and is replaced.

    Args:
        context: The remediation pass context
        element: The reported element
    """
    description = describe_element(element)
    if has_valid_role(element):
        context.skip(f"{description} already has role=\"{element['role']}\", skipped")
        return

    previous = element.get("role")
    element["role"] = DEFAULT_ROLE
    if previous is None:
        message = f'Added role="{DEFAULT_ROLE}" to {description}'
    else:
        message = f'Fixed invalid role="{previous}" on {description}: replaced with "{DEFAULT_ROLE}"'
    context.record_fix(
        "aria-role",
        get_unique_selector(element),
        message,
        extra={"previous": previous} if previous is not None else None,
    )


def remove_positive_tabindex(context: RemediationContext, element: Tag) -> None:
    """
    Remove a tabindex attribute whose value is a positive integer.

    Args:
        context: The remediation pass context
        element: The reported element
    """
    description = describe_element(element)
    raw_value = element.get("tabindex")
    if raw_value is None:
        context.skip(f"{description} has no tabindex, skipped")
        return

    try:
        value = int(str(raw_value).strip())
    except ValueError:
        context.skip(f"{description} has non-numeric tabindex '{raw_value}', skipped")
        return

    if value <= 0:
        context.skip(f"{description} tabindex already non-positive, skipped")
        return

    selector = get_unique_selector(element)
    del element["tabindex"]
    context.record_fix(
        "tabindex",
        selector,
        f'Fixed positive tabindex="{value}" on {description}: removed',
        extra={"tabindex": value},
    )
