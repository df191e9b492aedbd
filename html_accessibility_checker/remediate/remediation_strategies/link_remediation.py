# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Remediation strategies for links and buttons without an accessible name.
"""

from bs4 import Tag

from html_accessibility_checker.utils.html_utils import get_unique_selector, has_accessible_name
from html_accessibility_checker.utils.logging_helper import setup_logger
from html_accessibility_checker.remediate.remediation_context import (
    RemediationContext,
    describe_element,
)

# Set up module-level logger
logger = setup_logger(__name__)

DEFAULT_LINK_LABEL = "Descriptive link"
DEFAULT_BUTTON_LABEL = "Button"


def add_link_name(context: RemediationContext, element: Tag) -> None:
    """Set a placeholder aria-label on a link without an accessible name."""
    _add_name(context, element, "link-name", DEFAULT_LINK_LABEL)


def add_button_name(context: RemediationContext, element: Tag) -> None:
    """Set a placeholder aria-label on a button without an accessible name."""
    _add_name(context, element, "button-name", DEFAULT_BUTTON_LABEL)


def _add_name(context: RemediationContext, element: Tag, fix_type: str, label: str) -> None:
    description = describe_element(element)
    if has_accessible_name(element):
        context.skip(f"{description} already has an accessible name, skipped")
        return

    element["aria-label"] = label
    context.record_fix(
        fix_type,
        get_unique_selector(element),
        f'Added aria-label="{label}" to {description}',
    )
