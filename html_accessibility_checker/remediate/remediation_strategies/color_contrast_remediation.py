# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Color contrast remediation strategy.

Low-contrast text is not recolored; it gets a visible outline so its bounds
remain perceivable.
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

OUTLINE_DECLARATION = "outline: 2px solid #000000"


def add_contrast_outline(context: RemediationContext, element: Tag) -> None:
    """
    Append a visible outline to an element reported for low color contrast.

    The existing declarations are kept exactly as written. The outline is
    appended last so it wins over any earlier outline in the same attribute.

    Args:
        context: The remediation pass context
        element: The reported element
    """
    original = element.get("style", "")
    existing = original.rstrip().rstrip(";").rstrip()

    description = describe_element(element)
    if existing.endswith(OUTLINE_DECLARATION):
        context.skip(f"{description} already has a contrast outline, skipped")
        return

    element["style"] = f"{existing}; {OUTLINE_DECLARATION}" if existing else OUTLINE_DECLARATION
    context.record_fix(
        "color-contrast",
        get_unique_selector(element),
        f"Added outline ({OUTLINE_DECLARATION}) to {description} for low contrast",
    )
