# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Image accessibility remediation strategies.

This module provides remediation strategies for image-related accessibility issues.
"""

from bs4 import Tag

from html_accessibility_checker.utils.logging_helper import setup_logger
from html_accessibility_checker.utils.html_utils import get_unique_selector
from html_accessibility_checker.remediate.remediation_context import (
    RemediationContext,
    describe_element,
)

# Set up module-level logger
logger = setup_logger(__name__)


def add_missing_alt(context: RemediationContext, element: Tag) -> None:
    """
    Give an image an empty alt attribute when it has none.

    An empty alt marks the image as decorative. Writing a meaningful text
    alternative is left to the author.

    Args:
        context: The remediation pass context
        element: The reported image element
    """
    if element.has_attr("alt"):
        context.skip(f"{describe_element(element)} already has alt attribute, skipped")
        return

    element["alt"] = ""
    context.record_fix(
        "image-alt",
        get_unique_selector(element),
        f'Added alt="" to {describe_element(element)}',
    )
