# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Heading structure accessibility checks.
"""

from html_accessibility_checker.audit.base_check import AccessibilityCheck
from html_accessibility_checker.utils.html_utils import HEADING_TAGS


class HeadingOrderCheck(AccessibilityCheck):
    """Check that heading levels only increase by one."""

    rule_ids = ("heading-order",)

    def check(self) -> None:
        previous_level = 0
        for heading in self.find_elements(", ".join(HEADING_TAGS)):
            level = int(heading.name[1])
            if level > previous_level + 1:
                self.report_violation(
                    "heading-order",
                    heading,
                    f"Heading level jumps from {previous_level or 'none'} to {level}",
                )
            else:
                self.report_pass("heading-order", heading)
            previous_level = level


class PageHasHeadingOneCheck(AccessibilityCheck):
    """Check that the page has at least one level-one heading."""

    rule_ids = ("page-has-heading-one",)

    def check(self) -> None:
        root = self.tree.root
        if self.find_elements('h1, [role="heading"][aria-level="1"]'):
            self.report_pass("page-has-heading-one", root)
        else:
            self.report_violation(
                "page-has-heading-one",
                root,
                "Page must have a level-one heading",
            )
