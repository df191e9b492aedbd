# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Link and button name checks.
"""

from html_accessibility_checker.audit.base_check import AccessibilityCheck
from html_accessibility_checker.utils.html_utils import has_accessible_name


class LinkNameCheck(AccessibilityCheck):
    """Check that links have discernible text (WCAG 2.4.4, 4.1.2)."""

    rule_ids = ("link-name",)

    def check(self) -> None:
        for link in self.find_elements("a[href]"):
            if self.get_attribute(link, "role").lower() in ("none", "presentation"):
                continue
            if has_accessible_name(link):
                self.report_pass("link-name", link)
            else:
                self.report_violation(
                    "link-name",
                    link,
                    "Element does not have text that is visible to screen readers",
                )


class ButtonNameCheck(AccessibilityCheck):
    """Check that buttons have discernible text (WCAG 4.1.2)."""

    rule_ids = ("button-name",)

    def check(self) -> None:
        for button in self.find_elements('button, input[type="button"], [role="button"]'):
            if has_accessible_name(button):
                self.report_pass("button-name", button)
            else:
                self.report_violation(
                    "button-name",
                    button,
                    "Element does not have inner text that is visible to screen readers",
                )
