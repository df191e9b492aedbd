# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
ARIA and keyboard accessibility checks.
"""

from html_accessibility_checker.audit.base_check import AccessibilityCheck
from html_accessibility_checker.utils.html_utils import ARIA_ATTRIBUTES, has_valid_role


class AriaRolesCheck(AccessibilityCheck):
    """Check that role attributes use valid ARIA roles."""

    rule_ids = ("aria-roles",)

    def check(self) -> None:
        for element in self.find_elements("[role]"):
            role = self.get_attribute(element, "role")
            if not role:
                continue
            if has_valid_role(element):
                self.report_pass("aria-roles", element)
            else:
                self.report_violation(
                    "aria-roles",
                    element,
                    f"Role must be one of the valid ARIA roles: '{role}' is not",
                )


class AriaValidAttrCheck(AccessibilityCheck):
    """Check that aria-* attributes are valid ARIA attribute names."""

    rule_ids = ("aria-valid-attr",)

    def check(self) -> None:
        for element in self.tree.iter_elements():
            aria_attrs = [name for name in element.attrs if name.startswith("aria-")]
            if not aria_attrs:
                continue
            invalid = [name for name in aria_attrs if name.lower() not in ARIA_ATTRIBUTES]
            if invalid:
                self.report_violation(
                    "aria-valid-attr",
                    element,
                    f"Invalid ARIA attribute name: {', '.join(invalid)}",
                )
            else:
                self.report_pass("aria-valid-attr", element)


class TabindexCheck(AccessibilityCheck):
    """Check that no element has a tabindex greater than zero."""

    rule_ids = ("tabindex",)

    def check(self) -> None:
        for element in self.find_elements("[tabindex]"):
            try:
                value = int(self.get_attribute(element, "tabindex"))
            except ValueError:
                continue
            if value > 0:
                self.report_violation(
                    "tabindex", element, f"Element has a tabindex greater than 0 ({value})"
                )
            else:
                self.report_pass("tabindex", element)
