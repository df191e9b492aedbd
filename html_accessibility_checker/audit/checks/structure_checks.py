# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Document structure checks: unique ids and table headers.
"""

from collections import Counter

from html_accessibility_checker.audit.base_check import AccessibilityCheck


class DuplicateIdCheck(AccessibilityCheck):
    """Check that every id attribute value is unique (WCAG 4.1.1)."""

    rule_ids = ("duplicate-id",)

    def check(self) -> None:
        elements = [e for e in self.find_elements("[id]") if self.get_attribute(e, "id")]
        counts = Counter(e["id"] for e in elements)
        for element in elements:
            if counts[element["id"]] > 1:
                self.report_violation(
                    "duplicate-id",
                    element,
                    f"Document has multiple elements with the id \"{element['id']}\"",
                )
            else:
                self.report_pass("duplicate-id", element)


class TableHeadersCheck(AccessibilityCheck):
    """Check that data tables have header cells (WCAG 1.3.1)."""

    rule_ids = ("table-headers",)

    def check(self) -> None:
        for table in self.find_elements("table"):
            if self.get_attribute(table, "role").lower() in ("none", "presentation"):
                continue
            if table.find("td") is None:
                continue
            if table.find("th") is not None:
                self.report_pass("table-headers", table)
            else:
                self.report_violation(
                    "table-headers", table, "Table does not have any <th> header cells"
                )
