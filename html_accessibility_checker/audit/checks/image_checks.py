# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Image accessibility checks.
"""

from html_accessibility_checker.audit.base_check import AccessibilityCheck

PRESENTATIONAL_ROLES = {"none", "presentation"}


class ImageAltCheck(AccessibilityCheck):
    """Check that images have a text alternative (WCAG 1.1.1)."""

    rule_ids = ("image-alt",)

    def check(self) -> None:
        for img in self.find_elements("img"):
            if img.has_attr("alt"):
                self.report_pass("image-alt", img)
            elif self.get_attribute(img, "role").lower() in PRESENTATIONAL_ROLES:
                self.report_pass("image-alt", img)
            elif any(
                self.get_attribute(img, attr)
                for attr in ("aria-label", "aria-labelledby", "title")
            ):
                self.report_pass("image-alt", img)
            else:
                self.report_violation(
                    "image-alt",
                    img,
                    "Element does not have an alt attribute",
                )
