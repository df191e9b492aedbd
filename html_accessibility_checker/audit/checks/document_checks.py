# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Document-level accessibility checks: title and language.
"""

from html_accessibility_checker.audit.base_check import AccessibilityCheck
from html_accessibility_checker.utils.html_utils import document_titles


class DocumentTitleCheck(AccessibilityCheck):
    """Check for a non-empty document title (WCAG 2.4.2)."""

    rule_ids = ("document-title",)

    def check(self) -> None:
        root = self.tree.root
        titles = document_titles(self.tree)
        if not titles:
            self.report_violation(
                "document-title", root, "Document does not have a <title> element"
            )
        elif not any(self.get_element_text(title) for title in titles):
            self.report_violation(
                "document-title", root, "Document has an empty <title> element"
            )
        else:
            self.report_pass("document-title", root)


class DocumentLanguageCheck(AccessibilityCheck):
    """Check that the root element declares a language (WCAG 3.1.1)."""

    rule_ids = ("html-has-lang",)

    def check(self) -> None:
        root = self.tree.root
        if self.get_attribute(root, "lang") or self.get_attribute(root, "xml:lang"):
            self.report_pass("html-has-lang", root)
        else:
            self.report_violation(
                "html-has-lang",
                root,
                "The <html> element does not have a lang attribute",
            )
