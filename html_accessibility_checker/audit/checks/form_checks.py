# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Form accessibility checks.

This module provides checks for form field labelling.
"""

from typing import List

from bs4 import Tag

from html_accessibility_checker.audit.base_check import AccessibilityCheck

# Input types that are labelled by their value or are not exposed at all
UNLABELLED_INPUT_TYPES = {"hidden", "submit", "reset", "button", "image"}


class FormCheckMixin:
    """Helpers shared by the form checks."""

    def form_fields(self) -> List[Tag]:
        fields = []
        for field in self.find_elements("input, select, textarea"):
            if field.name == "input":
                field_type = self.get_attribute(field, "type").lower() or "text"
                if field_type in UNLABELLED_INPUT_TYPES:
                    continue
            fields.append(field)
        return fields

    def explicit_labels(self, field: Tag) -> List[Tag]:
        field_id = self.get_attribute(field, "id")
        if not field_id:
            return []
        return [
            label
            for label in self.find_elements("label")
            if self.get_attribute(label, "for") == field_id
        ]


class FormLabelCheck(FormCheckMixin, AccessibilityCheck):
    """Check that every form field has a label (WCAG 1.3.1, 4.1.2)."""

    rule_ids = ("label",)

    def check(self) -> None:
        for field in self.form_fields():
            if (
                self.explicit_labels(field)
                or field.find_parent("label") is not None
                or self.get_attribute(field, "aria-label")
                or self.get_attribute(field, "aria-labelledby")
                or self.get_attribute(field, "title")
            ):
                self.report_pass("label", field)
            else:
                self.report_violation(
                    "label",
                    field,
                    "Form element does not have an implicit (wrapped) <label>, "
                    "an explicit <label> or an aria-label",
                )


class MultipleLabelCheck(FormCheckMixin, AccessibilityCheck):
    """Check that no form field has more than one explicit label."""

    rule_ids = ("form-field-multiple-label",)

    def check(self) -> None:
        for field in self.form_fields():
            labels = self.explicit_labels(field)
            if len(labels) > 1:
                self.report_violation(
                    "form-field-multiple-label",
                    field,
                    f"Form field has {len(labels)} label elements",
                )
            elif labels:
                self.report_pass("form-field-multiple-label", field)
