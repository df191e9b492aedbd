# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Form accessibility remediation strategies.

This module provides remediation strategies for form-related accessibility issues.
"""

import re
from typing import List

from bs4 import Tag

from html_accessibility_checker.utils.html_utils import (
    DocumentTree,
    generate_unique_id,
    get_unique_selector,
)
from html_accessibility_checker.utils.logging_helper import setup_logger
from html_accessibility_checker.remediate.remediation_context import (
    RemediationContext,
    describe_element,
)

# Set up module-level logger
logger = setup_logger(__name__)


def fix_field_label(context: RemediationContext, element: Tag) -> None:
    """
    Make sure a form field has exactly one label.

    A field with no label of any kind gets a <label for=...> inserted right
    before it, and a generated id if it had none. A field with several
    explicit labels keeps the first one; the others lose their ``for``.

    Args:
        context: The remediation pass context
        element: The reported form field
    """
    tree = context.tree
    description = describe_element(element)
    explicit = _explicit_labels(tree, element)

    if len(explicit) > 1:
        for label in explicit[1:]:
            del label["for"]
        context.record_fix(
            "form-field-multiple-label",
            get_unique_selector(element),
            f"Fixed {len(explicit)} labels on {description}: kept the first",
            extra={"removed": len(explicit) - 1},
        )
        return

    if explicit or _has_implicit_label(element):
        context.skip(f"{description} already has a label, skipped")
        return

    generated_id = False
    if not element.get("id"):
        element["id"] = generate_unique_id(tree, _id_base(element))
        generated_id = True

    label_text = _label_text(element)
    label = tree.create_element("label", label_text, for_=element["id"])
    element.insert_before(label)
    context.record_fix(
        "label",
        get_unique_selector(element),
        f"Added label '{label_text}' for {describe_element(element)}",
        extra={"id": element["id"], "generatedId": generated_id},
    )


def _explicit_labels(tree: DocumentTree, element: Tag) -> List[Tag]:
    field_id = element.get("id")
    if not field_id:
        return []
    return [label for label in tree.query_all("label") if label.get("for") == field_id]


def _has_implicit_label(element: Tag) -> bool:
    if element.find_parent("label") is not None:
        return True
    for attr in ("aria-label", "aria-labelledby"):
        if (element.get(attr) or "").strip():
            return True
    return False


def _id_base(element: Tag) -> str:
    if element.name == "input":
        return f"{element.get('type', 'text')}-input"
    return element.name


def _label_text(element: Tag) -> str:
    if (element.get("placeholder") or "").strip():
        return element["placeholder"].strip()
    if (element.get("name") or "").strip():
        # "user_email" -> "User Email"
        words = [w for w in re.split(r"[_\-\s]+", element["name"]) if w]
        return " ".join(word.capitalize() for word in words)
    if element.name == "input":
        return f"{element.get('type', 'text').capitalize()} field"
    return element.name.capitalize()
