# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Document structure remediation strategies.

This module provides remediation strategies for document-level issues such as
a missing title or a missing document language.
"""

from html_accessibility_checker.utils.html_utils import document_titles
from html_accessibility_checker.utils.logging_helper import setup_logger
from html_accessibility_checker.remediate.remediation_context import RemediationContext

# Set up module-level logger
logger = setup_logger(__name__)


def ensure_document_title(context: RemediationContext) -> None:
    """
    Make sure the document has exactly one non-empty <title>.

    The title text is taken from the first non-empty <h1>, falling back to
    the configured default title. Additional document <title> elements are
    removed. Titles that belong to inline SVG graphics are left alone.

    Args:
        context: The remediation pass context
    """
    tree = context.tree
    titles = document_titles(tree)
    primary = next((t for t in titles if t.get_text(strip=True)), None)

    if primary is None:
        title_text = _title_from_heading(context)
        if titles:
            primary = titles[0]
            primary.string = title_text
            context.record_fix(
                "document-title",
                "title",
                f"Fixed empty document title: set to '{title_text}'",
            )
        else:
            primary = tree.create_element("title", title_text)
            tree.head.append(primary)
            context.record_fix(
                "document-title", "title", f"Added document title '{title_text}'"
            )
    elif len(titles) == 1:
        context.skip("Document title already present, skipped")

    for extra in titles:
        if extra is primary:
            continue
        extra.decompose()
        context.record_fix(
            "document-title", "title", "Fixed duplicate <title>: removed extra element"
        )


def ensure_document_language(context: RemediationContext) -> None:
    """
    Set the root element's lang attribute when it is missing or empty.

    Args:
        context: The remediation pass context
    """
    root = context.tree.root
    current = (root.get("lang") or "").strip()
    if current:
        context.skip(f"Document language already set to '{current}', skipped")
        return

    language = context.option("default_language", "en")
    root["lang"] = language
    context.record_fix(
        "html-has-lang",
        "html",
        f'Added lang="{language}" to <html>',
        extra={"lang": language},
    )


def _title_from_heading(context: RemediationContext) -> str:
    for heading in context.tree.query_all("h1"):
        text = heading.get_text(" ", strip=True)
        if text:
            return text
    return context.option("default_title", "Untitled document")
