# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Remediation strategies for landmark accessibility issues.

This module provides functions for remediating landmark accessibility issues:
the single main landmark and the skip link that targets it.
"""

from typing import List, Optional

from bs4 import NavigableString, Tag

from html_accessibility_checker.utils.html_utils import DocumentTree, generate_unique_id
from html_accessibility_checker.utils.logging_helper import setup_logger
from html_accessibility_checker.remediate.remediation_context import (
    RemediationContext,
    describe_element,
)

# Set up module-level logger
logger = setup_logger(__name__)

SKIP_LINK_ID = "skip-link"
SKIP_LINK_TEXT = "Skip to main content"
MAIN_CONTENT_ID = "main-content"

MAIN_LANDMARK_SELECTOR = 'main, [role="main"]'

# Body children that stay outside the generated <main>
OUTSIDE_MAIN_TAGS = {"header", "nav", "footer", "script", "template", "noscript"}
OUTSIDE_MAIN_ROLES = {"banner", "navigation", "contentinfo"}


def find_main_landmarks(tree: DocumentTree) -> List[Tag]:
    """Return every main landmark (<main> or role="main") in document order."""
    return tree.query_all(MAIN_LANDMARK_SELECTOR)


def get_primary_main(tree: DocumentTree) -> Optional[Tag]:
    landmarks = find_main_landmarks(tree)
    return landmarks[0] if landmarks else None


def ensure_main_landmark(context: RemediationContext) -> None:
    """
    Make sure the document has exactly one main landmark.

    When there is none, body content other than header, navigation and footer
    regions is wrapped into a new <main>. Extra main landmarks are demoted so
    that only the first one remains.

    Args:
        context: The remediation pass context
    """
    tree = context.tree
    landmarks = find_main_landmarks(tree)

    if not landmarks:
        _wrap_body_in_main(context)
        return

    if len(landmarks) == 1:
        context.skip("Main landmark already present, skipped")
        return

    for extra in landmarks[1:]:
        description = describe_element(extra)
        if extra.name == "main":
            extra.name = "div"
        if (extra.get("role") or "").strip().lower() == "main":
            del extra["role"]
        context.record_fix(
            "landmark-one-main",
            description,
            f"Fixed extra main landmark {description}: demoted to <{extra.name}>",
        )


def add_skip_link(context: RemediationContext) -> None:
    """
    Insert a "Skip to main content" link as the first element of the body.

    Args:
        context: The remediation pass context
    """
    tree = context.tree
    if tree.query_one(f"#{SKIP_LINK_ID}") is not None:
        context.skip("Skip link already present, skipped")
        return

    main = get_primary_main(tree)
    if main is None:
        ensure_main_landmark(context)
        main = get_primary_main(tree)

    if not main.get("id"):
        main["id"] = _free_id(tree, MAIN_CONTENT_ID)
        context.record_fix(
            "skip-link-target",
            f"#{main['id']}",
            f"Added id=\"{main['id']}\" to main landmark as skip link target",
        )

    link = tree.create_element(
        "a",
        SKIP_LINK_TEXT,
        id=SKIP_LINK_ID,
        href=f"#{main['id']}",
        class_="skip-link",
    )
    tree.body.insert(0, link)
    context.record_fix(
        "skip-link",
        f"#{SKIP_LINK_ID}",
        f'Added skip link "{SKIP_LINK_TEXT}" targeting #{main["id"]}',
        extra={"target": main["id"]},
    )


def _wrap_body_in_main(context: RemediationContext) -> None:
    tree = context.tree
    body = tree.body
    main = tree.create_element("main", id=_free_id(tree, MAIN_CONTENT_ID))

    movable = [child for child in body.contents if not _stays_outside_main(child)]
    if movable:
        movable[0].insert_before(main)
        for child in movable:
            main.append(child.extract())
    else:
        body.append(main)

    context.record_fix(
        "landmark-one-main",
        f"#{main['id']}",
        f"Added <main id=\"{main['id']}\"> landmark around body content",
        extra={"moved": len(movable)},
    )


def _stays_outside_main(node) -> bool:
    if isinstance(node, NavigableString):
        return not node.strip()
    if not isinstance(node, Tag):
        return False
    if node.name in OUTSIDE_MAIN_TAGS:
        return True
    if (node.get("role") or "").strip().lower() in OUTSIDE_MAIN_ROLES:
        return True
    return node.get("id") == SKIP_LINK_ID


def _free_id(tree: DocumentTree, base: str) -> str:
    if base not in tree.existing_ids():
        return base
    return generate_unique_id(tree, base)
