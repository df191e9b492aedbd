# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Landmark accessibility checks.

This module provides checks for the main landmark, landmark coverage of page
content and the skip link.
"""

from bs4 import NavigableString, Tag

from html_accessibility_checker.audit.base_check import AccessibilityCheck

LANDMARK_TAGS = {"main", "header", "nav", "footer", "aside"}
LANDMARK_ROLES = {
    "main",
    "banner",
    "navigation",
    "contentinfo",
    "complementary",
    "region",
    "search",
    "form",
}
IGNORED_TAGS = {"script", "style", "template", "noscript"}
EMBEDDED_CONTENT_TAGS = {"img", "input", "select", "textarea", "button", "video"}


def is_landmark(element: Tag) -> bool:
    if element.name in LANDMARK_TAGS:
        return True
    role = (element.get("role") or "").strip().lower()
    return role in LANDMARK_ROLES


class MainLandmarkCheck(AccessibilityCheck):
    """Check that the document has exactly one main landmark."""

    rule_ids = ("landmark-one-main",)

    def check(self) -> None:
        root = self.tree.root
        landmarks = self.find_elements('main, [role="main"]')
        if not landmarks:
            self.report_violation(
                "landmark-one-main", root, "Document does not have a main landmark"
            )
        elif len(landmarks) > 1:
            self.report_violation(
                "landmark-one-main",
                root,
                f"Document has {len(landmarks)} main landmarks",
            )
        else:
            self.report_pass("landmark-one-main", root)


class RegionCheck(AccessibilityCheck):
    """Check that all perceivable body content is inside a landmark."""

    rule_ids = ("region",)

    def check(self) -> None:
        for child in self.tree.body.children:
            if isinstance(child, Tag):
                self._check_node(child)

    def _check_node(self, element: Tag) -> None:
        if element.name in IGNORED_TAGS or _is_skip_link(element):
            return
        if is_landmark(element):
            self.report_pass("region", element)
            return
        if not _has_content(element):
            return

        if not any(is_landmark(d) for d in element.find_all(True)):
            self.report_violation(
                "region", element, "Some page content is not contained by landmarks"
            )
            return

        # Mixed wrapper: judge its children individually
        for child in element.children:
            if isinstance(child, Tag):
                self._check_node(child)
            elif isinstance(child, NavigableString) and child.strip():
                self.report_violation(
                    "region", element, "Some page content is not contained by landmarks"
                )


class SkipLinkCheck(AccessibilityCheck):
    """Check that the first link of the page skips to content on the same page."""

    rule_ids = ("skip-link",)

    def check(self) -> None:
        root = self.tree.root
        body = self.tree.body
        if body.find(True) is None:
            return

        first_link = body.find("a", href=True)
        if first_link is None:
            self.report_violation("skip-link", root, "Page has no skip link")
            return

        href = first_link["href"].strip()
        if not href.startswith("#") or len(href) == 1:
            self.report_violation(
                "skip-link",
                root,
                "The first link on the page does not skip to the main content",
            )
        elif self.soup.find(attrs={"id": href[1:]}) is None:
            self.report_violation(
                "skip-link", first_link, f"Skip link target '{href}' does not exist"
            )
        else:
            self.report_pass("skip-link", first_link)


def _is_skip_link(element: Tag) -> bool:
    return element.name == "a" and (element.get("href") or "").startswith("#")


def _has_content(element: Tag) -> bool:
    if element.get_text(strip=True):
        return True
    if element.name in EMBEDDED_CONTENT_TAGS:
        return True
    return element.find(list(EMBEDDED_CONTENT_TAGS)) is not None
