# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
HTML utility functions for document accessibility.

``DocumentTree`` is the mutable markup tree that the scanner reads and the
remediation engine edits in place. It wraps a BeautifulSoup document and
exposes only the capabilities those components rely on: selector queries,
element creation, the document skeleton and serialization. Attribute access
goes through the BeautifulSoup ``Tag`` API directly.
"""

from typing import Iterator, List, Optional, Set

from bs4 import BeautifulSoup, Doctype, Tag
import soupsieve

from html_accessibility_checker.utils.logging_helper import (
    setup_logger,
    DocumentAccessibilityError,
)

logger = setup_logger(__name__)

# Elements that belong in <head> when a fragment has to be wrapped
HEAD_ELEMENTS = {"title", "meta", "link", "base"}

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]

# WAI-ARIA 1.2 roles (abstract roles excluded)
ARIA_ROLES = {
    "alert", "alertdialog", "application", "article", "banner", "blockquote",
    "button", "caption", "cell", "checkbox", "code", "columnheader", "combobox",
    "complementary", "contentinfo", "definition", "deletion", "dialog",
    "directory", "document", "emphasis", "feed", "figure", "form", "generic",
    "grid", "gridcell", "group", "heading", "img", "insertion", "link", "list",
    "listbox", "listitem", "log", "main", "marquee", "math", "menu", "menubar",
    "menuitem", "menuitemcheckbox", "menuitemradio", "meter", "navigation",
    "none", "note", "option", "paragraph", "presentation", "progressbar",
    "radio", "radiogroup", "region", "row", "rowgroup", "rowheader",
    "scrollbar", "search", "searchbox", "separator", "slider", "spinbutton",
    "status", "strong", "subscript", "superscript", "switch", "tab", "table",
    "tablist", "tabpanel", "term", "textbox", "time", "timer", "toolbar",
    "tooltip", "tree", "treegrid", "treeitem",
}

# WAI-ARIA 1.2 states and properties
ARIA_ATTRIBUTES = {
    "aria-activedescendant", "aria-atomic", "aria-autocomplete",
    "aria-braillelabel", "aria-brailleroledescription", "aria-busy",
    "aria-checked", "aria-colcount", "aria-colindex", "aria-colindextext",
    "aria-colspan", "aria-controls", "aria-current", "aria-describedby",
    "aria-description", "aria-details", "aria-disabled", "aria-dropeffect",
    "aria-errormessage", "aria-expanded", "aria-flowto", "aria-grabbed",
    "aria-haspopup", "aria-hidden", "aria-invalid", "aria-keyshortcuts",
    "aria-label", "aria-labelledby", "aria-level", "aria-live", "aria-modal",
    "aria-multiline", "aria-multiselectable", "aria-orientation", "aria-owns",
    "aria-placeholder", "aria-posinset", "aria-pressed", "aria-readonly",
    "aria-relevant", "aria-required", "aria-roledescription", "aria-rowcount",
    "aria-rowindex", "aria-rowindextext", "aria-rowspan", "aria-selected",
    "aria-setsize", "aria-sort", "aria-valuemax", "aria-valuemin",
    "aria-valuenow", "aria-valuetext",
}


class InvalidSelectorError(DocumentAccessibilityError):
    """Raised when a selector cannot be parsed."""


class DocumentTree:
    """A parsed HTML document with the html/head/body skeleton guaranteed."""

    def __init__(self, soup: BeautifulSoup, base_url: Optional[str] = None):
        self.soup = soup
        self.base_url = base_url
        ensure_document_skeleton(self.soup)

    @classmethod
    def parse(cls, markup: str, base_url: Optional[str] = None) -> "DocumentTree":
        """
        Parse markup text into a document tree.

        Args:
            markup: HTML document or fragment
            base_url: URL the markup was fetched from, if any

        Returns:
            A DocumentTree whose html, head and body elements exist
        """
        return cls(BeautifulSoup(markup, "html.parser"), base_url=base_url)

    @property
    def root(self) -> Tag:
        return self.soup.find("html")

    @property
    def head(self) -> Tag:
        return self.soup.find("head")

    @property
    def body(self) -> Tag:
        return self.soup.find("body")

    def query_all(self, selector: str) -> List[Tag]:
        """
        Find elements matching a CSS selector, in document order.

        Raises:
            InvalidSelectorError: If the selector is malformed or unsupported
        """
        try:
            return self.soup.select(selector)
        except (soupsieve.SelectorSyntaxError, NotImplementedError, ValueError) as e:
            raise InvalidSelectorError(f"Invalid selector '{selector}': {e}") from e

    def query_one(self, selector: str) -> Optional[Tag]:
        matches = self.query_all(selector)
        return matches[0] if matches else None

    def create_element(self, tag: str, text: Optional[str] = None, **attrs) -> Tag:
        """Create a detached element, optionally with text content and attributes."""
        element = self.soup.new_tag(tag)
        for name, value in attrs.items():
            element[name.rstrip("_").replace("_", "-")] = value
        if text is not None:
            element.string = text
        return element

    def iter_elements(self) -> Iterator[Tag]:
        """Iterate over every element in document order."""
        return iter(self.soup.find_all(True))

    def existing_ids(self) -> Set[str]:
        return {element["id"] for element in self.soup.find_all(id=True)}

    def serialize(self) -> str:
        return str(self.soup)

    def __str__(self) -> str:
        return self.serialize()


def ensure_document_skeleton(soup: BeautifulSoup) -> None:
    """
    Make sure the document has html, head and body elements.

    Fragments are wrapped the way a browser would: head-only elements go into
    <head>, everything else into <body>. A doctype stays at the top.
    """
    html = soup.find("html")
    if html is None:
        html = soup.new_tag("html")
        for node in list(soup.contents):
            if isinstance(node, Doctype):
                continue
            html.append(node.extract())
        soup.append(html)

    head = soup.find("head")
    if head is None:
        head = soup.new_tag("head")
        html.insert(0, head)

    if soup.find("body") is None:
        body = soup.new_tag("body")
        for node in list(html.contents):
            if node is head:
                continue
            if isinstance(node, Tag) and node.name in HEAD_ELEMENTS:
                head.append(node.extract())
            else:
                body.append(node.extract())
        html.append(body)


def generate_unique_id(
    tree: DocumentTree, base: str, reserved: Optional[Set[str]] = None
) -> str:
    """
    Generate an id that is not used anywhere in the tree.

    Args:
        tree: The document tree
        base: Prefix for the generated id
        reserved: Additional ids to avoid

    Returns:
        The first free id of the form ``<base>-<n>``
    """
    taken = tree.existing_ids()
    if reserved:
        taken |= reserved

    counter = 1
    while f"{base}-{counter}" in taken:
        counter += 1
    return f"{base}-{counter}"


def document_titles(tree: DocumentTree) -> List[Tag]:
    """Return the document <title> elements, leaving out titles of inline SVG graphics."""
    return [title for title in tree.query_all("title") if title.find_parent("svg") is None]


def has_visible_text(element: Tag) -> bool:
    return bool(element.get_text(strip=True))


def get_unique_selector(element: Tag) -> str:
    """
    Get a CSS selector that identifies the element in its document.

    Uses ``#id`` when the id is unique. Otherwise the path grows one ancestor
    at a time (tag name, or ``nth-of-type`` when the tag is not unique) and
    stops as soon as it matches only this element, so selectors stay short
    and survive content being wrapped in a new container.

    Args:
        element: The HTML element.

    Returns:
        CSS selector path.
    """
    document = _document_of(element)
    path = []
    current = element
    while isinstance(current, Tag) and current.name != "[document]":
        element_id = current.get("id")
        if element_id and _is_unique_id(document, element_id):
            path.append(f"#{soupsieve.escape(element_id)}")
            break

        if current.name in ("html", "head", "body") or len(document.find_all(current.name)) == 1:
            path.append(current.name)
        else:
            siblings = current.find_previous_siblings(current.name)
            path.append(f"{current.name}:nth-of-type({len(siblings) + 1})")

        if _selects_only(document, " > ".join(reversed(path)), element):
            break
        current = current.parent

    return " > ".join(reversed(path))


def get_outer_html(element: Tag, limit: int = 250) -> str:
    """Return the element's opening markup, truncated for reports."""
    html = str(element)
    if len(html) > limit:
        return html[:limit] + "..."
    return html


def _document_of(element: Tag) -> Tag:
    current = element
    while current.parent is not None:
        current = current.parent
    return current


def _is_unique_id(document: Tag, element_id: str) -> bool:
    return len(document.find_all(attrs={"id": element_id})) == 1


def _selects_only(document: Tag, selector: str, element: Tag) -> bool:
    try:
        matches = soupsieve.select(selector, document, limit=2)
    except soupsieve.SelectorSyntaxError:
        return False
    return len(matches) == 1 and matches[0] is element


def has_valid_role(element: Tag) -> bool:
    """True if the element's role attribute starts with a known ARIA role."""
    tokens = (element.get("role") or "").split()
    return bool(tokens) and tokens[0].lower() in ARIA_ROLES


def has_accessible_name(element: Tag) -> bool:
    """
    Check whether an element already exposes a name to assistive technology.

    Args:
        element: A link, button or similar element

    Returns:
        True if visible text, a naming attribute, an image alt or an input value is present
    """
    if has_visible_text(element):
        return True
    for attr in ("aria-label", "aria-labelledby", "title"):
        if (element.get(attr) or "").strip():
            return True
    for image in element.find_all("img"):
        if (image.get("alt") or "").strip():
            return True
    if element.name == "input" and (element.get("value") or "").strip():
        return True
    return False
