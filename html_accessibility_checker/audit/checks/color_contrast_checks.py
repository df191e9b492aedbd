# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Color contrast accessibility checks.

This module provides checks for proper color contrast between text and background.
Only inline styles are considered; elements whose colors cannot be resolved
are reported as incomplete.
"""

import re
from typing import Optional, Tuple

from bs4 import NavigableString, Tag

from html_accessibility_checker.audit.base_check import AccessibilityCheck

DEFAULT_TEXT_COLOR = "#000000"
DEFAULT_BACKGROUND_COLOR = "#FFFFFF"

NAMED_COLORS = {
    "black": "#000000",
    "white": "#FFFFFF",
    "red": "#FF0000",
    "green": "#008000",
    "blue": "#0000FF",
    "yellow": "#FFFF00",
    "gray": "#808080",
    "grey": "#808080",
    "silver": "#C0C0C0",
    "orange": "#FFA500",
    "purple": "#800080",
    "navy": "#000080",
}

HEX_COLOR = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
RGB_COLOR = re.compile(r"^rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)$")
COLOR_TOKEN = re.compile(r"#[0-9a-fA-F]{3,6}\b|rgba?\([^)]*\)|\b[a-zA-Z]+\b")


class UnresolvedColor(ValueError):
    """Raised when a declared color value cannot be evaluated."""


class ColorContrastCheck(AccessibilityCheck):
    """Check for proper color contrast (WCAG 1.4.3)."""

    rule_ids = ("color-contrast",)

    def check(self) -> None:
        """
        Check if text elements with inline colors have sufficient contrast.

        Elements are evaluated when they own text and either they or an
        ancestor declare a text or background color inline.
        """
        min_ratio = float(self.context.options.get("min_contrast_ratio", 4.5))
        large_ratio = float(self.context.options.get("large_text_contrast_ratio", 3.0))

        for element in self.tree.body.find_all(True):
            if not _owns_text(element):
                continue

            declared_text = _inherited_declaration(element, ("color",))
            declared_bg = _inherited_declaration(element, ("background-color", "background"))
            if declared_text is None and declared_bg is None:
                continue

            try:
                text_color = _normalize_color(declared_text) if declared_text else DEFAULT_TEXT_COLOR
                bg_color = (
                    _background_color(declared_bg) if declared_bg else DEFAULT_BACKGROUND_COLOR
                )
            except UnresolvedColor as e:
                self.report_incomplete(
                    "color-contrast", element, f"Unable to determine contrast: {e}"
                )
                continue

            ratio = contrast_ratio(text_color, bg_color)
            required = large_ratio if _is_large_text(element) else min_ratio
            if ratio < required:
                self.report_violation(
                    "color-contrast",
                    element,
                    f"Element has insufficient color contrast of {ratio:.2f} "
                    f"(foreground color: {text_color}, background color: {bg_color}, "
                    f"expected contrast ratio of {required}:1)",
                )
            else:
                self.report_pass("color-contrast", element)


def contrast_ratio(color1: str, color2: str) -> float:
    """
    Calculate the contrast ratio between two colors.

    Args:
        color1: The first color as a hex string
        color2: The second color as a hex string

    Returns:
        The contrast ratio as a float
    """
    l1 = _relative_luminance(_hex_to_rgb(color1))
    l2 = _relative_luminance(_hex_to_rgb(color2))
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def _owns_text(element: Tag) -> bool:
    return any(
        isinstance(child, NavigableString) and child.strip() for child in element.children
    )


def _inherited_declaration(element: Tag, properties: Tuple[str, ...]) -> Optional[str]:
    current = element
    while isinstance(current, Tag) and current.name != "html":
        style = current.get("style")
        if style:
            for declaration in style.split(";"):
                if ":" not in declaration:
                    continue
                prop, value = declaration.split(":", 1)
                if prop.strip().lower() in properties and value.strip():
                    return value.strip()
        current = current.parent
    return None


def _background_color(value: str) -> str:
    # The background shorthand may carry images and positions too
    for token in COLOR_TOKEN.findall(value):
        try:
            return _normalize_color(token)
        except UnresolvedColor:
            continue
    raise UnresolvedColor(f"background '{value}'")


def _normalize_color(color: str) -> str:
    """
    Normalize a color value to a hex string.

    Args:
        color: The color value to normalize

    Returns:
        The normalized color as a hex string

    Raises:
        UnresolvedColor: If the value is not a supported opaque color
    """
    color = color.strip().lower().replace("!important", "").strip()
    if color in NAMED_COLORS:
        return NAMED_COLORS[color]

    if HEX_COLOR.match(color):
        if len(color) == 4:
            r, g, b = color[1], color[2], color[3]
            return f"#{r}{r}{g}{g}{b}{b}".upper()
        return color.upper()

    rgb_match = RGB_COLOR.match(color)
    if rgb_match:
        r, g, b = (min(int(v), 255) for v in rgb_match.groups())
        return f"#{r:02X}{g:02X}{b:02X}"

    raise UnresolvedColor(f"color '{color}'")


def _hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    hex_color = hex_color.lstrip("#")
    return tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4))


def _relative_luminance(rgb: Tuple[int, int, int]) -> float:
    r, g, b = (_gamma_correct(channel / 255) for channel in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def _gamma_correct(value: float) -> float:
    if value <= 0.03928:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def _is_large_text(element: Tag) -> bool:
    """
    Determine if an element contains large text.

    Large text is 18pt (24px), or 14pt (18.67px) when bold.
    """
    if element.name in ("h1", "h2", "h3"):
        return True

    size_match = re.search(
        r"font-size:\s*(\d+(?:\.\d+)?)(px|pt|em|rem)", element.get("style", "")
    )
    if not size_match:
        return False

    size = float(size_match.group(1))
    unit = size_match.group(2)
    if unit == "pt":
        size = size * 1.333
    elif unit in ("em", "rem"):
        size = size * 16

    if size >= 24:
        return True
    return size >= 18.67 and _is_bold(element)


def _is_bold(element: Tag) -> bool:
    if element.name in ("b", "strong"):
        return True
    return bool(re.search(r"font-weight:\s*(bold|700|800|900)", element.get("style", "")))
