# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Rule metadata for the accessibility scanner.

This module provides the impact, description, help text and WCAG tags of
every rule the scanner knows.
"""

HELP_URL_TEMPLATE = "https://dequeuniversity.com/rules/axe/4.8/{rule_id}"

# Impact levels (higher number = more severe)
IMPACT_LEVELS = {
    "minor": 1,
    "moderate": 2,
    "serious": 3,
    "critical": 4,
}

RULES = {
    "document-title": {
        "impact": "serious",
        "description": "Ensures each HTML document contains a non-empty <title> element",
        "help": "Documents must have <title> element to aid in navigation",
        "tags": ["cat.text-alternatives", "wcag2a", "wcag242"],
    },
    "html-has-lang": {
        "impact": "serious",
        "description": "Ensures every HTML document has a lang attribute",
        "help": "<html> element must have a lang attribute",
        "tags": ["cat.language", "wcag2a", "wcag311"],
    },
    "landmark-one-main": {
        "impact": "moderate",
        "description": "Ensures the document has a main landmark",
        "help": "Document should have one main landmark",
        "tags": ["cat.semantics", "best-practice"],
    },
    "region": {
        "impact": "moderate",
        "description": "Ensures all page content is contained by landmarks",
        "help": "All page content should be contained by landmarks",
        "tags": ["cat.keyboard", "best-practice"],
    },
    "skip-link": {
        "impact": "moderate",
        "description": "Ensure the page starts with a link that skips to the main content",
        "help": "The page should have a skip link as its first link",
        "tags": ["cat.keyboard", "best-practice", "wcag241"],
    },
    "heading-order": {
        "impact": "moderate",
        "description": "Ensures the order of headings is semantically correct",
        "help": "Heading levels should only increase by one",
        "tags": ["cat.semantics", "best-practice"],
    },
    "page-has-heading-one": {
        "impact": "moderate",
        "description": "Ensure that the page contains a level-one heading",
        "help": "Page should contain a level-one heading",
        "tags": ["cat.semantics", "best-practice"],
    },
    "image-alt": {
        "impact": "critical",
        "description": "Ensures <img> elements have alternate text or a role of none or presentation",
        "help": "Images must have alternate text",
        "tags": ["cat.text-alternatives", "wcag2a", "wcag111"],
    },
    "label": {
        "impact": "critical",
        "description": "Ensures every form element has a label",
        "help": "Form elements must have labels",
        "tags": ["cat.forms", "wcag2a", "wcag412", "wcag131"],
    },
    "form-field-multiple-label": {
        "impact": "moderate",
        "description": "Ensures form field does not have multiple label elements",
        "help": "Form field must not have multiple label elements",
        "tags": ["cat.forms", "wcag2a", "wcag332"],
    },
    "link-name": {
        "impact": "serious",
        "description": "Ensures links have discernible text",
        "help": "Links must have discernible text",
        "tags": ["cat.name-role-value", "wcag2a", "wcag244", "wcag412"],
    },
    "button-name": {
        "impact": "critical",
        "description": "Ensures buttons have discernible text",
        "help": "Buttons must have discernible text",
        "tags": ["cat.name-role-value", "wcag2a", "wcag412"],
    },
    "aria-roles": {
        "impact": "critical",
        "description": "Ensures all elements with a role attribute use a valid value",
        "help": "ARIA roles used must conform to valid values",
        "tags": ["cat.aria", "wcag2a", "wcag412"],
    },
    "aria-valid-attr": {
        "impact": "critical",
        "description": "Ensures attributes that begin with aria- are valid ARIA attributes",
        "help": "ARIA attributes must conform to valid names",
        "tags": ["cat.aria", "wcag2a", "wcag412"],
    },
    "tabindex": {
        "impact": "serious",
        "description": "Ensures tabindex attribute values are not greater than 0",
        "help": "Elements should not have tabindex greater than zero",
        "tags": ["cat.keyboard", "best-practice"],
    },
    "duplicate-id": {
        "impact": "minor",
        "description": "Ensures every id attribute value is unique",
        "help": "id attribute value must be unique",
        "tags": ["cat.parsing", "wcag2a", "wcag411"],
    },
    "table-headers": {
        "impact": "serious",
        "description": "Ensures data tables have header cells",
        "help": "Data tables should have <th> header cells",
        "tags": ["cat.tables", "wcag2a", "wcag131"],
    },
    "color-contrast": {
        "impact": "serious",
        "description": "Ensures the contrast between foreground and background colors "
        "meets WCAG 2 AA minimum contrast ratio thresholds",
        "help": "Elements must meet minimum color contrast ratio thresholds",
        "tags": ["cat.color", "wcag2aa", "wcag143"],
    },
}


def get_rule_info(rule_id: str) -> dict:
    """
    Get information about a scanner rule.

    Args:
        rule_id: The rule id (e.g., 'image-alt')

    Returns:
        Dictionary with impact, description, help, tags and helpUrl
    """
    info = dict(
        RULES.get(
            rule_id,
            {
                "impact": None,
                "description": "Unknown rule",
                "help": "",
                "tags": [],
            },
        )
    )
    info["helpUrl"] = HELP_URL_TEMPLATE.format(rule_id=rule_id)
    return info
