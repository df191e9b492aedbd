# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Static catalog of remediation rules.

Maps scanner finding ids to the strategies that repair them, and lists the
baseline rules that every remediation pass runs before any finding-driven rule.
"""

from enum import Enum
from typing import Callable, Dict, List, Tuple

from pydantic import BaseModel

from html_accessibility_checker.remediate.remediation_strategies.aria_remediation import (
    add_region_role,
    remove_positive_tabindex,
)
from html_accessibility_checker.remediate.remediation_strategies.color_contrast_remediation import (
    add_contrast_outline,
)
from html_accessibility_checker.remediate.remediation_strategies.document_structure_remediation import (
    ensure_document_language,
    ensure_document_title,
)
from html_accessibility_checker.remediate.remediation_strategies.duplicate_id_remediation import (
    resolve_duplicate_id,
)
from html_accessibility_checker.remediate.remediation_strategies.form_remediation import (
    fix_field_label,
)
from html_accessibility_checker.remediate.remediation_strategies.heading_remediation import (
    add_missing_h1,
    ensure_top_level_heading,
    relocate_top_level_headings,
)
from html_accessibility_checker.remediate.remediation_strategies.image_remediation import (
    add_missing_alt,
)
from html_accessibility_checker.remediate.remediation_strategies.landmark_remediation import (
    add_skip_link,
    ensure_main_landmark,
)
from html_accessibility_checker.remediate.remediation_strategies.link_remediation import (
    add_button_name,
    add_link_name,
)
from html_accessibility_checker.remediate.remediation_strategies.table_remediation import (
    promote_header_row,
)


class RuleScope(str, Enum):
    """Whether a rule is applied to each reported element or once per document."""

    PER_MATCH = "per-match"
    DOCUMENT = "document"


class RemediationRule(BaseModel):
    """A stateless remediation rule; ``apply`` must be a no-op once its fix holds."""

    name: str
    finding_ids: Tuple[str, ...] = ()
    scope: RuleScope
    apply: Callable[..., None]

    class Config:
        """Configuration for RemediationRule model."""

        frozen = True


# Run in this order, once per pass, before any finding-driven rule
BASELINE_RULES: List[RemediationRule] = [
    RemediationRule(name="document-title", scope=RuleScope.DOCUMENT, apply=ensure_document_title),
    RemediationRule(name="document-language", scope=RuleScope.DOCUMENT, apply=ensure_document_language),
    RemediationRule(name="main-landmark", scope=RuleScope.DOCUMENT, apply=ensure_main_landmark),
    RemediationRule(name="top-level-heading", scope=RuleScope.DOCUMENT, apply=ensure_top_level_heading),
    RemediationRule(name="heading-relocation", scope=RuleScope.DOCUMENT, apply=relocate_top_level_headings),
]

CATALOG_RULES: List[RemediationRule] = [
    RemediationRule(
        name="image-alt",
        finding_ids=("image-alt",),
        scope=RuleScope.PER_MATCH,
        apply=add_missing_alt,
    ),
    RemediationRule(
        name="html-has-lang",
        finding_ids=("html-has-lang",),
        scope=RuleScope.DOCUMENT,
        apply=ensure_document_language,
    ),
    RemediationRule(
        name="label",
        finding_ids=("label", "form-field-multiple-label"),
        scope=RuleScope.PER_MATCH,
        apply=fix_field_label,
    ),
    RemediationRule(
        name="heading-order",
        finding_ids=("heading-order",),
        scope=RuleScope.DOCUMENT,
        apply=add_missing_h1,
    ),
    RemediationRule(
        name="aria-role",
        finding_ids=("aria-roles", "aria-valid-attr"),
        scope=RuleScope.PER_MATCH,
        apply=add_region_role,
    ),
    RemediationRule(
        name="color-contrast",
        finding_ids=("color-contrast",),
        scope=RuleScope.PER_MATCH,
        apply=add_contrast_outline,
    ),
    RemediationRule(
        name="tabindex",
        finding_ids=("tabindex",),
        scope=RuleScope.PER_MATCH,
        apply=remove_positive_tabindex,
    ),
    RemediationRule(
        name="skip-link",
        finding_ids=("skip-link",),
        scope=RuleScope.DOCUMENT,
        apply=add_skip_link,
    ),
    RemediationRule(
        name="main-landmark",
        finding_ids=("landmark-one-main", "region"),
        scope=RuleScope.DOCUMENT,
        apply=ensure_main_landmark,
    ),
    RemediationRule(
        name="link-name",
        finding_ids=("link-name",),
        scope=RuleScope.PER_MATCH,
        apply=add_link_name,
    ),
    RemediationRule(
        name="button-name",
        finding_ids=("button-name",),
        scope=RuleScope.PER_MATCH,
        apply=add_button_name,
    ),
    RemediationRule(
        name="table-headers",
        finding_ids=("table-headers",),
        scope=RuleScope.PER_MATCH,
        apply=promote_header_row,
    ),
    RemediationRule(
        name="duplicate-id",
        finding_ids=("duplicate-id",),
        scope=RuleScope.PER_MATCH,
        apply=resolve_duplicate_id,
    ),
]

SUPPORTED_FINDING_IDS = frozenset(
    {
        "image-alt",
        "html-has-lang",
        "label",
        "form-field-multiple-label",
        "heading-order",
        "aria-roles",
        "aria-valid-attr",
        "color-contrast",
        "tabindex",
        "skip-link",
        "landmark-one-main",
        "region",
        "link-name",
        "button-name",
        "table-headers",
        "duplicate-id",
    }
)


def build_rule_index(rules: List[RemediationRule]) -> Dict[str, List[RemediationRule]]:
    """
    Index rules by the finding ids they handle.

    Args:
        rules: Catalog rules in registration order

    Returns:
        Mapping of finding id to the rules for it, registration order kept
    """
    index: Dict[str, List[RemediationRule]] = {}
    for rule in rules:
        for finding_id in rule.finding_ids:
            index.setdefault(finding_id, []).append(rule)
    return index


def check_catalog(index: Dict[str, List[RemediationRule]]) -> None:
    """
    Verify that the catalog handles exactly the supported finding ids.

    Raises:
        RuntimeError: If an id has no rule or a rule handles an unlisted id
    """
    missing = SUPPORTED_FINDING_IDS - set(index)
    unexpected = set(index) - SUPPORTED_FINDING_IDS
    if missing or unexpected:
        raise RuntimeError(
            f"Remediation catalog mismatch: missing={sorted(missing)}, "
            f"unexpected={sorted(unexpected)}"
        )


RULES_BY_FINDING_ID = build_rule_index(CATALOG_RULES)
check_catalog(RULES_BY_FINDING_ID)
