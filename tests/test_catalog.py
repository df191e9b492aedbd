# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the remediation catalog.
"""

import pytest

from html_accessibility_checker.audit.scanner import SCANNER_RULE_IDS
from html_accessibility_checker.remediate.catalog import (
    BASELINE_RULES,
    CATALOG_RULES,
    RULES_BY_FINDING_ID,
    SUPPORTED_FINDING_IDS,
    RemediationRule,
    RuleScope,
    build_rule_index,
    check_catalog,
)
from html_accessibility_checker.remediate.remediation_strategies.image_remediation import (
    add_missing_alt,
)


class TestCatalog:
    def test_every_supported_id_has_a_rule(self):
        assert set(RULES_BY_FINDING_ID) == set(SUPPORTED_FINDING_IDS)

    def test_supported_ids_are_reported_by_scanner(self):
        assert set(SUPPORTED_FINDING_IDS) <= set(SCANNER_RULE_IDS)

    def test_baseline_order(self):
        assert [rule.name for rule in BASELINE_RULES] == [
            "document-title",
            "document-language",
            "main-landmark",
            "top-level-heading",
            "heading-relocation",
        ]
        assert all(rule.scope == RuleScope.DOCUMENT for rule in BASELINE_RULES)

    @pytest.mark.parametrize(
        "finding_id,scope",
        [
            ("image-alt", RuleScope.PER_MATCH),
            ("html-has-lang", RuleScope.DOCUMENT),
            ("heading-order", RuleScope.DOCUMENT),
            ("skip-link", RuleScope.DOCUMENT),
            ("landmark-one-main", RuleScope.DOCUMENT),
            ("region", RuleScope.DOCUMENT),
            ("duplicate-id", RuleScope.PER_MATCH),
        ],
    )
    def test_rule_scopes(self, finding_id, scope):
        assert [rule.scope for rule in RULES_BY_FINDING_ID[finding_id]] == [scope]

    def test_shared_rules(self):
        assert RULES_BY_FINDING_ID["label"] == RULES_BY_FINDING_ID["form-field-multiple-label"]
        assert RULES_BY_FINDING_ID["aria-roles"] == RULES_BY_FINDING_ID["aria-valid-attr"]

    def test_missing_rule_is_detected(self):
        index = build_rule_index([r for r in CATALOG_RULES if r.name != "tabindex"])
        with pytest.raises(RuntimeError, match="tabindex"):
            check_catalog(index)

    def test_unexpected_rule_is_detected(self):
        extra = RemediationRule(
            name="video-caption",
            finding_ids=("video-caption",),
            scope=RuleScope.PER_MATCH,
            apply=add_missing_alt,
        )
        with pytest.raises(RuntimeError, match="video-caption"):
            check_catalog(build_rule_index(CATALOG_RULES + [extra]))
