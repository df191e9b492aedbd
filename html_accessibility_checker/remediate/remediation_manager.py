# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Remediation manager for HTML accessibility issues.

This module runs one remediation pass over a document tree: the baseline
rules first, then the catalog rules for each reported finding. The tree is
mutated in place; serialization and persistence are left to the caller.
"""

from typing import Any, Dict, List, Optional

from bs4 import Tag

from html_accessibility_checker.utils.config import config_manager
from html_accessibility_checker.utils.html_utils import DocumentTree, InvalidSelectorError
from html_accessibility_checker.utils.logging_helper import (
    setup_logger,
    handle_exception,
    AccessibilityRemediationError,
)
from html_accessibility_checker.utils.report_models import (
    Finding,
    FixMode,
    RemediationOutcome,
)
from html_accessibility_checker.remediate.catalog import (
    BASELINE_RULES,
    RULES_BY_FINDING_ID,
    RemediationRule,
    RuleScope,
)
from html_accessibility_checker.remediate.remediation_context import RemediationContext

# Set up module-level logger
logger = setup_logger(__name__)


class RemediationEngine:
    """Engine that applies the remediation catalog to a document tree."""

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        """
        Initialize the remediation engine.

        Args:
            options: Remediation option overrides (see the ``remediate`` config section)
        """
        self.options = config_manager.get_config(options, section="remediate")

    def remediate(
        self,
        tree: DocumentTree,
        findings: List[Finding],
        mode: FixMode = FixMode.APPLY,
        verbose: bool = False,
    ) -> RemediationOutcome:
        """
        Run one remediation pass.

        Args:
            tree: The document tree; mutated in place
            findings: Findings to act on, in scanner order
            mode: DRY_RUN or APPLY; both mutate the tree the same way
            verbose: Keep diagnostic entries in the audit log

        Returns:
            The applied fixes and audit log of the pass

        Raises:
            AccessibilityRemediationError: If the tree cannot be remediated at all
        """
        mode = FixMode(mode)
        if mode == FixMode.REPORT_ONLY:
            raise AccessibilityRemediationError(
                "Remediation cannot run in report-only mode"
            )
        if tree.root is None or tree.head is None or tree.body is None:
            raise AccessibilityRemediationError(
                "Document tree has no html/head/body skeleton"
            )

        context = RemediationContext(tree, self.options, mode=mode, verbose=verbose)

        for rule in BASELINE_RULES:
            self._apply_rule(rule, context)

        finding_ids = [finding.id for finding in findings]
        context.debug(f"Findings received: {', '.join(finding_ids) or '(none)'}")

        for finding in findings:
            rules = RULES_BY_FINDING_ID.get(finding.id)
            if not rules:
                logger.debug(f"No remediation rule for finding '{finding.id}'")
                continue

            for rule in rules:
                if rule.scope == RuleScope.DOCUMENT:
                    self._apply_rule(rule, context)
                else:
                    self._apply_to_matches(rule, finding, context)

        logger.debug(
            f"Remediation pass finished with {len(context.applied_fixes)} fixes "
            f"and {len(context.audit_log)} log entries"
        )
        return RemediationOutcome(
            applied_fixes=context.applied_fixes, audit_log=context.audit_log
        )

    def _apply_to_matches(
        self, rule: RemediationRule, finding: Finding, context: RemediationContext
    ) -> None:
        for node in finding.nodes:
            for selector in node.targets:
                try:
                    elements = context.tree.query_all(selector)
                except InvalidSelectorError as e:
                    context.debug(f"{finding.id}: {e}")
                    continue

                if not elements:
                    context.debug(f"{finding.id}: selector '{selector}' matched no elements")
                    continue

                for element in elements:
                    self._apply_rule(rule, context, element)

    def _apply_rule(
        self,
        rule: RemediationRule,
        context: RemediationContext,
        element: Optional[Tag] = None,
    ) -> None:
        try:
            if element is None:
                rule.apply(context)
            else:
                rule.apply(context, element)
        except AccessibilityRemediationError:
            raise
        except Exception as e:
            handle_exception(
                e,
                logger,
                f"Remediation rule '{rule.name}' failed: {e}",
                custom_exception=AccessibilityRemediationError,
            )
