# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Base classes for accessibility checks.

This module provides the foundation for all accessibility checks in the system:
the per-scan ``ScanContext`` that collects node outcomes by rule id, and the
``AccessibilityCheck`` base class the individual checks derive from.
"""

import functools
from typing import Any, Dict, List, Optional, Set, Tuple

from bs4 import Tag

from html_accessibility_checker.audit.standards import get_rule_info
from html_accessibility_checker.utils.html_utils import (
    DocumentTree,
    InvalidSelectorError,
    get_outer_html,
    get_unique_selector,
)
from html_accessibility_checker.utils.logging_helper import setup_logger
from html_accessibility_checker.utils.report_models import Finding, NodeMatch, ScanResults

# Set up module-level logger
logger = setup_logger(__name__)

VIOLATIONS = "violations"
PASSES = "passes"
INCOMPLETE = "incomplete"


class ScanContext:
    """
    State of one scan over one document tree.

    The context is created by the scanner for a single pass and handed to
    every check explicitly.
    """

    def __init__(self, tree: DocumentTree, options: Optional[Dict[str, Any]] = None):
        """
        Initialize the scan context.

        Args:
            tree: The document tree to scan
            options: Resolved scan options (run_only, rules, disabled_rules, thresholds)
        """
        self.tree = tree
        self.options = options or {}
        self._run_only = set(self.options.get("run_only") or [])
        self._disabled = set(self.options.get("disabled_rules") or [])
        for rule_id, rule_options in (self.options.get("rules") or {}).items():
            if isinstance(rule_options, dict) and rule_options.get("enabled") is False:
                self._disabled.add(rule_id)

        self._rules_run: List[str] = []
        self._nodes: Dict[str, Dict[str, List[NodeMatch]]] = {}
        self._seen: Dict[Tuple[str, str], Set[int]] = {}

    def is_enabled(self, rule_id: str) -> bool:
        if self._run_only and rule_id not in self._run_only:
            return False
        return rule_id not in self._disabled

    def mark_run(self, rule_id: str) -> None:
        if rule_id not in self._nodes:
            self._rules_run.append(rule_id)
            self._nodes[rule_id] = {VIOLATIONS: [], PASSES: [], INCOMPLETE: []}

    def add_node(
        self, rule_id: str, outcome: str, element: Tag, summary: Optional[str] = None
    ) -> None:
        """
        Record the outcome of a rule for one element.

        Args:
            rule_id: The rule that evaluated the element
            outcome: One of "violations", "passes" or "incomplete"
            element: The evaluated element
            summary: Failure summary for violations and incomplete results
        """
        if not self.is_enabled(rule_id):
            return
        self.mark_run(rule_id)

        seen = self._seen.setdefault((rule_id, outcome), set())
        if id(element) in seen:
            return
        seen.add(id(element))

        self._nodes[rule_id][outcome].append(
            NodeMatch(
                targets=[get_unique_selector(element)],
                html=get_outer_html(element),
                failure_summary=summary,
            )
        )

    def to_results(self) -> ScanResults:
        """
        Build the categorized results of the scan.

        A rule appears under every category it has nodes for; a rule that
        ran without evaluating any node is inapplicable.

        Returns:
            ScanResults in rule registration order
        """
        results = ScanResults()
        for rule_id in self._rules_run:
            buckets = self._nodes[rule_id]
            info = get_rule_info(rule_id)
            if not any(buckets.values()):
                results.inapplicable.append(_build_finding(rule_id, info, []))
                continue
            for outcome in (VIOLATIONS, PASSES, INCOMPLETE):
                if buckets[outcome]:
                    getattr(results, outcome).append(
                        _build_finding(rule_id, info, buckets[outcome])
                    )
        return results


def _build_finding(rule_id: str, info: Dict[str, Any], nodes: List[NodeMatch]) -> Finding:
    return Finding(
        id=rule_id,
        impact=info["impact"],
        description=info["description"],
        help=info["help"],
        help_url=info["helpUrl"],
        tags=info["tags"],
        nodes=nodes,
    )


def safe_check(check_func):
    """
    Decorator for safely running accessibility checks.

    Catches exceptions and logs them without crashing the entire scan. When
    the failing check is an AccessibilityCheck, its rules are reported as
    incomplete.
    """

    @functools.wraps(check_func)
    def wrapper(*args, **kwargs):
        try:
            return check_func(*args, **kwargs)
        except Exception as e:
            logger.error(f"Error in {check_func.__qualname__}: {str(e)}")
            if args and isinstance(args[0], AccessibilityCheck):
                args[0].report_failure(e)
            return None

    return wrapper


class AccessibilityCheck:
    """
    Base class for all accessibility checks.

    Subclasses list the rule ids they evaluate in ``rule_ids`` and implement
    ``check``.
    """

    rule_ids: Tuple[str, ...] = ()

    def __init__(self, context: ScanContext):
        """
        Initialize the accessibility check.

        Args:
            context: The scan context of the current pass
        """
        self.context = context
        self.tree = context.tree
        self.soup = context.tree.soup

    def active_rules(self) -> List[str]:
        return [rule_id for rule_id in self.rule_ids if self.context.is_enabled(rule_id)]

    @safe_check
    def run(self) -> None:
        """Run the check if at least one of its rules is enabled."""
        active = self.active_rules()
        if not active:
            return
        for rule_id in active:
            self.context.mark_run(rule_id)
        self.check()

    def check(self) -> None:
        """
        Perform the accessibility check.

        This method must be implemented by all subclasses.
        """
        raise NotImplementedError("Subclasses must implement check()")

    def report_violation(self, rule_id: str, element: Tag, summary: str) -> None:
        self.context.add_node(rule_id, VIOLATIONS, element, summary)

    def report_pass(self, rule_id: str, element: Tag) -> None:
        self.context.add_node(rule_id, PASSES, element)

    def report_incomplete(self, rule_id: str, element: Tag, summary: str) -> None:
        self.context.add_node(rule_id, INCOMPLETE, element, summary)

    def report_failure(self, error: Exception) -> None:
        for rule_id in self.active_rules():
            self.report_incomplete(
                rule_id, self.tree.root, f"Check could not complete: {error}"
            )

    def find_elements(self, selector: str) -> List[Tag]:
        """
        Find elements matching the given CSS selector.

        Args:
            selector: CSS selector to match elements

        Returns:
            List of matching elements
        """
        try:
            return self.tree.query_all(selector)
        except InvalidSelectorError as e:
            logger.error(str(e))
            return []

    def get_element_text(self, element: Tag) -> str:
        """
        Get the text content of an element.

        Args:
            element: BeautifulSoup Tag object

        Returns:
            Text content of the element
        """
        return element.get_text(" ", strip=True)

    def get_attribute(self, element: Tag, attribute: str) -> str:
        """
        Get the stripped value of an attribute, or an empty string if absent.

        Args:
            element: BeautifulSoup Tag object
            attribute: Name of the attribute

        Returns:
            Value of the attribute
        """
        value = element.get(attribute)
        if value is None:
            return ""
        if isinstance(value, list):
            value = " ".join(value)
        return value.strip()
