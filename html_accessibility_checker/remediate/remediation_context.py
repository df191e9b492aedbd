# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Per-pass state shared by the remediation strategies.

A ``RemediationContext`` lives for exactly one remediation pass. Strategies
report every mutation through ``record_fix`` so that each AppliedFix is paired
with the audit line describing it.
"""

from typing import Any, Dict, List, Optional, Set

from bs4 import Tag

from html_accessibility_checker.utils.html_utils import DocumentTree
from html_accessibility_checker.utils.logging_helper import setup_logger
from html_accessibility_checker.utils.report_models import (
    AppliedFix,
    AuditCategory,
    AuditEntry,
    DEBUG_MARKER,
    FixMode,
)

logger = setup_logger(__name__)


class RemediationContext:
    """Mutable bookkeeping for one remediation pass over one document tree."""

    def __init__(
        self,
        tree: DocumentTree,
        options: Optional[Dict[str, Any]] = None,
        mode: FixMode = FixMode.APPLY,
        verbose: bool = False,
    ):
        self.tree = tree
        self.options = options or {}
        self.mode = mode
        self.verbose = verbose
        self.applied_fixes: List[AppliedFix] = []
        self.audit_log: List[AuditEntry] = []
        # id values already handled by the duplicate-id strategy in this pass
        self.seen_ids: Set[str] = set()

    def option(self, name: str, default: Any = None) -> Any:
        value = self.options.get(name)
        return default if value is None else value

    def record_fix(
        self,
        fix_type: str,
        selector: str,
        message: str,
        extra: Optional[Dict[str, Any]] = None,
    ) -> AppliedFix:
        """
        Record one mutation that was just performed on the tree.

        Args:
            fix_type: Short identifier of the kind of fix
            selector: Selector (or element description) of the mutated node
            message: Audit line describing the change
            extra: Optional structured details

        Returns:
            The AppliedFix appended to the pass
        """
        entry = AuditEntry(message=message, category=AuditCategory.APPLIED)
        fix = AppliedFix(type=fix_type, selector=selector, extra=extra)
        self.applied_fixes.append(fix)
        self.audit_log.append(entry)
        logger.debug(f"{fix_type} on {selector}: {message}")
        return fix

    def skip(self, message: str) -> None:
        """Record that a post-condition already held, so nothing was changed."""
        self.audit_log.append(AuditEntry(message=message, category=AuditCategory.SKIPPED))
        logger.debug(message)

    def debug(self, message: str) -> None:
        """Record a diagnostic line; only kept in verbose passes."""
        logger.debug(message)
        if self.verbose:
            self.audit_log.append(
                AuditEntry(message=f"{DEBUG_MARKER} {message}", category=AuditCategory.DEBUG)
            )


def describe_element(element: Tag) -> str:
    """Short ``<tag#id>`` description used in audit lines."""
    if element.get("id"):
        return f"<{element.name}#{element['id']}>"
    return f"<{element.name}>"
