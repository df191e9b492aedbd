# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Accessibility checker.

This module provides the entry point that loads each input, scans it and,
when fixing is enabled, remediates it and optionally writes it back.
"""

import os
import shutil
import threading
from typing import Any, Dict, Iterable, List, Optional

from html_accessibility_checker.audit.scanner import scan
from html_accessibility_checker.remediate.remediation_manager import RemediationEngine
from html_accessibility_checker.remediate.violation_filter import filter_violations
from html_accessibility_checker.utils.config import config_manager
from html_accessibility_checker.utils.html_utils import DocumentTree
from html_accessibility_checker.utils.input_loader import load_document
from html_accessibility_checker.utils.logging_helper import (
    setup_logger,
    log_exception,
    DocumentAccessibilityError,
    PersistenceError,
)
from html_accessibility_checker.utils.report_models import DocumentResult, FixMode

# Set up module-level logger
logger = setup_logger(__name__)

# One scan-then-remediate cycle at a time, process-wide
_SCAN_LOCK = threading.Lock()


class AccessibilityChecker:
    """Checks documents for accessibility defects and optionally repairs them."""

    def __init__(
        self,
        options: Optional[Dict[str, Any]] = None,
        rule_options: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the checker.

        Args:
            options: Remediation and output overrides:
                - fix (bool): Run the remediation engine
                - dry_run (bool): Remediate in memory only (default True)
                - include_rules (list): Finding ids to remediate (empty = all)
                - exclude_rules (list): Finding ids never to remediate
                - verbose (bool): Keep diagnostic entries in the autofix log
            rule_options: Scanner rule selection (run_only / rules)
        """
        options = options or {}
        self.remediate_options = config_manager.get_config(options, section="remediate")
        self.verbose = bool(
            config_manager.get_config(
                {"verbose": options.get("verbose")}, section="output"
            ).get("verbose")
        )
        self.rule_options = rule_options
        self.fetch_options = options.get("fetch")
        self.render_options = options.get("render")
        self.engine = RemediationEngine(self.remediate_options)

    @property
    def mode(self) -> FixMode:
        if not self.remediate_options.get("fix"):
            return FixMode.REPORT_ONLY
        if self.remediate_options.get("dry_run", True):
            return FixMode.DRY_RUN
        return FixMode.APPLY

    def check_files(self, sources: Iterable[str]) -> List[DocumentResult]:
        """
        Check every input, strictly one after another.

        An input that cannot be loaded, scanned or remediated is recorded as a
        result with an error; the batch continues with the next input.

        Args:
            sources: Local paths and/or http(s) URLs

        Returns:
            One DocumentResult per input, in input order
        """
        sources = list(sources)
        logger.info(f"Processing {len(sources)} file(s)...")

        results = []
        for source in sources:
            try:
                results.append(self.check_file(source))
            except DocumentAccessibilityError as e:
                logger.error(f"Error processing {source}: {e}")
                results.append(DocumentResult.from_error(source, str(e)))
        return results

    def check_file(self, source: str) -> DocumentResult:
        """
        Check one input.

        Args:
            source: Local path or http(s) URL

        Returns:
            The result for the input

        Raises:
            InputError: If the input cannot be loaded
            AccessibilityAuditError: If the scan cannot run
            AccessibilityRemediationError: If a remediation rule fails
        """
        if self.verbose:
            logger.info(f"Checking: {source}")

        document = load_document(source, self.fetch_options, self.render_options)
        tree = DocumentTree.parse(document.markup, base_url=document.base_url)
        mode = self.mode

        with _SCAN_LOCK:
            scan_results = scan(tree, self.rule_options)
            result = DocumentResult(
                file=source,
                violations=scan_results.violations,
                passes=scan_results.passes,
                incomplete=scan_results.incomplete,
                inapplicable=scan_results.inapplicable,
                mode=mode,
            )
            if mode == FixMode.REPORT_ONLY:
                return result

            findings = filter_violations(
                scan_results.violations,
                self.remediate_options.get("include_rules"),
                self.remediate_options.get("exclude_rules"),
            )
            outcome = self.engine.remediate(tree, findings, mode=mode, verbose=self.verbose)

        result.applied_fixes = outcome.applied_fixes
        result.autofix_log = outcome.audit_log

        if mode == FixMode.APPLY and outcome.applied_fixes:
            if document.persistable:
                try:
                    result.backup_path = write_with_backup(
                        source,
                        document.markup,
                        tree.serialize(),
                        self.remediate_options.get("backup_suffix", ".bak"),
                    )
                    result.written = True
                except PersistenceError as e:
                    logger.error(f"Error processing {source}: {e}")
                    result.error = str(e)
            else:
                logger.info(f"{source} is not a local HTML file; fixes were not written")
        return result


def write_with_backup(path: str, original: str, remediated: str, suffix: str = ".bak") -> str:
    """
    Back up a file, then overwrite it with remediated content.

    Args:
        path: The file to overwrite
        original: Content the file was read with, written to the backup
        remediated: New content for the file
        suffix: Appended to the path to form the backup path

    Returns:
        The backup path

    Raises:
        PersistenceError: If either write fails
    """
    backup_path = f"{path}{suffix}"
    try:
        if os.path.exists(path):
            shutil.copy2(path, backup_path)
        else:
            with open(backup_path, "w", encoding="utf-8") as f:
                f.write(original)
    except OSError as e:
        log_exception(logger, e, f"Could not write backup {backup_path}")
        raise PersistenceError(f"Could not write backup {backup_path}: {e}") from e

    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(remediated)
    except OSError as e:
        log_exception(logger, e, f"Could not write {path}")
        raise PersistenceError(f"Could not write {path}: {e}") from e

    logger.info(f"Wrote fixes to {path} (backup: {backup_path})")
    return backup_path
