# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
HTML Accessibility Scanner.

This module runs the accessibility checks over a document tree and returns
categorized results (violations, passes, incomplete, inapplicable).
"""

from typing import Any, Dict, List, Optional, Type

from html_accessibility_checker.audit.base_check import AccessibilityCheck, ScanContext
from html_accessibility_checker.audit.checks import (
    DocumentTitleCheck,
    DocumentLanguageCheck,
    MainLandmarkCheck,
    RegionCheck,
    SkipLinkCheck,
    HeadingOrderCheck,
    PageHasHeadingOneCheck,
    ImageAltCheck,
    FormLabelCheck,
    MultipleLabelCheck,
    LinkNameCheck,
    ButtonNameCheck,
    AriaRolesCheck,
    AriaValidAttrCheck,
    TabindexCheck,
    DuplicateIdCheck,
    TableHeadersCheck,
    ColorContrastCheck,
)
from html_accessibility_checker.utils.config import config_manager
from html_accessibility_checker.utils.html_utils import DocumentTree
from html_accessibility_checker.utils.logging_helper import (
    setup_logger,
    AccessibilityAuditError,
)
from html_accessibility_checker.utils.report_models import ScanResults

# Set up module-level logger
logger = setup_logger(__name__)

# Checks in the order their rules are reported
CHECK_CLASSES: List[Type[AccessibilityCheck]] = [
    DocumentTitleCheck,
    DocumentLanguageCheck,
    MainLandmarkCheck,
    RegionCheck,
    SkipLinkCheck,
    HeadingOrderCheck,
    PageHasHeadingOneCheck,
    ImageAltCheck,
    FormLabelCheck,
    MultipleLabelCheck,
    LinkNameCheck,
    ButtonNameCheck,
    AriaRolesCheck,
    AriaValidAttrCheck,
    TabindexCheck,
    DuplicateIdCheck,
    TableHeadersCheck,
    ColorContrastCheck,
]

SCANNER_RULE_IDS = [rule_id for check in CHECK_CLASSES for rule_id in check.rule_ids]


def resolve_scan_options(rule_options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge rule options with the configured scan defaults.

    Args:
        rule_options: ``{"run_only": [ids]}`` and/or ``{"rules": {id: {"enabled": bool}}}``

    Returns:
        The resolved scan options

    Raises:
        AccessibilityAuditError: If the options reference rules the scanner does not know
    """
    options = config_manager.get_config(rule_options, section="scan")

    unknown = [r for r in options.get("run_only") or [] if r not in SCANNER_RULE_IDS]
    if unknown:
        raise AccessibilityAuditError(f"Unknown rule id(s) in run_only: {', '.join(unknown)}")

    rules = options.get("rules") or {}
    if not isinstance(rules, dict):
        raise AccessibilityAuditError("Scan option 'rules' must be a mapping of rule ids")
    return options


def scan(tree: DocumentTree, rule_options: Optional[Dict[str, Any]] = None) -> ScanResults:
    """
    Scan a document tree for accessibility defects.

    Args:
        tree: The parsed document; it is not modified
        rule_options: Optional rule selection (see ``resolve_scan_options``)

    Returns:
        Categorized scan results
    """
    context = ScanContext(tree, resolve_scan_options(rule_options))

    for check_class in CHECK_CLASSES:
        check_class(context).run()

    results = context.to_results()
    logger.debug(
        f"Scan finished: {len(results.violations)} violations, {len(results.passes)} passes, "
        f"{len(results.incomplete)} incomplete, {len(results.inapplicable)} inapplicable"
    )
    return results
