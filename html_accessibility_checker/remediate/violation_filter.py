# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Include/exclude filtering of scan findings by rule id.
"""

from typing import Iterable, List, Optional

from html_accessibility_checker.utils.logging_helper import setup_logger
from html_accessibility_checker.utils.report_models import Finding

logger = setup_logger(__name__)


def filter_violations(
    findings: List[Finding],
    include_ids: Optional[Iterable[str]] = None,
    exclude_ids: Optional[Iterable[str]] = None,
) -> List[Finding]:
    """
    Select the findings that remediation should act on.

    A non-empty include list keeps only those rule ids; the exclude list is
    then removed from what is left, so an id in both lists is excluded.
    Ids that match no finding have no effect.

    Args:
        findings: Findings in scanner order
        include_ids: Rule ids to keep, or None/empty for all
        exclude_ids: Rule ids to drop

    Returns:
        A new list of findings, order preserved
    """
    include = set(include_ids or [])
    exclude = set(exclude_ids or [])

    selected = [f for f in findings if not include or f.id in include]
    selected = [f for f in selected if f.id not in exclude]

    if len(selected) != len(findings):
        logger.debug(f"Filtered findings from {len(findings)} to {len(selected)}")
    return selected
