# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
HTML Accessibility Remediation functionality.
"""

from html_accessibility_checker.remediate.catalog import (
    BASELINE_RULES,
    SUPPORTED_FINDING_IDS,
    RuleScope,
)
from html_accessibility_checker.remediate.remediation_manager import RemediationEngine
from html_accessibility_checker.remediate.violation_filter import filter_violations

__all__ = [
    "BASELINE_RULES",
    "SUPPORTED_FINDING_IDS",
    "RuleScope",
    "RemediationEngine",
    "filter_violations",
]
