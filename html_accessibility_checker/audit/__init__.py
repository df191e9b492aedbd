# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
HTML Accessibility Audit functionality.
"""

from html_accessibility_checker.audit.base_check import ScanContext
from html_accessibility_checker.audit.scanner import SCANNER_RULE_IDS, scan

__all__ = [
    "ScanContext",
    "SCANNER_RULE_IDS",
    "scan",
]
