# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
HTML Accessibility Checker Package.

This package provides tools for auditing HTML documents for accessibility
issues and remediating the issues it knows how to fix.

Main Components:
- HTML accessibility auditing
- HTML accessibility remediation
- Report rendering and the a11y-check command line
"""

__version__ = "0.3.0"
