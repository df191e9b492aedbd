# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Remediation strategies for accessibility issues.

This package contains strategies for remediating different types of accessibility issues.
Per-match strategies take ``(context, element)``; document strategies take ``(context)``.
"""
