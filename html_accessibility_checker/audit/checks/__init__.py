# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Accessibility checks package.

This package contains the individual checks run by the scanner.
"""

from html_accessibility_checker.audit.checks.document_checks import (
    DocumentTitleCheck,
    DocumentLanguageCheck,
)
from html_accessibility_checker.audit.checks.landmark_checks import (
    MainLandmarkCheck,
    RegionCheck,
    SkipLinkCheck,
)
from html_accessibility_checker.audit.checks.heading_checks import (
    HeadingOrderCheck,
    PageHasHeadingOneCheck,
)
from html_accessibility_checker.audit.checks.image_checks import ImageAltCheck
from html_accessibility_checker.audit.checks.form_checks import (
    FormLabelCheck,
    MultipleLabelCheck,
)
from html_accessibility_checker.audit.checks.link_checks import (
    LinkNameCheck,
    ButtonNameCheck,
)
from html_accessibility_checker.audit.checks.aria_checks import (
    AriaRolesCheck,
    AriaValidAttrCheck,
    TabindexCheck,
)
from html_accessibility_checker.audit.checks.structure_checks import (
    DuplicateIdCheck,
    TableHeadersCheck,
)
from html_accessibility_checker.audit.checks.color_contrast_checks import (
    ColorContrastCheck,
)

__all__ = [
    "DocumentTitleCheck",
    "DocumentLanguageCheck",
    "MainLandmarkCheck",
    "RegionCheck",
    "SkipLinkCheck",
    "HeadingOrderCheck",
    "PageHasHeadingOneCheck",
    "ImageAltCheck",
    "FormLabelCheck",
    "MultipleLabelCheck",
    "LinkNameCheck",
    "ButtonNameCheck",
    "AriaRolesCheck",
    "AriaValidAttrCheck",
    "TabindexCheck",
    "DuplicateIdCheck",
    "TableHeadersCheck",
    "ColorContrastCheck",
]
