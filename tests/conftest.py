# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Shared fixtures for the html_accessibility_checker tests.
"""

import os

import pytest

from html_accessibility_checker.remediate.remediation_manager import RemediationEngine
from html_accessibility_checker.utils.config import config_manager
from html_accessibility_checker.utils.html_utils import DocumentTree
from html_accessibility_checker.utils.report_models import (
    FixMode,
    Finding,
    NodeMatch,
)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate every test from user configuration and A11Y_CHECK_* variables."""
    for key in list(os.environ):
        if key.startswith(config_manager.env_prefix):
            monkeypatch.delenv(key)
    config_manager.reset()
    yield
    config_manager.reset()


@pytest.fixture
def make_finding():
    """Build a violation finding whose nodes are addressed by the given selectors."""

    def _make(rule_id, *targets):
        return Finding(id=rule_id, nodes=[NodeMatch(targets=[t]) for t in targets])

    return _make


@pytest.fixture
def run_autofix():
    """Parse markup, run one remediation pass and return (tree, outcome)."""

    def _run(html, findings, verbose=False, mode=FixMode.DRY_RUN, options=None):
        tree = DocumentTree.parse(html)
        outcome = RemediationEngine(options).remediate(
            tree, findings, mode=mode, verbose=verbose
        )
        return tree, outcome

    return _run


@pytest.fixture
def html_file(tmp_path):
    """Write markup to a file under tmp_path and return its path as a string."""

    def _write(markup, name="page.html"):
        path = tmp_path / name
        path.write_text(markup, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def accessible_page():
    return (
        '<!DOCTYPE html><html lang="en"><head><title>Home</title></head>'
        '<body><a id="skip-link" href="#main">Skip to main content</a>'
        '<main id="main"><h1>Home</h1><p>Welcome.</p>'
        '<img src="logo.png" alt="Company logo"></main></body></html>'
    )


@pytest.fixture
def broken_page():
    return (
        "<html><head></head><body>"
        "<div><h3>Deals</h3><img src=\"deal.png\">"
        "<input type=\"text\" name=\"promo_code\">"
        "<a href=\"/cart\"></a></div>"
        "</body></html>"
    )
