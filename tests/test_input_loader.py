# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Tests for loading inputs from files, URLs and component sources.
"""

import subprocess
from unittest.mock import MagicMock, patch

import pytest
import requests

from html_accessibility_checker.utils.input_loader import (
    UNSUPPORTED_FILE_TYPE_MESSAGE,
    fetch_url,
    is_url,
    load_document,
    render_component,
)
from html_accessibility_checker.utils.logging_helper import InputError


class TestLocalFiles:
    def test_reads_html_file(self, html_file):
        path = html_file("<p>hi</p>")
        document = load_document(path)
        assert document.markup == "<p>hi</p>"
        assert document.persistable is True
        assert document.base_url is None

    def test_htm_extension_is_case_insensitive(self, html_file):
        assert load_document(html_file("<p>x</p>", name="PAGE.HTM")).persistable

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputError, match="Cannot read"):
            load_document(str(tmp_path / "missing.html"))

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello", encoding="utf-8")
        with pytest.raises(InputError, match=r"only \.html/\.htm supported"):
            load_document(str(path))


class TestUrls:
    def test_is_url(self):
        assert is_url("https://example.com/")
        assert is_url("http://example.com/a.html")
        assert not is_url("pages/index.html")
        assert not is_url("ftp://example.com/a.html")

    @patch("html_accessibility_checker.utils.input_loader.requests.get")
    def test_fetch(self, mock_get):
        response = MagicMock()
        response.text = "<html><body>remote</body></html>"
        mock_get.return_value = response

        document = load_document("https://example.com/page")

        assert document.markup == response.text
        assert document.base_url == "https://example.com/page"
        assert document.persistable is False
        _, kwargs = mock_get.call_args
        assert kwargs["timeout"] == 10
        assert kwargs["headers"]["User-Agent"].startswith("a11y-check")

    @patch("html_accessibility_checker.utils.input_loader.requests.get")
    def test_fetch_options_override_config(self, mock_get):
        mock_get.return_value = MagicMock(text="<p>x</p>")
        load_document("https://example.com/", fetch_options={"timeout": 3})
        assert mock_get.call_args[1]["timeout"] == 3

    @patch("html_accessibility_checker.utils.input_loader.requests.get")
    def test_http_error(self, mock_get):
        response = MagicMock()
        response.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
        mock_get.return_value = response
        with pytest.raises(InputError, match="Failed to fetch URL"):
            fetch_url("https://example.com/missing")

    @patch("html_accessibility_checker.utils.input_loader.requests.get")
    def test_connection_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("refused")
        with pytest.raises(InputError, match="refused"):
            fetch_url("https://example.com/")


class TestComponentRendering:
    @pytest.fixture
    def component(self, tmp_path):
        path = tmp_path / "Card.jsx"
        path.write_text("export default () => <div/>;", encoding="utf-8")
        return str(path)

    def test_without_command_is_unsupported(self, component):
        with pytest.raises(InputError) as excinfo:
            load_document(component)
        assert str(excinfo.value) == UNSUPPORTED_FILE_TYPE_MESSAGE

    @patch("html_accessibility_checker.utils.input_loader.subprocess.run")
    def test_renders_with_command(self, mock_run, component):
        mock_run.return_value = subprocess.CompletedProcess(
            args=[], returncode=0, stdout="<div>Card</div>", stderr=""
        )
        document = load_document(component, render_options={"command": "node render.js"})

        assert document.markup == "<div>Card</div>"
        assert document.persistable is False
        assert mock_run.call_args[0][0] == ["node", "render.js", component]

    @patch("html_accessibility_checker.utils.input_loader.subprocess.run")
    def test_failing_command(self, mock_run, component):
        mock_run.return_value = subprocess.CompletedProcess(
            args=[], returncode=1, stdout="", stderr="SyntaxError"
        )
        with pytest.raises(InputError, match="SyntaxError"):
            render_component(component, ["node", "render.js"])

    @patch("html_accessibility_checker.utils.input_loader.subprocess.run")
    def test_empty_output(self, mock_run, component):
        mock_run.return_value = subprocess.CompletedProcess(
            args=[], returncode=0, stdout="  \n", stderr=""
        )
        with pytest.raises(InputError, match="no markup"):
            render_component(component, ["node", "render.js"])

    @patch("html_accessibility_checker.utils.input_loader.subprocess.run")
    def test_timeout(self, mock_run, component):
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="node", timeout=1)
        with pytest.raises(InputError, match="render failed"):
            render_component(component, "node render.js", timeout=1)
