# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Input loading for the checker.

Turns an input argument (local file path, http(s) URL or component source)
into markup text. Every failure is raised as ``InputError`` so the caller can
record it against that input and move on.
"""

import os
import shlex
import subprocess
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urlparse

import requests
from pydantic import BaseModel

from html_accessibility_checker.utils.config import config_manager
from html_accessibility_checker.utils.logging_helper import setup_logger, InputError

# Set up module-level logger
logger = setup_logger(__name__)

HTML_EXTENSIONS = (".html", ".htm")

UNSUPPORTED_FILE_TYPE_MESSAGE = "Unsupported file type (only .html/.htm supported)"


class LoadedDocument(BaseModel):
    """Markup loaded from one input, plus where it came from."""

    source: str
    markup: str
    base_url: Optional[str] = None
    # Only local HTML files can be written back
    persistable: bool = False


def is_url(source: str) -> bool:
    return urlparse(source).scheme in ("http", "https")


def load_document(
    source: str,
    fetch_options: Optional[Dict[str, Any]] = None,
    render_options: Optional[Dict[str, Any]] = None,
) -> LoadedDocument:
    """
    Load the markup for one input.

    Args:
        source: Local path or http(s) URL
        fetch_options: Overrides for the ``fetch`` config section
        render_options: Overrides for the ``render`` config section

    Returns:
        The loaded document

    Raises:
        InputError: If the input is unsupported or cannot be read, fetched or rendered
    """
    if is_url(source):
        fetch_config = config_manager.get_config(fetch_options, section="fetch")
        markup = fetch_url(
            source,
            timeout=fetch_config.get("timeout", 10),
            user_agent=fetch_config.get("user_agent"),
        )
        return LoadedDocument(source=source, markup=markup, base_url=source)

    extension = os.path.splitext(source)[1].lower()
    if extension in HTML_EXTENSIONS:
        return LoadedDocument(
            source=source, markup=read_local_file(source), persistable=True
        )

    render_config = config_manager.get_config(render_options, section="render")
    extensions = [ext.lower() for ext in render_config.get("extensions") or []]
    if extension in extensions and render_config.get("command"):
        markup = render_component(
            source, render_config["command"], timeout=render_config.get("timeout", 60)
        )
        return LoadedDocument(source=source, markup=markup)

    raise InputError(UNSUPPORTED_FILE_TYPE_MESSAGE)


def read_local_file(path: str) -> str:
    """
    Read a local file as UTF-8 text.

    Raises:
        InputError: If the file cannot be read or decoded
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read {path}: {e}") from e


def fetch_url(url: str, timeout: float = 10, user_agent: Optional[str] = None) -> str:
    """
    Fetch a remote document.

    Args:
        url: Full http(s) URL
        timeout: Request timeout in seconds
        user_agent: Optional User-Agent header

    Returns:
        The response body as text

    Raises:
        InputError: Network error or non-success status
    """
    headers = {"User-Agent": user_agent} if user_agent else {}
    logger.debug(f"Fetching {url}")
    try:
        resp = requests.get(url, timeout=timeout, headers=headers)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise InputError(f"Failed to fetch URL: {exc}") from exc
    return resp.text


def render_component(
    path: str, command: Union[str, List[str]], timeout: float = 60
) -> str:
    """
    Render a component source to static markup with an external command.

    The source path is appended to the command; the command must print the
    rendered markup on stdout.

    Args:
        path: Path of the component source
        command: Command line as a list or a shell-style string
        timeout: Seconds before the render is abandoned

    Returns:
        The rendered markup

    Raises:
        InputError: If the command cannot run, fails or prints nothing
    """
    if not os.path.isfile(path):
        raise InputError(f"Cannot read {path}: file not found")

    args = shlex.split(command) if isinstance(command, str) else list(command)
    args.append(path)
    logger.debug(f"Rendering component with: {' '.join(args)}")

    try:
        proc = subprocess.run(
            args, capture_output=True, text=True, timeout=timeout, check=False
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise InputError(f"Component render failed for {path}: {e}") from e

    if proc.returncode != 0:
        detail = proc.stderr.strip() or f"exit code {proc.returncode}"
        raise InputError(f"Component render failed for {path}: {detail}")
    if not proc.stdout.strip():
        raise InputError(f"Component render produced no markup for {path}")
    return proc.stdout
