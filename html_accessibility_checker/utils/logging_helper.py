# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Logging and error types for the html_accessibility_checker package.

Every module gets its logger from ``setup_logger``. Errors raised by the
package derive from ``DocumentAccessibilityError`` so callers can tell a
failed document apart from a programming error.
"""

import logging
import sys
from typing import Optional, Type


class DocumentAccessibilityError(Exception):
    """Base exception class for all html_accessibility_checker errors."""


class AccessibilityAuditError(DocumentAccessibilityError):
    """Raised when a document cannot be scanned."""


class AccessibilityRemediationError(DocumentAccessibilityError):
    """Raised when a remediation rule fails on a document."""


class ConfigurationError(DocumentAccessibilityError):
    """Raised when a configuration file or option is invalid."""


class InputError(DocumentAccessibilityError):
    """Raised when an input document cannot be read, fetched or rendered."""


class PersistenceError(DocumentAccessibilityError):
    """Raised when a backup or a remediated document cannot be written."""


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str) -> logging.Logger:
    """
    Get a package logger that writes to stdout.

    The level follows the root logger: DEBUG when the root logger is at
    DEBUG (the CLI's ``--debug``), INFO otherwise.

    Args:
        name: The logger name, typically __name__ of the calling module

    Returns:
        A configured logger instance
    """
    logger_obj = logging.getLogger(name)
    root_level = logging.getLogger().level
    logger_obj.setLevel(logging.DEBUG if root_level <= logging.DEBUG else logging.INFO)
    logger_obj.propagate = True

    if not logger_obj.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger_obj.addHandler(handler)

    return logger_obj


def log_exception(
    logger: logging.Logger,
    exception: Exception,
    message: str,
    include_traceback: bool = True,
) -> None:
    """Log an exception at ERROR as ``<message>: <type> - <text>``."""
    logger.error(
        f"{message}: {type(exception).__name__} - {exception}",
        exc_info=include_traceback,
    )


def handle_exception(
    exc: Exception,
    logger: logging.Logger,
    message: Optional[str] = None,
    custom_exception: Type[DocumentAccessibilityError] = DocumentAccessibilityError,
) -> None:
    """
    Log an unexpected exception and re-raise it as a package error.

    Args:
        exc: The caught exception
        logger: Logger to use for recording the error
        message: Message for the log line and the raised error
        custom_exception: Package error type to raise

    Raises:
        custom_exception, chained to the original exception
    """
    message = message or str(exc)
    log_exception(logger, exc, message, include_traceback=False)
    raise custom_exception(message) from exc
