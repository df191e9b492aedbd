# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Configuration management utilities for the html_accessibility_checker package.

This module provides a centralized configuration system that manages default
options, user-provided settings, and environment variables across all modules.
"""

import numbers
import os
import yaml
import json
from pathlib import Path
from typing import Dict, Any, Optional
from copy import deepcopy

from html_accessibility_checker.utils.logging_helper import setup_logger, ConfigurationError

# Configure module-level logger
logger = setup_logger(__name__)

CONFIG_SECTIONS = ["scan", "remediate", "output", "fetch", "render"]

DEFAULT_CONFIG_FILENAME = ".a11ycheckrc.yaml"

# Expected types of the options a configuration file may set, per section
SECTION_SCHEMAS = {
    "scan": {
        "run_only": list,
        "disabled_rules": list,
        "min_contrast_ratio": numbers.Real,
        "large_text_contrast_ratio": numbers.Real,
    },
    "remediate": {
        "fix": bool,
        "dry_run": bool,
        "include_rules": list,
        "exclude_rules": list,
        "backup_suffix": str,
        "default_language": str,
        "default_title": str,
        "default_heading": str,
    },
    "output": {"format": str, "verbose": bool, "template": str},
    "fetch": {"timeout": numbers.Real, "user_agent": str},
    "render": {"command": (str, list), "extensions": list, "timeout": numbers.Real},
}


class ConfigManager:
    """
    Centralized configuration manager for the checker components.

    This class handles:
    - Default options
    - User-provided options
    - Environment variables
    - Option validation
    - Option merging and cascade
    """

    def __init__(
        self, defaults: Dict[str, Any] = None, env_prefix: str = "A11Y_CHECK_"
    ):
        """
        Initialize a configuration manager.

        Args:
            defaults: Dictionary of default options
            env_prefix: Prefix for environment variables
        """
        self.defaults = defaults or {}
        self.env_prefix = env_prefix
        self.user_config = {}

    def get_config(
        self, user_options: Dict[str, Any] = None, section: str = None
    ) -> Dict[str, Any]:
        """
        Get the resolved configuration with defaults, environment vars, and user options.

        Args:
            user_options: User-provided option overrides
            section: Optional section name to retrieve (e.g., 'scan', 'remediate', 'output')

        Returns:
            Dict with the resolved configuration options
        """
        # Start with defaults
        if section and section in self.defaults:
            config = deepcopy(self.defaults[section])
        else:
            config = deepcopy(self.defaults)

        # Apply stored user config
        if section and section in self.user_config:
            config.update(self.user_config[section])
        elif not section:
            config.update(self.user_config)

        self._apply_env_vars(config, section)

        # Runtime options win; None means "not given" so the lower layer stays
        if user_options:
            config.update(
                {key: value for key, value in user_options.items() if value is not None}
            )

        return config

    def update_defaults(
        self, new_defaults: Dict[str, Any], section: str = None
    ) -> None:
        """
        Update default configuration values.

        Args:
            new_defaults: Dictionary of new default values
            section: Optional section to update
        """
        if section:
            if section not in self.defaults:
                self.defaults[section] = {}
            self.defaults[section].update(new_defaults)
        else:
            self.defaults.update(new_defaults)

    def set_user_config(self, config: Dict[str, Any], section: str = None) -> None:
        """
        Set persistent user configuration.

        Args:
            config: Dictionary of configuration options
            section: Optional section name
        """
        if section:
            if section not in self.user_config:
                self.user_config[section] = {}
            self.user_config[section].update(config)
        else:
            self.user_config.update(config)

    def load_file(self, file_path: str) -> None:
        """
        Load a configuration file into the persistent user configuration.

        Args:
            file_path: Path to a YAML or JSON configuration file

        Raises:
            ConfigurationError: If the file cannot be read, a section is not a
                mapping, or an option has the wrong type
        """
        config_data = load_config_file(file_path)

        for section in CONFIG_SECTIONS:
            if section in config_data:
                section_data = config_data[section] or {}
                if not isinstance(section_data, dict):
                    raise ConfigurationError(
                        f"Configuration section '{section}' must be a mapping"
                    )
                validate_options(section_data, optional_fields=SECTION_SCHEMAS[section])
                self.set_user_config(section_data, section)
                logger.debug(f"Applied configuration for section: {section}")

        top_level = {k: v for k, v in config_data.items() if k not in CONFIG_SECTIONS}
        if top_level:
            self.set_user_config(top_level)
            logger.debug("Applied top-level configuration")

    def reset(self) -> None:
        """Drop all persistent user configuration."""
        self.user_config = {}

    def _apply_env_vars(self, config: Dict[str, Any], section: str = None) -> None:
        """
        Apply relevant environment variables to the configuration.

        Args:
            config: Configuration dictionary to update
            section: Optional section name to scope environment variables
        """
        prefix = self.env_prefix
        if section:
            prefix = f"{prefix}{section.upper()}_"

        for env_var, value in os.environ.items():
            if not env_var.startswith(prefix):
                continue

            option_name = env_var[len(prefix) :].lower()

            # Convert value type based on existing config if possible
            if option_name in config and config[option_name] is not None:
                existing_type = type(config[option_name])
                try:
                    if existing_type == bool:
                        value = value.lower() in ("true", "1", "yes", "y")
                    elif existing_type == int:
                        value = int(value)
                    elif existing_type == float:
                        value = float(value)
                    elif existing_type == list:
                        value = [item.strip() for item in value.split(",") if item.strip()]
                except (ValueError, TypeError):
                    logger.warning(
                        f"Could not convert environment variable {env_var} to {existing_type.__name__}"
                    )

            config[option_name] = value
            logger.debug(f"Applied environment variable {env_var}")


def validate_options(
    options: Dict[str, Any],
    required_fields: Optional[Dict[str, type]] = None,
    optional_fields: Optional[Dict[str, type]] = None,
) -> None:
    """
    Validate configuration options against schemas.

    Args:
        options: The options dictionary to validate
        required_fields: Dictionary mapping field names to expected types
        optional_fields: Dictionary mapping optional field names to expected types

    Raises:
        ConfigurationError: If validation fails
    """
    if required_fields:
        for field, field_type in required_fields.items():
            if field not in options:
                raise ConfigurationError(f"Required field '{field}' is missing")

            if not isinstance(options[field], field_type):
                raise ConfigurationError(
                    f"Field '{field}' has incorrect type. "
                    f"Expected {_type_name(field_type)}, got {type(options[field]).__name__}"
                )

    if optional_fields:
        for field, field_type in optional_fields.items():
            if (
                field in options
                and options[field] is not None
                and not isinstance(options[field], field_type)
            ):
                raise ConfigurationError(
                    f"Field '{field}' has incorrect type. "
                    f"Expected {_type_name(field_type)}, got {type(options[field]).__name__}"
                )


def _type_name(field_type) -> str:
    if isinstance(field_type, tuple):
        return " or ".join(t.__name__ for t in field_type)
    return field_type.__name__


def load_config_file(file_path: str) -> Dict[str, Any]:
    """
    Load configuration from a file.

    Supports YAML (.yaml, .yml) and JSON (.json) formats. Files without an
    extension (such as the default rc file name) are read as YAML.

    Args:
        file_path: Path to the configuration file

    Returns:
        Dictionary with configuration options

    Raises:
        ConfigurationError: If file cannot be loaded or parsed
    """
    path = Path(file_path)

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {file_path}")

    suffix = path.suffix.lower()
    if suffix not in ("", ".yaml", ".yml", ".json"):
        raise ConfigurationError(
            f"Unsupported configuration file format: {path.suffix}. "
            "Supported formats: YAML (.yaml, .yml), JSON (.json)"
        )

    try:
        with open(path, "r", encoding="utf-8") as f:
            if suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Error parsing configuration file: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Error loading configuration file: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping, got {type(data).__name__}"
        )
    return data


def save_config(config: Dict[str, Any], file_path: str, file_format: str = "yaml") -> None:
    """
    Save configuration to a file.

    Args:
        config: Configuration dictionary
        file_path: Path to save the configuration file
        file_format: File format ('yaml' or 'json')

    Raises:
        ConfigurationError: If file cannot be written
    """
    if file_format.lower() not in ("yaml", "json"):
        raise ConfigurationError(f"Unsupported format: {file_format}")

    try:
        with open(file_path, "w", encoding="utf-8") as f:
            if file_format.lower() == "yaml":
                yaml.safe_dump(config, f, default_flow_style=False, sort_keys=False)
            else:
                json.dump(config, f, indent=2)
        logger.info(f"Configuration saved to {file_path}")
    except OSError as e:
        raise ConfigurationError(f"Error saving configuration: {e}") from e


# Global instance for shared configuration
config_manager = ConfigManager(
    {
        # Scanner defaults
        "scan": {
            "run_only": None,  # List of rule ids to run, None = all
            "disabled_rules": [],
            "min_contrast_ratio": 4.5,
            "large_text_contrast_ratio": 3.0,
        },
        # Remediation defaults
        "remediate": {
            "fix": False,
            "dry_run": True,
            "include_rules": [],
            "exclude_rules": [],
            "backup_suffix": ".bak",
            "default_language": "en",
            "default_title": "Untitled document",
            "default_heading": "Main content",
        },
        # Output defaults
        "output": {
            "format": "table",
            "verbose": False,
            "template": None,
        },
        # Remote fetch defaults
        "fetch": {
            "timeout": 10,
            "user_agent": "a11y-check/0.3 (+https://www.w3.org/WAI/)",
        },
        # Component-source rendering defaults
        "render": {
            "command": None,  # e.g. ["node", "render.js"]; source path is appended
            "extensions": [".jsx", ".tsx", ".vue", ".svelte"],
            "timeout": 60,
        },
    }
)
