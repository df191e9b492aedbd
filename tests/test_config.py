# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the configuration layer.
"""

import json

import pytest
import yaml

from html_accessibility_checker.utils.config import (
    ConfigManager,
    config_manager,
    load_config_file,
    save_config,
    validate_options,
)
from html_accessibility_checker.utils.logging_helper import ConfigurationError


@pytest.fixture
def manager():
    return ConfigManager({"remediate": {"fix": False, "backup_suffix": ".bak", "include_rules": []}})


class TestConfigManager:
    def test_defaults(self, manager):
        assert manager.get_config(section="remediate")["backup_suffix"] == ".bak"

    def test_precedence(self, manager, monkeypatch):
        manager.set_user_config({"backup_suffix": ".user"}, section="remediate")
        assert manager.get_config(section="remediate")["backup_suffix"] == ".user"

        monkeypatch.setenv("A11Y_CHECK_REMEDIATE_BACKUP_SUFFIX", ".env")
        assert manager.get_config(section="remediate")["backup_suffix"] == ".env"

        resolved = manager.get_config({"backup_suffix": ".cli"}, section="remediate")
        assert resolved["backup_suffix"] == ".cli"

    def test_none_runtime_value_keeps_lower_layer(self, manager):
        manager.set_user_config({"fix": True}, section="remediate")
        assert manager.get_config({"fix": None}, section="remediate")["fix"] is True

    def test_env_values_are_typed(self, manager, monkeypatch):
        monkeypatch.setenv("A11Y_CHECK_REMEDIATE_FIX", "yes")
        monkeypatch.setenv("A11Y_CHECK_REMEDIATE_INCLUDE_RULES", "image-alt, label")
        resolved = manager.get_config(section="remediate")
        assert resolved["fix"] is True
        assert resolved["include_rules"] == ["image-alt", "label"]

    def test_defaults_are_not_mutated(self, manager):
        resolved = manager.get_config(section="remediate")
        resolved["include_rules"].append("image-alt")
        assert manager.get_config(section="remediate")["include_rules"] == []

    def test_load_yaml_file(self, manager, tmp_path):
        path = tmp_path / "rc.yaml"
        path.write_text("remediate:\n  backup_suffix: .orig\n", encoding="utf-8")
        manager.load_file(str(path))
        assert manager.get_config(section="remediate")["backup_suffix"] == ".orig"

    def test_section_must_be_mapping(self, manager, tmp_path):
        path = tmp_path / "rc.yaml"
        path.write_text("remediate: [1, 2]\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            manager.load_file(str(path))

    def test_option_types_are_validated(self, manager, tmp_path):
        path = tmp_path / "rc.yaml"
        path.write_text("fetch:\n  timeout: ten\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="timeout"):
            manager.load_file(str(path))
        assert "fetch" not in manager.user_config

    def test_render_command_accepts_string_or_list(self, manager, tmp_path):
        path = tmp_path / "rc.yaml"
        path.write_text("render:\n  command: node render.js\n  timeout: 30\n", encoding="utf-8")
        manager.load_file(str(path))
        assert manager.user_config["render"]["command"] == "node render.js"

        path.write_text("render:\n  command: 5\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="str or list"):
            manager.load_file(str(path))

    def test_reset(self, manager):
        manager.set_user_config({"fix": True}, section="remediate")
        manager.reset()
        assert manager.get_config(section="remediate")["fix"] is False


class TestConfigFiles:
    def test_json_file(self, tmp_path):
        path = tmp_path / "rc.json"
        path.write_text(json.dumps({"output": {"format": "json"}}), encoding="utf-8")
        assert load_config_file(str(path)) == {"output": {"format": "json"}}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config_file(str(tmp_path / "nope.yaml"))

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "rc.ini"
        path.write_text("[x]", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Unsupported"):
            load_config_file(str(path))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "rc.yaml"
        path.write_text("output: [unclosed", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config_file(str(path))

    def test_save_defaults_round_trip(self, tmp_path):
        path = tmp_path / ".a11ycheckrc.yaml"
        save_config(config_manager.defaults, str(path))
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert data["remediate"]["dry_run"] is True
        assert data["output"]["format"] == "table"


class TestValidateOptions:
    def test_required_field_missing(self):
        with pytest.raises(ConfigurationError, match="missing"):
            validate_options({}, required_fields={"format": str})

    def test_wrong_type(self):
        with pytest.raises(ConfigurationError, match="incorrect type"):
            validate_options({"timeout": "ten"}, optional_fields={"timeout": int})

    def test_valid(self):
        validate_options({"format": "json", "timeout": None}, {"format": str}, {"timeout": int})
