"""Tests for config models and YAML loading."""

from __future__ import annotations

from textwrap import dedent

import pytest
from pydantic import ValidationError

from user_audit.models import AuditConfig, load_config


class TestDefaults:
    def test_no_path_means_defaults(self):
        config = load_config(None)
        assert config.fetch.base_url == "https://jsonplaceholder.typicode.com"
        assert config.fetch.endpoint == "/users"
        assert config.settings.policy == "lenient"
        assert config.settings.log_file == "user_audit.log"

    def test_empty_file_means_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == AuditConfig()


class TestLoadConfig:
    def test_overrides(self, tmp_path):
        path = tmp_path / "audit.yaml"
        path.write_text(dedent("""\
            version: "1.0"
            fetch:
              base_url: "https://api.example.test"
              endpoint: "/people"
            settings:
              log_level: "WARNING"
              log_file: null
              policy: "strict"
        """))
        config = load_config(path)
        assert config.fetch.base_url == "https://api.example.test"
        assert config.fetch.endpoint == "/people"
        assert config.settings.policy == "strict"
        assert config.settings.log_file is None

    def test_unknown_policy_fails_fast(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("settings:\n  policy: sometimes\n")
        with pytest.raises(ValidationError, match="policy"):
            load_config(path)

    def test_unknown_log_level_fails_fast(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("settings:\n  log_level: verbose\n")
        with pytest.raises(ValidationError, match="log_level"):
            load_config(path)

    def test_lowercase_log_level_rejected(self):
        with pytest.raises(ValidationError):
            AuditConfig.model_validate({"settings": {"log_level": "info"}})

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")
