"""Tests for filelang configuration."""

import logging
from pathlib import Path

import pytest

from filelang.config import LanguageConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("FILELANG_RULES_PATH", raising=False)
    monkeypatch.delenv("FILELANG_LOG_LEVEL", raising=False)


class TestLanguageConfig:
    def test_defaults_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = LanguageConfig.from_env()

        assert config.rules_path == tmp_path / "rules.yaml"
        assert config.log_level == "WARNING"

    def test_base_path(self, tmp_path):
        config = LanguageConfig.from_env(base_path=tmp_path)
        assert config.rules_path == tmp_path / "rules.yaml"

    def test_env_rules_path_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv("FILELANG_RULES_PATH", "/etc/routes/rules.yaml")
        config = LanguageConfig.from_env(base_path=tmp_path)

        assert config.rules_path == Path("/etc/routes/rules.yaml")

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("FILELANG_LOG_LEVEL", "debug")
        config = LanguageConfig.from_env()

        assert config.log_level == "DEBUG"
        assert config.logging_level == logging.DEBUG

    def test_unknown_log_level_falls_back_to_warning(self):
        config = LanguageConfig(rules_path=Path("rules.yaml"), log_level="LOUD")
        assert config.logging_level == logging.WARNING
