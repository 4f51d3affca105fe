"""
Tests for the Settings configuration.
"""

import logging

import pytest

from page_context.config.settings import Settings
from page_context.exceptions import ConfigurationError


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PAGE_CONTEXT_LOG_LEVEL", raising=False)
        monkeypatch.delenv("PAGE_CONTEXT_DEFAULT_ENTITY_TYPE", raising=False)

        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.log_level_number == logging.INFO
        assert settings.default_entity_type == "node"

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("PAGE_CONTEXT_LOG_LEVEL", "debug")
        monkeypatch.setenv("PAGE_CONTEXT_DEFAULT_ENTITY_TYPE", "taxonomy_term")

        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.default_entity_type == "taxonomy_term"

    def test_empty_value_uses_default(self, monkeypatch):
        monkeypatch.setenv("PAGE_CONTEXT_DEFAULT_ENTITY_TYPE", "")

        assert Settings().default_entity_type == "node"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("PAGE_CONTEXT_LOG_LEVEL", "LOUD")

        with pytest.raises(
            ConfigurationError, match="PAGE_CONTEXT_LOG_LEVEL must be one of"
        ):
            Settings()
