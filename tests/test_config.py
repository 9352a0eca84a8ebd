"""Tests for glyph.core.config module."""
import logging

import pytest

from glyph.core.config import Config, validate_config


class TestConfig:
    def test_defaults_valid(self):
        assert Config.validate() == []
        validate_config(Config())

    def test_log_level_property(self, monkeypatch):
        monkeypatch.setattr(Config, "LOG_LEVEL", "debug")
        assert Config().log_level == logging.DEBUG

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setattr(Config, "LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError, match="LOG_LEVEL"):
            validate_config(Config())

    def test_extension_needs_dot(self, monkeypatch):
        monkeypatch.setattr(Config, "CHAPTER_EXTENSION", "md")
        assert any("CHAPTER_EXTENSION" in e for e in Config.validate())

    def test_source_and_translation_differ(self, monkeypatch):
        monkeypatch.setattr(Config, "TRANSLATION_DIR_NAME", "source")
        monkeypatch.setattr(Config, "SOURCE_DIR_NAME", "source")
        assert len(Config.validate()) == 1
