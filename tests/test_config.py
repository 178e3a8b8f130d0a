"""
Tests for Configuration Module
"""

import logging

import pytest

from entity_registry.config import Config


class TestConfig:
    """Test configuration loading and validation"""

    def test_config_defaults_are_valid(self, monkeypatch):
        """Test default settings pass validation"""
        monkeypatch.setattr(Config, "LOG_LEVEL", "WARNING")
        assert Config.validate() is True

    def test_config_invalid_log_level(self, monkeypatch):
        """Test an unknown log level is rejected"""
        monkeypatch.setattr(Config, "LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError, match="ENTITY_REGISTRY_LOG_LEVEL"):
            Config.validate()

    def test_log_level_from_name(self, monkeypatch):
        """Test the numeric level follows LOG_LEVEL"""
        monkeypatch.setattr(Config, "DEBUG", False)
        monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
        assert Config.log_level() == logging.INFO

    def test_debug_forces_debug_level(self, monkeypatch):
        """Test DEBUG overrides LOG_LEVEL"""
        monkeypatch.setattr(Config, "DEBUG", True)
        monkeypatch.setattr(Config, "LOG_LEVEL", "ERROR")
        assert Config.log_level() == logging.DEBUG

    def test_invalid_level_falls_back_to_warning(self, monkeypatch):
        """Test an invalid LOG_LEVEL does not break logging setup"""
        monkeypatch.setattr(Config, "DEBUG", False)
        monkeypatch.setattr(Config, "LOG_LEVEL", "LOUD")
        assert Config.log_level() == logging.WARNING

    def test_show_handles_is_bool(self):
        """Test SHOW_HANDLES is parsed to a bool"""
        assert isinstance(Config.SHOW_HANDLES, bool)
