#!/usr/bin/env python3
"""
Integration tests for configuration module.

Tests configuration loading, validation and environment overrides.
"""

from pathlib import Path

import pytest

from autotrackr.core.config import Config, Environment, get_config, is_test, reload_config


@pytest.mark.integration
class TestConfigLoading:
    """Test configuration loading and structure."""

    def test_config_loads_in_test_environment(self):
        config = reload_config()

        assert config.environment == Environment.TEST
        assert is_test()
        assert isinstance(config.data_dir, Path)
        assert config.output_dir == config.data_dir / "exports"
        assert config.output_dir.exists()

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_report_defaults(self):
        config = reload_config()

        assert config.reports.app_name == "AutoTrackr"
        assert config.reports.default_entry_title == "Expense"
        assert config.reports.tax_year is None

    def test_tax_year_override(self, monkeypatch):
        monkeypatch.setenv("AUTOTRACKR_TAX_YEAR", "2023")
        try:
            assert reload_config().reports.tax_year == 2023
        finally:
            monkeypatch.delenv("AUTOTRACKR_TAX_YEAR")
            reload_config()

    def test_to_dict(self):
        data = reload_config().to_dict()

        assert data["environment"] == "test"
        assert isinstance(data["data_dir"], str)
        assert data["reports"]["app_name"] == "AutoTrackr"


@pytest.mark.integration
class TestConfigValidation:
    """Test validation errors."""

    def test_valid_config_has_no_errors(self):
        assert Config.from_environment().validate() == []

    def test_blank_default_title(self, monkeypatch):
        monkeypatch.setenv("AUTOTRACKR_DEFAULT_TITLE", "  ")
        errors = Config.from_environment().validate()
        assert any("AUTOTRACKR_DEFAULT_TITLE" in e for e in errors)

    def test_bad_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        errors = Config.from_environment().validate()
        assert any("LOG_LEVEL" in e for e in errors)

    def test_invalid_environment(self, monkeypatch):
        monkeypatch.setenv("AUTOTRACKR_ENV", "staging")
        with pytest.raises(ValueError):
            Config.from_environment()
