"""
Unit tests for settings and logger setup.
"""

import logging
from datetime import date

import pytest

from buildtrack.core.config import Settings, get_settings
from buildtrack.core.logger import LOG_FORMAT, setup_logger
from buildtrack.services.milestone_generation_service import (
    calculate_project_end_date,
    suggest_milestone_count,
)


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.LOG_LEVEL == "INFO"
    assert settings.VALIDATE_TEMPLATES_ON_STARTUP is True


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("VALIDATE_TEMPLATES_ON_STARTUP", "false")

    settings = get_settings()

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.VALIDATE_TEMPLATES_ON_STARTUP is False


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_engine_constants_ignore_environment(monkeypatch: pytest.MonkeyPatch):
    """Size baseline and milestone cap cannot be changed through the environment."""
    monkeypatch.setenv("DEFAULT_PROJECT_SIZE", "2500")
    monkeypatch.setenv("MAX_SUGGESTED_MILESTONES", "50")

    settings = get_settings()

    assert not hasattr(settings, "DEFAULT_PROJECT_SIZE")
    assert not hasattr(settings, "MAX_SUGGESTED_MILESTONES")
    assert calculate_project_end_date("residential", date(2025, 1, 1)) == date(2025, 6, 30)
    assert suggest_milestone_count("infrastructure", 480) == 12


def test_invalid_setting_rejected(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LOG_LEVEL", "VERBOSE")

    with pytest.raises(ValueError):
        Settings(_env_file=None)


def test_setup_logger_attaches_single_handler():
    logger = setup_logger("buildtrack.tests.single_handler")
    again = setup_logger("buildtrack.tests.single_handler")

    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.handlers[0].formatter._fmt == LOG_FORMAT


def test_setup_logger_level_override():
    logger = setup_logger("buildtrack.tests.level_override", level="DEBUG")

    assert logger.level == logging.DEBUG


def test_setup_logger_uses_configured_level(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    logger = setup_logger("buildtrack.tests.configured_level")

    assert logger.level == logging.WARNING
