import logging

import pytest
from pydantic import ValidationError

from gof_patterns.config import ConfigFactory, DemoSettings
from gof_patterns.exceptions import ConfigurationError


def test_defaults():
    settings = DemoSettings()
    assert settings.debug_mode is False
    assert settings.log_level == "INFO"
    assert settings.variant_list == []
    assert settings.effective_log_level == logging.INFO


def test_env_loading(monkeypatch):
    monkeypatch.setenv("GOF_DEMO_VARIANTS", "2, 1")
    monkeypatch.setenv("GOF_LOG_LEVEL", "warning")
    monkeypatch.setenv("GOF_DEBUG_MODE", "true")

    settings = DemoSettings()
    assert settings.variant_list == ["2", "1"]
    assert settings.log_level == "WARNING"
    assert settings.effective_log_level == logging.DEBUG


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("GOF_LOG_LEVEL", "chatty")
    with pytest.raises(ConfigurationError):
        ConfigFactory().settings()


def test_blank_variant_list_is_rejected():
    with pytest.raises(ValidationError):
        DemoSettings(demo_variants=" , ")


def test_blank_variant_list_from_env(monkeypatch):
    monkeypatch.setenv("GOF_DEMO_VARIANTS", ",")
    with pytest.raises(ConfigurationError, match="names no variants"):
        ConfigFactory().settings()


def test_factory_caches_settings():
    factory = ConfigFactory()
    assert factory.settings() is factory.settings()


def test_configure_logging_sets_package_level():
    from gof_patterns.config import LOGGER_NAME, configure_logging

    logger = configure_logging(logging.DEBUG)
    assert logger.name == LOGGER_NAME
    assert logger.level == logging.DEBUG
    logger.setLevel(logging.NOTSET)
