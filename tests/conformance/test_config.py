import logging

import pytest
from pydantic import ValidationError

from conformance.config import ConformanceConfig, get_config, reset_config


def test_defaults():
    config = ConformanceConfig(_env_file=None)

    assert config.dev_mode is False
    assert config.log_level == "INFO"
    assert config.attach_logger is True
    assert config.prefix_color == "light_black"
    assert config.use_colors is True
    assert config.level == logging.INFO


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("CONFORMANCE_LOG_LEVEL", "warning")
    monkeypatch.setenv("CONFORMANCE_ATTACH_LOGGER", "0")
    monkeypatch.setenv("CONFORMANCE_PREFIX_COLOR", "cyan")

    config = ConformanceConfig(_env_file=None)

    assert config.log_level == "WARNING"
    assert config.attach_logger is False
    assert config.prefix_color == "cyan"
    assert config.level == logging.WARNING


def test_dev_mode_forces_debug(monkeypatch):
    monkeypatch.setenv("CONFORMANCE_DEV_MODE", "true")
    monkeypatch.setenv("CONFORMANCE_LOG_LEVEL", "ERROR")

    assert ConformanceConfig(_env_file=None).level == logging.DEBUG


def test_invalid_log_level_rejected():
    with pytest.raises(ValidationError):
        ConformanceConfig(_env_file=None, log_level="LOUD")


def test_invalid_prefix_color_rejected():
    with pytest.raises(ValidationError):
        ConformanceConfig(_env_file=None, prefix_color="mauve")


def test_get_config_is_cached_until_reset(monkeypatch):
    first = get_config()
    assert get_config() is first

    monkeypatch.setenv("CONFORMANCE_USE_COLORS", "false")
    assert get_config().use_colors is first.use_colors

    reset_config()
    assert get_config() is not first
    assert get_config().use_colors is False
