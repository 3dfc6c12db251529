import pytest

from conformance.emitter import EventEmitter
from conformance.models import InstallOptions


def test_parse_none_gives_empty_options():
    options = InstallOptions.parse(None)
    assert options.runner is None
    assert options.attach_logger is None


def test_parse_mapping_keeps_runner_identity():
    emitter = EventEmitter()
    options = InstallOptions.parse({"runner": emitter, "attach_logger": False, "extra": 1})

    assert options.runner is emitter
    assert options.attach_logger is False


def test_parse_returns_existing_model():
    options = InstallOptions(runner=EventEmitter())
    assert InstallOptions.parse(options) is options


def test_parse_rejects_bad_flag():
    with pytest.raises(ValueError):
        InstallOptions.parse({"attach_logger": "sometimes"})
