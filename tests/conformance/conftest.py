import pytest

from conformance.config import reset_config
from conformance.emitter import ConformanceRunner, EventEmitter


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Make every test read CONFORMANCE_* settings from a clean slate."""
    for var in (
        "CONFORMANCE_DEV_MODE",
        "CONFORMANCE_LOG_LEVEL",
        "CONFORMANCE_ATTACH_LOGGER",
        "CONFORMANCE_PREFIX_COLOR",
        "CONFORMANCE_USE_COLORS",
    ):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield
    reset_config()


class RecordingRunner(EventEmitter):
    """Emitter with warn/error only, recording every call."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[str, tuple]] = []

    def warn(self, *args):
        self.calls.append(("warn", args))

    def error(self, *args):
        self.calls.append(("error", args))


@pytest.fixture
def emitter() -> EventEmitter:
    return EventEmitter()


@pytest.fixture
def runner() -> ConformanceRunner:
    return ConformanceRunner()


@pytest.fixture
def recording_runner() -> RecordingRunner:
    return RecordingRunner()
