import logging

from conformance.task_logger import ConformanceLogger, logger_methods


def test_logger_methods_of_capability():
    assert logger_methods(ConformanceLogger) == ["log", "info", "warn", "error", "debug"]


def test_logger_methods_skip_private_and_dunder():
    class Capability:
        def __init__(self):
            pass

        def _internal(self):
            pass

        def notice(self):
            pass

        level = "info"

    assert logger_methods(Capability) == ["notice"]


def test_logger_methods_include_bases_once():
    class Extended(ConformanceLogger):
        def warn(self, *args):
            pass

        def success(self, *args):
            pass

    assert logger_methods(Extended) == ["log", "info", "warn", "error", "debug", "success"]


def test_capability_writes_through_logging(caplog):
    capability = ConformanceLogger()

    with caplog.at_level(logging.DEBUG):
        capability.log("[A]", "one")
        capability.warn("[A]", "two", 2)
        capability.error("[A]", "three")

    levels = [(r.levelno, r.getMessage()) for r in caplog.records]
    assert (logging.INFO, "[A] one") in levels
    assert (logging.WARNING, "[A] two 2") in levels
    assert (logging.ERROR, "[A] three") in levels
