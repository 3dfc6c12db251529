# conformance/task_logger.py

"""
Runner-side logging capability.

`ConformanceLogger` defines the logging operations a runner may offer. A task
forwards each public operation named here to its runner, prefixed with the
task name.
"""

import inspect

from conformance.logger import get_logger

log = get_logger(__name__)


def _join(args: tuple) -> str:
    return " ".join(str(arg) for arg in args)


class ConformanceLogger:
    """Logging operations exposed by a conformance runner."""

    def log(self, *args) -> None:
        log.info(_join(args))

    def info(self, *args) -> None:
        log.info(_join(args))

    def warn(self, *args) -> None:
        log.warning(_join(args))

    def error(self, *args) -> None:
        log.error(_join(args))

    def debug(self, *args) -> None:
        log.debug(_join(args))


def logger_methods(capability: type) -> list[str]:
    """
    Public operation names of a logger capability class.

    Walks the class and its bases (except `object`) in MRO order and keeps
    callables whose names do not start with an underscore. Names shadowed in a
    subclass are listed once, in the position of their first definition.
    """
    names: list[str] = []
    for klass in reversed(inspect.getmro(capability)):
        if klass is object:
            continue
        for name, value in vars(klass).items():
            if name.startswith("_") or name in names:
                continue
            if callable(value) or isinstance(value, (staticmethod, classmethod)):
                names.append(name)
    return names
