from conformance.emitter import ConformanceRunner, EventEmitter, Runner
from conformance.events import PARSE, ParseEvent, handler_name
from conformance.exceptions import (
    ConformanceTaskError,
    InstallError,
    MissingHandlerError,
    TaskNotInstalledError,
)
from conformance.models import InstallOptions
from conformance.task import ConformanceTask
from conformance.task_logger import ConformanceLogger, logger_methods

__all__ = (
    "ConformanceTask",
    "ConformanceRunner",
    "ConformanceLogger",
    "EventEmitter",
    "Runner",
    "InstallOptions",
    "PARSE",
    "ParseEvent",
    "handler_name",
    "logger_methods",
    "ConformanceTaskError",
    "InstallError",
    "MissingHandlerError",
    "TaskNotInstalledError",
)
