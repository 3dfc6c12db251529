# conformance/task.py

"""
This module contains the base class for all conformance tasks.

A task listens to parse events coming from a conformance runner. Subclasses
override the `on_<event>` handlers they care about; everything else stays a
no-op. The runner hands itself to the task through `install()` and takes it
back through `destroy()`.
"""

import inspect
from typing import Any, Callable, Mapping

from pydantic import ValidationError

from conformance.config import get_config
from conformance.constants import DEFAULT_TASK_NAME, HANDLER_PREFIX
from conformance.emitter import Runner
from conformance.events import PARSE, ParseEvent, event_key, handler_name
from conformance.exceptions import (
    InstallError,
    MissingHandlerError,
    TaskNotInstalledError,
)
from conformance.logger import colorize, get_logger
from conformance.models import InstallOptions
from conformance.task_logger import ConformanceLogger, logger_methods

log = get_logger(__name__)

Handler = Callable[..., Any]


class ConformanceTask:
    """
    Base conformance listener/task class.

    Provides:
      • one bound handler per parse event, looked up on the instance at install
      • install(options) / destroy() to subscribe to and leave a runner
      • optional per-instance logging methods that forward to the runner
        with a "[<task name>]" prefix
    """

    name: str = DEFAULT_TASK_NAME
    # registry key -> event identifier the runner emits
    events: Mapping[str, str] = PARSE
    log_capability: type = ConformanceLogger
    # None defers to ConformanceConfig.attach_logger
    attach_logger: bool | None = None

    def __init__(
        self,
        name: str | None = None,
        handlers: Mapping[ParseEvent | str, Handler] | None = None,
    ) -> None:
        """
        Args:
            name:     Task name used in log prefixes and error messages.
            handlers: Optional event -> callable map that takes precedence
                      over the `on_<event>` methods of the class.
        """
        if name is not None:
            self.name = name
        self.runner: Any = None

        self._overrides: dict[str, Handler] = {}
        for event, fn in (handlers or {}).items():
            if not callable(fn):
                raise TypeError(f"Handler for {event!r} must be callable")
            self._overrides[handler_name(event_key(event))] = fn

        self._handlers: dict[str, Handler] | None = None
        self._forwarders: set[str] = set()
        # (event, handler) pairs handed to runner.on by the last install
        self._subscriptions: list[tuple[str, Handler]] = []

        self.init()

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(name={self.name!r}, installed={self.installed})>"

    @property
    def installed(self) -> bool:
        return self.runner is not None

    @property
    def handlers(self) -> dict[str, Handler]:
        """Handler name -> the callable this instance currently exposes."""
        names = list(self._handlers or {})
        names += [handler_name(key) for key in self.events if handler_name(key) not in names]
        table: dict[str, Handler] = {}
        for name in names:
            fn = getattr(self, name, None)
            if callable(fn):
                table[name] = fn
        return table

    def init(self) -> None:
        """
        Bind the handlers of this task.

        Runs from the constructor. Subclasses that set up state after
        `super().__init__()` may call it again; binding only happens once.
        Handlers assigned on the instance afterwards still win at install.
        """
        if self._handlers is not None:
            return
        self._bind_handlers()

    def _get_handlers(self) -> list[str]:
        """Names of the callable `on_` attributes defined on the class."""
        return [
            name
            for name, value in inspect.getmembers(type(self))
            if name.startswith(HANDLER_PREFIX) and callable(value)
        ]

    def _bind_handlers(self) -> None:
        table: dict[str, Handler] = {}
        for name in self._get_handlers():
            table[name] = getattr(self, name)
        table.update(self._overrides)

        # Pin each handler on the instance so the object subscribed on install
        # is the same one unsubscribed on destroy.
        for name, fn in table.items():
            setattr(self, name, fn)

        self._handlers = table
        log.debug(f"Bound {len(table)} handlers for task [{self.name}]")

    def _parse_options(self, options: Any) -> InstallOptions:
        if options is None or isinstance(options, (Mapping, InstallOptions)):
            try:
                return InstallOptions.parse(options)
            except ValidationError as err:
                raise InstallError(f"Invalid install options: {err}") from err
        if hasattr(options, "runner"):
            return InstallOptions(
                runner=options.runner,
                attach_logger=getattr(options, "attach_logger", None),
            )
        raise InstallError(
            f"Install options must be a mapping with a runner, got {type(options).__name__}"
        )

    def _resolve_handlers(self) -> list[tuple[str, Handler]]:
        """
        (event identifier, handler) pairs read off the instance right now,
        so handlers assigned after construction are honoured.
        """
        resolved: list[tuple[str, Handler]] = []
        for key, event in self.events.items():
            method = handler_name(key)
            fn = getattr(self, method, None)
            # Default no-ops mean this only fires for broken subclasses.
            if not callable(fn):
                raise MissingHandlerError(method, self.name)
            resolved.append((event, fn))
        return resolved

    def install(self, options: Mapping[str, Any] | InstallOptions | None = None) -> None:
        """
        Install hook, called by the runner when the task is registered.

        Args:
            options: Must carry the runner under "runner". An optional
                     "attach_logger" flag overrides the configured default.

        Raises:
            InstallError:        no runner, or the runner lacks on()/off()
            MissingHandlerError: a registry event has no handler on this task
        """
        opts = self._parse_options(options)
        runner = opts.runner

        if runner is None:
            raise InstallError("Install should pass an instance of the conformance runner")
        if not isinstance(runner, Runner):
            raise InstallError(
                f"Conformance runner {runner!r} must provide on() and off()"
            )

        subscriptions = self._resolve_handlers()

        if self.runner is not None:
            log.warning(
                f"Task [{self.name}] installed again without destroy; "
                "its handlers will be subscribed twice"
            )

        self.runner = runner

        # e.g. runner.on(PARSE["RULE"], self.on_rule)
        for event, fn in subscriptions:
            self.runner.on(event, fn)
        self._subscriptions = subscriptions

        attach = opts.attach_logger
        if attach is None:
            attach = self.attach_logger
        if attach is None:
            attach = get_config().attach_logger
        if attach:
            self._attach_logger()

        log.debug(f"Installed task [{self.name}] with {len(self.events)} events")

    def destroy(self) -> None:
        """
        Destroy hook, called when the runner is finished with the task.

        Raises:
            TaskNotInstalledError: the task has no runner to leave
        """
        if self.runner is None:
            raise TaskNotInstalledError(self.name)

        for event, fn in self._subscriptions:
            self.runner.off(event, fn)

        self._subscriptions = []
        self.runner = None
        log.debug(f"Destroyed task [{self.name}]")

    def _log_prefix(self) -> str:
        config = get_config()
        prefix = f"[{self.name}]"
        if config.use_colors:
            return colorize(prefix, config.prefix_color)
        return prefix

    def _make_forwarder(self, method: str) -> Callable[..., Any]:
        def forward(*args: Any) -> Any:
            if self.runner is None:
                raise TaskNotInstalledError(self.name)
            return getattr(self.runner, method)(self._log_prefix(), *args)

        forward.__name__ = method
        forward.__qualname__ = f"{type(self).__name__}.{method}"
        return forward

    def _attach_logger(self) -> None:
        """
        Give this instance the runner's logging methods.

        Failures are reported and the method skipped; they never abort install.
        """
        for method in logger_methods(self.log_capability):
            if method in self._forwarders:
                continue

            if hasattr(type(self), method) or method in vars(self):
                log.warning(
                    f"Error attaching logging function to conformance task [{self.name}] :: {method}"
                )
                continue

            try:
                target = getattr(self.runner, method, None)
            except Exception as err:
                log.error(f"Error accessing runner from conformance task [{self.name}] :: {err}")
                continue

            if not callable(target):
                log.warning(f"Log method not found on conformance task runner :: {method}")
                continue

            setattr(self, method, self._make_forwarder(method))
            self._forwarders.add(method)

    # ─── Listeners ───

    def on_root(self, root: Any) -> None:
        pass

    def on_rule(self, rule: Any) -> None:
        pass

    def on_ruleset(self, rule: Any) -> None:
        pass

    def on_selector(self, selector: Any) -> None:
        pass

    def on_selectors(self, selectors: Any) -> None:
        pass

    def on_variable(self, variable: Any) -> None:
        pass

    def on_import(self, import_rule: Any) -> None:
        pass

    def on_comment(self, comment: Any) -> None:
        pass

    def on_mixin(self, mixin: Any) -> None:
        pass

    def on_mixin_definition(self, mixin_def: Any) -> None:
        pass

    def on_mixin_call(self, mixin_call: Any) -> None:
        pass

    def on_media(self, media: Any) -> None:
        pass

    def on_not_recognised(self, node: Any) -> None:
        pass
