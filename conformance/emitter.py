# conformance/emitter.py

"""
Reference implementation of the runner side of the task contract.

• Runner: the structural contract a task installs into (on/off)
• EventEmitter: synchronous listener registry with ordered delivery
• ConformanceRunner: an emitter that also offers the logging capability
"""

from collections import defaultdict
from typing import Any, Callable, Hashable, Protocol, runtime_checkable

from conformance.logger import get_logger
from conformance.task_logger import ConformanceLogger

log = get_logger(__name__)

Listener = Callable[..., Any]


@runtime_checkable
class Runner(Protocol):
    """Anything a task can subscribe its handlers to."""

    def on(self, event: Hashable, handler: Listener) -> Any: ...

    def off(self, event: Hashable, handler: Listener) -> Any: ...


class EventEmitter:
    """
    Synchronous event emitter.

    • Listeners are called in subscription order
    • The same listener may be subscribed more than once
    • `off` removes the most recently added matching listener
    """

    def __init__(self) -> None:
        # event → listeners, in subscription order
        self._listeners: dict[Hashable, list[Listener]] = defaultdict(list)

    def on(self, event: Hashable, handler: Listener) -> "EventEmitter":
        if not callable(handler):
            raise TypeError(f"listener for {event!r} must be callable")
        self._listeners[event].append(handler)
        return self

    def off(self, event: Hashable, handler: Listener) -> "EventEmitter":
        listeners = self._listeners.get(event)
        if not listeners:
            return self

        for index in range(len(listeners) - 1, -1, -1):
            if listeners[index] is handler:
                del listeners[index]
                break

        if not listeners:
            self._listeners.pop(event, None)
        return self

    def emit(self, event: Hashable, *args: Any) -> bool:
        """
        Call every listener for `event` with `args`.

        Iterates over a snapshot, so listeners may subscribe or unsubscribe
        while the event is being delivered. Returns False if nobody listened.
        """
        listeners = list(self._listeners.get(event, ()))
        if not listeners:
            return False

        for listener in listeners:
            listener(*args)
        return True

    def listeners(self, event: Hashable) -> list[Listener]:
        return list(self._listeners.get(event, ()))

    def listener_count(self, event: Hashable) -> int:
        return len(self._listeners.get(event, ()))

    def event_names(self) -> list[Hashable]:
        return list(self._listeners.keys())

    def remove_all_listeners(self, event: Hashable | None = None) -> "EventEmitter":
        if event is None:
            self._listeners.clear()
        else:
            self._listeners.pop(event, None)
        return self


class ConformanceRunner(EventEmitter, ConformanceLogger):
    """Event emitter that tasks can also forward log output to."""

    def __repr__(self) -> str:
        return f"<ConformanceRunner(events={len(self._listeners)})>"
