# conformance/events.py

"""
Parse event registry.

Symbolic parse-event names mapped to the identifiers the runner emits them
under, plus the naming rule that ties each event to its task handler.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from conformance.constants import HANDLER_PREFIX


class ParseEvent(str, Enum):
    ROOT = "parse:root"
    RULE = "parse:rule"
    RULESET = "parse:ruleset"
    SELECTOR = "parse:selector"
    SELECTORS = "parse:selectors"
    VARIABLE = "parse:variable"
    IMPORT = "parse:import"
    COMMENT = "parse:comment"
    MIXIN = "parse:mixin"
    MIXIN_DEFINITION = "parse:mixin_definition"
    MIXIN_CALL = "parse:mixin_call"
    MEDIA = "parse:media"
    NOT_RECOGNISED = "parse:not_recognised"

    @property
    def handler(self) -> str:
        """Name of the task method that receives this event."""
        return handler_name(self.name)


# Default registry: symbolic key -> emitter event identifier.
PARSE: Mapping[str, str] = MappingProxyType(
    {event.name: event.value for event in ParseEvent}
)


def handler_name(key: str) -> str:
    """
    Handler method name for a registry key.

    `MIXIN_CALL` -> `on_mixin_call`. Empty keys are rejected.
    """
    if not key:
        raise ValueError("event key must be a non-empty string")
    return f"{HANDLER_PREFIX}{key.lower()}"


def event_key(event: "ParseEvent | str") -> str:
    """
    Normalise to a registry key.

    Accepts a ParseEvent member, its identifier ("parse:rule") or a key in
    any case ("rule", "RULE").
    """
    if isinstance(event, ParseEvent):
        return event.name
    try:
        return ParseEvent(event).name
    except ValueError:
        return str(event).upper()
