import pytest

from conformance.events import PARSE, ParseEvent, event_key, handler_name
from conformance.task import ConformanceTask


def test_registry_covers_every_parse_event():
    assert list(PARSE) == [event.name for event in ParseEvent]
    assert PARSE["RULE"] == ParseEvent.RULE.value == "parse:rule"
    assert "NOT_RECOGNISED" in PARSE


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        PARSE["KEYFRAMES"] = "parse:keyframes"  # type: ignore[index]


@pytest.mark.parametrize(
    "key, expected",
    [
        ("ROOT", "on_root"),
        ("MIXIN_DEFINITION", "on_mixin_definition"),
        ("MIXIN_CALL", "on_mixin_call"),
        ("NOT_RECOGNISED", "on_not_recognised"),
    ],
)
def test_handler_name(key, expected):
    assert handler_name(key) == expected


def test_handler_name_rejects_empty_key():
    with pytest.raises(ValueError):
        handler_name("")


def test_parse_event_handler_property():
    assert ParseEvent.SELECTORS.handler == "on_selectors"


def test_event_key_normalises_members_ids_and_names():
    assert event_key(ParseEvent.MEDIA) == "MEDIA"
    assert event_key("parse:mixin_call") == "MIXIN_CALL"
    assert event_key("comment") == "COMMENT"


def test_base_task_defines_a_handler_for_every_key():
    for key in PARSE:
        assert callable(getattr(ConformanceTask, handler_name(key)))
