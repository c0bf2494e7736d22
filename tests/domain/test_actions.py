"""Tests for action parsing and serialization."""

import pytest

from automate_bridge.domain.actions import (
    ClickAction,
    ExtractAction,
    GenericAction,
    KeyPressAction,
    OPERATION_MODELS,
    SummarizeAction,
    TypeAction,
    parse_action,
    parse_actions,
)
from automate_bridge.errors import ActionParseError, BodyParseError


class TestParseAction:
    @pytest.mark.parametrize("data, model", [
        ({"operation": "click", "x": "10", "y": "20"}, ClickAction),
        ({"operation": "type", "content": "hello"}, TypeAction),
        ({"operation": "key_press", "keys": ["ctrl", "c"]}, KeyPressAction),
        ({"operation": "extract", "content": "price"}, ExtractAction),
        ({"operation": "summarize", "summary": "page lists 3 items"}, SummarizeAction),
    ])
    def test_known_operations(self, data, model):
        action = parse_action(data)
        assert isinstance(action, model)
        assert action.to_payload() == data

    def test_mapping_covers_known_operations(self):
        assert set(OPERATION_MODELS) == {"click", "type", "key_press", "extract", "summarize"}

    def test_numeric_coordinates_coerced(self):
        action = parse_action({"operation": "click", "x": 10, "y": 20.5})
        assert action.x == "10"
        assert action.y == "20.5"

    def test_thought_and_summary_on_any_variant(self):
        action = parse_action({
            "operation": "click",
            "thought": "the search box is top left",
            "x": "5",
            "y": "5",
            "summary": "clicked",
        })
        assert action.thought == "the search box is top left"
        assert action.summary == "clicked"

    def test_fields_of_other_operations_dropped(self):
        action = parse_action({"operation": "click", "x": "1", "y": "2", "keys": ["enter"]})
        assert action.to_payload() == {"operation": "click", "x": "1", "y": "2"}

    def test_fields_stay_optional(self):
        action = parse_action({"operation": "click"})
        assert action.x is None
        assert action.to_payload() == {"operation": "click"}

    def test_unknown_operation_is_generic(self):
        data = {"operation": "scroll", "direction": "down", "thought": "more results"}
        action = parse_action(data)
        assert isinstance(action, GenericAction)
        assert action.to_payload() == data

    def test_missing_operation(self):
        with pytest.raises(ActionParseError, match="operation"):
            parse_action({"x": "1"})

    def test_empty_operation(self):
        with pytest.raises(ActionParseError):
            parse_action({"operation": ""})

    def test_not_an_object(self):
        with pytest.raises(ActionParseError):
            parse_action(["click"])

    def test_wrong_field_type(self):
        with pytest.raises(ActionParseError, match="key_press"):
            parse_action({"operation": "key_press", "keys": "enter"})

    def test_parse_error_is_body_parse_error(self):
        with pytest.raises(BodyParseError):
            parse_action("click")

    def test_model_instance_passthrough(self):
        action = TypeAction(content="x")
        assert parse_action(action) is action


class TestParseActions:
    def test_none_is_empty(self):
        assert parse_actions(None) == []

    def test_order_preserved(self):
        actions = parse_actions([
            {"operation": "type", "content": "a"},
            {"operation": "key_press", "keys": ["enter"]},
            {"operation": "type", "content": "b"},
        ])
        assert [a.operation for a in actions] == ["type", "key_press", "type"]
        assert actions[2].content == "b"

    def test_not_a_list(self):
        with pytest.raises(ActionParseError):
            parse_actions({"operation": "click"})

    def test_one_bad_entry_fails_all(self):
        with pytest.raises(ActionParseError):
            parse_actions([{"operation": "click"}, {"thought": "?"}])
