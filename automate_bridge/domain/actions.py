"""Action payloads — one pydantic model per operation.

Incoming JSON is mapped onto these models in exactly one place,
``parse_action``. Operations without a dedicated model fall back to
``GenericAction`` so the engine can still receive them.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from automate_bridge.errors import ActionParseError


class _ActionBase(BaseModel):
    # Engines send coordinates as strings or numbers; keep them as strings.
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    operation: str
    thought: Optional[str] = None
    summary: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """Serialize for the wire, omitting absent fields."""
        return self.model_dump(exclude_none=True)


class ClickAction(_ActionBase):
    operation: Literal["click"] = "click"
    x: Optional[str] = None
    y: Optional[str] = None


class TypeAction(_ActionBase):
    operation: Literal["type"] = "type"
    content: Optional[str] = None


class KeyPressAction(_ActionBase):
    operation: Literal["key_press"] = "key_press"
    keys: Optional[List[str]] = None


class ExtractAction(_ActionBase):
    operation: Literal["extract"] = "extract"
    content: Optional[str] = None


class SummarizeAction(_ActionBase):
    operation: Literal["summarize"] = "summarize"
    content: Optional[str] = None


class GenericAction(_ActionBase):
    """Operation unknown to this client; every field is forwarded untouched."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)


Action = Union[
    ClickAction,
    TypeAction,
    KeyPressAction,
    ExtractAction,
    SummarizeAction,
    GenericAction,
]

# Map operation name -> model
OPERATION_MODELS: Dict[str, Type[_ActionBase]] = {
    "click": ClickAction,
    "type": TypeAction,
    "key_press": KeyPressAction,
    "extract": ExtractAction,
    "summarize": SummarizeAction,
}


def parse_action(data: Any) -> Action:
    """Map one untyped action dict onto its model."""
    if isinstance(data, _ActionBase):
        return data
    if not isinstance(data, dict):
        raise ActionParseError(f"Action must be an object, got {type(data).__name__}")
    operation = data.get("operation")
    if not isinstance(operation, str) or not operation:
        raise ActionParseError("Action is missing 'operation'")
    model = OPERATION_MODELS.get(operation, GenericAction)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ActionParseError(f"Invalid '{operation}' action: {e}") from e


def parse_actions(items: Any) -> List[Action]:
    """Map a list of untyped action dicts, preserving order."""
    if items is None:
        return []
    if not isinstance(items, list):
        raise ActionParseError(f"'actions' must be a list, got {type(items).__name__}")
    return [parse_action(item) for item in items]
