"""Automate Bridge — client for a remote browser/desktop automation engine."""

from automate_bridge.config import CONFIG, BridgeConfig, __version__
from automate_bridge.errors import (
    ActionParseError,
    AutomateError,
    BodyParseError,
    GenerationError,
    HTTPError,
    TransportError,
)
from automate_bridge.domain.actions import (
    Action,
    ClickAction,
    ExtractAction,
    GenericAction,
    KeyPressAction,
    SummarizeAction,
    TypeAction,
    parse_action,
    parse_actions,
)
from automate_bridge.domain.models import AutomationResult, ConnectionState, ExecutionRequest
from automate_bridge.automate_client import AutomateClient, automate_service

__all__ = [
    "CONFIG",
    "BridgeConfig",
    "__version__",
    "AutomateError",
    "TransportError",
    "HTTPError",
    "BodyParseError",
    "ActionParseError",
    "GenerationError",
    "Action",
    "ClickAction",
    "TypeAction",
    "KeyPressAction",
    "ExtractAction",
    "SummarizeAction",
    "GenericAction",
    "parse_action",
    "parse_actions",
    "AutomationResult",
    "ConnectionState",
    "ExecutionRequest",
    "AutomateClient",
    "automate_service",
]
