"""Domain layer — action union, requests, results. No network code."""

from automate_bridge.domain.actions import (
    Action,
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
from automate_bridge.domain.models import (
    AutomationResult,
    ConnectionState,
    EXECUTION_FAILED_MESSAGE,
    ExecutionRequest,
)
