"""Domain data models — requests, results and connection state."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from automate_bridge.domain.actions import Action, parse_actions
from automate_bridge.errors import ActionParseError, BodyParseError

EXECUTION_FAILED_MESSAGE = "Failed to execute automation"


class ConnectionState(str, Enum):
    UNKNOWN = "unknown"  # never checked, or endpoint changed since
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


@dataclass
class ExecutionRequest:
    """Ordered actions plus the objective they serve."""

    actions: List[Action]
    objective: str

    def __post_init__(self):
        # Plain action dicts are mapped onto their models
        self.actions = parse_actions(self.actions)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExecutionRequest":
        if not isinstance(data, dict):
            raise ActionParseError("Execution request must be an object")
        objective = data.get("objective")
        if not isinstance(objective, str):
            raise ActionParseError("Execution request is missing 'objective'")
        return cls(actions=data.get("actions"), objective=objective)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "actions": [action.to_payload() for action in self.actions],
            "objective": self.objective,
        }


@dataclass
class AutomationResult:
    """Outcome of /direct-automate or /automate.

    ``success`` is the tag. ``actions_executed`` is the canonical count; the
    engine reports it as ``actions_executed`` on direct runs and
    ``executedActions`` on explicit ones. ``payload`` is the engine's body
    exactly as received (empty for client-side failures).
    """

    success: bool
    message: str = ""
    actions_executed: Optional[int] = None
    error: Optional[str] = None
    payload: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, data: Any) -> "AutomationResult":
        if not isinstance(data, dict):
            raise BodyParseError(f"Expected a JSON object, got {type(data).__name__}")
        count = data.get("actions_executed", data.get("executedActions"))
        if isinstance(count, bool) or not isinstance(count, int):
            count = None
        error = data.get("error")
        return cls(
            success=bool(data.get("success", False)),
            message=str(data.get("message") or ""),
            actions_executed=count,
            error=str(error) if error is not None else None,
            payload=data,
        )

    @classmethod
    def failure(cls, error: str, message: str = EXECUTION_FAILED_MESSAGE) -> "AutomationResult":
        return cls(success=False, message=message, error=error)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"success": self.success, "message": self.message}
        if self.actions_executed is not None:
            data["actions_executed"] = self.actions_executed
        if self.error is not None:
            data["error"] = self.error
        return data

    def to_response(self) -> Dict[str, Any]:
        """Engine body with the canonical fields laid over it."""
        data = dict(self.payload)
        data.update(self.to_dict())
        return data
