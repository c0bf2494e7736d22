"""Outbound ports — interfaces for the automation engine."""

from typing import Any, Dict, List, Protocol, Union, runtime_checkable

from automate_bridge.domain.actions import Action
from automate_bridge.domain.models import AutomationResult, ConnectionState, ExecutionRequest


@runtime_checkable
class AutomationPort(Protocol):
    """Interface for automation engine clients."""

    @property
    def base_url(self) -> str: ...

    @property
    def state(self) -> ConnectionState: ...

    def is_connected(self) -> bool: ...

    def set_endpoint(self, url: str) -> None: ...

    async def check_health(self) -> bool: ...

    async def run_direct(self, objective: str) -> AutomationResult: ...

    async def execute(
        self, request: Union[ExecutionRequest, Dict[str, Any]]
    ) -> AutomationResult: ...

    async def generate_actions(self, objective: str) -> List[Action]: ...
