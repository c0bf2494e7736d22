"""Automation engine client using aiohttp."""

import asyncio
import json
import sys
from typing import Any, Dict, List, Optional, Union

import aiohttp

from automate_bridge.config import CONFIG
from automate_bridge.domain.actions import Action, parse_actions
from automate_bridge.domain.models import AutomationResult, ConnectionState, ExecutionRequest
from automate_bridge.errors import (
    AutomateError,
    BodyParseError,
    GenerationError,
    HTTPError,
    TransportError,
)

JSON_HEADERS = {"Content-Type": "application/json"}

UNKNOWN_ERROR = "Unknown error"
DIRECT_FALLBACK_ERROR = "Failed to execute direct automation"
EXECUTE_FALLBACK_ERROR = "Failed to execute automation"
GENERATE_FALLBACK_ERROR = "Failed to generate actions"


def _log(msg: str):
    print(msg, file=sys.stderr)


def _load_json(body: bytes) -> Any:
    # UnicodeDecodeError is a ValueError, same as a JSON syntax error
    return json.loads(body.decode("utf-8"))


def _extract_error(body: bytes, fallback: str) -> str:
    """Pull ``error`` out of a failed response body."""
    try:
        data = _load_json(body)
    except ValueError:
        return UNKNOWN_ERROR
    if not isinstance(data, dict):
        return UNKNOWN_ERROR
    if data.get("error"):
        return str(data["error"])
    return fallback


class AutomateClient:
    """Async client for the remote automation engine.

    Holds one base URL and the last observed connection state. Nothing is
    refreshed automatically: call ``check_health()`` to update the state,
    and again after every ``set_endpoint()``.
    """

    def __init__(self, base_url: Optional[str] = None):
        self._base_url = (base_url or CONFIG["base_url"]).rstrip("/")
        self._state = ConnectionState.UNKNOWN

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def state(self) -> ConnectionState:
        return self._state

    def is_connected(self) -> bool:
        return self._state is ConnectionState.CONNECTED

    def set_endpoint(self, url: str) -> None:
        self._base_url = url.rstrip("/")
        self._state = ConnectionState.UNKNOWN
        _log(f"Automation service base URL set to: {self._base_url}")

    async def _request(
        self,
        path: str,
        payload: Optional[Dict[str, Any]] = None,
        fallback_error: str = UNKNOWN_ERROR,
    ) -> Any:
        """GET when payload is None, POST otherwise. Returns the decoded JSON body."""
        url = f"{self._base_url}{path}"
        try:
            async with aiohttp.ClientSession() as session:
                if payload is None:
                    ctx = session.get(url, headers=JSON_HEADERS)
                else:
                    ctx = session.post(url, headers=JSON_HEADERS, json=payload)
                async with ctx as resp:
                    status = resp.status
                    body = await resp.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(str(e) or type(e).__name__) from e

        _log(f"{path} response status: {status}")
        if not 200 <= status < 300:
            raise HTTPError(_extract_error(body, fallback_error), status=status)
        try:
            return _load_json(body)
        except ValueError as e:
            raise BodyParseError(f"Invalid JSON from {path}: {e}", status=status) from e

    async def check_health(self) -> bool:
        """GET /health. Updates the connection state; never raises."""
        _log(f"Checking automation service connection to: {self._base_url}")
        try:
            data = await self._request("/health")
        except AutomateError as e:
            _log(f"Automation service connection failed: {e}")
            self._state = ConnectionState.DISCONNECTED
            return False
        if CONFIG["verbose"]:
            _log(f"Health check response data: {data}")
        self._state = ConnectionState.CONNECTED
        return True

    async def run_direct(self, objective: str) -> AutomationResult:
        """Let the engine plan and execute ``objective`` in one call."""
        _log(f"Direct automation request: {objective}")
        try:
            data = await self._request(
                "/direct-automate",
                {"objective": objective},
                fallback_error=DIRECT_FALLBACK_ERROR,
            )
            result = AutomationResult.from_payload(data)
        except AutomateError as e:
            _log(f"Direct automation failed: {e}")
            return AutomationResult.failure(e.detail)
        if CONFIG["verbose"]:
            _log(f"Direct automation result: {data}")
        return result

    async def execute(
        self, request: Union[ExecutionRequest, Dict[str, Any]]
    ) -> AutomationResult:
        """Run an explicit, ordered action list."""
        try:
            if not isinstance(request, ExecutionRequest):
                request = ExecutionRequest.from_dict(request)
            payload = request.to_payload()
            _log(f"Executing automation request: {payload}")
            data = await self._request(
                "/automate", payload, fallback_error=EXECUTE_FALLBACK_ERROR
            )
            result = AutomationResult.from_payload(data)
        except AutomateError as e:
            _log(f"Automation execution failed: {e}")
            return AutomationResult.failure(e.detail)
        if CONFIG["verbose"]:
            _log(f"Automation execution result: {data}")
        return result

    async def generate_actions(self, objective: str) -> List[Action]:
        """Ask the engine to plan ``objective`` without executing it.

        Raises:
            GenerationError: on any failure; the cause is chained.
        """
        _log(f"Generating actions for objective: {objective}")
        try:
            data = await self._request(
                "/generate-actions",
                {"objective": objective},
                fallback_error=GENERATE_FALLBACK_ERROR,
            )
            if not isinstance(data, dict):
                raise BodyParseError(
                    f"Expected a JSON object from /generate-actions, got {type(data).__name__}"
                )
            actions = parse_actions(data.get("actions"))
        except AutomateError as e:
            _log(f"Action generation failed: {e}")
            raise GenerationError(e) from e
        if CONFIG["verbose"]:
            _log(f"Generated actions result: {data}")
        return actions


# Process-wide default client
automate_service = AutomateClient()
