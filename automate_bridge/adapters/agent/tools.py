"""MCP tools for the automation engine."""

from typing import Any, Dict, List

from automate_bridge.adapters.agent.mcp_server import mcp
from automate_bridge.automate_client import automate_service
from automate_bridge.errors import GenerationError


@mcp.tool()
async def automate_check_health() -> dict:
    """Check whether the automation engine is reachable."""
    connected = await automate_service.check_health()
    return {
        "connected": connected,
        "state": automate_service.state.value,
        "base_url": automate_service.base_url,
    }


@mcp.tool()
async def automate_set_endpoint(url: str) -> dict:
    """Point the client at another automation engine.

    Args:
        url: Base URL, e.g. http://localhost:8000. Connection state resets
            to "unknown" until the next health check.
    """
    automate_service.set_endpoint(url)
    return {"base_url": automate_service.base_url, "state": automate_service.state.value}


@mcp.tool()
async def automate_run_direct(objective: str) -> dict:
    """Let the engine plan and execute an objective in one step.

    Args:
        objective: Natural-language goal, e.g. "open calculator".
    """
    result = await automate_service.run_direct(objective)
    return result.to_response()


@mcp.tool()
async def automate_execute(actions: List[Dict[str, Any]], objective: str) -> dict:
    """Execute an explicit, ordered list of actions.

    Args:
        actions: Action objects, each with an "operation" key
            (click, type, key_press, extract, summarize, ...).
        objective: What the actions are meant to achieve.
    """
    result = await automate_service.execute({"actions": actions, "objective": objective})
    return result.to_response()


@mcp.tool()
async def automate_generate_actions(objective: str) -> dict:
    """Plan actions for an objective without executing them.

    Args:
        objective: Natural-language goal.
    """
    try:
        actions = await automate_service.generate_actions(objective)
    except GenerationError as e:
        return {"success": False, "message": str(e), "error": e.detail or str(e)}
    return {"success": True, "actions": [action.to_payload() for action in actions]}
