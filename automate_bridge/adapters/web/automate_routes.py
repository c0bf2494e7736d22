"""Bridge API routes — expose the automation client to a front-end."""

from typing import Any, Dict, List

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from automate_bridge.automate_client import automate_service
from automate_bridge.errors import GenerationError

bridge_router = APIRouter(prefix="/bridge", tags=["Automation"])


class ObjectiveRequest(BaseModel):
    objective: str


class ExecuteRequest(BaseModel):
    actions: List[Dict[str, Any]]
    objective: str


class EndpointRequest(BaseModel):
    url: str


def _status() -> dict:
    return {
        "state": automate_service.state.value,
        "connected": automate_service.is_connected(),
        "base_url": automate_service.base_url,
    }


@bridge_router.get("/status")
async def bridge_status():
    """Last observed connection state; does not contact the engine."""
    return _status()


@bridge_router.post("/health")
async def bridge_health():
    await automate_service.check_health()
    return _status()


@bridge_router.post("/endpoint")
async def bridge_endpoint(req: EndpointRequest):
    automate_service.set_endpoint(req.url)
    return _status()


@bridge_router.post("/direct")
async def bridge_direct(req: ObjectiveRequest):
    result = await automate_service.run_direct(req.objective)
    return result.to_response()


@bridge_router.post("/execute")
async def bridge_execute(req: ExecuteRequest):
    result = await automate_service.execute(req.model_dump())
    return result.to_response()


@bridge_router.post("/generate")
async def bridge_generate(req: ObjectiveRequest):
    try:
        actions = await automate_service.generate_actions(req.objective)
    except GenerationError as e:
        return JSONResponse(
            status_code=502,
            content={
                "success": False,
                "message": str(e),
                "error": e.detail or str(e),
            },
        )
    return {"success": True, "actions": [action.to_payload() for action in actions]}
