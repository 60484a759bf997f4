"""Plan endpoint for the API."""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from server.models import PlanErrorResponse, PlanRequest, PlanSuccessResponse
from server.plan_processor import count_nodes, process_plan_request
from server.server_config import MAX_TREE_NODES

router = APIRouter()

COMMON_PLAN_RESPONSES: dict[int | str, dict] = {
    status.HTTP_200_OK: {"model": PlanSuccessResponse, "description": "Plan compiled"},
    status.HTTP_400_BAD_REQUEST: {"model": PlanErrorResponse, "description": "Tree does not compile"},
    status.HTTP_413_REQUEST_ENTITY_TOO_LARGE: {"model": PlanErrorResponse, "description": "Tree too large"},
}


@router.post("/api/plan", responses=COMMON_PLAN_RESPONSES)
async def api_plan(
    request: Request,  # noqa: ARG001 (unused-function-argument) # pylint: disable=unused-argument
    plan_request: PlanRequest,
) -> JSONResponse:
    """Compile a guidebook tree into a task plan.

    **Parameters**

    - **plan_request** (`PlanRequest`): guidebook identifier and root forest

    **Returns**

    - **JSONResponse**: the compiled plan with its summary and text tree, or an
      error body naming the offending node

    """
    node_count = count_nodes(plan_request.tree)
    if node_count > MAX_TREE_NODES:
        error = PlanErrorResponse(
            error=f"Tree has {node_count} nodes, limit is {MAX_TREE_NODES}",
            error_type="TreeTooLarge",
        )
        return JSONResponse(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, content=error.model_dump())

    response = process_plan_request(plan_request.input, plan_request.tree)
    if isinstance(response, PlanErrorResponse):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=response.model_dump())
    return JSONResponse(status_code=status.HTTP_200_OK, content=response.model_dump(mode="json"))


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}
