"""Compile a plan request and build the API response."""

from __future__ import annotations

from typing import Iterable

from guideplan.compiler import compile_plan
from guideplan.exceptions import CompileError
from guideplan.output_formatter import count_choices, count_paths, count_tasks, render_plan
from guideplan.schemas import GuidebookInput, PlanNode, TreeNode
from guideplan.utils.logging_config import get_logger
from server.models import PlanErrorResponse, PlanResponse, PlanSuccessResponse

logger = get_logger(__name__)


def count_nodes(forest: Iterable[TreeNode]) -> int:
    """Count every node in a forest."""
    pending = list(forest)
    total = 0
    while pending:
        node = pending.pop()
        total += 1
        pending.extend(node.children)
    return total


def process_plan_request(input_id: str, forest: list[TreeNode]) -> PlanResponse:
    """Compile ``forest`` and return a success or error response."""
    guidebook = GuidebookInput(input=input_id, tree=lambda: forest)
    try:
        plan = compile_plan(guidebook)
    except CompileError as exc:
        _log_error(input_id, exc)
        return PlanErrorResponse(
            error=str(exc),
            error_type=type(exc).__name__,
            node_name=exc.node_name,
            path=list(exc.path),
        )

    result = render_plan(source=input_id, plan=plan)
    _log_success(input_id, plan)
    return PlanSuccessResponse(
        input=input_id,
        summary=result.summary,
        tree=result.plan_tree,
        plan=result.plan,
    )


def _log_error(input_id: str, exc: CompileError) -> None:
    """Log a compile failure.

    Parameters
    ----------
    input_id : str
        The guidebook identifier.
    exc : CompileError
        The error raised by the compiler.

    """
    logger.warning(
        "Plan compilation failed",
        extra={
            "input": input_id,
            "error_type": type(exc).__name__,
            "node_name": exc.node_name,
            "path": ".".join(str(i) for i in exc.path),
        },
    )


def _log_success(input_id: str, plan: PlanNode) -> None:
    """Log a successful compilation along with its size."""
    logger.info(
        "Plan compiled",
        extra={
            "input": input_id,
            "tasks": count_tasks(plan),
            "choices": count_choices(plan),
            "paths": count_paths(plan),
        },
    )
