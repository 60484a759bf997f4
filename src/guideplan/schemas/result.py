"""Rendered plan output model."""

from __future__ import annotations

from pydantic import BaseModel

from guideplan.schemas.plan import PlanNode


class PlanResult(BaseModel):
    """Compiled plan together with its printable forms."""

    input: str
    summary: str
    plan_tree: str
    plan: PlanNode
