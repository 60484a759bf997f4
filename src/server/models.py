"""Pydantic models for the plan API."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field, field_validator

from guideplan.schemas import PlanNode, TreeNode


class PlanRequest(BaseModel):
    """Request model for the /api/plan endpoint.

    Attributes
    ----------
    input : str
        Identifier of the guidebook the tree was parsed from.
    tree : list[TreeNode]
        Root forest of the guidebook.

    """

    input: str = Field(..., description="Guidebook identifier, used in diagnostics")
    tree: list[TreeNode] = Field(default_factory=list, description="Root forest of the guidebook")

    @field_validator("input")
    @classmethod
    def validate_input(cls, v: str) -> str:
        """Validate that ``input`` is not empty."""
        if not v.strip():
            err = "input cannot be empty"
            raise ValueError(err)
        return v.strip()


class PlanSuccessResponse(BaseModel):
    """Success response model for the /api/plan endpoint.

    Attributes
    ----------
    input : str
        The guidebook identifier.
    summary : str
        Task, choice and path counts.
    tree : str
        Indented text rendering of the plan.
    plan : PlanNode
        The compiled plan.

    """

    input: str = Field(..., description="Guidebook identifier")
    summary: str = Field(..., description="Plan summary")
    tree: str = Field(..., description="Indented plan tree")
    plan: PlanNode = Field(..., description="Compiled plan")


class PlanErrorResponse(BaseModel):
    """Error response model for the /api/plan endpoint.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.
    error_type : str
        Name of the error class.
    node_name : str | None
        Name of the offending tree node, if known.
    path : list[int]
        Child indices from the forest root to the offending node.

    """

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error class name")
    node_name: str | None = Field(default=None, description="Offending node name")
    path: list[int] = Field(default_factory=list, description="Child indices to the offending node")


PlanResponse = Union[PlanSuccessResponse, PlanErrorResponse]
