"""Compiled plan models.

A plan is a strict tree of three node kinds, discriminated by ``kind``:
tasks carry a shell command, sequences run their steps in order, and
choices hold mutually exclusive alternatives of which a runner executes
exactly one.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, model_validator


class TaskNode(BaseModel):
    """A leaf action."""

    kind: Literal["task"] = "task"
    command: str


class SequenceNode(BaseModel):
    """Steps executed one after another."""

    kind: Literal["sequence"] = "sequence"
    title: str | None = None
    steps: list["PlanNode"] = Field(..., min_length=1)


class ChoiceAlternative(BaseModel):
    """One labeled branch of a choice."""

    index: int = Field(..., ge=1)
    label: str = Field(..., min_length=1)
    body: "PlanNode"


class ChoiceNode(BaseModel):
    """Mutually exclusive alternatives."""

    kind: Literal["choice"] = "choice"
    title: str | None = None
    alternatives: list[ChoiceAlternative] = Field(..., min_length=1)

    @model_validator(mode="after")
    def check_unique_indices(self) -> "ChoiceNode":
        """Reject alternatives that share an option index."""
        seen: set[int] = set()
        for alternative in self.alternatives:
            if alternative.index in seen:
                err = f"duplicate option index {alternative.index}"
                raise ValueError(err)
            seen.add(alternative.index)
        return self


PlanNode = Annotated[
    Union[TaskNode, SequenceNode, ChoiceNode],
    Field(discriminator="kind"),
]

SequenceNode.model_rebuild()
ChoiceAlternative.model_rebuild()
ChoiceNode.model_rebuild()

PLAN_ADAPTER: TypeAdapter[PlanNode] = TypeAdapter(PlanNode)
