"""Shared schemas for guideplan."""

from guideplan.schemas.plan import (
    PLAN_ADAPTER,
    ChoiceAlternative,
    ChoiceNode,
    PlanNode,
    SequenceNode,
    TaskNode,
)
from guideplan.schemas.result import PlanResult
from guideplan.schemas.tree import GuidebookInput, TreeNode

__all__ = [
    "PLAN_ADAPTER",
    "ChoiceAlternative",
    "ChoiceNode",
    "GuidebookInput",
    "PlanNode",
    "PlanResult",
    "SequenceNode",
    "TaskNode",
    "TreeNode",
]
