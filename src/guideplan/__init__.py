"""guideplan: compile guidebook section trees into executable task plans."""

from guideplan.classify import LeafKind, NodeKind, OptionKind, SectionKind, classify
from guideplan.compiler import compile_forest, compile_plan
from guideplan.exceptions import (
    CompileError,
    DuplicateOptionIndexError,
    EmptyContainerError,
    GuideplanError,
    LoadError,
    MalformedTreeError,
    MixedSiblingKindError,
)
from guideplan.loader import guidebook_from_data, load_guidebook
from guideplan.output_formatter import format_plan, render_plan
from guideplan.schemas import (
    ChoiceAlternative,
    ChoiceNode,
    GuidebookInput,
    PlanNode,
    PlanResult,
    SequenceNode,
    TaskNode,
    TreeNode,
)

__all__ = [
    "ChoiceAlternative",
    "ChoiceNode",
    "CompileError",
    "DuplicateOptionIndexError",
    "EmptyContainerError",
    "GuidebookInput",
    "GuideplanError",
    "LeafKind",
    "LoadError",
    "MalformedTreeError",
    "MixedSiblingKindError",
    "NodeKind",
    "OptionKind",
    "PlanNode",
    "PlanResult",
    "SectionKind",
    "SequenceNode",
    "TaskNode",
    "TreeNode",
    "classify",
    "compile_forest",
    "compile_plan",
    "format_plan",
    "guidebook_from_data",
    "load_guidebook",
    "render_plan",
]
