"""Compile guidebook trees into executable plans."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Iterable

from pydantic import ValidationError

from guideplan.classify import LeafKind, NodeKind, OptionKind, classify, parse_option_title
from guideplan.config import GUIDEPLAN_MAX_TREE_DEPTH
from guideplan.exceptions import (
    CompileError,
    DuplicateOptionIndexError,
    EmptyContainerError,
    MalformedTreeError,
    MixedSiblingKindError,
)
from guideplan.schemas import (
    ChoiceAlternative,
    ChoiceNode,
    GuidebookInput,
    PlanNode,
    SequenceNode,
    TaskNode,
    TreeNode,
)

logger = logging.getLogger(__name__)

_MEMORY_SOURCE = "<memory>"


@dataclass(frozen=True)
class _Position:
    """Location of a node within the forest being compiled."""

    source: str
    max_depth: int = GUIDEPLAN_MAX_TREE_DEPTH
    path: tuple[int, ...] = ()
    trail: tuple[str, ...] = ()

    def child(self, index: int, name: str) -> _Position:
        return _Position(self.source, self.max_depth, self.path + (index,), self.trail + (name,))

    def error(self, exc_class: type[CompileError], message: str, node_name: str | None = None) -> CompileError:
        return exc_class(
            message,
            node_name=node_name if node_name is not None else (self.trail[-1] if self.trail else None),
            path=self.path,
            trail=self.trail,
            source=self.source,
        )


def compile_plan(guidebook: GuidebookInput, *, max_depth: int = GUIDEPLAN_MAX_TREE_DEPTH) -> PlanNode:
    """Compile a guidebook into a plan.

    The guidebook's tree producer is invoked exactly once.

    Args:
        guidebook: Source identifier plus lazy root forest.
        max_depth: Deepest nesting level accepted; roots are level 1.

    Returns:
        The root plan node.

    Raises:
        MalformedTreeError: If the producer raises, does not return a
            sequence of tree nodes, or the tree nests deeper than
            ``max_depth``.
        EmptyContainerError: If the forest is empty.
        MixedSiblingKindError: If options and non-options share a parent.
        DuplicateOptionIndexError: If sibling options share an index.
    """
    root = _Position(source=guidebook.input, max_depth=max_depth)
    try:
        produced = guidebook.tree()
    except Exception as exc:
        raise root.error(MalformedTreeError, f"tree producer failed: {exc}") from exc

    forest = _coerce_forest(produced, root)
    logger.debug("Compiling %s (%d root(s))", guidebook.input, len(forest))
    try:
        plan = _compile_forest(forest, root)
    except CompileError as exc:
        logger.debug("Compilation of %s failed: %s", guidebook.input, exc)
        raise
    except RecursionError as exc:
        logger.debug("Compilation of %s exhausted the interpreter stack", guidebook.input)
        raise root.error(MalformedTreeError, "tree nesting too deep") from exc
    logger.debug("Compiled %s", guidebook.input)
    return plan


def compile_forest(
    forest: Iterable[TreeNode],
    *,
    source: str = _MEMORY_SOURCE,
    max_depth: int = GUIDEPLAN_MAX_TREE_DEPTH,
) -> PlanNode:
    """Compile an already built forest."""
    nodes = list(forest)
    return compile_plan(GuidebookInput(input=source, tree=lambda: nodes), max_depth=max_depth)


def _coerce_forest(produced: Any, position: _Position) -> list[TreeNode]:
    if isinstance(produced, (str, bytes)) or not isinstance(produced, Sequence):
        raise position.error(
            MalformedTreeError,
            f"tree producer returned {type(produced).__name__}, expected a sequence of nodes",
        )

    forest: list[TreeNode] = []
    for index, item in enumerate(produced):
        if isinstance(item, TreeNode):
            forest.append(item)
        elif isinstance(item, Mapping):
            try:
                forest.append(TreeNode.model_validate(item))
            except ValidationError as exc:
                raise position.error(
                    MalformedTreeError, f"root {index} is not a valid tree node: {exc}"
                ) from exc
        else:
            raise position.error(
                MalformedTreeError,
                f"root {index} is {type(item).__name__}, expected a tree node",
            )
    return forest


def _compile_forest(forest: list[TreeNode], position: _Position) -> PlanNode:
    if not forest:
        raise position.error(EmptyContainerError, "guidebook has no root nodes", node_name=position.source)

    if len(forest) == 1:
        only = forest[0]
        kind = classify(only)
        if not isinstance(kind, OptionKind):
            return _compile_node(only, kind, position.child(0, only.name))

    # Several roots, or an option root, group under the guidebook itself.
    return _compile_group(forest, position.source, position)


def _compile_node(node: TreeNode, kind: NodeKind, position: _Position) -> PlanNode:
    if isinstance(kind, LeafKind):
        return TaskNode(command=node.name)
    return _compile_group(node.children, node.name, position)


def _compile_group(children: list[TreeNode], title: str, position: _Position) -> PlanNode:
    """Compile sibling nodes into a sequence or, if all are options, a choice."""
    if not children:
        raise position.error(EmptyContainerError, f"{title!r} has no children")
    if len(position.path) >= position.max_depth:
        raise position.child(0, children[0].name).error(
            MalformedTreeError, f"tree nests deeper than {position.max_depth} levels"
        )

    kinds = [classify(child) for child in children]
    options: list[tuple[int, TreeNode, OptionKind]] = [
        (i, child, kind)
        for i, (child, kind) in enumerate(zip(children, kinds))
        if isinstance(kind, OptionKind)
    ]

    if not options:
        steps = [
            _compile_node(child, kind, position.child(i, child.name))
            for i, (child, kind) in enumerate(zip(children, kinds))
        ]
        return SequenceNode(title=title, steps=steps)

    if len(options) != len(children):
        raise _mixed_sibling_error(children, kinds, [i for i, _, _ in options], title, position)

    alternatives: list[ChoiceAlternative] = []
    seen: dict[int, str] = {}
    for i, child, option in options:
        child_position = position.child(i, child.name)
        if option.index in seen:
            raise child_position.error(
                DuplicateOptionIndexError,
                f"option index {option.index} of {child.name!r} already used by {seen[option.index]!r}",
            )
        seen[option.index] = child.name
        body = _compile_group(child.children, child.name, child_position)
        alternatives.append(ChoiceAlternative(index=option.index, label=option.label, body=body))
    return ChoiceNode(title=title, alternatives=alternatives)


def _mixed_sibling_error(
    children: list[TreeNode],
    kinds: list[NodeKind],
    option_positions: list[int],
    title: str,
    position: _Position,
) -> CompileError:
    """Build the error for the first sibling whose kind differs from the first child's."""
    if option_positions[0] == 0:
        offender = min(set(range(len(children))) - set(option_positions))
        expected = "an option"
    else:
        offender = option_positions[0]
        expected = "a step"

    child = children[offender]
    hint = ""
    if isinstance(kinds[offender], LeafKind) and parse_option_title(child.name) is not None:
        hint = " (an option needs at least one child)"
    return position.child(offender, child.name).error(
        MixedSiblingKindError,
        f"{title!r} mixes options with steps: {child.name!r} is not {expected}{hint}",
    )
