"""Classify guidebook tree nodes by the plan node they produce."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from guideplan.schemas import TreeNode

_OPTION_RE = re.compile(r"Option\s+(\d+):\s*(.+)", re.ASCII)


@dataclass(frozen=True)
class LeafKind:
    """A node without children; its name is a shell command."""


@dataclass(frozen=True)
class OptionKind:
    """One alternative of a user-facing choice."""

    index: int
    label: str


@dataclass(frozen=True)
class SectionKind:
    """A grouping node whose children run in sequence."""


NodeKind = Union[LeafKind, OptionKind, SectionKind]

LEAF = LeafKind()
SECTION = SectionKind()


def parse_option_title(name: str) -> OptionKind | None:
    """Parse an ``Option <N>: <label>`` title.

    Returns None unless N is a positive integer and the label is
    non-empty after stripping.
    """
    match = _OPTION_RE.fullmatch(name)
    if not match:
        return None
    index = int(match.group(1))
    label = match.group(2).strip()
    if index < 1 or not label:
        return None
    return OptionKind(index=index, label=label)


def classify(node: TreeNode) -> NodeKind:
    """Classify a node without looking at its siblings."""
    if node.is_leaf:
        return LEAF
    return parse_option_title(node.name) or SECTION
