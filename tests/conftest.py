"""Test setup for guideplan."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from guideplan.schemas import (  # noqa: E402
    ChoiceAlternative,
    ChoiceNode,
    GuidebookInput,
    SequenceNode,
    TaskNode,
    TreeNode,
)


def leaf(command: str) -> TreeNode:
    return TreeNode(name=command)


def section(name: str, *children: TreeNode) -> TreeNode:
    return TreeNode(name=name, children=list(children))


@pytest.fixture
def importe() -> TreeNode:
    return section("EEE", section("Option 1: TabE1", leaf("echo EEE")))


@pytest.fixture
def importd() -> TreeNode:
    return section(
        "DDD",
        section("Option 1: SubTab1", leaf("echo AAA"), leaf("echo AAA"), leaf("echo AAA")),
        section("Option 2: SubTab2", leaf("echo BBB")),
    )


@pytest.fixture
def prerequisites(importe: TreeNode, importd: TreeNode) -> TreeNode:
    return section("Prerequisites", importe, importd)


@pytest.fixture
def guidebook(prerequisites: TreeNode) -> GuidebookInput:
    """The two-level guidebook with a one-option and a two-option choice."""
    return GuidebookInput(input="guidebook-tree-model1.md", tree=lambda: [prerequisites])


@pytest.fixture
def expected_plan() -> SequenceNode:
    return SequenceNode(
        title="Prerequisites",
        steps=[
            ChoiceNode(
                title="EEE",
                alternatives=[
                    ChoiceAlternative(
                        index=1,
                        label="TabE1",
                        body=SequenceNode(title="Option 1: TabE1", steps=[TaskNode(command="echo EEE")]),
                    )
                ],
            ),
            ChoiceNode(
                title="DDD",
                alternatives=[
                    ChoiceAlternative(
                        index=1,
                        label="SubTab1",
                        body=SequenceNode(
                            title="Option 1: SubTab1",
                            steps=[TaskNode(command="echo AAA") for _ in range(3)],
                        ),
                    ),
                    ChoiceAlternative(
                        index=2,
                        label="SubTab2",
                        body=SequenceNode(title="Option 2: SubTab2", steps=[TaskNode(command="echo BBB")]),
                    ),
                ],
            ),
        ],
    )
