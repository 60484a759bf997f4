"""Tests for plan models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from guideplan.schemas import (
    PLAN_ADAPTER,
    ChoiceAlternative,
    ChoiceNode,
    SequenceNode,
    TaskNode,
)


class TestPlanInvariants:
    """Container and choice invariants hold for hand-built plans too."""

    def test_empty_sequence_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SequenceNode(title="Empty", steps=[])

    def test_empty_choice_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ChoiceNode(title="Empty", alternatives=[])

    def test_duplicate_indices_rejected(self) -> None:
        body = TaskNode(command="echo x")
        with pytest.raises(ValidationError, match="duplicate option index 1"):
            ChoiceNode(
                alternatives=[
                    ChoiceAlternative(index=1, label="a", body=body),
                    ChoiceAlternative(index=1, label="b", body=body),
                ]
            )

    @pytest.mark.parametrize(("index", "label"), [(0, "zero"), (-2, "negative"), (1, "")])
    def test_alternative_field_bounds(self, index: int, label: str) -> None:
        with pytest.raises(ValidationError):
            ChoiceAlternative(index=index, label=label, body=TaskNode(command="echo x"))


class TestPlanEquality:
    """Structural equality and serialization."""

    def test_equal_structures_compare_equal(self) -> None:
        def build() -> SequenceNode:
            return SequenceNode(title="S", steps=[TaskNode(command="echo a"), TaskNode(command="echo b")])

        assert build() == build()

    def test_order_matters(self) -> None:
        a = SequenceNode(steps=[TaskNode(command="echo a"), TaskNode(command="echo b")])
        b = SequenceNode(steps=[TaskNode(command="echo b"), TaskNode(command="echo a")])

        assert a != b

    def test_dump_is_tagged(self, expected_plan: SequenceNode) -> None:
        data = expected_plan.model_dump()

        assert data["kind"] == "sequence"
        assert data["steps"][0]["kind"] == "choice"
        assert data["steps"][0]["alternatives"][0]["body"]["steps"][0] == {"kind": "task", "command": "echo EEE"}

    def test_json_snapshot_restores_equal_plan(self, expected_plan: SequenceNode) -> None:
        restored = PLAN_ADAPTER.validate_json(expected_plan.model_dump_json())

        assert restored == expected_plan

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PLAN_ADAPTER.validate_python({"kind": "loop", "steps": []})
