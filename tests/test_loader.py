"""Tests for loading guidebook trees from JSON."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from guideplan.compiler import compile_plan
from guideplan.exceptions import LoadError, MalformedTreeError
from guideplan.loader import guidebook_from_data, load_guidebook, parse_forest
from guideplan.schemas import SequenceNode, TaskNode, TreeNode

SCENARIO = {
    "name": "Prerequisites",
    "children": [
        {"name": "EEE", "children": [{"name": "Option 1: TabE1", "children": [{"name": "echo EEE"}]}]},
        {
            "name": "DDD",
            "children": [
                {
                    "name": "Option 1: SubTab1",
                    "children": [{"name": "echo AAA"}, {"name": "echo AAA"}, {"name": "echo AAA"}],
                },
                {"name": "Option 2: SubTab2", "children": [{"name": "echo BBB"}]},
            ],
        },
    ],
}


class TestParseForest:
    """Tests for parse_forest function."""

    def test_single_object_becomes_one_root(self) -> None:
        forest = parse_forest({"name": "echo AAA"})

        assert forest == [TreeNode(name="echo AAA")]

    def test_list_of_objects(self) -> None:
        forest = parse_forest([{"name": "a"}, {"name": "b", "children": [{"name": "c"}]}])

        assert [node.name for node in forest] == ["a", "b"]
        assert forest[1].children[0].is_leaf


class TestLoadGuidebook:
    """Tests for load_guidebook function."""

    def test_lazy_load_compiles(self, tmp_path: Path, expected_plan: SequenceNode) -> None:
        path = tmp_path / "guidebook.json"
        path.write_text(json.dumps([SCENARIO]), encoding="utf-8")

        guidebook = load_guidebook(path)

        assert guidebook.input == str(path)
        assert compile_plan(guidebook) == expected_plan

    def test_lazy_load_defers_reading(self, tmp_path: Path) -> None:
        path = tmp_path / "later.json"
        guidebook = load_guidebook(path)
        path.write_text(json.dumps({"name": "echo late"}), encoding="utf-8")

        assert compile_plan(guidebook) == TaskNode(command="echo late")

    def test_lazy_missing_file_surfaces_as_malformed_tree(self, tmp_path: Path) -> None:
        guidebook = load_guidebook(tmp_path / "missing.json")

        with pytest.raises(MalformedTreeError, match="tree producer failed"):
            compile_plan(guidebook)

    def test_eager_missing_file_raises_load_error(self, tmp_path: Path) -> None:
        with pytest.raises(LoadError, match="Cannot load guidebook tree"):
            load_guidebook(tmp_path / "missing.json", eager=True)

    def test_eager_invalid_json_raises_load_error(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(LoadError):
            load_guidebook(path, eager=True)

    def test_eager_invalid_tree_raises_load_error(self, tmp_path: Path) -> None:
        path = tmp_path / "nameless.json"
        path.write_text(json.dumps([{"children": []}]), encoding="utf-8")

        with pytest.raises(LoadError):
            load_guidebook(path, eager=True)


class TestGuidebookFromData:
    """Tests for guidebook_from_data function."""

    def test_wraps_data(self, expected_plan: SequenceNode) -> None:
        guidebook = guidebook_from_data("inline", SCENARIO)

        assert compile_plan(guidebook) == expected_plan

    def test_invalid_data_fails_at_compile_time(self) -> None:
        guidebook = guidebook_from_data("inline", [{"name": 3}])

        with pytest.raises(MalformedTreeError):
            compile_plan(guidebook)
