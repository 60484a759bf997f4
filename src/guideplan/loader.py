"""Load guidebook trees from JSON documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from guideplan.exceptions import LoadError
from guideplan.schemas import GuidebookInput, TreeNode

logger = logging.getLogger(__name__)

_FOREST_ADAPTER: TypeAdapter[list[TreeNode]] = TypeAdapter(list[TreeNode])


def parse_forest(data: Any) -> list[TreeNode]:
    """Validate a single node object or a list of them into a forest."""
    if isinstance(data, dict):
        return [TreeNode.model_validate(data)]
    return _FOREST_ADAPTER.validate_python(data)


def guidebook_from_data(source: str, data: Any) -> GuidebookInput:
    """Wrap JSON-shaped tree data; validation happens when the tree is produced."""
    return GuidebookInput(input=source, tree=lambda: parse_forest(data))


def load_guidebook(path: Path | str, *, eager: bool = False) -> GuidebookInput:
    """Load a guidebook tree from a JSON file.

    Args:
        path: JSON file holding one node object or a list of nodes.
        eager: If True, read and validate the file now instead of when the
            compiler asks for the tree.

    Returns:
        The guidebook input, identified by ``path``.

    Raises:
        LoadError: If ``eager`` is set and the file cannot be read or is not
            a valid tree.
    """
    file_path = Path(path)

    def produce() -> list[TreeNode]:
        logger.debug("Reading guidebook tree from %s", file_path)
        return parse_forest(json.loads(file_path.read_text(encoding="utf-8")))

    if not eager:
        return GuidebookInput(input=str(file_path), tree=produce)

    try:
        forest = produce()
    except (OSError, ValueError) as exc:
        raise LoadError(f"Cannot load guidebook tree from {file_path}: {exc}") from exc
    return GuidebookInput(input=str(file_path), tree=lambda: forest)
