"""Server configuration."""

from __future__ import annotations

from guideplan.config import GUIDEPLAN_MAX_TREE_NODES

MAX_TREE_NODES: int = GUIDEPLAN_MAX_TREE_NODES
API_TITLE = "guideplan"
API_DESCRIPTION = "Compile guidebook section trees into executable task plans."
