"""Local configuration for guideplan."""

from __future__ import annotations

import os

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_MAX_TREE_NODES = 5000
DEFAULT_TREE_INDENT = 4
DEFAULT_MAX_TREE_DEPTH = 128

GUIDEPLAN_LOG_LEVEL = os.getenv("GUIDEPLAN_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
# Upper bound on nodes accepted per request by the HTTP endpoint.
GUIDEPLAN_MAX_TREE_NODES = int(os.getenv("GUIDEPLAN_MAX_TREE_NODES", str(DEFAULT_MAX_TREE_NODES)))
GUIDEPLAN_TREE_INDENT = int(os.getenv("GUIDEPLAN_TREE_INDENT", str(DEFAULT_TREE_INDENT)))
# Deepest nesting the compiler accepts before failing with MalformedTreeError.
GUIDEPLAN_MAX_TREE_DEPTH = int(os.getenv("GUIDEPLAN_MAX_TREE_DEPTH", str(DEFAULT_MAX_TREE_DEPTH)))
