"""Command-line entry point: compile a guidebook tree file and print the plan."""

from __future__ import annotations

import argparse
import sys

from guideplan.compiler import compile_plan
from guideplan.exceptions import GuideplanError
from guideplan.loader import load_guidebook
from guideplan.output_formatter import render_plan
from guideplan.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="guideplan",
        description="Compile a guidebook section tree (JSON) into a task plan.",
    )
    parser.add_argument("file", help="JSON file with one tree node or a list of nodes")
    parser.add_argument("--json", action="store_true", help="Print the plan as JSON")
    parser.add_argument("--log-level", help="Override GUIDEPLAN_LOG_LEVEL (e.g. DEBUG)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_level:
        configure_logging(args.log_level)

    guidebook = load_guidebook(args.file)
    try:
        plan = compile_plan(guidebook)
    except GuideplanError as exc:
        logger.warning("Plan compilation failed", extra={"input": guidebook.input, "error": type(exc).__name__})
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(plan.model_dump_json(indent=2))
        return 0

    result = render_plan(source=guidebook.input, plan=plan)
    print(result.summary)
    print()
    print(result.plan_tree)
    return 0


if __name__ == "__main__":
    sys.exit(main())
