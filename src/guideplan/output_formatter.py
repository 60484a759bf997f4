"""Format compiled plans into summary and tree outputs."""

from __future__ import annotations

from typing import Iterator, Mapping

from guideplan.config import GUIDEPLAN_TREE_INDENT
from guideplan.schemas import ChoiceNode, PlanNode, PlanResult, SequenceNode, TaskNode


def render_plan(*, source: str, plan: PlanNode) -> PlanResult:
    """Create the summary and printable tree for a compiled plan."""
    summary_lines = [
        f"Guidebook: {source}",
        f"Tasks: {count_tasks(plan)}",
        f"Choices: {count_choices(plan)}",
        f"Execution paths: {count_paths(plan)}",
    ]
    return PlanResult(
        input=source,
        summary="\n".join(summary_lines),
        plan_tree="Plan:\n" + format_plan(plan),
        plan=plan,
    )


def format_plan(plan: PlanNode, indent: int = 0, *, width: int = GUIDEPLAN_TREE_INDENT) -> str:
    """Render a plan as an indented, human-readable tree.

    Tasks print as ``$ <command>``, containers as ``Sequence: <title>`` or
    ``Choice: <title>``, and each alternative as ``[<index>] <label>`` above
    its body.
    """
    pad = " " * (indent * width)
    if isinstance(plan, TaskNode):
        return f"{pad}$ {plan.command}"

    if isinstance(plan, SequenceNode):
        lines = [f"{pad}Sequence" + (f": {plan.title}" if plan.title else "")]
        lines.extend(format_plan(step, indent + 1, width=width) for step in plan.steps)
        return "\n".join(lines)

    lines = [f"{pad}Choice" + (f": {plan.title}" if plan.title else "")]
    alt_pad = " " * ((indent + 1) * width)
    for alternative in plan.alternatives:
        lines.append(f"{alt_pad}[{alternative.index}] {alternative.label}")
        lines.append(format_plan(alternative.body, indent + 2, width=width))
    return "\n".join(lines)


def count_tasks(plan: PlanNode) -> int:
    """Count task nodes across every branch of the plan."""
    if isinstance(plan, TaskNode):
        return 1
    if isinstance(plan, SequenceNode):
        return sum(count_tasks(step) for step in plan.steps)
    return sum(count_tasks(alternative.body) for alternative in plan.alternatives)


def count_choices(plan: PlanNode) -> int:
    """Count choice nodes across every branch of the plan."""
    if isinstance(plan, TaskNode):
        return 0
    if isinstance(plan, SequenceNode):
        return sum(count_choices(step) for step in plan.steps)
    return 1 + sum(count_choices(alternative.body) for alternative in plan.alternatives)


def count_paths(plan: PlanNode) -> int:
    """Count the distinct ways a runner can resolve every choice it reaches."""
    if isinstance(plan, TaskNode):
        return 1
    if isinstance(plan, SequenceNode):
        total = 1
        for step in plan.steps:
            total *= count_paths(step)
        return total
    return sum(count_paths(alternative.body) for alternative in plan.alternatives)


def iter_commands(
    plan: PlanNode,
    choices: Mapping[str | tuple[int, ...], int] | None = None,
) -> Iterator[str]:
    """Yield the commands a runner would execute, in order.

    Args:
        plan: The compiled plan.
        choices: Selected option index per choice. A key is either the
            choice's path (step positions within sequences and alternative
            positions within choices, from the plan root) or its title.
            Titles need not be unique, so a path key wins over a title key.
            Choices without an entry resolve to their first alternative.

    Raises:
        KeyError: If a selected index does not exist in its choice.
    """
    yield from _walk(plan, choices or {}, ())


def _walk(plan: PlanNode, selected: Mapping[str | tuple[int, ...], int], path: tuple[int, ...]) -> Iterator[str]:
    if isinstance(plan, TaskNode):
        yield plan.command
    elif isinstance(plan, SequenceNode):
        for i, step in enumerate(plan.steps):
            yield from _walk(step, selected, path + (i,))
    elif isinstance(plan, ChoiceNode):
        position, body = _pick(plan, selected, path)
        yield from _walk(body, selected, path + (position,))


def _pick(
    choice: ChoiceNode, selected: Mapping[str | tuple[int, ...], int], path: tuple[int, ...]
) -> tuple[int, PlanNode]:
    if path in selected:
        wanted = selected[path]
    elif choice.title is not None and choice.title in selected:
        wanted = selected[choice.title]
    else:
        return 0, choice.alternatives[0].body
    for position, alternative in enumerate(choice.alternatives):
        if alternative.index == wanted:
            return position, alternative.body
    raise KeyError(f"choice {choice.title!r} has no option {wanted}")
