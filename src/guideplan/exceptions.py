"""Custom exceptions for guideplan."""

from __future__ import annotations


class GuideplanError(Exception):
    """Base exception for guideplan operations."""


class LoadError(GuideplanError):
    """Error while reading a guidebook tree file."""


class CompileError(GuideplanError):
    """Error during plan compilation.

    Attributes:
        message: Human-readable description of the failure.
        node_name: Name of the offending tree node, if one is known.
        path: Child indices leading from the forest root to the node.
        trail: Node names along ``path``.
        source: Identifier of the guidebook being compiled.
    """

    def __init__(
        self,
        message: str,
        *,
        node_name: str | None = None,
        path: tuple[int, ...] = (),
        trail: tuple[str, ...] = (),
        source: str | None = None,
    ) -> None:
        self.message = message
        self.node_name = node_name
        self.path = path
        self.trail = trail
        self.source = source
        super().__init__(self._describe())

    def _describe(self) -> str:
        where: list[str] = []
        if self.trail:
            where.append("at " + " > ".join(self.trail))
        if self.path:
            where.append("path " + ".".join(str(i) for i in self.path))
        if self.source:
            where.append(f"in {self.source}")
        if not where:
            return self.message
        return f"{self.message} ({', '.join(where)})"


class EmptyContainerError(CompileError):
    """A sequence or choice would have no members."""


class MixedSiblingKindError(CompileError):
    """Option and non-option nodes share a parent."""


class DuplicateOptionIndexError(CompileError):
    """Two sibling options share an index."""


class MalformedTreeError(CompileError):
    """The tree producer failed or returned something that is not a forest."""
