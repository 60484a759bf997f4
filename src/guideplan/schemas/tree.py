"""Guidebook tree models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from pydantic import BaseModel, Field


class TreeNode(BaseModel):
    """A named guidebook section.

    A node without children is a leaf whose ``name`` is a literal shell
    command.
    """

    name: str
    children: list["TreeNode"] = Field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass(frozen=True)
class GuidebookInput:
    """A guidebook ready for compilation.

    Attributes:
        input: Identifier of the source document, used in diagnostics.
        tree: Zero-argument producer of the root forest. The compiler
            invokes it exactly once per compilation.
    """

    input: str
    tree: Callable[[], Sequence[TreeNode]]
