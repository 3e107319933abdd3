"""
Panequal type definitions.

Core data structures used throughout the library.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional
from enum import Enum


Geometry = tuple[int, int, int, int]


class NodeKind(Enum):
    """Layout node kinds."""

    LEAF = "leaf"
    HORIZONTAL = "horizontal"  # children left-to-right, "{...}"
    VERTICAL = "vertical"      # children top-to-bottom, "[...]"


@dataclass
class LayoutNode:
    """A node in a tmux layout tree: a pane or a split."""

    kind: NodeKind
    width: int
    height: int
    x: int = 0
    y: int = 0
    pane_id: Optional[int] = None
    children: list["LayoutNode"] = field(default_factory=list)

    def __post_init__(self):
        if self.kind == NodeKind.LEAF:
            if self.children:
                raise ValueError("leaf node cannot have children")
        else:
            if self.pane_id is not None:
                raise ValueError("split node cannot have a pane id")
            if not self.children:
                raise ValueError("split node needs at least one child")
            # A "," after a leaf always starts its pane id, so only the
            # last child can go without one
            for child in self.children[:-1]:
                if child.is_leaf and child.pane_id is None:
                    raise ValueError("only the last child of a split may omit its pane id")

    @classmethod
    def leaf(
        cls,
        width: int,
        height: int,
        x: int = 0,
        y: int = 0,
        pane_id: Optional[int] = None
    ) -> "LayoutNode":
        return cls(NodeKind.LEAF, width, height, x, y, pane_id=pane_id)

    @classmethod
    def split(
        cls,
        kind: NodeKind,
        width: int,
        height: int,
        x: int,
        y: int,
        children: list["LayoutNode"]
    ) -> "LayoutNode":
        return cls(kind, width, height, x, y, children=list(children))

    @property
    def is_leaf(self) -> bool:
        return self.kind == NodeKind.LEAF

    @property
    def is_split(self) -> bool:
        return self.kind != NodeKind.LEAF

    @property
    def geometry(self) -> Geometry:
        return self.width, self.height, self.x, self.y

    def leaves(self) -> Iterator["LayoutNode"]:
        """Yield leaf nodes depth-first, in layout order."""
        if self.is_leaf:
            yield self
            return
        for child in self.children:
            yield from child.leaves()

    def pane_ids(self) -> list[int]:
        """Pane ids of all leaves that carry one, in layout order."""
        return [leaf.pane_id for leaf in self.leaves() if leaf.pane_id is not None]


@dataclass
class EqualizeResult:
    """Outcome of equalizing one layout string."""

    before: str
    after: str
    checksum: str
    root: LayoutNode
    panes_before: dict[int, Geometry] = field(default_factory=dict)
    panes_after: dict[int, Geometry] = field(default_factory=dict)

    @property
    def encoded(self) -> str:
        """Full layout string as tmux expects it."""
        return f"{self.checksum},{self.after}"

    @property
    def changed(self) -> bool:
        return self.before != self.after
