"""
Panequal layout equalizer.

Rewrites layout tree geometry so that siblings under every split share
the available space equally, recursively.
"""

from typing import Optional

from .types import LayoutNode, NodeKind


def split_sizes(extent: int, count: int) -> list[int]:
    """
    Divide an extent among count siblings separated by 1-cell borders.

    Leftover cells go to the trailing siblings, matching tmux's own
    even-layout convention.

    Examples:
        >>> split_sizes(82, 3)
        [26, 27, 27]
    """
    usable = extent - (count - 1)
    base = usable // count
    remainder = usable - base * count
    return [base] * (count - remainder) + [base + 1] * remainder


class LayoutEqualizer:
    """Equalizes sibling pane sizes across a layout tree."""

    BORDER = 1

    def equalize(
        self,
        root: LayoutNode,
        width: Optional[int] = None,
        height: Optional[int] = None,
        x: Optional[int] = None,
        y: Optional[int] = None
    ) -> LayoutNode:
        """
        Equalize a tree in place.

        Args:
            root: Root node of the layout.
            width: Available width (defaults to root.width).
            height: Available height (defaults to root.height).
            x: Left position (defaults to root.x).
            y: Top position (defaults to root.y).

        Returns:
            The same root node, with updated geometry.
        """
        self._equalize_node(
            root,
            root.width if width is None else width,
            root.height if height is None else height,
            root.x if x is None else x,
            root.y if y is None else y,
        )
        return root

    def _equalize_node(self, node: LayoutNode, width: int, height: int, x: int, y: int) -> None:
        node.width = width
        node.height = height
        node.x = x
        node.y = y

        if node.is_leaf:
            return

        if node.kind == NodeKind.HORIZONTAL:
            widths = split_sizes(width, len(node.children))
            cx = x
            for child, child_w in zip(node.children, widths):
                self._equalize_node(child, child_w, height, cx, y)
                cx += child_w + self.BORDER
        else:
            heights = split_sizes(height, len(node.children))
            cy = y
            for child, child_h in zip(node.children, heights):
                self._equalize_node(child, width, child_h, x, cy)
                cy += child_h + self.BORDER


def equalize(
    root: LayoutNode,
    width: Optional[int] = None,
    height: Optional[int] = None,
    x: Optional[int] = None,
    y: Optional[int] = None
) -> LayoutNode:
    """Equalize a layout tree in place. See LayoutEqualizer.equalize."""
    return LayoutEqualizer().equalize(root, width, height, x, y)
