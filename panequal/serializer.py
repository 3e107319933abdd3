"""
Panequal layout serializer.

Inverse of the parser: renders a LayoutNode tree as a tmux layout body.
"""

from .types import LayoutNode, NodeKind

# kind -> (opener, closer)
_BRACKETS = {
    NodeKind.HORIZONTAL: ("{", "}"),
    NodeKind.VERTICAL: ("[", "]"),
}


def serialize_layout(node: LayoutNode) -> str:
    """
    Render a layout tree without the checksum prefix.

    tmux layout format: {width}x{height},{x},{y}[,pane_id | {nested} | [nested]]
    """
    dims = f"{node.width}x{node.height},{node.x},{node.y}"

    if node.is_leaf:
        if node.pane_id is None:
            return dims
        return f"{dims},{node.pane_id}"

    opener, closer = _BRACKETS[node.kind]
    inner = ",".join(serialize_layout(child) for child in node.children)
    return f"{dims}{opener}{inner}{closer}"
