"""
Panequal layout parser.

Parses the tmux layout encoding into a LayoutNode tree:

    node       := dims ( split | leaf_tail | <empty leaf> )
    dims       := int "x" int "," int "," int
    split      := ( "{" | "[" ) node ( "," node )* ( "}" | "]" )
    leaf_tail  := "," int
"""

import logging
from typing import Optional

from .errors import ParseError
from .types import LayoutNode, NodeKind

logger = logging.getLogger(__name__)

# opener -> (kind, closer)
_SPLITS = {
    "{": (NodeKind.HORIZONTAL, "}"),
    "[": (NodeKind.VERTICAL, "]"),
}


class _Cursor:
    """Read position into a layout body, owned by a single parse call."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def peek(self) -> Optional[str]:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def expect(self, expected: str) -> None:
        actual = self.peek()
        if actual != expected:
            raise ParseError(self.pos, expected, actual)
        self.pos += 1

    def read_int(self) -> int:
        start = self.pos
        text = self.text
        while self.pos < len(text) and "0" <= text[self.pos] <= "9":
            self.pos += 1
        if self.pos == start:
            raise ParseError(self.pos, "digit", self.peek())
        return int(text[start:self.pos])


def _parse_node(cur: _Cursor) -> LayoutNode:
    width = cur.read_int()
    cur.expect("x")
    height = cur.read_int()
    cur.expect(",")
    x = cur.read_int()
    cur.expect(",")
    y = cur.read_int()

    ch = cur.peek()

    if ch in _SPLITS:
        kind, closer = _SPLITS[ch]
        cur.pos += 1
        children = [_parse_node(cur)]
        while cur.peek() == ",":
            cur.pos += 1
            children.append(_parse_node(cur))
        cur.expect(closer)
        return LayoutNode.split(kind, width, height, x, y, children)

    if ch == ",":
        cur.pos += 1
        return LayoutNode.leaf(width, height, x, y, pane_id=cur.read_int())

    # Leaf at end of input or before a closing delimiter
    return LayoutNode.leaf(width, height, x, y)


def parse_layout(body: str) -> LayoutNode:
    """
    Parse a layout body (without the checksum prefix).

    Args:
        body: Layout body, e.g. "80x24,0,0{40x24,0,0,5,39x24,41,0,6}".

    Returns:
        Root LayoutNode.

    Raises:
        ParseError: On the first character that does not fit the grammar.
    """
    cur = _Cursor(body)
    root = _parse_node(cur)
    if not cur.at_end():
        raise ParseError(cur.pos, "end of input", cur.peek())

    logger.debug("Parsed layout with %d panes", sum(1 for _ in root.leaves()))
    return root


def split_layout(raw: str) -> tuple[str, str]:
    """
    Split a host layout string into (checksum, body).

    Everything up to the first comma is the checksum. A string without
    a comma is treated as a bare body.
    """
    raw = raw.strip()
    checksum, sep, body = raw.partition(",")
    if not sep:
        return "", raw
    return checksum, body
