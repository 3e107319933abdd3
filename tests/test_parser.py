"""Tests for the layout parser."""

import pytest

from panequal.errors import ParseError
from panequal.parser import parse_layout, split_layout
from panequal.types import LayoutNode, NodeKind

from .samples import HSPLIT, NESTED, SINGLE


class TestParseLayout:
    """Tests for parse_layout()."""

    def test_single_pane(self):
        """A bare leaf with a pane id."""
        root = parse_layout(SINGLE)

        assert root.kind == NodeKind.LEAF
        assert root.geometry == (80, 24, 0, 0)
        assert root.pane_id == 5
        assert root.children == []

    def test_horizontal_split(self):
        """Curly braces produce a horizontal split."""
        root = parse_layout(HSPLIT)

        assert root.kind == NodeKind.HORIZONTAL
        assert root.pane_id is None
        assert [c.pane_id for c in root.children] == [5, 6]
        assert root.children[1].geometry == (39, 24, 41, 0)

    def test_vertical_split(self):
        """Square brackets produce a vertical split."""
        root = parse_layout("80x24,0,0[80x12,0,0,1,80x11,0,13,2]")

        assert root.kind == NodeKind.VERTICAL
        assert [c.geometry for c in root.children] == [(80, 12, 0, 0), (80, 11, 0, 13)]

    def test_nested(self):
        """Splits nest and keep child order."""
        root = parse_layout(NESTED)

        assert root.kind == NodeKind.VERTICAL
        top, bottom = root.children
        assert top.kind == NodeKind.HORIZONTAL
        assert bottom.pane_id == 3
        assert root.pane_ids() == [1, 2, 3]

    def test_multi_digit_values(self):
        """Integers are maximal digit runs."""
        root = parse_layout("1234x567,89,10,1112")

        assert root.geometry == (1234, 567, 89, 10)
        assert root.pane_id == 1112

    def test_empty_leaf_at_end(self):
        """A node without pane id at end of input is an empty leaf."""
        root = parse_layout("80x24,0,0")

        assert root.is_leaf
        assert root.pane_id is None

    def test_empty_leaf_before_closer(self):
        """An empty leaf may close a split."""
        root = parse_layout("80x24,0,0{40x24,0,0,5,39x24,41,0}")

        assert root.children[1].is_leaf
        assert root.children[1].pane_id is None

    def test_single_child_split(self):
        """The grammar allows a split with one child."""
        root = parse_layout("80x24,0,0{80x24,0,0,1}")

        assert len(root.children) == 1

    def test_truncated_pane_id(self):
        """Missing pane id digits fail right after the trailing comma."""
        with pytest.raises(ParseError) as exc_info:
            parse_layout("80x24,0,0,")

        err = exc_info.value
        assert err.pos == 10
        assert err.expected == "digit"
        assert err.actual is None

    def test_missing_x(self):
        """Width and height must be separated by 'x'."""
        with pytest.raises(ParseError) as exc_info:
            parse_layout("80,24,0,0")

        assert exc_info.value.pos == 2
        assert exc_info.value.expected == "x"
        assert exc_info.value.actual == ","

    def test_mismatched_bracket(self):
        """A split opened with '{' must close with '}'."""
        with pytest.raises(ParseError) as exc_info:
            parse_layout("80x24,0,0{40x24,0,0,5,39x24,41,0,6]")

        assert exc_info.value.expected == "}"
        assert exc_info.value.actual == "]"
        assert exc_info.value.pos == len("80x24,0,0{40x24,0,0,5,39x24,41,0,6")

    def test_unterminated_split(self):
        """End of input inside a split is an error."""
        with pytest.raises(ParseError) as exc_info:
            parse_layout("80x24,0,0[80x12,0,0,1")

        assert exc_info.value.expected == "]"
        assert exc_info.value.actual is None

    def test_empty_body(self):
        """An empty body has no width."""
        with pytest.raises(ParseError) as exc_info:
            parse_layout("")

        assert exc_info.value.pos == 0

    def test_trailing_garbage(self):
        """The whole body must be consumed."""
        with pytest.raises(ParseError) as exc_info:
            parse_layout("80x24,0,0,5}")

        assert exc_info.value.pos == 11
        assert exc_info.value.expected == "end of input"

    def test_error_message(self):
        """Error message names position and characters."""
        with pytest.raises(ParseError, match=r"position 2: expected 'x', got ','"):
            parse_layout("80,24,0,0")

    def test_returns_nested_nodes(self):
        """Children are owned LayoutNode instances."""
        root = parse_layout(HSPLIT)

        assert all(isinstance(c, LayoutNode) for c in root.children)


class TestSplitLayout:
    """Tests for split_layout()."""

    def test_split_at_first_comma(self):
        assert split_layout("bb62,159x48,0,0{79x48,0,0,79x48,80,0}") == (
            "bb62",
            "159x48,0,0{79x48,0,0,79x48,80,0}",
        )

    def test_strips_newline(self):
        """tmux output ends with a newline."""
        assert split_layout("b262,80x24,0,0,5\n") == ("b262", "80x24,0,0,5")

    def test_no_comma(self):
        assert split_layout("80x24") == ("", "80x24")
