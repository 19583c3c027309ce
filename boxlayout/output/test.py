"""Unit tests for output formatting."""

import pytest

from boxlayout.ir import LayoutBlock
from boxlayout.layout import resolve_layout
from boxlayout.output import format_block, format_layout_tree, layout_to_dict


class TestLayoutToDict:
    """Tests for layout_to_dict."""

    @pytest.mark.unit
    def test_plain_dicts(self, simple_layout):
        data = layout_to_dict(resolve_layout(simple_layout))
        assert set(data) == {"root", "title", "content", "footer"}
        assert data["content"] == {
            "id": "content",
            "width": 460,
            "height": 360,
            "top": 60,
            "left": 20,
            "right": 480,
            "bottom": 420,
        }


class TestFormatBlock:
    """Tests for format_block."""

    @pytest.mark.unit
    def test_integral(self):
        block = LayoutBlock.from_geometry("a", 460.0, 50.0, 10.0, 20.0)
        assert format_block(block) == "460x50 @ (20, 10)"

    @pytest.mark.unit
    def test_fractional(self):
        block = LayoutBlock.from_geometry("a", 12.5, 1, 0, 0.5)
        assert format_block(block) == "12.5x1 @ (0.5, 0)"


class TestFormatLayoutTree:
    """Tests for format_layout_tree."""

    @pytest.mark.unit
    def test_simple_tree(self, simple_layout):
        text = format_layout_tree(simple_layout, resolve_layout(simple_layout))
        assert text == "\n".join(
            [
                "root [column] 500x500 @ (0, 0)",
                "├── title 460x50 @ (20, 10)",
                "├── content 460x360 @ (20, 60)",
                "└── footer 460x50 @ (20, 420)",
            ]
        )

    @pytest.mark.unit
    def test_nested_prefixes(self, advanced_layout):
        text = format_layout_tree(advanced_layout, resolve_layout(advanced_layout))
        lines = text.splitlines()
        assert lines == [
            "root [column] 500x500 @ (0, 0)",
            "├── title 460x50 @ (20, 20)",
            "├── chart [row] 460x260 @ (20, 70)",
            "│   ├── left 100x260 @ (20, 70)",
            "│   ├── center-wrapper [row] 260x260 @ (120, 70)",
            "│   │   └── center 220x240 @ (140, 80)",
            "│   └── right 100x260 @ (380, 70)",
            "└── legend 460x150 @ (20, 330)",
        ]

    @pytest.mark.unit
    def test_unresolved_node(self, simple_layout):
        text = format_layout_tree(simple_layout, {})
        assert text.splitlines()[0] == "root [column] (unresolved)"
