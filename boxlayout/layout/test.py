"""Unit tests for layout resolution."""

import pytest
from pydantic import ValidationError

from boxlayout.core.errors import (
    BlockOverflowError,
    DuplicateIdError,
    InvalidPaddingFormat,
    InvalidPercentageFormat,
    MissingDirection,
)
from boxlayout.ir import LayoutBlock, LayoutNode, LayoutNodeRoot
from boxlayout.layout import Container, collect_blocks, resolve_layout, root_block
from boxlayout.padding import Padding


def _geometry(block: LayoutBlock) -> tuple:
    return (block.left, block.top, block.width, block.height)


class TestSimpleLayout:
    """Column root with padding and an auto-height middle child."""

    @pytest.mark.unit
    def test_all_ids_present(self, simple_layout):
        layout = resolve_layout(simple_layout)
        assert set(layout) == {"root", "title", "content", "footer"}

    @pytest.mark.unit
    def test_auto_height_takes_leftover(self, simple_layout):
        """500 - 10 - 30 - 50 - 50 = 360."""
        layout = resolve_layout(simple_layout)
        assert layout["content"].height == 360

    @pytest.mark.unit
    def test_tops(self, simple_layout):
        layout = resolve_layout(simple_layout)
        assert layout["title"].top == 10
        assert layout["content"].top == 60
        assert layout["footer"].top == 420

    @pytest.mark.unit
    def test_widths_fill_padding_box(self, simple_layout):
        """100% width is 500 - 20 - 20."""
        layout = resolve_layout(simple_layout)
        for node_id in ("title", "content", "footer"):
            assert layout[node_id].width == 460
            assert layout[node_id].left == 20

    @pytest.mark.unit
    def test_root_block(self, simple_layout):
        """The root keeps its declared geometry; its padding does not apply."""
        root = resolve_layout(simple_layout)["root"]
        assert _geometry(root) == (0, 0, 500, 500)
        assert root.right == 500
        assert root.bottom == 500

    @pytest.mark.unit
    def test_derived_edges(self, simple_layout):
        footer = resolve_layout(simple_layout)["footer"]
        assert footer.right == 480
        assert footer.bottom == 470


class TestRowLayout:
    """Row root with a fixed aside and two auto columns."""

    @pytest.mark.unit
    def test_autos_split_leftover(self, row_layout):
        layout = resolve_layout(row_layout)
        assert layout["aside"].width == 100
        assert layout["content-1"].width == 200
        assert layout["content-2"].width == 200

    @pytest.mark.unit
    def test_lefts(self, row_layout):
        layout = resolve_layout(row_layout)
        assert layout["aside"].left == 0
        assert layout["content-1"].left == 100
        assert layout["content-2"].left == 300

    @pytest.mark.unit
    def test_heights_stretch(self, row_layout):
        """Cross-axis autos stretch to the full height."""
        layout = resolve_layout(row_layout)
        for node_id in ("aside", "content-1", "content-2"):
            assert layout[node_id].height == 500
            assert layout[node_id].top == 0


class TestNestedLayout:
    """Nested containers resolve against their own blocks."""

    @pytest.mark.unit
    def test_geometry(self, advanced_layout):
        layout = resolve_layout(advanced_layout)
        assert _geometry(layout["title"]) == (20, 20, 460, 50)
        assert _geometry(layout["chart"]) == (20, 70, 460, 260)
        assert _geometry(layout["left"]) == (20, 70, 100, 260)
        assert _geometry(layout["center-wrapper"]) == (120, 70, 260, 260)
        assert _geometry(layout["center"]) == (140, 80, 220, 240)
        assert _geometry(layout["right"]) == (380, 70, 100, 260)
        assert _geometry(layout["legend"]) == (20, 330, 460, 150)

    @pytest.mark.unit
    def test_block_order(self, advanced_layout):
        """Root, then direct children, then nested descendants depth-first."""
        ids = [block.id for block in collect_blocks(advanced_layout)]
        assert ids == [
            "root",
            "title",
            "chart",
            "legend",
            "left",
            "center-wrapper",
            "right",
            "center",
        ]

    @pytest.mark.unit
    def test_root_offset_propagates(self):
        root = LayoutNodeRoot(
            id="root",
            width=100,
            height=100,
            top=30,
            left=40,
            padding=5,
            direction="column",
            children=[
                LayoutNode(
                    id="box",
                    direction="row",
                    padding={"left": 10},
                    children=[LayoutNode(id="leaf", width=20)],
                )
            ],
        )
        layout = resolve_layout(root)
        assert _geometry(layout["root"]) == (40, 30, 100, 100)
        assert _geometry(layout["box"]) == (45, 35, 90, 90)
        assert _geometry(layout["leaf"]) == (55, 35, 20, 90)

    @pytest.mark.unit
    def test_accepts_plain_mapping(self, advanced_layout):
        as_dict = advanced_layout.model_dump(exclude_none=True)
        assert resolve_layout(as_dict) == resolve_layout(advanced_layout)


class TestEdgeCases:
    """Leaf roots, empty containers and leftover handling."""

    @pytest.mark.unit
    def test_leaf_root(self):
        layout = resolve_layout(LayoutNodeRoot(id="only", width=10, height=20))
        assert list(layout) == ["only"]
        assert _geometry(layout["only"]) == (0, 0, 10, 20)

    @pytest.mark.unit
    def test_empty_children(self):
        root = LayoutNodeRoot(
            id="root", width=10, height=10, direction="row", children=[]
        )
        assert list(resolve_layout(root)) == ["root"]

    @pytest.mark.unit
    def test_leftover_discarded_without_autos(self):
        root = LayoutNodeRoot(
            id="root",
            width=500,
            height=100,
            direction="row",
            children=[LayoutNode(id="a", width=100), LayoutNode(id="b", width=100)],
        )
        layout = resolve_layout(root)
        assert layout["b"].right == 200

    @pytest.mark.unit
    def test_negative_leftover_shared_by_autos(self):
        """An auto sibling absorbs an over-sized fixed sibling."""
        root = LayoutNodeRoot(
            id="root",
            width=500,
            height=100,
            direction="row",
            children=[LayoutNode(id="big", width=600), LayoutNode(id="rest")],
        )
        layout = resolve_layout(root)
        assert layout["rest"].width == -100
        assert layout["rest"].left == 600

    @pytest.mark.unit
    def test_idempotent(self, advanced_layout):
        assert resolve_layout(advanced_layout) == resolve_layout(advanced_layout)


class TestDuplicateIds:
    """Duplicate IDs overwrite by default and fail in strict mode."""

    @pytest.fixture
    def duplicated(self) -> LayoutNodeRoot:
        return LayoutNodeRoot(
            id="root",
            width=300,
            height=100,
            direction="row",
            children=[
                LayoutNode(id="cell", width=100),
                LayoutNode(id="cell", width=200),
            ],
        )

    @pytest.mark.unit
    def test_last_write_wins(self, duplicated):
        layout = resolve_layout(duplicated)
        assert len(layout) == 2
        assert layout["cell"].width == 200
        assert layout["cell"].left == 100

    @pytest.mark.unit
    def test_strict_raises(self, duplicated):
        with pytest.raises(DuplicateIdError) as exc_info:
            resolve_layout(duplicated, strict=True)
        assert exc_info.value.node_ids == ["cell"]

    @pytest.mark.unit
    def test_strict_passes_unique(self, simple_layout):
        assert len(resolve_layout(simple_layout, strict=True)) == 4


class TestErrors:
    """Failures abort the whole resolution."""

    @pytest.mark.unit
    def test_overflow(self):
        root = LayoutNodeRoot(
            id="root",
            direction="column",
            width=500,
            height=500,
            children=[
                LayoutNode(id="content-1", width="auto", height=500),
                LayoutNode(id="content-2", width="auto", height=1),
            ],
        )
        with pytest.raises(BlockOverflowError) as exc_info:
            resolve_layout(root)
        assert str(exc_info.value) == "Block heights are overflowing! 500+1 > 500"

    @pytest.mark.unit
    def test_nested_overflow(self):
        root = LayoutNodeRoot(
            id="root",
            direction="column",
            width=200,
            height=100,
            children=[
                LayoutNode(
                    id="bar",
                    direction="row",
                    children=[
                        LayoutNode(id="a", width="75%"),
                        LayoutNode(id="b", width="50%"),
                    ],
                )
            ],
        )
        with pytest.raises(BlockOverflowError) as exc_info:
            resolve_layout(root)
        assert str(exc_info.value) == "Block widths are overflowing! 150+100 > 200"

    @pytest.mark.unit
    def test_sub_pixel_overflow_in_large_container(self):
        """Blocks may not end past the container edge by any margin."""
        root = LayoutNodeRoot(
            id="root",
            direction="row",
            width=1e9,
            height=10,
            children=[
                LayoutNode(id="a", width=500_000_000.5),
                LayoutNode(id="b", width=500_000_000),
            ],
        )
        with pytest.raises(BlockOverflowError):
            resolve_layout(root)

    @pytest.mark.unit
    def test_missing_direction(self):
        root = LayoutNodeRoot(
            id="root",
            width=100,
            height=100,
            direction="row",
            children=[LayoutNode(id="group", children=[LayoutNode(id="leaf")])],
        )
        with pytest.raises(MissingDirection) as exc_info:
            resolve_layout(root)
        assert exc_info.value.node_id == "group"

    @pytest.mark.unit
    def test_invalid_percentage(self):
        root = LayoutNodeRoot(
            id="root",
            width=100,
            height=100,
            direction="row",
            children=[LayoutNode(id="a", width="50")],
        )
        with pytest.raises(InvalidPercentageFormat):
            resolve_layout(root)

    @pytest.mark.unit
    def test_invalid_padding(self):
        root = LayoutNodeRoot(
            id="root",
            width=100,
            height=100,
            direction="row",
            padding="10px",
            children=[],
        )
        with pytest.raises(InvalidPaddingFormat):
            resolve_layout(root)

    @pytest.mark.unit
    def test_leaf_padding_ignored(self):
        """Padding only matters for containers."""
        root = LayoutNodeRoot(
            id="root",
            width=100,
            height=100,
            direction="row",
            children=[LayoutNode(id="a", padding="whatever")],
        )
        assert resolve_layout(root)["a"].width == 100

    @pytest.mark.unit
    def test_invalid_mapping(self):
        with pytest.raises(ValidationError):
            resolve_layout({"id": "root", "width": "100%", "height": 10})


class TestContainer:
    """Tests for the Container record."""

    @pytest.mark.unit
    def test_from_block(self):
        node = LayoutNode(id="box", direction="column", padding=[10, 20, 30, 40])
        block = LayoutBlock.from_geometry("box", 200, 100, 5, 6)
        container = Container.from_block(node, block)
        assert container.padding == Padding(10, 20, 30, 40)
        assert container.available_width == 140
        assert container.available_height == 60
        assert container.origin_top == 15
        assert container.origin_left == 46

    @pytest.mark.unit
    def test_root_block(self):
        root = LayoutNodeRoot(id="r", width=10, height=20, top=1, left=2)
        assert root_block(root) == LayoutBlock.from_geometry("r", 10, 20, 1, 2)
