"""Unit tests for IR models."""

import pytest
from pydantic import ValidationError

from boxlayout.ir import (
    AUTO,
    Direction,
    LayoutBlock,
    LayoutNode,
    LayoutNodeRoot,
    export_json_schema,
)


class TestDirection:
    """Tests for Direction enum."""

    @pytest.mark.unit
    def test_enum_values(self):
        """All expected direction values exist."""
        assert Direction.ROW.value == "row"
        assert Direction.COLUMN.value == "column"

    @pytest.mark.unit
    def test_compares_to_string(self):
        """Direction is a str enum, so stored values compare to members."""
        assert Direction.ROW == "row"


class TestLayoutNode:
    """Tests for LayoutNode model."""

    @pytest.mark.unit
    def test_minimal_node(self):
        """Create node with only required fields."""
        node = LayoutNode(id="test")
        assert node.id == "test"
        assert node.children is None
        assert node.width == AUTO
        assert node.height == AUTO
        assert node.direction is None
        assert node.padding == 0
        assert not node.is_container

    @pytest.mark.unit
    def test_full_node(self):
        """Create node with all fields specified."""
        node = LayoutNode(
            id="chart",
            width="100%",
            height=120,
            direction=Direction.ROW,
            padding=[10, 20],
            children=[LayoutNode(id="bar")],
        )
        assert node.width == "100%"
        assert node.height == 120
        assert node.direction == "row"
        assert node.padding == [10, 20]
        assert node.is_container

    @pytest.mark.unit
    def test_empty_children_is_container(self):
        """An empty children list still marks a container."""
        assert LayoutNode(id="box", children=[]).is_container

    @pytest.mark.unit
    def test_invalid_direction_rejected(self):
        with pytest.raises(ValidationError):
            LayoutNode(id="box", direction="diagonal")

    @pytest.mark.unit
    def test_id_required(self):
        with pytest.raises(ValidationError):
            LayoutNode(width=10)

    @pytest.mark.unit
    def test_from_dict(self):
        """Nested plain dicts validate into nodes."""
        node = LayoutNode.model_validate(
            {
                "id": "root",
                "direction": "column",
                "children": [{"id": "a", "height": 10}, {"id": "b"}],
            }
        )
        assert [child.id for child in node.children] == ["a", "b"]
        assert node.children[0].height == 10

    @pytest.mark.unit
    def test_frozen(self):
        node = LayoutNode(id="box")
        with pytest.raises(ValidationError):
            node.id = "other"


class TestLayoutNodeRoot:
    """Tests for LayoutNodeRoot model."""

    @pytest.mark.unit
    def test_defaults(self):
        root = LayoutNodeRoot(id="root", width=500, height=400)
        assert root.top == 0
        assert root.left == 0

    @pytest.mark.unit
    def test_size_required(self):
        with pytest.raises(ValidationError):
            LayoutNodeRoot(id="root", width=500)

    @pytest.mark.unit
    def test_size_must_be_numeric(self):
        with pytest.raises(ValidationError):
            LayoutNodeRoot(id="root", width="100%", height=100)

        with pytest.raises(ValidationError):
            LayoutNodeRoot(id="root", width=AUTO, height=100)


class TestLayoutBlock:
    """Tests for LayoutBlock model."""

    @pytest.mark.unit
    def test_from_geometry_derives_edges(self):
        block = LayoutBlock.from_geometry("a", width=100, height=50, top=10, left=20)
        assert block.right == 120
        assert block.bottom == 60

    @pytest.mark.unit
    def test_dump(self):
        block = LayoutBlock.from_geometry("a", width=1, height=2, top=3, left=4)
        assert block.model_dump() == {
            "id": "a",
            "width": 1,
            "height": 2,
            "top": 3,
            "left": 4,
            "right": 5,
            "bottom": 5,
        }


class TestJsonSchema:
    """Tests for JSON Schema export."""

    @pytest.mark.unit
    def test_schema_title(self):
        schema = export_json_schema()
        assert schema["title"] == "LayoutNodeRoot"

    @pytest.mark.unit
    def test_schema_requires_root_size(self):
        schema = export_json_schema()
        assert {"id", "width", "height"} <= set(schema["required"])
