"""Unit tests for validation module."""

import pytest

from boxlayout.ir import LayoutNode, LayoutNodeRoot
from boxlayout.validation import (
    ValidationIssue,
    find_duplicate_ids,
    is_valid,
    validate_layout,
)


class TestValidateLayout:
    """Tests for validate_layout function."""

    @pytest.mark.unit
    def test_valid_tree(self, simple_layout):
        """Well-formed tree passes validation."""
        assert validate_layout(simple_layout) == []

    @pytest.mark.unit
    def test_duplicate_ids(self):
        """Duplicate IDs are detected."""
        node = LayoutNode(
            id="root",
            direction="row",
            children=[LayoutNode(id="dupe"), LayoutNode(id="dupe")],
        )
        issues = validate_layout(node)
        assert len(issues) == 1
        assert issues[0].issue_type == "duplicate_id"
        assert issues[0].message == "Duplicate ID 'dupe' appears 2 times"

    @pytest.mark.unit
    def test_duplicate_across_depths(self):
        """IDs repeated at different depths are detected."""
        node = LayoutNode(
            id="root",
            direction="row",
            children=[
                LayoutNode(
                    id="panel",
                    direction="column",
                    children=[LayoutNode(id="root")],
                ),
            ],
        )
        issues = validate_layout(node)
        assert [i.node_id for i in issues] == ["root"]

    @pytest.mark.unit
    def test_missing_direction(self):
        node = LayoutNode(id="root", children=[LayoutNode(id="a")])
        issues = validate_layout(node)
        assert len(issues) == 1
        assert issues[0].issue_type == "missing_direction"
        assert issues[0].node_id == "root"

    @pytest.mark.unit
    def test_invalid_padding(self):
        node = LayoutNode(id="box", padding="10px", direction="row", children=[])
        issues = validate_layout(node)
        assert len(issues) == 1
        assert issues[0].issue_type == "invalid_padding"

    @pytest.mark.unit
    def test_leaf_padding_not_checked(self):
        """Leaves never use their padding, so it is not reported."""
        node = LayoutNode(
            id="root",
            direction="row",
            children=[LayoutNode(id="leaf", padding="whatever")],
        )
        assert validate_layout(node) == []

    @pytest.mark.unit
    def test_invalid_dimensions(self):
        node = LayoutNode(id="box", width="50", height="10px")
        issues = validate_layout(node)
        assert [i.issue_type for i in issues] == [
            "invalid_dimension",
            "invalid_dimension",
        ]
        assert issues[0].message.startswith("Invalid width:")
        assert issues[1].message.startswith("Invalid height:")

    @pytest.mark.unit
    def test_collects_all_issues(self):
        """Validation keeps going after the first issue."""
        node = LayoutNode(
            id="root",
            direction="column",
            children=[
                LayoutNode(id="a", children=[]),
                LayoutNode(
                    id="b", direction="row", padding=[1, 2, 3, 4, 5], children=[]
                ),
                LayoutNode(id="a"),
            ],
        )
        issue_types = sorted(i.issue_type for i in validate_layout(node))
        assert issue_types == ["duplicate_id", "invalid_padding", "missing_direction"]

    @pytest.mark.unit
    def test_issue_is_dataclass(self):
        issue = ValidationIssue(node_id="a", message="m", issue_type="t")
        assert issue.node_id == "a"


class TestIsValid:
    """Tests for is_valid function."""

    @pytest.mark.unit
    def test_valid(self, row_layout):
        assert is_valid(row_layout) is True

    @pytest.mark.unit
    def test_invalid(self):
        assert is_valid(LayoutNode(id="x", children=[])) is False


class TestFindDuplicateIds:
    """Tests for find_duplicate_ids."""

    @pytest.mark.unit
    def test_none(self, advanced_layout):
        assert find_duplicate_ids(advanced_layout) == []

    @pytest.mark.unit
    def test_order_of_first_appearance(self):
        root = LayoutNodeRoot(
            id="root",
            width=10,
            height=10,
            direction="row",
            children=[
                LayoutNode(id="b"),
                LayoutNode(id="a"),
                LayoutNode(id="a"),
                LayoutNode(id="b"),
            ],
        )
        assert find_duplicate_ids(root) == ["b", "a"]
