"""Unit tests for sibling positioning."""

import pytest

from boxlayout.core.errors import MissingDirection
from boxlayout.ir import Direction
from boxlayout.position import cumulative_offsets, position_blocks


class TestCumulativeOffsets:
    """Tests for cumulative_offsets."""

    @pytest.mark.unit
    def test_offsets(self):
        assert cumulative_offsets(10, [50, 360, 50]) == [10, 60, 420]

    @pytest.mark.unit
    def test_single(self):
        assert cumulative_offsets(7, [100]) == [7]

    @pytest.mark.unit
    def test_empty(self):
        assert cumulative_offsets(7, []) == []


class TestPositionBlocks:
    """Tests for position_blocks."""

    @pytest.mark.unit
    def test_column_stacks_vertically(self):
        """Column siblings share the left edge and stack their heights."""
        tops, lefts = position_blocks(
            [460, 460, 460], [50, 360, 50], top=10, left=20, direction="column"
        )
        assert tops == [10, 60, 420]
        assert lefts == [20, 20, 20]

    @pytest.mark.unit
    def test_row_stacks_horizontally(self):
        """Row siblings share the top edge and stack their widths."""
        tops, lefts = position_blocks(
            [100, 200, 200],
            [500, 500, 500],
            top=0,
            left=0,
            direction=Direction.ROW,
        )
        assert tops == [0, 0, 0]
        assert lefts == [0, 100, 300]

    @pytest.mark.unit
    def test_no_siblings(self):
        assert position_blocks([], [], 0, 0, Direction.ROW) == ([], [])

    @pytest.mark.unit
    def test_missing_direction(self):
        with pytest.raises(MissingDirection):
            position_blocks([10], [10], 0, 0, None)
