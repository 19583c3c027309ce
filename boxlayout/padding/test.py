"""Unit tests for padding normalization."""

import pytest

from boxlayout.core.errors import InvalidPaddingFormat
from boxlayout.padding import Padding, normalize_padding


class TestNormalizePadding:
    """Tests for normalize_padding."""

    @pytest.mark.unit
    def test_scalar(self):
        """A single number applies to every side."""
        assert normalize_padding(20) == Padding(top=20, right=20, bottom=20, left=20)

    @pytest.mark.unit
    def test_float_scalar(self):
        assert normalize_padding(2.5) == Padding(2.5, 2.5, 2.5, 2.5)

    @pytest.mark.unit
    def test_vertical_horizontal(self):
        """Two values are vertical then horizontal."""
        assert normalize_padding([10, 20]) == Padding(
            top=10, right=20, bottom=10, left=20
        )

    @pytest.mark.unit
    def test_four_sides(self):
        """Four values are top, right, bottom, left."""
        assert normalize_padding([10, 20, 30, 20]) == Padding(
            top=10, right=20, bottom=30, left=20
        )

    @pytest.mark.unit
    def test_tuple_accepted(self):
        assert normalize_padding((1, 2, 3, 4)) == Padding(1, 2, 3, 4)

    @pytest.mark.unit
    def test_missing_trailing_values_default_to_zero(self):
        assert normalize_padding([10, 20, 30]) == Padding(10, 20, 30, 0)
        assert normalize_padding([10]) == Padding(10, 0, 0, 0)
        assert normalize_padding([]) == Padding(0, 0, 0, 0)

    @pytest.mark.unit
    def test_partial_mapping(self):
        """Absent sides in a mapping are zero."""
        assert normalize_padding({"top": 5}) == Padding(
            top=5, right=0, bottom=0, left=0
        )

    @pytest.mark.unit
    def test_full_mapping(self):
        assert normalize_padding(
            {"top": 1, "right": 2, "bottom": 3, "left": 4}
        ) == Padding(1, 2, 3, 4)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "padding",
        [
            "10px",
            "10",
            None,
            True,
            [1, 2, 3, 4, 5],
            [1, "2"],
            {"middle": 4},
            {"top": "4"},
        ],
    )
    def test_invalid_formats(self, padding):
        """Unrecognized shapes raise with the offending value attached."""
        with pytest.raises(InvalidPaddingFormat) as exc_info:
            normalize_padding(padding)
        assert exc_info.value.value == padding


class TestPadding:
    """Tests for the Padding record."""

    @pytest.mark.unit
    def test_totals(self):
        padding = Padding(top=10, right=20, bottom=30, left=40)
        assert padding.horizontal == 60
        assert padding.vertical == 40

    @pytest.mark.unit
    def test_default_is_zero(self):
        assert Padding() == Padding(0, 0, 0, 0)
