"""Tests for the layout error hierarchy."""

import pytest

from .lib import (
    BlockOverflowError,
    DuplicateIdError,
    InvalidPaddingFormat,
    InvalidPercentageFormat,
    LayoutError,
    MissingDirection,
    format_size,
)


class TestFormatSize:
    """Tests for format_size."""

    @pytest.mark.unit
    def test_integral_float_drops_decimal(self):
        assert format_size(500.0) == "500"

    @pytest.mark.unit
    def test_int_passthrough(self):
        assert format_size(1) == "1"

    @pytest.mark.unit
    def test_fraction_kept(self):
        assert format_size(12.5) == "12.5"


class TestErrors:
    """Tests for exception messages and attributes."""

    @pytest.mark.unit
    def test_overflow_message(self):
        """Overflow message joins sizes with '+' and states the space."""
        error = BlockOverflowError("heights", [500.0, 1.0], 500.0)
        assert str(error) == "Block heights are overflowing! 500+1 > 500"
        assert error.sizes == [500.0, 1.0]
        assert error.available == 500.0
        assert error.axis == "heights"

    @pytest.mark.unit
    def test_overflow_is_builtin_overflow(self):
        """Callers catching the builtin OverflowError still catch it."""
        with pytest.raises(OverflowError):
            raise BlockOverflowError("widths", [300, 300], 500)

    @pytest.mark.unit
    def test_padding_error_carries_value(self):
        error = InvalidPaddingFormat("10px")
        assert error.value == "10px"
        assert "10px" in str(error)
        assert isinstance(error, ValueError)

    @pytest.mark.unit
    def test_percentage_error_carries_value(self):
        error = InvalidPercentageFormat("50")
        assert error.value == "50"
        assert str(error) == 'Percentage has no percentage: "50"'

    @pytest.mark.unit
    def test_missing_direction_names_node(self):
        error = MissingDirection("sidebar")
        assert error.node_id == "sidebar"
        assert "sidebar" in str(error)

    @pytest.mark.unit
    def test_missing_direction_without_node(self):
        assert str(MissingDirection()) == (
            "A node with children must specify a direction"
        )

    @pytest.mark.unit
    def test_duplicate_ids(self):
        error = DuplicateIdError(["a", "b"])
        assert error.node_ids == ["a", "b"]
        assert str(error) == "Duplicate node IDs: 'a', 'b'"

    @pytest.mark.unit
    def test_all_derive_from_layout_error(self):
        for error in (
            InvalidPaddingFormat(None),
            InvalidPercentageFormat("x"),
            MissingDirection("n"),
            BlockOverflowError("widths", [1], 0),
            DuplicateIdError(["x"]),
        ):
            assert isinstance(error, LayoutError)
