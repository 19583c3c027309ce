"""Unit tests for dimension parsing and resolution."""

import pytest

from boxlayout.core.errors import (
    BlockOverflowError,
    InvalidPercentageFormat,
    MissingDirection,
)
from boxlayout.dimension import (
    Dimension,
    DimensionKind,
    check_overflow,
    parse_dimension,
    resolve_axis,
    resolve_dimensions,
)
from boxlayout.ir import Direction


class TestParseDimension:
    """Tests for parse_dimension."""

    @pytest.mark.unit
    def test_fixed(self):
        assert parse_dimension(120) == Dimension(DimensionKind.FIXED, 120)

    @pytest.mark.unit
    def test_percentage(self):
        assert parse_dimension("50%") == Dimension(DimensionKind.PERCENT, 50)

    @pytest.mark.unit
    def test_fractional_percentage(self):
        assert parse_dimension("12.5%").value == 12.5

    @pytest.mark.unit
    def test_leading_dot_and_sign(self):
        assert parse_dimension(".5%").value == 0.5
        assert parse_dimension("-10%").value == -10

    @pytest.mark.unit
    def test_auto(self):
        assert parse_dimension("auto").is_auto

    @pytest.mark.unit
    def test_missing_is_auto(self):
        assert parse_dimension(None).is_auto

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "raw",
        [
            "50",
            "50px",
            "half%",
            "%",
            "AUTO",
            "nan%",
            "1_0%",
            " 1_0 %",
            " 10%",
            "10 %",
            "1e2%",
            "\u0661\u0660%",
        ],
    )
    def test_invalid_strings(self, raw):
        with pytest.raises(InvalidPercentageFormat) as exc_info:
            parse_dimension(raw)
        assert exc_info.value.value == raw


class TestDimensionResolve:
    """Tests for Dimension.resolve."""

    @pytest.mark.unit
    def test_percentage_of_available(self):
        """50% of 400 is exactly 200."""
        assert parse_dimension("50%").resolve(400) == 200

    @pytest.mark.unit
    def test_fixed_ignores_available(self):
        assert parse_dimension(30).resolve(400) == 30

    @pytest.mark.unit
    def test_auto_unresolved(self):
        assert parse_dimension("auto").resolve(400) is None


class TestResolveAxis:
    """Tests for resolve_axis."""

    @pytest.mark.unit
    def test_main_axis_autos_share_leftover(self):
        """N main-axis autos each receive leftover / N."""
        dims = [parse_dimension(v) for v in (100, "auto", "auto")]
        assert resolve_axis(dims, 500, is_main=True) == [100, 200, 200]

    @pytest.mark.unit
    def test_main_axis_percentages_count_as_fixed(self):
        dims = [parse_dimension(v) for v in ("25%", "auto")]
        assert resolve_axis(dims, 400, is_main=True) == [100, 300]

    @pytest.mark.unit
    def test_cross_axis_autos_stretch(self):
        """Every cross-axis auto receives the full available space."""
        dims = [parse_dimension(v) for v in ("auto", 50, "auto", "auto")]
        assert resolve_axis(dims, 300, is_main=False) == [300, 50, 300, 300]

    @pytest.mark.unit
    def test_leftover_unused_without_autos(self):
        """Leftover space is simply left over when nothing is auto."""
        dims = [parse_dimension(v) for v in (100, 100)]
        assert resolve_axis(dims, 500, is_main=True) == [100, 100]

    @pytest.mark.unit
    def test_negative_leftover_is_shared(self):
        """Autos absorb a negative leftover rather than raising."""
        dims = [parse_dimension(v) for v in (600, "auto")]
        assert resolve_axis(dims, 500, is_main=True) == [600, -100]

    @pytest.mark.unit
    def test_empty(self):
        assert resolve_axis([], 500, is_main=True) == []


class TestCheckOverflow:
    """Tests for check_overflow."""

    @pytest.mark.unit
    def test_exact_fit(self):
        check_overflow("heights", [250, 250], 500)

    @pytest.mark.unit
    def test_rounding_is_not_overflow(self):
        check_overflow("widths", [100 / 3] * 3, 100)

    @pytest.mark.unit
    def test_rounding_in_large_container_is_not_overflow(self):
        check_overflow("widths", [1e9 / 3] * 3, 1e9)
        check_overflow("widths", [1e10 / 7] * 7, 1e10)

    @pytest.mark.unit
    def test_overflow_message(self):
        with pytest.raises(BlockOverflowError) as exc_info:
            check_overflow("heights", [500.0, 1.0], 500.0)
        assert str(exc_info.value) == "Block heights are overflowing! 500+1 > 500"

    @pytest.mark.unit
    def test_sub_pixel_overflow_raises(self):
        """Half a pixel over is overflow, however large the container."""
        with pytest.raises(BlockOverflowError):
            check_overflow("widths", [50.5, 50], 100)

        with pytest.raises(BlockOverflowError):
            check_overflow("widths", [500_000_000.5, 500_000_000], 1e9)


class TestResolveDimensions:
    """Tests for resolve_dimensions."""

    @pytest.mark.unit
    def test_column(self):
        widths, heights = resolve_dimensions(
            ["100%", "100%", "100%"],
            [50, "auto", 50],
            available_width=460,
            available_height=460,
            direction=Direction.COLUMN,
        )
        assert widths == [460, 460, 460]
        assert heights == [50, 360, 50]

    @pytest.mark.unit
    def test_row(self):
        widths, heights = resolve_dimensions(
            [100, "auto", "auto"],
            ["auto", "auto", "auto"],
            available_width=500,
            available_height=500,
            direction="row",
        )
        assert widths == [100, 200, 200]
        assert heights == [500, 500, 500]

    @pytest.mark.unit
    def test_missing_specs_default_to_auto(self):
        widths, heights = resolve_dimensions(
            [None, None], [None, None], 200, 100, Direction.ROW
        )
        assert widths == [100, 100]
        assert heights == [100, 100]

    @pytest.mark.unit
    def test_heights_overflow_in_column(self):
        with pytest.raises(BlockOverflowError) as exc_info:
            resolve_dimensions(
                ["auto", "auto"], [500, 1], 500, 500, Direction.COLUMN
            )
        assert str(exc_info.value) == "Block heights are overflowing! 500+1 > 500"

    @pytest.mark.unit
    def test_widths_overflow_in_row(self):
        with pytest.raises(BlockOverflowError) as exc_info:
            resolve_dimensions([300, "60%"], [10, 10], 500, 500, Direction.ROW)
        assert str(exc_info.value) == "Block widths are overflowing! 300+300 > 500"

    @pytest.mark.unit
    def test_cross_axis_never_overflows(self):
        """Cross-axis sizes larger than the container are accepted."""
        widths, heights = resolve_dimensions(
            [900, 900], [10, 10], 500, 500, Direction.COLUMN
        )
        assert widths == [900, 900]

    @pytest.mark.unit
    def test_missing_direction(self):
        with pytest.raises(MissingDirection):
            resolve_dimensions([10], [10], 100, 100, None)
