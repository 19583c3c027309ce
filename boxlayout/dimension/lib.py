"""Dimension resolution for sibling boxes.

Widths and heights are resolved independently per axis. Which rule applies
to "auto" depends on the axis role:

- Main axis (width for rows, height for columns): auto siblings share the
  space left over after fixed and percentage sizes, in equal parts.
- Cross axis: every auto sibling stretches to the full available space.

Only the main axis is checked for overflow.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Sequence

from boxlayout.core.errors import (
    BlockOverflowError,
    InvalidPercentageFormat,
    MissingDirection,
)
from boxlayout.ir import AUTO, DimensionValue, Direction

# "<digits>%" with an optional sign and fractional part, no whitespace
PERCENTAGE_PATTERN = re.compile(r"(-?(?:\d+(?:\.\d+)?|\.\d+))%", re.ASCII)

# Minimum absolute slack in pixels for float rounding in main-axis sums
OVERFLOW_TOLERANCE = 1e-9


class DimensionKind(str, Enum):
    """Kind of a parsed dimension."""

    FIXED = "fixed"
    PERCENT = "percent"
    AUTO = "auto"


@dataclass(frozen=True)
class Dimension:
    """A parsed width or height.

    Attributes:
        kind: Whether the value is fixed pixels, a percentage or auto.
        value: Pixels for FIXED, percent points for PERCENT, 0 for AUTO.
    """

    kind: DimensionKind
    value: float = 0

    @property
    def is_auto(self) -> bool:
        return self.kind is DimensionKind.AUTO

    def resolve(self, available: float) -> float | None:
        """Resolve to pixels against the available space.

        Returns:
            Size in pixels, or None for auto.
        """
        if self.kind is DimensionKind.FIXED:
            return self.value
        if self.kind is DimensionKind.PERCENT:
            return (self.value / 100) * available
        return None


def parse_dimension(raw: DimensionValue | None) -> Dimension:
    """Parse a raw width/height value.

    Args:
        raw: A number, a "<number>%" string, "auto" or None (same as auto).

    Returns:
        The parsed Dimension.

    Raises:
        InvalidPercentageFormat: If a string is neither "auto" nor a
            percentage.
    """
    if raw is None or raw == AUTO:
        return Dimension(DimensionKind.AUTO)

    if isinstance(raw, Real) and not isinstance(raw, bool):
        return Dimension(DimensionKind.FIXED, raw)

    if not isinstance(raw, str) or not raw.endswith("%"):
        raise InvalidPercentageFormat(raw)

    match = PERCENTAGE_PATTERN.fullmatch(raw)
    if match is None:
        raise InvalidPercentageFormat(raw)

    return Dimension(DimensionKind.PERCENT, float(match.group(1)))


def resolve_axis(
    dimensions: Sequence[Dimension],
    available: float,
    is_main: bool,
) -> list[float]:
    """Resolve sibling sizes along one axis.

    Args:
        dimensions: Parsed sizes of the siblings, in order.
        available: Space available on this axis.
        is_main: Whether this axis is the container's flow direction.

    Returns:
        Pixel sizes in the same order as ``dimensions``.
    """
    resolved = [dimension.resolve(available) for dimension in dimensions]

    if not is_main:
        return [available if size is None else size for size in resolved]

    auto_count = sum(1 for size in resolved if size is None)
    if auto_count == 0:
        return list(resolved)

    fixed_total = sum(size for size in resolved if size is not None)
    share = (available - fixed_total) / auto_count
    return [share if size is None else size for size in resolved]


def check_overflow(axis: str, sizes: Sequence[float], available: float) -> None:
    """Fail if sizes along the main axis exceed the available space.

    Sums that exceed ``available`` only by float rounding (e.g. three equal
    shares of 100) are not overflow. The slack is OVERFLOW_TOLERANCE pixels,
    or one unit in the last place of ``available`` per size when larger.

    Args:
        axis: "widths" or "heights", used in the error message.
        sizes: Resolved main-axis sizes.
        available: Available main-axis space.

    Raises:
        BlockOverflowError: If the sizes do not fit.
    """
    total = math.fsum(sizes)
    slack = max(OVERFLOW_TOLERANCE, len(sizes) * math.ulp(available))
    if total > available + slack:
        raise BlockOverflowError(axis, sizes, available)


def resolve_dimensions(
    widths: Sequence[DimensionValue | None],
    heights: Sequence[DimensionValue | None],
    available_width: float,
    available_height: float,
    direction: Direction | str | None,
) -> tuple[list[float], list[float]]:
    """Resolve widths and heights for an ordered set of siblings.

    Args:
        widths: Raw width specs of the siblings.
        heights: Raw height specs of the siblings.
        available_width: Container width minus its horizontal padding.
        available_height: Container height minus its vertical padding.
        direction: Container flow direction.

    Returns:
        Tuple of (widths, heights) in pixels.

    Raises:
        MissingDirection: If direction is neither row nor column.
        InvalidPercentageFormat: If a string dimension is malformed.
        BlockOverflowError: If main-axis sizes exceed the available space.
    """
    if direction not in (Direction.ROW, Direction.COLUMN):
        raise MissingDirection()

    is_row = direction == Direction.ROW

    resolved_widths = resolve_axis(
        [parse_dimension(width) for width in widths], available_width, is_row
    )
    resolved_heights = resolve_axis(
        [parse_dimension(height) for height in heights],
        available_height,
        not is_row,
    )

    if is_row:
        check_overflow("widths", resolved_widths, available_width)
    else:
        check_overflow("heights", resolved_heights, available_height)

    return resolved_widths, resolved_heights
