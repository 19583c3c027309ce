"""Directional positioning of sibling blocks.

Siblings are packed from the container's origin along its direction and
aligned to the origin on the other axis.
"""

from itertools import accumulate
from typing import Sequence

from boxlayout.core.errors import MissingDirection
from boxlayout.ir import Direction


def cumulative_offsets(start: float, sizes: Sequence[float]) -> list[float]:
    """Offsets of consecutive blocks packed from ``start``.

    The first block starts at ``start``; each following block starts where
    the previous one ends.

    Example:
        >>> cumulative_offsets(10, [50, 360, 50])
        [10, 60, 420]
    """
    return list(accumulate(sizes[:-1], initial=start)) if sizes else []


def position_blocks(
    widths: Sequence[float],
    heights: Sequence[float],
    top: float,
    left: float,
    direction: Direction | str | None,
) -> tuple[list[float], list[float]]:
    """Compute absolute offsets for an ordered set of siblings.

    Args:
        widths: Resolved sibling widths.
        heights: Resolved sibling heights.
        top: Container origin top (box top plus top padding).
        left: Container origin left (box left plus left padding).
        direction: Container flow direction.

    Returns:
        Tuple of (tops, lefts).

    Raises:
        MissingDirection: If direction is neither row nor column.
    """
    if direction == Direction.COLUMN:
        return cumulative_offsets(top, heights), [left] * len(widths)
    if direction == Direction.ROW:
        return [top] * len(heights), cumulative_offsets(left, widths)
    raise MissingDirection()
