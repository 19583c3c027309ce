"""Exceptions for layout resolution.

Every failure aborts the whole resolution pass. Nothing is retried and no
partial layout is returned, so callers should treat these as input
validation errors.
"""

from typing import Any, Sequence


def format_size(value: float) -> str:
    """Format a pixel size the way it appears in error messages.

    Integral values drop their decimal part so ``500.0`` prints as ``500``.

    Args:
        value: Size in pixels.

    Returns:
        Compact string form of the value.
    """
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


class LayoutError(Exception):
    """Base exception for layout resolution errors."""


class InvalidPaddingFormat(LayoutError, ValueError):
    """Raised when a padding spec matches none of the recognized shapes.

    Attributes:
        value: The offending padding value.
    """

    def __init__(self, value: Any):
        super().__init__(f"Unrecognized padding format: {value!r}")
        self.value = value


class InvalidPercentageFormat(LayoutError, ValueError):
    """Raised when a string dimension is not a ``<number>%`` percentage.

    Attributes:
        value: The offending dimension string.
    """

    def __init__(self, value: Any):
        super().__init__(f'Percentage has no percentage: "{value}"')
        self.value = value


class MissingDirection(LayoutError):
    """Raised when a node with children does not declare a direction.

    Attributes:
        node_id: ID of the container missing its direction.
    """

    def __init__(self, node_id: str | None = None):
        if node_id is None:
            message = "A node with children must specify a direction"
        else:
            message = f"Node '{node_id}' has children and must specify a direction"
        super().__init__(message)
        self.node_id = node_id


class BlockOverflowError(LayoutError, OverflowError):
    """Raised when main-axis sizes exceed the container's available space.

    Attributes:
        axis: Either "widths" or "heights".
        sizes: Resolved main-axis sizes of the siblings.
        available: Available main-axis space of the container.
    """

    def __init__(self, axis: str, sizes: Sequence[float], available: float):
        joined = "+".join(format_size(size) for size in sizes)
        super().__init__(
            f"Block {axis} are overflowing! {joined} > {format_size(available)}"
        )
        self.axis = axis
        self.sizes = list(sizes)
        self.available = available


class DuplicateIdError(LayoutError):
    """Raised in strict mode when node IDs are not unique.

    Attributes:
        node_ids: IDs that appear more than once in the tree.
    """

    def __init__(self, node_ids: Sequence[str]):
        listing = ", ".join(f"'{node_id}'" for node_id in node_ids)
        super().__init__(f"Duplicate node IDs: {listing}")
        self.node_ids = list(node_ids)


__all__ = [
    "LayoutError",
    "InvalidPaddingFormat",
    "InvalidPercentageFormat",
    "MissingDirection",
    "BlockOverflowError",
    "DuplicateIdError",
    "format_size",
]
