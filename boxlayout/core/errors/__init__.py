"""Error hierarchy raised by the layout resolver."""

from .lib import (
    BlockOverflowError,
    DuplicateIdError,
    InvalidPaddingFormat,
    InvalidPercentageFormat,
    LayoutError,
    MissingDirection,
    format_size,
)

__all__ = [
    "LayoutError",
    "InvalidPaddingFormat",
    "InvalidPercentageFormat",
    "MissingDirection",
    "BlockOverflowError",
    "DuplicateIdError",
    "format_size",
]
