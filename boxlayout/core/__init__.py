"""Core utilities shared across boxlayout: logging and errors."""

from .errors import (
    BlockOverflowError,
    DuplicateIdError,
    InvalidPaddingFormat,
    InvalidPercentageFormat,
    LayoutError,
    MissingDirection,
)
from .log import get_logger, setup_logging

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Errors
    "LayoutError",
    "InvalidPaddingFormat",
    "InvalidPercentageFormat",
    "MissingDirection",
    "BlockOverflowError",
    "DuplicateIdError",
]
