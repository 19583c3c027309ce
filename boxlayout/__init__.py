"""boxlayout: deterministic box-model layout solver."""

from boxlayout.core.errors import (
    BlockOverflowError,
    DuplicateIdError,
    InvalidPaddingFormat,
    InvalidPercentageFormat,
    LayoutError,
    MissingDirection,
)
from boxlayout.ir import (
    ComputedLayout,
    Direction,
    LayoutBlock,
    LayoutNode,
    LayoutNodeRoot,
    export_json_schema,
)
from boxlayout.layout import resolve_layout
from boxlayout.padding import Padding, normalize_padding
from boxlayout.validation import ValidationIssue, is_valid, validate_layout

__all__ = [
    # IR
    "LayoutNode",
    "LayoutNodeRoot",
    "LayoutBlock",
    "ComputedLayout",
    "Direction",
    "export_json_schema",
    # Resolution
    "resolve_layout",
    "Padding",
    "normalize_padding",
    # Validation
    "validate_layout",
    "is_valid",
    "ValidationIssue",
    # Errors
    "LayoutError",
    "InvalidPaddingFormat",
    "InvalidPercentageFormat",
    "MissingDirection",
    "BlockOverflowError",
    "DuplicateIdError",
]
