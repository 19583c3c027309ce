"""Intermediate Representation (IR) models for box layouts."""

from boxlayout.ir.lib import (
    AUTO,
    ComputedLayout,
    DimensionValue,
    Direction,
    LayoutBlock,
    LayoutNode,
    LayoutNodeRoot,
    PaddingFormat,
    export_json_schema,
)

__all__ = [
    # Input models
    "LayoutNode",
    "LayoutNodeRoot",
    "Direction",
    "DimensionValue",
    "PaddingFormat",
    "AUTO",
    # Output models
    "LayoutBlock",
    "ComputedLayout",
    # Schema
    "export_json_schema",
]
