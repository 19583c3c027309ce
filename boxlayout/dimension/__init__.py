"""Dimension parsing and sibling size resolution."""

from boxlayout.dimension.lib import (
    Dimension,
    DimensionKind,
    check_overflow,
    parse_dimension,
    resolve_axis,
    resolve_dimensions,
)

__all__ = [
    "Dimension",
    "DimensionKind",
    "parse_dimension",
    "resolve_axis",
    "resolve_dimensions",
    "check_overflow",
]
