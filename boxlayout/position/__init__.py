"""Directional positioning of sibling blocks."""

from boxlayout.position.lib import cumulative_offsets, position_blocks

__all__ = ["cumulative_offsets", "position_blocks"]
