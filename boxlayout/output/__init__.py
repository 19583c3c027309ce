"""Output formatting for computed layouts."""

from boxlayout.output.lib import format_block, format_layout_tree, layout_to_dict

__all__ = ["format_block", "format_layout_tree", "layout_to_dict"]
