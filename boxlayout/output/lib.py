"""Output formatting for computed layouts.

Projects a ComputedLayout into a JSON-ready mapping or a human-readable tree
that follows the shape of the input.
"""

from typing import Any

from boxlayout.core.errors import format_size
from boxlayout.ir import ComputedLayout, LayoutBlock, LayoutNode


def layout_to_dict(layout: ComputedLayout) -> dict[str, dict[str, Any]]:
    """Convert a computed layout to plain dictionaries.

    Args:
        layout: Mapping from node ID to block.

    Returns:
        Mapping from node ID to the block's fields.
    """
    return {node_id: block.model_dump() for node_id, block in layout.items()}


def format_block(block: LayoutBlock) -> str:
    """Format a block's geometry as ``WxH @ (left, top)``."""
    return (
        f"{format_size(block.width)}x{format_size(block.height)} "
        f"@ ({format_size(block.left)}, {format_size(block.top)})"
    )


def format_layout_tree(root: LayoutNode, layout: ComputedLayout) -> str:
    """Format a layout tree with the geometry of each node.

    Example output:
        root [column] 500x500 @ (0, 0)
        ├── title 460x50 @ (20, 10)
        ├── content 460x360 @ (20, 60)
        └── footer 460x50 @ (20, 420)

    Args:
        root: Root of the input tree.
        layout: Layout computed from ``root``.

    Returns:
        Formatted tree string.
    """
    lines: list[str] = []
    _format_node(root, layout, lines, "", is_last=True, is_root=True)
    return "\n".join(lines)


def _format_node(
    node: LayoutNode,
    layout: ComputedLayout,
    lines: list[str],
    prefix: str,
    is_last: bool,
    is_root: bool = False,
) -> None:
    """Recursively format a node and its children."""
    if is_root:
        connector = ""
        child_prefix = ""
    else:
        connector = "└── " if is_last else "├── "
        child_prefix = prefix + ("    " if is_last else "│   ")

    label = node.id
    if node.direction is not None:
        label += f" [{node.direction}]"

    block = layout.get(node.id)
    geometry = format_block(block) if block is not None else "(unresolved)"
    lines.append(f"{prefix}{connector}{label} {geometry}")

    children = node.children or []
    for i, child in enumerate(children):
        _format_node(child, layout, lines, child_prefix, i == len(children) - 1)
