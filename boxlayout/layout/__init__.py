"""Layout resolution: recursive sizing, positioning and flattening."""

from boxlayout.layout.lib import (
    Container,
    collect_blocks,
    layout_children,
    resolve_layout,
    root_block,
)

__all__ = [
    "Container",
    "collect_blocks",
    "layout_children",
    "resolve_layout",
    "root_block",
]
