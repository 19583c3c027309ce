"""Layout resolution.

The resolver walks the tree top-down. For every container it normalizes the
container's padding, resolves its direct children's sizes, positions them
from the container's origin, then recurses into each child that has
children of its own, using the child's resolved block as the new container.
All blocks end up in one id-keyed map.

Example:
    >>> layout = resolve_layout(
    ...     {
    ...         "id": "root",
    ...         "direction": "row",
    ...         "width": 500,
    ...         "height": 500,
    ...         "children": [
    ...             {"id": "aside", "width": 100},
    ...             {"id": "content"},
    ...         ],
    ...     }
    ... )
    >>> layout["content"].left
    100.0
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Sequence

from boxlayout.core.errors import DuplicateIdError, MissingDirection
from boxlayout.core.log import get_logger
from boxlayout.dimension import resolve_dimensions
from boxlayout.ir import (
    ComputedLayout,
    Direction,
    LayoutBlock,
    LayoutNode,
    LayoutNodeRoot,
)
from boxlayout.padding import Padding, normalize_padding
from boxlayout.position import position_blocks
from boxlayout.validation import find_duplicate_ids

logger = get_logger("boxlayout.layout")


@dataclass(frozen=True)
class Container:
    """Fully specified geometry of a box that lays out children.

    Built from a node and its resolved block before any sizing runs, so the
    dimension and position steps only ever see complete values.

    Attributes:
        id: ID of the container node.
        width: Outer width.
        height: Outer height.
        top: Outer top edge.
        left: Outer left edge.
        padding: Normalized padding.
        direction: Flow direction of the children.
    """

    id: str
    width: float
    height: float
    top: float
    left: float
    padding: Padding
    direction: Direction

    @classmethod
    def from_block(cls, node: LayoutNode, block: LayoutBlock) -> "Container":
        """Combine a node's own settings with its resolved block.

        Raises:
            InvalidPaddingFormat: If the node's padding is malformed.
            MissingDirection: If the node has no direction.
        """
        if node.direction is None:
            raise MissingDirection(node.id)
        return cls(
            id=node.id,
            width=block.width,
            height=block.height,
            top=block.top,
            left=block.left,
            padding=normalize_padding(node.padding),
            direction=Direction(node.direction),
        )

    @property
    def available_width(self) -> float:
        return self.width - self.padding.horizontal

    @property
    def available_height(self) -> float:
        return self.height - self.padding.vertical

    @property
    def origin_top(self) -> float:
        return self.top + self.padding.top

    @property
    def origin_left(self) -> float:
        return self.left + self.padding.left


def root_block(root: LayoutNodeRoot) -> LayoutBlock:
    """Block of the root itself, taken directly from its declared geometry."""
    return LayoutBlock.from_geometry(
        root.id,
        width=root.width,
        height=root.height,
        top=root.top,
        left=root.left,
    )


def layout_children(
    container: Container, children: Sequence[LayoutNode]
) -> list[LayoutBlock]:
    """Resolve blocks for a container's children and all their descendants.

    Direct children come first, in order, followed by each nested
    container's descendants, depth-first.

    Args:
        container: Geometry of the parent box.
        children: The parent's direct children.

    Returns:
        Blocks for every descendant of the container.
    """
    widths, heights = resolve_dimensions(
        [child.width for child in children],
        [child.height for child in children],
        container.available_width,
        container.available_height,
        container.direction,
    )
    tops, lefts = position_blocks(
        widths,
        heights,
        container.origin_top,
        container.origin_left,
        container.direction,
    )

    blocks = [
        LayoutBlock.from_geometry(child.id, width, height, top, left)
        for child, width, height, top, left in zip(
            children, widths, heights, tops, lefts
        )
    ]
    logger.debug(
        f"Resolved {len(blocks)} children of '{container.id}' "
        f"({container.direction.value}, "
        f"{container.available_width}x{container.available_height} available)"
    )

    nested: list[LayoutBlock] = []
    for child, block in zip(children, blocks):
        if child.is_container:
            nested.extend(
                layout_children(Container.from_block(child, block), child.children)
            )

    return blocks + nested


def collect_blocks(root: LayoutNodeRoot) -> list[LayoutBlock]:
    """Resolve every block of a tree, root first, as an ordered list."""
    block = root_block(root)
    if not root.is_container:
        return [block]
    return [block, *layout_children(Container.from_block(root, block), root.children)]


def resolve_layout(
    root: LayoutNodeRoot | Mapping[str, Any], *, strict: bool = False
) -> ComputedLayout:
    """Compute absolute geometry for every box of a layout tree.

    Args:
        root: Root node, or a plain mapping that validates as one.
        strict: Fail on duplicate IDs instead of letting the last block
            with a given ID win.

    Returns:
        Mapping from every node ID (root included) to its block.

    Raises:
        pydantic.ValidationError: If a mapping does not describe a root node.
        InvalidPaddingFormat: If a container's padding is malformed.
        InvalidPercentageFormat: If a dimension string is malformed.
        MissingDirection: If a node with children has no direction.
        BlockOverflowError: If main-axis sizes exceed their container.
        DuplicateIdError: In strict mode, if IDs repeat.
    """
    if not isinstance(root, LayoutNodeRoot):
        root = LayoutNodeRoot.model_validate(root)

    if strict:
        duplicates = find_duplicate_ids(root)
        if duplicates:
            raise DuplicateIdError(duplicates)

    blocks = collect_blocks(root)
    logger.debug(f"Resolved layout '{root.id}' with {len(blocks)} blocks")
    return {block.id: block for block in blocks}
