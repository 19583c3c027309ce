"""Core IR models for layout representation.

This module defines the declarative input tree (LayoutNode, LayoutNodeRoot)
and the flat output (LayoutBlock, ComputedLayout). Raw width/height/padding
values are stored as given; they are parsed and checked during resolution so
that malformed values raise the layout errors from `boxlayout.core.errors`
rather than schema errors.
"""

from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, Field

AUTO = "auto"

# A number (pixels), a "<number>%" string, or "auto".
DimensionValue = Union[float, str]

# A number, [vertical, horizontal], [top, right, bottom, left] or a partial
# {"top", "right", "bottom", "left"} mapping.
PaddingFormat = Any


class Direction(str, Enum):
    """Flow direction of a container's children.

    - ROW: Children flow left-to-right, width is the main axis
    - COLUMN: Children flow top-to-bottom, height is the main axis
    """

    ROW = "row"
    COLUMN = "column"


class LayoutNode(BaseModel):
    """Recursive node definition for the box tree.

    Attributes:
        id: Unique identifier for the node within the tree.
        children: Nested child nodes. Presence (even empty) makes the node
            a container.
        width: Fixed pixels, "<number>%" of the parent's available width,
            or "auto".
        height: Fixed pixels, "<number>%" of the parent's available height,
            or "auto".
        direction: Flow direction for immediate children. Required when
            children is set.
        padding: Inset applied before laying out children.

    Example:
        >>> node = LayoutNode(
        ...     id="sidebar",
        ...     width=200,
        ...     height="100%",
        ...     direction=Direction.COLUMN,
        ...     children=[LayoutNode(id="logo", height=50)],
        ... )
    """

    id: str = Field(..., description="Unique identifier for the node")
    children: list["LayoutNode"] | None = Field(
        default=None,
        description="Nested child nodes; presence makes the node a container",
    )
    width: DimensionValue = Field(
        default=AUTO,
        description="Fixed width (px), percentage ('50%') or 'auto'",
    )
    height: DimensionValue = Field(
        default=AUTO,
        description="Fixed height (px), percentage ('50%') or 'auto'",
    )
    direction: Direction | None = Field(
        default=None,
        description="Flow direction for immediate children (row or column)",
    )
    padding: PaddingFormat = Field(
        default=0,
        description=(
            "Padding in pixels: a number, [vertical, horizontal], "
            "[top, right, bottom, left] or a partial side mapping"
        ),
    )

    model_config = {
        "use_enum_values": True,
        "frozen": True,
    }

    @property
    def is_container(self) -> bool:
        """Whether the node lays out children."""
        return self.children is not None


class LayoutNodeRoot(LayoutNode):
    """Root of a layout tree.

    Percentages and "auto" have no meaning without an enclosing container,
    so the root's width and height are mandatory numbers. The root may be
    offset by top/left to place the whole layout in a larger canvas.
    """

    width: float = Field(..., description="Root width in pixels")
    height: float = Field(..., description="Root height in pixels")
    top: float = Field(default=0, description="Absolute top offset")
    left: float = Field(default=0, description="Absolute left offset")


class LayoutBlock(BaseModel):
    """Resolved absolute-coordinate rectangle of one node.

    Attributes:
        id: ID of the node this block belongs to.
        width: Width in pixels.
        height: Height in pixels.
        top: Absolute top edge.
        left: Absolute left edge.
        right: Absolute right edge (left + width).
        bottom: Absolute bottom edge (top + height).
    """

    id: str
    width: float
    height: float
    top: float
    left: float
    right: float
    bottom: float

    model_config = {"frozen": True}

    @classmethod
    def from_geometry(
        cls, id: str, width: float, height: float, top: float, left: float
    ) -> "LayoutBlock":
        """Build a block, deriving right and bottom edges."""
        return cls(
            id=id,
            width=width,
            height=height,
            top=top,
            left=left,
            right=left + width,
            bottom=top + height,
        )


# Mapping from node id to its resolved block
ComputedLayout = dict[str, LayoutBlock]


def export_json_schema() -> dict:
    """Export the LayoutNodeRoot JSON Schema.

    Returns:
        dict: JSON Schema describing a valid layout input document.

    Example:
        >>> schema = export_json_schema()
        >>> schema["title"]
        'LayoutNodeRoot'
    """
    return LayoutNodeRoot.model_json_schema()
