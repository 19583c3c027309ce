"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Reusable layout trees shared by package and CLI tests
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from dotenv import load_dotenv

if TYPE_CHECKING:
    from boxlayout.ir import LayoutNodeRoot

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Layout Fixtures
# =============================================================================


@pytest.fixture
def simple_layout() -> LayoutNodeRoot:
    """Column page with a title, an auto-height content area and a footer.

    Returns:
        500x500 root with padding [10, 20, 30, 20].
    """
    from boxlayout.ir import LayoutNode, LayoutNodeRoot

    return LayoutNodeRoot(
        id="root",
        direction="column",
        width=500,
        height=500,
        padding=[10, 20, 30, 20],
        children=[
            LayoutNode(id="title", width="100%", height=50),
            LayoutNode(id="content", width="100%", height="auto"),
            LayoutNode(id="footer", width="100%", height=50),
        ],
    )


@pytest.fixture
def advanced_layout() -> LayoutNodeRoot:
    """Nested chart layout with a padded wrapper between two fixed columns.

    Returns:
        500x500 column root with a row container nested two levels deep.
    """
    from boxlayout.ir import LayoutNodeRoot

    return LayoutNodeRoot.model_validate(
        {
            "id": "root",
            "direction": "column",
            "width": 500,
            "height": 500,
            "padding": 20,
            "children": [
                {"id": "title", "width": "100%", "height": 50},
                {
                    "id": "chart",
                    "width": "100%",
                    "height": "auto",
                    "direction": "row",
                    "padding": 0,
                    "children": [
                        {"id": "left", "width": 100, "height": "100%"},
                        {
                            "id": "center-wrapper",
                            "width": "auto",
                            "height": "100%",
                            "padding": [10, 20],
                            "direction": "row",
                            "children": [
                                {"id": "center", "width": "100%", "height": "100%"}
                            ],
                        },
                        {"id": "right", "width": 100, "height": "100%"},
                    ],
                },
                {"id": "legend", "width": "100%", "height": 150},
            ],
        }
    )


@pytest.fixture
def row_layout() -> LayoutNodeRoot:
    """Row with a fixed aside and two auto-width content columns.

    Returns:
        500x500 row root without padding.
    """
    from boxlayout.ir import LayoutNode, LayoutNodeRoot

    return LayoutNodeRoot(
        id="root",
        direction="row",
        width=500,
        height=500,
        children=[
            LayoutNode(id="aside", width=100),
            LayoutNode(id="content-1", width="auto"),
            LayoutNode(id="content-2", width="auto"),
        ],
    )


@pytest.fixture
def layout_file(tmp_path: Path, advanced_layout: LayoutNodeRoot) -> Path:
    """Write the advanced layout to a JSON file.

    Returns:
        Path to the JSON document.
    """
    path = tmp_path / "layout.json"
    path.write_text(json.dumps(advanced_layout.model_dump(exclude_none=True)))
    return path
