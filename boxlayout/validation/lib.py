"""Layout validation and static analysis.

This module reports structural issues in a LayoutNode tree without
resolving it. Unlike `resolve_layout()`, which stops at the first error,
validation walks the whole tree and collects every issue it can detect
statically. Overflow depends on resolved sizes and is not reported here.
"""

from dataclasses import dataclass

from boxlayout.core.errors import InvalidPaddingFormat, InvalidPercentageFormat
from boxlayout.dimension.lib import parse_dimension
from boxlayout.ir import LayoutNode
from boxlayout.padding import normalize_padding


@dataclass
class ValidationIssue:
    """Represents a validation issue in a layout tree.

    Attributes:
        node_id: ID of the node with the issue.
        message: Human-readable description.
        issue_type: Category of the issue.
    """

    node_id: str
    message: str
    issue_type: str


def validate_layout(node: LayoutNode) -> list[ValidationIssue]:
    """Validate a LayoutNode tree for structural issues.

    Performs the following checks:
        - Unique ID enforcement (no duplicate IDs)
        - Containers declare a direction
        - Container padding specs are well formed
        - Dimension strings are percentages or "auto"

    Args:
        node: The root LayoutNode to validate.

    Returns:
        list[ValidationIssue]: Issues found (empty if valid).

    Example:
        >>> issues = validate_layout(root_node)
        >>> for issue in issues:
        ...     print(f"{issue.node_id}: {issue.message}")
    """
    issues: list[ValidationIssue] = []

    for node_id in find_duplicate_ids(node):
        count = sum(1 for n in _walk(node) if n.id == node_id)
        issues.append(
            ValidationIssue(
                node_id=node_id,
                message=f"Duplicate ID '{node_id}' appears {count} times",
                issue_type="duplicate_id",
            )
        )

    for n in _walk(node):
        issues.extend(_check_node(n))

    return issues


def is_valid(node: LayoutNode) -> bool:
    """Check if a layout tree is valid.

    Args:
        node: The root LayoutNode to validate.

    Returns:
        bool: True if the tree has no validation issues.
    """
    return not validate_layout(node)


def find_duplicate_ids(node: LayoutNode) -> list[str]:
    """Find IDs used by more than one node.

    Args:
        node: The root LayoutNode to scan.

    Returns:
        Repeated IDs, in order of first appearance.
    """
    id_counts: dict[str, int] = {}
    for n in _walk(node):
        id_counts[n.id] = id_counts.get(n.id, 0) + 1
    return [node_id for node_id, count in id_counts.items() if count > 1]


def _walk(node: LayoutNode):
    """Yield a node and all its descendants, depth-first."""
    yield node
    for child in node.children or []:
        yield from _walk(child)


def _check_node(node: LayoutNode) -> list[ValidationIssue]:
    """Run the per-node checks."""
    issues: list[ValidationIssue] = []

    if node.is_container and node.direction is None:
        issues.append(
            ValidationIssue(
                node_id=node.id,
                message=f"Node '{node.id}' has children but no direction",
                issue_type="missing_direction",
            )
        )

    # Padding only insets children, so leaves never read it
    if node.is_container:
        try:
            normalize_padding(node.padding)
        except InvalidPaddingFormat as e:
            issues.append(
                ValidationIssue(
                    node_id=node.id, message=str(e), issue_type="invalid_padding"
                )
            )

    for axis in ("width", "height"):
        try:
            parse_dimension(getattr(node, axis))
        except InvalidPercentageFormat as e:
            issues.append(
                ValidationIssue(
                    node_id=node.id,
                    message=f"Invalid {axis}: {e}",
                    issue_type="invalid_dimension",
                )
            )

    return issues
