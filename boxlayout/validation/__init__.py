"""Layout validation utilities."""

from boxlayout.validation.lib import (
    ValidationIssue,
    find_duplicate_ids,
    is_valid,
    validate_layout,
)

__all__ = [
    "ValidationIssue",
    "find_duplicate_ids",
    "validate_layout",
    "is_valid",
]
