"""Padding normalization.

Converts any accepted padding shorthand into four explicit side values.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from numbers import Real
from typing import Any

from boxlayout.core.errors import InvalidPaddingFormat

SIDES = ("top", "right", "bottom", "left")


@dataclass(frozen=True)
class Padding:
    """Explicit padding for all four sides of a box.

    Attributes:
        top: Top inset in pixels.
        right: Right inset in pixels.
        bottom: Bottom inset in pixels.
        left: Left inset in pixels.
    """

    top: float = 0
    right: float = 0
    bottom: float = 0
    left: float = 0

    @property
    def horizontal(self) -> float:
        """Combined left and right inset."""
        return self.left + self.right

    @property
    def vertical(self) -> float:
        """Combined top and bottom inset."""
        return self.top + self.bottom


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def normalize_padding(padding: Any) -> Padding:
    """Normalize a padding spec to four explicit sides.

    Accepted shapes:
        - ``m``: all sides equal ``m``
        - ``[v, h]``: top/bottom ``v``, left/right ``h``
        - ``[t, r, b, l]``: positional, missing trailing values are 0
        - ``{"top": t, ...}``: absent sides are 0

    Args:
        padding: Padding spec in one of the accepted shapes.

    Returns:
        Padding with every side set.

    Raises:
        InvalidPaddingFormat: If the spec matches none of the shapes.

    Example:
        >>> normalize_padding([10, 20])
        Padding(top=10, right=20, bottom=10, left=20)
    """
    if _is_number(padding):
        return Padding(padding, padding, padding, padding)

    if isinstance(padding, Mapping):
        if not set(padding) <= set(SIDES):
            raise InvalidPaddingFormat(padding)
        if not all(_is_number(value) for value in padding.values()):
            raise InvalidPaddingFormat(padding)
        return Padding(**padding)

    if isinstance(padding, Sequence) and not isinstance(padding, (str, bytes)):
        if len(padding) > 4 or not all(_is_number(value) for value in padding):
            raise InvalidPaddingFormat(padding)
        if len(padding) == 2:
            vertical, horizontal = padding
            return Padding(vertical, horizontal, vertical, horizontal)
        return Padding(*padding)

    raise InvalidPaddingFormat(padding)
