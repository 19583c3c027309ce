"""Padding normalization."""

from boxlayout.padding.lib import Padding, normalize_padding

__all__ = ["Padding", "normalize_padding"]
