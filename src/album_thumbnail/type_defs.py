"""
Defines shared type aliases for the album thumbnail builder.

Centralizes reusable type hints to improve consistency and readability.
"""
from __future__ import annotations

from typing import Literal

LayoutName = Literal["4a", "4b", "4c", "4d", "3a"]
RGB = tuple[int, int, int]
