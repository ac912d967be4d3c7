"""Core geometry primitives shared by the layout functions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from album_thumbnail.config_defaults import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_BORDER_COLOR,
    DEFAULT_BORDER_WIDTH,
    DEFAULT_PADDING,
    DEFAULT_TOTAL_WIDTH,
)

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable, Sequence

    from album_thumbnail.image_io import SourceImage
    from album_thumbnail.type_defs import RGB


@dataclass(frozen=True)
class LayoutParams:
    """Sizing and colors fixed for the lifetime of a builder."""

    total_width: int = DEFAULT_TOTAL_WIDTH
    padding: int = DEFAULT_PADDING
    border_width: int = DEFAULT_BORDER_WIDTH
    bg_color: RGB = DEFAULT_BACKGROUND_COLOR
    border_color: RGB = DEFAULT_BORDER_COLOR

    @property
    def gap(self) -> int:
        """Distance between the image areas of two neighbours."""
        return self.padding + 2 * self.border_width

    @property
    def origin(self) -> int:
        """Offset of the first image area from the canvas edge."""
        return self.padding + self.border_width


@dataclass(frozen=True)
class Rect:
    """Image area in pixels, excluding its border."""

    x: int
    y: int
    w: int
    h: int

    @property
    def right(self) -> int:
        """One past the last column."""
        return self.x + self.w

    @property
    def bottom(self) -> int:
        """One past the last row."""
        return self.y + self.h

    def size(self) -> tuple[int, int]:
        """Return (w, h)."""
        return self.w, self.h

    def outset(self, n: int) -> Rect:
        """Return a copy grown by ``n`` on all sides."""
        return Rect(self.x - n, self.y - n, self.w + 2 * n, self.h + 2 * n)


# Entry i is the image area of sorted image i
LayoutPlan = tuple[Rect, ...]


def round_px(value: float) -> int:
    """Round to the nearest pixel, halves away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def ratio_key(image: SourceImage) -> float:
    """Sort key ordering images from narrowest to widest."""
    return image.ratio


def sort_by_ratio(images: Iterable[SourceImage]) -> list[SourceImage]:
    """Return a new list of ``images`` ordered by ascending aspect ratio."""
    return sorted(images, key=ratio_key)


def ratios_of(images: Sequence[SourceImage]) -> tuple[float, ...]:
    """Return the aspect ratios of ``images`` in order."""
    return tuple(im.ratio for im in images)
