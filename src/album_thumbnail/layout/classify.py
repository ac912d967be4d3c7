"""Choose one of the five layouts from the sorted aspect ratios."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from album_thumbnail.constants import (
    ONE_TALL_MAX_RATIO,
    ONE_TALL_OTHERS_MIN_RATIO,
    TALL_THREE_MAX_RATIO,
    THUMBNAIL_IMAGE_COUNT,
    TWO_TALL_MAX_RATIO,
    TWO_TALL_OTHERS_MIN_RATIO,
    WIDE_ALL_MIN_RATIO,
)

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from album_thumbnail.type_defs import LayoutName


@dataclass(frozen=True)
class LayoutChoice:
    """Selected layout, and whether the widest image must be dropped."""

    name: LayoutName
    drop_widest: bool = False


def classify_layout(
    ratios: Sequence[float],
    *,
    coin_flip: bool,
) -> LayoutChoice:
    """
    Pick a layout for four ratios sorted ascending.

    The first matching rule wins:

    1. every image wide (``r0 > 2.0``): 4d, four full-width rows
    2. three images tall (``r2 < 0.8``): 3a, widest image dropped
    3. one image taller than the rest: 4c
    4. two tall and two wide, when ``coin_flip`` is set: 4b
    5. anything else: 4a
    """
    if len(ratios) != THUMBNAIL_IMAGE_COUNT:
        msg = f"Expected {THUMBNAIL_IMAGE_COUNT} ratios, got {len(ratios)}"
        raise ValueError(msg)

    r0, r1, r2, _ = ratios
    if r0 > WIDE_ALL_MIN_RATIO:
        return LayoutChoice("4d")
    if r2 < TALL_THREE_MAX_RATIO:
        return LayoutChoice("3a", drop_widest=True)
    if r0 <= ONE_TALL_MAX_RATIO and r1 > ONE_TALL_OTHERS_MIN_RATIO:
        return LayoutChoice("4c")
    if (r1 <= TWO_TALL_MAX_RATIO and r2 > TWO_TALL_OTHERS_MIN_RATIO
            and coin_flip):
        return LayoutChoice("4b")
    return LayoutChoice("4a")
