"""
Geometry for the five collage layouts.

Indices refer to the images sorted by aspect ratio, 0 being the
narrowest. Each function returns one :class:`Rect` per image, in that
index order. Rects describe the image area only. The border is drawn
``border_width`` pixels outside it and neighbours are ``gap`` apart.

The last image placed in a row or column is sized by subtracting the
others from the fixed total, so rounding never makes a row drift from
``total_width``.

Layout 4a, mostly normal proportions::

    +---+-------+
    | 1 |   2   |
    +---+-----+-+
    |    3    |0|
    +---------+-+

Layout 4b, two tall and two normal images::

    +---+-----+---+
    |   |  3  |   |
    | 1 +-----+ 0 |
    |   |  2  |   |
    +---+-----+---+

Layout 4c, one image taller than the rest::

    +---+-----------+
    | 1 |           |
    +---+           |
    | 3 |     0     |
    +---+           |
    | 2 |           |
    +---+-----------+

Layout 4d, all wide images, one per row in order 1, 3, 2, 0.

Layout 3a, three tall images::

    +---+-----+-+
    |   |     | |
    | 1 |  2  |0|
    |   |     | |
    +---+-----+-+
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from album_thumbnail.layout.core import LayoutParams, LayoutPlan, Rect, round_px

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Sequence

    from album_thumbnail.type_defs import LayoutName

    LayoutFunction = Callable[[Sequence[float], LayoutParams], LayoutPlan]


def _expect(ratios: Sequence[float], count: int, name: str) -> None:
    """Raise if ``ratios`` does not hold exactly ``count`` values."""
    if len(ratios) != count:
        msg = f"Layout {name} needs {count} ratios, got {len(ratios)}"
        raise ValueError(msg)


def layout_4a(ratios: Sequence[float], params: LayoutParams) -> LayoutPlan:
    """Two rows: images 1 and 2 on top, images 3 and 0 below."""
    _expect(ratios, 4, "4a")
    r0, r1, r2, r3 = ratios
    width = params.total_width
    pad, border, gap = params.padding, params.border_width, params.gap

    # spare width of a two-image row, shared by both rows
    row_span = width - 3 * pad - 4 * border
    h_top = row_span / (r1 + r2)
    h_bottom = row_span / (r3 + r0)

    rect1 = Rect(
        x=params.origin,
        y=params.origin,
        w=round_px(r1 * h_top),
        h=round_px(h_top),
    )
    rect2 = Rect(
        x=rect1.right + gap,
        y=rect1.y,
        w=row_span - rect1.w,
        h=rect1.h,
    )
    rect3 = Rect(
        x=rect1.x,
        y=rect1.bottom + gap,
        w=round_px(r3 * h_bottom),
        h=round_px(h_bottom),
    )
    rect0 = Rect(
        x=rect3.right + gap,
        y=rect3.y,
        w=row_span - rect3.w,
        h=rect3.h,
    )
    return rect0, rect1, rect2, rect3


def layout_4b(ratios: Sequence[float], params: LayoutParams) -> LayoutPlan:
    """Three columns: image 1, images 3 over 2, then image 0."""
    _expect(ratios, 4, "4b")
    r0, r1, r2, r3 = ratios
    width = params.total_width
    pad, border, gap = params.padding, params.border_width, params.gap

    # width-per-height of the middle column when 3 and 2 are stacked
    middle = 1 / (1 / r3 + 1 / r2)
    h1 = ((width - 2 * pad - 2 * border + gap * (middle - 2))
          / (r1 + r0 + middle))
    h3 = (h1 - gap) / (1 + r3 / r2)

    rect1 = Rect(
        x=params.origin,
        y=params.origin,
        w=round_px(r1 * h1),
        h=round_px(h1),
    )
    rect3 = Rect(
        x=rect1.right + gap,
        y=rect1.y,
        w=round_px(r3 * h3),
        h=round_px(h3),
    )
    rect2 = Rect(
        x=rect3.x,
        y=rect3.bottom + gap,
        w=rect3.w,
        h=rect1.h - rect3.h - gap,
    )
    rect0 = Rect(
        x=rect2.right + gap,
        y=rect1.y,
        w=width - rect1.w - rect3.w - 4 * pad - 6 * border,
        h=rect1.h,
    )
    return rect0, rect1, rect2, rect3


def layout_4c(ratios: Sequence[float], params: LayoutParams) -> LayoutPlan:
    """Images 1, 3 and 2 stacked on the left, image 0 tall on the right."""
    _expect(ratios, 4, "4c")
    r0, r1, r2, r3 = ratios
    width = params.total_width
    pad, border, gap = params.padding, params.border_width, params.gap

    inv_sum = 1 / r3 + 1 / r2 + 1 / r1
    h0 = ((width - 2 * pad - 2 * border - gap * (1 - 2 / inv_sum))
          / (r0 + 1 / inv_sum))
    h1 = (h0 - 2 * gap) / (r1 * (1 / r3 + 1 / r2) + 1)
    h3 = h1 * r1 / r3
    h2 = h0 - h1 - h3 - 2 * gap

    rect1 = Rect(
        x=params.origin,
        y=params.origin,
        w=round_px(r1 * h1),
        h=round_px(h1),
    )
    # 3 and 2 reuse the width of 1, only their heights follow the ratio
    rect3 = Rect(
        x=rect1.x,
        y=rect1.bottom + gap,
        w=rect1.w,
        h=round_px(h3),
    )
    rect2 = Rect(
        x=rect1.x,
        y=rect3.bottom + gap,
        w=rect1.w,
        h=round_px(h2),
    )
    rect0 = Rect(
        x=rect1.right + gap,
        y=rect1.y,
        w=width - rect1.w - 3 * pad - 4 * border,
        h=rect2.bottom - rect1.y,
    )
    return rect0, rect1, rect2, rect3


def layout_4d(ratios: Sequence[float], params: LayoutParams) -> LayoutPlan:
    """Four full-width rows, top to bottom: 1, 3, 2, 0."""
    _expect(ratios, 4, "4d")
    row_w = params.total_width - 2 * params.padding - 2 * params.border_width

    rects: dict[int, Rect] = {}
    y = params.origin
    for idx in (1, 3, 2, 0):
        rect = Rect(
            x=params.origin,
            y=y,
            w=row_w,
            h=round_px(row_w / ratios[idx]),
        )
        rects[idx] = rect
        y = rect.bottom + params.gap
    return tuple(rects[idx] for idx in range(4))


def layout_3a(ratios: Sequence[float], params: LayoutParams) -> LayoutPlan:
    """One row of three tall images, left to right: 1, 2, 0."""
    _expect(ratios, 3, "3a")
    r0, r1, r2 = ratios
    width = params.total_width
    pad, border, gap = params.padding, params.border_width, params.gap

    row_span = width - 4 * pad - 6 * border
    h = row_span / (r0 + r1 + r2)

    rect1 = Rect(
        x=params.origin,
        y=params.origin,
        w=round_px(r1 * h),
        h=round_px(h),
    )
    rect2 = Rect(
        x=rect1.right + gap,
        y=rect1.y,
        w=round_px(r2 * h),
        h=rect1.h,
    )
    rect0 = Rect(
        x=rect2.right + gap,
        y=rect1.y,
        w=row_span - rect1.w - rect2.w,
        h=rect1.h,
    )
    return rect0, rect1, rect2


LAYOUTS: dict[str, LayoutFunction] = {
    "4a": layout_4a,
    "4b": layout_4b,
    "4c": layout_4c,
    "4d": layout_4d,
    "3a": layout_3a,
}


def compute_layout(
    name: LayoutName,
    ratios: Sequence[float],
    params: LayoutParams,
) -> LayoutPlan:
    """Run the layout function registered under ``name``."""
    try:
        layout_fn = LAYOUTS[name]
    except KeyError as exc:
        msg = f"Unknown layout: {name!r}"
        raise ValueError(msg) from exc
    return layout_fn(ratios, params)
