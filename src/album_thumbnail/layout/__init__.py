"""
Layout engine split into geometry primitives, selection, layouts and
rendering.

The most commonly used entry points are re-exported here.
"""

from __future__ import annotations

from . import classify, core, layouts, render
from .classify import LayoutChoice, classify_layout
from .core import (
    LayoutParams,
    LayoutPlan,
    Rect,
    ratio_key,
    ratios_of,
    round_px,
    sort_by_ratio,
)
from .layouts import (
    LAYOUTS,
    compute_layout,
    layout_3a,
    layout_4a,
    layout_4b,
    layout_4c,
    layout_4d,
)
from .render import (
    canvas_height,
    draw_filled_rect,
    draw_resampled,
    encode_jpeg,
    render_plan,
    save_thumbnail,
    to_rgb,
)

__all__ = [
    "LAYOUTS",
    "LayoutChoice",
    "LayoutParams",
    "LayoutPlan",
    "Rect",
    "canvas_height",
    "classify",
    "classify_layout",
    "compute_layout",
    "core",
    "draw_filled_rect",
    "draw_resampled",
    "encode_jpeg",
    "layout_3a",
    "layout_4a",
    "layout_4b",
    "layout_4c",
    "layout_4d",
    "layouts",
    "ratio_key",
    "ratios_of",
    "render",
    "render_plan",
    "round_px",
    "save_thumbnail",
    "sort_by_ratio",
    "to_rgb",
]
