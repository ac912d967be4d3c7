"""Draw a layout plan onto a canvas and encode it as JPEG."""

from __future__ import annotations

import io
from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image, ImageDraw

from album_thumbnail.config_defaults import DEFAULT_JPEG_QUALITY
from album_thumbnail.constants import COLOR_MODE_RGB, COLOR_WHITE
from album_thumbnail.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from album_thumbnail.image_io import SourceImage
    from album_thumbnail.layout.core import LayoutParams, LayoutPlan, Rect
    from album_thumbnail.type_defs import RGB


def canvas_height(plan: LayoutPlan, params: LayoutParams) -> int:
    """Lowest image edge plus the trailing border and padding."""
    if not plan:
        msg = "Layout plan is empty"
        raise ValueError(msg)
    return max(r.bottom for r in plan) + params.padding + params.border_width


def to_rgb(img: Image.Image, *, bg_color: RGB) -> Image.Image:
    """Convert PIL image to RGB, alpha compositing onto bg_color if needed."""
    if img.mode == COLOR_MODE_RGB:
        return img
    # palette transparency lives in img.info, not in an alpha band
    if img.mode == "PA" or (img.mode == "P" and "transparency" in img.info):
        img = img.convert("RGBA")
    if img.mode in ("RGBA", "LA"):
        bg = Image.new("RGBA", img.size, (*bg_color, 255))
        comp = Image.alpha_composite(bg, img.convert("RGBA"))
        return comp.convert(COLOR_MODE_RGB)
    return img.convert(COLOR_MODE_RGB)


def draw_filled_rect(canvas: Image.Image, rect: Rect, color: RGB) -> None:
    """Fill ``rect`` on ``canvas`` with a solid color."""
    if rect.w <= 0 or rect.h <= 0:
        return
    draw = ImageDraw.Draw(canvas)
    # PIL rectangles are inclusive of the end coordinate
    draw.rectangle((rect.x, rect.y, rect.right - 1, rect.bottom - 1),
                   fill=color)


def draw_resampled(
    canvas: Image.Image,
    src: Image.Image,
    rect: Rect,
    *,
    bg_color: RGB = COLOR_WHITE,
) -> None:
    """
    Resample ``src`` to the size of ``rect`` and paste it there.

    Transparent pixels are flattened onto ``bg_color`` first.
    """
    if rect.w <= 0 or rect.h <= 0:
        msg = f"Cannot draw into empty rect {rect}"
        raise ValueError(msg)
    scaled = to_rgb(src, bg_color=bg_color).resize(
        rect.size(), Image.Resampling.LANCZOS,
    )
    canvas.paste(scaled, (rect.x, rect.y))


def render_plan(
    plan: LayoutPlan,
    images: Sequence[SourceImage],
    params: LayoutParams,
) -> Image.Image:
    """
    Compose ``images`` onto a new canvas following ``plan``.

    ``images[i]`` is drawn into ``plan[i]``, framed by a border of
    ``params.border_width`` pixels.
    """
    if len(plan) != len(images):
        msg = (f"Plan has {len(plan)} rects but {len(images)} images "
               "were given")
        raise ValueError(msg)

    size = (params.total_width, canvas_height(plan, params))
    canvas = Image.new(COLOR_MODE_RGB, size, params.bg_color)
    for rect, src in zip(plan, images, strict=True):
        draw_filled_rect(
            canvas, rect.outset(params.border_width), params.border_color,
        )
        draw_resampled(canvas, src.image, rect, bg_color=params.bg_color)
    return canvas


def encode_jpeg(
    canvas: Image.Image,
    quality: int = DEFAULT_JPEG_QUALITY,
) -> bytes:
    """Encode ``canvas`` as baseline JPEG bytes."""
    buf = io.BytesIO()
    canvas.save(buf, format="JPEG", quality=quality)
    return buf.getvalue()


def save_thumbnail(
    canvas: Image.Image,
    dest: str | Path,
    quality: int = DEFAULT_JPEG_QUALITY,
) -> Path:
    """Write ``canvas`` to ``dest`` as JPEG, replacing any existing file."""
    out_path = Path(dest)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.unlink(missing_ok=True)
    out_path.write_bytes(encode_jpeg(canvas, quality))
    logger.info("Thumbnail saved to: %s", out_path)
    return out_path
