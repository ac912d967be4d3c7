"""
Single-use builder that turns four or more images into a collage.

Images are held by the builder between :meth:`AlbumThumbnail.add_image`
and the end of :meth:`AlbumThumbnail.make_thumbnail`. Every build
attempt, successful or not, releases them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from PIL import Image

from album_thumbnail import random_utils as at_random
from album_thumbnail.config import ThumbnailConfig
from album_thumbnail.constants import THUMBNAIL_IMAGE_COUNT
from album_thumbnail.errors import (
    InsufficientImagesError,
    InvalidImageError,
    UnsupportedFormatError,
)
from album_thumbnail.image_io import SourceImage, decode
from album_thumbnail.layout import (
    LayoutChoice,
    LayoutParams,
    LayoutPlan,
    classify_layout,
    compute_layout,
    ratios_of,
    render_plan,
    save_thumbnail,
    sort_by_ratio,
)
from album_thumbnail.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence
    from pathlib import Path


@dataclass(frozen=True)
class ThumbnailPlan:
    """Layout decision for one build, ready to render."""

    choice: LayoutChoice
    images: tuple[SourceImage, ...]
    plan: LayoutPlan
    dropped: tuple[SourceImage, ...] = ()


def plan_thumbnail(
    images: Sequence[SourceImage],
    *,
    coin_flip: bool,
    params: LayoutParams,
) -> ThumbnailPlan:
    """
    Sort ``images``, choose a layout and compute its rectangles.

    Only the four narrowest images take part. For layout 3a the widest
    of those four is moved to ``dropped``. Everything beyond the first
    four is reported in ``dropped`` as well.
    """
    if len(images) < THUMBNAIL_IMAGE_COUNT:
        msg = (f"Need at least {THUMBNAIL_IMAGE_COUNT} images, "
               f"got {len(images)}")
        raise InsufficientImagesError(msg)

    ordered = sort_by_ratio(images)
    used = ordered[:THUMBNAIL_IMAGE_COUNT]
    dropped = ordered[THUMBNAIL_IMAGE_COUNT:]

    choice = classify_layout(ratios_of(used), coin_flip=coin_flip)
    if choice.drop_widest:
        dropped = [used[-1], *dropped]
        used = used[:-1]

    plan = compute_layout(choice.name, ratios_of(used), params)
    logger.debug("Layout %s plan: %s", choice.name, plan)
    return ThumbnailPlan(
        choice=choice,
        images=tuple(used),
        plan=plan,
        dropped=tuple(dropped),
    )


class AlbumThumbnail:
    """
    Collect images and build one collage thumbnail from them.

    Example::

        thumb = AlbumThumbnail()
        for path in ("001.jpg", "002.jpg", "003.png", "004.gif"):
            thumb.add_image(path)
        thumb.make_thumbnail("thumb.jpg")

    With ``config.output.strict`` unset, a build with fewer than four
    images silently writes nothing. With it set, the build raises
    :class:`InsufficientImagesError`. Either way the images are
    released and the builder is empty afterwards.

    The builder takes ownership of every image it accepts. That includes
    Pillow images and :class:`SourceImage` objects passed in by the
    caller: they are closed by :meth:`clear` and by
    :meth:`make_thumbnail`, so pass a ``copy()`` to keep using one.
    """

    def __init__(self, config: ThumbnailConfig | None = None) -> None:
        self.config = config or ThumbnailConfig.model_validate({})
        self.params = self.config.to_layout_params()
        self._images: list[SourceImage] = []

    def __len__(self) -> int:
        return len(self._images)

    @property
    def images(self) -> tuple[SourceImage, ...]:
        """Images currently held, in the order they were added."""
        return tuple(self._images)

    def add_image(
        self,
        source: str | Path | bytes | Image.Image | SourceImage,
        *,
        format_hint: str | None = None,
    ) -> bool:
        """
        Decode ``source`` and keep it for the next build.

        Returns ``False`` and logs a warning when the input cannot be
        used. A bad image never aborts the batch.

        A Pillow image or :class:`SourceImage` is kept as is, not
        copied, and is closed when the builder releases its images.
        """
        try:
            if isinstance(source, SourceImage):
                image = source
            elif isinstance(source, Image.Image):
                image = SourceImage.from_pil(source)
            else:
                image = decode(source, format_hint=format_hint)
        except (UnsupportedFormatError, InvalidImageError, OSError) as exc:
            logger.warning("Skipping image: %s", exc)
            return False

        self._images.append(image)
        return True

    def make_thumbnail(self, dest: str | Path) -> None:
        """
        Build the collage and write it to ``dest`` as JPEG.

        Any existing file at ``dest`` is replaced.

        Raises:
            InsufficientImagesError: If fewer than four images were
                added and the builder is in strict mode.

        """
        try:
            if len(self._images) < THUMBNAIL_IMAGE_COUNT:
                if self.config.output.strict:
                    msg = (f"Need at least {THUMBNAIL_IMAGE_COUNT} images, "
                           f"got {len(self._images)}")
                    raise InsufficientImagesError(msg)
                logger.debug(
                    "Only %d images added, nothing written to %s",
                    len(self._images), dest,
                )
                return

            result = plan_thumbnail(
                self._images,
                coin_flip=at_random.coin_flip(),
                params=self.params,
            )
            logger.info("Using layout %s", result.choice.name)
            for image in result.dropped:
                image.close()

            canvas = render_plan(result.plan, result.images, self.params)
            try:
                save_thumbnail(canvas, dest, self.config.output.jpeg_quality)
            finally:
                canvas.close()
        finally:
            self.clear()

    def clear(self) -> None:
        """Release every held image. Safe to call repeatedly."""
        for image in self._images:
            image.close()
        self._images = []
