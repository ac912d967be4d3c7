"""Public package exports for the album thumbnail builder."""

from __future__ import annotations

from .builder import AlbumThumbnail, ThumbnailPlan, plan_thumbnail
from .config import ConfigLoader, ThumbnailConfig
from .errors import (
    AlbumThumbnailError,
    InsufficientImagesError,
    InvalidImageError,
    UnsupportedFormatError,
)
from .image_io import SourceImage, decode
from .layout import LayoutChoice, LayoutParams, Rect

__all__ = [
    "AlbumThumbnail",
    "AlbumThumbnailError",
    "ConfigLoader",
    "InsufficientImagesError",
    "InvalidImageError",
    "LayoutChoice",
    "LayoutParams",
    "Rect",
    "SourceImage",
    "ThumbnailConfig",
    "ThumbnailPlan",
    "UnsupportedFormatError",
    "decode",
    "plan_thumbnail",
]
