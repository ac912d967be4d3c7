"""
Test configuration and shared fixtures for album_thumbnail.

Provides factories for solid-color Pillow images, on-disk image files
and wrapped :class:`SourceImage` objects, plus default layout
parameters.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest
from PIL import Image

from album_thumbnail.constants import COLOR_MODE_RGB
from album_thumbnail.image_io import SourceImage
from album_thumbnail.layout import LayoutParams
from album_thumbnail.logging_utils import logger

# Image height used when building images from bare ratios
RATIO_BASE_HEIGHT = 100

PIL_FORMATS = {"jpeg": "JPEG", "gif": "GIF", "png": "PNG"}


@pytest.fixture
def params() -> LayoutParams:
    """Default 196px wide layout with padding 2 and border 1."""
    return LayoutParams()


@pytest.fixture
def make_image() -> Callable[..., Image.Image]:
    """Factory for solid RGB Pillow images."""

    def _make(width: int, height: int, color: str = "red") -> Image.Image:
        return Image.new(COLOR_MODE_RGB, (width, height), color=color)

    return _make


@pytest.fixture
def make_sources(
    make_image: Callable[..., Image.Image],
) -> Callable[[Sequence[float]], list[SourceImage]]:
    """Build one SourceImage per ratio, each 100px high."""

    def _make(ratios: Sequence[float]) -> list[SourceImage]:
        return [
            SourceImage.from_pil(
                make_image(round(r * RATIO_BASE_HEIGHT), RATIO_BASE_HEIGHT),
            )
            for r in ratios
        ]

    return _make


@pytest.fixture
def write_image(
    tmp_path: Path,
    make_image: Callable[..., Image.Image],
) -> Callable[..., Path]:
    """Save a solid image to tmp_path in the requested format."""

    def _write(
        name: str,
        size: tuple[int, int] = (64, 64),
        fmt: str = "jpeg",
        color: str = "blue",
    ) -> Path:
        path = tmp_path / name
        make_image(*size, color=color).save(path, format=PIL_FORMATS[fmt])
        return path

    return _write


@pytest.fixture(autouse=True)
def enable_logger_propagation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable propagation for the package logger to allow caplog to work."""
    monkeypatch.setattr(logger, "propagate", True)
