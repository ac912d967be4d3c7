"""Command-line entry point for building album thumbnails."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar

from album_thumbnail import random_utils as at_random
from album_thumbnail.builder import AlbumThumbnail
from album_thumbnail.config import ConfigLoader, ThumbnailConfig, parse_hex_color
from album_thumbnail.errors import InsufficientImagesError

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Sequence

T = TypeVar("T")


def positive_int(text: str) -> int:
    """Argparse-style validator that enforces a strictly positive integer."""
    try:
        value = int(text)
    except ValueError as exc:
        msg = "must be an integer"
        raise ValueError(msg) from exc
    if value <= 0:
        msg = "must be positive"
        raise ValueError(msg)
    return value


def non_negative_int(text: str) -> int:
    """Argparse-style validator that accepts zero and positive integers."""
    try:
        value = int(text)
    except ValueError as exc:
        msg = "must be an integer"
        raise ValueError(msg) from exc
    if value < 0:
        msg = "must not be negative"
        raise ValueError(msg)
    return value


def _wrap_validator[T](
    validator: Callable[[str], T],
    error_cls: type[argparse.ArgumentTypeError] = argparse.ArgumentTypeError,
) -> Callable[[str], T]:
    """Convert ``ValueError`` from a validator into ``ArgumentTypeError``."""

    def wrapper(text: str) -> T:
        try:
            return validator(text)
        except ValueError as exc:
            raise error_cls(str(exc)) from exc

    return wrapper


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser for the thumbnail tool."""
    parser = argparse.ArgumentParser(
        description=(
            "Build a collage thumbnail from four images. The layout is "
            "chosen from the images' aspect ratios."
        ),
    )
    parser.add_argument("images", nargs="+", type=Path,
                        help="JPEG, GIF or PNG inputs.")
    parser.add_argument("--out", required=True, type=Path,
                        help="Destination JPEG, replaced if present.")
    parser.add_argument("--config", type=Path, default=None,
                        help="TOML file with layout/colors/output sections.")
    parser.add_argument("--width", type=_wrap_validator(positive_int),
                        default=None, help="Total thumbnail width in pixels.")
    parser.add_argument("--padding", type=_wrap_validator(non_negative_int),
                        default=None)
    parser.add_argument(
        "--border-width",
        type=_wrap_validator(non_negative_int),
        default=None,
    )
    parser.add_argument(
        "--background",
        type=_wrap_validator(parse_hex_color),
        default=None,
        help="Background color as hex like #ffffff.",
    )
    parser.add_argument(
        "--border-color",
        type=_wrap_validator(parse_hex_color),
        default=None,
        help="Border color as hex like #808080.",
    )
    parser.add_argument("--quality", type=_wrap_validator(positive_int),
                        default=None, help="JPEG quality, 1 to 95.")
    parser.add_argument("--seed", type=_wrap_validator(non_negative_int),
                        default=None, help="Seed for the layout coin flip.")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail instead of writing nothing when fewer than four "
             "images load.",
    )
    return parser


def _build_config(args: argparse.Namespace) -> ThumbnailConfig:
    """Merge the optional config file with command-line overrides."""
    base = (
        ConfigLoader.load(args.config)
        if args.config is not None
        else ThumbnailConfig.model_validate({})
    )
    data: dict[str, Any] = base.model_dump()
    overrides = {
        ("layout", "total_width"): args.width,
        ("layout", "padding"): args.padding,
        ("layout", "border_width"): args.border_width,
        ("colors", "background"): args.background,
        ("colors", "border"): args.border_color,
        ("output", "jpeg_quality"): args.quality,
        ("random", "seed"): args.seed,
    }
    for (section, key), value in overrides.items():
        if value is not None:
            data[section][key] = value
    if args.strict:
        data["output"]["strict"] = True
    return ThumbnailConfig.model_validate(data)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse command-line arguments and build the thumbnail."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _build_config(args)
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))

    if config.random.seed is not None:
        at_random.seed_numpy_rng(config.random.seed)

    builder = AlbumThumbnail(config)
    for path in args.images:
        builder.add_image(path)

    try:
        builder.make_thumbnail(args.out)
    except InsufficientImagesError as exc:
        parser.error(str(exc))

    return 0


__all__ = ["build_parser", "main", "non_negative_int", "positive_int"]
