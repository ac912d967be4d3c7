"""
Configuration schema and loader for the album thumbnail builder.

Defines Pydantic models representing structured configuration sections
and a TOML-based config loader with validation support.
"""

from pathlib import Path

import tomlkit
from pydantic import BaseModel, Field, field_validator

from album_thumbnail.config_defaults import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_BORDER_COLOR,
    DEFAULT_BORDER_WIDTH,
    DEFAULT_JPEG_QUALITY,
    DEFAULT_PADDING,
    DEFAULT_SEED,
    DEFAULT_STRICT,
    DEFAULT_TOTAL_WIDTH,
)
from album_thumbnail.constants import JPEG_QUALITY_MAX, JPEG_QUALITY_MIN
from album_thumbnail.layout.core import LayoutParams
from album_thumbnail.type_defs import RGB

_HEX_RGB_LENGTH = 6
_RGB_CHANNELS = 3
_CHANNEL_MAX = 255


def parse_hex_color(text: str) -> RGB:
    """Parse ``#rrggbb`` strings into RGB triples."""
    stripped = text.strip().lstrip("#")
    if len(stripped) != _HEX_RGB_LENGTH:
        msg = "color must look like #rrggbb"
        raise ValueError(msg)
    try:
        red = int(stripped[0:2], 16)
        green = int(stripped[2:4], 16)
        blue = int(stripped[4:6], 16)
    except ValueError as exc:
        msg = "color contains invalid hex digits"
        raise ValueError(msg) from exc
    return red, green, blue


def _coerce_color(value: object) -> object:
    """Accept hex strings and RGB sequences for color fields."""
    if isinstance(value, str):
        return parse_hex_color(value)
    if isinstance(value, (list, tuple)):
        if len(value) != _RGB_CHANNELS:
            msg = "color needs exactly three channels"
            raise ValueError(msg)
        if any(not 0 <= int(c) <= _CHANNEL_MAX for c in value):
            msg = "color channels must be within 0..255"
            raise ValueError(msg)
        return tuple(int(c) for c in value)
    return value


class LayoutConfig(BaseModel):
    """Control collage width and spacing."""

    total_width: int = Field(DEFAULT_TOTAL_WIDTH, ge=1)
    padding: int = Field(DEFAULT_PADDING, ge=0)
    border_width: int = Field(DEFAULT_BORDER_WIDTH, ge=0)


class ColorConfig(BaseModel):
    """Background and border colors."""

    background: RGB = DEFAULT_BACKGROUND_COLOR
    border: RGB = DEFAULT_BORDER_COLOR

    @field_validator("background", "border", mode="before")
    @classmethod
    def _parse_color(cls, value: object) -> object:
        return _coerce_color(value)


class OutputConfig(BaseModel):
    """Control JPEG encoding and build strictness."""

    jpeg_quality: int = Field(
        DEFAULT_JPEG_QUALITY,
        ge=JPEG_QUALITY_MIN,
        le=JPEG_QUALITY_MAX,
    )
    strict: bool = DEFAULT_STRICT


class RandomConfig(BaseModel):
    """Seed for the layout coin flip."""

    seed: int | None = Field(DEFAULT_SEED, ge=0)


class ThumbnailConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of a thumbnail TOML file, grouping related
    parameters under logical categories.
    """

    # model_validate({}) populates each section from its Field defaults
    layout: LayoutConfig = Field(
        default_factory=lambda: LayoutConfig.model_validate({}),
    )
    colors: ColorConfig = Field(
        default_factory=lambda: ColorConfig.model_validate({}),
    )
    output: OutputConfig = Field(
        default_factory=lambda: OutputConfig.model_validate({}),
    )
    random: RandomConfig = Field(
        default_factory=lambda: RandomConfig.model_validate({}),
    )

    def to_layout_params(self) -> LayoutParams:
        """Build the engine parameters from the layout and color sections."""
        return LayoutParams(
            total_width=self.layout.total_width,
            padding=self.layout.padding,
            border_width=self.layout.border_width,
            bg_color=self.colors.background,
            border_color=self.colors.border,
        )


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str | Path) -> ThumbnailConfig:
        """
        Load a thumbnail configuration from a TOML file.

        Returns a validated ThumbnailConfig instance based on the file
        contents.
        """
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        return ThumbnailConfig.model_validate(doc.unwrap())
