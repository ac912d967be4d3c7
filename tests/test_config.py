"""
Unit tests for the config module.

Covers:
- Successful loading of a valid TOML file
- Default fallbacks for missing values
- Error handling for missing files and invalid values
- Conversion to engine layout parameters
"""
import tempfile
from typing import Any

import pytest
import tomlkit
from pydantic import ValidationError

import album_thumbnail.config as at_config
from album_thumbnail.config_defaults import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_BORDER_COLOR,
    DEFAULT_BORDER_WIDTH,
    DEFAULT_JPEG_QUALITY,
    DEFAULT_PADDING,
    DEFAULT_STRICT,
    DEFAULT_TOTAL_WIDTH,
)
from album_thumbnail.layout import LayoutParams


def create_toml_file(data: dict[str, Any]) -> str:
    """Write a TOML string to a temporary file and return its path."""
    doc = tomlkit.document()
    doc.update(data)
    toml_str = tomlkit.dumps(doc)

    with tempfile.NamedTemporaryFile(
        delete=False,
        suffix=".toml",
        mode="w",
        encoding="utf-8",
    ) as temp:
        temp.write(toml_str)
        return temp.name


def test_load_valid_config() -> None:
    """A complete TOML file loads into typed sections."""
    path = create_toml_file({
        "layout": {"total_width": 400, "padding": 4, "border_width": 2},
        "colors": {"background": "#000000", "border": "#ff8000"},
        "output": {"jpeg_quality": 90, "strict": True},
        "random": {"seed": 7},
    })
    cfg = at_config.ConfigLoader.load(path)

    assert isinstance(cfg, at_config.ThumbnailConfig)
    assert cfg.layout.total_width == 400  # noqa: PLR2004
    assert cfg.layout.padding == 4  # noqa: PLR2004
    assert cfg.layout.border_width == 2  # noqa: PLR2004
    assert cfg.colors.background == (0, 0, 0)
    assert cfg.colors.border == (255, 128, 0)
    assert cfg.output.jpeg_quality == 90  # noqa: PLR2004
    assert cfg.output.strict is True
    assert cfg.random.seed == 7  # noqa: PLR2004


def test_missing_sections_use_defaults() -> None:
    cfg = at_config.ConfigLoader.load(create_toml_file({"layout": {}}))
    assert cfg.layout.total_width == DEFAULT_TOTAL_WIDTH
    assert cfg.layout.padding == DEFAULT_PADDING
    assert cfg.layout.border_width == DEFAULT_BORDER_WIDTH
    assert cfg.colors.background == DEFAULT_BACKGROUND_COLOR
    assert cfg.colors.border == DEFAULT_BORDER_COLOR
    assert cfg.output.jpeg_quality == DEFAULT_JPEG_QUALITY
    assert cfg.output.strict is DEFAULT_STRICT
    assert cfg.random.seed is None


def test_missing_file_raises() -> None:
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        at_config.ConfigLoader.load("does/not/exist.toml")


@pytest.mark.parametrize(
    "data",
    [
        {"layout": {"total_width": 0}},
        {"layout": {"padding": -1}},
        {"output": {"jpeg_quality": 100}},
        {"colors": {"border": "#12345"}},
        {"colors": {"background": [1, 2]}},
        {"colors": {"background": [0, 0, 256]}},
        {"random": {"seed": -3}},
    ],
)
def test_invalid_values_rejected(data: dict[str, Any]) -> None:
    with pytest.raises(ValidationError):
        at_config.ConfigLoader.load(create_toml_file(data))


def test_color_accepts_rgb_list() -> None:
    cfg = at_config.ThumbnailConfig.model_validate(
        {"colors": {"background": [10, 20, 30]}},
    )
    assert cfg.colors.background == (10, 20, 30)


def test_parse_hex_color() -> None:
    assert at_config.parse_hex_color("#0a0b0c") == (10, 11, 12)
    assert at_config.parse_hex_color(" ffffff ") == (255, 255, 255)
    with pytest.raises(ValueError, match="must look like #rrggbb"):
        at_config.parse_hex_color("#fff")
    with pytest.raises(ValueError, match="invalid hex digits"):
        at_config.parse_hex_color("#xx0000")


def test_to_layout_params() -> None:
    cfg = at_config.ThumbnailConfig.model_validate({
        "layout": {"total_width": 250, "padding": 3, "border_width": 0},
        "colors": {"background": "#010203", "border": "#040506"},
    })
    assert cfg.to_layout_params() == LayoutParams(
        total_width=250,
        padding=3,
        border_width=0,
        bg_color=(1, 2, 3),
        border_color=(4, 5, 6),
    )


def test_default_layout_params_match_defaults() -> None:
    cfg = at_config.ThumbnailConfig.model_validate({})
    assert cfg.to_layout_params() == LayoutParams()
