"""Shared default values for user-facing configuration settings."""
from album_thumbnail.constants import COLOR_GREY, COLOR_WHITE

# Layout
DEFAULT_TOTAL_WIDTH = 196
DEFAULT_PADDING = 2
DEFAULT_BORDER_WIDTH = 1

# Colors
DEFAULT_BACKGROUND_COLOR = COLOR_WHITE
DEFAULT_BORDER_COLOR = COLOR_GREY

# Output
DEFAULT_JPEG_QUALITY = 75
DEFAULT_STRICT = False

# Random
DEFAULT_SEED: int | None = None
