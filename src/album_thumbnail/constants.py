"""
Constants used internally by the album thumbnail builder.

These are implementation-level values that should not be overridden
via config files or CLI arguments.
"""

# Layout selection thresholds, applied to ratios sorted ascending
WIDE_ALL_MIN_RATIO = 2.0          # r0 above this: every image is wide
TALL_THREE_MAX_RATIO = 0.8        # r2 below this: three images are tall
ONE_TALL_MAX_RATIO = 1.0          # r0 at or below this with ...
ONE_TALL_OTHERS_MIN_RATIO = 1.2   # ... r1 above this: one tall image
TWO_TALL_MAX_RATIO = 1.0          # r1 at or below this with ...
TWO_TALL_OTHERS_MIN_RATIO = 1.3   # ... r2 above this: two tall, two wide

# Number of images a thumbnail is built from
THUMBNAIL_IMAGE_COUNT = 4

# JPEG encoding
JPEG_QUALITY_MIN = 1
JPEG_QUALITY_MAX = 95

# Internal color constants
COLOR_MODE_RGB = "RGB"
COLOR_WHITE = (255, 255, 255)
COLOR_GREY = (128, 128, 128)
COLOR_BLACK = (0, 0, 0)
