"""Exception types raised while decoding images and building thumbnails."""


class AlbumThumbnailError(Exception):
    """Base class for album thumbnail errors."""


class InvalidImageError(AlbumThumbnailError, ValueError):
    """Decoded image has no usable aspect ratio (zero or corrupt size)."""


class UnsupportedFormatError(AlbumThumbnailError, ValueError):
    """No registered decoder recognizes the input."""


class InsufficientImagesError(AlbumThumbnailError, RuntimeError):
    """Fewer than four images were added before a build was requested."""
