"""
Image decoding and the per-image ratio model.

Decoders are looked up in a small registry keyed by format tag. The tag
comes from the caller when given, otherwise from the content signature,
and only as a last resort from the file extension.
"""
from __future__ import annotations

import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image, UnidentifiedImageError

from album_thumbnail.errors import InvalidImageError, UnsupportedFormatError
from album_thumbnail.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Iterable

    Decoder = Callable[[bytes], Image.Image]


@dataclass(eq=False)
class SourceImage:
    """Decoded image together with its pixel size and aspect ratio."""

    image: Image.Image
    width: int
    height: int
    closed: bool = field(default=False, init=False)

    @classmethod
    def from_pil(cls, img: Image.Image) -> SourceImage:
        """Wrap a Pillow image, rejecting sizes with no defined ratio."""
        width, height = img.size
        if width <= 0 or height <= 0:
            msg = f"Image has no usable size: {width}x{height}"
            raise InvalidImageError(msg)
        return cls(image=img, width=width, height=height)

    @property
    def ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height

    def close(self) -> None:
        """Release the pixel buffer. Safe to call more than once."""
        if not self.closed:
            self.image.close()
            self.closed = True


def _pil_decoder(pil_format: str) -> Decoder:
    """Return a decoder that only accepts ``pil_format`` content."""

    def decode_bytes(data: bytes) -> Image.Image:
        with Image.open(io.BytesIO(data), formats=[pil_format]) as img:
            # copy() forces a full load, detaching pixels from the buffer.
            # The mode is kept so alpha can be flattened onto the canvas.
            return img.copy()

    return decode_bytes


DECODERS: dict[str, Decoder] = {
    "jpeg": _pil_decoder("JPEG"),
    "gif": _pil_decoder("GIF"),
    "png": _pil_decoder("PNG"),
}

SIGNATURES: dict[bytes, str] = {
    b"\xff\xd8\xff": "jpeg",
    b"GIF87a": "gif",
    b"GIF89a": "gif",
    b"\x89PNG\r\n\x1a\n": "png",
}

EXTENSIONS: dict[str, str] = {
    ".jpg": "jpeg",
    ".jpeg": "jpeg",
    ".jpe": "jpeg",
    ".gif": "gif",
    ".png": "png",
}


def register_decoder(
    tag: str,
    decoder: Decoder,
    *,
    signatures: Iterable[bytes] = (),
    extensions: Iterable[str] = (),
) -> None:
    """Add or replace a decoder and the signatures/extensions mapping to it."""
    DECODERS[tag] = decoder
    for sig in signatures:
        SIGNATURES[sig] = tag
    for ext in extensions:
        EXTENSIONS[ext.lower()] = tag


def sniff_format(data: bytes) -> str | None:
    """Return the format tag whose magic signature prefixes ``data``."""
    for sig, tag in SIGNATURES.items():
        if data.startswith(sig):
            return tag
    return None


def resolve_format(
    data: bytes,
    *,
    format_hint: str | None = None,
    path: Path | None = None,
) -> str:
    """
    Pick the decoder tag for ``data``.

    An explicit ``format_hint`` wins, then the sniffed signature, then
    the extension of ``path``.

    Raises:
        UnsupportedFormatError: If no registered decoder matches.

    """
    if format_hint is not None:
        tag = format_hint.lower()
        if tag not in DECODERS:
            msg = f"No decoder registered for format '{format_hint}'"
            raise UnsupportedFormatError(msg)
        return tag

    tag = sniff_format(data)
    if tag is not None:
        return tag

    if path is not None:
        tag = EXTENSIONS.get(path.suffix.lower())
        if tag is not None and tag in DECODERS:
            return tag

    name = f"'{path}'" if path is not None else "input"
    msg = f"Unrecognized image format for {name}"
    raise UnsupportedFormatError(msg)


def decode(
    source: str | Path | bytes,
    *,
    format_hint: str | None = None,
) -> SourceImage:
    """
    Decode a file path or raw bytes into a :class:`SourceImage`.

    Raises:
        FileNotFoundError: If a path is given and does not exist.
        UnsupportedFormatError: If the content cannot be decoded.
        InvalidImageError: If the decoded image has no usable size.

    """
    path: Path | None = None
    if isinstance(source, bytes):
        data = source
    else:
        path = Path(source)
        try:
            data = path.read_bytes()
        except FileNotFoundError as e:
            msg = f"Image file not found: '{path}'"
            raise FileNotFoundError(msg) from e

    tag = resolve_format(data, format_hint=format_hint, path=path)
    try:
        img = DECODERS[tag](data)
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        EOFError,
        SyntaxError,
    ) as e:
        name = f"'{path}'" if path is not None else "input"
        msg = f"Error decoding {name} as {tag}: {e!s}"
        raise UnsupportedFormatError(msg) from e

    logger.debug("Decoded %s image %dx%d", tag, img.width, img.height)
    return SourceImage.from_pil(img)
