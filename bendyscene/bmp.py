"""Reading 24-bit uncompressed BMP files into RGB pixel data."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

__all__ = ["BitmapError", "Image", "load_bmp", "parse_bmp"]

_MAGIC = b"BM"
_OFFSET_FIELDS = 10
_SIZE_FIELDS = 18
_BITS_FIELD = 28
_COMPRESSION_FIELD = 30

_UNSUPPORTED_HEADERS = {
    64: "Can't load OS/2 V2 bitmaps",
    108: "Can't load Windows V4 bitmaps",
    124: "Can't load Windows V5 bitmaps",
}


class BitmapError(ValueError):
    """Raised when data is not a bitmap that can be read."""


@dataclass(frozen=True)
class Image:
    """An RGB image.

    ``pixels`` holds one (R, G, B) byte triple per pixel, starting at the
    bottom-left pixel and running right along each row, then up.
    """

    pixels: bytes
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        expected = self.width * self.height * 3
        if len(self.pixels) != expected:
            raise ValueError(
                f"expected {expected} bytes of pixel data, got {len(self.pixels)}"
            )


def _unpack(fmt: str, data: bytes, offset: int) -> tuple:
    try:
        return struct.unpack_from(fmt, data, offset)
    except struct.error as exc:
        raise BitmapError("Truncated bitmap header") from exc


def parse_bmp(data: bytes) -> Image:
    """Decode the bytes of a 24-bit uncompressed bitmap."""
    if data[:2] != _MAGIC:
        raise BitmapError("Not a bitmap file")
    data_offset, header_size = _unpack("<ii", data, _OFFSET_FIELDS)

    if header_size in _UNSUPPORTED_HEADERS:
        raise BitmapError(_UNSUPPORTED_HEADERS[header_size])
    if header_size not in (40, 12):
        raise BitmapError("Unknown bitmap format")

    width, height = _unpack("<ii", data, _SIZE_FIELDS)
    (bits,) = _unpack("<h", data, _BITS_FIELD)
    if bits != 24:
        raise BitmapError("Image is not 24 bits per pixel")
    if header_size == 40:
        (compression,) = _unpack("<h", data, _COMPRESSION_FIELD)
        if compression != 0:
            raise BitmapError("Image is compressed")

    if width < 0 or height < 0:
        raise BitmapError("Unsupported bitmap dimensions")
    if data_offset < 0:
        raise BitmapError("Invalid pixel data offset")

    row_length = width * 3
    stride = (row_length + 3) // 4 * 4
    pixels = bytearray()
    for y in range(height):
        start = data_offset + y * stride
        row = data[start:start + row_length]
        if len(row) < row_length:
            raise BitmapError("Truncated pixel data")
        rgb = bytearray(row)
        rgb[0::3] = row[2::3]
        rgb[2::3] = row[0::3]
        pixels += rgb
    return Image(bytes(pixels), width, height)


def load_bmp(path: str | PathLike[str]) -> Image:
    """Read and decode a bitmap file."""
    return parse_bmp(Path(path).read_bytes())