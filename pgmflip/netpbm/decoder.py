from __future__ import annotations

import re
from typing import List

from .errors import PixelParseError, RowReadError, TokenIndexOutOfRange, UnexpectedEndOfStream
from .header import parse_header
from .stream import ByteStream
from .types import FormatTag, RasterImage

_PIXEL_RE = re.compile(rb"[0-9]+")


def parse_pixel_token(token: bytes, row: int, column: int) -> int:
    """Parse one ASCII pixel token as an unsigned 8-bit value."""
    if _PIXEL_RE.fullmatch(token):
        value = int(token)
        if value <= 0xFF:
            return value
    raise PixelParseError(row, column, token.decode("latin-1"))


def decode_ascii_row(stream: ByteStream, row: int, width: int) -> List[int]:
    """Decode one text line of up to ``width`` tokens; missing values stay 0."""
    try:
        line = stream.read_line()
    except OSError as exc:
        raise RowReadError(row, str(exc)) from exc
    if not line:
        raise RowReadError(row)
    if not line.endswith(b"\n"):
        raise RowReadError(row, "unterminated line")
    values = [0] * width
    for column, token in enumerate(line.split()):
        if column >= width:
            raise TokenIndexOutOfRange(row, column, width)
        values[column] = parse_pixel_token(token, row, column)
    return values


def decode_binary_row(stream: ByteStream, row: int, width: int) -> List[int]:
    """Decode exactly ``width`` raw bytes, one per pixel."""
    data = stream.read_exact(width)
    if len(data) < width:
        raise UnexpectedEndOfStream(row, width, len(data))
    return list(data)


def decode_pixels(stream: ByteStream, format_tag: FormatTag, width: int, height: int) -> List[List[int]]:
    """Decode ``height`` rows of pixel data following the header."""
    if format_tag is FormatTag.ASCII:
        decode_row = decode_ascii_row
    else:
        decode_row = decode_binary_row
    return [decode_row(stream, y, width) for y in range(height)]


def decode_pgm(stream: ByteStream) -> RasterImage:
    """Decode a complete PGM image from a stream."""
    header = parse_header(stream)
    pixels = decode_pixels(stream, header.format_tag, header.width, header.height)
    return RasterImage(
        width=header.width,
        height=header.height,
        max_intensity=header.max_intensity,
        format_tag=header.format_tag,
        pixels=pixels,
    )


def decode_pgm_bytes(data: bytes) -> RasterImage:
    return decode_pgm(ByteStream(data))


def read_pgm(path: str) -> RasterImage:
    """Open ``path`` and decode it as a PGM image."""
    with open(path, "rb") as handle:
        return decode_pgm(ByteStream(handle))
