from __future__ import annotations

import re
from typing import Optional, Tuple, Type

from .errors import HeaderError, InvalidFormatTag, MalformedDimensions, MalformedMaxIntensity
from .stream import ByteStream
from .types import FormatTag, PgmHeader

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


def parse_decimal(token: str) -> Optional[int]:
    """Return the integer for a plain decimal token, or None."""
    if not _DECIMAL_RE.fullmatch(token):
        return None
    return int(token)


def read_header_line(stream: ByteStream, error: Type[HeaderError], label: str) -> bytes:
    """Read one newline-terminated header line with ASCII whitespace trimmed."""
    line = stream.read_line()
    if not line:
        raise error(f"Unexpected end of stream while reading the {label}")
    if not line.endswith(b"\n"):
        raise error(f"Unterminated {label} line: {line!r}")
    return line.strip()


def parse_format_tag(stream: ByteStream) -> FormatTag:
    """Parse line 1: the ``P2``/``P5`` format tag."""
    value = read_header_line(stream, InvalidFormatTag, "format tag").decode("latin-1")
    try:
        return FormatTag.from_magic(value)
    except ValueError:
        raise InvalidFormatTag(f"Invalid format tag: {value!r}") from None


def parse_dimensions(stream: ByteStream) -> Tuple[int, int]:
    """Parse line 2: ``<width> <height>``, both positive."""
    value = read_header_line(stream, MalformedDimensions, "dimensions")
    fields = [field.decode("latin-1") for field in value.split()]
    text = value.decode("latin-1")
    if len(fields) != 2:
        raise MalformedDimensions(f"Invalid dimensions: {text!r}")
    width = parse_decimal(fields[0])
    height = parse_decimal(fields[1])
    if width is None or height is None:
        raise MalformedDimensions(f"Invalid dimensions: {text!r}")
    if width <= 0 or height <= 0:
        raise MalformedDimensions(
            f"Invalid dimensions: width and height must be positive, got {width}x{height}"
        )
    return width, height


def parse_max_intensity(stream: ByteStream) -> int:
    """Parse line 3: the maximum intensity value."""
    value = read_header_line(stream, MalformedMaxIntensity, "maximum intensity").decode("latin-1")
    max_intensity = parse_decimal(value)
    if max_intensity is None:
        raise MalformedMaxIntensity(f"Invalid maximum intensity: {value!r}")
    if max_intensity < 0:
        raise MalformedMaxIntensity(f"Maximum intensity must not be negative, got {max_intensity}")
    return max_intensity


def parse_header(stream: ByteStream) -> PgmHeader:
    """Read the three header lines and leave the cursor at the first pixel byte."""
    format_tag = parse_format_tag(stream)
    width, height = parse_dimensions(stream)
    max_intensity = parse_max_intensity(stream)
    return PgmHeader(format_tag, width, height, max_intensity)
