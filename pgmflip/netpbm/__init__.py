from .decoder import decode_pgm, decode_pgm_bytes, decode_pixels, read_pgm
from .encoding import encode_pbm, encode_pgm, pack_line, write_pbm
from .errors import (
    HeaderError,
    InvalidFormatTag,
    MalformedDimensions,
    MalformedMaxIntensity,
    PgmError,
    PixelDataError,
    PixelParseError,
    RowReadError,
    TokenIndexOutOfRange,
    UnexpectedEndOfStream,
)
from .header import parse_header
from .stream import ByteStream
from .types import FormatTag, MonochromeImage, PgmHeader, RasterImage

__all__ = [
    "ByteStream",
    "decode_pgm",
    "decode_pgm_bytes",
    "decode_pixels",
    "encode_pbm",
    "encode_pgm",
    "FormatTag",
    "HeaderError",
    "InvalidFormatTag",
    "MalformedDimensions",
    "MalformedMaxIntensity",
    "MonochromeImage",
    "pack_line",
    "parse_header",
    "PgmError",
    "PgmHeader",
    "PixelDataError",
    "PixelParseError",
    "RasterImage",
    "read_pgm",
    "RowReadError",
    "TokenIndexOutOfRange",
    "UnexpectedEndOfStream",
    "write_pbm",
]
