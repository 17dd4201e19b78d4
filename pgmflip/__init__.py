from .conversion import ConversionSettings, PgmConverter
from .netpbm import (
    FormatTag,
    MonochromeImage,
    PgmError,
    RasterImage,
    decode_pgm,
    encode_pbm,
    read_pgm,
    write_pbm,
)
from .rendering.renderer import to_monochrome

__version__ = "0.1.0"

__all__ = [
    "ConversionSettings",
    "decode_pgm",
    "encode_pbm",
    "FormatTag",
    "MonochromeImage",
    "PgmConverter",
    "PgmError",
    "RasterImage",
    "read_pgm",
    "to_monochrome",
    "write_pbm",
]
