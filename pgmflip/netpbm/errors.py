from __future__ import annotations

from typing import Optional


class PgmError(ValueError):
    """Base class for every PGM decoding failure."""


class HeaderError(PgmError):
    """The three-line header could not be parsed."""


class InvalidFormatTag(HeaderError):
    pass


class MalformedDimensions(HeaderError):
    pass


class MalformedMaxIntensity(HeaderError):
    pass


class PixelDataError(PgmError):
    """Pixel data after the header could not be decoded."""

    def __init__(self, message: str, row: int, column: Optional[int] = None) -> None:
        super().__init__(message)
        self.row = row
        self.column = column


class RowReadError(PixelDataError):
    def __init__(self, row: int, reason: str = "unexpected end of stream") -> None:
        super().__init__(f"Cannot read pixel row {row}: {reason}", row)


class TokenIndexOutOfRange(PixelDataError):
    def __init__(self, row: int, column: int, width: int) -> None:
        super().__init__(
            f"Too many pixel values on row {row}: column {column} is outside width {width}",
            row,
            column,
        )
        self.width = width


class PixelParseError(PixelDataError):
    def __init__(self, row: int, column: int, token: str) -> None:
        super().__init__(
            f"Invalid pixel value {token!r} at row {row}, column {column}",
            row,
            column,
        )
        self.token = token


class UnexpectedEndOfStream(PixelDataError):
    def __init__(self, row: int, expected: int, received: int) -> None:
        if received == 0:
            message = f"Unexpected end of stream at row {row}"
        else:
            message = (
                f"Unexpected end of stream at row {row}: "
                f"expected {expected} bytes, got {received}"
            )
        super().__init__(message, row)
        self.expected = expected
        self.received = received
