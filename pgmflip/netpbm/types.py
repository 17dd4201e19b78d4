from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, NamedTuple

from ..rendering.transforms import flip_rows, invert_rows


class FormatTag(enum.Enum):
    ASCII = "P2"
    BINARY = "P5"

    @classmethod
    def from_magic(cls, value: str) -> "FormatTag":
        return cls(value)


class PgmHeader(NamedTuple):
    format_tag: FormatTag
    width: int
    height: int
    max_intensity: int


@dataclass
class RasterImage:
    """Decoded 8-bit grayscale grid, row-major."""

    width: int
    height: int
    max_intensity: int
    format_tag: FormatTag
    pixels: List[List[int]] = field(default_factory=list)

    def validate(self) -> None:
        """Check the grid matches the declared dimensions and 8-bit range."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Width and height must be positive")
        if len(self.pixels) != self.height:
            raise ValueError(f"Expected {self.height} rows, got {len(self.pixels)}")
        for y, row in enumerate(self.pixels):
            if len(row) != self.width:
                raise ValueError(f"Row {y} has {len(row)} values, expected {self.width}")
            for value in row:
                if not 0 <= value <= 255:
                    raise ValueError(f"Row {y} holds out of range value {value}")

    def invert(self) -> None:
        """Replace each value ``v`` with ``max_intensity - v`` (8-bit wrap)."""
        invert_rows(self.pixels, self.max_intensity)

    def flip_horizontal(self) -> None:
        """Mirror every row in place."""
        flip_rows(self.pixels)

    def copy(self) -> "RasterImage":
        return RasterImage(
            self.width,
            self.height,
            self.max_intensity,
            self.format_tag,
            [list(row) for row in self.pixels],
        )


@dataclass
class MonochromeImage:
    """Black/white grid; ``True`` marks a black pixel as in PBM."""

    width: int
    height: int
    pixels: List[List[bool]] = field(default_factory=list)

    def validate(self) -> None:
        if len(self.pixels) != self.height:
            raise ValueError(f"Expected {self.height} rows, got {len(self.pixels)}")
        for y, row in enumerate(self.pixels):
            if len(row) != self.width:
                raise ValueError(f"Row {y} has {len(row)} values, expected {self.width}")
