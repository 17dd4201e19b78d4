from __future__ import annotations

from typing import List, Optional

from PIL import Image

from ..netpbm.types import MonochromeImage, RasterImage

THRESHOLD_OFFSET = 13


def adaptive_threshold(values: List[int]) -> int:
    """Mean intensity minus a small offset, clamped to the 8-bit range."""
    avg = sum(values) / len(values) if values else 0
    return int(max(0, min(255, avg - THRESHOLD_OFFSET)))


def to_luminance(value: int, max_intensity: int) -> int:
    if 0 < max_intensity < 255:
        return min(255, value * 255 // max_intensity)
    return value


def raster_to_pil(image: RasterImage) -> Image.Image:
    """Build a Pillow ``L`` image, scaling values to 0-255 by ``max_intensity``."""
    data = bytes(
        to_luminance(value, image.max_intensity) for row in image.pixels for value in row
    )
    return Image.frombytes("L", (image.width, image.height), data)


def to_monochrome(image: RasterImage, threshold: Optional[int] = None, dither: bool = False) -> MonochromeImage:
    """Reduce a raster to black/white, keeping its dimensions."""
    if dither:
        data = list(raster_to_pil(image).convert("1").getdata())
        bits = [p == 0 for p in data]
    else:
        values = [value for row in image.pixels for value in row]
        if threshold is None:
            threshold = adaptive_threshold(values)
        bits = [value <= threshold for value in values]
    width = image.width
    rows = [bits[y * width : (y + 1) * width] for y in range(image.height)]
    return MonochromeImage(image.width, image.height, rows)
