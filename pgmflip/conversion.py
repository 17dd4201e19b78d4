from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .netpbm import MonochromeImage, RasterImage, encode_pbm, read_pgm
from .rendering.renderer import to_monochrome

SUPPORTED_EXTENSIONS = {".pgm", ".pnm"}

logger = logging.getLogger(__name__)


@dataclass
class ConversionSettings:
    invert: bool = True
    flip: bool = True
    dither: bool = False
    threshold: Optional[int] = None
    plain: bool = False


class PgmConverter:
    def __init__(self, settings: Optional[ConversionSettings] = None) -> None:
        self.settings = settings or ConversionSettings()

    def convert_image(self, image: RasterImage) -> MonochromeImage:
        """Apply the configured transforms in place and threshold the result."""
        image.validate()
        if self.settings.invert:
            logger.debug("Inverting against max intensity %d", image.max_intensity)
            image.invert()
        if self.settings.flip:
            logger.debug("Flipping %d rows horizontally", image.height)
            image.flip_horizontal()
        return to_monochrome(image, threshold=self.settings.threshold, dither=self.settings.dither)

    def convert_file(self, path: str) -> bytes:
        self._validate_input_path(path)
        image = read_pgm(path)
        logger.debug(
            "Decoded %s: %dx%d %s, max intensity %d",
            path,
            image.width,
            image.height,
            image.format_tag.value,
            image.max_intensity,
        )
        mono = self.convert_image(image)
        return encode_pbm(mono, plain=self.settings.plain)

    def convert_to_file(self, path: str, output: str) -> None:
        data = self.convert_file(path)
        with open(output, "wb") as handle:
            handle.write(data)
        logger.info("Wrote %s (%d bytes)", output, len(data))

    @staticmethod
    def _validate_input_path(path: str) -> None:
        ext = os.path.splitext(path)[1].lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise ValueError("Supported formats: " + ", ".join(sorted(SUPPORTED_EXTENSIONS)))
        if not os.path.isfile(path):
            raise FileNotFoundError(f"File not found: {path}")
