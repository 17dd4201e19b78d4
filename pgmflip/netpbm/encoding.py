from __future__ import annotations

from typing import List, Optional, Sequence

from .types import FormatTag, MonochromeImage, RasterImage

PLAIN_LINE_LIMIT = 70


def pack_line(line: Sequence[bool]) -> bytes:
    """Pack a row of black/white flags MSB-first, zero-padding the last byte."""
    out = bytearray()
    for i in range(0, len(line), 8):
        chunk = line[i : i + 8]
        value = 0
        for bit, pix in enumerate(chunk):
            if pix:
                value |= 1 << (7 - bit)
        out.append(value)
    return bytes(out)


def wrap_tokens(tokens: List[str], limit: int = PLAIN_LINE_LIMIT) -> List[str]:
    """Join tokens with spaces into lines no longer than ``limit`` characters."""
    lines: List[str] = []
    current = ""
    for token in tokens:
        if current and len(current) + 1 + len(token) > limit:
            lines.append(current)
            current = token
        elif current:
            current += " " + token
        else:
            current = token
    if current:
        lines.append(current)
    return lines


def encode_pbm(image: MonochromeImage, plain: bool = False) -> bytes:
    """Serialize a monochrome image as binary ``P4`` or plain ``P1`` PBM."""
    image.validate()
    header = f"{'P1' if plain else 'P4'}\n{image.width} {image.height}\n".encode("ascii")
    out = bytearray(header)
    for row in image.pixels:
        if plain:
            for line in wrap_tokens(["1" if pix else "0" for pix in row]):
                out += line.encode("ascii") + b"\n"
        else:
            out += pack_line(row)
    return bytes(out)


def write_pbm(image: MonochromeImage, path: str, plain: bool = False) -> None:
    """Write ``image`` to ``path`` as PBM."""
    data = encode_pbm(image, plain=plain)
    with open(path, "wb") as handle:
        handle.write(data)


def encode_pgm(image: RasterImage, format_tag: Optional[FormatTag] = None) -> bytes:
    """Serialize a raster back to ``P2`` or ``P5``, one text line per row for ``P2``."""
    image.validate()
    tag = format_tag or image.format_tag
    out = bytearray(f"{tag.value}\n{image.width} {image.height}\n{image.max_intensity}\n".encode("ascii"))
    for row in image.pixels:
        if tag is FormatTag.ASCII:
            out += " ".join(str(value) for value in row).encode("ascii") + b"\n"
        else:
            out += bytes(row)
    return bytes(out)
