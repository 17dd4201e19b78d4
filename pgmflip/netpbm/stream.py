from __future__ import annotations

import io
from typing import BinaryIO, Union


class ByteStream:
    """Sequential reader with line and fixed-size reads sharing one cursor."""

    def __init__(self, source: Union[bytes, bytearray, BinaryIO]) -> None:
        if isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(bytes(source))
        self._source = source

    def read_line(self) -> bytes:
        """Return the next line including its newline, or b"" at end of stream."""
        return self._source.readline()

    def read_exact(self, size: int) -> bytes:
        """Read up to ``size`` bytes, stopping early only at end of stream."""
        chunks = []
        remaining = size
        while remaining > 0:
            chunk = self._source.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def tell(self) -> int:
        return self._source.tell()
