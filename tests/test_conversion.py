import logging

import pytest

from pgmflip.conversion import ConversionSettings, PgmConverter
from pgmflip.netpbm import FormatTag, PixelParseError, RasterImage

EXAMPLE = b"P2\n2 2\n255\n10 20\n30 40\n"


def test_convert_image_inverts_then_flips():
    image = RasterImage(2, 2, 255, FormatTag.ASCII, [[10, 20], [30, 40]])
    mono = PgmConverter(ConversionSettings(threshold=220)).convert_image(image)
    assert image.pixels == [[235, 245], [215, 225]]
    assert mono.pixels == [[False, False], [True, False]]


def test_convert_image_without_transforms():
    image = RasterImage(2, 1, 255, FormatTag.ASCII, [[10, 200]])
    settings = ConversionSettings(invert=False, flip=False, threshold=100)
    mono = PgmConverter(settings).convert_image(image)
    assert image.pixels == [[10, 200]]
    assert mono.pixels == [[True, False]]


def test_convert_file_plain(write_file):
    path = write_file("example.pgm", EXAMPLE)
    data = PgmConverter(ConversionSettings(threshold=220, plain=True)).convert_file(path)
    assert data == b"P1\n2 2\n0 0\n1 0\n"


def test_convert_to_file_logs_output(write_file, tmp_path, caplog):
    path = write_file("example.pgm", EXAMPLE)
    output = tmp_path / "output.pbm"
    with caplog.at_level(logging.DEBUG, logger="pgmflip"):
        PgmConverter(ConversionSettings(threshold=220)).convert_to_file(path, str(output))
    assert output.read_bytes() == b"P4\n2 2\n\x00\x80"
    assert "Decoded" in caplog.text
    assert "Wrote" in caplog.text


def test_rejects_unsupported_extension(write_file):
    path = write_file("example.png", EXAMPLE)
    with pytest.raises(ValueError, match="Supported formats"):
        PgmConverter().convert_file(path)


def test_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        PgmConverter().convert_file(str(tmp_path / "nope.pgm"))


def test_decode_errors_propagate(write_file):
    path = write_file("bad.pgm", b"P2\n2 1\n255\n1 x\n")
    with pytest.raises(PixelParseError):
        PgmConverter().convert_file(path)
