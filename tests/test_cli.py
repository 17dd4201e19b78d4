import pytest

from pgmflip.app.cli import main, parse_args


def test_defaults():
    args = parse_args([])
    assert args.path == "example.pgm"
    assert args.output == "output.pbm"
    assert not args.no_invert and not args.no_flip and not args.dither


def test_converts_file(write_file, tmp_path):
    path = write_file("in.pgm", b"P5\n2 1\n255\n\x00\xff")
    output = tmp_path / "out.pbm"
    assert main([path, "-o", str(output), "--plain", "--threshold", "128"]) == 0
    # inverted to [255, 0], flipped to [0, 255]
    assert output.read_bytes() == b"P1\n2 1\n1 0\n"


def test_no_flip(write_file, tmp_path):
    path = write_file("in.pgm", b"P5\n2 1\n255\n\x00\xff")
    output = tmp_path / "out.pbm"
    assert main([path, "-o", str(output), "--no-flip", "--plain", "--threshold", "128"]) == 0
    assert output.read_bytes() == b"P1\n2 1\n0 1\n"


def test_decode_failure_exit_code(write_file, tmp_path, capsys):
    path = write_file("bad.pgm", b"P9\n1 1\n255\n0\n")
    output = tmp_path / "out.pbm"
    assert main([path, "-o", str(output)]) == 2
    assert "Invalid format tag" in capsys.readouterr().err
    assert not output.exists()


@pytest.mark.parametrize("argv", [["--threshold", "300"], ["--threshold", "x"], ["--dither", "--threshold", "5"]])
def test_invalid_arguments(argv):
    with pytest.raises(SystemExit) as info:
        parse_args(argv)
    assert info.value.code == 2
