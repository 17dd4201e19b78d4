import logging

import pytest

from pgmflip.netpbm import ByteStream

EXAMPLE_P2 = b"P2\n2 2\n255\n10 20\n30 40\n"


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("pgmflip")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def example_stream():
    return ByteStream(EXAMPLE_P2)


@pytest.fixture
def write_file(tmp_path):
    def _write(name, data):
        path = tmp_path / name
        path.write_bytes(data)
        return str(path)

    return _write
