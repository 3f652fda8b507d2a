import io

import pytest

from farbfeld.models import FarbfeldImage, Pixel


@pytest.fixture
def sample_pixel():
    # Alpha 0xF17E (61822) matches the trailing bytes of sample_bytes
    return Pixel(4660, 22136, 43981, 61822)


@pytest.fixture
def sample_bytes():
    # Header plus one pixel, as laid out on disk
    return bytes.fromhex(
        "6661726266656c64" "00000001" "00000001" "12345678abcdf17e"
    )


@pytest.fixture
def small_image():
    # 3×2 image with a distinct pixel at every flat index
    image = FarbfeldImage(3, 2)
    for i in range(6):
        image[i] = Pixel(i * 1000, i * 2000, i * 3000, 65535)
    return image


class TrickleReader(io.RawIOBase):
    """Binary stream that returns at most ``step`` bytes per read."""

    def __init__(self, data, step=3):
        self._data = data
        self._pos = 0
        self._step = step

    def readable(self):
        return True

    def read(self, size=-1):
        if size < 0:
            size = len(self._data) - self._pos
        size = min(size, self._step)
        chunk = self._data[self._pos : self._pos + size]
        self._pos += len(chunk)
        return chunk


@pytest.fixture
def trickle_reader():
    return TrickleReader
