import pytest
from farbfeld.models import FarbfeldImage, Pixel


@pytest.fixture
def ten_by_ten():
    # Flat index i holds a pixel whose red channel is i
    image = FarbfeldImage(10, 10)
    image.pixels = [Pixel(i, 0, 0, 0) for i in range(100)]
    return image


@pytest.fixture
def two_by_two():
    return FarbfeldImage(2, 2, pixels=[Pixel(i + 1, 0, 0, 0) for i in range(4)])
