import numpy as np
import pytest

from models.image import Image
from models.pixel import Pixel


def _make_image(values, max_value=255, format="ppm"):
    return Image(np.array(values, dtype=np.int64), max_value, format)


@pytest.fixture
def make_image():
    """Factory: nested [[ [r, g, b], ... ], ...] lists → Image."""
    return _make_image


@pytest.fixture
def solid_image():
    """Factory: width x height image filled with one pixel value."""
    def _solid(width, height, channels=(0, 0, 0), max_value=255, format="ppm"):
        arr = np.tile(np.array(channels, dtype=np.int64), (height, width, 1))
        return Image(arr, max_value, format)
    return _solid


@pytest.fixture
def random_image():
    """5x4 RGB image with reproducible random content."""
    rng = np.random.default_rng(42)
    return Image(rng.integers(0, 256, size=(4, 5, 3)), 255, "ppm")


@pytest.fixture
def random_rgba_image():
    rng = np.random.default_rng(7)
    return Image(rng.integers(0, 256, size=(3, 6, 4)), 255, "png")


@pytest.fixture
def gradient_image():
    """Horizontal grey gradient, 8 columns wide, 3 rows tall."""
    pixels = np.zeros((3, 8, 3), dtype=np.int64)
    for x in range(8):
        pixels[:, x, :] = x * 255 // 7
    return Image(pixels, 255, "ppm")


@pytest.fixture
def black_pixel():
    return Pixel(0, 0, 0, 255)
