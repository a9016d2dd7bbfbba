"""
Tests for the Pixel value object.
"""

import pytest

from models.exceptions import InvalidArgumentError
from models.pixel import Pixel


class TestPixelConstruction:

    def test_channels_read_back(self):
        px = Pixel(10, 20, 30, 255)
        assert (px.red, px.green, px.blue) == (10, 20, 30)
        assert px.max_value == 255
        assert px.alpha is None
        assert not px.has_alpha

    def test_alpha_pixel_reads_back(self):
        px = Pixel(1, 2, 3, 255, alpha=4)
        assert px.channels == (1, 2, 3, 4)
        assert px.has_alpha

    def test_bounds_are_inclusive(self):
        Pixel(0, 0, 0, 255)
        Pixel(255, 255, 255, 255, alpha=255)
        Pixel(0, 0, 0, 0)

    @pytest.mark.parametrize("channels", [
        (-1, 0, 0),
        (0, -1, 0),
        (0, 0, -1),
        (256, 0, 0),
        (0, 256, 0),
        (0, 0, 256),
    ])
    def test_out_of_range_channel_rejected(self, channels):
        with pytest.raises(InvalidArgumentError):
            Pixel(*channels, max_value=255)

    def test_out_of_range_alpha_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Pixel(0, 0, 0, 255, alpha=300)
        with pytest.raises(InvalidArgumentError):
            Pixel(0, 0, 0, 255, alpha=-1)

    def test_negative_max_value_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Pixel(0, 0, 0, -1)

    def test_smaller_max_value_bounds_channels(self):
        Pixel(15, 15, 15, 15)
        with pytest.raises(InvalidArgumentError):
            Pixel(16, 0, 0, 15)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            Pixel(999, 0, 0, 255)


class TestPixelKinds:

    def test_create_pixel_keeps_rgb_kind(self):
        px = Pixel(1, 2, 3, 100).create_pixel(4, 5, 6)
        assert px == Pixel(4, 5, 6, 100)
        assert px.max_value == 100
        assert not px.has_alpha

    def test_create_pixel_keeps_alpha(self):
        px = Pixel(1, 2, 3, 255, alpha=77).create_pixel(9, 8, 7)
        assert px.channels == (9, 8, 7, 77)

    def test_create_pixel_validates(self):
        with pytest.raises(InvalidArgumentError):
            Pixel(1, 2, 3, 10).create_pixel(11, 0, 0)

    def test_from_channels(self):
        assert Pixel.from_channels([1, 2, 3], 255) == Pixel(1, 2, 3, 255)
        assert Pixel.from_channels((1, 2, 3, 4), 255) == Pixel(1, 2, 3, 255, alpha=4)
        with pytest.raises(InvalidArgumentError):
            Pixel.from_channels([1, 2], 255)


class TestPixelEquality:

    def test_equal_channels_equal(self):
        assert Pixel(1, 2, 3, 255) == Pixel(1, 2, 3, 255)
        assert hash(Pixel(1, 2, 3, 255)) == hash(Pixel(1, 2, 3, 255))

    def test_different_channels_not_equal(self):
        assert Pixel(1, 2, 3, 255) != Pixel(1, 2, 4, 255)

    def test_alpha_takes_part_in_equality(self):
        assert Pixel(1, 2, 3, 255, alpha=5) == Pixel(1, 2, 3, 255, alpha=5)
        assert Pixel(1, 2, 3, 255, alpha=5) != Pixel(1, 2, 3, 255, alpha=6)
        assert Pixel(1, 2, 3, 255, alpha=255) != Pixel(1, 2, 3, 255)

    def test_pixel_is_frozen(self):
        px = Pixel(1, 2, 3, 255)
        with pytest.raises(AttributeError):
            px.red = 4
