"""
Colour-transform presets.

Every greyscale preset except `value` is just an RGBTransform with a fixed
matrix; `value` takes the max of the three channels and cannot be expressed
as a linear map.
"""
import numpy as np

from models.image import Image
from macros.base import Macro, merge_alpha, split_alpha
from macros.rgb_transform import RGBTransform

GREYSCALE_RED_MATRIX = [[1, 0, 0], [1, 0, 0], [1, 0, 0]]
GREYSCALE_GREEN_MATRIX = [[0, 1, 0], [0, 1, 0], [0, 1, 0]]
GREYSCALE_BLUE_MATRIX = [[0, 0, 1], [0, 0, 1], [0, 0, 1]]

INTENSITY_MATRIX = [[1.0 / 3, 1.0 / 3, 1.0 / 3]] * 3

# Rec. 709 luma weights
LUMA_MATRIX = [[0.2126, 0.7152, 0.0722]] * 3

SEPIA_MATRIX = [
    [0.393, 0.769, 0.189],
    [0.349, 0.686, 0.168],
    [0.272, 0.534, 0.131],
]


class GreyscaleRed(RGBTransform):
    def __init__(self):
        super().__init__(GREYSCALE_RED_MATRIX)


class GreyscaleGreen(RGBTransform):
    def __init__(self):
        super().__init__(GREYSCALE_GREEN_MATRIX)


class GreyscaleBlue(RGBTransform):
    def __init__(self):
        super().__init__(GREYSCALE_BLUE_MATRIX)


class GreyscaleIntensity(RGBTransform):
    """Arithmetic mean of R, G and B."""

    def __init__(self):
        super().__init__(INTENSITY_MATRIX)


class GreyscaleLuma(RGBTransform):
    """Perceptually weighted greyscale."""

    def __init__(self):
        super().__init__(LUMA_MATRIX)


class Sepia(RGBTransform):
    def __init__(self):
        super().__init__(SEPIA_MATRIX)


class GreyscaleValue(Macro):
    """Every channel ← max(red, green, blue)."""

    def apply(self, source: Image) -> Image:
        self.validate_image(source)
        rgb, alpha = split_alpha(source.pixels)
        value = rgb.max(axis=2, keepdims=True).astype(np.int64)
        return source.with_pixels(merge_alpha(np.repeat(value, 3, axis=2), alpha))
