import numpy as np

from models.exceptions import InvalidArgumentError
from models.image import Image
from macros.base import Macro


class RGBCombine(Macro):
    """
    Combine three channel sources into one image.
    The green and blue sources are fixed at construction, `apply` receives
    the red source, whose pixel kind (and transparency) the result keeps.
    """

    def __init__(self, green_image: Image, blue_image: Image):
        self.validate_image(green_image)
        self.validate_image(blue_image)
        if (green_image.height, green_image.width) != (blue_image.height, blue_image.width):
            raise InvalidArgumentError("Green and blue images must be the same size.")
        self.green_image = green_image
        self.blue_image = blue_image

    def apply(self, red_image: Image) -> Image:
        self.validate_image(red_image)
        if (red_image.height, red_image.width) != (self.green_image.height, self.green_image.width):
            raise InvalidArgumentError("Red image size does not match green and blue.")

        combined = np.array(red_image.pixels, copy=True)
        combined[:, :, 1] = self.green_image.pixels[:, :, 1]
        combined[:, :, 2] = self.blue_image.pixels[:, :, 2]
        # Raises InvalidArgumentError if a green/blue value exceeds the red max value.
        return red_image.with_pixels(combined)
