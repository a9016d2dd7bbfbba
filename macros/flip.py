from models.image import Image
from macros.base import Macro


class HorizontalFlip(Macro):
    """(r, c) ← source(r, width - 1 - c)"""

    def apply(self, source: Image) -> Image:
        self.validate_image(source)
        return source.with_pixels(source.pixels[:, ::-1, :])


class VerticalFlip(Macro):
    """(r, c) ← source(height - 1 - r, c)"""

    def apply(self, source: Image) -> Image:
        self.validate_image(source)
        return source.with_pixels(source.pixels[::-1, :, :])
