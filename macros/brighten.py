import numbers

from models.exceptions import InvalidArgumentError
from models.image import Image
from macros.base import Macro, clamp, merge_alpha, split_alpha


class Brighten(Macro):
    """
    Adds `amount` to every RGB channel and clamps to [0, max_value].
    Positive amounts brighten, negative amounts darken; transparency is kept.
    """

    def __init__(self, amount: int):
        if isinstance(amount, bool) or not isinstance(amount, numbers.Integral):
            raise InvalidArgumentError(f"Brighten amount must be an integer, got {amount!r}.")
        self.amount = int(amount)

    def apply(self, source: Image) -> Image:
        self.validate_image(source)
        rgb, alpha = split_alpha(source.pixels)
        brightened = clamp(rgb + self.amount, source.max_value)
        return source.with_pixels(merge_alpha(brightened, alpha))
