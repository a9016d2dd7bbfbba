from __future__ import annotations
import numpy as np

from models.exceptions import InvalidArgumentError
from models.image import Image
from macros.base import Macro, clamp, merge_alpha, split_alpha


class Filter(Macro):
    """
    N x N convolution (N odd), applied to each RGB channel independently.

    Neighbours that fall outside the image are skipped: they add nothing to
    the sum and the remaining weights are NOT renormalised.
    """

    def __init__(self, kernel):
        self.kernel = self._validate_kernel(kernel)
        self.size = self.kernel.shape[0]

    @staticmethod
    def _validate_kernel(kernel) -> np.ndarray:
        if kernel is None or len(kernel) == 0:
            raise InvalidArgumentError("Filter matrix cannot be null or empty.")
        size = len(kernel)
        if size % 2 == 0:
            raise InvalidArgumentError("Filter matrix size must be an odd number.")
        for row in kernel:
            if row is None or not hasattr(row, "__len__") or len(row) != size:
                raise InvalidArgumentError("Filter matrix must be a square matrix.")
        try:
            arr = np.array(kernel, dtype=np.float64)
        except (TypeError, ValueError) as err:
            raise InvalidArgumentError("Filter matrix must hold numbers only.") from err
        arr.flags.writeable = False
        return arr

    def apply(self, source: Image) -> Image:
        self.validate_image(source)
        rgb, alpha = split_alpha(source.pixels)
        height, width = source.height, source.width
        center = self.size // 2

        acc = np.zeros_like(rgb)
        for i in range(self.size):
            dr = i - center
            for j in range(self.size):
                dc = j - center
                weight = self.kernel[i, j]
                if weight == 0:
                    continue
                # Destination rows/cols whose neighbour (r + dr, c + dc) is inside.
                r0, r1 = max(0, -dr), min(height, height - dr)
                c0, c1 = max(0, -dc), min(width, width - dc)
                if r0 >= r1 or c0 >= c1:
                    continue
                acc[r0:r1, c0:c1] += weight * rgb[r0 + dr:r1 + dr, c0 + dc:c1 + dc]

        return source.with_pixels(merge_alpha(clamp(acc, source.max_value), alpha))
