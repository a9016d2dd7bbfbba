from __future__ import annotations
import numpy as np

from models.exceptions import InvalidArgumentError
from models.image import Image
from macros.base import Macro, clamp, merge_alpha, split_alpha


class RGBTransform(Macro):
    """
    Per-pixel linear colour transform.
    new[i] = round(Σ_j M[i][j] * old[j]), each channel clamped independently.
    """

    def __init__(self, matrix):
        if matrix is None:
            raise InvalidArgumentError("Transformation matrix must be 3x3")
        try:
            arr = np.array(matrix, dtype=np.float64)
        except (TypeError, ValueError) as err:
            raise InvalidArgumentError("Transformation matrix must be 3x3") from err
        if arr.shape != (3, 3):
            raise InvalidArgumentError("Transformation matrix must be 3x3")
        arr.flags.writeable = False
        self.matrix = arr

    def apply(self, source: Image) -> Image:
        self.validate_image(source)
        rgb, alpha = split_alpha(source.pixels)
        # (H, W, 3) @ (3, 3)^T → row i of M drives output channel i
        transformed = clamp(rgb @ self.matrix.T, source.max_value)
        return source.with_pixels(merge_alpha(transformed, alpha))
