from __future__ import annotations
import math
from typing import List
import numpy as np

from models.image import Image
from macros.base import Macro, merge_alpha
from macros.color_presets import GreyscaleLuma

# (row offset, col offset, weight / 16) – only forward / downward neighbours
FLOYD_STEINBERG_WEIGHTS = (
    (0, 1, 7),
    (1, -1, 3),
    (1, 0, 5),
    (1, 1, 1),
)


class Dither(Macro):
    """
    Floyd–Steinberg error diffusion on the luma greyscale of the source.
    Output channels are exactly 0 or max_value.
    """

    def __init__(self):
        self.greyscale = GreyscaleLuma()

    def apply(self, source: Image) -> Image:
        self.validate_image(source)
        grey = self.greyscale.apply(source)
        max_value = source.max_value
        half = max_value / 2
        height, width = grey.height, grey.width

        # Sequential scan; each step reads the already-diffused neighbours.
        work: List[List[List[int]]] = grey.pixels[:, :, :3].tolist()

        for r in range(height):
            for c in range(width):
                current = work[r][c]
                quantized = [0 if v < half else max_value for v in current]
                error = [old - new for old, new in zip(current, quantized)]

                for dr, dc, weight in FLOYD_STEINBERG_WEIGHTS:
                    nr, nc = r + dr, c + dc
                    if nr >= height or nc < 0 or nc >= width:
                        continue
                    neighbour = work[nr][nc]
                    work[nr][nc] = [
                        self._clamp(v + e * weight / 16.0, max_value)
                        for v, e in zip(neighbour, error)
                    ]

                work[r][c] = quantized

        alpha = grey.pixels[:, :, 3:] if grey.has_alpha else None
        return source.with_pixels(merge_alpha(np.array(work, dtype=np.int64), alpha))

    @staticmethod
    def _clamp(value: float, max_value: int) -> int:
        if value < 0:
            return 0
        return min(int(math.floor(value + 0.5)), max_value)
