from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Sequence
import numpy as np

from models.exceptions import InvalidArgumentError
from models.pixel import Pixel


@dataclass(frozen=True, eq=False)
class Image:
    """
    Immutable raster: (H, W, C) integer pixels sharing one max value.
    C is 3 for RGB images and 4 for images that carry transparency.
    The format tag only picks a codec later on, it is not part of equality.
    """
    pixels: np.ndarray  # Shape (H, W, 3|4), dtype int64, RGB(A) order.
    max_value: int = 255
    format: str = "ppm"

    def __post_init__(self):
        if self.pixels is None:
            raise InvalidArgumentError("Image has no pixels.")
        arr = np.asarray(self.pixels)
        if arr.ndim != 3 or arr.shape[0] == 0 or arr.shape[1] == 0:
            raise InvalidArgumentError("Image has no pixels.")
        if arr.shape[2] not in (3, 4):
            raise InvalidArgumentError(f"Image pixels need 3 or 4 channels, got {arr.shape[2]}.")
        if self.max_value < 0:
            raise InvalidArgumentError("Maximum value of a color cannot be less than 0.")
        if arr.dtype.kind == "f":
            if not np.array_equal(arr, np.floor(arr)):
                raise InvalidArgumentError("Pixel channels must be integers.")
        elif arr.dtype.kind not in "iub":
            raise InvalidArgumentError(f"Unsupported pixel dtype: {arr.dtype}")
        if arr.min() < 0 or arr.max() > self.max_value:
            raise InvalidArgumentError(
                f"Pixel channels must be in the range [0, {self.max_value}]."
            )

        # Own a private read-only copy so nobody can mutate us afterwards.
        owned = arr.astype(np.int64, copy=True)
        owned.flags.writeable = False
        object.__setattr__(self, "pixels", owned)

    # ─── Factories ───────────────────────────────────────────────────
    @classmethod
    def from_pixels(
        cls,
        grid: Sequence[Sequence[Pixel]],
        max_value: int = 255,
        format: str = "ppm",
    ) -> "Image":
        """
        Build an image from a row-major grid of Pixel objects.
        Rejects empty or ragged grids and grids mixing RGB with RGBA pixels.
        """
        if not grid or not grid[0]:
            raise InvalidArgumentError("Image has no pixels.")
        width = len(grid[0])
        has_alpha = grid[0][0].has_alpha

        rows: List[List[tuple]] = []
        for row in grid:
            if row is None or len(row) != width:
                raise InvalidArgumentError("Image rows must all have the same length.")
            values = []
            for px in row:
                if not isinstance(px, Pixel):
                    raise InvalidArgumentError("Image grid may only contain Pixel objects.")
                if px.has_alpha != has_alpha:
                    raise InvalidArgumentError("Image cannot mix RGB and RGBA pixels.")
                values.append(px.channels)
            rows.append(values)
        return cls(np.array(rows, dtype=np.int64), max_value, format)

    def with_pixels(self, pixels: np.ndarray) -> "Image":
        """New image sharing this one's max value and format tag."""
        return Image(pixels, self.max_value, self.format)

    # ─── Accessors ───────────────────────────────────────────────────
    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def has_alpha(self) -> bool:
        return self.pixels.shape[2] == 4

    def get(self, row: int, col: int) -> Pixel:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise InvalidArgumentError("There is no pixel with the given coordinates.")
        return Pixel.from_channels(self.pixels[row, col], self.max_value)

    def rows(self) -> Iterator[List[Pixel]]:
        for r in range(self.height):
            yield [self.get(r, c) for c in range(self.width)]

    # ─── Structural equality ─────────────────────────────────────────
    def __eq__(self, other):
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self.max_value == other.max_value
            and self.pixels.shape == other.pixels.shape
            and np.array_equal(self.pixels, other.pixels)
        )

    def __hash__(self):
        return hash((self.max_value, self.pixels.shape, self.pixels.tobytes()))

    def __repr__(self):
        return (f"Image(width={self.width}, height={self.height}, "
                f"max_value={self.max_value}, format={self.format!r})")
