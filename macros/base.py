from __future__ import annotations
from abc import ABC, abstractmethod
import numpy as np

from models.exceptions import InvalidArgumentError
from models.image import Image


class Macro(ABC):
    """
    A pure Image → Image transformation.
    Implementations never touch the source; they always return a new Image.
    """

    @abstractmethod
    def apply(self, source: Image) -> Image:
        ...

    def __call__(self, source: Image) -> Image:
        return self.apply(source)

    @staticmethod
    def validate_image(source: Image) -> None:
        if source is None:
            raise InvalidArgumentError("Image cannot be null.")
        if not isinstance(source, Image):
            raise InvalidArgumentError(f"Expected an Image, got {type(source).__name__}.")
        if source.height <= 0 or source.width <= 0:
            raise InvalidArgumentError("Image has no pixels.")


# ─── Numeric helpers shared by every macro ──────────────────────────
def round_half_up(values):
    """Half-up rounding, floor(x + 0.5). Python's round() is half-even."""
    return np.floor(np.asarray(values, dtype=np.float64) + 0.5)


def clamp(values, max_value: int) -> np.ndarray:
    """Round then clip into [0, max_value] as int64."""
    return np.clip(round_half_up(values), 0, max_value).astype(np.int64)


def split_alpha(pixels: np.ndarray):
    """(H, W, C) → (rgb float copy, alpha or None)."""
    rgb = pixels[:, :, :3].astype(np.float64)
    alpha = pixels[:, :, 3:] if pixels.shape[2] == 4 else None
    return rgb, alpha


def merge_alpha(rgb: np.ndarray, alpha: np.ndarray | None) -> np.ndarray:
    if alpha is None:
        return rgb
    return np.concatenate([rgb, alpha], axis=2)
