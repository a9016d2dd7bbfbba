from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Tuple

from models.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class Pixel:
    """
    Immutable colour sample.
    `alpha is None`  → plain RGB pixel (ppm / bmp / jpg).
    `alpha` is an int → RGB + transparency pixel (png).
    Every channel lives in [0, max_value].
    """
    red: int
    green: int
    blue: int
    max_value: int = field(default=255, compare=False)
    alpha: int | None = None

    def __post_init__(self):
        if self.max_value < 0:
            raise InvalidArgumentError("The maximum value of a color cannot be negative.")
        for channel in ("red", "green", "blue"):
            self._check(channel, getattr(self, channel))
        if self.alpha is not None:
            self._check("transparency", self.alpha)

    def _check(self, channel: str, value: int) -> None:
        if not 0 <= value <= self.max_value:
            raise InvalidArgumentError(
                f"The {channel} component must be in the range [0, {self.max_value}]."
            )

    # ─── Kind helpers ────────────────────────────────────────────────
    @property
    def has_alpha(self) -> bool:
        return self.alpha is not None

    @property
    def channels(self) -> Tuple[int, ...]:
        if self.alpha is None:
            return self.red, self.green, self.blue
        return self.red, self.green, self.blue, self.alpha

    def create_pixel(self, red: int, green: int, blue: int) -> "Pixel":
        """Same kind, same max value and transparency, new RGB."""
        return replace(self, red=red, green=green, blue=blue)

    @classmethod
    def from_channels(cls, channels, max_value: int) -> "Pixel":
        """Build a pixel from a 3- or 4-value sequence."""
        values = [int(v) for v in channels]
        if len(values) == 3:
            return cls(*values, max_value=max_value)
        if len(values) == 4:
            return cls(*values[:3], max_value=max_value, alpha=values[3])
        raise InvalidArgumentError(f"A pixel carries 3 or 4 channels, got {len(values)}.")
