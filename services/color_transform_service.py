from types import MappingProxyType
from typing import Mapping

from models.exceptions import UnsupportedOperationError
from models.preset_types import ColorTransformType
from macros.base import Macro
from macros.color_presets import (
    GreyscaleBlue,
    GreyscaleGreen,
    GreyscaleIntensity,
    GreyscaleLuma,
    GreyscaleRed,
    GreyscaleValue,
    Sepia,
)


class ColorTransformService:
    """
    Registry of colour-transform presets.
    Two read-only tables built once:
        type tag        → Macro instance
        command string  → type tag   (e.g. "greyscale-red-component", "sepia")
    """

    def __init__(self):
        self._presets: Mapping[ColorTransformType, Macro] = MappingProxyType({
            ColorTransformType.GREYSCALE_RED: GreyscaleRed(),
            ColorTransformType.GREYSCALE_GREEN: GreyscaleGreen(),
            ColorTransformType.GREYSCALE_BLUE: GreyscaleBlue(),
            ColorTransformType.GREYSCALE_INTENSITY: GreyscaleIntensity(),
            ColorTransformType.GREYSCALE_LUMA: GreyscaleLuma(),
            ColorTransformType.GREYSCALE_VALUE: GreyscaleValue(),
            ColorTransformType.SEPIA: Sepia(),
        })
        self._commands: Mapping[str, ColorTransformType] = MappingProxyType({
            "greyscale-red-component": ColorTransformType.GREYSCALE_RED,
            "greyscale-green-component": ColorTransformType.GREYSCALE_GREEN,
            "greyscale-blue-component": ColorTransformType.GREYSCALE_BLUE,
            "greyscale-luma-component": ColorTransformType.GREYSCALE_LUMA,
            "greyscale-value-component": ColorTransformType.GREYSCALE_VALUE,
            "greyscale-intensity-component": ColorTransformType.GREYSCALE_INTENSITY,
            "sepia": ColorTransformType.SEPIA,
        })

    def get_color_transform(self, transform_type: ColorTransformType) -> Macro:
        macro = self._presets.get(transform_type)
        if macro is None:
            raise UnsupportedOperationError(
                "Provided type is currently not supported by this manager."
            )
        return macro

    def get_color_transform_type(self, command: str) -> ColorTransformType:
        transform_type = self._commands.get(command)
        if transform_type is None:
            raise UnsupportedOperationError(
                f"Provided transform is currently not supported by this manager: {command}"
            )
        return transform_type

    def resolve(self, command: str) -> Macro:
        """command string → Macro in one step."""
        return self.get_color_transform(self.get_color_transform_type(command))

    @property
    def commands(self):
        return sorted(self._commands)
