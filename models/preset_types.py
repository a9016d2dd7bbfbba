from enum import Enum


class ColorTransformType(Enum):
    """Colour transforms known to the colour-transform registry."""
    SEPIA = "sepia"
    GREYSCALE_RED = "greyscale-red"
    GREYSCALE_GREEN = "greyscale-green"
    GREYSCALE_BLUE = "greyscale-blue"
    GREYSCALE_LUMA = "greyscale-luma"
    GREYSCALE_VALUE = "greyscale-value"
    GREYSCALE_INTENSITY = "greyscale-intensity"


class FilterType(Enum):
    """Convolution presets known to the filter registry."""
    BLUR = "blur"
    SHARPEN = "sharpen"
