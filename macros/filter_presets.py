from macros.filter import Filter

BLUR_KERNEL = [
    [1.0 / 16, 1.0 / 8, 1.0 / 16],
    [1.0 / 8, 1.0 / 4, 1.0 / 8],
    [1.0 / 16, 1.0 / 8, 1.0 / 16],
]

SHARPEN_KERNEL = [
    [-1.0 / 8, -1.0 / 8, -1.0 / 8, -1.0 / 8, -1.0 / 8],
    [-1.0 / 8, 1.0 / 4, 1.0 / 4, 1.0 / 4, -1.0 / 8],
    [-1.0 / 8, 1.0 / 4, 1.0, 1.0 / 4, -1.0 / 8],
    [-1.0 / 8, 1.0 / 4, 1.0 / 4, 1.0 / 4, -1.0 / 8],
    [-1.0 / 8, -1.0 / 8, -1.0 / 8, -1.0 / 8, -1.0 / 8],
]


class Blur(Filter):
    """3x3 Gaussian-like blur."""

    def __init__(self):
        super().__init__(BLUR_KERNEL)


class Sharpen(Filter):
    """5x5 sharpen: centre 1, inner ring 1/4, outer ring -1/8."""

    def __init__(self):
        super().__init__(SHARPEN_KERNEL)
