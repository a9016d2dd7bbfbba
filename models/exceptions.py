"""
Error taxonomy shared by models, macros, codecs and services.
Each error also derives from the closest builtin so callers can catch
ValueError / LookupError / OSError without importing this module.
"""


class ImageProcessingError(Exception):
    """Base class for every error raised by the engine."""


class InvalidArgumentError(ImageProcessingError, ValueError):
    """Malformed names, dimensions, channel values, matrices or file headers."""


class ImageNotFoundError(ImageProcessingError, LookupError):
    """A referenced name is not bound in the namespace."""

    def __init__(self, name: str):
        super().__init__(f"Image not found: {name}")
        self.name = name


class UnsupportedOperationError(ImageProcessingError, ValueError):
    """Unknown format tag, greyscale component, filter or transform."""


class ImageIOError(ImageProcessingError, OSError):
    """Underlying codec or file read/write failure."""
