from __future__ import annotations
import numpy as np

from services.image_service import ImageService


class ReadOnlyImageService:
    """
    Restricted view handed to viewers: image bytes and histograms only,
    nothing that can rebind a name.
    """

    def __init__(self, image_service: ImageService):
        self._image_service = image_service

    def get_histogram_of_greyscale(self, name: str, component: str | None = None) -> np.ndarray:
        return self._image_service.get_histogram_of_greyscale(name, component)

    def get_bytes_of_image(self, name: str) -> bytes:
        return self._image_service.get_bytes_of_image(name)
