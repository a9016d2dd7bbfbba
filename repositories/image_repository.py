from typing import Dict, List

from models.exceptions import ImageNotFoundError
from models.image import Image


class ImageRepository:
    """
    In-memory namespace: caller-chosen name → latest Image stored under it.
    Storing under an existing name replaces the old binding.
    """

    def __init__(self):
        self._images: Dict[str, Image] = {}

    def store(self, name: str, image: Image) -> None:
        self._images[name] = image

    def fetch(self, name: str) -> Image:
        image = self._images.get(name)
        if image is None:
            raise ImageNotFoundError(name)
        return image

    def contains(self, name: str) -> bool:
        return name in self._images

    def remove(self, name: str) -> Image:
        if name not in self._images:
            raise ImageNotFoundError(name)
        return self._images.pop(name)

    def names(self) -> List[str]:
        return sorted(self._images)

    def __len__(self) -> int:
        return len(self._images)
