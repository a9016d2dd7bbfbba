from abc import ABC, abstractmethod

from models.image import Image


class ImageCodec(ABC):
    """
    Adapter between raw file bytes and Image entities for one format family.
    No file-system access here; callers hand over and receive bytes.
    """
    format_name: str

    @abstractmethod
    def decode(self, data: bytes) -> Image:
        ...

    @abstractmethod
    def encode(self, image: Image) -> bytes:
        ...
