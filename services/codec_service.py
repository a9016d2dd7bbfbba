from __future__ import annotations
from types import MappingProxyType
from typing import Mapping

from models.exceptions import InvalidArgumentError, UnsupportedOperationError
from repositories.codec_repository import ImageCodec
from repositories.ppm_repository import PPMRepository
from repositories.raster_repository import RasterRepository


class CodecService:
    """
    Format tag → codec lookup.  Tags are matched case-insensitively,
    "jpeg" is an alias of "jpg".
    """

    def __init__(self, ppm_repository: PPMRepository | None = None):
        jpg = RasterRepository("jpg", channels=3, pil_format="JPEG")
        self._codecs: Mapping[str, ImageCodec] = MappingProxyType({
            "ppm": ppm_repository or PPMRepository(),
            "png": RasterRepository("png", channels=4, pil_format="PNG"),
            "jpg": jpg,
            "jpeg": jpg,
            "bmp": RasterRepository("bmp", channels=3, pil_format="BMP"),
        })

    def get_codec(self, format_name: str) -> ImageCodec:
        if format_name is None or not str(format_name).strip():
            raise InvalidArgumentError("Image type cannot be empty")
        codec = self._codecs.get(str(format_name).strip().lower().lstrip("."))
        if codec is None:
            raise UnsupportedOperationError(f"Unsupported image format: {format_name}")
        return codec

    @property
    def formats(self):
        return sorted(self._codecs)
