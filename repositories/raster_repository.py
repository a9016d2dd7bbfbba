from __future__ import annotations
import logging
from io import BytesIO
import numpy as np
import cv2
from PIL import Image as PILImage

from models.exceptions import ImageIOError, InvalidArgumentError
from models.image import Image
from repositories.codec_repository import ImageCodec

logger = logging.getLogger(__name__)

EIGHT_BIT_MAX = 255


class RasterRepository(ImageCodec):
    """
    Binary raster codec (bmp / jpg / png) backed by OpenCV for reading and
    Pillow for writing.

    `channels` is the exact channel count a decoded file must carry:
    3 for RGB-only formats, 4 for formats with transparency.
    Compression / quality are left to the writer's defaults.
    """

    def __init__(self, format_name: str, channels: int, pil_format: str | None = None):
        if channels not in (3, 4):
            raise InvalidArgumentError(f"Raster codecs handle 3 or 4 channels, got {channels}.")
        self.format_name = format_name
        self.channels = channels
        self.pil_format = pil_format or format_name.upper()

    # ─── Decode ──────────────────────────────────────────────────────
    def decode(self, data: bytes) -> Image:
        if data is None:
            raise InvalidArgumentError("Input cannot be null.")

        buf = np.frombuffer(bytes(data), dtype=np.uint8)
        try:
            arr = cv2.imdecode(buf, cv2.IMREAD_UNCHANGED) if buf.size else None
        except cv2.error as err:
            raise ImageIOError(f"Unable to read {self.format_name} data: {err}") from err
        if arr is None:
            raise ImageIOError(f"Unable to read {self.format_name} data.")

        # Grey / grey+alpha rasters come back 2D or with 2 channels.
        found = 1 if arr.ndim == 2 else arr.shape[2]
        if found != self.channels or arr.dtype != np.uint8:
            raise InvalidArgumentError(f"Invalid {self.format_name} file.")

        # OpenCV hands back BGR(A)
        rgb = arr[:, :, [2, 1, 0, 3]] if found == 4 else arr[:, :, ::-1]
        logger.debug(f"Decoded {self.format_name} {rgb.shape[1]}x{rgb.shape[0]}, {found} channels")
        return Image(rgb, EIGHT_BIT_MAX, self.format_name)

    # ─── Encode ──────────────────────────────────────────────────────
    def _to_uint8(self, image: Image) -> np.ndarray:
        pixels = image.pixels
        if image.max_value != EIGHT_BIT_MAX:
            scale = EIGHT_BIT_MAX / image.max_value if image.max_value else 0.0
            pixels = np.floor(pixels * scale + 0.5)
        return np.clip(pixels, 0, EIGHT_BIT_MAX).astype(np.uint8)

    def _to_raster(self, image: Image) -> np.ndarray:
        pixels = self._to_uint8(image)
        if self.channels == 3:
            return np.ascontiguousarray(pixels[:, :, :3])
        if image.has_alpha:
            return np.ascontiguousarray(pixels)
        opaque = np.full(pixels.shape[:2] + (1,), EIGHT_BIT_MAX, dtype=np.uint8)
        return np.ascontiguousarray(np.concatenate([pixels, opaque], axis=2))

    def encode(self, image: Image) -> bytes:
        if image is None:
            raise InvalidArgumentError("Image cannot be null.")

        raster = self._to_raster(image)  # (H, W, 3) → RGB, (H, W, 4) → RGBA
        out = BytesIO()
        try:
            PILImage.fromarray(raster).save(out, format=self.pil_format)
        except (OSError, ValueError, KeyError) as err:
            raise ImageIOError(
                "Error occurred while writing image to output stream."
            ) from err

        logger.debug(f"Encoded {self.format_name} {image.width}x{image.height}")
        return out.getvalue()
