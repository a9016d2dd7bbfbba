from __future__ import annotations
import logging
import os
from typing import Iterator, List
import numpy as np
from dotenv import load_dotenv

from models.exceptions import InvalidArgumentError
from models.image import Image
from repositories.codec_repository import ImageCodec

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def _line_separator_from_env() -> str:
    raw = os.getenv("PPM_LINE_SEPARATOR")
    if not raw:
        return os.linesep
    # .env files usually carry the escaped form, e.g. "\r\n"
    return raw.encode("utf-8").decode("unicode_escape")


class PPMRepository(ImageCodec):
    """
    Plain-text PPM (P3) codec.
    Layout: "P3", width, height, max value, then width*height*3 integers in
    row-major RGB order.  Lines starting with '#' are comments.
    """
    format_name = "ppm"

    def __init__(self, line_separator: str | None = None):
        self.line_separator = line_separator or _line_separator_from_env()

    # ─── Decode ──────────────────────────────────────────────────────
    @staticmethod
    def _tokens(data: bytes) -> Iterator[str]:
        # Comment lines are dropped as raw bytes, whatever their encoding.
        for line in data.splitlines():
            if line.startswith(b"#"):
                continue
            try:
                text = line.decode("ascii")
            except UnicodeDecodeError as err:
                raise InvalidArgumentError("Invalid PPM file: not a plain text file") from err
            yield from text.split()

    @staticmethod
    def _next_int(tokens: Iterator[str], what: str) -> int:
        token = next(tokens, None)
        if token is None:
            raise InvalidArgumentError(f"Invalid PPM file: missing {what}")
        try:
            return int(token)
        except ValueError as err:
            raise InvalidArgumentError(f"Invalid PPM file: {what} is not an integer: {token!r}") from err

    def decode(self, data: bytes) -> Image:
        if data is None:
            raise InvalidArgumentError("Input cannot be null.")

        tokens = self._tokens(bytes(data))
        magic = next(tokens, None)
        if magic != "P3":
            raise InvalidArgumentError("Invalid PPM file: plain RAW file should begin with P3")

        width = self._next_int(tokens, "width")
        height = self._next_int(tokens, "height")
        max_value = self._next_int(tokens, "maximum value")
        if width <= 0 or height <= 0:
            raise InvalidArgumentError(f"Invalid PPM file: bad dimensions {width}x{height}")

        expected = width * height * 3
        values: List[int] = [self._next_int(tokens, "pixel data") for _ in range(expected)]
        for value in values:
            if not 0 <= value <= max_value:
                raise InvalidArgumentError(
                    f"Invalid PPM file: pixel value {value} outside [0, {max_value}]"
                )

        try:
            pixels = np.array(values, dtype=np.int64).reshape(height, width, 3)
        except OverflowError as err:
            raise InvalidArgumentError("Invalid PPM file: pixel value too large") from err
        logger.debug(f"Decoded PPM {width}x{height} (max {max_value})")
        return Image(pixels, max_value, self.format_name)

    # ─── Encode ──────────────────────────────────────────────────────
    def encode(self, image: Image) -> bytes:
        if image is None:
            raise InvalidArgumentError("Image cannot be null.")

        sep = self.line_separator
        lines = ["P3", f"{image.width} {image.height}", f"{image.max_value}"]
        # Transparency has no place in P3; only RGB is written.
        lines.extend(str(v) for v in image.pixels[:, :, :3].reshape(-1).tolist())
        lines.append("")

        logger.debug(f"Encoding PPM {image.width}x{image.height}")
        return "".join(line + sep for line in lines).encode("ascii")
