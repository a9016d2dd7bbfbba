from pathlib import Path
from typing import Tuple, Union
import logging
import os
from dotenv import load_dotenv

from models.exceptions import ImageIOError, UnsupportedOperationError

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_VALID_EXTS = ".ppm,.png,.jpg,.jpeg,.bmp"


class FileRepository:
    """
    Handles raw file I/O for image files.  Decoding lives in the codecs;
    this class only moves bytes and derives the format tag from the suffix.
    """

    def __init__(self):
        raw = os.getenv("VALID_IMAGE_EXTENSIONS") or DEFAULT_VALID_EXTS
        exts = (e.strip().lower() for e in raw.split(","))
        self.VALID_EXTS = {e if e.startswith(".") else f".{e}" for e in exts if e}

    def format_of(self, path: Union[str, Path]) -> str:
        """'photos/cat.PNG' → 'png'"""
        suffix = Path(path).suffix.lower()
        if not suffix:
            raise UnsupportedOperationError(f"Cannot determine image format of: {path}")
        if suffix not in self.VALID_EXTS:
            raise UnsupportedOperationError(f"Unsupported image format: {suffix[1:]}")
        return suffix[1:]

    def read(self, path: Union[str, Path]) -> Tuple[bytes, str]:
        path = Path(path)
        fmt = self.format_of(path)
        if not path.is_file():
            raise ImageIOError(f"Image not found or unreadable: {path}")
        try:
            data = path.read_bytes()
        except OSError as err:
            raise ImageIOError(f"Failed to read file: {path}") from err
        logger.debug(f"Read {len(data)} bytes from {path}")
        return data, fmt

    def write(self, path: Union[str, Path], data: bytes) -> Path:
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as err:
            raise ImageIOError(f"Failed to write file: {path}") from err
        logger.debug(f"Wrote {len(data)} bytes to {path}")
        return path
