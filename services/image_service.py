from __future__ import annotations
from pathlib import Path
from typing import Callable, List, Union
import logging
import os
import numpy as np
from dotenv import load_dotenv

from models.exceptions import InvalidArgumentError
from models.image import Image
from models.preset_types import ColorTransformType
from macros.base import Macro
from macros.brighten import Brighten
from macros.dither import Dither
from macros.flip import HorizontalFlip, VerticalFlip
from macros.rgb_combine import RGBCombine
from repositories.file_repository import FileRepository
from repositories.image_repository import ImageRepository
from services.codec_service import CodecService
from services.color_transform_service import ColorTransformService
from services.filter_service import FilterService

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class ImageService:
    """
    Facade over the named-image namespace.

    Every verb validates names, fetches its sources, resolves a Macro
    (directly or through a preset registry), applies it and only then binds
    the result under the destination name.  A failing verb leaves the
    namespace untouched.
    """

    def __init__(
        self,
        image_repository: ImageRepository | None = None,
        color_transform_service: ColorTransformService | None = None,
        filter_service: FilterService | None = None,
        codec_service: CodecService | None = None,
        file_repository: FileRepository | None = None,
    ):
        self.image_repository = image_repository or ImageRepository()
        self.color_transform_service = color_transform_service or ColorTransformService()
        self.filter_service = filter_service or FilterService()
        self.codec_service = codec_service or CodecService()
        self.file_repository = file_repository or FileRepository()
        self.default_component = os.getenv("DEFAULT_GREYSCALE_COMPONENT", "luma-component")

    # ─── Internal helpers ──────────────────────────────────────────
    @staticmethod
    def _validate_name(name: str) -> None:
        if name is None or not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError("Image name cannot be empty")

    def _fetch(self, name: str) -> Image:
        self._validate_name(name)
        return self.image_repository.fetch(name)

    def _commit(self, name: str, image: Image) -> None:
        self.image_repository.store(name, image)
        logger.info(f"Stored '{name}' ({image.width}x{image.height}, max {image.max_value})")

    def _apply(self, resolve: Callable[[], Macro], source_name: str, new_name: str) -> None:
        """validate names → fetch source → resolve macro → apply → bind"""
        self._validate_name(source_name)
        self._validate_name(new_name)
        source = self._fetch(source_name)
        macro = resolve()
        self._commit(new_name, macro.apply(source))

    @staticmethod
    def _command(value: str, what: str) -> str:
        if value is None or not isinstance(value, str) or not value.strip():
            raise InvalidArgumentError(f"{what} cannot be empty")
        return value.strip().lower()

    def _component_command(self, component: str) -> str:
        """'red-component' / 'RED' / 'greyscale-red-component' → 'greyscale-red-component'"""
        command = self._command(component, "Greyscale component")
        if not command.startswith("greyscale-"):
            command = f"greyscale-{command}"
        if not command.endswith("-component"):
            command = f"{command}-component"
        return command

    # ─── Codecs ────────────────────────────────────────────────────
    def load(self, data: bytes, name: str, format_name: str) -> None:
        """Decode `data` with the codec for `format_name` and bind it to `name`."""
        self._validate_name(name)
        codec = self.codec_service.get_codec(format_name)
        self._commit(name, codec.decode(data))

    def save(self, name: str, format_name: str) -> bytes:
        """Encode the image bound to `name` in `format_name`."""
        image = self._fetch(name)
        return self.codec_service.get_codec(format_name).encode(image)

    def load_file(self, path: Union[str, Path], name: str) -> None:
        """Load from disk; the format is taken from the file extension."""
        self._validate_name(name)
        data, format_name = self.file_repository.read(path)
        self.load(data, name, format_name)

    def save_file(self, name: str, path: Union[str, Path]) -> Path:
        format_name = self.file_repository.format_of(path)
        return self.file_repository.write(path, self.save(name, format_name))

    # ─── Geometric / tonal macros ──────────────────────────────────
    def horizontal_flip(self, source_name: str, new_name: str) -> None:
        self._apply(HorizontalFlip, source_name, new_name)

    def vertical_flip(self, source_name: str, new_name: str) -> None:
        self._apply(VerticalFlip, source_name, new_name)

    def brighten(self, source_name: str, amount: int, new_name: str) -> None:
        self._apply(lambda: Brighten(amount), source_name, new_name)

    def dither(self, source_name: str, new_name: str) -> None:
        self._apply(Dither, source_name, new_name)

    # ─── Channels ──────────────────────────────────────────────────
    def rgb_split(self, source_name: str, red_name: str, green_name: str, blue_name: str) -> None:
        """Bind the red / green / blue greyscale components under three names."""
        for name in (source_name, red_name, green_name, blue_name):
            self._validate_name(name)
        source = self._fetch(source_name)

        presets = self.color_transform_service
        red = presets.get_color_transform(ColorTransformType.GREYSCALE_RED).apply(source)
        green = presets.get_color_transform(ColorTransformType.GREYSCALE_GREEN).apply(source)
        blue = presets.get_color_transform(ColorTransformType.GREYSCALE_BLUE).apply(source)

        self._commit(red_name, red)
        self._commit(green_name, green)
        self._commit(blue_name, blue)

    def rgb_combine(self, red_name: str, green_name: str, blue_name: str, new_name: str) -> None:
        for name in (red_name, green_name, blue_name, new_name):
            self._validate_name(name)
        red = self._fetch(red_name)
        green = self._fetch(green_name)
        blue = self._fetch(blue_name)
        self._commit(new_name, RGBCombine(green, blue).apply(red))

    # ─── Preset-driven macros ──────────────────────────────────────
    def greyscale(self, source_name: str, component: str, new_name: str) -> None:
        self._apply(
            lambda: self.color_transform_service.resolve(self._component_command(component)),
            source_name, new_name,
        )

    def filter(self, source_name: str, filter_name: str, new_name: str) -> None:
        self._apply(
            lambda: self.filter_service.resolve(self._command(filter_name, "Filter type")),
            source_name, new_name,
        )

    def transform(self, source_name: str, transform_name: str, new_name: str) -> None:
        self._apply(
            lambda: self.color_transform_service.resolve(
                self._command(transform_name, "Transform type")),
            source_name, new_name,
        )

    # ─── Read-only queries ─────────────────────────────────────────
    def get_histogram_of_greyscale(self, name: str, component: str | None = None) -> np.ndarray:
        """
        Frequency of every grey level of the requested component.

        Returns:
            np.ndarray: length max_value + 1; entry v counts the pixels whose
            greyscale (red) channel equals v.  Sums to width * height.
        """
        source = self._fetch(name)
        if component is None:
            component = self.default_component
        # Any preset command ("sepia") is taken as is, otherwise it names a component.
        command = self._command(component, "Greyscale component")
        if command not in self.color_transform_service.commands:
            command = self._component_command(command)
        grey = self.color_transform_service.resolve(command).apply(source)
        return np.bincount(grey.pixels[:, :, 0].ravel(), minlength=grey.max_value + 1)

    def get_bytes_of_image(self, name: str) -> bytes:
        """Encode an image with the codec matching its own format tag."""
        image = self._fetch(name)
        return self.codec_service.get_codec(image.format).encode(image)

    def get_image(self, name: str) -> Image:
        return self._fetch(name)

    def names(self) -> List[str]:
        return self.image_repository.names()
