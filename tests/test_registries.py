"""
Tests for the preset and codec registries.
"""

import pytest

from models.exceptions import InvalidArgumentError, UnsupportedOperationError
from models.preset_types import ColorTransformType, FilterType
from macros.color_presets import GreyscaleLuma, GreyscaleValue, Sepia
from macros.filter_presets import Blur, Sharpen
from repositories.ppm_repository import PPMRepository
from repositories.raster_repository import RasterRepository
from services.codec_service import CodecService
from services.color_transform_service import ColorTransformService
from services.filter_service import FilterService


class TestColorTransformService:

    @pytest.fixture
    def service(self):
        return ColorTransformService()

    def test_every_type_resolves(self, service):
        for transform_type in ColorTransformType:
            assert service.get_color_transform(transform_type) is not None

    def test_lookup_by_type(self, service):
        assert isinstance(service.get_color_transform(ColorTransformType.SEPIA), Sepia)
        assert isinstance(service.get_color_transform(ColorTransformType.GREYSCALE_VALUE), GreyscaleValue)

    def test_lookup_by_command(self, service):
        assert service.get_color_transform_type("greyscale-luma-component") is ColorTransformType.GREYSCALE_LUMA
        assert isinstance(service.resolve("greyscale-luma-component"), GreyscaleLuma)

    def test_same_instance_every_time(self, service):
        assert service.resolve("sepia") is service.resolve("sepia")

    @pytest.mark.parametrize("command", ["", "emboss", "greyscale-alpha-component", None])
    def test_unknown_command(self, service, command):
        with pytest.raises(UnsupportedOperationError):
            service.get_color_transform_type(command)

    def test_unknown_type(self, service):
        with pytest.raises(UnsupportedOperationError):
            service.get_color_transform(FilterType.BLUR)

    def test_tables_are_read_only(self, service):
        with pytest.raises(TypeError):
            service._commands["emboss"] = ColorTransformType.SEPIA

    def test_commands(self, service):
        assert service.commands == sorted([
            "greyscale-red-component", "greyscale-green-component",
            "greyscale-blue-component", "greyscale-luma-component",
            "greyscale-value-component", "greyscale-intensity-component",
            "sepia",
        ])


class TestFilterService:

    @pytest.fixture
    def service(self):
        return FilterService()

    def test_lookups(self, service):
        assert isinstance(service.get_filter(FilterType.BLUR), Blur)
        assert service.get_filter_type("sharpen") is FilterType.SHARPEN
        assert isinstance(service.resolve("sharpen"), Sharpen)
        assert service.commands == ["blur", "sharpen"]

    def test_unknown(self, service):
        with pytest.raises(UnsupportedOperationError):
            service.get_filter_type("emboss")
        with pytest.raises(UnsupportedOperationError):
            service.get_filter(ColorTransformType.SEPIA)


class TestCodecService:

    @pytest.fixture
    def service(self):
        return CodecService()

    def test_formats(self, service):
        assert service.formats == ["bmp", "jpeg", "jpg", "png", "ppm"]

    def test_codec_kinds(self, service):
        assert isinstance(service.get_codec("ppm"), PPMRepository)
        png = service.get_codec("png")
        assert isinstance(png, RasterRepository) and png.channels == 4
        assert service.get_codec("bmp").channels == 3

    def test_jpeg_alias(self, service):
        assert service.get_codec("jpeg") is service.get_codec("jpg")

    @pytest.mark.parametrize("tag", ["PNG", " png ", ".png"])
    def test_tag_normalisation(self, service, tag):
        assert service.get_codec(tag) is service.get_codec("png")

    @pytest.mark.parametrize("tag", [None, "", "   "])
    def test_empty_tag(self, service, tag):
        with pytest.raises(InvalidArgumentError):
            service.get_codec(tag)

    @pytest.mark.parametrize("tag", ["gif", "tiff", "webp"])
    def test_unsupported_tag(self, service, tag):
        with pytest.raises(UnsupportedOperationError):
            service.get_codec(tag)

    def test_injected_ppm_codec(self):
        ppm = PPMRepository(line_separator="\n")
        assert CodecService(ppm_repository=ppm).get_codec("ppm") is ppm
