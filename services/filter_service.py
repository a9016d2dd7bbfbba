from types import MappingProxyType
from typing import Mapping

from models.exceptions import UnsupportedOperationError
from models.preset_types import FilterType
from macros.base import Macro
from macros.filter_presets import Blur, Sharpen


class FilterService:
    """Registry of convolution presets: FilterType → Macro, "blur"/"sharpen" → FilterType."""

    def __init__(self):
        self._presets: Mapping[FilterType, Macro] = MappingProxyType({
            FilterType.BLUR: Blur(),
            FilterType.SHARPEN: Sharpen(),
        })
        self._commands: Mapping[str, FilterType] = MappingProxyType({
            "blur": FilterType.BLUR,
            "sharpen": FilterType.SHARPEN,
        })

    def get_filter(self, filter_type: FilterType) -> Macro:
        macro = self._presets.get(filter_type)
        if macro is None:
            raise UnsupportedOperationError(
                "Provided type is currently not supported by this manager."
            )
        return macro

    def get_filter_type(self, command: str) -> FilterType:
        filter_type = self._commands.get(command)
        if filter_type is None:
            raise UnsupportedOperationError(
                f"Provided filter is currently not supported by this manager: {command}"
            )
        return filter_type

    def resolve(self, command: str) -> Macro:
        return self.get_filter(self.get_filter_type(command))

    @property
    def commands(self):
        return sorted(self._commands)
