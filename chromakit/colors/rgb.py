from __future__ import annotations
from typing import ClassVar

from ..conversions import hex_to_rgb
from ..errors import InvalidFormatError
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry


class ColorRGBINT(ColorBase):
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "rgb"
    format_type: ClassVar[FormatType] = FormatType.INT

    @classmethod
    def from_hex(cls, hex_code: str) -> ColorRGBINT:
        """
        Build an RGB color from ``#rgb`` / ``#rrggbb`` (``#`` optional).

        Raises:
            InvalidFormatError: The string is not a 3- or 6-digit HEX color.
        """
        rgb = hex_to_rgb(hex_code)
        if rgb is None:
            raise InvalidFormatError(f"Invalid HEX color: {hex_code!r}")
        return cls(rgb)


class ColorRGBFLOAT(ColorBase):
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "rgb"
    format_type: ClassVar[FormatType] = FormatType.FLOAT


RGB = ColorRGBINT
FloatRGB = ColorRGBFLOAT


rgb_tuple_to_class = build_registry(
    ColorRGBINT,
    ColorRGBFLOAT,
)
