from typing import ClassVar

from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry


class ColorHSLINT(ColorBase):
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode:        ClassVar[ColorSpace] = "hsl"
    format_type: ClassVar[FormatType] = FormatType.INT

class ColorHSLFLOAT(ColorBase):
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode:        ClassVar[ColorSpace] = "hsl"
    format_type: ClassVar[FormatType] = FormatType.FLOAT

HSL = ColorHSLINT
FloatHSL = ColorHSLFLOAT

hsl_tuple_to_class = build_registry(ColorHSLINT, ColorHSLFLOAT)
