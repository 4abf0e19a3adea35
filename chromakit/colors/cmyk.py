from typing import ClassVar

from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry


class ColorCMYKINT(ColorBase):
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    mode:        ClassVar[ColorSpace] = "cmyk"
    format_type: ClassVar[FormatType] = FormatType.INT

class ColorCMYKFLOAT(ColorBase):
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    mode:        ClassVar[ColorSpace] = "cmyk"
    format_type: ClassVar[FormatType] = FormatType.FLOAT

CMYK = ColorCMYKINT
FloatCMYK = ColorCMYKFLOAT

cmyk_tuple_to_class = build_registry(ColorCMYKINT, ColorCMYKFLOAT)
