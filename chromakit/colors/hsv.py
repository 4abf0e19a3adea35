from typing import ClassVar

from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry


class ColorHSVINT(ColorBase):
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode:        ClassVar[ColorSpace] = "hsv"
    format_type: ClassVar[FormatType] = FormatType.INT

class ColorHSVFLOAT(ColorBase):
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode:        ClassVar[ColorSpace] = "hsv"
    format_type: ClassVar[FormatType] = FormatType.FLOAT

HSV = ColorHSVINT
FloatHSV = ColorHSVFLOAT

hsv_tuple_to_class = build_registry(ColorHSVINT, ColorHSVFLOAT)
