from typing import ClassVar

from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry

# CIE LAB and LCH only exist as float records


class ColorLAB(ColorBase):
    """CIE LAB (D65): L in [0, 100], a and b signed and unbounded."""
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode:        ClassVar[ColorSpace] = "lab"
    format_type: ClassVar[FormatType] = FormatType.FLOAT

class ColorLCH(ColorBase):
    """CIE LCH, the polar form of LAB: L in [0, 100], chroma >= 0, hue in [0, 360)."""
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode:        ClassVar[ColorSpace] = "lch"
    format_type: ClassVar[FormatType] = FormatType.FLOAT

LAB = ColorLAB
LCH = ColorLCH

lab_tuple_to_class = build_registry(ColorLAB, ColorLCH)
