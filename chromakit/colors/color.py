from __future__ import annotations
from typing import Optional

from .color_base import ColorBase
from .rgb import rgb_tuple_to_class
from .hsv import hsv_tuple_to_class
from .hsl import hsl_tuple_to_class
from .cmyk import cmyk_tuple_to_class
from .lab import lab_tuple_to_class
from ..conversions import convert
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace, FLOAT_ONLY_SPACES

unified_tuple_to_class: dict[tuple[str, FormatType], type[ColorBase]] = {
    **rgb_tuple_to_class,
    **hsv_tuple_to_class,
    **hsl_tuple_to_class,
    **cmyk_tuple_to_class,
    **lab_tuple_to_class,
}


def get_color_class(color_space: str, format_type: FormatType) -> type[ColorBase]:
    color_class = unified_tuple_to_class.get((color_space.lower(), FormatType(format_type)))
    if color_class is None:
        raise ValueError(
            f"Unsupported color space/format combination: {color_space}/{format_type}"
        )
    return color_class


def color_convert(self: ColorBase, to_space: Optional[ColorSpace] = None, to_format: Optional[FormatType] = None) -> ColorBase:
    """
    Convert this color to a different color space and/or format.

    Args:
        to_space: Target color space ("rgb", "hsv", "hsl", "cmyk", "lab", "lch")
        to_format: Target format type (INT, FLOAT). Defaults to the current format,
            or FLOAT for LAB/LCH targets.

    Returns:
        New ColorBase instance in the target space/format
    """
    to_space = (to_space or self.mode).lower()  # type: ignore
    if to_space in FLOAT_ONLY_SPACES:
        to_format = FormatType.FLOAT
    elif to_format is None:
        # Leaving LAB/LCH lands back on integer records unless asked otherwise
        to_format = FormatType.INT if self.mode in FLOAT_ONLY_SPACES else self.format_type
    to_format = FormatType(to_format)

    cls = get_color_class(to_space, to_format)
    if self.mode == to_space and self.format_type == to_format:
        return self
    return cls(convert(self.value, self.mode, to_space, output_type=to_format))

ColorBase.convert = color_convert


def convert_color(value, color_space: str, format_type: FormatType = FormatType.INT) -> ColorBase:
    """Build a record of the given space/format from a record or a plain channel tuple."""
    if color_space in FLOAT_ONLY_SPACES:
        format_type = FormatType.FLOAT
    if isinstance(value, ColorBase):
        return value.convert(color_space, format_type)  # type: ignore
    return get_color_class(color_space, format_type)(value)
