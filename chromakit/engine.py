"""
Record-level conversion functions, one per pair of representations.

These are thin wrappers over :meth:`ColorBase.convert`, for callers that prefer
``rgb_to_hsv(color)`` over ``color.convert("hsv")``. Outputs are integer records
(float inputs included) except LAB and LCH, which are always float.

Integer HSV, HSL and CMYK keep whole percents, so an RGB -> HSL -> RGB trip through these
functions can drift by a few units per channel. The within-one-unit round trip holds on the
float path: ``convert(..., output_type=FormatType.FLOAT)`` or ``color.convert(space, FormatType.FLOAT)``.
"""
from typing import Optional

from .colors import RGB, HSV, HSL, CMYK, LAB, LCH
from .conversions import hex_to_rgb as _hex_to_rgb
from .types.format_type import FormatType
from .contrast import relative_luminance, contrast_ratio


def hex_to_rgb(hex_code: str) -> Optional[RGB]:
    """``#rgb`` / ``#rrggbb`` to RGB; ``None`` if the string is not a HEX color."""
    rgb = _hex_to_rgb(hex_code)
    return None if rgb is None else RGB(rgb)

def rgb_to_hex(rgb: RGB) -> str:
    return rgb.to_hex()

def rgb_to_hsv(rgb: RGB) -> HSV:
    return rgb.convert("hsv", FormatType.INT)

def hsv_to_rgb(hsv: HSV) -> RGB:
    return hsv.convert("rgb", FormatType.INT)

def rgb_to_hsl(rgb: RGB) -> HSL:
    return rgb.convert("hsl", FormatType.INT)

def hsl_to_rgb(hsl: HSL) -> RGB:
    return hsl.convert("rgb", FormatType.INT)

def rgb_to_cmyk(rgb: RGB) -> CMYK:
    return rgb.convert("cmyk", FormatType.INT)

def cmyk_to_rgb(cmyk: CMYK) -> RGB:
    return cmyk.convert("rgb", FormatType.INT)

def rgb_to_lab(rgb: RGB) -> LAB:
    return rgb.convert("lab")

def lab_to_rgb(lab: LAB) -> RGB:
    return lab.convert("rgb", FormatType.INT)

def rgb_to_lch(rgb: RGB) -> LCH:
    return rgb.convert("lch")

def lch_to_rgb(lch: LCH) -> RGB:
    return lch.convert("rgb", FormatType.INT)


__all__ = [
    "hex_to_rgb", "rgb_to_hex",
    "rgb_to_hsv", "hsv_to_rgb",
    "rgb_to_hsl", "hsl_to_rgb",
    "rgb_to_cmyk", "cmyk_to_rgb",
    "rgb_to_lab", "lab_to_rgb",
    "rgb_to_lch", "lch_to_rgb",
    "relative_luminance", "contrast_ratio",
]
