"""
chromakit: color conversion, WCAG contrast and perceptual harmonies.

Quick Start
-----------
>>> from chromakit import RGB, generate_harmonies, contrast_report
>>> blue = RGB(66, 135, 245)
>>> blue.to_hex()
'#4287f5'
>>> blue.convert("hsv")
ColorHSVINT(h=217, s=73, v=96)
>>> contrast_report(blue)["black"].grade
<WcagGrade.AA: 'AA'>
>>> palettes = generate_harmonies(blue, enforce_contrast=True, is_dark_theme=True)
>>> len(palettes["tetradic"])
3
"""

from .colors import (
    ColorBase,
    RGB, FloatRGB,
    HSV, FloatHSV,
    HSL, FloatHSL,
    CMYK, FloatCMYK,
    LAB, LCH,
    color_convert,
    convert_color,
    get_color_class,
)
from .conversions import convert, np_convert
from .types.format_type import FormatType
from .errors import InvalidFormatError, OutOfDomainWarning
from .engine import (
    hex_to_rgb,
    rgb_to_hex,
    rgb_to_hsv,
    hsv_to_rgb,
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_cmyk,
    cmyk_to_rgb,
    rgb_to_lab,
    lab_to_rgb,
    rgb_to_lch,
    lch_to_rgb,
)
from .contrast import (
    WcagGrade,
    ContrastResult,
    relative_luminance,
    np_relative_luminance,
    contrast_ratio,
    grade,
    contrast_report,
)
from .harmony import (
    HarmonyName,
    RandomSource,
    NoJitter,
    generate_harmonies,
    generate_harmonies_lch,
)
from .parsing import parse_color, parse_hex, parse_rgb, parse_hsv, parse_hsl, parse_cmyk, parse_lab, parse_lch
from .formatting import format_color, format_hex, format_rgb, format_hsv, format_hsl, format_cmyk, format_lab, format_lch

__version__ = "1.0.0"

__all__ = [
    # Color records
    "ColorBase",
    "RGB", "FloatRGB",
    "HSV", "FloatHSV",
    "HSL", "FloatHSL",
    "CMYK", "FloatCMYK",
    "LAB", "LCH",
    "color_convert", "convert_color", "get_color_class",

    # Conversions
    "convert", "np_convert", "FormatType",
    "hex_to_rgb", "rgb_to_hex",
    "rgb_to_hsv", "hsv_to_rgb",
    "rgb_to_hsl", "hsl_to_rgb",
    "rgb_to_cmyk", "cmyk_to_rgb",
    "rgb_to_lab", "lab_to_rgb",
    "rgb_to_lch", "lch_to_rgb",

    # Errors
    "InvalidFormatError", "OutOfDomainWarning",

    # Contrast
    "WcagGrade", "ContrastResult",
    "relative_luminance", "np_relative_luminance",
    "contrast_ratio", "grade", "contrast_report",

    # Harmonies
    "HarmonyName", "RandomSource", "NoJitter",
    "generate_harmonies", "generate_harmonies_lch",

    # Strings
    "parse_color", "parse_hex", "parse_rgb", "parse_hsv", "parse_hsl",
    "parse_cmyk", "parse_lab", "parse_lch",
    "format_color", "format_hex", "format_rgb", "format_hsv", "format_hsl",
    "format_cmyk", "format_lab", "format_lch",
]
