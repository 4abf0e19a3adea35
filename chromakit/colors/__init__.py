"""
chromakit Color Records
=======================

Immutable value records for RGB, HSV, HSL, CMYK, CIE LAB and CIE LCH.

Features
--------
- Frozen after initialization; every conversion returns a new record
- Named channel access (``rgb.r``, ``hsl.l``, ``lch.h``)
- Hue wrapped into [0, 360), bounded channels clamped with an ``OutOfDomainWarning``
- Integer and float variants of RGB / HSV / HSL / CMYK; LAB and LCH are float-only

Usage
-----
>>> from chromakit.colors import RGB
>>> blue = RGB(66, 135, 245)
>>> blue.convert("hsv")
ColorHSVINT(h=217, s=73, v=96)
>>> blue.to_hex()
'#4287f5'
>>> round(blue.convert("lch").h)
287

Color Classes
-------------
    RGB / FloatRGB      (ColorRGBINT / ColorRGBFLOAT)
    HSV / FloatHSV      (ColorHSVINT / ColorHSVFLOAT)
    HSL / FloatHSL      (ColorHSLINT / ColorHSLFLOAT)
    CMYK / FloatCMYK    (ColorCMYKINT / ColorCMYKFLOAT)
    LAB, LCH            (ColorLAB, ColorLCH)
"""

from .color_base import ColorBase
from .rgb import ColorRGBINT, ColorRGBFLOAT, RGB, FloatRGB
from .hsv import ColorHSVINT, ColorHSVFLOAT, HSV, FloatHSV
from .hsl import ColorHSLINT, ColorHSLFLOAT, HSL, FloatHSL
from .cmyk import ColorCMYKINT, ColorCMYKFLOAT, CMYK, FloatCMYK
from .lab import ColorLAB, ColorLCH, LAB, LCH
from .color import color_convert, convert_color, get_color_class, unified_tuple_to_class


__all__ = [
    'ColorBase',
    'RGB', 'FloatRGB', 'ColorRGBINT', 'ColorRGBFLOAT',
    'HSV', 'FloatHSV', 'ColorHSVINT', 'ColorHSVFLOAT',
    'HSL', 'FloatHSL', 'ColorHSLINT', 'ColorHSLFLOAT',
    'CMYK', 'FloatCMYK', 'ColorCMYKINT', 'ColorCMYKFLOAT',
    'LAB', 'LCH', 'ColorLAB', 'ColorLCH',
    'color_convert',
    'convert_color',
    'get_color_class',
    'unified_tuple_to_class',
]
