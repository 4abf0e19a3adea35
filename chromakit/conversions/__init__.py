"""
chromakit Color Space Conversions
=================================

Scalar and vectorized (numpy) conversions between HEX, RGB, HSV, HSL, CMYK, CIE LAB and CIE LCH.

Domains
-------
- RGB: 0-255 per channel
- HSV / HSL: hue in degrees [0, 360), saturation / value / lightness in percent 0-100
- CMYK: percent 0-100
- LAB: L in 0-100, a/b signed (D65 reference white)
- LCH: L in 0-100, chroma >= 0, hue in degrees [0, 360)

Component functions return unrounded floats and clamp or wrap out-of-range input instead of
failing. Rounding happens once, at the output boundary of :func:`convert`.

Conversion Functions
--------------------
HEX:
    hex_to_rgb(hex_code) -> (r, g, b) | None
    rgb_to_hex(r, g, b, uppercase=False)

RGB ↔ HSV / HSL / CMYK:
    rgb_to_hsv, hsv_to_rgb, rgb_to_hsl, hsl_to_rgb, rgb_to_cmyk, cmyk_to_rgb

HSV ↔ HSL:
    hsv_to_hsl, hsl_to_hsv

RGB ↔ LAB ↔ LCH:
    rgb_to_lab, lab_to_rgb, lab_to_lch, lch_to_lab, rgb_to_lch, lch_to_rgb

Every numeric conversion has an ``np_`` twin that broadcasts over arrays.

High-Level API
--------------
    convert(color, from_space, to_space, output_type=FormatType.INT)
    np_convert(color, from_space, to_space, output_type=FormatType.FLOAT)

Examples
--------
>>> from chromakit.conversions import convert, FormatType
>>> convert((66, 135, 245), "rgb", "hsv")
(217, 73, 96)
>>> convert((66, 135, 245), "rgb", "hex")
'#4287f5'
>>> h, s, v = convert((66, 135, 245), "rgb", "hsv", output_type=FormatType.FLOAT)
"""

from .hex import hex_to_rgb, rgb_to_hex

from .to_hsv import rgb_to_hsv, np_rgb_to_hsv, hsl_to_hsv, np_hsl_to_hsv
from .to_hsl import rgb_to_hsl, np_rgb_to_hsl, hsv_to_hsl, np_hsv_to_hsl
from .to_cmyk import rgb_to_cmyk, np_rgb_to_cmyk
from .to_lab import rgb_to_lab, np_rgb_to_lab, lch_to_lab, np_lch_to_lab
from .to_lch import rgb_to_lch, np_rgb_to_lch, lab_to_lch, np_lab_to_lch
from .to_rgb import (
    hsv_to_rgb,
    np_hsv_to_rgb,
    hsl_to_rgb,
    np_hsl_to_rgb,
    cmyk_to_rgb,
    np_cmyk_to_rgb,
    lab_to_rgb,
    np_lab_to_rgb,
    lch_to_rgb,
    np_lch_to_rgb,
)
from .xyz import rgb_to_xyz, xyz_to_rgb, xyz_to_lab, lab_to_xyz

# High-level API
from .wrapper import convert, np_convert

# Types and enums
from ..types.format_type import FormatType

__all__ = [
    # HEX
    'hex_to_rgb',
    'rgb_to_hex',

    # RGB ↔ HSV / HSL
    'rgb_to_hsv',
    'np_rgb_to_hsv',
    'hsv_to_rgb',
    'np_hsv_to_rgb',
    'rgb_to_hsl',
    'np_rgb_to_hsl',
    'hsl_to_rgb',
    'np_hsl_to_rgb',

    # HSV ↔ HSL
    'hsv_to_hsl',
    'np_hsv_to_hsl',
    'hsl_to_hsv',
    'np_hsl_to_hsv',

    # RGB ↔ CMYK
    'rgb_to_cmyk',
    'np_rgb_to_cmyk',
    'cmyk_to_rgb',
    'np_cmyk_to_rgb',

    # RGB ↔ XYZ ↔ LAB ↔ LCH
    'rgb_to_xyz',
    'xyz_to_rgb',
    'xyz_to_lab',
    'lab_to_xyz',
    'rgb_to_lab',
    'np_rgb_to_lab',
    'lab_to_rgb',
    'np_lab_to_rgb',
    'lab_to_lch',
    'np_lab_to_lch',
    'lch_to_lab',
    'np_lch_to_lab',
    'rgb_to_lch',
    'np_rgb_to_lch',
    'lch_to_rgb',
    'np_lch_to_rgb',

    # High-level API
    'convert',
    'np_convert',

    # Types
    'FormatType',
]
