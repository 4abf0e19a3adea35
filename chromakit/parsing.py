"""
Strict parsers for the formatted color strings shown in picker inputs.

Every parser either returns a color record or ``None``; none of them raise on bad input.
Channels outside their range make the whole string invalid, except hue, which wraps.

>>> parse_cmyk("cmyk(50%, 25%, 0%, 10%)")
ColorCMYKINT(c=50, m=25, y=0, k=10)
>>> parse_hsl("hsl(217 90% 61%)") is None
True
"""
import re
from typing import Callable, Dict, Optional

from .colors import ColorBase, RGB, HSV, HSL, CMYK, LAB, LCH
from .conversions import hex_to_rgb

_INT = r"(\d{1,3})"
_HUE = r"(-?\d+(?:\.\d+)?)"
_NUM = r"(-?\d+(?:\.\d+)?)"
_PCT = _INT + r"\s*%?"
_SEP = r"\s*,\s*"


def _function(name: str, *args: str) -> re.Pattern:
    return re.compile(
        rf"^\s*{name}\s*\(\s*" + _SEP.join(args) + r"\s*\)\s*$",
        re.IGNORECASE,
    )


RGB_PATTERN = _function("rgb", _INT, _INT, _INT)
HSV_PATTERN = _function("hsv", _HUE, _PCT, _PCT)
HSL_PATTERN = _function("hsl", _HUE, _PCT, _PCT)
CMYK_PATTERN = _function("cmyk", _PCT, _PCT, _PCT, _PCT)
LAB_PATTERN = _function("lab", _NUM + r"\s*%?", _NUM, _NUM)
LCH_PATTERN = _function("lch", _NUM + r"\s*%?", _NUM, _HUE)
FUNCTION_NAME = re.compile(r"^\s*([a-z]+)\s*\(", re.IGNORECASE)


def _match(pattern: re.Pattern, text: str) -> Optional[re.Match]:
    return pattern.match(text) if isinstance(text, str) else None


def _within(value: float, low: float, high: Optional[float]) -> bool:
    return value >= low and (high is None or value <= high)


def parse_hex(text: str) -> Optional[RGB]:
    rgb = hex_to_rgb(text)
    return None if rgb is None else RGB(rgb)


def parse_rgb(text: str) -> Optional[RGB]:
    match = _match(RGB_PATTERN, text)
    if not match:
        return None
    channels = [int(g) for g in match.groups()]
    if not all(_within(c, 0, 255) for c in channels):
        return None
    return RGB(channels)


def _parse_cylinder(pattern: re.Pattern, cls, text: str) -> Optional[ColorBase]:
    match = _match(pattern, text)
    if not match:
        return None
    h, a, b = match.groups()
    a, b = int(a), int(b)
    if not (_within(a, 0, 100) and _within(b, 0, 100)):
        return None
    return cls(float(h), a, b)


def parse_hsv(text: str) -> Optional[HSV]:
    return _parse_cylinder(HSV_PATTERN, HSV, text)


def parse_hsl(text: str) -> Optional[HSL]:
    return _parse_cylinder(HSL_PATTERN, HSL, text)


def parse_cmyk(text: str) -> Optional[CMYK]:
    match = _match(CMYK_PATTERN, text)
    if not match:
        return None
    channels = [int(g) for g in match.groups()]
    if not all(_within(c, 0, 100) for c in channels):
        return None
    return CMYK(channels)


def parse_lab(text: str) -> Optional[LAB]:
    match = _match(LAB_PATTERN, text)
    if not match:
        return None
    l, a, b = (float(g) for g in match.groups())
    if not _within(l, 0, 100):
        return None
    return LAB(l, a, b)


def parse_lch(text: str) -> Optional[LCH]:
    match = _match(LCH_PATTERN, text)
    if not match:
        return None
    l, c, h = (float(g) for g in match.groups())
    if not (_within(l, 0, 100) and _within(c, 0, None)):
        return None
    return LCH(l, c, h)


STRING_PARSERS: Dict[str, Callable[[str], Optional[ColorBase]]] = {
    "rgb": parse_rgb,
    "hsv": parse_hsv,
    "hsl": parse_hsl,
    "cmyk": parse_cmyk,
    "lab": parse_lab,
    "lch": parse_lch,
}


def parse_color(text: str) -> Optional[ColorBase]:
    """Parse any supported notation: a HEX code or ``rgb()/hsv()/hsl()/cmyk()/lab()/lch()``."""
    if not isinstance(text, str):
        return None
    match = _match(FUNCTION_NAME, text)
    if match is None:
        return parse_hex(text)
    parser = STRING_PARSERS.get(match.group(1).lower())
    return parser(text) if parser else None
