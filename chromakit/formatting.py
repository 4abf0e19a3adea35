"""Canonical display strings for color records; each one parses back with :mod:`chromakit.parsing`."""
from typing import Callable, Dict

from .colors import ColorBase, RGB, HSV, HSL, CMYK
from .types.format_type import FormatType


def _trim(value: float, digits: int = 1) -> str:
    text = f"{value:.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _ints(color: ColorBase, cls) -> tuple:
    if color.format_type != FormatType.INT or color.mode != cls.mode:
        color = color.convert(cls.mode, FormatType.INT)
    return color.value


def format_hex(color: ColorBase) -> str:
    return color.to_hex()


def format_rgb(color: ColorBase) -> str:
    r, g, b = _ints(color, RGB)
    return f"rgb({r}, {g}, {b})"


def format_hsv(color: ColorBase) -> str:
    h, s, v = _ints(color, HSV)
    return f"hsv({h}, {s}%, {v}%)"


def format_hsl(color: ColorBase) -> str:
    h, s, l = _ints(color, HSL)
    return f"hsl({h}, {s}%, {l}%)"


def format_cmyk(color: ColorBase) -> str:
    c, m, y, k = _ints(color, CMYK)
    return f"cmyk({c}%, {m}%, {y}%, {k}%)"


def format_lab(color: ColorBase) -> str:
    l, a, b = color.convert("lab").value
    return f"lab({_trim(l, 0)}, {_trim(a, 0)}, {_trim(b, 0)})"


def format_lch(color: ColorBase) -> str:
    l, c, h = color.convert("lch").value
    return f"lch({_trim(l)}%, {_trim(c)}, {_trim(h)})"


STRING_FORMATTERS: Dict[str, Callable[[ColorBase], str]] = {
    "rgb": format_rgb,
    "hsv": format_hsv,
    "hsl": format_hsl,
    "cmyk": format_cmyk,
    "lab": format_lab,
    "lch": format_lch,
}


def format_color(color: ColorBase) -> str:
    """Format a record in the notation of its own color space."""
    return STRING_FORMATTERS[color.mode](color)
