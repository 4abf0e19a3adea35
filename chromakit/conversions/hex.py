import re
from typing import Optional, Tuple

from .numbers import clamp255, round_half_up

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def hex_to_rgb(hex_code: str) -> Optional[Tuple[int, int, int]]:
    """
    Parse a HEX color into integer RGB.

    Accepts an optional leading ``#`` followed by 3 or 6 hex digits (case-insensitive).
    Shorthand is expanded by doubling each nibble, so ``"#48f"`` reads as ``"#4488ff"``.

    Returns:
        (r, g, b) in [0, 255], or None when the string is not a valid HEX color.
    """
    if not isinstance(hex_code, str):
        return None
    clean = hex_code[1:] if hex_code.startswith("#") else hex_code
    if len(clean) == 3:
        clean = "".join(ch * 2 for ch in clean)
    if len(clean) != 6 or not _HEX_DIGITS.fullmatch(clean):
        return None
    value = int(clean, 16)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def rgb_to_hex(r: float, g: float, b: float, uppercase: bool = False) -> str:
    """Format RGB as a canonical ``#rrggbb`` string, rounding and clamping each channel."""
    digits = "".join(f"{round_half_up(clamp255(c)):02x}" for c in (r, g, b))
    return "#" + (digits.upper() if uppercase else digits)
