from __future__ import annotations
from typing import Dict, Literal, Optional, Tuple, Union

Scalar = Union[int, float]
ScalarVector = Tuple[Scalar, ...]
ColorSpace = Literal["rgb", "hsv", "hsl", "cmyk", "lab", "lch"]

# Spaces that only exist with float channels
FLOAT_ONLY_SPACES = {"lab", "lch"}

CHANNELS: Dict[str, Tuple[str, ...]] = {
    "rgb": ("r", "g", "b"),
    "hsv": ("h", "s", "v"),
    "hsl": ("h", "s", "l"),
    "cmyk": ("c", "m", "y", "k"),
    "lab": ("l", "a", "b"),
    "lch": ("l", "c", "h"),
}

# (min, max) per channel; None means unbounded on that side
Bound = Tuple[Optional[float], Optional[float]]
CHANNEL_BOUNDS: Dict[str, Tuple[Bound, ...]] = {
    "rgb": ((0, 255), (0, 255), (0, 255)),
    "hsv": ((0, 360), (0, 100), (0, 100)),
    "hsl": ((0, 360), (0, 100), (0, 100)),
    "cmyk": ((0, 100), (0, 100), (0, 100), (0, 100)),
    "lab": ((0, 100), (None, None), (None, None)),
    "lch": ((0, 100), (0, None), (0, 360)),
}

HUE_INDEX: Dict[str, int] = {"hsv": 0, "hsl": 0, "lch": 2}
