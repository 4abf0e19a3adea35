import math
import numpy as np
from numpy import ndarray as NDArray

from .numbers import normalize_hue, np_normalize_hue
from .to_lab import rgb_to_lab, np_rgb_to_lab


def lab_to_lch(l: float, a: float, b: float) -> tuple[float, float, float]:
    """Convert CIE LAB to its polar form LCH; hue in degrees, [0, 360)."""
    return l, math.hypot(a, b), normalize_hue(math.degrees(math.atan2(b, a)))

def np_lab_to_lch(l: NDArray, a: NDArray, b: NDArray) -> NDArray:
    l, a, b = np.broadcast_arrays(
        np.asarray(l, dtype=float), np.asarray(a, dtype=float), np.asarray(b, dtype=float)
    )
    hue = np_normalize_hue(np.degrees(np.arctan2(b, a)))
    return np.stack([l, np.hypot(a, b), hue], axis=-1)


def rgb_to_lch(r: float, g: float, b: float) -> tuple[float, float, float]:
    return lab_to_lch(*rgb_to_lab(r, g, b))

def np_rgb_to_lch(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    lab = np_rgb_to_lab(r, g, b)
    return np_lab_to_lch(lab[..., 0], lab[..., 1], lab[..., 2])
