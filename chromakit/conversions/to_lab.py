import math
import numpy as np
from numpy import ndarray as NDArray

from .xyz import rgb_to_xyz, xyz_to_lab, np_rgb_to_xyz, np_xyz_to_lab


def rgb_to_lab(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to CIE LAB (D65).

    Args:
        r, g, b: Channels in [0, 255]

    Returns:
        Tuple[float, float, float]: (L [0,100], a, b)
    """
    return xyz_to_lab(*rgb_to_xyz(r, g, b))

def np_rgb_to_lab(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Convert RGB to CIE LAB; returns an array of shape (..., 3)."""
    return np_xyz_to_lab(np_rgb_to_xyz(r, g, b))


def lch_to_lab(l: float, c: float, h: float) -> tuple[float, float, float]:
    """Convert CIE LCH to LAB: a = c·cos(h), b = c·sin(h)."""
    rad = math.radians(h)
    return l, c * math.cos(rad), c * math.sin(rad)

def np_lch_to_lab(l: NDArray, c: NDArray, h: NDArray) -> NDArray:
    l, c, h = np.broadcast_arrays(
        np.asarray(l, dtype=float), np.asarray(c, dtype=float), np.asarray(h, dtype=float)
    )
    rad = np.radians(h)
    return np.stack([l, c * np.cos(rad), c * np.sin(rad)], axis=-1)
