import numpy as np
from numpy import ndarray as NDArray

from .numbers import clamp255


def rgb_to_cmyk(r: float, g: float, b: float) -> tuple[float, float, float, float]:
    """
    Convert RGB to CMYK.

    Pure black (k = 100) has no defined ink ratio; c, m and y are forced to 0.

    Returns:
        Tuple[float, float, float, float]: (c, m, y, k), each in [0, 100]
    """
    c, m, y = (1 - clamp255(v) / 255 for v in (r, g, b))
    k = min(c, m, y)
    if k >= 1:
        return 0.0, 0.0, 0.0, 100.0
    scale = 1 - k
    return (c - k) / scale * 100, (m - k) / scale * 100, (y - k) / scale * 100, k * 100

def np_rgb_to_cmyk(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Convert RGB to CMYK; returns an array of shape (..., 4)."""
    rgb = np.stack(np.broadcast_arrays(
        np.asarray(r, dtype=float), np.asarray(g, dtype=float), np.asarray(b, dtype=float)
    ), axis=-1)
    cmy = 1 - np.clip(rgb, 0, 255) / 255
    k = cmy.min(axis=-1, keepdims=True)
    scale = 1 - k
    inks = np.where(scale > 0, (cmy - k) / np.where(scale > 0, scale, 1), 0.0)
    return np.concatenate([inks, k], axis=-1) * 100
