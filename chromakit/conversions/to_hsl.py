import numpy as np
from numpy import ndarray as NDArray

from .numbers import normalize_hue, np_normalize_hue, clamp, clamp255
from .to_hsv import _sector_hue


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL.

    Args:
        r, g, b: Channels in [0, 255]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,100], lightness [0,100])
    """
    r, g, b = clamp255(r) / 255, clamp255(g) / 255, clamp255(b) / 255
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2
    if delta == 0:
        # achromatic
        return 0.0, 0.0, lightness * 100

    if lightness > 0.5:
        saturation = delta / (2 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)
    return _sector_hue(r, g, b, max_c, delta), saturation * 100, lightness * 100


def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,100], lightness [0,100])
    """
    r = np.clip(np.asarray(r, dtype=float), 0, 255) / 255
    g = np.clip(np.asarray(g, dtype=float), 0, 255) / 255
    b = np.clip(np.asarray(b, dtype=float), 0, 255) / 255
    r, g, b = np.broadcast_arrays(r, g, b)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c
    lightness = (max_c + min_c) / 2

    mask = delta > 0
    saturation = np.zeros_like(lightness)
    upper = mask & (lightness > 0.5)
    lower = mask & ~(lightness > 0.5)
    saturation[upper] = delta[upper] / (2 - max_c[upper] - min_c[upper])
    saturation[lower] = delta[lower] / (max_c[lower] + min_c[lower])

    hue = np.zeros_like(max_c)
    mask_r = mask & (max_c == r)
    mask_g = mask & (max_c == g) & ~mask_r
    mask_b = mask & ~mask_r & ~mask_g
    hue[mask_r] = (g[mask_r] - b[mask_r]) / delta[mask_r]
    hue[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2
    hue[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4

    return np.stack([np_normalize_hue(hue * 60), saturation * 100, lightness * 100], axis=-1)


def hsv_to_hsl(h: float, s: float, v: float) -> tuple[float, float, float]:
    """Convert HSV (percent channels) directly to HSL (percent channels)."""
    s, v = clamp(s, 0, 100) / 100, clamp(v, 0, 100) / 100
    l = v * (1 - s / 2)
    if l == 0 or l == 1:
        s_l = 0.0
    else:
        s_l = (v - l) / min(l, 1 - l)
    return normalize_hue(h), s_l * 100, l * 100


def np_hsv_to_hsl(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized: Convert HSV to HSL."""
    h = np_normalize_hue(h)
    s = np.clip(np.asarray(s, dtype=float), 0, 100) / 100
    v = np.clip(np.asarray(v, dtype=float), 0, 100) / 100
    h, s, v = np.broadcast_arrays(h, s, v)

    l = v * (1 - s / 2)
    s_l = np.zeros_like(l)
    mask = (l > 0) & (l < 1)
    s_l[mask] = (v[mask] - l[mask]) / np.minimum(l[mask], 1 - l[mask])
    return np.stack([h, s_l * 100, l * 100], axis=-1)
