import numpy as np
from numpy import ndarray as NDArray

from .numbers import normalize_hue, np_normalize_hue, clamp, clamp255


def _sector_hue(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    if max_c == r:
        h = (g - b) / delta + (6 if g < b else 0)
    elif max_c == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4
    return normalize_hue(h * 60)


def rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSV with the six-sector max/min decomposition.

    Args:
        r, g, b: Channels in [0, 255]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,100], value [0,100])
    """
    r, g, b = clamp255(r) / 255, clamp255(g) / 255, clamp255(b) / 255
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    s = 0.0 if max_c == 0 else delta / max_c
    h = 0.0 if delta == 0 else _sector_hue(r, g, b, max_c, delta)
    return h, s * 100, max_c * 100


def np_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSV.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,100], value [0,100])
    """
    r = np.clip(np.asarray(r, dtype=float), 0, 255) / 255
    g = np.clip(np.asarray(g, dtype=float), 0, 255) / 255
    b = np.clip(np.asarray(b, dtype=float), 0, 255) / 255

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    saturation = np.zeros(out_shape)
    mask_v = max_c > 0
    saturation[mask_v] = delta[mask_v] / max_c[mask_v]

    hue = np.zeros(out_shape)
    mask = delta > 0
    mask_r = mask & (max_c == r)
    mask_g = mask & (max_c == g) & ~mask_r
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = (g[mask_r] - b[mask_r]) / delta[mask_r]
    hue[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2
    hue[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4

    return np.stack([np_normalize_hue(hue * 60), saturation * 100, max_c * 100], axis=-1)


def hsl_to_hsv(h: float, s: float, l: float) -> tuple[float, float, float]:
    """Convert HSL (percent channels) directly to HSV (percent channels)."""
    s, l = clamp(s, 0, 100) / 100, clamp(l, 0, 100) / 100
    v = l + s * min(l, 1 - l)
    s_v = 0.0 if v == 0 else 2 * (1 - l / v)
    return normalize_hue(h), s_v * 100, v * 100


def np_hsl_to_hsv(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """Vectorized: Convert HSL to HSV."""
    h = np_normalize_hue(h)
    s = np.clip(np.asarray(s, dtype=float), 0, 100) / 100
    l = np.clip(np.asarray(l, dtype=float), 0, 100) / 100
    h, s, l = np.broadcast_arrays(h, s, l)

    v = l + s * np.minimum(l, 1 - l)
    s_v = np.zeros_like(v)
    mask = v > 0
    s_v[mask] = 2 * (1 - l[mask] / v[mask])
    return np.stack([h, s_v * 100, v * 100], axis=-1)
