import math
import numpy as np
from numpy import ndarray as NDArray

from .numbers import normalize_hue, np_normalize_hue, clamp, clamp100
from .xyz import lab_to_xyz, xyz_to_rgb, np_lab_to_xyz, np_xyz_to_rgb
from .to_lab import lch_to_lab, np_lch_to_lab

## HSV to RGB conversions

def hsv_to_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to RGB.

    Args:
        h: Hue in degrees (wrapped into [0, 360))
        s: Saturation in [0, 100]
        v: Value in [0, 100]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 255], unrounded
    """
    h = normalize_hue(h) / 60
    s = clamp(s, 0, 100) / 100
    v = clamp(v, 0, 100) / 100

    i = int(math.floor(h))
    f = h - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    sector = i % 6
    if sector == 0:
        r, g, b = v, t, p
    elif sector == 1:
        r, g, b = q, v, p
    elif sector == 2:
        r, g, b = p, v, t
    elif sector == 3:
        r, g, b = p, q, v
    elif sector == 4:
        r, g, b = t, p, v
    else:
        r, g, b = v, p, q

    return r * 255, g * 255, b * 255

def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV to RGB.

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 255]
    """
    h = np_normalize_hue(h) / 60
    s = np.clip(np.asarray(s, dtype=float), 0, 100) / 100
    v = np.clip(np.asarray(v, dtype=float), 0, 100) / 100
    h, s, v = np.broadcast_arrays(h, s, v)

    i = np.floor(h)
    f = h - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)
    sector = i.astype(int) % 6

    r = np.choose(sector, [v, q, p, p, t, v])
    g = np.choose(sector, [t, v, v, q, p, p])
    b = np.choose(sector, [p, p, t, v, v, q])
    return np.stack([r, g, b], axis=-1) * 255

## HSL to RGB conversions

def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p

def hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB with the classic ``hue2rgb`` helper.

    Args:
        h: Hue in degrees (wrapped into [0, 360))
        s: Saturation in [0, 100]
        l: Lightness in [0, 100]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 255], unrounded
    """
    h = normalize_hue(h) / 360
    s = clamp(s, 0, 100) / 100
    l = clamp(l, 0, 100) / 100

    if s == 0:
        # achromatic
        return l * 255, l * 255, l * 255

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return (
        _hue_to_rgb(p, q, h + 1 / 3) * 255,
        _hue_to_rgb(p, q, h) * 255,
        _hue_to_rgb(p, q, h - 1 / 3) * 255,
    )

def _np_hue_to_rgb(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    t = np.where(t < 0, t + 1, t)
    t = np.where(t > 1, t - 1, t)
    return np.select(
        [t < 1 / 6, t < 1 / 2, t < 2 / 3],
        [p + (q - p) * 6 * t, q, p + (q - p) * (2 / 3 - t) * 6],
        default=p,
    )

def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 255]
    """
    h = np_normalize_hue(h) / 360
    s = np.clip(np.asarray(s, dtype=float), 0, 100) / 100
    l = np.clip(np.asarray(l, dtype=float), 0, 100) / 100
    h, s, l = np.broadcast_arrays(h, s, l)

    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q
    rgb = np.stack([
        _np_hue_to_rgb(p, q, h + 1 / 3),
        _np_hue_to_rgb(p, q, h),
        _np_hue_to_rgb(p, q, h - 1 / 3),
    ], axis=-1)
    # s == 0 collapses p == q == l, which _np_hue_to_rgb already returns for every t
    return rgb * 255

## CMYK to RGB conversions

def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> tuple[float, float, float]:
    """Convert CMYK percentages to RGB in [0, 255], unrounded."""
    c, m, y, k = (clamp100(v) / 100 for v in (c, m, y, k))
    return 255 * (1 - c) * (1 - k), 255 * (1 - m) * (1 - k), 255 * (1 - y) * (1 - k)

def np_cmyk_to_rgb(c: NDArray, m: NDArray, y: NDArray, k: NDArray) -> NDArray:
    c, m, y, k = (np.clip(np.asarray(v, dtype=float), 0, 100) / 100 for v in (c, m, y, k))
    c, m, y, k = np.broadcast_arrays(c, m, y, k)
    return np.stack([1 - c, 1 - m, 1 - y], axis=-1) * (1 - k)[..., None] * 255

## LAB / LCH to RGB conversions

def lab_to_rgb(l: float, a: float, b: float) -> tuple[float, float, float]:
    """
    Convert CIE LAB (D65) to RGB, mirroring :func:`rgb_to_lab` stage by stage.

    Colors outside the sRGB gamut are clamped per channel to [0, 255].
    """
    return xyz_to_rgb(*lab_to_xyz(l, a, b))

def np_lab_to_rgb(l: NDArray, a: NDArray, b: NDArray) -> NDArray:
    xyz = np_lab_to_xyz(l, a, b)
    return np_xyz_to_rgb(xyz[..., 0], xyz[..., 1], xyz[..., 2])

def lch_to_rgb(l: float, c: float, h: float) -> tuple[float, float, float]:
    return lab_to_rgb(*lch_to_lab(l, c, h))

def np_lch_to_rgb(l: NDArray, c: NDArray, h: NDArray) -> NDArray:
    lab = np_lch_to_lab(l, c, h)
    return np_lab_to_rgb(lab[..., 0], lab[..., 1], lab[..., 2])
