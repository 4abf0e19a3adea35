"""
sRGB <-> CIE XYZ <-> CIE LAB stages (D65).

RGB channels are in [0, 255], XYZ is scaled so that the reference white has Y = 100.
Every scalar stage has a vectorized twin prefixed with ``np_``.
"""
import numpy as np
from numpy import ndarray as NDArray

from .constants import (
    SRGB_TO_LINEAR_TH, LINEAR_TO_SRGB_TH, SRGB_LINEAR_SLOPE, SRGB_OFFSET, SRGB_SCALE, SRGB_GAMMA,
    M_RGB_TO_XYZ, M_XYZ_TO_RGB, XYZ_REF_WHITE, LAB_EPSILON, LAB_KAPPA,
)
from .numbers import clamp255


def srgb_to_linear(c: float) -> float:
    """Convert nonlinear sRGB (0..1) to linear-light RGB."""
    if c > SRGB_TO_LINEAR_TH:
        return ((c + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA
    return c / SRGB_LINEAR_SLOPE

def linear_to_srgb(c: float) -> float:
    """Convert linear-light RGB (0..1) to nonlinear sRGB."""
    if c > LINEAR_TO_SRGB_TH:
        return SRGB_SCALE * (c ** (1 / SRGB_GAMMA)) - SRGB_OFFSET
    return SRGB_LINEAR_SLOPE * c

def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: Convert nonlinear sRGB (0..1) to linear-light RGB."""
    c = np.asarray(c, dtype=float)
    return np.where(
        c > SRGB_TO_LINEAR_TH,
        ((np.maximum(c, SRGB_TO_LINEAR_TH) + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA,
        c / SRGB_LINEAR_SLOPE,
    )

def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized: Convert linear-light RGB (0..1) to nonlinear sRGB."""
    c = np.asarray(c, dtype=float)
    return np.where(
        c > LINEAR_TO_SRGB_TH,
        SRGB_SCALE * (np.maximum(c, LINEAR_TO_SRGB_TH) ** (1 / SRGB_GAMMA)) - SRGB_OFFSET,
        SRGB_LINEAR_SLOPE * c,
    )


def rgb_to_xyz(r: float, g: float, b: float) -> tuple[float, float, float]:
    linear = [srgb_to_linear(clamp255(c) / 255) * 100 for c in (r, g, b)]
    x, y, z = (float(row @ linear) for row in M_RGB_TO_XYZ)
    return x, y, z

def xyz_to_rgb(x: float, y: float, z: float) -> tuple[float, float, float]:
    """Inverse of :func:`rgb_to_xyz`; out-of-gamut results are clamped to [0, 255]."""
    xyz = [x, y, z]
    r, g, b = (clamp255(linear_to_srgb(float(row @ xyz) / 100) * 255) for row in M_XYZ_TO_RGB)
    return r, g, b

def np_rgb_to_xyz(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    rgb = np.stack(np.broadcast_arrays(
        np.asarray(r, dtype=float), np.asarray(g, dtype=float), np.asarray(b, dtype=float)
    ), axis=-1)
    linear = np_srgb_to_linear(np.clip(rgb, 0, 255) / 255) * 100
    return linear @ M_RGB_TO_XYZ.T

def np_xyz_to_rgb(x: NDArray, y: NDArray, z: NDArray) -> NDArray:
    xyz = np.stack(np.broadcast_arrays(
        np.asarray(x, dtype=float), np.asarray(y, dtype=float), np.asarray(z, dtype=float)
    ), axis=-1)
    linear = (xyz @ M_XYZ_TO_RGB.T) / 100
    return np.clip(np_linear_to_srgb(linear) * 255, 0, 255)


def _lab_f(t: float) -> float:
    if t > LAB_EPSILON:
        return t ** (1 / 3)
    return (LAB_KAPPA * t + 16) / 116

def _lab_f_inv(t: float) -> float:
    cube = t * t * t
    if cube > LAB_EPSILON:
        return cube
    return (t * 116 - 16) / LAB_KAPPA

def xyz_to_lab(x: float, y: float, z: float) -> tuple[float, float, float]:
    fx, fy, fz = (_lab_f(v / ref) for v, ref in zip((x, y, z), XYZ_REF_WHITE))
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)

def lab_to_xyz(l: float, a: float, b: float) -> tuple[float, float, float]:
    fy = (l + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200
    x, y, z = (_lab_f_inv(f) * float(ref) for f, ref in zip((fx, fy, fz), XYZ_REF_WHITE))
    return x, y, z

def np_xyz_to_lab(xyz: NDArray) -> NDArray:
    t = np.asarray(xyz, dtype=float) / XYZ_REF_WHITE
    f = np.where(t > LAB_EPSILON, np.cbrt(t), (LAB_KAPPA * t + 16) / 116)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)], axis=-1)

def np_lab_to_xyz(l: NDArray, a: NDArray, b: NDArray) -> NDArray:
    l, a, b = np.broadcast_arrays(
        np.asarray(l, dtype=float), np.asarray(a, dtype=float), np.asarray(b, dtype=float)
    )
    fy = (l + 16) / 116
    f = np.stack([a / 500 + fy, fy, fy - b / 200], axis=-1)
    cube = f ** 3
    t = np.where(cube > LAB_EPSILON, cube, (f * 116 - 16) / LAB_KAPPA)
    return t * XYZ_REF_WHITE
