import math
import numpy as np
from numpy import ndarray as NDArray
from typing import Optional

from ..types.format_type import HUE_360


def clamp(value: float, low: Optional[float], high: Optional[float]) -> float:
    """Clamp ``value`` into ``[low, high]``; a ``None`` bound is open."""
    if low is not None and value < low:
        return low
    if high is not None and value > high:
        return high
    return value


def clamp255(value: float) -> float:
    if value != value:
        return 0.0
    return clamp(value, 0.0, 255.0)


def clamp100(value: float) -> float:
    if value != value:
        return 0.0
    return clamp(value, 0.0, 100.0)


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    h = h % HUE_360
    # -1e-17 % 360 rounds to 360.0 in floating point
    return 0.0 if h >= HUE_360 else h


def np_normalize_hue(h: NDArray) -> NDArray:
    """Vectorized: normalize hue to [0, 360) range."""
    h = np.asarray(h, dtype=float) % HUE_360
    return np.where(h >= HUE_360, 0.0, h)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up, like ``Math.round``."""
    return int(math.floor(value + 0.5))


def np_round_half_up(values: NDArray) -> NDArray:
    return np.floor(np.asarray(values, dtype=float) + 0.5).astype(int)
