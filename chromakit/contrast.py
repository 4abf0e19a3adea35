"""
WCAG 2.x relative luminance, contrast ratio and grading.

Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
"""
from enum import Enum
from typing import Dict, NamedTuple, Sequence, Union

import numpy as np
from numpy import ndarray as NDArray

from .colors import ColorBase, RGB
from .conversions.constants import (
    WCAG_LINEAR_TH, SRGB_LINEAR_SLOPE, SRGB_OFFSET, SRGB_SCALE, SRGB_GAMMA,
    LUMINANCE_WEIGHTS, WCAG_LUMINANCE_OFFSET, WCAG_AAA, WCAG_AA, WCAG_AA_LARGE,
)
from .conversions.numbers import clamp255
from .types.format_type import FormatType

ColorLike = Union[ColorBase, Sequence[float]]

WHITE = RGB(255, 255, 255)
BLACK = RGB(0, 0, 0)


class WcagGrade(str, Enum):
    AAA = "AAA"
    AA = "AA"
    AA_LARGE = "AA Large"
    FAIL = "Fail"


class ContrastResult(NamedTuple):
    ratio: float
    grade: WcagGrade


def _as_rgb(color: ColorLike) -> tuple:
    if isinstance(color, ColorBase):
        return color.value if color.mode == "rgb" else color.convert("rgb", FormatType.FLOAT).value
    if len(color) != 3:
        raise ValueError(f"rgb expects 3 channels, got {len(color)}")
    return tuple(color)


def _channel_luminance(c: float) -> float:
    c = clamp255(c) / 255
    if c <= WCAG_LINEAR_TH:
        return c / SRGB_LINEAR_SLOPE
    return ((c + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA


def relative_luminance(color: ColorLike) -> float:
    """
    Relative luminance of an sRGB color, in [0, 1].

    Accepts an ``RGB`` record, any other color record (converted to RGB first)
    or a plain ``(r, g, b)`` tuple in [0, 255].
    """
    r, g, b = _as_rgb(color)
    wr, wg, wb = LUMINANCE_WEIGHTS
    return float(wr * _channel_luminance(r) + wg * _channel_luminance(g) + wb * _channel_luminance(b))


def np_relative_luminance(rgb: NDArray) -> NDArray:
    """Vectorized: relative luminance for an array of shape (..., 3) in [0, 255]."""
    c = np.clip(np.asarray(rgb, dtype=float), 0, 255) / 255
    linear = np.where(
        c <= WCAG_LINEAR_TH,
        c / SRGB_LINEAR_SLOPE,
        ((c + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA,
    )
    return linear @ LUMINANCE_WEIGHTS


def contrast_ratio(color1: ColorLike, color2: ColorLike) -> float:
    """
    WCAG contrast ratio between two colors, in [1, 21].

    The lighter color always goes in the numerator, so argument order does not matter.
    """
    y1 = relative_luminance(color1)
    y2 = relative_luminance(color2)
    lighter, darker = max(y1, y2), min(y1, y2)
    return (lighter + WCAG_LUMINANCE_OFFSET) / (darker + WCAG_LUMINANCE_OFFSET)


def grade(ratio: float) -> WcagGrade:
    if ratio >= WCAG_AAA:
        return WcagGrade.AAA
    if ratio >= WCAG_AA:
        return WcagGrade.AA
    if ratio >= WCAG_AA_LARGE:
        return WcagGrade.AA_LARGE
    return WcagGrade.FAIL


def contrast_report(color: ColorLike) -> Dict[str, ContrastResult]:
    """Contrast of ``color`` against pure white and pure black text, with grades."""
    report = {}
    for name, background in (("white", WHITE), ("black", BLACK)):
        ratio = contrast_ratio(color, background)
        report[name] = ContrastResult(ratio, grade(ratio))
    return report
