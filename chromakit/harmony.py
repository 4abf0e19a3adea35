"""
Perceptual color harmonies built in CIE LCH.

Equal steps in LCH track perceived difference much better than HSV/HSL offsets, so every
candidate is synthesized from the base color's LCH coordinates and converted back to RGB
at the very end.

Each candidate gets a small random jitter on hue and lightness, so generating twice from the
same base gives a different (but equally valid) palette. Pass a seeded ``rng`` (``random.Random``,
``numpy.random.Generator`` or anything with ``uniform(low, high)``) for reproducible output,
or :class:`NoJitter` to switch the jitter off entirely.
"""
from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Protocol, Sequence, Tuple, Union

import numpy as np

from .colors import ColorBase, RGB, LCH
from .conversions.numbers import clamp, normalize_hue

HUE_JITTER = 5.0
LIGHTNESS_JITTER = 3.0

LIGHTNESS_RANGE = (25.0, 90.0)
CHROMA_RANGE = (10.0, 95.0)

# Contrast nudge pivots for dark / light UI backgrounds
DARK_THEME_MIN_LIGHTNESS = 45.0
LIGHT_THEME_MAX_LIGHTNESS = 60.0
CONTRAST_BLEND = 0.5


class HarmonyName(str, Enum):
    MONOCHROMATIC = "monochromatic"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    SPLIT_COMPLEMENTARY = "splitComplementary"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"


class Recipe(NamedTuple):
    hue_offset: float
    lightness_adjust: float = 0.0
    chroma_scale: float = 1.0


HARMONY_RECIPES: Dict[HarmonyName, Tuple[Recipe, ...]] = {
    HarmonyName.MONOCHROMATIC: (
        Recipe(0, 20, 0.8),   # lighter, muted
        Recipe(0, -20, 0.9),  # darker
    ),
    HarmonyName.ANALOGOUS: (Recipe(-30), Recipe(30)),
    HarmonyName.COMPLEMENTARY: (Recipe(180),),
    HarmonyName.SPLIT_COMPLEMENTARY: (Recipe(150), Recipe(210)),
    HarmonyName.TRIADIC: (Recipe(120), Recipe(240)),
    # 60/180/240 rectangle, deliberately not the 90/180/270 square
    HarmonyName.TETRADIC: (Recipe(60), Recipe(180), Recipe(240)),
}


class RandomSource(Protocol):
    def uniform(self, low: float, high: float) -> float: ...


class NoJitter:
    """Random source that always returns the middle of the interval (zero jitter)."""

    def uniform(self, low: float, high: float) -> float:
        return (low + high) / 2


def constrain(l: float, c: float, h: float) -> Tuple[float, float, float]:
    """Keep a candidate away from muddy darks, washed-out grays and implausible neon."""
    return clamp(l, *LIGHTNESS_RANGE), clamp(c, *CHROMA_RANGE), normalize_hue(h)


def contrast_adjust(l: float, is_dark_theme: bool) -> float:
    """
    Nudge lightness away from the theme background.

    Heuristic only: it improves the odds of a WCAG pass but does not measure the real
    background color.
    """
    if is_dark_theme:
        if l < DARK_THEME_MIN_LIGHTNESS:
            return DARK_THEME_MIN_LIGHTNESS + (DARK_THEME_MIN_LIGHTNESS - l) * CONTRAST_BLEND
    elif l > LIGHT_THEME_MAX_LIGHTNESS:
        return LIGHT_THEME_MAX_LIGHTNESS - (l - LIGHT_THEME_MAX_LIGHTNESS) * CONTRAST_BLEND
    return l


def synthesize(
    base: LCH,
    hue_offset: float,
    lightness_adjust: float = 0.0,
    chroma_scale: float = 1.0,
    *,
    rng: RandomSource,
    enforce_contrast: bool = False,
    is_dark_theme: bool = True,
) -> LCH:
    """Build one harmony candidate from ``base``; hue jitter is drawn before lightness jitter."""
    hue_jitter = float(rng.uniform(-HUE_JITTER, HUE_JITTER))
    lightness_jitter = float(rng.uniform(-LIGHTNESS_JITTER, LIGHTNESS_JITTER))

    l, c, h = constrain(
        base.l + lightness_adjust + lightness_jitter,
        base.c * chroma_scale,
        base.h + hue_offset + hue_jitter,
    )
    if enforce_contrast:
        l = contrast_adjust(l, is_dark_theme)
    return LCH(l, c, h)


def _base_lch(base_rgb: Union[ColorBase, Sequence[float]]) -> LCH:
    if not isinstance(base_rgb, ColorBase):
        base_rgb = RGB(base_rgb)
    return base_rgb.convert("lch")


def generate_harmonies_lch(
    base_rgb: Union[ColorBase, Sequence[float]],
    enforce_contrast: bool = False,
    is_dark_theme: bool = True,
    rng: Optional[RandomSource] = None,
) -> Dict[HarmonyName, List[LCH]]:
    """Like :func:`generate_harmonies`, but return the LCH candidates before the trip back to RGB."""
    if rng is None:
        rng = np.random.default_rng()
    base = _base_lch(base_rgb)
    return {
        name: [
            synthesize(
                base, *recipe,
                rng=rng, enforce_contrast=enforce_contrast, is_dark_theme=is_dark_theme,
            )
            for recipe in recipes
        ]
        for name, recipes in HARMONY_RECIPES.items()
    }


def generate_harmonies(
    base_rgb: Union[ColorBase, Sequence[float]],
    enforce_contrast: bool = False,
    is_dark_theme: bool = True,
    rng: Optional[RandomSource] = None,
) -> Dict[HarmonyName, List[RGB]]:
    """
    Generate the six named palettes for ``base_rgb``.

    Args:
        base_rgb: Base color, an ``RGB`` record, any color record or an ``(r, g, b)`` tuple.
        enforce_contrast: Nudge candidate lightness away from the theme background.
        is_dark_theme: Polarity of the UI background used by ``enforce_contrast``.
        rng: Source of jitter. Defaults to a fresh ``numpy.random.default_rng()``.

    Returns:
        Mapping of palette name to its candidates, in recipe order.
    """
    palettes = generate_harmonies_lch(base_rgb, enforce_contrast, is_dark_theme, rng)
    return {name: [lch.convert("rgb") for lch in candidates] for name, candidates in palettes.items()}
