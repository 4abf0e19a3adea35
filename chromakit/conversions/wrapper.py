import numpy as np
from typing import Callable, Dict, Tuple

from ..errors import InvalidFormatError
from ..types.format_type import FormatType
from ..types.color_types import ScalarVector, CHANNELS, CHANNEL_BOUNDS, HUE_INDEX, FLOAT_ONLY_SPACES

from .hex import hex_to_rgb, rgb_to_hex
from .numbers import clamp, normalize_hue, np_normalize_hue, round_half_up, np_round_half_up
from .to_rgb import (
    hsv_to_rgb, hsl_to_rgb, cmyk_to_rgb, lab_to_rgb, lch_to_rgb,
    np_hsv_to_rgb, np_hsl_to_rgb, np_cmyk_to_rgb, np_lab_to_rgb, np_lch_to_rgb,
)
from .to_hsv import rgb_to_hsv, hsl_to_hsv, np_rgb_to_hsv, np_hsl_to_hsv
from .to_hsl import rgb_to_hsl, hsv_to_hsl, np_rgb_to_hsl, np_hsv_to_hsl
from .to_cmyk import rgb_to_cmyk, np_rgb_to_cmyk
from .to_lab import rgb_to_lab, lch_to_lab, np_rgb_to_lab, np_lch_to_lab
from .to_lch import rgb_to_lch, lab_to_lch, np_rgb_to_lch, np_lab_to_lch

# Every space reaches every other one through RGB ...
TO_RGB: Dict[str, Callable[..., Tuple[float, ...]]] = {
    "hsv": hsv_to_rgb,
    "hsl": hsl_to_rgb,
    "cmyk": cmyk_to_rgb,
    "lab": lab_to_rgb,
    "lch": lch_to_rgb,
}
FROM_RGB: Dict[str, Callable[..., Tuple[float, ...]]] = {
    "hsv": rgb_to_hsv,
    "hsl": rgb_to_hsl,
    "cmyk": rgb_to_cmyk,
    "lab": rgb_to_lab,
    "lch": rgb_to_lch,
}
# ... except these pairs, which skip the hub and its gamut clamping
CONVERT_DIRECT: Dict[Tuple[str, str], Callable[..., Tuple[float, ...]]] = {
    ("hsv", "hsl"): hsv_to_hsl,
    ("hsl", "hsv"): hsl_to_hsv,
    ("lab", "lch"): lab_to_lch,
    ("lch", "lab"): lch_to_lab,
}

NP_TO_RGB: Dict[str, Callable[..., np.ndarray]] = {
    "hsv": np_hsv_to_rgb,
    "hsl": np_hsl_to_rgb,
    "cmyk": np_cmyk_to_rgb,
    "lab": np_lab_to_rgb,
    "lch": np_lch_to_rgb,
}
NP_FROM_RGB: Dict[str, Callable[..., np.ndarray]] = {
    "hsv": np_rgb_to_hsv,
    "hsl": np_rgb_to_hsl,
    "cmyk": np_rgb_to_cmyk,
    "lab": np_rgb_to_lab,
    "lch": np_rgb_to_lch,
}
NP_CONVERT_DIRECT: Dict[Tuple[str, str], Callable[..., np.ndarray]] = {
    ("hsv", "hsl"): np_hsv_to_hsl,
    ("hsl", "hsv"): np_hsl_to_hsv,
    ("lab", "lch"): np_lab_to_lch,
    ("lch", "lab"): np_lch_to_lab,
}


def _check_space(space: str) -> str:
    space = space.lower()
    if space not in CHANNELS:
        raise ValueError(f"Unknown space: {space}")
    return space


def finalize(values: ScalarVector, space: str, fmt: FormatType) -> Tuple:
    """
    Apply the output boundary policy: clamp bounded channels, keep hue in [0, 360)
    and round for INT. LAB and LCH are never rounded.
    """
    hue_index = HUE_INDEX.get(space)
    out = []
    for i, (v, (low, high)) in enumerate(zip(values, CHANNEL_BOUNDS[space])):
        v = float(v)
        if v != v:
            v = 0.0
        out.append(normalize_hue(v) if i == hue_index else clamp(v, low, high))
    if fmt != FormatType.INT or space in FLOAT_ONLY_SPACES:
        return tuple(out)

    rounded = [round_half_up(v) for v in out]
    if hue_index is not None:
        # 359.6 rounds to 360, which is 0 on the wheel
        rounded[hue_index] %= 360
    return tuple(rounded)


def np_finalize(values: np.ndarray, space: str) -> np.ndarray:
    """Vectorized :func:`finalize` without the rounding: NaN to 0, hue wrapped, bounded channels clipped."""
    out = np.nan_to_num(np.asarray(values, dtype=float), nan=0.0)
    hue_index = HUE_INDEX.get(space)
    for i, (low, high) in enumerate(CHANNEL_BOUNDS[space]):
        if i == hue_index:
            out[..., i] = np_normalize_hue(out[..., i])
        elif low is not None or high is not None:
            out[..., i] = np.clip(out[..., i], low, high)
    return out


def _to_rgb(color, from_space: str) -> Tuple[float, ...]:
    if from_space == "hex":
        rgb = hex_to_rgb(color)
        if rgb is None:
            raise InvalidFormatError(f"Invalid HEX color: {color!r}")
        return rgb
    if from_space == "rgb":
        return tuple(color)
    return TO_RGB[from_space](*color)


def convert(
    color,
    from_space: str,
    to_space: str,
    output_type: FormatType = FormatType.INT,
):
    """
    Convert a single color between HEX, RGB, HSV, HSL, CMYK, LAB and LCH.

    Intermediate math stays in floating point; only the returned channels are rounded
    (for ``FormatType.INT``). ``"hex"`` is accepted as source (a string) and target.

    Raises:
        InvalidFormatError: ``from_space`` is ``"hex"`` and ``color`` is not a valid HEX string.
        ValueError: Unknown color space or wrong channel count.
    """
    from_space = from_space.lower()
    to_space = to_space.lower()
    output_type = FormatType(output_type)
    if from_space != "hex":
        _check_space(from_space)
        if len(color) != len(CHANNELS[from_space]):
            raise ValueError(f"{from_space} expects {len(CHANNELS[from_space])} channels, got {len(color)}")
    if to_space == "hex":
        return rgb_to_hex(*_to_rgb(color, from_space))
    _check_space(to_space)

    if from_space == to_space:
        return finalize(color, to_space, output_type)
    key = (from_space, to_space)
    if key in CONVERT_DIRECT:
        return finalize(CONVERT_DIRECT[key](*color), to_space, output_type)

    rgb = _to_rgb(color, from_space)
    if to_space == "rgb":
        return finalize(rgb, to_space, output_type)
    return finalize(FROM_RGB[to_space](*rgb), to_space, output_type)


def np_convert(
    color: np.ndarray,
    from_space: str,
    to_space: str,
    output_type: FormatType = FormatType.FLOAT,
) -> np.ndarray:
    """
    Vectorized :func:`convert` for arrays whose last axis holds the channels.

    HEX is not supported here; use :func:`convert` per color.
    """
    from_space = _check_space(from_space)
    to_space = _check_space(to_space)
    output_type = FormatType(output_type)
    color = np.asarray(color, dtype=float)
    if color.shape[-1] != len(CHANNELS[from_space]):
        raise ValueError(f"{from_space} expects {len(CHANNELS[from_space])} channels, got {color.shape[-1]}")
    channels = [color[..., i] for i in range(color.shape[-1])]

    if from_space == to_space:
        out = color
    elif (from_space, to_space) in NP_CONVERT_DIRECT:
        out = NP_CONVERT_DIRECT[(from_space, to_space)](*channels)
    else:
        rgb = color if from_space == "rgb" else NP_TO_RGB[from_space](*channels)
        if to_space == "rgb":
            out = rgb
        else:
            out = NP_FROM_RGB[to_space](rgb[..., 0], rgb[..., 1], rgb[..., 2])
    out = np_finalize(out, to_space)

    if output_type != FormatType.INT or to_space in FLOAT_ONLY_SPACES:
        return out
    rounded = np_round_half_up(out)
    hue_index = HUE_INDEX.get(to_space)
    if hue_index is not None:
        rounded[..., hue_index] %= 360
    return rounded
