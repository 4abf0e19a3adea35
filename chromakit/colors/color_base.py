from __future__ import annotations
import warnings
from typing import Any, Callable, ClassVar, Iterator, Tuple

from ..conversions import convert
from ..conversions.numbers import clamp, normalize_hue, round_half_up
from ..errors import OutOfDomainWarning
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace, Scalar, ScalarVector, CHANNELS, CHANNEL_BOUNDS, HUE_INDEX


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    mode:        ClassVar[ColorSpace]
    format_type: ClassVar[FormatType]
    # def color_convert(self, to_space, to_format=None) -> ColorBase
    convert: Callable[..., ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *value: Any) -> None:
        # Accept RGB(1, 2, 3), RGB((1, 2, 3)) or RGB(other_color)
        if len(value) == 1:
            value = value[0]

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode == self.mode and value.format_type == self.format_type:
                value = value.value
            else:
                value = convert(value.value, value.mode, self.mode, output_type=self.format_type)

        if isinstance(value, (str, bytes)) or not hasattr(value, '__len__'):
            raise TypeError(f"{self.mode} expects a {self.num_channels}-channel sequence, got {value!r}")
        if len(value) != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.num_channels} channels, got {len(value)}")

        self._value = self._sanitize(tuple(value))

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _sanitize(cls, values: ScalarVector) -> Tuple[Scalar, ...]:
        """Wrap hue, clamp bounded channels (warning on change) and enforce the channel type."""
        hue_index = HUE_INDEX.get(cls.mode)
        bounds = CHANNEL_BOUNDS[cls.mode]
        names = CHANNELS[cls.mode]
        out = []
        for i, raw in enumerate(values):
            try:
                v = float(raw)
            except (TypeError, ValueError):
                raise TypeError(f"{cls.mode}.{names[i]} must be a number, got {raw!r}") from None
            if v != v:
                warnings.warn(f"{cls.mode}.{names[i]} is NaN; using 0", OutOfDomainWarning, stacklevel=3)
                v = 0.0
            if i == hue_index:
                v = normalize_hue(v)
            else:
                low, high = bounds[i]
                clamped = clamp(v, low, high)
                if clamped != v:
                    warnings.warn(
                        f"{cls.mode}.{names[i]}={raw!r} is outside [{low}, {high}]; clamped to {clamped}",
                        OutOfDomainWarning,
                        stacklevel=3,
                    )
                v = clamped
            if cls.format_type == FormatType.INT:
                v = round_half_up(v)
                if i == hue_index:
                    v %= 360
            out.append(v)
        return tuple(out)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Scalar, ...]:
        return self._value

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_INDEX

    def __getattr__(self, name: str) -> Scalar:
        # Named channel access: rgb.r, hsl.l, lch.h ...
        channels = CHANNELS.get(getattr(type(self), 'mode', None), ())
        if name in channels:
            return self._value[channels.index(name)]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index):
        return self._value[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorBase):
            return (self.mode, self.format_type, self._value) == (other.mode, other.format_type, other._value)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.mode, self.format_type, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{n}={v!r}" for n, v in zip(CHANNELS[self.mode], self._value))
        return f"{self.__class__.__name__}({fields})"

    def to_hex(self, uppercase: bool = False) -> str:
        """Canonical ``#rrggbb`` form of this color."""
        hex_code = convert(self._value, self.mode, "hex")
        return hex_code.upper() if uppercase else hex_code


def build_registry(*classes: type[ColorBase]):
    return {
        (cls.mode, cls.format_type): cls
        for cls in classes
    }
