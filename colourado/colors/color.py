from __future__ import annotations
import warnings
from typing import Any, ClassVar, Iterable, Tuple

from ..conversions.to_rgb import hsv_to_unit_rgb
from ..conversions.to_hsv import unit_rgb_to_hsv
from ..types.color_types import Hsv, RgbTuple
from ..utils.num_utils import clamp01, is_finite


class Color:
    """
    An immutable RGB color with float channels in ``[0, 1]``.

    Channels outside the unit range are clamped on construction. NaN or infinite
    channels raise ValueError.
    """
    __slots__ = ('_value', '_is_frozen')  # no instance __dict__, attributes are fixed

    num_channels: ClassVar[int] = 3
    maxima: ClassVar[RgbTuple] = (1.0, 1.0, 1.0)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Iterable[float]) -> None:
        channels = tuple(value)
        if len(channels) != self.num_channels:
            raise ValueError(f"Color expects {self.num_channels} channels, got {len(channels)}")
        if not is_finite(*channels):
            raise ValueError(f"Color channels must be finite, got {channels!r}")

        self._value: RgbTuple = tuple(clamp01(c) for c in channels)  # type: ignore[assignment]

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> RgbTuple:
        return self._value

    @property
    def red(self) -> float:
        return self._value[0]

    @property
    def green(self) -> float:
        return self._value[1]

    @property
    def blue(self) -> float:
        return self._value[2]

    def to_hsv(self) -> Hsv:
        """Return ``(hue, saturation, value)``; hue is 0.0 for greys."""
        return unit_rgb_to_hsv(*self._value)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        r, g, b = self._value
        return f"Color(({r}, {g}, {b}))"


def hsv_to_rgb(hue: float, saturation: float, value: float) -> Color:
    """
    Convert an HSV triple to a :class:`Color`.

    Hue wraps modulo 360. Saturation and value outside ``[0, 1]`` are clamped
    and a ``RuntimeWarning`` is issued. NaN or infinite components raise
    ValueError without warning.

    Args:
        hue: Hue in degrees
        saturation: Saturation in [0, 1]
        value: Value in [0, 1]

    Returns:
        The RGB color.
    """
    if not is_finite(hue, saturation, value):
        raise ValueError(f"HSV components must be finite, got {(hue, saturation, value)!r}")
    for name, component in (("saturation", saturation), ("value", value)):
        if not 0.0 <= component <= 1.0:
            warnings.warn(
                f"{name} {component!r} is outside [0, 1] and was clamped",
                RuntimeWarning,
                stacklevel=2,
            )
    return Color(hsv_to_unit_rgb(hue, saturation, value))


def rgb_to_hsv(color: Color) -> Hsv:
    """
    Convert a :class:`Color` to ``(hue, saturation, value)``.

    The hue of an achromatic color is undefined and reported as 0.0.
    """
    if not isinstance(color, Color):
        raise TypeError(f"rgb_to_hsv expects a Color, got {type(color).__name__}")
    return color.to_hsv()
