import math

from ..types.palette_type import HUE_360


def clamp01(value: float) -> float:
    """Clamp ``value`` to the inclusive range ``[0, 1]``."""
    return max(0.0, min(float(value), 1.0))


def wrap_hue(hue: float) -> float:
    """Wrap a hue in degrees into ``[0, 360)``."""
    wrapped = float(hue) % HUE_360
    # tiny negative inputs round up to exactly 360.0
    return 0.0 if wrapped >= HUE_360 else wrapped


def lerp(low: float, high: float, t: float) -> float:
    return low + (high - low) * t


def is_finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)
