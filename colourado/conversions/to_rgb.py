import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RgbTuple
from ..utils.num_utils import clamp01, wrap_hue, is_finite


def hsv_to_unit_rgb(h: float, s: float, v: float) -> RgbTuple:
    """
    Convert HSV to unit RGB.

    Input:
        h: hue in degrees, wrapped into [0, 360) (360 -> 0, -30 -> 330)
        s, v: clamped to [0, 1]

    Output:
        (r, g, b), each in [0, 1]

    Raises:
        ValueError: if any input is NaN or infinite.
    """
    if not is_finite(h, s, v):
        raise ValueError(f"HSV components must be finite, got {(h, s, v)!r}")

    h = wrap_hue(h)
    s = clamp01(s)
    v = clamp01(v)

    c = v * s
    hp = h / 60.0
    x = c * (1.0 - abs(hp % 2.0 - 1.0))
    m = v - c

    sextant = int(hp) % 6
    if sextant == 0:
        r1, g1, b1 = c, x, 0.0
    elif sextant == 1:
        r1, g1, b1 = x, c, 0.0
    elif sextant == 2:
        r1, g1, b1 = 0.0, c, x
    elif sextant == 3:
        r1, g1, b1 = 0.0, x, c
    elif sextant == 4:
        r1, g1, b1 = x, 0.0, c
    else:
        r1, g1, b1 = c, 0.0, x

    return clamp01(r1 + m), clamp01(g1 + m), clamp01(b1 + m)


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV to unit RGB.

    Args:
        h: array-like or scalar, hue in degrees (wrapped into [0, 360))
        s: array-like or scalar, saturation (clipped to [0, 1])
        v: array-like or scalar, value (clipped to [0, 1])

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.mod(np.asarray(h, dtype=float), 360.0)
    s = np.clip(np.asarray(s, dtype=float), 0.0, 1.0)
    v = np.clip(np.asarray(v, dtype=float), 0.0, 1.0)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    c = v * s
    hp = h / 60.0
    x = c * (1.0 - np.abs(np.mod(hp, 2.0) - 1.0))
    m = v - c
    zeros = np.zeros_like(c)

    sextant = np.floor(hp).astype(int) % 6
    conditions = [sextant == i for i in range(6)]

    r1 = np.select(conditions, [c, x, zeros, zeros, x, c])
    g1 = np.select(conditions, [x, c, c, x, zeros, zeros])
    b1 = np.select(conditions, [zeros, zeros, x, c, c, x])

    return np.clip(np.stack([r1 + m, g1 + m, b1 + m], axis=-1), 0.0, 1.0)
