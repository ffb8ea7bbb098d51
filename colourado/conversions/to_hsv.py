import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Hsv
from ..utils.num_utils import clamp01, wrap_hue, is_finite


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Hsv:
    """
    Convert unit RGB to HSV.

    Input:
        r, g, b: clamped to [0, 1]

    Output:
        h in [0, 360), s in [0, 1], v in [0, 1]

    Achromatic colors (r == g == b) have no defined hue; 0.0 is returned for it,
    so an HSV -> RGB -> HSV round trip with s == 0 loses the original hue.
    """
    if not is_finite(r, g, b):
        raise ValueError(f"RGB components must be finite, got {(r, g, b)!r}")

    r, g, b = clamp01(r), clamp01(g), clamp01(b)

    maxc = max(r, g, b)
    minc = min(r, g, b)
    delta = maxc - minc

    v = maxc
    s = 0.0 if maxc == 0.0 else delta / maxc

    if delta == 0.0:
        h = 0.0
    elif maxc == r:
        h = 60.0 * (((g - b) / delta) % 6.0)
    elif maxc == g:
        h = 60.0 * ((b - r) / delta + 2.0)
    else:
        h = 60.0 * ((r - g) / delta + 4.0)

    return wrap_hue(h), s, v


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert unit RGB to HSV.

    Args:
        r, g, b: array-like or scalar, clipped to [0, 1]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r = np.clip(np.asarray(r, dtype=float), 0.0, 1.0)
    g = np.clip(np.asarray(g, dtype=float), 0.0, 1.0)
    b = np.clip(np.asarray(b, dtype=float), 0.0, 1.0)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    maxc = np.maximum(np.maximum(r, g), b)
    minc = np.minimum(np.minimum(r, g), b)
    delta = maxc - minc

    v = maxc
    s = np.zeros_like(maxc)
    mask = maxc > 0
    s[mask] = delta[mask] / maxc[mask]

    # achromatic pixels divide by 1 and are zeroed by the select below
    safe_delta = np.where(delta > 0, delta, 1.0)
    h_r = np.mod((g - b) / safe_delta, 6.0)
    h_g = (b - r) / safe_delta + 2.0
    h_b = (r - g) / safe_delta + 4.0

    h = 60.0 * np.select(
        [delta == 0, maxc == r, maxc == g],
        [np.zeros_like(maxc), h_r, h_g],
        default=h_b,
    )
    h = np.mod(h, 360.0)

    return np.stack([h, s, v], axis=-1)
