"""
Colourado Color Space Conversions
=================================

Scalar and vectorized (numpy) conversions between HSV and unit RGB.

Conversion Functions
-------------------

HSV → RGB:
    hsv_to_unit_rgb(h, s, v)
        Scalar HSV to RGB conversion
    np_hsv_to_unit_rgb(h, s, v)
        Vectorized HSV to RGB conversion

RGB → HSV:
    unit_rgb_to_hsv(r, g, b)
        Scalar RGB to HSV conversion
    np_unit_rgb_to_hsv(r, g, b)
        Vectorized RGB to HSV conversion

Input Policy
------------
Out-of-range inputs are clamped, never rejected: hue wraps modulo 360
(so 360 maps to 0), saturation, value and RGB channels are clipped to [0, 1].
The scalar functions raise ValueError for NaN or infinite components.

Examples
--------
>>> from colourado.conversions import hsv_to_unit_rgb, unit_rgb_to_hsv
>>> r, g, b = hsv_to_unit_rgb(120.0, 1.0, 1.0)
>>> h, s, v = unit_rgb_to_hsv(r, g, b)
>>>
>>> import numpy as np
>>> from colourado.conversions import np_hsv_to_unit_rgb
>>> hsv = np.array([[0.0, 1.0, 1.0], [240.0, 0.5, 0.5]])
>>> rgb = np_hsv_to_unit_rgb(hsv[..., 0], hsv[..., 1], hsv[..., 2])
"""

from .to_rgb import hsv_to_unit_rgb, np_hsv_to_unit_rgb
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv

__all__ = [
    'hsv_to_unit_rgb',
    'np_hsv_to_unit_rgb',
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',
]
