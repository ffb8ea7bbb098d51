"""
Colourado Color Classes
=======================

:class:`Color` is an immutable RGB color whose three float channels live in
``[0, 1]``. Instances are frozen after initialization and channels are clamped
on construction, so a color can be shared freely once produced.

Usage
-----
>>> from colourado.colors import Color, hsv_to_rgb, rgb_to_hsv
>>>
>>> red = Color((1.0, 0.0, 0.0))
>>> red.value  # (1.0, 0.0, 0.0)
>>> rgb_to_hsv(red)  # (0.0, 1.0, 1.0)
>>> hsv_to_rgb(120.0, 1.0, 1.0)  # Color((0.0, 1.0, 0.0))
"""

from .color import Color, hsv_to_rgb, rgb_to_hsv

__all__ = ['Color', 'hsv_to_rgb', 'rgb_to_hsv']
