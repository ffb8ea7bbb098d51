from __future__ import annotations
from typing import Tuple

Scalar = int | float
Hsv = Tuple[float, float, float]
RgbTuple = Tuple[float, float, float]
