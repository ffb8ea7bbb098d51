from .palette_type import (
    PaletteType,
    PresetRanges,
    PALETTE_RANGES,
    HUE_360,
    GOLDEN_ANGLE,
    ADJACENT_STEP,
    ADJACENT_JITTER,
)
from .color_types import Hsv, RgbTuple, Scalar

__all__ = [
    "PaletteType",
    "PresetRanges",
    "PALETTE_RANGES",
    "HUE_360",
    "GOLDEN_ANGLE",
    "ADJACENT_STEP",
    "ADJACENT_JITTER",
    "Hsv",
    "RgbTuple",
    "Scalar",
]
