"""Colourado: palettes of visually distinct colors."""

from .types.palette_type import (
    PaletteType,
    PresetRanges,
    PALETTE_RANGES,
    GOLDEN_ANGLE,
    ADJACENT_STEP,
    ADJACENT_JITTER,
)
from .types.color_types import Hsv
from .colors.color import Color, hsv_to_rgb, rgb_to_hsv
from .generators import HsvGenerator, ColorPalette
from .random_source import RandomSource, RandomSourceError, as_random_source
from .conversions import (
    hsv_to_unit_rgb,
    unit_rgb_to_hsv,
    np_hsv_to_unit_rgb,
    np_unit_rgb_to_hsv,
)

__version__ = "1.0.0"

__all__ = [
    # generation
    "PaletteType",
    "PresetRanges",
    "PALETTE_RANGES",
    "GOLDEN_ANGLE",
    "ADJACENT_STEP",
    "ADJACENT_JITTER",
    "HsvGenerator",
    "ColorPalette",
    # colors
    "Color",
    "Hsv",
    "hsv_to_rgb",
    "rgb_to_hsv",
    # randomness
    "RandomSource",
    "RandomSourceError",
    "as_random_source",
    # conversions
    "hsv_to_unit_rgb",
    "unit_rgb_to_hsv",
    "np_hsv_to_unit_rgb",
    "np_unit_rgb_to_hsv",
    "__version__",
]
