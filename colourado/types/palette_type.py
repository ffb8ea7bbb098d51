# No dependencies
from enum import Enum
from typing import NamedTuple, Tuple


class PaletteType(str, Enum):
    RANDOM = "random"
    PASTEL = "pastel"
    DARK = "dark"


class PresetRanges(NamedTuple):
    """Inclusive ``(low, high)`` bounds sampled for saturation and value."""
    saturation: Tuple[float, float]
    value: Tuple[float, float]


PALETTE_RANGES = {
    PaletteType.RANDOM: PresetRanges(saturation=(0.40, 1.00), value=(0.20, 0.85)),
    PaletteType.PASTEL: PresetRanges(saturation=(0.20, 0.45), value=(0.80, 1.00)),
    PaletteType.DARK: PresetRanges(saturation=(0.32, 0.82), value=(0.10, 0.27)),
}

HUE_360 = 360.0

# 360 * (2 - phi); successive multiples never land on the same hue twice
GOLDEN_ANGLE = 137.50776405003785

ADJACENT_STEP = 25.0
ADJACENT_JITTER = 5.0
