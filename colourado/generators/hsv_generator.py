from __future__ import annotations
import math
from typing import Any, List

import numpy as np

from ..random_source import as_random_source, draw_unit_float
from ..types.color_types import Hsv
from ..types.palette_type import (
    PaletteType,
    PresetRanges,
    PALETTE_RANGES,
    HUE_360,
    GOLDEN_ANGLE,
    ADJACENT_STEP,
    ADJACENT_JITTER,
)
from ..utils.num_utils import clamp01, lerp, wrap_hue


class HsvGenerator:
    """
    Infinite, stateful source of HSV triples.

    Each call to :meth:`next_hsv` advances the current hue by the step and
    samples saturation and value inside the preset ranges. The stream cannot
    be rewound and is shared by everyone holding the instance. Calls mutate
    the generator, so concurrent users must serialise access themselves.

    Hue stepping:
        spread (``adjacent=False``): a fixed ``spread_step`` per call, the
        golden angle by default, so consecutive hues are ~137.5° apart.
        adjacent (``adjacent=True``): ``adjacent_step`` plus a uniform jitter
        in ``[-adjacent_jitter, +adjacent_jitter]``, 20° to 30° by default.

    Random draws: one at construction (initial hue), then per call the hue
    jitter (adjacent only), saturation, value, in that order.
    """

    def __init__(
        self,
        palette_type: PaletteType | str,
        adjacent: bool,
        rng: Any,
        *,
        spread_step: float = GOLDEN_ANGLE,
        adjacent_step: float = ADJACENT_STEP,
        adjacent_jitter: float = ADJACENT_JITTER,
    ) -> None:
        if isinstance(palette_type, str):
            palette_type = palette_type.lower()
        try:
            self._palette_type = PaletteType(palette_type)
        except ValueError:
            valid = ", ".join(p.value for p in PaletteType)
            raise ValueError(f"Unknown palette type {palette_type!r}; expected one of {valid}") from None

        if not all(math.isfinite(x) for x in (spread_step, adjacent_step, adjacent_jitter)):
            raise ValueError("Hue steps and jitter must be finite")
        if adjacent_jitter < 0:
            raise ValueError("adjacent_jitter must be non-negative")

        self._adjacent = bool(adjacent)
        self._ranges: PresetRanges = PALETTE_RANGES[self._palette_type]
        if self._adjacent:
            self._step = float(adjacent_step)
            self._jitter = float(adjacent_jitter)
        else:
            self._step = float(spread_step)
            self._jitter = 0.0

        self._source = as_random_source(rng)
        self._hue = wrap_hue(draw_unit_float(self._source) * HUE_360)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def palette_type(self) -> PaletteType:
        return self._palette_type

    @property
    def adjacent(self) -> bool:
        return self._adjacent

    @property
    def hue(self) -> float:
        """Hue of the most recent triple (the initial hue before the first call)."""
        return self._hue

    @property
    def step(self) -> float:
        return self._step

    @property
    def jitter(self) -> float:
        return self._jitter

    @property
    def ranges(self) -> PresetRanges:
        return self._ranges

    def next_hsv(self) -> Hsv:
        """Advance the hue and return the next ``(hue, saturation, value)``."""
        step = self._step
        if self._jitter:
            step += (2.0 * draw_unit_float(self._source) - 1.0) * self._jitter

        sat_low, sat_high = self._ranges.saturation
        val_low, val_high = self._ranges.value
        saturation = clamp01(lerp(sat_low, sat_high, draw_unit_float(self._source)))
        value = clamp01(lerp(val_low, val_high, draw_unit_float(self._source)))

        # commit only once every draw has succeeded
        hue = wrap_hue(self._hue + step)
        self._hue = hue
        return hue, saturation, value

    def take(self, count: int) -> List[Hsv]:
        """Return the next ``count`` triples."""
        if count < 0:
            raise ValueError("count must be non-negative")
        return [self.next_hsv() for _ in range(count)]

    def take_array(self, count: int) -> np.ndarray:
        """Return the next ``count`` triples as a ``(count, 3)`` float array."""
        return np.array(self.take(count), dtype=float).reshape(count, 3)

    def __iter__(self) -> HsvGenerator:
        return self

    def __next__(self) -> Hsv:
        return self.next_hsv()

    def __repr__(self) -> str:
        return (
            f"HsvGenerator(palette_type={self._palette_type.value!r}, "
            f"adjacent={self._adjacent}, hue={self._hue})"
        )
