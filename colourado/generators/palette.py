from __future__ import annotations
from typing import Any, List

import numpy as np

from ..colors.color import Color, hsv_to_rgb
from ..conversions.to_rgb import np_hsv_to_unit_rgb
from ..types.palette_type import PaletteType
from .hsv_generator import HsvGenerator


class ColorPalette:
    """
    Infinite stream of RGB colors backed by an :class:`HsvGenerator`.

    The stream is lazy and non-restartable: every holder of the same palette
    advances one shared generator. Never exhaust it with ``list(palette)``;
    use :meth:`take` instead.

    Example:
        >>> import random
        >>> palette = ColorPalette(PaletteType.PASTEL, False, random.Random(7))
        >>> first = palette.produce_next()
        >>> more = palette.take(20)
    """

    def __init__(
        self,
        palette_type: PaletteType | str,
        adjacent: bool,
        rng: Any,
        **generator_options: Any,
    ) -> None:
        self._generator = HsvGenerator(palette_type, adjacent, rng, **generator_options)

    @classmethod
    def from_generator(cls, generator: HsvGenerator) -> ColorPalette:
        """Wrap an existing generator; the two then share one stream."""
        palette = cls.__new__(cls)
        palette._generator = generator
        return palette

    @property
    def hsv_generator(self) -> HsvGenerator:
        return self._generator

    def produce_next(self) -> Color:
        return hsv_to_rgb(*self._generator.next_hsv())

    def take(self, count: int) -> List[Color]:
        if count < 0:
            raise ValueError("count must be non-negative")
        return [self.produce_next() for _ in range(count)]

    def take_array(self, count: int) -> np.ndarray:
        """Return the next ``count`` colors as a ``(count, 3)`` RGB array."""
        hsv = self._generator.take_array(count)
        return np_hsv_to_unit_rgb(hsv[..., 0], hsv[..., 1], hsv[..., 2])

    def __iter__(self) -> ColorPalette:
        return self

    def __next__(self) -> Color:
        return self.produce_next()
