from colourado.colors.color import Color, hsv_to_rgb
from colourado.generators.hsv_generator import HsvGenerator
from colourado.generators.palette import ColorPalette
from colourado.types.palette_type import PaletteType, GOLDEN_ANGLE
import numpy as np
from ..utils import FixedSource
import pytest


def test_produce_next_converts_generator_output():
    palette = ColorPalette(PaletteType.RANDOM, False, FixedSource([0.0, 0.5, 0.5]))
    reference = HsvGenerator(PaletteType.RANDOM, False, FixedSource([0.0, 0.5, 0.5]))

    for _ in range(5):
        assert palette.produce_next() == hsv_to_rgb(*reference.next_hsv())

@pytest.mark.parametrize("palette_type", list(PaletteType))
@pytest.mark.parametrize("adjacent", [True, False])
def test_colors_stay_in_range_over_long_runs(palette_type, adjacent):
    palette = ColorPalette(palette_type, adjacent, np.random.default_rng(99))
    for _ in range(10_000):
        color = palette.produce_next()
        assert all(0.0 <= c <= 1.0 for c in color.value)
    assert 0.0 <= palette.hsv_generator.hue < 360.0

def test_palette_stream_is_shared():
    palette = ColorPalette(PaletteType.PASTEL, True, np.random.default_rng(7))
    same = palette
    first = palette.produce_next()
    second = same.produce_next()
    assert palette.hsv_generator is same.hsv_generator
    assert first != second

def test_from_generator_shares_state():
    generator = HsvGenerator(PaletteType.RANDOM, False, FixedSource([0.0, 0.5, 0.5]))
    palette = ColorPalette.from_generator(generator)
    assert palette.hsv_generator is generator

    palette.produce_next()
    assert generator.hue == pytest.approx(GOLDEN_ANGLE)
    generator.next_hsv()
    palette.produce_next()
    assert generator.hue == pytest.approx((3 * GOLDEN_ANGLE) % 360.0)

def test_generator_options_are_forwarded():
    palette = ColorPalette("random", False, FixedSource([0.0, 0.5, 0.5]), spread_step=90.0)
    assert palette.hsv_generator.step == 90.0

def test_take():
    palette = ColorPalette(PaletteType.DARK, False, np.random.default_rng(0))
    colors = palette.take(7)
    assert len(colors) == 7
    assert all(isinstance(c, Color) for c in colors)
    assert palette.take(0) == []
    with pytest.raises(ValueError):
        palette.take(-2)

def test_take_array_matches_take():
    values = [0.3, 0.1, 0.9, 0.6, 0.2]
    colors = ColorPalette(PaletteType.RANDOM, True, FixedSource(values)).take(20)
    arr = ColorPalette(PaletteType.RANDOM, True, FixedSource(values)).take_array(20)

    assert arr.shape == (20, 3)
    assert np.allclose(arr, [c.value for c in colors], atol=1e-12)

def test_iteration_protocol():
    palette = ColorPalette(PaletteType.PASTEL, False, np.random.default_rng(2))
    assert iter(palette) is palette
    assert isinstance(next(palette), Color)
