from .hsv_generator import HsvGenerator
from .palette import ColorPalette

__all__ = ["HsvGenerator", "ColorPalette"]
