from .num_utils import clamp01, wrap_hue, lerp, is_finite

__all__ = ["clamp01", "wrap_hue", "lerp", "is_finite"]
