"""
Adapters for caller-supplied randomness.

The package never seeds or owns a random number generator. Anything that can
hand out uniform floats in ``[0, 1)`` is accepted:

- an object with a ``next_float()`` method
- an object with a ``random()`` method (``random.Random``, the ``random``
  module, ``numpy.random.Generator``)
- a zero-argument callable
"""
from __future__ import annotations
from typing import Any, Callable, Protocol, runtime_checkable

FloatSource = Callable[[], float]


@runtime_checkable
class RandomSource(Protocol):
    def next_float(self) -> float: ...


class RandomSourceError(RuntimeError):
    """The injected random source failed or produced a value outside [0, 1)."""


def as_random_source(rng: Any) -> FloatSource:
    """Return a zero-argument callable drawing floats from ``rng``."""
    next_float = getattr(rng, "next_float", None)
    if callable(next_float):
        return next_float

    random_method = getattr(rng, "random", None)
    if callable(random_method):
        return random_method

    if callable(rng):
        return rng

    raise TypeError(
        f"{type(rng).__name__} is not a random source; expected next_float(), random() or a callable"
    )


def draw_unit_float(source: FloatSource) -> float:
    """
    Draw one float from ``source`` and check it lies in ``[0, 1)``.

    Raises:
        RandomSourceError: if the source raises or returns an invalid value.
    """
    try:
        drawn = source()
    except Exception as exc:
        raise RandomSourceError(f"random source raised {type(exc).__name__}: {exc}") from exc

    try:
        result = float(drawn)
    except (TypeError, ValueError) as exc:
        raise RandomSourceError(f"random source returned non-numeric value {drawn!r}") from exc

    if not 0.0 <= result < 1.0:
        raise RandomSourceError(f"random source returned {result!r}, expected a float in [0, 1)")
    return result
