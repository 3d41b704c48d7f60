"""Gradient colour stops decoded from the flat number lists used by Lottie."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice

__all__ = ["normalize_to_range", "gradient_stops"]

GradientStop = tuple[float, float, float, float, float]


def normalize_to_range(a: float, b: float, x: float) -> float:
    """Return where ``x`` lies between ``a`` and ``b`` (0 at ``a``, 1 at ``b``).

    A degenerate range (``a == b``) yields 0.0.
    """
    if a == b:
        return 0.0
    return (x - a) / (b - a)


def _chunks(values: list[float], size: int) -> Iterator[tuple[float, ...]]:
    """Yield consecutive complete chunks of ``size`` items, dropping any remainder."""
    it = iter(values)
    return zip(*[it] * size)


def _lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def _stop_alpha(offset: float, alpha_stops: list[tuple[float, ...]]) -> float:
    alpha = 1.0
    for (a, alpha_a), (b, alpha_b) in zip(alpha_stops, alpha_stops[1:]):
        t = normalize_to_range(a, b, offset)
        interp = _lerp(alpha_a, alpha_b, t)
        inside = a <= offset <= b
        # Keep the end alphas near the gradient edges, giving a falloff
        # close to what common Lottie players render.
        if inside and t <= 0.25 and offset <= 0.1:
            interp = alpha_a
        if inside and t >= 0.75 and offset >= 0.9:
            interp = alpha_b
        alpha = min(alpha, interp)
    return alpha


def gradient_stops(values: Iterable[float], count: int) -> list[GradientStop]:
    """Decode ``count`` colour stops from a Lottie gradient value list.

    The list holds ``count`` groups of ``(offset, r, g, b)`` followed by an
    optional run of ``(offset, alpha)`` pairs. Each returned stop is
    ``(offset, r, g, b, alpha)``; alpha is 1.0 unless alpha pairs are present,
    in which case it is the smallest alpha interpolated between each pair of
    neighbouring alpha stops. If the list has fewer colour groups than
    ``count`` the stops are returned without alpha data applied.
    """
    if count < 0:
        raise ValueError(f"stop count must not be negative, got {count}")
    data = [float(v) for v in values]
    wanted = max(count, 1)
    colors = list(islice(_chunks(data, 4), wanted))
    if len(colors) < wanted:
        return [(o, r, g, b, 1.0) for o, r, g, b in colors]

    alpha_stops = list(_chunks(data, 2))[count * 2 :]
    return [(o, r, g, b, _stop_alpha(o, alpha_stops)) for o, r, g, b in colors]