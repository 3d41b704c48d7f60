"""Keyframe easing handles, bezier spline points and layer blend modes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from itertools import chain, repeat

__all__ = [
    "EasingHandle",
    "BlendMode",
    "MatteMode",
    "collect_tangents",
    "keyframe_handle",
    "spline_points",
    "blend_mode_for",
    "matte_blend",
]

Component = float | Sequence[float]
Point = tuple[float, float]


@dataclass(frozen=True)
class EasingHandle:
    """One bezier easing control point of a keyframe."""

    x: float
    y: float


class BlendMode(Enum):
    """Layer blend modes, numbered as in the Lottie format."""

    NORMAL = 0
    MULTIPLY = 1
    SCREEN = 2
    OVERLAY = 3
    DARKEN = 4
    LIGHTEN = 5
    COLOR_DODGE = 6
    COLOR_BURN = 7
    HARD_LIGHT = 8
    SOFT_LIGHT = 9
    DIFFERENCE = 10
    EXCLUSION = 11
    HUE = 12
    SATURATION = 13
    COLOR = 14
    LUMINOSITY = 15
    ADD = 16
    HARD_MIX = 17


class MatteMode(Enum):
    """Track matte modes, numbered as in the Lottie format."""

    NORMAL = 0
    ALPHA = 1
    INVERTED_ALPHA = 2
    LUMA = 3
    INVERTED_LUMA = 4


_UNSUPPORTED_BLENDS = frozenset({BlendMode.ADD, BlendMode.HARD_MIX})


def _is_array(component: Component) -> bool:
    return not isinstance(component, (int, float))


def collect_tangents(x_coordinate: Component, y_coordinate: Component) -> list[EasingHandle]:
    """Build easing handles from a keyframe's x and y components.

    Each component is a single number or a list of numbers. Two lists are
    paired element by element (stopping at the shorter); a single number is
    repeated against every element of the other list.
    """
    x_is_array = _is_array(x_coordinate)
    y_is_array = _is_array(y_coordinate)
    if x_is_array and y_is_array:
        pairs: Iterable[tuple[float, float]] = zip(x_coordinate, y_coordinate)  # type: ignore[arg-type]
    elif x_is_array:
        pairs = ((x, y_coordinate) for x in x_coordinate)  # type: ignore[union-attr,misc]
    elif y_is_array:
        pairs = ((x_coordinate, y) for y in y_coordinate)  # type: ignore[union-attr,misc]
    else:
        pairs = [(x_coordinate, y_coordinate)]  # type: ignore[list-item]
    return [EasingHandle(float(x), float(y)) for x, y in pairs]


def _single(component: Component, axis: str) -> float:
    if not _is_array(component):
        return float(component)  # type: ignore[arg-type]
    values = list(component)  # type: ignore[arg-type]
    if len(values) != 1:
        raise ValueError(
            f"easing handle {axis} must hold exactly one value, got {values!r}"
        )
    return float(values[0])


def keyframe_handle(x_coordinate: Component, y_coordinate: Component) -> EasingHandle:
    """Build a single easing handle; list components must hold one value."""
    return EasingHandle(_single(x_coordinate, "x"), _single(y_coordinate, "y"))


def spline_points(
    vertices: Iterable[Sequence[float]],
    in_tangents: Iterable[Sequence[float]],
    out_tangents: Iterable[Sequence[float]],
    closed: bool | None,
) -> tuple[list[Point], bool]:
    """Flatten a Lottie bezier into ``[vertex, in, out, vertex, in, out, ...]``.

    Missing tangents are taken as ``(0, 0)``; surplus tangents are ignored.
    Returns the points and whether the path is closed (``None`` means open).
    """
    zero = (0.0, 0.0)
    points: list[Point] = []
    for vertex, tan_in, tan_out in zip(
        vertices,
        chain(in_tangents, repeat(zero)),
        chain(out_tangents, repeat(zero)),
    ):
        points.append((float(vertex[0]), float(vertex[1])))
        points.append((float(tan_in[0]), float(tan_in[1])))
        points.append((float(tan_out[0]), float(tan_out[1])))
    return points, bool(closed)


def _lookup(enum_type: type[Enum], value: object) -> Enum:
    if isinstance(value, enum_type):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return enum_type(value)
    if isinstance(value, str):
        key = value.strip().lower().replace("-", "").replace("_", "").replace(" ", "")
        for member in enum_type:
            if member.name.lower().replace("_", "") == key:
                return member
    raise ValueError(f"unknown {enum_type.__name__}: {value!r}")


def blend_mode_for(name: BlendMode | int | str) -> str | None:
    """Return the mix operation for a layer blend mode.

    Normal blending needs no separate layer and yields ``None``; other modes
    yield their mix name in snake case, e.g. ``"color_dodge"``. Additive and
    hard-mix blending are not supported and raise ``ValueError``.
    """
    mode = _lookup(BlendMode, name)
    if mode is BlendMode.NORMAL:
        return None
    if mode in _UNSUPPORTED_BLENDS:
        raise ValueError(f"blend mode {mode.name.lower()} is not supported")
    return mode.name.lower()


def matte_blend(mode: MatteMode | int | str) -> str:
    """Return how a track matte combines with the layer it masks.

    Normal mattes mix normally; alpha and luma mattes keep the source inside
    the matte (``"src_in"``); inverted mattes keep it outside (``"src_out"``).
    """
    matte = _lookup(MatteMode, mode)
    if matte is MatteMode.NORMAL:
        return "normal"
    if matte in (MatteMode.ALPHA, MatteMode.LUMA):
        return "src_in"
    return "src_out"