"""Multi-touch gesture tracking: pinch zoom, rotation and panning."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

__all__ = [
    "TouchPhase",
    "Touch",
    "PinchType",
    "MultiTouchInfo",
    "TouchState",
]

Point = tuple[float, float]


def _div(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics instead of raising on a zero divisor."""
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


class TouchPhase(Enum):
    """Stage of a single touch in its lifetime."""

    STARTED = "started"
    MOVED = "moved"
    ENDED = "ended"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Touch:
    """One touch event: which finger, what happened and where."""

    id: int
    phase: TouchPhase
    x: float
    y: float


class PinchType(Enum):
    """How a two-finger pinch should scale on each axis."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    PROPORTIONAL = "proportional"

    @staticmethod
    def classify(positions: list[Point]) -> "PinchType":
        """Classify a gesture from touch positions ordered by touch id.

        Two fingers roughly level pinch horizontally, two fingers roughly
        above each other pinch vertically; anything else is proportional.
        """
        if len(positions) != 2:
            return PinchType.PROPORTIONAL
        (x0, y0), (x1, y1) = positions
        dx = abs(x0 - x1)
        dy = abs(y0 - y1)
        if dx > 3.0 * dy:
            return PinchType.HORIZONTAL
        if dy > 3.0 * dx:
            return PinchType.VERTICAL
        return PinchType.PROPORTIONAL


@dataclass(frozen=True)
class MultiTouchInfo:
    """What changed in a touch gesture since the previous frame.

    ``zoom_delta`` is 1 for no change, below 1 when pinching together and
    above 1 when spreading. ``zoom_delta_2d`` is ``(z, 1)`` for horizontal
    pinches, ``(1, z)`` for vertical ones and ``(z, z)`` otherwise.
    ``rotation_delta`` is in radians and ``translation_delta`` is the
    movement of the average touch position.
    """

    num_touches: int
    zoom_delta: float
    zoom_delta_2d: tuple[float, float]
    rotation_delta: float
    translation_delta: tuple[float, float]
    zoom_centre: Point


@dataclass(frozen=True)
class _DynGestureState:
    avg_distance: float
    avg_abs_distance2: tuple[float, float]
    avg_pos: Point
    heading: float


@dataclass
class _GestureState:
    pinch_type: PinchType
    previous: Optional[_DynGestureState]
    current: _DynGestureState


class TouchState:
    """Touch events and the gesture they form, for one touch device."""

    def __init__(self) -> None:
        self._active: dict[int, Point] = {}
        self._gesture: Optional[_GestureState] = None
        self._added_or_removed = False

    def _ordered_positions(self) -> list[Point]:
        return [self._active[key] for key in sorted(self._active)]

    def add_event(self, event: Touch) -> None:
        """Record a touch starting, moving or ending."""
        pos = (float(event.x), float(event.y))
        phase = TouchPhase(event.phase)
        if phase is TouchPhase.STARTED:
            self._active[event.id] = pos
            self._added_or_removed = True
        elif phase is TouchPhase.MOVED:
            if event.id in self._active:
                self._active[event.id] = pos
        else:
            self._active.pop(event.id, None)
            self._added_or_removed = True

    def end_frame(self) -> None:
        """Advance the gesture by one frame; call every frame."""
        self._update_gesture()
        if self._added_or_removed and self._gesture is not None:
            # Adding or removing fingers makes the averages jump, so no
            # delta is reported for this frame.
            self._gesture.previous = None
        self._added_or_removed = False

    def info(self) -> Optional[MultiTouchInfo]:
        """Return the current gesture's changes, or ``None`` without touches."""
        state = self._gesture
        if state is None:
            return None
        current = state.current
        previous = state.previous if state.previous is not None else current
        count = len(self._active)

        if count > 1:
            zoom = _div(current.avg_distance, previous.avg_distance)
            if state.pinch_type is PinchType.HORIZONTAL:
                zoom_2d = (
                    _div(current.avg_abs_distance2[0], previous.avg_abs_distance2[0]),
                    1.0,
                )
            elif state.pinch_type is PinchType.VERTICAL:
                zoom_2d = (
                    1.0,
                    _div(current.avg_abs_distance2[1], previous.avg_abs_distance2[1]),
                )
            else:
                zoom_2d = (zoom, zoom)
        else:
            zoom = 1.0
            zoom_2d = (1.0, 1.0)

        return MultiTouchInfo(
            num_touches=count,
            zoom_delta=zoom,
            zoom_delta_2d=zoom_2d,
            rotation_delta=current.heading - previous.heading,
            translation_delta=(
                current.avg_pos[0] - previous.avg_pos[0],
                current.avg_pos[1] - previous.avg_pos[1],
            ),
            zoom_centre=current.avg_pos,
        )

    def _update_gesture(self) -> None:
        dyn_state = self._dynamic_state()
        if dyn_state is None:
            self._gesture = None
        elif self._gesture is not None:
            self._gesture.previous = self._gesture.current
            self._gesture.current = dyn_state
        else:
            self._gesture = _GestureState(
                pinch_type=PinchType.classify(self._ordered_positions()),
                previous=None,
                current=dyn_state,
            )

    def _dynamic_state(self) -> Optional[_DynGestureState]:
        positions = self._ordered_positions()
        if not positions:
            return None
        recip = 1.0 / len(positions)
        avg_x = sum(x for x, _ in positions) * recip
        avg_y = sum(y for _, y in positions) * recip

        avg_distance = sum(math.hypot(avg_x - x, avg_y - y) for x, y in positions) * recip
        abs_dx = sum(abs(avg_x - x) for x, _ in positions) * recip
        abs_dy = sum(abs(avg_y - y) for _, y in positions) * recip

        # Direction from the first touch to the centre; good enough while all
        # fingers rotate at roughly the same angular velocity.
        first_x, first_y = positions[0]
        heading = math.atan2(avg_y - first_y, avg_x - first_x)

        return _DynGestureState(
            avg_distance=avg_distance,
            avg_abs_distance2=(abs_dx, abs_dy),
            avg_pos=(avg_x, avg_y),
            heading=heading,
        )

    def __repr__(self) -> str:
        touches = ", ".join(f"#{key}: {pos}" for key, pos in sorted(self._active.items()))
        return f"TouchState(touches=[{touches}], gesture={self._gesture!r})"