"""Geometric value types shared by the classifier and the clipping engine.

Every type is an immutable, slotted dataclass.  Coordinates are plain
floats in whatever unit the caller uses; nothing here converts units.

Finite coordinates are a precondition of the clipping algorithm, so the
constructors reject NaN and infinities up front instead of letting them
leak into the intersection arithmetic.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from rect_clip.core.errors import InvalidWindowError


def _require_finite(**coords: float) -> None:
    for name, value in coords.items():
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value!r}")


# ---------------------------------------------------------------------------
# Point
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Point:
    """A 2D point.

    Parameters
    ----------
    x, y : float
        Coordinates.  Must be finite.
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        _require_finite(x=self.x, y=self.y)

    def __str__(self) -> str:
        return f"({self.x:.1f}, {self.y:.1f})"

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


# ---------------------------------------------------------------------------
# Rectangle (clip window)
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Axis-aligned clip window.

    Parameters
    ----------
    x_min, y_min, x_max, y_max : float
        Window bounds.  ``x_min <= x_max`` and ``y_min <= y_max`` must hold;
        zero width or height is allowed.

    Raises
    ------
    InvalidWindowError
        If a bound is non-finite or the window is inverted.
    """

    x_min: float
    y_min: float
    x_max: float
    y_max: float

    def __post_init__(self) -> None:
        for name in ("x_min", "y_min", "x_max", "y_max"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidWindowError(f"{name} must be finite, got {value!r}")
        if self.x_min > self.x_max:
            raise InvalidWindowError(
                f"x_min ({self.x_min}) must be <= x_max ({self.x_max})"
            )
        if self.y_min > self.y_max:
            raise InvalidWindowError(
                f"y_min ({self.y_min}) must be <= y_max ({self.y_max})"
            )

    @classmethod
    def from_xyxy(cls, rect_xyxy: Tuple[float, float, float, float]) -> "Rectangle":
        """Build from ``(xmin, ymin, xmax, ymax)``."""
        x_min, y_min, x_max, y_max = rect_xyxy
        return cls(float(x_min), float(y_min), float(x_max), float(y_max))

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    def contains(self, point: Point) -> bool:
        """Boundary-inclusive point test."""
        return (
            self.x_min <= point.x <= self.x_max
            and self.y_min <= point.y <= self.y_max
        )

    def as_xyxy(self) -> Tuple[float, float, float, float]:
        return (self.x_min, self.y_min, self.x_max, self.y_max)


# ---------------------------------------------------------------------------
# Segment
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Segment:
    """Line segment between two endpoints.

    Endpoint order carries no geometric meaning but is preserved by the
    clipping engine.
    """

    p1: Point
    p2: Point

    def __str__(self) -> str:
        return f"{self.p1} -> {self.p2}"

    @classmethod
    def from_coords(cls, x1: float, y1: float, x2: float, y2: float) -> "Segment":
        return cls(Point(float(x1), float(y1)), Point(float(x2), float(y2)))

    def reversed(self) -> "Segment":
        return Segment(self.p2, self.p1)

    @property
    def length(self) -> float:
        return math.hypot(self.p2.x - self.p1.x, self.p2.y - self.p1.y)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.p1.x, self.p1.y, self.p2.x, self.p2.y)
