"""Tests for rect_clip.core.primitives.

Covers construction checks (finite coordinates, window ordering),
formatting, and the small convenience members.

Run:
    pytest tests/test_primitives.py -v
"""

from __future__ import annotations

import dataclasses
import math

import pytest

from rect_clip.core.errors import ClipError, InvalidWindowError
from rect_clip.core.primitives import Point, Rectangle, Segment


class TestPoint:
    def test_str_one_decimal(self) -> None:
        assert str(Point(10.5, 20.0)) == "(10.5, 20.0)"

    def test_as_tuple(self) -> None:
        assert Point(1.0, 2.0).as_tuple() == (1.0, 2.0)

    @pytest.mark.parametrize("x, y", [
        (math.nan, 0.0),
        (0.0, math.inf),
        (-math.inf, 1.0),
    ])
    def test_non_finite_rejected(self, x: float, y: float) -> None:
        with pytest.raises(ValueError, match="must be finite"):
            Point(x, y)

    def test_frozen(self) -> None:
        p = Point(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.x = 5.0  # type: ignore[misc]

    def test_value_equality(self) -> None:
        assert Point(1.0, 2.0) == Point(1.0, 2.0)
        assert Point(1.0, 2.0) != Point(2.0, 1.0)


class TestRectangle:
    def test_inverted_x_rejected(self) -> None:
        with pytest.raises(InvalidWindowError, match="x_min"):
            Rectangle(200.0, 100.0, 100.0, 200.0)

    def test_inverted_y_rejected(self) -> None:
        with pytest.raises(InvalidWindowError, match="y_min"):
            Rectangle(100.0, 200.0, 200.0, 100.0)

    def test_invalid_window_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Rectangle(0.0, 0.0, -1.0, 1.0)
        assert issubclass(InvalidWindowError, ClipError)

    def test_non_finite_bound_rejected(self) -> None:
        with pytest.raises(InvalidWindowError, match="finite"):
            Rectangle(0.0, 0.0, math.inf, 1.0)

    def test_degenerate_windows_allowed(self) -> None:
        line = Rectangle(150.0, 100.0, 150.0, 200.0)
        dot = Rectangle(5.0, 5.0, 5.0, 5.0)
        assert line.width == 0.0 and line.height == 100.0
        assert dot.width == 0.0 and dot.height == 0.0

    def test_contains_is_boundary_inclusive(self, window: Rectangle) -> None:
        assert window.contains(Point(100.0, 100.0))
        assert window.contains(Point(200.0, 150.0))
        assert window.contains(Point(150.0, 150.0))
        assert not window.contains(Point(99.999, 150.0))
        assert not window.contains(Point(150.0, 200.001))

    def test_from_xyxy_roundtrip(self) -> None:
        rect = Rectangle.from_xyxy((0, 1, 2, 3))
        assert rect == Rectangle(0.0, 1.0, 2.0, 3.0)
        assert rect.as_xyxy() == (0.0, 1.0, 2.0, 3.0)


class TestSegment:
    def test_from_coords(self) -> None:
        seg = Segment.from_coords(1, 2, 3, 4)
        assert seg.p1 == Point(1.0, 2.0)
        assert seg.p2 == Point(3.0, 4.0)
        assert seg.as_tuple() == (1.0, 2.0, 3.0, 4.0)

    def test_reversed_swaps_endpoints(self) -> None:
        seg = Segment.from_coords(1, 2, 3, 4)
        assert seg.reversed() == Segment.from_coords(3, 4, 1, 2)

    def test_length(self) -> None:
        assert Segment.from_coords(0, 0, 3, 4).length == pytest.approx(5.0)
        assert Segment.from_coords(7, 7, 7, 7).length == 0.0

    def test_str(self) -> None:
        assert str(Segment.from_coords(50, 50, 250, 250)) == "(50.0, 50.0) -> (250.0, 250.0)"

    def test_non_finite_rejected(self) -> None:
        with pytest.raises(ValueError):
            Segment.from_coords(0, 0, math.nan, 1)
