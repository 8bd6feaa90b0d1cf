"""Cohen-Sutherland region codes.

A point's outcode records which of the window's four boundary half-planes
it lies outside of.  Points on a boundary count as inside on that axis.

    TOP    |  TOP   |  TOP
    LEFT   |        |  RIGHT
    -------+--------+-------
    LEFT   | INSIDE |  RIGHT
    -------+--------+-------
    BOTTOM | BOTTOM | BOTTOM
    LEFT   |        |  RIGHT

LEFT/RIGHT and BOTTOM/TOP are mutually exclusive for a valid window.
"""

from __future__ import annotations

from enum import IntFlag

from rect_clip.core.primitives import Point, Rectangle


class Outcode(IntFlag):
    INSIDE = 0
    LEFT = 1
    RIGHT = 2
    BOTTOM = 4
    TOP = 8


def compute_outcode(point: Point, window: Rectangle) -> Outcode:
    """Classify *point* against *window*.

    Coordinates are assumed finite.
    """
    code = Outcode.INSIDE

    if point.x < window.x_min:
        code |= Outcode.LEFT
    elif point.x > window.x_max:
        code |= Outcode.RIGHT

    if point.y < window.y_min:
        code |= Outcode.BOTTOM
    elif point.y > window.y_max:
        code |= Outcode.TOP

    return code
