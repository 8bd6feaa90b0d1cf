"""Cohen-Sutherland line clipping against an axis-aligned window.

Provides:
    - clip(): clip one segment, returning the visible part or None
    - clip_polyline(): clip an (N, 2) vertex array into visible runs

Algorithm
---------
Both endpoints are classified with :func:`compute_outcode`.  If neither is
outside, the segment is accepted as-is.  If both are outside the same
boundary, it is rejected.  Otherwise one outside endpoint (endpoint 1
first) is moved onto a boundary (TOP, then BOTTOM, RIGHT, LEFT) and the
loop repeats.  Intersections use the parametric form of the current
segment and are not rounded.

Four boundary steps always suffice in exact arithmetic.  Near a corner,
rounding can leave the interpolated coordinate a hair past a boundary the
endpoint was already clipped to, which would bounce it between the two
boundaries.  An endpoint is therefore intersected with each boundary at
most once; a repeat only snaps the stray coordinate back onto that
boundary, which lands the endpoint on the corner.  ``MAX_CLIP_STEPS`` is
the resulting upper bound (four boundaries plus one snap per endpoint).

Usage:
    from rect_clip import Rectangle, Segment, clip
    window = Rectangle(100.0, 100.0, 200.0, 200.0)
    clip(Segment.from_coords(50, 50, 250, 250), window)
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

import numpy as np

from rect_clip.core.errors import (
    ClipConvergenceError,
    ClipError,
    DegenerateIntersectionError,
    InvalidWindowError,
)
from rect_clip.core.outcode import Outcode, compute_outcode
from rect_clip.core.primitives import Point, Rectangle, Segment

logger = logging.getLogger(__name__)

MAX_CLIP_STEPS = 10

__all__ = [
    "MAX_CLIP_STEPS",
    "ClipConvergenceError",
    "ClipError",
    "DegenerateIntersectionError",
    "InvalidWindowError",
    "clip",
    "clip_polyline",
]


def _boundary_intersection(
    p1: Point,
    p2: Point,
    code: Outcode,
    window: Rectangle,
) -> tuple[Point, Outcode]:
    """Intersect segment p1-p2 with the highest-priority boundary in *code*.

    Returns the intersection point and the boundary that was used.
    """
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    boundary = _priority_boundary(code)

    if boundary in (Outcode.TOP, Outcode.BOTTOM):
        if dy == 0:
            raise DegenerateIntersectionError(
                f"Horizontal segment {p1} -> {p2} reached {boundary.name} boundary"
            )
        y_edge = window.y_max if boundary is Outcode.TOP else window.y_min
        return Point(p1.x + dx * (y_edge - p1.y) / dy, y_edge), boundary

    if dx == 0:
        raise DegenerateIntersectionError(
            f"Vertical segment {p1} -> {p2} reached {boundary.name} boundary"
        )
    x_edge = window.x_max if boundary is Outcode.RIGHT else window.x_min
    return Point(x_edge, p1.y + dy * (x_edge - p1.x) / dx), boundary


def _priority_boundary(code: Outcode) -> Outcode:
    for boundary in (Outcode.TOP, Outcode.BOTTOM, Outcode.RIGHT, Outcode.LEFT):
        if code & boundary:
            return boundary
    raise ClipError(f"No boundary to clip against for outcode {code!r}")


def _snap_to_boundary(point: Point, boundary: Outcode, window: Rectangle) -> Point:
    """Put *point* back on a boundary it was already clipped to."""
    if boundary is Outcode.TOP:
        return Point(point.x, window.y_max)
    if boundary is Outcode.BOTTOM:
        return Point(point.x, window.y_min)
    if boundary is Outcode.RIGHT:
        return Point(window.x_max, point.y)
    return Point(window.x_min, point.y)


def clip(segment: Segment, window: Rectangle) -> Optional[Segment]:
    """Clip *segment* to *window*.

    Parameters
    ----------
    segment : Segment
        Segment to clip.  Endpoint order is preserved in the result.
    window : Rectangle
        Clip window (boundary-inclusive).

    Returns
    -------
    Segment or None
        The input object itself when both endpoints are already inside,
        a new segment with endpoints on or inside the window when part
        of it is visible, or None when nothing is visible.

    Raises
    ------
    DegenerateIntersectionError
        If a boundary intersection would divide by zero.
    ClipConvergenceError
        If refinement does not settle within ``MAX_CLIP_STEPS``.  Not
        reachable for finite input.
    """
    p1, p2 = segment.p1, segment.p2
    code1 = compute_outcode(p1, window)
    code2 = compute_outcode(p2, window)
    # boundaries each endpoint has been moved onto
    placed1 = placed2 = Outcode.INSIDE

    for step in range(MAX_CLIP_STEPS + 1):
        if not (code1 | code2):
            if step == 0:
                return segment
            return Segment(p1, p2)
        if code1 & code2:
            logger.debug("Rejected %s (shared outcode %r)", segment, code1 & code2)
            return None
        if step == MAX_CLIP_STEPS:
            break

        if code1:
            boundary = _priority_boundary(code1)
            if placed1 & boundary:
                p1, action = _snap_to_boundary(p1, boundary, window), "snapped"
            else:
                p1, _ = _boundary_intersection(p1, p2, code1, window)
                placed1 |= boundary
                action = "clipped"
            code1 = compute_outcode(p1, window)
            logger.debug("Step %d: p1 %s to %s at %s", step + 1, action, boundary.name, p1)
        else:
            boundary = _priority_boundary(code2)
            if placed2 & boundary:
                p2, action = _snap_to_boundary(p2, boundary, window), "snapped"
            else:
                p2, _ = _boundary_intersection(p1, p2, code2, window)
                placed2 |= boundary
                action = "clipped"
            code2 = compute_outcode(p2, window)
            logger.debug("Step %d: p2 %s to %s at %s", step + 1, action, boundary.name, p2)

    raise ClipConvergenceError(
        f"Clipping {segment} against {window} did not settle in {MAX_CLIP_STEPS} steps"
    )


def clip_polyline(
    points: Union[np.ndarray, Sequence[Sequence[float]]],
    window: Rectangle,
) -> List[np.ndarray]:
    """Clip a polyline to *window*, edge by edge.

    Parameters
    ----------
    points : array-like
        Polyline vertices, shape (N, 2), N >= 2
    window : Rectangle
        Clip window

    Returns
    -------
    list of np.ndarray
        Visible runs, each float64 of shape (M, 2), M >= 2.  Empty if no
        part of the polyline is visible.

    Notes
    -----
    Each edge goes through :func:`clip`.  A clipped edge joins the current
    run when its first endpoint equals the run's last vertex, so the
    polyline only splits where it actually leaves the window.
    """
    pts = np.asarray(points, dtype=np.float64)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"Expected polyline of shape (N, 2), got {pts.shape}")
    if pts.shape[0] < 2:
        raise ValueError(f"Polyline needs >= 2 points, got {pts.shape[0]}")

    runs: List[List[tuple[float, float]]] = []
    current: Optional[List[tuple[float, float]]] = None

    for (xa, ya), (xb, yb) in zip(pts[:-1], pts[1:]):
        edge = Segment.from_coords(xa, ya, xb, yb)
        visible = clip(edge, window)
        if visible is None:
            if current is not None:
                runs.append(current)
                current = None
            continue

        start, end = visible.p1.as_tuple(), visible.p2.as_tuple()
        if current is not None and current[-1] == start:
            current.append(end)
        else:
            if current is not None:
                runs.append(current)
            current = [start, end]

    if current is not None:
        runs.append(current)

    logger.debug("Polyline of %d vertices clipped into %d run(s)", pts.shape[0], len(runs))
    return [np.asarray(run, dtype=np.float64) for run in runs]
