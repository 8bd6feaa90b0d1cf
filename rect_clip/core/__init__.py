"""Clipping core: value types, outcode classifier, clipping engine.

No module in core/ may import from configs/, utils/ or scripts/.
"""

from .clipping import MAX_CLIP_STEPS, clip, clip_polyline
from .errors import (
    ClipConvergenceError,
    ClipError,
    DegenerateIntersectionError,
    InvalidWindowError,
)
from .outcode import Outcode, compute_outcode
from .primitives import Point, Rectangle, Segment

__all__ = [
    'MAX_CLIP_STEPS',
    'ClipConvergenceError',
    'ClipError',
    'DegenerateIntersectionError',
    'InvalidWindowError',
    'Outcode',
    'Point',
    'Rectangle',
    'Segment',
    'clip',
    'clip_polyline',
    'compute_outcode',
]
