"""Cohen-Sutherland line clipping against axis-aligned windows.

Layers (lower layers never import upper ones):
    - utils: logging, YAML I/O
    - core: value types, outcode classifier, clipping engine
    - configs: clip_job.v1 schema and loader
    - scripts: command-line runner

Convenience imports:
    from rect_clip import Point, Rectangle, Segment, clip
"""

from .core import (
    ClipError,
    Outcode,
    Point,
    Rectangle,
    Segment,
    clip,
    clip_polyline,
    compute_outcode,
)

__version__ = "0.1.0"

__all__ = [
    'ClipError',
    'Outcode',
    'Point',
    'Rectangle',
    'Segment',
    'clip',
    'clip_polyline',
    'compute_outcode',
]
