"""Clip job configuration (clip_job.v1 YAML + pydantic schema)."""

from .loader import (
    DEFAULT_JOB_PATH,
    ClipJobV1,
    ConfigError,
    PolylineSpec,
    SegmentSpec,
    WindowSpec,
    load_config,
    parse_clip_job,
)

__all__ = [
    'DEFAULT_JOB_PATH',
    'ClipJobV1',
    'ConfigError',
    'PolylineSpec',
    'SegmentSpec',
    'WindowSpec',
    'load_config',
    'parse_clip_job',
]
