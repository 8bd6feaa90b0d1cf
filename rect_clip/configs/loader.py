"""Clip job loader.

Loads a ``clip_job.v1`` YAML file and validates it with pydantic into
typed models that convert straight to core types.  The demo job shipped
beside this module reproduces the reference window and its seven sample
segments.

Usage::

    from rect_clip.configs.loader import load_config
    job = load_config()                     # shipped demo job
    job = load_config("/path/to/job.yaml")  # explicit path
    window = job.to_window()
    segments = [spec.to_segment() for spec in job.segments]
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional, Tuple

import numpy as np
import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    FiniteFloat,
    ValidationError,
    field_validator,
    model_validator,
)

from rect_clip.core.primitives import Point, Rectangle, Segment
from rect_clip.utils.fs import load_yaml

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "clip_job.v1"
DEFAULT_JOB_PATH = Path(__file__).parent / "demo_job.yaml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigError(Exception):
    """Raised when a clip job fails to load or validate."""

    pass


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

PointSpec = Tuple[FiniteFloat, FiniteFloat]


class WindowSpec(BaseModel):
    """Clip window bounds."""
    x_min: FiniteFloat
    y_min: FiniteFloat
    x_max: FiniteFloat
    y_max: FiniteFloat

    @model_validator(mode='after')
    def validate_ordering(self) -> 'WindowSpec':
        if self.x_min > self.x_max:
            raise ValueError(f"x_max ({self.x_max}) must be >= x_min ({self.x_min})")
        if self.y_min > self.y_max:
            raise ValueError(f"y_max ({self.y_max}) must be >= y_min ({self.y_min})")
        return self

    def to_rectangle(self) -> Rectangle:
        return Rectangle(self.x_min, self.y_min, self.x_max, self.y_max)


class SegmentSpec(BaseModel):
    """One segment to clip."""
    name: Optional[str] = Field(None, description="Label used in output")
    p1: PointSpec
    p2: PointSpec

    def to_segment(self) -> Segment:
        return Segment(Point(*self.p1), Point(*self.p2))


class PolylineSpec(BaseModel):
    """One polyline to clip edge by edge."""
    name: Optional[str] = Field(None, description="Label used in output")
    points: List[PointSpec] = Field(..., min_length=2)

    def to_array(self) -> np.ndarray:
        return np.asarray(self.points, dtype=np.float64)


class LoggingSpec(BaseModel):
    """Logging options applied by the runner."""
    model_config = ConfigDict(populate_by_name=True)

    level: str = Field("INFO", description="Root log level")
    json_format: bool = Field(False, alias="json", description="Emit JSON lines")
    file: Optional[str] = Field(None, description="Optional log file path")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {LOG_LEVELS}, got '{v}'")
        return v


class ClipJobV1(BaseModel):
    """Complete clip job (clip_job.v1 schema)."""
    model_config = ConfigDict(populate_by_name=True)

    schema_version: str = Field(SCHEMA_VERSION, alias="schema")
    window: WindowSpec
    segments: List[SegmentSpec] = Field(default_factory=list)
    polylines: List[PolylineSpec] = Field(default_factory=list)
    log: LoggingSpec = Field(default_factory=LoggingSpec, alias="logging")

    @field_validator('schema_version')
    @classmethod
    def validate_schema(cls, v: str) -> str:
        if v != SCHEMA_VERSION:
            raise ValueError(f"Expected schema '{SCHEMA_VERSION}', got '{v}'")
        return v

    @model_validator(mode='after')
    def validate_unique_names(self) -> 'ClipJobV1':
        seen = set()
        for item in [*self.segments, *self.polylines]:
            if item.name is None:
                continue
            if item.name in seen:
                raise ValueError(f"Duplicate name '{item.name}'")
            seen.add(item.name)
        return self

    def to_window(self) -> Rectangle:
        return self.window.to_rectangle()


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def parse_clip_job(data: Any, source: str = "<dict>") -> ClipJobV1:
    """Validate already-parsed job data.

    Raises
    ------
    ConfigError
        If *data* is empty or fails validation.
    """
    if not data:
        raise ConfigError(f"Empty clip job: {source}")
    if not isinstance(data, dict):
        raise ConfigError(f"Clip job must be a mapping, got {type(data).__name__}: {source}")

    try:
        return ClipJobV1.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Clip job validation failed at {source}: {e}") from e


def load_config(path: str | Path | None = None) -> ClipJobV1:
    """Load and validate a clip job from YAML.

    Parameters
    ----------
    path : str | Path | None
        Path to a ``clip_job.v1`` file.  ``None`` loads the demo job
        shipped alongside this module.

    Returns
    -------
    ClipJobV1
        Validated job.

    Raises
    ------
    ConfigError
        If the file is empty, unparsable, or fails validation.
    FileNotFoundError
        If *path* does not exist.
    """
    path = DEFAULT_JOB_PATH if path is None else Path(path)

    logger.info("Loading clip job from %s", path)

    try:
        data = load_yaml(path)
    except yaml.YAMLError as e:
        raise ConfigError(str(e)) from e

    job = parse_clip_job(data, source=str(path))
    logger.debug(
        "Clip job has %d segment(s) and %d polyline(s)",
        len(job.segments), len(job.polylines),
    )
    return job