"""Filesystem helpers for clip jobs and their results.

Provides:
    - load_yaml(): read a clip job (or any YAML mapping) with safe_load
    - atomic_yaml_dump(): write clip results so readers never see a partial file

Usage:
    from rect_clip.utils import fs
    job = fs.load_yaml("configs/demo_job.yaml")
    fs.atomic_yaml_dump({"segments": [...]}, "outputs/clip_results.yaml")
"""

import os
from pathlib import Path
from typing import Any, Dict, Union

import yaml

PathLike = Union[str, Path]


def atomic_write_bytes(path: PathLike, data: bytes, tmp_suffix: str = ".tmp") -> None:
    """Write *data* to *path* via a hidden sibling file and a rename.

    Raises
    ------
    RuntimeError
        If the write or rename fails.  The sibling file is removed first.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    staging = path.parent / f".{path.name}{tmp_suffix}"

    try:
        with staging.open('wb') as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(staging, path)
    except OSError as e:
        staging.unlink(missing_ok=True)
        raise RuntimeError(f"Failed to write {path} atomically: {e}") from e


def atomic_yaml_dump(obj: Any, path: PathLike) -> None:
    """Save *obj* as block-style YAML, keeping key order."""
    text = yaml.safe_dump(obj, default_flow_style=False, sort_keys=False)
    atomic_write_bytes(path, text.encode('utf-8'))


def load_yaml(path: PathLike) -> Dict[str, Any]:
    """Parse a YAML file with safe_load.

    Returns None for an empty file; callers decide whether that is an error.

    Raises
    ------
    FileNotFoundError
        If *path* is not an existing file
    yaml.YAMLError
        If parsing fails; the message names the file
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"YAML file not found: {path}")

    text = path.read_text(encoding='utf-8')
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Failed to parse YAML file {path}: {e}") from e
