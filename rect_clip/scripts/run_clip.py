#!/usr/bin/env python3
"""
Run Clip Script.

Clip the segments and polylines of a clip job against its window and
print the results.  Without arguments the shipped demo job is used.

Usage:
    python -m rect_clip.scripts.run_clip
    python -m rect_clip.scripts.run_clip --config job.yaml --output results.yaml
    python -m rect_clip.scripts.run_clip --window 0 0 10 10 --segment -5 5 15 5
    python -m rect_clip.scripts.run_clip --log-level DEBUG

Exit status:
    0  all items clipped
    1  at least one item raised a clipping error
    2  the job or the command-line window is invalid
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from rect_clip.configs.loader import ClipJobV1, ConfigError, load_config
from rect_clip.core.clipping import clip, clip_polyline
from rect_clip.core.errors import ClipError
from rect_clip.core.primitives import Rectangle, Segment
from rect_clip.utils import fs
from rect_clip.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CLIP_ERROR = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Clip line segments to a rectangular window (Cohen-Sutherland)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        help="clip_job.v1 YAML file (default: shipped demo job)",
    )
    parser.add_argument(
        "--window",
        "-w",
        type=float,
        nargs=4,
        metavar=("XMIN", "YMIN", "XMAX", "YMAX"),
        help="Override the job's clip window",
    )
    parser.add_argument(
        "--segment",
        type=float,
        nargs=4,
        action="append",
        metavar=("X1", "Y1", "X2", "Y2"),
        help="Ad-hoc segment; repeatable.  Replaces the demo segments "
             "unless --config is given",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Write results to this YAML file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the job's log level",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit JSON log lines",
    )
    return parser


def _format_result(clipped: Segment | None) -> str:
    return "rejected" if clipped is None else str(clipped)


def run_job(
    job: ClipJobV1,
    window: Rectangle,
    extra_segments: list[Segment],
    include_job_items: bool = True,
) -> tuple[dict[str, Any], int]:
    """Clip every item and print one line per item.

    Returns
    -------
    tuple
        (results dict suitable for YAML output, number of failed items)
    """
    named: list[tuple[str, Segment]] = []
    if include_job_items:
        for i, spec in enumerate(job.segments, 1):
            named.append((spec.name or f"segment-{i}", spec.to_segment()))
    for i, segment in enumerate(extra_segments, 1):
        named.append((f"arg-{i}", segment))

    print(f"--- Clipping window: {window.as_xyxy()} ---")

    results: dict[str, Any] = {
        "window": list(window.as_xyxy()),
        "segments": [],
        "polylines": [],
    }
    failures = 0

    for name, segment in named:
        try:
            clipped = clip(segment, window)
        except ClipError as e:
            logger.error("Failed to clip %s: %s", name, e)
            failures += 1
            continue
        print(f"{name}: {segment} => {_format_result(clipped)}")
        results["segments"].append({
            "name": name,
            "input": list(segment.as_tuple()),
            "clipped": None if clipped is None else list(clipped.as_tuple()),
        })

    polylines = job.polylines if include_job_items else []
    for i, spec in enumerate(polylines, 1):
        name = spec.name or f"polyline-{i}"
        try:
            runs = clip_polyline(spec.to_array(), window)
        except ClipError as e:
            logger.error("Failed to clip %s: %s", name, e)
            failures += 1
            continue
        print(f"{name}: {len(spec.points)} vertices => {len(runs)} visible run(s)")
        for run in runs:
            print("    " + " -> ".join(f"({x:.1f}, {y:.1f})" for x, y in run))
        results["polylines"].append({
            "name": name,
            "runs": [run.tolist() for run in runs],
        })

    return results, failures


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(
        args.log_level or "INFO",
        json=args.json_logs,
        context={"app": "run_clip"},
    )

    try:
        job = load_config(args.config)
    except (ConfigError, FileNotFoundError) as e:
        logger.error("%s", e)
        return EXIT_CONFIG_ERROR

    if args.log_level is None or job.log.file or job.log.json_format:
        setup_logging(
            args.log_level or job.log.level,
            job.log.file,
            json=args.json_logs or job.log.json_format,
        )

    try:
        window = Rectangle.from_xyxy(args.window) if args.window else job.to_window()
        extra = [Segment.from_coords(*coords) for coords in args.segment or []]
    except ValueError as e:
        logger.error("Invalid command-line geometry: %s", e)
        return EXIT_CONFIG_ERROR

    include_job_items = args.config is not None or not extra
    results, failures = run_job(job, window, extra, include_job_items)

    if args.output:
        fs.atomic_yaml_dump(results, args.output)
        logger.info("Wrote results to %s", args.output)

    return EXIT_CLIP_ERROR if failures else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
