"""Tests for the run_clip command-line runner.

Validates that:
    - The demo job prints one line per segment and polyline
    - Results are written as YAML with --output
    - Ad-hoc --segment / --window input replaces the demo segments
    - Bad configuration exits with status 2
    - The job's JSON logging survives a --log-level override
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from rect_clip.scripts.run_clip import (
    EXIT_CONFIG_ERROR,
    EXIT_OK,
    build_parser,
    main,
)
from rect_clip.utils import fs


pytestmark = pytest.mark.usefixtures("reset_logging")


class TestDemoRun:
    def test_demo_job_output(self, capsys) -> None:
        assert main([]) == EXIT_OK
        out = capsys.readouterr().out

        assert "--- Clipping window: (100.0, 100.0, 200.0, 200.0) ---" in out
        assert "accept: (110.0, 110.0) -> (190.0, 190.0) => (110.0, 110.0) -> (190.0, 190.0)" in out
        assert "reject-right: (210.0, 110.0) -> (250.0, 190.0) => rejected" in out
        assert "reject-top: (50.0, 250.0) -> (250.0, 250.0) => rejected" in out
        assert "clip-two-corners: (50.0, 50.0) -> (250.0, 250.0) => (100.0, 100.0) -> (200.0, 200.0)" in out
        assert "clip-left-right: (50.0, 150.0) -> (250.0, 150.0) => (100.0, 150.0) -> (200.0, 150.0)" in out
        assert "clip-bottom-top: (150.0, 50.0) -> (150.0, 250.0) => (150.0, 100.0) -> (150.0, 200.0)" in out
        assert "clip-one-end: (150.0, 150.0) -> (250.0, 250.0) => (150.0, 150.0) -> (200.0, 200.0)" in out
        assert "zigzag: 5 vertices => 2 visible run(s)" in out

    def test_output_yaml(self, tmp_path: Path, capsys) -> None:
        out_path = tmp_path / "results.yaml"
        assert main(["--output", str(out_path)]) == EXIT_OK

        results = fs.load_yaml(out_path)
        assert results["window"] == [100.0, 100.0, 200.0, 200.0]
        by_name = {r["name"]: r for r in results["segments"]}
        assert by_name["clip-two-corners"]["clipped"] == [100.0, 100.0, 200.0, 200.0]
        assert by_name["reject-top"]["clipped"] is None
        assert results["polylines"][0]["runs"][1] == [[180.0, 200.0], [180.0, 120.0]]


class TestAdHocInput:
    def test_segment_and_window(self, capsys) -> None:
        code = main(["--window", "0", "0", "10", "10", "--segment", "-5", "5", "15", "5"])
        assert code == EXIT_OK
        out = capsys.readouterr().out
        assert "arg-1: (-5.0, 5.0) -> (15.0, 5.0) => (0.0, 5.0) -> (10.0, 5.0)" in out
        assert "clip-two-corners" not in out
        assert "zigzag" not in out

    def test_segments_added_on_top_of_config(self, tmp_path: Path, capsys) -> None:
        job = tmp_path / "job.yaml"
        job.write_text(
            "window: {x_min: 0, y_min: 0, x_max: 10, y_max: 10}\n"
            "segments:\n"
            "  - {name: diag, p1: [-10, -10], p2: [20, 20]}\n"
        )
        code = main(["--config", str(job), "--segment", "20", "20", "30", "30"])
        assert code == EXIT_OK
        out = capsys.readouterr().out
        assert "diag: (-10.0, -10.0) -> (20.0, 20.0) => (0.0, 0.0) -> (10.0, 10.0)" in out
        assert "arg-1: (20.0, 20.0) -> (30.0, 30.0) => rejected" in out


class TestLoggingOverride:
    def test_log_level_keeps_job_json_format(self, tmp_path: Path, capsys) -> None:
        job = tmp_path / "job.yaml"
        job.write_text(
            "window: {x_min: 0, y_min: 0, x_max: 10, y_max: 10}\n"
            "segments:\n"
            "  - {name: diag, p1: [-10, -10], p2: [20, 20]}\n"
            "logging: {level: DEBUG, json: true}\n"
        )
        out_path = tmp_path / "results.yaml"
        code = main(["--config", str(job), "--log-level", "INFO", "--output", str(out_path)])
        assert code == EXIT_OK

        records = [
            json.loads(line)
            for line in capsys.readouterr().err.splitlines()
            if line.startswith("{")
        ]
        assert any(r["msg"].startswith("Wrote results to") for r in records)
        assert all(r["lvl"] != "DEBUG" for r in records)


class TestErrors:
    def test_inverted_window(self, capsys) -> None:
        assert main(["--window", "10", "0", "0", "10"]) == EXIT_CONFIG_ERROR

    def test_missing_config(self, tmp_path: Path) -> None:
        assert main(["--config", str(tmp_path / "missing.yaml")]) == EXIT_CONFIG_ERROR

    def test_invalid_config(self, tmp_path: Path) -> None:
        job = tmp_path / "job.yaml"
        job.write_text("schema: clip_job.v9\nwindow: {x_min: 0, y_min: 0, x_max: 1, y_max: 1}\n")
        assert main(["--config", str(job)]) == EXIT_CONFIG_ERROR

    def test_bad_argument_count(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--segment", "1", "2"])
