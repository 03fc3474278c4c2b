from __future__ import annotations

from pathlib import Path

import pytest

from zwoview.cli.main import main

WORKOUT = (
    "<workout_file><name>Threshold 2x20</name><tags><tag name=\"FTP\"/></tags><workout>"
    '<Warmup Duration="600" PowerLow="0.5" PowerHigh="0.75"/>'
    '<IntervalsT Repeat="2" OnDuration="1200" OffDuration="300" OnPower="1.0" OffPower="0.5"/>'
    '<Cooldown Duration="300" Power="0.5"/>'
    "</workout></workout_file>"
)


def test_cli_prints_summary(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    workout_file = tmp_path / "threshold.zwo"
    workout_file.write_text(WORKOUT, encoding="utf-8")

    assert main([str(workout_file)]) == 0

    out = capsys.readouterr().out
    assert "Threshold 2x20" in out
    assert "Tags: FTP" in out
    assert "Duration: 65m 00s | Intervals: 6" in out
    assert "2x 20min @ 100% / 5min @ 50%" in out
    assert "On 1/2" in out
    assert "20min @ 100%" in out
    assert "Z4 Threshold" in out


def test_cli_shows_watts(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    workout_file = tmp_path / "threshold.zwo"
    workout_file.write_text(WORKOUT, encoding="utf-8")

    assert main([str(workout_file), "--watts", "--ftp", "250"]) == 0

    assert "20min @ 250W" in capsys.readouterr().out


def test_cli_reports_format_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    workout_file = tmp_path / "bad.zwo"
    workout_file.write_text("<workout_file><name>x</name></workout_file>", encoding="utf-8")

    assert main([str(workout_file)]) == 1
    assert "Error: missing workout" in capsys.readouterr().out


def test_cli_lists_library(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "threshold.zwo").write_text(WORKOUT, encoding="utf-8")

    assert main(["--library", str(tmp_path)]) == 0

    out = capsys.readouterr().out
    assert "Threshold 2x20" in out
    assert "65m 00s" in out


def test_cli_without_path_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out
