"""Local folder of .zwo workout files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from zwoview.workout.model import Workout
from zwoview.workout.parser import FormatError, load_workout


def _default_workouts_dir() -> Path:
    return Path.home() / ".zwoview" / "workouts"


@dataclass(frozen=True)
class WorkoutFile:
    key: str
    name: str
    path: Path
    duration_sec: float | None = None


def list_workout_files(base_dir: Path | None = None) -> list[WorkoutFile]:
    root = base_dir or _default_workouts_dir()
    if not root.exists():
        return []
    out: list[WorkoutFile] = []
    for file in sorted(root.glob("*.zwo")):
        try:
            workout = load_workout(file)
        except FormatError:
            out.append(WorkoutFile(key=file.stem, name=file.stem, path=file))
            continue
        out.append(
            WorkoutFile(
                key=file.stem,
                name=workout.name or file.stem,
                path=file,
                duration_sec=workout.total_duration_sec,
            )
        )
    return out


def load_workout_file(entry: WorkoutFile) -> Workout:
    return load_workout(entry.path)
