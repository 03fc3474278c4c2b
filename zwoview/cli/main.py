"""Terminal CLI entrypoint for zwo preview."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from zwoview.ui.formatting import (
    DisplayOptions,
    describe_group,
    describe_segment,
    format_clock,
    segment_title,
    zone_caption,
)
from zwoview.workout.analytics import total_duration, training_stress, zone_distribution
from zwoview.workout.library import list_workout_files
from zwoview.workout.model import Segment, Workout
from zwoview.workout.parser import FormatError, load_workout
from zwoview.workout.zones import zone_name


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Preview Zwift .zwo workouts")
    parser.add_argument("path", nargs="?", default=None, help="Workout .zwo file")
    parser.add_argument(
        "--ftp",
        type=int,
        default=DisplayOptions.ftp_watts,
        help="FTP in watts, used when showing absolute targets",
    )
    parser.add_argument(
        "--watts",
        action="store_true",
        help="Show targets in watts instead of %% FTP",
    )
    parser.add_argument(
        "--library",
        nargs="?",
        const="",
        default=None,
        help="List .zwo files in a folder (default ~/.zwoview/workouts)",
    )
    parser.add_argument(
        "--ui-web",
        action="store_true",
        help="Launch web UI (NiceGUI) to preview workouts",
    )
    parser.add_argument(
        "--web-host",
        default="127.0.0.1",
        help="Host bind for --ui-web",
    )
    parser.add_argument(
        "--web-port",
        type=int,
        default=8088,
        help="Port for --ui-web",
    )
    return parser


def _segment_line(segment: Segment, options: DisplayOptions) -> str:
    return (
        f"{segment_title(segment):<16} {describe_segment(segment, options):<28}"
        f" {zone_caption(segment)}"
    )


def print_workout(workout: Workout, options: DisplayOptions) -> None:
    total = total_duration(workout.segments)
    print(workout.name or "Untitled Workout")
    if workout.description:
        print(workout.description)
    if workout.tags:
        print("Tags: " + ", ".join(tag.name for tag in workout.tags))
    print(
        f"Duration: {format_clock(total)} | Intervals: {len(workout.segments)}"
        f" | TSS: {training_stress(workout.segments)}"
    )
    print()
    for node in workout.nodes:
        if node.kind == "group":
            print(describe_group(node, options))
            for segment in node.segments:
                print("  " + _segment_line(segment, options))
        else:
            print(_segment_line(node, options))
    print()
    for key, seconds, share in zone_distribution(workout.segments):
        print(f"{key} {zone_name(key):<14} {format_clock(seconds):>9} {share:>6.1%}")


def run_library(base_dir: Path | None) -> int:
    entries = list_workout_files(base_dir)
    if not entries:
        print("No .zwo workouts found")
        return 0
    for entry in entries:
        duration = "invalid"
        if entry.duration_sec is not None:
            duration = format_clock(entry.duration_sec)
        print(f"{entry.name:<32} {duration:>9}  {entry.path}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    options = DisplayOptions(ftp_watts=max(1, args.ftp), show_watts=args.watts)

    if args.ui_web:
        from zwoview.ui.web_app import run_web_ui

        return run_web_ui(host=args.web_host, port=args.web_port, options=options)

    if args.library is not None:
        return run_library(Path(args.library) if args.library else None)

    if args.path is None:
        parser.print_help()
        return 1

    try:
        workout = load_workout(args.path)
    except (FormatError, OSError) as exc:
        print(f"Error: {exc}")
        return 1

    print_workout(workout, options)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
