"""Zwift workout (.zwo) parser."""

from __future__ import annotations

import math
import re
import xml.etree.ElementTree as ET
from pathlib import Path

from zwoview.workout.model import (
    FreeSegment,
    RampSegment,
    Segment,
    SegmentGroup,
    SteadySegment,
    Tag,
    Workout,
    WorkoutNode,
    format_count,
)


_DECIMAL_NUMBER = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\Z", re.ASCII
)
_RADIX_NUMBER = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)\Z")


class FormatError(ValueError):
    """Raised when a workout document lacks its required structure."""


def load_workout(path: str | Path) -> Workout:
    return parse_zwo(Path(path).read_bytes())


def parse_zwo(raw_text: str | bytes) -> Workout:
    root = _find_workout_file(raw_text)
    if root is None:
        raise FormatError("missing workout_file")

    body = root.find(".//workout")
    if body is None:
        raise FormatError("missing workout")

    name = _text_of(root.find(".//name"))
    description = _text_of(root.find(".//description"))
    tags = tuple(
        Tag(name=tag_name)
        for tag_name in (el.get("name") for el in root.findall(".//tags/tag"))
        if tag_name
    )

    segments: list[Segment] = []
    nodes: list[WorkoutNode] = []
    cursor: float = 0

    def push_steady(duration: float, ftp: float, label: str) -> SteadySegment:
        nonlocal cursor
        segment = SteadySegment(
            start_sec=cursor, end_sec=cursor + duration, ftp=ftp, label=label
        )
        segments.append(segment)
        cursor += duration
        return segment

    def push_ramp(duration: float, low: float, high: float, label: str) -> RampSegment:
        nonlocal cursor
        segment = RampSegment(
            start_sec=cursor,
            end_sec=cursor + duration,
            ftp_low=low,
            ftp_high=high,
            label=label,
        )
        segments.append(segment)
        cursor += duration
        return segment

    def push_free(duration: float, label: str) -> FreeSegment:
        nonlocal cursor
        segment = FreeSegment(start_sec=cursor, end_sec=cursor + duration, label=label)
        segments.append(segment)
        cursor += duration
        return segment

    for step in body:
        kind = step.tag
        if kind in ("Warmup", "Cooldown"):
            duration = _or(_num_attr(step, "Duration"), 0)
            low = _or(_num_attr(step, "PowerLow"), _num_attr(step, "Power"), 0)
            high = _or(_num_attr(step, "PowerHigh"), _num_attr(step, "Power"), low)
            if low != high:
                nodes.append(push_ramp(duration, low, high, kind))
            else:
                nodes.append(push_steady(duration, low, kind))
        elif kind == "SteadyState":
            duration = _or(_num_attr(step, "Duration"), 0)
            power = _or(_num_attr(step, "Power"), 0)
            nodes.append(push_steady(duration, power, "Steady"))
        elif kind == "FreeRide":
            duration = _or(_num_attr(step, "Duration"), 0)
            nodes.append(push_free(duration, "Free ride"))
        elif kind == "IntervalsT":
            repeat = _or(_num_attr(step, "Repeat"), 1)
            on_duration = _or(_num_attr(step, "OnDuration"), 0)
            off_duration = _or(_num_attr(step, "OffDuration"), 0)
            on_power = _or(_num_attr(step, "OnPower"), 0)
            off_power = _or(_num_attr(step, "OffPower"), 0)

            group_start = cursor
            group_segments: list[SteadySegment] = []
            count = format_count(repeat)
            for i in range(max(0, math.ceil(repeat))):
                group_segments.append(
                    push_steady(on_duration, on_power, f"On {i + 1}/{count}")
                )
                if off_duration > 0:
                    group_segments.append(
                        push_steady(off_duration, off_power, f"Off {i + 1}/{count}")
                    )

            nodes.append(
                SegmentGroup(
                    repeat=repeat,
                    on_duration=on_duration,
                    off_duration=off_duration,
                    on_power=on_power,
                    off_power=off_power,
                    segments=tuple(group_segments),
                    start_sec=group_start,
                )
            )
        else:
            # Unknown step kinds become free rides when they carry a duration.
            duration = _num_attr(step, "Duration")
            if duration:
                nodes.append(push_free(duration, kind))

    return Workout(
        name=name,
        description=description,
        segments=tuple(segments),
        nodes=tuple(nodes),
        tags=tags,
    )


def _find_workout_file(raw_text: str | bytes) -> ET.Element | None:
    try:
        document = ET.fromstring(raw_text)
    except ET.ParseError:
        return None
    if document.tag == "workout_file":
        return document
    return document.find(".//workout_file")


def _text_of(element: ET.Element | None) -> str | None:
    if element is None:
        return None
    return "".join(element.itertext()).strip() or None


def _num_attr(element: ET.Element, name: str) -> float | None:
    raw = element.get(name)
    if not raw:
        return None
    text = raw.strip()
    if not text:
        # Blank but present reads as zero.
        return 0
    if _RADIX_NUMBER.match(text):
        return int(text, 0)
    if not _DECIMAL_NUMBER.match(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return int(value) if value.is_integer() else value


def _or(*values: float | None) -> float:
    for value in values:
        if value is not None:
            return value
    return 0
