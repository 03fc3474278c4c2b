"""Summary metrics over a flat segment timeline."""

from __future__ import annotations

import math
from typing import Sequence

from zwoview.workout.model import Segment
from zwoview.workout.zones import ZONE_KEYS, ZoneKey, classify

# Free rides are assumed to be ridden at a moderate effort.
FREE_RIDE_INTENSITY = 0.5


def segment_intensity(segment: Segment) -> float | None:
    """FTP fraction a segment is classified by; ramps use their midpoint."""
    if segment.kind == "steady":
        return segment.ftp
    if segment.kind == "ramp":
        return (segment.ftp_low + segment.ftp_high) / 2
    return None


def total_duration(segments: Sequence[Segment]) -> float:
    # Segments are contiguous from zero, so the last end is the total.
    return segments[-1].end_sec if segments else 0


def time_in_zones(segments: Sequence[Segment]) -> dict[ZoneKey, float]:
    totals: dict[ZoneKey, float] = {key: 0 for key in ZONE_KEYS}
    for segment in segments:
        intensity = segment_intensity(segment)
        if intensity is None:
            continue
        totals[classify(intensity)] += segment.duration_sec
    return totals


def zone_distribution(
    segments: Sequence[Segment],
) -> list[tuple[ZoneKey, float, float]]:
    total = total_duration(segments)
    return [
        (key, seconds, seconds / total if total else 0.0)
        for key, seconds in time_in_zones(segments).items()
    ]


def training_stress(segments: Sequence[Segment]) -> int:
    score = 0.0
    for segment in segments:
        hours = segment.duration_sec / 3600
        intensity = segment_intensity(segment)
        if intensity is None:
            intensity = FREE_RIDE_INTENSITY
        score += hours * intensity**2 * 100
    return int(math.floor(score + 0.5))
