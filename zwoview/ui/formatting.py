"""Display helpers for the preview surfaces (terminal and web)."""

from __future__ import annotations

import math
from dataclasses import dataclass

from zwoview.workout.analytics import segment_intensity
from zwoview.workout.model import Segment, SegmentGroup
from zwoview.workout.zones import classify, zone_color

FREE_RIDE_COLOR = "rgba(255,255,255,0.1)"


@dataclass(frozen=True)
class DisplayOptions:
    ftp_watts: int = 230
    show_watts: bool = False


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_duration(total_seconds: float) -> str:
    minutes, seconds = divmod(round_half_up(total_seconds), 60)
    if seconds == 0:
        return f"{minutes}min"
    return f"{minutes}min {seconds}s"


def format_clock(total_seconds: float) -> str:
    minutes, seconds = divmod(round_half_up(total_seconds), 60)
    return f"{minutes}m {seconds:02d}s"


def format_power(fraction: float, options: DisplayOptions) -> str:
    if options.show_watts:
        return f"{round_half_up(fraction * options.ftp_watts)}W"
    return f"{round_half_up(fraction * 100)}%"


def describe_segment(segment: Segment, options: DisplayOptions) -> str:
    duration = format_duration(segment.duration_sec)
    if segment.kind == "steady":
        return f"{duration} @ {format_power(segment.ftp, options)}"
    if segment.kind == "ramp":
        low = format_power(segment.ftp_low, options)
        high = format_power(segment.ftp_high, options)
        return f"{duration} ramp {low}-{high}"
    return f"{duration} free ride"


def segment_title(segment: Segment) -> str:
    if segment.label:
        return segment.label
    return "Free Ride" if segment.kind == "free" else "Interval"


def segment_color(segment: Segment) -> str:
    intensity = segment_intensity(segment)
    if intensity is None:
        return FREE_RIDE_COLOR
    return zone_color(classify(intensity))


def zone_caption(segment: Segment) -> str:
    intensity = segment_intensity(segment)
    if intensity is None:
        return "Free Ride"
    key = classify(intensity)
    return f"{key} (Avg)" if segment.kind == "ramp" else key


def segment_tooltip(segment: Segment, options: DisplayOptions) -> str:
    return (
        f"{segment_title(segment)}<br/>{describe_segment(segment, options)}"
        f"<br/>{zone_caption(segment)}"
    )


def describe_group(group: SegmentGroup, options: DisplayOptions) -> str:
    """Repeat block summary, e.g. "5x 3min @ 120% / 2min @ 50%"."""
    text = (
        f"{group.text} {format_duration(group.on_duration)}"
        f" @ {format_power(group.on_power, options)}"
    )
    if group.off_duration > 0:
        text += (
            f" / {format_duration(group.off_duration)}"
            f" @ {format_power(group.off_power, options)}"
        )
    return text
