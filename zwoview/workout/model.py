"""Workout domain models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union


@dataclass(frozen=True)
class SteadySegment:
    start_sec: float
    end_sec: float
    ftp: float
    label: str | None = None
    kind: Literal["steady"] = "steady"

    @property
    def duration_sec(self) -> float:
        return self.end_sec - self.start_sec


@dataclass(frozen=True)
class RampSegment:
    start_sec: float
    end_sec: float
    ftp_low: float
    ftp_high: float
    label: str | None = None
    kind: Literal["ramp"] = "ramp"

    @property
    def duration_sec(self) -> float:
        return self.end_sec - self.start_sec


@dataclass(frozen=True)
class FreeSegment:
    start_sec: float
    end_sec: float
    label: str | None = None
    kind: Literal["free"] = "free"

    @property
    def duration_sec(self) -> float:
        return self.end_sec - self.start_sec


Segment = Union[SteadySegment, RampSegment, FreeSegment]


@dataclass(frozen=True)
class SegmentGroup:
    """Repeated on/off block, kept as one node over its expanded segments."""

    repeat: float
    on_duration: float
    off_duration: float
    on_power: float
    off_power: float
    segments: tuple[SteadySegment, ...]
    start_sec: float = 0
    kind: Literal["group"] = "group"

    @property
    def text(self) -> str:
        return f"{format_count(self.repeat)}x"

    @property
    def end_sec(self) -> float:
        return self.segments[-1].end_sec if self.segments else self.start_sec

    @property
    def duration_sec(self) -> float:
        return self.end_sec - self.start_sec


WorkoutNode = Union[SteadySegment, RampSegment, FreeSegment, SegmentGroup]


@dataclass(frozen=True)
class Tag:
    name: str


@dataclass(frozen=True)
class Workout:
    segments: tuple[Segment, ...]
    nodes: tuple[WorkoutNode, ...]
    name: str | None = None
    description: str | None = None
    tags: tuple[Tag, ...] = ()

    @property
    def total_duration_sec(self) -> float:
        return self.segments[-1].end_sec if self.segments else 0


def format_count(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)
