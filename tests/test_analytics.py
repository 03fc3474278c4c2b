from __future__ import annotations

from zwoview.workout.analytics import (
    segment_intensity,
    time_in_zones,
    total_duration,
    training_stress,
    zone_distribution,
)
from zwoview.workout.model import FreeSegment, RampSegment, SteadySegment
from zwoview.workout.parser import parse_zwo


def _doc(steps: str) -> str:
    return f"<workout_file><workout>{steps}</workout></workout_file>"


def test_total_duration() -> None:
    workout = parse_zwo(_doc('<SteadyState Duration="600" Power="0.7"/>'))

    assert total_duration(workout.segments) == 600
    assert total_duration(()) == 0


def test_time_in_zones_skips_free_and_uses_ramp_midpoint() -> None:
    segments = (
        SteadySegment(0, 300, 0.55),
        RampSegment(300, 900, 0.5, 1.0),
        FreeSegment(900, 1000),
        SteadySegment(1000, 1060, 1.2),
    )

    zones = time_in_zones(segments)

    assert list(zones) == ["Z1", "Z2", "Z3", "Z4", "Z5", "Z6", "Z7"]
    assert zones["Z1"] == 300
    assert zones["Z2"] == 600
    assert zones["Z6"] == 60
    assert sum(zones.values()) + 100 == total_duration(segments)


def test_time_in_zones_conserves_duration() -> None:
    workout = parse_zwo(
        _doc(
            '<Warmup Duration="600" PowerLow="0.4" PowerHigh="0.7"/>'
            '<IntervalsT Repeat="4" OnDuration="180" OffDuration="120" OnPower="1.15" OffPower="0.5"/>'
            '<FreeRide Duration="240"/>'
            '<Cooldown Duration="300" Power="0.45"/>'
        )
    )
    free_total = sum(s.duration_sec for s in workout.segments if s.kind == "free")

    zones = time_in_zones(workout.segments)

    assert sum(zones.values()) + free_total == total_duration(workout.segments)


def test_training_stress_one_hour_at_threshold() -> None:
    workout = parse_zwo(_doc('<SteadyState Duration="3600" Power="1.0"/>'))

    assert training_stress(workout.segments) == 100


def test_training_stress_free_ride_counts_as_moderate() -> None:
    assert training_stress((FreeSegment(0, 3600),)) == 25
    assert training_stress(()) == 0


def test_training_stress_uses_ramp_average() -> None:
    # 30 min at an average of 0.8 -> 0.5 * 0.64 * 100
    assert training_stress((RampSegment(0, 1800, 0.6, 1.0),)) == 32


def test_segment_intensity() -> None:
    assert segment_intensity(SteadySegment(0, 10, 0.9)) == 0.9
    assert segment_intensity(RampSegment(0, 10, 0.5, 0.7)) == 0.6
    assert segment_intensity(FreeSegment(0, 10)) is None


def test_zone_distribution_shares() -> None:
    segments = (SteadySegment(0, 300, 0.5), SteadySegment(300, 400, 0.95), FreeSegment(400, 600))

    rows = dict((key, (seconds, share)) for key, seconds, share in zone_distribution(segments))

    assert rows["Z1"] == (300, 0.5)
    assert rows["Z4"][0] == 100
    assert rows["Z7"] == (0, 0.0)
    assert zone_distribution(()) == [(key, 0, 0.0) for key in ("Z1", "Z2", "Z3", "Z4", "Z5", "Z6", "Z7")]
