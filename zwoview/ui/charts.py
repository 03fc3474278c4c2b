"""ECharts option builders for the workout profile."""

from __future__ import annotations

from typing import Any, Sequence

from zwoview.ui.formatting import DisplayOptions, segment_tooltip
from zwoview.workout.analytics import FREE_RIDE_INTENSITY
from zwoview.workout.model import Segment
from zwoview.workout.zones import ZONES

# Chart range: 0-160% FTP
MAX_CHART_FTP = 1.6


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _scale(options: DisplayOptions) -> float:
    return float(options.ftp_watts) if options.show_watts else 100.0


def profile_points(
    segments: Sequence[Segment], options: DisplayOptions
) -> list[list[float]]:
    """Two points per segment; consecutive segments share an x for step edges."""
    scale = _scale(options)
    points: list[list[float]] = []
    for segment in segments:
        if segment.kind == "steady":
            start, end = segment.ftp, segment.ftp
        elif segment.kind == "ramp":
            start, end = segment.ftp_low, segment.ftp_high
        else:
            start, end = FREE_RIDE_INTENSITY, FREE_RIDE_INTENSITY
        points.append(
            [segment.start_sec, round(_clamp(start, 0, MAX_CHART_FTP) * scale, 1)]
        )
        points.append(
            [segment.end_sec, round(_clamp(end, 0, MAX_CHART_FTP) * scale, 1)]
        )
    return points


def profile_series_data(
    segments: Sequence[Segment], options: DisplayOptions
) -> list[dict[str, Any]]:
    """Profile points named with the tooltip text of the segment they belong to."""
    points = profile_points(segments, options)
    return [
        {"value": point, "name": segment_tooltip(segments[index // 2], options)}
        for index, point in enumerate(points)
    ]


def zone_pieces(options: DisplayOptions) -> list[dict[str, Any]]:
    scale = _scale(options)
    pieces: list[dict[str, Any]] = []
    lower: float | None = None
    for zone in ZONES:
        piece: dict[str, Any] = {"color": zone.color, "label": zone.key}
        if lower is not None:
            piece["gte"] = round(lower * scale, 1)
        if zone.upper_bound is not None:
            piece["lt"] = round(zone.upper_bound * scale, 1)
            lower = zone.upper_bound
        pieces.append(piece)
    return pieces


def profile_chart_options(
    segments: Sequence[Segment], options: DisplayOptions
) -> dict[str, Any]:
    unit = "W" if options.show_watts else "% FTP"
    total = segments[-1].end_sec if segments else 0
    return {
        "tooltip": {
            "trigger": "axis",
            ":formatter": "params => params.length ? params[0].data.name : ''",
        },
        "xAxis": {
            "type": "value",
            "min": 0,
            "max": total,
            "axisLabel": {"color": "#ffffff"},
        },
        "yAxis": {
            "type": "value",
            "name": unit,
            "min": 0,
            "max": round(MAX_CHART_FTP * _scale(options), 1),
            "axisLabel": {"color": "#ffffff"},
            "nameTextStyle": {"color": "#ffffff", "fontWeight": "bold"},
        },
        "visualMap": {
            "show": False,
            "dimension": 1,
            "pieces": zone_pieces(options),
        },
        "series": [
            {
                "type": "line",
                "showSymbol": False,
                "areaStyle": {},
                "data": profile_series_data(segments, options),
            }
        ],
        "grid": {"left": 50, "right": 20, "top": 30, "bottom": 30},
    }
