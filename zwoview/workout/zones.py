"""FTP-relative training zones (Zwift scheme)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ZoneKey = Literal["Z1", "Z2", "Z3", "Z4", "Z5", "Z6", "Z7"]


@dataclass(frozen=True)
class Zone:
    key: ZoneKey
    upper_bound: float | None
    color: str
    name: str


# Upper bounds are exclusive; the last zone is open-ended.
ZONES: tuple[Zone, ...] = (
    Zone("Z1", 0.60, "#7f7f7f", "Recovery"),
    Zone("Z2", 0.76, "#3284ff", "Endurance"),
    Zone("Z3", 0.90, "#5aca5a", "Tempo"),
    Zone("Z4", 1.05, "#ffcc33", "Threshold"),
    Zone("Z5", 1.19, "#ff6633", "VO2max"),
    Zone("Z6", 1.50, "#ff3333", "Anaerobic"),
    Zone("Z7", None, "#800080", "Neuromuscular"),
)

ZONE_KEYS: tuple[ZoneKey, ...] = tuple(zone.key for zone in ZONES)
ZONE_COLORS: dict[ZoneKey, str] = {zone.key: zone.color for zone in ZONES}

_ZONE_BY_KEY = {zone.key: zone for zone in ZONES}


def zone_thresholds() -> tuple[float, ...]:
    return tuple(zone.upper_bound for zone in ZONES if zone.upper_bound is not None)


def classify(power_fraction: float) -> ZoneKey:
    """Map an FTP fraction to its zone; a boundary value belongs to the zone above."""
    for zone in ZONES:
        if zone.upper_bound is None or power_fraction < zone.upper_bound:
            return zone.key
    return ZONES[-1].key


def zone_color(key: ZoneKey) -> str:
    return _ZONE_BY_KEY[key].color


def zone_name(key: ZoneKey) -> str:
    return _ZONE_BY_KEY[key].name
