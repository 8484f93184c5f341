"""
Geospatial helpers: great-circle distance, coordinate validation, bounding boxes, cache-key rounding
and human-readable distance and duration text.
"""

import math
from dataclasses import dataclass
from typing import Union

from services.models import Coordinate, TravelMode

EARTH_RADIUS_M = 6371000.0

# Average speeds used for straight-line estimates (m/s). 1.39 m/s is ~5 km/h.
WALKING_SPEED_MPS = 1.39
BICYCLING_SPEED_MPS = 4.17
DRIVING_SPEED_MPS = 8.33

_SPEEDS = {
    TravelMode.WALKING: WALKING_SPEED_MPS,
    TravelMode.BICYCLING: BICYCLING_SPEED_MPS,
    TravelMode.DRIVING: DRIVING_SPEED_MPS,
}


class ValidationError(ValueError):
    pass


@dataclass(frozen=True)
class BoundingBox:
    southwest: Coordinate
    northeast: Coordinate

    def contains(self, c: Coordinate) -> bool:
        return (
            self.southwest.latitude <= c.latitude <= self.northeast.latitude
            and self.southwest.longitude <= c.longitude <= self.northeast.longitude
        )

    @property
    def center(self) -> Coordinate:
        return Coordinate(
            (self.southwest.latitude + self.northeast.latitude) / 2,
            (self.southwest.longitude + self.northeast.longitude) / 2,
        )


CAMPUS_CENTER = Coordinate(7.5181, 4.5284)
CAMPUS_BOUNDS = BoundingBox(
    southwest=Coordinate(7.5060, 4.5160),
    northeast=Coordinate(7.5300, 4.5400),
)


def distance_meters(a: Coordinate, b: Coordinate) -> float:
    phi1, phi2 = math.radians(a.latitude), math.radians(b.latitude)
    dphi = math.radians(b.latitude - a.latitude)
    dl = math.radians(b.longitude - a.longitude)
    h = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dl / 2) ** 2
    # rounding can push h a hair past 1 for antipodal points
    h = min(1.0, max(0.0, h))
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def is_valid_coordinate(c: Coordinate) -> bool:
    try:
        lat = float(c.latitude)
        lon = float(c.longitude)
    except (TypeError, ValueError, AttributeError):
        return False
    if math.isnan(lat) or math.isnan(lon):
        return False
    return -90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0


def validate_coordinate(c: Coordinate) -> Coordinate:
    if not is_valid_coordinate(c):
        raise ValidationError(f"Invalid coordinate: {c!r}")
    return c


def round_coordinate(c: Coordinate, places: int = 5) -> Coordinate:
    return Coordinate(round(c.latitude, places), round(c.longitude, places))


def estimate_duration_seconds(distance_m: float, mode: Union[TravelMode, str] = TravelMode.WALKING) -> float:
    speed = _SPEEDS[TravelMode.from_value(mode)]
    return max(0.0, distance_m) / speed


def format_distance(distance_m: float) -> str:
    if distance_m >= 1000:
        return f"{distance_m/1000:.1f} km"
    return f"{int(distance_m)} m"


def format_duration(duration_s: float) -> str:
    if duration_s >= 3600:
        hours = int(duration_s // 3600)
        mins = int((duration_s % 3600) // 60)
        return f"{hours}h {mins}min"
    minutes = int(round(duration_s / 60))
    if minutes < 1:
        return "< 1 min"
    return f"{minutes} min"


def describe_walk(distance_m: float) -> str:
    if distance_m < 100:
        return "Very close"
    if distance_m < 500:
        return "Short walk"
    if distance_m < 1000:
        return "Medium walk"
    return "Long walk"
