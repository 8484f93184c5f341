"""
Data model shared by the search and navigation services. Defines coordinates, normalized campus locations,
search result sets and routes.
"""

from enum import Enum
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional, Tuple


CATEGORIES = (
    "Academic",
    "Administration",
    "Student Services",
    "Health Services",
    "Sports",
    "Facilities",
    "Landmarks",
    "Religious",
    "Food Services",
    "Accommodation",
    "Shopping",
    "Financial Services",
    "Services",
)


class LocationSource(Enum):
    STATIC = "static"
    PLACES_API = "places_api"


class ResultSource(Enum):
    CACHE = "cache"
    STATIC_ONLY = "static_only"
    MERGED = "merged"
    FALLBACK = "fallback"


class TravelMode(Enum):
    WALKING = "walking"
    DRIVING = "driving"
    BICYCLING = "bicycling"

    @classmethod
    def from_value(cls, value) -> "TravelMode":
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        if normalized == "cycling":
            normalized = "bicycling"
        return cls(normalized)


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)

    def to_dict(self) -> Dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Coordinate":
        """Build from any of the lat/lng, lat/lon or latitude/longitude spellings."""
        lat = data.get("latitude", data.get("lat"))
        lon = data.get("longitude", data.get("lng", data.get("lon")))
        if lat is None or lon is None:
            raise KeyError("coordinate requires latitude and longitude")
        return cls(float(lat), float(lon))

    def __str__(self) -> str:
        return f"{self.latitude},{self.longitude}"


@dataclass(frozen=True)
class CampusLocation:
    id: str
    name: str
    description: str
    category: str
    coordinates: Coordinate
    keywords: Tuple[str, ...] = ()
    source: LocationSource = LocationSource.STATIC
    address: Optional[str] = None
    rating: Optional[float] = None
    business_status: Optional[str] = None

    @property
    def normalized_name(self) -> str:
        return " ".join(self.name.lower().split())

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "coordinates": self.coordinates.to_dict(),
            "keywords": list(self.keywords),
            "source": self.source.value,
        }
        if self.source is LocationSource.PLACES_API:
            data["address"] = self.address
            data["rating"] = self.rating
            data["business_status"] = self.business_status
        return data


@dataclass(frozen=True)
class SearchResultSet:
    results: List[CampusLocation]
    source: ResultSource
    search_time_ms: int
    query: str
    sequence: int = 0
    stale: bool = False

    @property
    def total_count(self) -> int:
        return len(self.results)

    @property
    def is_degraded(self) -> bool:
        return self.source in (ResultSource.STATIC_ONLY, ResultSource.FALLBACK)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "results": [loc.to_dict() for loc in self.results],
            "source": self.source.value,
            "search_time_ms": self.search_time_ms,
            "query": self.query,
            "total_count": self.total_count,
        }


@dataclass(frozen=True)
class RouteStep:
    instruction: str
    distance_meters: float
    duration_seconds: float
    start: Coordinate
    end: Coordinate
    maneuver: Optional[str] = None
    path: Tuple[Coordinate, ...] = ()


@dataclass(frozen=True)
class Route:
    origin: Coordinate
    destination: Coordinate
    mode: TravelMode
    distance_meters: float
    duration_seconds: float
    path: Tuple[Coordinate, ...]
    is_estimate: bool = False
    steps: Tuple[RouteStep, ...] = ()
    summary: str = ""
    warnings: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def distance_text(self) -> str:
        from services.geo import format_distance
        return format_distance(self.distance_meters)

    @property
    def duration_text(self) -> str:
        from services.geo import format_duration
        return format_duration(self.duration_seconds)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["mode"] = self.mode.value
        data["distance"] = self.distance_text
        data["duration"] = self.duration_text
        return data
