"""
Google Places client for campus location search. Runs text, nearby and detail lookups biased toward the
campus and normalizes provider records into CampusLocation values.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from clients.base_client import ApiError, ApiErrorKind, BaseApiClient
from services.geo import CAMPUS_CENTER, is_valid_coordinate
from services.models import CampusLocation, Coordinate, LocationSource

logger = logging.getLogger(__name__)

# First provider type found in this table decides the category.
PLACE_TYPE_CATEGORIES = {
    "university": "Academic",
    "school": "Academic",
    "library": "Academic",
    "hospital": "Health Services",
    "doctor": "Health Services",
    "health": "Health Services",
    "pharmacy": "Health Services",
    "gym": "Sports",
    "stadium": "Sports",
    "restaurant": "Food Services",
    "food": "Food Services",
    "cafe": "Food Services",
    "meal_takeaway": "Food Services",
    "lodging": "Accommodation",
    "student_housing": "Accommodation",
    "place_of_worship": "Religious",
    "church": "Religious",
    "mosque": "Religious",
    "bank": "Financial Services",
    "atm": "Financial Services",
    "book_store": "Shopping",
    "store": "Shopping",
    "post_office": "Services",
    "local_government_office": "Administration",
    "courthouse": "Administration",
    "tourist_attraction": "Landmarks",
    "point_of_interest": "Landmarks",
    "bus_station": "Facilities",
    "transit_station": "Facilities",
    "parking": "Facilities",
}

DETAIL_FIELDS = "place_id,name,formatted_address,geometry,types,business_status,rating"


def map_place_category(types: List[str]) -> str:
    for place_type in types:
        if place_type in PLACE_TYPE_CATEGORIES:
            return PLACE_TYPE_CATEGORIES[place_type]
    return "Facilities"


def describe_place(record: Dict[str, Any], rating: Optional[float]) -> str:
    parts = []
    if rating is not None:
        parts.append(f"Rated {rating:.1f}")

    status = record.get("business_status")
    if status == "OPERATIONAL":
        parts.append("Open")
    elif status == "CLOSED_PERMANENTLY":
        parts.append("Permanently Closed")
    elif status == "CLOSED_TEMPORARILY":
        parts.append("Temporarily Closed")

    types = record.get("types") or []
    if "university" in types or "school" in types:
        parts.append("Educational Institution")

    return " • ".join(parts) if parts else "Campus Location"


def place_keywords(name: str, types: List[str]) -> List[str]:
    lowered = name.lower()
    keywords = [lowered] + [t for t in types if isinstance(t, str)]

    if "faculty" in lowered:
        keywords.extend(["faculty", "department", "school"])
    if "hall" in lowered:
        keywords.extend(["hall", "hostel", "residence"])
    if "library" in lowered:
        keywords.extend(["library", "books", "study"])

    return list(dict.fromkeys(keywords))


def normalize_place(record: Dict[str, Any]) -> Optional[CampusLocation]:
    """Convert one provider record, or return None when it lacks a usable id, name or coordinates."""
    if not isinstance(record, dict):
        return None

    place_id = record.get("place_id")
    name = (record.get("name") or "").strip()
    if not place_id or not name:
        return None

    location = (record.get("geometry") or {}).get("location") or {}
    try:
        coordinates = Coordinate(float(location["lat"]), float(location["lng"]))
    except (KeyError, TypeError, ValueError):
        return None
    if not is_valid_coordinate(coordinates):
        return None

    rating = record.get("rating")
    try:
        rating = min(5.0, max(0.0, float(rating))) if rating is not None else None
    except (TypeError, ValueError):
        rating = None

    types = record.get("types") or []
    if not isinstance(types, list):
        types = []

    return CampusLocation(
        id=str(place_id),
        name=name,
        description=describe_place(record, rating),
        category=map_place_category(types),
        coordinates=coordinates,
        keywords=tuple(place_keywords(name, types)),
        source=LocationSource.PLACES_API,
        address=record.get("formatted_address") or record.get("vicinity"),
        rating=rating,
        business_status=record.get("business_status"),
    )


class PlacesClient(BaseApiClient):

    def __init__(self, api_key: str, base_url: str = "https://maps.googleapis.com/maps/api/place",
                 center: Coordinate = CAMPUS_CENTER, radius_m: int = 2000,
                 timeout: float = 8.0, max_retries: int = 1, retry_delay: float = 0.3,
                 session: Optional[requests.Session] = None):
        super().__init__(api_key, timeout=timeout, max_retries=max_retries,
                         retry_delay=retry_delay, session=session)
        self.base_url = base_url.rstrip("/")
        self.center = center
        self.radius_m = radius_m

    def search(self, query: str, max_results: int = 8) -> List[CampusLocation]:
        data = self._get_json(
            f"{self.base_url}/textsearch/json",
            {
                "query": query,
                "location": str(self.center),
                "radius": self.radius_m,
            },
        )
        results = self._normalize_results(data)[:max_results]
        logger.debug("Places text search '%s' returned %d usable results", query, len(results))
        return results

    def search_nearby(self, keyword: Optional[str] = None, place_type: Optional[str] = None,
                      max_results: int = 8) -> List[CampusLocation]:
        params: Dict[str, Any] = {
            "location": str(self.center),
            "radius": self.radius_m,
        }
        if keyword:
            params["keyword"] = keyword
        if place_type:
            params["type"] = place_type

        data = self._get_json(f"{self.base_url}/nearbysearch/json", params)
        results = self._normalize_results(data)[:max_results]
        logger.debug("Places nearby search keyword=%s type=%s returned %d results",
                     keyword, place_type, len(results))
        return results

    def get_place_details(self, place_id: str) -> Optional[CampusLocation]:
        data = self._get_json(
            f"{self.base_url}/details/json",
            {"place_id": place_id, "fields": DETAIL_FIELDS},
        )
        status = self._check_status(data, ("OK", "ZERO_RESULTS", "NOT_FOUND"))
        if status != "OK":
            return None
        return normalize_place(data.get("result") or {})

    def _normalize_results(self, data: Dict[str, Any]) -> List[CampusLocation]:
        status = self._check_status(data, ("OK", "ZERO_RESULTS"))
        if status == "ZERO_RESULTS":
            return []

        records = data.get("results")
        if not isinstance(records, list):
            raise ApiError(ApiErrorKind.MALFORMED_RESPONSE, "Response has no results list")

        locations = []
        seen_ids = set()
        dropped = 0
        for record in records:
            location = normalize_place(record)
            if location is None or location.id in seen_ids:
                dropped += 1
                continue
            seen_ids.add(location.id)
            locations.append(location)

        if dropped:
            logger.info("Dropped %d unusable place records out of %d", dropped, len(records))
        return locations
