"""
Google Directions client for campus navigation. Requests a route for walking, driving or bicycling and
parses distance, duration, the overview path and turn-by-turn steps.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Tuple, Union

import requests

from clients.base_client import ApiError, ApiErrorKind, BaseApiClient
from services import polyline
from services.models import Coordinate, Route, RouteStep, TravelMode

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<[^>]*>")


def strip_html(text: str) -> str:
    return " ".join(_TAG_RE.sub(" ", text or "").split())


def decode_path(encoded: Optional[str]) -> Tuple[Coordinate, ...]:
    """Decode an encoded path; undecodable input means no path is available."""
    if not encoded:
        return ()
    try:
        return tuple(polyline.decode(encoded))
    except polyline.DecodeError as e:
        logger.warning("Could not decode route polyline: %s", e)
        return ()


def _value(block: Any) -> float:
    if isinstance(block, dict):
        block = block.get("value")
    try:
        return float(block)
    except (TypeError, ValueError):
        raise ApiError(ApiErrorKind.MALFORMED_RESPONSE, f"Missing numeric value in {block!r}")


def parse_step(step: Dict[str, Any]) -> Optional[RouteStep]:
    try:
        start = Coordinate.from_dict(step["start_location"])
        end = Coordinate.from_dict(step["end_location"])
    except (KeyError, TypeError, ValueError):
        return None

    instruction = strip_html(step.get("html_instructions", "")) or step.get("maneuver") or "Continue straight"
    return RouteStep(
        instruction=instruction,
        distance_meters=float((step.get("distance") or {}).get("value", 0) or 0),
        duration_seconds=float((step.get("duration") or {}).get("value", 0) or 0),
        start=start,
        end=end,
        maneuver=step.get("maneuver"),
        path=decode_path((step.get("polyline") or {}).get("points")),
    )


class DirectionsClient(BaseApiClient):

    def __init__(self, api_key: str, base_url: str = "https://maps.googleapis.com/maps/api/directions/json",
                 timeout: float = 8.0, max_retries: int = 1, retry_delay: float = 0.3,
                 session: Optional[requests.Session] = None):
        super().__init__(api_key, timeout=timeout, max_retries=max_retries,
                         retry_delay=retry_delay, session=session)
        self.base_url = base_url

    def get_route(self, origin: Coordinate, destination: Coordinate,
                  mode: Union[TravelMode, str] = TravelMode.WALKING) -> Route:
        travel_mode = TravelMode.from_value(mode)

        data = self._get_json(
            self.base_url,
            {
                "origin": str(origin),
                "destination": str(destination),
                "mode": travel_mode.value,
            },
        )
        status = self._check_status(data, ("OK", "ZERO_RESULTS"))
        routes = data.get("routes")
        if status == "ZERO_RESULTS" or not routes:
            raise ApiError(ApiErrorKind.NO_ROUTE, f"No {travel_mode.value} route found")

        route = self._build_route(routes[0], origin, destination, travel_mode)
        logger.debug("Directions %s -> %s (%s): %s, %s, %d points",
                     origin, destination, travel_mode.value,
                     route.distance_text, route.duration_text, len(route.path))
        return route

    def _build_route(self, raw: Dict[str, Any], origin: Coordinate, destination: Coordinate,
                     mode: TravelMode) -> Route:
        if not isinstance(raw, dict):
            raise ApiError(ApiErrorKind.MALFORMED_RESPONSE, "Route entry is not an object")

        legs = raw.get("legs") or []
        if not legs or not isinstance(legs[0], dict):
            raise ApiError(ApiErrorKind.MALFORMED_RESPONSE, "Route has no legs")
        leg = legs[0]

        steps: List[RouteStep] = []
        for step in leg.get("steps") or []:
            parsed = parse_step(step) if isinstance(step, dict) else None
            if parsed is not None:
                steps.append(parsed)

        return Route(
            origin=origin,
            destination=destination,
            mode=mode,
            distance_meters=_value(leg.get("distance")),
            duration_seconds=_value(leg.get("duration")),
            path=decode_path((raw.get("overview_polyline") or {}).get("points")),
            is_estimate=False,
            steps=tuple(steps),
            summary=raw.get("summary") or "",
            warnings=tuple(raw.get("warnings") or ()),
        )
