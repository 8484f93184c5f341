"""
Route planner for campus navigation. Serves cached routes, asks the Directions client for fresh ones and
falls back to a straight-line estimate whenever the provider cannot answer.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import replace
from typing import Dict, Iterable, Optional, Union

from clients.base_client import ApiError
from services.geo import distance_meters, estimate_duration_seconds, is_valid_coordinate, round_coordinate
from services.models import CampusLocation, Coordinate, Route, TravelMode
from services.ttl_cache import TTLCache

logger = logging.getLogger(__name__)


def estimate_route(origin: Coordinate, destination: Coordinate, mode: TravelMode) -> Route:
    distance = distance_meters(origin, destination)
    return Route(
        origin=origin,
        destination=destination,
        mode=mode,
        distance_meters=distance,
        duration_seconds=estimate_duration_seconds(distance, mode),
        path=(origin, destination),
        is_estimate=True,
        summary="Straight-line estimate",
    )


def invalid_input_route(origin: Coordinate, destination: Coordinate, mode: TravelMode) -> Route:
    return Route(
        origin=origin,
        destination=destination,
        mode=mode,
        distance_meters=0.0,
        duration_seconds=0.0,
        path=(origin, destination),
        is_estimate=True,
        summary="No route",
        warnings=("Invalid coordinates",),
    )


def route_cache_key(origin: Coordinate, destination: Coordinate, mode: TravelMode) -> str:
    o = round_coordinate(origin)
    d = round_coordinate(destination)
    return f"{mode.value}:{o.latitude:.5f},{o.longitude:.5f}->{d.latitude:.5f},{d.longitude:.5f}"


class RoutePlanner:

    def __init__(self, directions_client=None, cache: Optional[TTLCache] = None,
                 route_ttl: float = 600.0, fallback_ttl: float = 60.0, max_workers: int = 3):
        self.directions_client = directions_client
        self.cache: TTLCache[Route] = cache if cache is not None else TTLCache(default_ttl=route_ttl)
        self.route_ttl = route_ttl
        self.fallback_ttl = fallback_ttl
        self.max_workers = max_workers

    def plan_route(self, origin: Coordinate, destination: Coordinate,
                   mode: Union[TravelMode, str] = TravelMode.WALKING) -> Route:
        travel_mode = TravelMode.from_value(mode)
        if not (is_valid_coordinate(origin) and is_valid_coordinate(destination)):
            logger.warning("Invalid route coordinates %r -> %r, returning an empty estimate", origin, destination)
            return invalid_input_route(origin, destination, travel_mode)

        key = route_cache_key(origin, destination, travel_mode)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Route cache hit %s", key)
            return cached

        route = self._fetch_route(origin, destination, travel_mode)
        ttl = self.fallback_ttl if route.is_estimate else self.route_ttl
        self.cache.set(key, route, ttl=ttl)
        return route

    def _fetch_route(self, origin: Coordinate, destination: Coordinate, mode: TravelMode) -> Route:
        if self.directions_client is None:
            logger.info("No directions client configured, estimating %s route", mode.value)
            return estimate_route(origin, destination, mode)

        try:
            route = self.directions_client.get_route(origin, destination, mode)
        except ApiError as e:
            logger.warning("Directions unavailable (%s): %s. Using straight-line estimate.",
                           e.kind.value, e.message)
            return estimate_route(origin, destination, mode)
        except Exception:
            logger.exception("Unexpected directions failure, using straight-line estimate")
            return estimate_route(origin, destination, mode)

        if len(route.path) < 2:
            logger.info("Provider route has no drawable path, using a straight line")
            route = replace(route, path=(origin, destination))
        return route

    def plan_route_to(self, origin: Coordinate, location: CampusLocation,
                      mode: Union[TravelMode, str] = TravelMode.WALKING) -> Route:
        return self.plan_route(origin, location.coordinates, mode)

    def plan_multi_modal(self, origin: Coordinate, destination: Coordinate,
                         modes: Optional[Iterable[Union[TravelMode, str]]] = None) -> Dict[TravelMode, Route]:
        if modes is None:
            modes = [TravelMode.WALKING, TravelMode.BICYCLING, TravelMode.DRIVING]
        travel_modes = [TravelMode.from_value(m) for m in modes]
        if not travel_modes:
            return {}

        results = {}
        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(travel_modes))) as executor:
            future_to_mode = {
                executor.submit(self.plan_route, origin, destination, mode): mode
                for mode in travel_modes
            }
            for future in as_completed(future_to_mode):
                results[future_to_mode[future]] = future.result()
        return results

    def clear_cache(self) -> None:
        self.cache.clear()
        logger.info("Route cache cleared")

    def cache_stats(self) -> Dict:
        return self.cache.describe()


def create_route_planner(directions_client=None) -> RoutePlanner:
    import config
    from clients.directions_client import DirectionsClient

    if directions_client is None and config.validate_config():
        directions_client = DirectionsClient(
            config.GOOGLE_MAPS_API_KEY,
            base_url=config.DIRECTIONS_URL,
            timeout=config.HTTP_TIMEOUT,
            max_retries=config.HTTP_MAX_RETRIES,
            retry_delay=config.HTTP_RETRY_DELAY,
        )

    return RoutePlanner(
        directions_client,
        route_ttl=config.ROUTE_CACHE_TTL,
        fallback_ttl=config.ROUTE_FALLBACK_TTL,
    )
