"""
Campus search engine. Merges static catalog matches with live Places results, removes duplicates, ranks
by textual relevance and caches result sets per normalized query.

Ranking weights (higher wins):
    name starts with the query ............ 100
    query found inside the name ........... 80 minus match position (at most 30)
    every query word appears in the name .. 55
    keyword equals the query .............. 45
    keyword contains the query ............ 40
    description or category match ......... 25
    provider-only relevance ............... 10
    curated (static) source bonus ......... +15
"""

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeout
from dataclasses import replace
from difflib import SequenceMatcher
from typing import Dict, List, Optional, Tuple

from clients.base_client import ApiError
from services.geo import distance_meters
from services.location_catalog import LocationCatalog, normalize_query
from services.models import CampusLocation, LocationSource, ResultSource, SearchResultSet
from services.ttl_cache import TTLCache

logger = logging.getLogger(__name__)

NAME_PREFIX_SCORE = 100.0
NAME_MATCH_SCORE = 80.0
NAME_POSITION_PENALTY_CAP = 30
NAME_WORDS_SCORE = 55.0
KEYWORD_EXACT_SCORE = 45.0
KEYWORD_MATCH_SCORE = 40.0
TEXT_MATCH_SCORE = 25.0
PROVIDER_RELEVANCE_SCORE = 10.0
STATIC_SOURCE_BONUS = 15.0

SAME_PLACE_RADIUS_M = 50.0
SIMILAR_NAME_RATIO = 0.8


def score_location(location: CampusLocation, normalized_query: str) -> float:
    name = location.normalized_name
    position = name.find(normalized_query)
    keywords = [kw.lower() for kw in location.keywords]

    if position == 0:
        score = NAME_PREFIX_SCORE
    elif position > 0:
        score = NAME_MATCH_SCORE - min(position, NAME_POSITION_PENALTY_CAP)
    elif all(word in name for word in normalized_query.split()):
        score = NAME_WORDS_SCORE
    elif normalized_query in keywords:
        score = KEYWORD_EXACT_SCORE
    elif any(normalized_query in kw for kw in keywords):
        score = KEYWORD_MATCH_SCORE
    elif normalized_query in location.description.lower() or normalized_query in location.category.lower():
        score = TEXT_MATCH_SCORE
    else:
        score = PROVIDER_RELEVANCE_SCORE

    if location.source is LocationSource.STATIC:
        score += STATIC_SOURCE_BONUS
    return score


def _coordinate_key(location: CampusLocation) -> str:
    return f"{location.coordinates.latitude:.4f},{location.coordinates.longitude:.4f}"


def _is_near_duplicate(location: CampusLocation, kept: List[CampusLocation]) -> bool:
    name = location.normalized_name
    for other in kept:
        if distance_meters(location.coordinates, other.coordinates) >= SAME_PLACE_RADIUS_M:
            continue
        if SequenceMatcher(None, name, other.normalized_name).ratio() > SIMILAR_NAME_RATIO:
            return True
    return False


def merge_locations(static_matches: List[CampusLocation],
                    api_matches: List[CampusLocation]) -> List[CampusLocation]:
    """Static entries first, then API entries that are not already present.

    An API entry is a duplicate when its name or id is already kept, when it
    sits on a kept entry's coordinates (4 decimals), or when it lies within
    50 m of a kept entry with a closely similar name.
    """
    merged: List[CampusLocation] = []
    seen_names = set()
    seen_ids = set()
    seen_coordinates = set()

    for location in static_matches:
        name = location.normalized_name
        if name in seen_names or location.id in seen_ids:
            continue
        seen_names.add(name)
        seen_ids.add(location.id)
        seen_coordinates.add(_coordinate_key(location))
        merged.append(location)

    for location in api_matches:
        name = location.normalized_name
        coordinate_key = _coordinate_key(location)
        if (name in seen_names or location.id in seen_ids or coordinate_key in seen_coordinates
                or _is_near_duplicate(location, merged)):
            continue
        seen_names.add(name)
        seen_ids.add(location.id)
        seen_coordinates.add(coordinate_key)
        merged.append(location)

    return merged


def rank_locations(candidates: List[CampusLocation], normalized_query: str) -> List[CampusLocation]:
    # sorted() is stable, so equal scores keep static-before-API insertion order
    return sorted(candidates, key=lambda loc: -score_location(loc, normalized_query))


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


class SearchEngine:

    def __init__(self, catalog: LocationCatalog, places_client=None, cache: Optional[TTLCache] = None,
                 max_results: int = 8, cache_ttl: float = 300.0, degraded_ttl: float = 30.0,
                 api_timeout: float = 8.0, max_workers: int = 4, min_query_length: int = 2):
        self.catalog = catalog
        self.places_client = places_client
        self.cache: TTLCache[SearchResultSet] = cache if cache is not None else TTLCache(default_ttl=cache_ttl)
        self.max_results = max_results
        self.cache_ttl = cache_ttl
        self.degraded_ttl = degraded_ttl
        self.api_timeout = api_timeout
        self.min_query_length = min_query_length

        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="places-search")
        self._sequence = 0
        self._sequence_lock = threading.Lock()
        self._latest_completed: Dict[str, int] = {}

    def search_campus(self, query: str, max_results: Optional[int] = None,
                      ttl_seconds: Optional[float] = None, channel: str = "default") -> SearchResultSet:
        start = time.perf_counter()
        limit = self.max_results if max_results is None else max(0, max_results)
        trimmed = (query or "").strip()
        sequence = self._next_sequence()

        if len(trimmed) < self.min_query_length:
            return SearchResultSet([], ResultSource.STATIC_ONLY, 0, trimmed, sequence)

        normalized = normalize_query(trimmed)
        key = f"{normalized}|{limit}"

        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Search cache hit for '%s'", normalized)
            stale = not self._mark_completed(channel, sequence)
            return replace(cached, source=ResultSource.CACHE, search_time_ms=_elapsed_ms(start),
                           sequence=sequence, stale=stale)

        try:
            results, source, api_ok = self._search(trimmed, normalized, limit)
        except Exception:
            logger.exception("Search for '%s' failed, falling back to the static catalog", normalized)
            results = self.catalog.find_matching(normalized)[:limit]
            source = ResultSource.FALLBACK
            api_ok = False

        result = SearchResultSet(results, source, _elapsed_ms(start), trimmed, sequence)
        logger.info("Search '%s' -> %d results (%s) in %d ms",
                    normalized, result.total_count, source.value, result.search_time_ms)

        if not self._mark_completed(channel, sequence):
            logger.debug("Discarding stale result for '%s' (sequence %d)", normalized, sequence)
            return replace(result, stale=True)

        # an explicit ttl is honoured as given; otherwise a failed provider call gets the short ttl
        if ttl_seconds is not None:
            ttl = ttl_seconds
        elif api_ok:
            ttl = self.cache_ttl
        else:
            ttl = min(self.cache_ttl, self.degraded_ttl)
        self.cache.set(key, result, ttl=ttl, sequence=sequence)
        return result

    def _search(self, query: str, normalized: str, limit: int) -> Tuple[List[CampusLocation], ResultSource, bool]:
        future = None
        if self.places_client is not None:
            future = self._executor.submit(self.places_client.search, query, limit)

        static_matches = self.catalog.find_matching(normalized)
        if not static_matches:
            static_matches = self.catalog.fuzzy_match(normalized)

        api_matches, api_ok = self._collect_places(future, normalized)

        candidates = merge_locations(static_matches, api_matches)
        ranked = rank_locations(candidates, normalized)[:limit]
        logger.debug("Search '%s': %d static, %d places, %d merged",
                     normalized, len(static_matches), len(api_matches), len(candidates))

        source = ResultSource.MERGED if api_ok and api_matches else ResultSource.STATIC_ONLY
        return ranked, source, api_ok

    def _collect_places(self, future, normalized: str) -> Tuple[List[CampusLocation], bool]:
        if future is None:
            return [], False
        try:
            return list(future.result(timeout=self.api_timeout)), True
        except FuturesTimeout:
            future.cancel()
            logger.warning("Places search for '%s' timed out after %ss", normalized, self.api_timeout)
        except ApiError as e:
            logger.warning("Places search for '%s' failed (%s): %s", normalized, e.kind.value, e.message)
        return [], False

    def _next_sequence(self) -> int:
        with self._sequence_lock:
            self._sequence += 1
            return self._sequence

    def _mark_completed(self, channel: str, sequence: int) -> bool:
        """Record a finished query; False when the channel already finished a newer one."""
        with self._sequence_lock:
            if sequence < self._latest_completed.get(channel, 0):
                return False
            self._latest_completed[channel] = sequence
            return True

    def suggestions(self, query: Optional[str] = None) -> List[str]:
        return self.catalog.suggestions(query)

    def clear_cache(self) -> None:
        self.cache.clear()
        logger.info("Search cache cleared")

    def cache_stats(self) -> Dict:
        return self.cache.describe()

    def close(self) -> None:
        self._executor.shutdown(wait=False)
        if self.places_client is not None:
            self.places_client.close()


def create_search_engine(places_client=None, catalog: Optional[LocationCatalog] = None) -> SearchEngine:
    import config
    from clients.places_client import PlacesClient
    from services.location_catalog import load_default_catalog
    from services.models import Coordinate

    if places_client is None and config.validate_config():
        places_client = PlacesClient(
            config.GOOGLE_MAPS_API_KEY,
            base_url=config.PLACES_BASE_URL,
            center=Coordinate(config.CAMPUS_LAT, config.CAMPUS_LON),
            radius_m=config.CAMPUS_RADIUS_M,
            timeout=config.HTTP_TIMEOUT,
            max_retries=config.HTTP_MAX_RETRIES,
            retry_delay=config.HTTP_RETRY_DELAY,
        )

    return SearchEngine(
        catalog or load_default_catalog(),
        places_client=places_client,
        max_results=config.SEARCH_MAX_RESULTS,
        cache_ttl=config.SEARCH_CACHE_TTL,
        degraded_ttl=config.SEARCH_DEGRADED_TTL,
        api_timeout=config.SEARCH_API_TIMEOUT,
        max_workers=config.SEARCH_MAX_WORKERS,
    )
