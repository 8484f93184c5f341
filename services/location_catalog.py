"""
Static campus location catalog. Holds the curated venue table in memory and answers substring, id,
category and typo-tolerant lookups.
"""

import logging
from difflib import SequenceMatcher
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from services.campus_venues import CAMPUS_VENUES, SEARCH_SUGGESTIONS
from services.models import CampusLocation, Coordinate, LocationSource

logger = logging.getLogger(__name__)


def normalize_query(text: str) -> str:
    return " ".join(text.lower().split())


def venue_to_location(venue: Dict) -> CampusLocation:
    return CampusLocation(
        id=venue["id"],
        name=venue["name"],
        description=venue.get("description", ""),
        category=venue["category"],
        coordinates=Coordinate(float(venue["lat"]), float(venue["lon"])),
        keywords=tuple(venue.get("keywords", [])),
        source=LocationSource.STATIC,
    )


class LocationCatalog:

    def __init__(self, locations: Iterable[CampusLocation],
                 suggestions: Optional[List[str]] = None, fuzzy_threshold: float = 0.75):
        self._locations: Tuple[CampusLocation, ...] = tuple(locations)
        self._by_id: Dict[str, CampusLocation] = {}
        for loc in self._locations:
            if loc.id in self._by_id:
                raise ValueError(f"Duplicate catalog id: {loc.id}")
            self._by_id[loc.id] = loc
        self._suggestions = list(suggestions or [])
        self.fuzzy_threshold = fuzzy_threshold

        # lowercased search fields per location, computed once
        self._search_fields = [
            [loc.name.lower(), loc.description.lower(), loc.category.lower()]
            + [kw.lower() for kw in loc.keywords]
            for loc in self._locations
        ]

    def __len__(self) -> int:
        return len(self._locations)

    def __iter__(self) -> Iterator[CampusLocation]:
        return iter(self._locations)

    def find_matching(self, query: str) -> List[CampusLocation]:
        normalized = normalize_query(query)
        if not normalized:
            return []
        return [
            loc for loc, fields in zip(self._locations, self._search_fields)
            if any(normalized in field for field in fields)
        ]

    def get_by_id(self, location_id: str) -> Optional[CampusLocation]:
        return self._by_id.get(location_id)

    def by_category(self, category: str) -> List[CampusLocation]:
        wanted = category.strip().lower()
        return [loc for loc in self._locations if loc.category.lower() == wanted]

    def fuzzy_match(self, query: str, limit: int = 10) -> List[CampusLocation]:
        """Typo-tolerant lookup: every query word must closely resemble some word of the venue."""
        words = [w for w in normalize_query(query).split(" ") if len(w) > 2]
        if not words:
            return []

        scored = []
        for index, fields in enumerate(self._search_fields):
            tokens = {token for field in fields for token in field.split()}
            if not tokens:
                continue
            word_scores = [
                max(SequenceMatcher(None, word, token).ratio() for token in tokens)
                for word in words
            ]
            score = sum(word_scores) / len(word_scores)
            if min(word_scores) >= self.fuzzy_threshold:
                scored.append((score, index))

        scored.sort(key=lambda item: (-item[0], item[1]))
        results = [self._locations[index] for _, index in scored[:limit]]
        if results:
            logger.debug("Fuzzy catalog match for '%s': %s", query, [loc.name for loc in results])
        return results

    def suggestions(self, query: Optional[str] = None) -> List[str]:
        if not query or len(query.strip()) < 2:
            return self._suggestions[:8]
        lowered = query.strip().lower()
        return [s for s in self._suggestions if lowered in s.lower()][:6]


def load_default_catalog() -> LocationCatalog:
    catalog = LocationCatalog(
        (venue_to_location(venue) for venue in CAMPUS_VENUES),
        suggestions=SEARCH_SUGGESTIONS,
    )
    logger.info("Loaded %d campus venues", len(catalog))
    return catalog
