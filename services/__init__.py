"""
Package exports for search and navigation services. Exposes the data model, geospatial helpers, polyline
codec, static catalog, search engine and route planner.
"""

from .models import (
    Coordinate,
    CampusLocation,
    LocationSource,
    ResultSource,
    SearchResultSet,
    Route,
    RouteStep,
    TravelMode
)
from .geo import ValidationError, distance_meters, is_valid_coordinate, validate_coordinate
from .polyline import DecodeError
from .ttl_cache import TTLCache
from .location_catalog import LocationCatalog, load_default_catalog
from .route_planner import RoutePlanner, create_route_planner
from .search_engine import SearchEngine, create_search_engine

__all__ = [
    'Coordinate',
    'CampusLocation',
    'LocationSource',
    'ResultSource',
    'SearchResultSet',
    'Route',
    'RouteStep',
    'TravelMode',
    'ValidationError',
    'distance_meters',
    'is_valid_coordinate',
    'validate_coordinate',
    'DecodeError',
    'TTLCache',
    'LocationCatalog',
    'load_default_catalog',
    'RoutePlanner',
    'create_route_planner',
    'SearchEngine',
    'create_search_engine'
]
