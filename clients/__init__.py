"""
Package exports for external API clients. Exposes PlacesClient and DirectionsClient for the Google Maps
web services, plus the shared ApiError taxonomy.
"""

from .base_client import BaseApiClient, ApiError, ApiErrorKind
from .places_client import PlacesClient
from .directions_client import DirectionsClient

__all__ = [
    'BaseApiClient',
    'ApiError',
    'ApiErrorKind',
    'PlacesClient',
    'DirectionsClient'
]
