"""
Configuration module for the campus search and navigation engine.
Loads environment variables and provides configuration constants for the Google Places and Directions
services, campus geography, cache lifetimes and logging.
"""

import logging
import os
from pathlib import Path
from dotenv import load_dotenv

env_path = Path(__file__).parent / '.env'
load_dotenv(dotenv_path=env_path)

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"true", "1", "yes", "on"}


def _env_str(name: str, default: str = "") -> str:
    return os.getenv(name, default).strip()


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_VALUES


def _env_number(name: str, default, cast):
    """Read a numeric setting; unset, blank or unparsable values keep the default."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        logger.warning("Ignoring %s=%r, expected %s; using %s", name, raw, cast.__name__, default)
        return default


def _env_int(name: str, default: int) -> int:
    return _env_number(name, default, int)


def _env_float(name: str, default: float) -> float:
    return _env_number(name, default, float)


GOOGLE_MAPS_API_KEY = _env_str("GOOGLE_MAPS_API_KEY")
PLACES_BASE_URL = _env_str("PLACES_BASE_URL", "https://maps.googleapis.com/maps/api/place")
DIRECTIONS_URL = _env_str("DIRECTIONS_URL", "https://maps.googleapis.com/maps/api/directions/json")

HTTP_TIMEOUT = _env_float("HTTP_TIMEOUT", 8.0)
HTTP_MAX_RETRIES = _env_int("HTTP_MAX_RETRIES", 1)
HTTP_RETRY_DELAY = _env_float("HTTP_RETRY_DELAY", 0.3)

CAMPUS_LAT = _env_float("CAMPUS_LAT", 7.5181)
CAMPUS_LON = _env_float("CAMPUS_LON", 4.5284)
CAMPUS_RADIUS_M = _env_int("CAMPUS_RADIUS_M", 2000)

SEARCH_MAX_RESULTS = _env_int("SEARCH_MAX_RESULTS", 8)
SEARCH_CACHE_TTL = _env_float("SEARCH_CACHE_TTL", 300.0)
SEARCH_DEGRADED_TTL = _env_float("SEARCH_DEGRADED_TTL", 30.0)
SEARCH_API_TIMEOUT = _env_float("SEARCH_API_TIMEOUT", 8.0)
SEARCH_MAX_WORKERS = _env_int("SEARCH_MAX_WORKERS", 4)

ROUTE_CACHE_TTL = _env_float("ROUTE_CACHE_TTL", 600.0)
ROUTE_FALLBACK_TTL = _env_float("ROUTE_FALLBACK_TTL", 60.0)

VERBOSE_LOGGING = _env_bool("VERBOSE_LOGGING")


def configure_logging(verbose: bool = VERBOSE_LOGGING) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def validate_config():
    required_vars = {
        "GOOGLE_MAPS_API_KEY": GOOGLE_MAPS_API_KEY,
    }

    missing = [key for key, value in required_vars.items() if not value]

    if missing:
        logger.warning(
            "Missing environment variables: %s. Search runs on the static catalog only "
            "and routes are straight-line estimates. Create a .env file or set them in your environment.",
            ", ".join(missing),
        )
        return False

    return True


if __name__ == "__main__":
    print("=" * 60)
    print("Configuration Settings")
    print("=" * 60)

    print("\nGoogle Maps:")
    print(f"   API Key: {'Set' if GOOGLE_MAPS_API_KEY else 'Missing'}")
    print(f"   Places URL: {PLACES_BASE_URL}")
    print(f"   Directions URL: {DIRECTIONS_URL}")
    print(f"   HTTP Timeout: {HTTP_TIMEOUT}s")
    print(f"   Max Retries: {HTTP_MAX_RETRIES}")

    print("\nCampus:")
    print(f"   Latitude: {CAMPUS_LAT}")
    print(f"   Longitude: {CAMPUS_LON}")
    print(f"   Search Radius: {CAMPUS_RADIUS_M} m")

    print("\nSearch:")
    print(f"   Max Results: {SEARCH_MAX_RESULTS}")
    print(f"   Cache TTL: {SEARCH_CACHE_TTL}s (degraded: {SEARCH_DEGRADED_TTL}s)")
    print(f"   API Timeout: {SEARCH_API_TIMEOUT}s")

    print("\nRouting:")
    print(f"   Cache TTL: {ROUTE_CACHE_TTL}s (fallback: {ROUTE_FALLBACK_TTL}s)")

    print("\n" + "=" * 60)

    print("\nValidation:")
    if validate_config():
        print("All required environment variables are set!")
    else:
        print("Some required environment variables are missing.")
