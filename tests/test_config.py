import config
from clients.directions_client import DirectionsClient
from clients.places_client import PlacesClient
from services.route_planner import create_route_planner
from services.search_engine import create_search_engine


def test_env_helpers_fall_back_on_bad_values(monkeypatch):
    monkeypatch.setenv("CAMPUS_TEST_INT", "12")
    monkeypatch.setenv("CAMPUS_TEST_BAD_INT", "twelve")
    monkeypatch.setenv("CAMPUS_TEST_FLOAT", " 0.5 ")
    monkeypatch.setenv("CAMPUS_TEST_BLANK", "  ")
    monkeypatch.setenv("CAMPUS_TEST_BOOL", " Yes ")
    monkeypatch.setenv("CAMPUS_TEST_OFF", "off")
    monkeypatch.delenv("CAMPUS_TEST_UNSET", raising=False)

    assert config._env_int("CAMPUS_TEST_INT", 3) == 12
    assert config._env_int("CAMPUS_TEST_BAD_INT", 3) == 3
    assert config._env_float("CAMPUS_TEST_FLOAT", 1.0) == 0.5
    assert config._env_float("CAMPUS_TEST_BLANK", 1.0) == 1.0
    assert config._env_float("CAMPUS_TEST_UNSET", 1.0) == 1.0
    assert config._env_bool("CAMPUS_TEST_BOOL")
    assert not config._env_bool("CAMPUS_TEST_OFF", default=True)
    assert config._env_bool("CAMPUS_TEST_UNSET", default=True)
    assert config._env_str("CAMPUS_TEST_UNSET", "fallback") == "fallback"


def test_validate_config_reports_missing_key(monkeypatch):
    monkeypatch.setattr(config, "GOOGLE_MAPS_API_KEY", "")
    assert config.validate_config() is False
    monkeypatch.setattr(config, "GOOGLE_MAPS_API_KEY", "abc")
    assert config.validate_config() is True


def test_factories_without_key_run_offline(monkeypatch):
    monkeypatch.setattr(config, "GOOGLE_MAPS_API_KEY", "")
    engine = create_search_engine()
    planner = create_route_planner()
    try:
        assert engine.places_client is None
        assert planner.directions_client is None
        assert engine.max_results == config.SEARCH_MAX_RESULTS
        assert planner.route_ttl == config.ROUTE_CACHE_TTL
    finally:
        engine.close()


def test_factories_with_key_build_clients(monkeypatch):
    monkeypatch.setattr(config, "GOOGLE_MAPS_API_KEY", "abc")
    engine = create_search_engine()
    planner = create_route_planner()
    try:
        assert isinstance(engine.places_client, PlacesClient)
        assert engine.places_client.api_key == "abc"
        assert isinstance(planner.directions_client, DirectionsClient)
    finally:
        engine.close()
        planner.directions_client.close()
