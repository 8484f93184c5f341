import pytest

from clients.base_client import ApiError, ApiErrorKind
from clients.directions_client import DirectionsClient, decode_path, strip_html
from conftest import DummyResponse, FakeSession
from services.models import Coordinate, TravelMode

ORIGIN = Coordinate(7.5181, 4.5284)
DESTINATION = Coordinate(7.5188, 4.5256)
POLYLINE = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"


def _payload(**route_overrides):
    route = {
        "summary": "Road 1",
        "warnings": ["Walking directions are in beta."],
        "overview_polyline": {"points": POLYLINE},
        "legs": [{
            "distance": {"text": "0.4 km", "value": 412},
            "duration": {"text": "5 mins", "value": 298},
            "steps": [
                {
                    "html_instructions": "Head <b>north</b> on <b>Road 1</b>",
                    "distance": {"value": 200},
                    "duration": {"value": 150},
                    "start_location": {"lat": 7.5181, "lng": 4.5284},
                    "end_location": {"lat": 7.5185, "lng": 4.5270},
                    "polyline": {"points": "??"},
                },
                {
                    "html_instructions": "",
                    "maneuver": "turn-left",
                    "distance": {"value": 212},
                    "duration": {"value": 148},
                    "start_location": {"lat": 7.5185, "lng": 4.5270},
                    "end_location": {"lat": 7.5188, "lng": 4.5256},
                },
                {"html_instructions": "Broken step"},
            ],
        }],
    }
    route.update(route_overrides)
    return {"status": "OK", "routes": [route]}


def _client(*outcomes):
    session = FakeSession(*outcomes)
    return DirectionsClient("test-key", base_url="https://directions.test/json",
                            session=session, retry_delay=0), session


def test_get_route_parses_leg_path_and_steps():
    client, session = _client(DummyResponse(_payload()))
    route = client.get_route(ORIGIN, DESTINATION, "walking")

    params = session.calls[0]["params"]
    assert params["origin"] == "7.5181,4.5284"
    assert params["destination"] == "7.5188,4.5256"
    assert params["mode"] == "walking"

    assert route.distance_meters == 412
    assert route.duration_seconds == 298
    assert not route.is_estimate
    assert route.mode is TravelMode.WALKING
    assert len(route.path) == 3
    assert route.path[0] == Coordinate(38.5, -120.2)
    assert route.summary == "Road 1"
    assert route.warnings == ("Walking directions are in beta.",)

    assert len(route.steps) == 2
    assert route.steps[0].instruction == "Head north on Road 1"
    assert route.steps[0].path == (Coordinate(0.0, 0.0),)
    assert route.steps[1].instruction == "turn-left"
    assert route.steps[1].path == ()


def test_bicycling_mode_is_sent():
    client, session = _client(DummyResponse(_payload()))
    route = client.get_route(ORIGIN, DESTINATION, "cycling")
    assert session.calls[0]["params"]["mode"] == "bicycling"
    assert route.mode is TravelMode.BICYCLING


def test_zero_results_is_no_route():
    client, _ = _client(DummyResponse({"status": "ZERO_RESULTS", "routes": []}))
    with pytest.raises(ApiError) as excinfo:
        client.get_route(ORIGIN, DESTINATION)
    assert excinfo.value.kind is ApiErrorKind.NO_ROUTE


def test_not_found_is_no_route():
    client, _ = _client(DummyResponse({"status": "NOT_FOUND"}))
    with pytest.raises(ApiError) as excinfo:
        client.get_route(ORIGIN, DESTINATION)
    assert excinfo.value.kind is ApiErrorKind.NO_ROUTE


def test_undecodable_polyline_gives_empty_path():
    client, _ = _client(DummyResponse(_payload(overview_polyline={"points": "_p~iF"})))
    route = client.get_route(ORIGIN, DESTINATION)
    assert route.path == ()
    assert route.distance_meters == 412


def test_missing_legs_is_malformed():
    client, _ = _client(DummyResponse(_payload(legs=[])))
    with pytest.raises(ApiError) as excinfo:
        client.get_route(ORIGIN, DESTINATION)
    assert excinfo.value.kind is ApiErrorKind.MALFORMED_RESPONSE


def test_request_denied_is_auth():
    client, _ = _client(DummyResponse({"status": "REQUEST_DENIED", "error_message": "bad key"}))
    with pytest.raises(ApiError) as excinfo:
        client.get_route(ORIGIN, DESTINATION)
    assert excinfo.value.kind is ApiErrorKind.AUTH
    assert "bad key" in excinfo.value.message


def test_helpers():
    assert strip_html("Turn <b>left</b><div>Destination</div>") == "Turn left Destination"
    assert decode_path(None) == ()
    assert decode_path("") == ()
