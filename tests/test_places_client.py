from concurrent.futures import ThreadPoolExecutor

import pytest
import requests

from clients.base_client import ApiError, ApiErrorKind
from clients.places_client import PlacesClient, map_place_category, normalize_place
from conftest import DummyResponse, FakeSession
from services.models import LocationSource


def _record(place_id="p1", name="Kenneth Dike Library", lat=7.5188, lng=4.5256, **extra):
    record = {
        "place_id": place_id,
        "name": name,
        "geometry": {"location": {"lat": lat, "lng": lng}},
        "types": ["library", "point_of_interest"],
        "business_status": "OPERATIONAL",
    }
    record.update(extra)
    return record


def _client(*outcomes):
    session = FakeSession(*outcomes)
    return PlacesClient("test-key", base_url="https://places.test/api/", session=session, retry_delay=0), session


def test_search_sends_campus_biased_text_query():
    client, session = _client(DummyResponse({"status": "OK", "results": [_record()]}))
    results = client.search("library")

    call = session.calls[0]
    assert call["url"] == "https://places.test/api/textsearch/json"
    assert call["params"]["query"] == "library"
    assert call["params"]["location"] == "7.5181,4.5284"
    assert call["params"]["radius"] == 2000
    assert call["params"]["key"] == "test-key"

    assert len(results) == 1
    location = results[0]
    assert location.source is LocationSource.PLACES_API
    assert location.category == "Academic"
    assert "library" in location.keywords
    assert location.description == "Open"


def test_search_drops_unusable_and_duplicate_records():
    records = [
        _record("a", "Alpha"),
        {"place_id": "b", "name": "No Geometry"},
        _record("c", "", ),
        _record("d", "Bad Latitude", lat=95.0),
        _record("a", "Alpha Again"),
        _record("e", "Echo", lat="not-a-number"),
        _record("f", "Foxtrot"),
    ]
    client, _ = _client(DummyResponse({"status": "OK", "results": records}))
    assert [loc.id for loc in client.search("x")] == ["a", "f"]


def test_search_respects_max_results():
    records = [_record(str(i), f"Place {i}") for i in range(5)]
    client, _ = _client(DummyResponse({"status": "OK", "results": records}))
    assert len(client.search("place", max_results=2)) == 2


def test_zero_results_is_empty_list():
    client, _ = _client(DummyResponse({"status": "ZERO_RESULTS", "results": []}))
    assert client.search("nothing here") == []


def test_connection_error_is_retried_once():
    client, session = _client(
        requests.exceptions.ConnectionError("reset"),
        DummyResponse({"status": "OK", "results": [_record()]}),
    )
    assert len(client.search("library")) == 1
    assert len(session.calls) == 2
    assert client.get_metrics()["retry_count"] == 1


def test_timeout_after_retry_is_reported():
    client, session = _client(
        requests.exceptions.Timeout("slow"),
        requests.exceptions.Timeout("slow again"),
    )
    with pytest.raises(ApiError) as excinfo:
        client.search("library")
    assert excinfo.value.kind is ApiErrorKind.TIMEOUT
    assert len(session.calls) == 2


@pytest.mark.parametrize("status_code, kind", [
    (401, ApiErrorKind.AUTH),
    (403, ApiErrorKind.AUTH),
    (429, ApiErrorKind.QUOTA),
    (500, ApiErrorKind.NETWORK),
])
def test_http_errors_are_classified_without_retry(status_code, kind):
    client, session = _client(DummyResponse({}, status_code=status_code))
    with pytest.raises(ApiError) as excinfo:
        client.search("library")
    assert excinfo.value.kind is kind
    assert excinfo.value.status_code == status_code
    assert len(session.calls) == 1


@pytest.mark.parametrize("status, kind", [
    ("REQUEST_DENIED", ApiErrorKind.AUTH),
    ("OVER_QUERY_LIMIT", ApiErrorKind.QUOTA),
    ("INVALID_REQUEST", ApiErrorKind.MALFORMED_RESPONSE),
    ("SOMETHING_NEW", ApiErrorKind.MALFORMED_RESPONSE),
])
def test_provider_statuses_are_classified(status, kind):
    client, _ = _client(DummyResponse({"status": status, "error_message": "nope"}))
    with pytest.raises(ApiError) as excinfo:
        client.search("library")
    assert excinfo.value.kind is kind


def test_invalid_json_is_malformed():
    client, _ = _client(DummyResponse(status_code=200, json_error=ValueError("bad json")))
    with pytest.raises(ApiError) as excinfo:
        client.search("library")
    assert excinfo.value.kind is ApiErrorKind.MALFORMED_RESPONSE


def test_missing_results_list_is_malformed():
    client, _ = _client(DummyResponse({"status": "OK"}))
    with pytest.raises(ApiError) as excinfo:
        client.search("library")
    assert excinfo.value.kind is ApiErrorKind.MALFORMED_RESPONSE


def test_search_nearby_params():
    client, session = _client(DummyResponse({"status": "OK", "results": []}))
    client.search_nearby(keyword="bank", place_type="atm")
    call = session.calls[0]
    assert call["url"].endswith("/nearbysearch/json")
    assert call["params"]["keyword"] == "bank"
    assert call["params"]["type"] == "atm"


def test_place_details():
    client, _ = _client(
        DummyResponse({"status": "OK", "result": _record(formatted_address="Ile-Ife, Nigeria", rating=4.6)}),
        DummyResponse({"status": "NOT_FOUND"}),
    )
    location = client.get_place_details("p1")
    assert location.address == "Ile-Ife, Nigeria"
    assert location.description == "Rated 4.6 • Open"
    assert client.get_place_details("missing") is None


def test_normalize_place_clamps_rating():
    assert normalize_place(_record(rating=7)).rating == 5.0
    assert normalize_place(_record(rating="n/a")).rating is None


def test_category_mapping():
    assert map_place_category(["point_of_interest", "bank"]) == "Landmarks"
    assert map_place_category(["bank", "point_of_interest"]) == "Financial Services"
    assert map_place_category(["establishment"]) == "Facilities"


def test_non_transient_request_error_is_not_retried():
    client, session = _client(
        requests.exceptions.InvalidURL("bad url"),
        DummyResponse({"status": "OK", "results": [_record()]}),
    )
    with pytest.raises(ApiError) as excinfo:
        client.search("library")
    assert excinfo.value.kind is ApiErrorKind.NETWORK
    assert not excinfo.value.retryable
    assert len(session.calls) == 1
    assert client.get_metrics()["retry_count"] == 0


def test_retry_budget_is_configurable():
    session = FakeSession(*[requests.exceptions.ConnectionError("down")] * 3)
    client = PlacesClient("test-key", session=session, max_retries=2, retry_delay=0)
    with pytest.raises(ApiError) as excinfo:
        client.search("library")
    assert excinfo.value.retryable
    assert len(session.calls) == 3
    assert client.get_metrics()["retry_count"] == 2
    assert client.get_metrics()["failed_calls"] == 1


def test_retryable_flag_by_error_kind():
    assert ApiError(ApiErrorKind.TIMEOUT).retryable
    assert ApiError(ApiErrorKind.NETWORK, "conn").retryable
    assert not ApiError(ApiErrorKind.NETWORK, "server", 503).retryable
    assert not ApiError(ApiErrorKind.AUTH).retryable
    assert not ApiError(ApiErrorKind.NETWORK, retryable=False).retryable


def test_metrics_are_consistent_under_concurrent_calls():
    responses = [DummyResponse({"status": "OK", "results": []}) for _ in range(40)]
    client, _ = _client(*responses)
    with ThreadPoolExecutor(max_workers=8) as executor:
        list(executor.map(client.search, ["q"] * 40))
    assert client.get_metrics()["total_calls"] == 40
