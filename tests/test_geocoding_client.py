import asyncio
import json

import httpx
import pytest

from canship.services.geocoding import (
    GeocodingClient,
    build_search_query,
    format_display_name,
    is_postal_code,
    normalize_postal_code,
    parse_search_results,
)

OTTAWA_RESULT = {
    "place_id": 123456,
    "display_name": "Ottawa, Eastern Ontario, Ontario, Canada",
    "lat": "45.4208777",
    "lon": "-75.6901106",
    "type": "city",
    "address": {"city": "Ottawa", "state": "Ontario", "country": "Canada"},
}
POSTCODE_RESULT = {
    "place_id": 777,
    "display_name": "K1A 0B1, Ottawa, Ontario, Canada",
    "lat": "45.4236",
    "lon": "-75.7009",
    "type": "postcode",
    "address": {"postcode": "K1A 0B1", "state": "Ontario"},
}


def _client(handler) -> GeocodingClient:
    return GeocodingClient(
        "https://geocoder.test",
        user_agent="canship-tests",
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.parametrize("text", ["K1A0B1", "K1A 0B1", "k1a 0b1", "K1A-0B1", " K1A 0B1 "])
def test_postal_code_matcher_accepts_canadian_codes(text):
    assert is_postal_code(text)


@pytest.mark.parametrize("text", ["12345", "K1A0B", "Toronto", "KK1 0B1", "K1A0B12"])
def test_postal_code_matcher_rejects_other_text(text):
    assert not is_postal_code(text)


def test_normalize_postal_code():
    assert normalize_postal_code("k1a0b1") == "K1A 0B1"
    assert normalize_postal_code("K1A-0B1") == "K1A 0B1"


def test_search_query_always_carries_country_qualifier():
    assert build_search_query("Toronto") == "Toronto, Canada"
    assert build_search_query("k1a0b1") == "K1A 0B1, Canada"


def test_display_name_prefers_city_and_province():
    assert format_display_name(OTTAWA_RESULT, OTTAWA_RESULT["address"]) == "Ottawa, Ontario"
    assert format_display_name({}, {"town": "Canmore"}) == "Canmore"
    assert format_display_name({}, {"village": "Tofino", "province": "British Columbia"}) == "Tofino, British Columbia"


def test_display_name_falls_back_to_postcode_then_full_name():
    assert format_display_name(POSTCODE_RESULT, POSTCODE_RESULT["address"]) == "K1A 0B1, Ontario"
    assert format_display_name({}, {"postcode": "H2X 1Y4"}) == "H2X 1Y4, Canada"
    assert format_display_name({"display_name": "Somewhere, Canada"}, {}) == "Somewhere, Canada"


def test_parse_search_results_drops_entries_without_coordinates():
    payload = [
        OTTAWA_RESULT,
        {"place_id": 1, "display_name": "No coords"},
        {"place_id": 2, "display_name": "Bad coords", "lat": "abc", "lon": "-75.0"},
        {"place_id": 3, "display_name": "Zero", "lat": "0", "lon": "-75.0"},
    ]

    locations = parse_search_results(payload)

    assert [location.id for location in locations] == ["123456"]
    location = locations[0]
    assert location.display_name == "Ottawa, Ontario"
    assert location.full_address == OTTAWA_RESULT["display_name"]
    assert location.lat == pytest.approx(45.4208777)
    assert location.lng == pytest.approx(-75.6901106)
    assert location.place_type == "city"


def test_parse_search_results_rejects_non_list_payload():
    with pytest.raises(ValueError):
        parse_search_results({"error": "bad"})


def test_search_sends_expected_parameters():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[OTTAWA_RESULT])

    client = _client(handler)
    locations = asyncio.run(client.search("Ottawa"))

    assert [location.display_name for location in locations] == ["Ottawa, Ontario"]
    request = seen[0]
    assert request.url.path == "/search"
    assert request.url.params["format"] == "json"
    assert request.url.params["q"] == "Ottawa, Canada"
    assert request.url.params["countrycodes"] == "ca"
    assert request.url.params["limit"] == "8"
    assert request.url.params["addressdetails"] == "1"
    assert request.headers["User-Agent"] == "canship-tests"


def test_repeated_queries_are_served_from_cache():
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        return httpx.Response(200, json=[OTTAWA_RESULT])

    client = _client(handler)

    async def run():
        first = await client.search("Ottawa")
        second = await client.search("Ottawa")
        return first, second

    first, second = asyncio.run(run())

    assert calls["count"] == 1
    assert first == second


def test_cache_is_keyed_by_raw_query():
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        return httpx.Response(200, json=[POSTCODE_RESULT])

    client = _client(handler)

    async def run():
        await client.search("K1A0B1")
        await client.search("K1A 0B1")

    asyncio.run(run())

    assert calls["count"] == 2


def test_empty_results_are_cached_too():
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        return httpx.Response(200, json=[])

    client = _client(handler)

    async def run():
        await client.search("Nowhere")
        return await client.search("Nowhere")

    assert asyncio.run(run()) == []
    assert calls["count"] == 1


def test_http_errors_degrade_to_empty_list_and_are_not_cached():
    responses = [httpx.Response(503, text="busy"), httpx.Response(200, json=[OTTAWA_RESULT])]

    def handler(request: httpx.Request) -> httpx.Response:
        return responses.pop(0)

    client = _client(handler)

    async def run():
        failed = await client.search("Ottawa")
        recovered = await client.search("Ottawa")
        return failed, recovered

    failed, recovered = asyncio.run(run())

    assert failed == []
    assert [location.id for location in recovered] == ["123456"]


def test_network_errors_degrade_to_empty_list():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = _client(handler)

    assert asyncio.run(client.search("Ottawa")) == []


def test_malformed_json_degrades_to_empty_list():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>not json</html>")

    client = _client(handler)

    assert asyncio.run(client.search("Ottawa")) == []


def test_clear_cache_forces_new_request():
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        return httpx.Response(200, content=json.dumps([OTTAWA_RESULT]).encode())

    client = _client(handler)

    async def run():
        await client.search("Ottawa")
        client.clear_cache()
        await client.search("Ottawa")

    asyncio.run(run())

    assert calls["count"] == 2


def test_check_health_reads_status_endpoint():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/status"
        return httpx.Response(200, json={"status": 0, "message": "OK"})

    assert asyncio.run(_client(handler).check_health()) is True


def test_check_health_reports_unreachable_service():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    assert asyncio.run(_client(handler).check_health()) is False
