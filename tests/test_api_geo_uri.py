from __future__ import annotations

from fastapi.testclient import TestClient


def test_create_geo_uri(client: TestClient) -> None:
    r = client.post(
        "/v1/geo-uri",
        json={
            "latitude": 57.64911,
            "longitude": 10.40744,
            "altitude": 42,
            "accuracy": 0.0074,
            "zoom": 7,
            "query": "foo",
            "type": "what?",
            "extras": [["lang", "en"]],
        },
    )
    assert r.status_code == 200, r.text
    assert r.json() == {
        "uri": "geo:57.64911,10.40744,42;u=0.0074?z=7&q=foo&t=what%3F&lang=en"
    }


def test_create_geo_uri_from_strings(client: TestClient) -> None:
    r = client.post("/v1/geo-uri", json={"latitude": "45.5", "longitude": "-120"})
    assert r.status_code == 200, r.text
    assert r.json() == {"uri": "geo:45.5,-120"}


def test_create_geo_uri_out_of_range(client: TestClient) -> None:
    r = client.post("/v1/geo-uri", json={"latitude": "95", "longitude": "0"})
    assert r.status_code == 400, r.text
    body = r.json()
    assert body["code"] == "COORDINATE_OUT_OF_RANGE"
    assert body["details"] == {"latitude": "95", "longitude": "0"}


def test_parse_geo_uri(client: TestClient) -> None:
    r = client.get(
        "/v1/geo-uri/parse",
        params={"uri": "geo:48.2010,16.3695,183;crs=wgs84;u=35?z=40&q=Vienna"},
    )
    assert r.status_code == 200, r.text
    assert r.json() == {
        "coords": {
            "latitude": 48.201,
            "longitude": 16.3695,
            "altitude": 183.0,
            "accuracy": 35.0,
        },
        "params": {
            "zoom": 21,
            "query": "Vienna",
            "type": None,
            "extras": [["crs", "wgs84"]],
        },
    }


def test_parse_geo_uri_invalid(client: TestClient) -> None:
    r = client.get("/v1/geo-uri/parse", params={"uri": "https://example.com"})
    assert r.status_code == 400, r.text
    body = r.json()
    assert body["code"] == "GEO_URI_INVALID"
    assert body["details"] == {"uri": "https://example.com"}


def test_geo_uri_to_geohash(client: TestClient) -> None:
    r = client.get(
        "/v1/geo-uri/geohash", params={"uri": "geo:57.64911,10.40744;u=0.0074"}
    )
    assert r.status_code == 200, r.text
    assert r.json()["geohash"] == "u4pruydqqvj"


def test_geohash_to_geo_uri(client: TestClient) -> None:
    r = client.get("/v1/geo-uri/from-geohash/9q8yyk8y", params={"zoom": 15})
    assert r.status_code == 200, r.text
    uri = r.json()["uri"]
    assert uri.startswith("geo:37.77")
    assert ";u=19?z=15" in uri


def test_geohash_to_geo_uri_invalid(client: TestClient) -> None:
    r = client.get("/v1/geo-uri/from-geohash/abc")
    assert r.status_code == 400, r.text
    assert r.json()["code"] == "GEOHASH_INVALID"


def test_geo_uri_errors_share_the_envelope(client: TestClient) -> None:
    r = client.get(
        "/v1/geo-uri/geohash",
        params={"uri": "geo:91,0"},
        headers={"X-Trace-Id": "trace-geo"},
    )
    assert r.status_code == 400, r.text
    assert r.headers["X-Trace-Id"] == "trace-geo"
    assert r.json() == {
        "code": "GEO_URI_INVALID",
        "message": "Invalid latitude/longitude: 91.0, 0.0",
        "details": {"uri": "geo:91,0"},
        "trace_id": "trace-geo",
    }


def test_from_geohash_invalid_echoes_geohash(client: TestClient) -> None:
    r = client.get("/v1/geo-uri/from-geohash/u4pa")
    assert r.status_code == 400, r.text
    body = r.json()
    assert body["code"] == "GEOHASH_INVALID"
    assert body["details"] == {"geohash": "u4pa"}
