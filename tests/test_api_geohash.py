from __future__ import annotations

from fastapi.testclient import TestClient


def test_encode_uses_configured_default_length(client: TestClient) -> None:
    r = client.get(
        "/v1/geohash/encode", params={"latitude": 37.7749, "longitude": -122.4194}
    )
    assert r.status_code == 200, r.text
    assert r.json() == {"geohash": "9q8yyk8y"}


def test_encode_with_explicit_length(client: TestClient) -> None:
    r = client.get(
        "/v1/geohash/encode",
        params={"latitude": 37.7749, "longitude": -122.4194, "length": 5},
    )
    assert r.status_code == 200, r.text
    assert r.json()["geohash"] == "9q8yy"


def test_encode_rejects_out_of_range_latitude(client: TestClient) -> None:
    r = client.get("/v1/geohash/encode", params={"latitude": 91, "longitude": 0})
    assert r.status_code == 422, r.text
    body = r.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["trace_id"] == r.headers["X-Trace-Id"]


def test_decode(client: TestClient) -> None:
    r = client.get("/v1/geohash/u4pruydqqvj")
    assert r.status_code == 200, r.text
    body = r.json()
    assert f"{body['latitude']:.7g}" == "57.64911"
    assert f"{body['longitude']:.7g}" == "10.40744"
    assert body["accuracy_m"] == 0.0074
    bounds = body["bounds"]
    assert bounds["latitude"]["min"] < body["latitude"] < bounds["latitude"]["max"]
    assert bounds["longitude"]["min"] < body["longitude"] < bounds["longitude"]["max"]


def test_decode_invalid_geohash(client: TestClient) -> None:
    r = client.get("/v1/geohash/u4pa")
    assert r.status_code == 400, r.text
    body = r.json()
    assert body["code"] == "GEOHASH_INVALID"
    assert body["details"] == {"geohash": "u4pa"}


def test_bytes(client: TestClient) -> None:
    r = client.get("/v1/geohash/u4pruydqqvj/bytes")
    assert r.status_code == 200, r.text
    assert r.json()["bytes"] == [26, 4, 21, 23, 26, 30, 12, 22, 22, 27, 17]


def test_bytes_invalid_geohash(client: TestClient) -> None:
    r = client.get("/v1/geohash/oops/bytes")
    assert r.status_code == 400, r.text
    assert r.json()["code"] == "GEOHASH_INVALID"


def test_length_for_meters(client: TestClient) -> None:
    r = client.get("/v1/geohash/length", params={"meters": 19})
    assert r.status_code == 200, r.text
    assert r.json() == {"meters": 19.0, "length": 8}


def test_length_rejects_negative_meters(client: TestClient) -> None:
    r = client.get("/v1/geohash/length", params={"meters": -1})
    assert r.status_code == 422, r.text
    assert r.json()["code"] == "VALIDATION_ERROR"
