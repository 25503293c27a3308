"""Mini README: Tests for the FastAPI interface.

Exercises the JSON routes through ``TestClient`` to confirm airports are
listed, routes carry bounds, frames replay the full animation and unknown
codes map to 404.
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from skyroute.interface import create_application
from skyroute.interface import web_app


def _client() -> TestClient:
    return TestClient(create_application())


def test_airports_endpoint_lists_catalogue() -> None:
    response = _client().get("/airports")

    assert response.status_code == 200
    codes = [airport["code"] for airport in response.json()["airports"]]
    assert codes == ["SYD", "SIN", "LAX", "TYO", "DXB"]


def test_route_endpoint_returns_path_and_bounds() -> None:
    response = _client().get("/route", params={"origin": "syd", "destination": "sin", "segments": 10})

    assert response.status_code == 200
    payload = response.json()
    assert len(payload["path"]) == 11
    bounds = payload["bounds"]
    for lat, lon in payload["path"]:
        assert bounds["min_lat"] <= lat <= bounds["max_lat"]
        assert bounds["min_lon"] <= lon <= bounds["max_lon"]
    assert bounds["corners"] == [
        [bounds["min_lat"], bounds["min_lon"]],
        [bounds["max_lat"], bounds["max_lon"]],
    ]


def test_route_frames_replay_full_animation() -> None:
    response = _client().get("/route/frames", params={"origin": "DXB", "destination": "TYO", "segments": 8})

    assert response.status_code == 200
    payload = response.json()
    assert payload["phase"] == "completed"
    assert [frame["index"] for frame in payload["frames"]] == list(range(1, 9))
    assert all(0.0 <= frame["heading"] < 360.0 for frame in payload["frames"])


def test_unknown_code_returns_404() -> None:
    client = _client()

    assert client.get("/route", params={"origin": "ZZZ", "destination": "SIN"}).status_code == 404
    assert client.get("/route/frames", params={"origin": "SYD", "destination": "QQQ"}).status_code == 404


def test_invalid_segment_count_is_rejected() -> None:
    response = _client().get("/route", params={"origin": "SYD", "destination": "SIN", "segments": 0})

    assert response.status_code == 422


def test_route_endpoint_does_not_start_an_animation(monkeypatch) -> None:
    """Bounds for /route come straight from the arc; no animator is built."""

    def refuse(*args, **kwargs):
        raise AssertionError("GET /route must not construct an animator")

    monkeypatch.setattr(web_app, "PathAnimator", refuse)

    response = _client().get("/route", params={"origin": "LAX", "destination": "TYO", "segments": 4})

    assert response.status_code == 200
    assert response.json()["bounds"]["padding"] == [50, 50]
