from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from wasteroute.main import create_app


@pytest.fixture
def api_client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    app = create_app()
    client = TestClient(app)

    # ensure filesystem writes go to tmpdir
    from wasteroute.services.routing import service as routing_service
    from wasteroute.persistence.filesystem import FileStorage

    monkeypatch.setattr(routing_service, "FileStorage", lambda: FileStorage(root=tmp_path))

    return client


def _stops() -> list[dict]:
    return [
        {"id": "A", "location": {"latitude": 0.0, "longitude": 1.0}},
        {"id": "B", "location": {"latitude": 0.0, "longitude": 3.0}},
        {"id": "C", "location": {"latitude": 0.0, "longitude": 2.0}},
    ]


def test_health(api_client: TestClient):
    response = api_client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_health_database_not_configured(api_client: TestClient, monkeypatch: pytest.MonkeyPatch):
    from wasteroute.db import supabase as supabase_module

    monkeypatch.setattr(supabase_module, "get_supabase_client", lambda: None)
    response = api_client.get("/api/health/database")
    assert response.status_code == 200
    assert response.json()["configured"] is False


def test_optimize_endpoint(api_client: TestClient):
    response = api_client.post(
        "/api/routes/optimize",
        json={"origin": {"latitude": 0.0, "longitude": 0.0}, "stops": _stops()},
    )

    assert response.status_code == 200
    payload = response.json()
    assert [stop["id"] for stop in payload["tour"]] == ["A", "C", "B"]
    assert round(payload["estimate"]["total_distance_km"], 1) == 333.6
    assert [leg["sequence"] for leg in payload["estimate"]["legs"]] == [1, 2, 3]
    assert payload["metadata"]["map_overlays"]["type"] == "FeatureCollection"


def test_optimize_endpoint_empty_stop_set(api_client: TestClient):
    response = api_client.post(
        "/api/routes/optimize",
        json={"origin": {"latitude": 7.3, "longitude": 5.14}, "stops": []},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["tour"] == []
    assert payload["estimate"]["total_distance_km"] == 0
    assert payload["estimate"]["estimated_minutes"] == 0


def test_optimize_endpoint_keeps_integer_ids(api_client: TestClient):
    stops = [{"id": 7, "location": {"latitude": 0.0, "longitude": 1.0}}]
    response = api_client.post(
        "/api/routes/optimize",
        json={"origin": {"latitude": 0.0, "longitude": 0.0}, "stops": stops},
    )
    assert response.status_code == 200
    assert response.json()["tour"][0]["id"] == 7


@pytest.mark.parametrize(
    "location",
    [
        {"latitude": 91.0, "longitude": 0.0},
        {"latitude": 0.0, "longitude": -181.0},
        {"latitude": "NaN", "longitude": 0.0},
    ],
)
def test_optimize_endpoint_rejects_bad_coordinates(api_client: TestClient, location: dict):
    stops = [{"id": "A", "location": location}]
    response = api_client.post(
        "/api/routes/optimize",
        json={"origin": {"latitude": 0.0, "longitude": 0.0}, "stops": stops},
    )
    assert response.status_code == 422


def test_optimize_endpoint_rejects_duplicate_ids(api_client: TestClient):
    stops = _stops() + [{"id": "A", "location": {"latitude": 1.0, "longitude": 1.0}}]
    response = api_client.post(
        "/api/routes/optimize",
        json={"origin": {"latitude": 0.0, "longitude": 0.0}, "stops": stops},
    )
    assert response.status_code == 422


@pytest.mark.parametrize("speed", [0, -10])
def test_optimize_endpoint_rejects_non_positive_speed(api_client: TestClient, speed: float):
    response = api_client.post(
        "/api/routes/optimize",
        json={
            "origin": {"latitude": 0.0, "longitude": 0.0},
            "stops": _stops(),
            "config": {"avg_speed_kmh": speed},
        },
    )
    assert response.status_code == 422


def test_optimize_endpoint_persist(api_client: TestClient, tmp_path: Path):
    response = api_client.post(
        "/api/routes/optimize",
        json={"origin": {"latitude": 0.0, "longitude": 0.0}, "stops": _stops(), "persist": True},
    )
    assert response.status_code == 200
    run_dirs = list((tmp_path / "outputs").iterdir())
    assert len(run_dirs) == 1
    assert (run_dirs[0] / "summary.json").exists()


def test_recalculate_endpoint(api_client: TestClient):
    response = api_client.post(
        "/api/routes/recalculate",
        json={
            "origin": {"latitude": 0.0, "longitude": 0.0},
            "previous_tour": _stops(),
            "removed_stop_id": "A",
        },
    )
    assert response.status_code == 200
    assert [stop["id"] for stop in response.json()["tour"]] == ["C", "B"]


def test_cleaner_route_endpoint(api_client: TestClient, fake_supabase):
    response = api_client.get("/api/cleaners/cleaner-1/route")
    assert response.status_code == 200
    assert [stop["id"] for stop in response.json()["tour"]] == ["r-near", "r-mid", "r-far"]


def test_cleaner_route_endpoint_unknown_cleaner(api_client: TestClient, fake_supabase):
    response = api_client.get("/api/cleaners/nobody/route")
    assert response.status_code == 404


def test_cleaner_route_endpoint_without_location(api_client: TestClient, fake_supabase):
    response = api_client.get("/api/cleaners/cleaner-2/route")
    assert response.status_code == 400
    assert "no location" in response.json()["detail"]


def test_cleaner_route_endpoint_database_not_configured(api_client: TestClient, monkeypatch: pytest.MonkeyPatch):
    from wasteroute.persistence import database

    monkeypatch.setattr(database, "get_supabase_client", lambda: None)
    response = api_client.get("/api/cleaners/cleaner-1/route")
    assert response.status_code == 400


def test_resolve_endpoint(api_client: TestClient, fake_supabase):
    response = api_client.post(
        "/api/cleaners/cleaner-1/reports/r-near/resolve",
        json={"after_image_url": "https://cdn/after.jpg"},
    )
    assert response.status_code == 200
    assert [stop["id"] for stop in response.json()["tour"]] == ["r-mid", "r-far"]


def test_resolve_endpoint_unknown_report(api_client: TestClient, fake_supabase):
    response = api_client.post("/api/cleaners/cleaner-1/reports/r-missing/resolve")
    assert response.status_code == 404
