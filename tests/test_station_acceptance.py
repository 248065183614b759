"""Acceptance tests for station endpoints."""

from tests.fixtures import create_station, get_line_id


def test_create_and_list_stations(client):
    response = client.post("/stations", json={"name": "강남역"})

    assert response.status_code == 201
    assert response.headers["Location"] == f"/stations/{response.json()['id']}"
    assert [station["name"] for station in client.get("/stations").json()] == ["강남역"]


def test_delete_station(client):
    station_id = create_station(client, "강남역")

    assert client.delete(f"/stations/{station_id}").status_code == 204
    assert client.get("/stations").json() == []


def test_delete_missing_station_returns_404(client):
    assert client.delete("/stations/999").status_code == 404


def test_station_used_by_line_cannot_be_deleted(client):
    line_id = get_line_id(client)
    station_id = client.get(f"/lines/{line_id}").json()["stations"][0]["id"]

    response = client.delete(f"/stations/{station_id}")

    assert response.status_code == 409
    assert client.delete(f"/lines/{line_id}").status_code == 204
    assert client.delete(f"/stations/{station_id}").status_code == 204


def test_blank_station_name_is_rejected(client):
    assert client.post("/stations", json={"name": ""}).status_code == 400


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
