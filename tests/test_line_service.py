"""Service-level tests for line business rules, without HTTP."""

import asyncio

import pytest

from subway_api.app.core.errors import DuplicateLineNameError, InvalidLineError, LineNotFoundError
from subway_api.app.schemas.line import LineCreate, LineUpdate
from subway_api.app.schemas.station import StationCreate
from subway_api.app.services.line_service import LineService
from subway_api.app.services.station_service import StationService


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def stations(db):
    service = StationService(db)
    up = run(service.create_station(StationCreate(name="강남역")))
    down = run(service.create_station(StationCreate(name="광교역")))
    return up.id, down.id


@pytest.fixture
def service(db):
    return LineService(db)


def line_request(stations, name="신분당선", color="bg-red-600"):
    up_id, down_id = stations
    return LineCreate(name=name, color=color, upStationId=up_id, downStationId=down_id, distance=10)


def test_create_line_assigns_id(service, stations):
    line = run(service.create_line(line_request(stations)))

    assert line.id > 0
    assert line.name == "신분당선"
    assert [station.name for station in line.stations] == ["강남역", "광교역"]


def test_create_duplicate_name_raises(service, stations):
    run(service.create_line(line_request(stations)))

    with pytest.raises(DuplicateLineNameError):
        run(service.create_line(line_request(stations, color="bg-blue-600")))


def test_create_with_unknown_station_raises(service, stations):
    up_id, _ = stations
    request = LineCreate(name="신분당선", color="red", upStationId=up_id, downStationId=999, distance=1)

    with pytest.raises(InvalidLineError):
        run(service.create_line(request))


def test_update_to_own_name_is_allowed(service, stations):
    line = run(service.create_line(line_request(stations)))

    updated = run(service.update_line(line.id, LineUpdate(name="신분당선", color="bg-blue-600")))

    assert updated.name == "신분당선"
    assert updated.color == "bg-blue-600"


def test_missing_line_raises_not_found(service):
    with pytest.raises(LineNotFoundError):
        run(service.get_line_by_id(42))
    with pytest.raises(LineNotFoundError):
        run(service.update_line(42, LineUpdate(name="x")))
    with pytest.raises(LineNotFoundError):
        run(service.delete_line(42))


def test_delete_is_permanent(service, stations):
    line = run(service.create_line(line_request(stations)))

    run(service.delete_line(line.id))

    assert run(service.get_lines()) == []
    with pytest.raises(LineNotFoundError):
        run(service.delete_line(line.id))


def test_unique_constraint_on_create_raises_duplicate(service, stations, monkeypatch):
    run(service.create_line(line_request(stations)))
    # Simulate a concurrent insert that slipped past the name lookup.
    monkeypatch.setattr(service.lines, "find_by_name", lambda name: None)

    with pytest.raises(DuplicateLineNameError):
        run(service.create_line(line_request(stations, color="bg-blue-600")))
    assert len(run(service.get_lines())) == 1


def test_unique_constraint_on_update_raises_duplicate(service, stations, monkeypatch):
    run(service.create_line(line_request(stations)))
    other = run(service.create_line(line_request(stations, name="수인분당선")))
    monkeypatch.setattr(service.lines, "find_by_name", lambda name: None)

    with pytest.raises(DuplicateLineNameError):
        run(service.update_line(other.id, LineUpdate(name="신분당선")))
    assert run(service.get_line_by_id(other.id)).name == "수인분당선"
