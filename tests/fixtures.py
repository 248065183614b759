"""Request helpers shared by the acceptance tests."""


def create_station(client, name):
    response = client.post("/stations", json={"name": name})
    assert response.status_code == 201, response.text
    return response.json()["id"]


def create_line_by_name_and_station(client, name, color="bg-red-600"):
    up_station_id = create_station(client, f"{name} 상행역")
    down_station_id = create_station(client, f"{name} 하행역")
    return client.post(
        "/lines",
        json={
            "name": name,
            "color": color,
            "upStationId": up_station_id,
            "downStationId": down_station_id,
            "distance": 10,
        },
    )


def get_line_id(client, name="신분당선"):
    return create_line_by_name_and_station(client, name).json()["id"]
