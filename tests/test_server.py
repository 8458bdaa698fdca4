import pytest
from fastapi.testclient import TestClient

from server.app import app

COMPLEX_SEQUENCE = [
    {"floor": 9, "direction": "down"},
    {"floor": 6, "direction": "up"},
    {"floor": 3, "direction": "up"},
    {"floor": 7, "direction": "up"},
    {"floor": 5, "direction": "down"},
]


@pytest.fixture
def client():
    client = TestClient(app)
    response = client.post("/elevator", json={"num_floors": 10, "initial_floor": 1})
    assert response.status_code == 200
    return client


def test_state_after_reset(client):
    state = client.get("/state").json()
    assert state["final_floor"] == 1
    assert state["visited_floors"] == []


def test_run_commands(client):
    response = client.post("/commands", json={"commands": COMPLEX_SEQUENCE})
    assert response.status_code == 200
    body = response.json()
    assert body["final_floor"] == 5
    assert body["visited_floors"] == [1, 3, 6, 7, 9, 5]
    assert body["remaining"] == []


def test_missing_command_list_is_rejected(client):
    response = client.post("/commands", json={})
    assert response.status_code == 400
    assert client.get("/state").json()["visited_floors"] == []


def test_invalid_sequence_returns_conflict(client):
    response = client.post(
        "/commands",
        json={"commands": [{"floor": 3, "direction": "up"}, {"floor": 3, "direction": "up"}, {"floor": 5, "direction": "down"}]},
    )
    assert response.status_code == 409
    detail = response.json()["detail"]
    assert detail["command"] == {"floor": 3, "direction": "up"}
    assert detail["state"]["final_floor"] == 3


def test_invalid_settings_are_rejected(client):
    response = client.post("/elevator", json={"num_floors": 10, "initial_floor": 11})
    assert response.status_code == 400


def test_direction_is_validated(client):
    response = client.post("/commands", json={"commands": [{"floor": 3, "direction": "sideways"}]})
    assert response.status_code == 422
