from __future__ import annotations

import pytest

from workshifts.container import build_services
from workshifts.main import create_app


@pytest.fixture
def client(monkeypatch, shifts_repo, transactions_repo):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_services(shifts_repo=shifts_repo, transactions_repo=transactions_repo)
    app = create_app(container=container)
    return app.test_client()


def _create(client, **overrides):
    body = {"businessId": 1, "name": "Morning", "startTime": "08:00", "endTime": "16:00"}
    body.update(overrides)
    return client.post("/work-shifts", json=body)


def test_create_and_fetch_shift(client):
    resp = _create(client, color="#FFD700")

    assert resp.status_code == 201
    created = resp.get_json()
    assert created["isActive"] is True
    assert created["color"] == "#FFD700"

    fetched = client.get(f"/work-shifts/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.get_json()["name"] == "Morning"


def test_create_requires_fields(client):
    resp = client.post("/work-shifts", json={"businessId": 1, "name": "x"})

    assert resp.status_code == 400
    assert "Missing required fields" in resp.get_json()["message"]


def test_create_rejects_bad_time_format(client):
    resp = _create(client, startTime="8:00")

    assert resp.status_code == 400
    assert "HH:mm" in resp.get_json()["message"]


def test_overlap_returns_400_naming_the_shift(client):
    _create(client)

    resp = _create(client, name="Late", startTime="15:00", endTime="20:00")

    assert resp.status_code == 400
    payload = resp.get_json()
    assert payload["kind"] == "OVERLAPPING_SHIFT"
    assert payload["conflictingShift"] == "Morning"


def test_list_update_toggle_delete(client):
    shift_id = _create(client).get_json()["id"]
    _create(client, name="Night", startTime="22:00", endTime="02:00")

    updated = client.put(f"/work-shifts/{shift_id}", json={"endTime": "17:00", "description": "front desk"})
    assert updated.status_code == 200
    assert updated.get_json()["endTime"] == "17:00"

    toggled = client.patch(f"/work-shifts/{shift_id}/toggle")
    assert toggled.get_json()["isActive"] is False

    assert [s["name"] for s in client.get("/work-shifts/business/1").get_json()] == ["Night"]
    assert len(client.get("/work-shifts/business/1?includeInactive=true").get_json()) == 2

    assert client.delete(f"/work-shifts/{shift_id}").status_code == 200
    assert client.get(f"/work-shifts/{shift_id}").status_code == 404
    assert client.delete(f"/work-shifts/{shift_id}").status_code == 404


def test_update_rejects_non_boolean_active_flag(client):
    shift_id = _create(client).get_json()["id"]

    assert client.put(f"/work-shifts/{shift_id}", json={"isActive": "yes"}).status_code == 400


def test_create_transaction_returns_shift_annotation(client):
    _create(client, startTime="00:00", endTime="12:00")
    _create(client, name="Afternoon", startTime="12:00", endTime="00:00")

    resp = client.post("/transactions", json={"userId": 7, "businessId": 1, "type": "purchase", "totalPointsChange": 5})

    assert resp.status_code == 201
    tx = resp.get_json()
    assert tx["type"] == "PURCHASE"
    assert tx["workShiftName"] in {"Morning", "Afternoon"}
    assert client.get(f"/transactions/{tx['id']}").get_json()["workShiftId"] == tx["workShiftId"]


def test_create_transaction_validates_input(client):
    assert client.post("/transactions", json={"userId": 7}).status_code == 400
    assert client.post("/transactions", json={"userId": 7, "businessId": 1, "type": "gift"}).status_code == 400
    assert client.get("/transactions/99").status_code == 404


@pytest.mark.parametrize("field, value", [("name", 123), ("color", 5), ("description", ["x"])])
def test_create_rejects_non_string_fields(client, field, value):
    resp = _create(client, **{field: value})

    assert resp.status_code == 400


def test_update_rejects_non_string_name(client):
    shift_id = _create(client).get_json()["id"]

    assert client.put(f"/work-shifts/{shift_id}", json={"name": 123}).status_code == 400


@pytest.mark.parametrize("path", ["/work-shifts", "/transactions"])
def test_post_rejects_non_object_body(client, path):
    resp = client.post(path, json=[{"businessId": 1}])

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Request body must be a JSON object"


def test_put_rejects_non_object_body(client):
    shift_id = _create(client).get_json()["id"]

    assert client.put(f"/work-shifts/{shift_id}", json=["08:00"]).status_code == 400


def test_create_transaction_rejects_non_string_notes(client):
    resp = client.post("/transactions", json={"userId": 7, "businessId": 1, "type": "purchase", "notes": 42})

    assert resp.status_code == 400
