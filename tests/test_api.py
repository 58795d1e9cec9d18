from __future__ import annotations

import json

import pytest

from doggy_daycare.main import create_app


@pytest.fixture
def client(monkeypatch, data_path):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(data_file=str(data_path))
    return app.test_client()


def _add_dog(client, **overrides):
    payload = {"name": "Rex", "owner": "Jordan", "schedule": {"daycare_days": [1, 3]}}
    payload.update(overrides)
    return client.post("/api/dogs", json=payload)


def test_add_dog_returns_created_with_schedules(client):
    response = _add_dog(client)

    assert response.status_code == 201
    dog = response.get_json()
    assert dog["schedule"]["daycare_days"] == [1, 3]
    schedules = client.get(f"/api/schedules?dog_id={dog['id']}").get_json()
    assert [s["pattern"] for s in schedules] == [{"Custom": [1, 3]}]


def test_add_dog_rejects_bad_weekday(client):
    response = _add_dog(client, schedule={"daycare_days": [7]})

    assert response.status_code == 400
    assert "error" in response.get_json()


def test_update_unknown_dog_is_404(client):
    response = client.put("/api/dogs/missing", json={"name": "Rex", "owner": "Jordan"})

    assert response.status_code == 404
    assert response.get_json() == {"error": "Dog not found"}


def test_generate_with_reversed_range_is_400(client):
    response = client.post("/api/attendance/generate", json={"start_date": "2024-02-01", "end_date": "2024-01-01"})

    assert response.status_code == 400


def test_legacy_toggle_shows_up_as_entry(client):
    response = client.put("/api/days/2024-01-10/attendance/legacy", json={"dog_id": "d1", "attending": True})
    assert response.status_code == 204

    entries = client.get("/api/days/2024-01-10/attendance").get_json()
    assert entries["d1_Daycare"]["attending"] is True
    assert client.get("/api/days/2024-01-10").get_json()["attendance"]["dogs"] == {"d1": True}


def test_non_boolean_attending_is_400(client):
    response = client.put("/api/days/2024-01-10/attendance/legacy", json={"dog_id": "d1", "attending": "yes"})

    assert response.status_code == 400


def test_export_and_import_round_trip(client):
    _add_dog(client)
    exported = client.get("/api/export").get_data(as_text=True)

    assert client.post("/api/import", data="{broken").status_code == 400
    assert client.post("/api/import", data=exported).status_code == 204
    assert client.get("/api/export").get_data(as_text=True) == exported
    assert json.loads(exported)["dogs"][0]["name"] == "Rex"


def test_cloud_backup_defaults(client):
    config = client.get("/api/settings/cloud-backup").get_json()

    assert config == {"enabled": False, "cloud_directory": "", "max_backups": 100, "sync_interval_minutes": 30}


def test_dog_age_endpoint_validates(client):
    assert client.get("/api/dogs/age?date_of_birth=bad").status_code == 400
    assert "age" in client.get("/api/dogs/age?date_of_birth=2020-01-01").get_json()
