"""Tests for the Flask API."""

import csv
import io

import pytest

from soccer_rotation.ui.web_app import WebAppState, create_app


@pytest.fixture
def client():
    app = create_app(WebAppState())
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def mark_present(client, *ids):
    for player_id in ids:
        response = client.post(f"/api/attendance/{player_id}", json={"present": True})
        assert response.status_code == 200


def test_state_lists_roster(client):
    data = client.get("/api/state").get_json()

    assert data["success"] is True
    assert len(data["players"]) == 8
    assert data["players"][0] == {"id": 1, "name": "Luca", "rank": 5, "present": False}
    assert data["competitive_balance"] == 50
    assert data["has_schedule"] is False


def test_toggle_attendance(client):
    first = client.post("/api/attendance/2").get_json()
    second = client.post("/api/attendance/2").get_json()

    assert first["present"] is True
    assert second["present"] is False


def test_set_attendance_explicitly(client):
    mark_present(client, 4)
    response = client.post("/api/attendance/4", json={"present": False})

    assert response.get_json()["present"] is False
    assert client.get("/api/state").get_json()["players"][3]["present"] is False


@pytest.mark.parametrize("value", ["false", "true", 0, 1, None])
def test_attendance_rejects_non_boolean_present(client, value):
    response = client.post("/api/attendance/2", json={"present": value})

    assert response.status_code == 400
    assert response.get_json()["success"] is False
    assert client.get("/api/state").get_json()["players"][1]["present"] is False


def test_unknown_player_is_404(client):
    response = client.post("/api/attendance/42")

    assert response.status_code == 404
    assert response.get_json()["success"] is False


def test_balance_validation(client):
    assert client.post("/api/balance", json={"competitive_balance": 75}).status_code == 200
    assert client.get("/api/state").get_json()["competitive_balance"] == 75

    bad = client.post("/api/balance", json={"competitive_balance": 150})
    assert bad.status_code == 400
    assert client.post("/api/balance", json={}).status_code == 400


def test_schedule_requires_three_players(client):
    mark_present(client, 1, 2)

    response = client.post("/api/schedule")

    assert response.status_code == 400
    assert "at least 3 players" in response.get_json()["error"]


def test_report_before_schedule(client):
    response = client.get("/api/report")

    assert response.status_code == 400
    assert response.get_json()["error"] == "Please generate a rotation schedule first."
    assert client.get("/api/schedule").status_code == 400


def test_generate_schedule_and_report(client):
    mark_present(client, 1, 2, 3, 4)

    data = client.post("/api/schedule").get_json()
    slots = data["schedule"]["slots"]
    assert len(slots) == 8
    assert slots[0]["heading"] == "Quarter 1 (0-5 min)"
    assert slots[3]["heading"] == "Quarter 2 (5-10 min)"
    assert {p["id"] for p in slots[5]["players"]} == {1, 2, 3, 4}

    assert client.get("/api/schedule").get_json()["schedule"] == data["schedule"]

    report = client.get("/api/report").get_json()
    assert [p["total_play_time"] for p in report["players"]] == [40, 40, 40, 40]
    assert report["players"][0]["field_times"] == [
        {"start": 0, "end": 40, "start_label": "Q1 - 0:00", "end_label": "End"}
    ]
    assert report["players"][0]["sideline_times"] == []
    assert report["summary"]["fairness_counts"] == {"under": 0, "ok": 4, "over": 0}


def test_substitutions_endpoint(client):
    mark_present(client, 1, 2, 3, 4, 5, 6, 7, 8)
    client.post("/api/balance", json={"competitive_balance": 0})
    client.post("/api/schedule")

    data = client.get("/api/schedule/1/substitutions").get_json()

    assert data["substitutions"][0]["label"] == "Deevam replaces Luca"
    assert len(data["substitutions"]) == 4
    assert client.get("/api/schedule/0/substitutions").get_json()["substitutions"] == []
    assert client.get("/api/schedule/8/substitutions").status_code == 404


def test_export_report_csv(client):
    mark_present(client, 1, 2, 3, 4)
    client.post("/api/schedule")

    response = client.get("/api/report/export")

    assert response.status_code == 200
    assert response.mimetype == "text/csv"
    rows = list(csv.reader(io.StringIO(response.get_data(as_text=True))))
    assert rows[0] == ["Player Game Report"]
    assert ["Luca", "5", "40", "0", "Q1 - 0:00 - End", ""] in rows


def test_index_serves_html_interface(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.mimetype == "text/html"
    assert "/api/schedule" in response.get_data(as_text=True)
