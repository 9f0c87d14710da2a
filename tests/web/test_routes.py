from __future__ import annotations

from datetime import date, time, timedelta

from src.station_ops.station_ops.core.enums import VolumeKind

from conftest import BrokenRepo


def test_root_redirects_to_dashboard(client):
    resp = client.get("/")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/dashboard")


def test_dashboard_renders_alerts(client, employees_repo, inventory_repo):
    today = date.today()
    employees_repo.add(1, today, time(10, 40), name="Ravi Kumar")
    inventory_repo.add(VolumeKind.SUPPLY, 1, "Hand sanitizer", 1, today)

    resp = client.get("/dashboard")

    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert "Ravi Kumar" in body
    assert "Hand sanitizer" in body


def test_employees_page_shows_counts_and_history(client, employees_repo):
    today = date.today()
    employees_repo.add(1, today - timedelta(days=1), time(10, 30), name="Meena")
    employees_repo.add(1, today, None, name="Meena")

    resp = client.get("/employees")

    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert "Meena" in body
    assert "1 / 0 / 1" in body
    assert "10:30:00" in body


def test_employees_invalid_date_falls_back_to_today(client, employees_repo):
    employees_repo.add(1, date.today(), None, name="Suresh")

    resp = client.get("/employees?date=not-a-date")

    assert resp.status_code == 200
    assert "Suresh" in resp.get_data(as_text=True)


def test_mark_attendance_in_then_out(client, employees_repo):
    today = date.today()
    employees_repo.add(4, today, None)

    resp = client.post("/mark-attendance/4/in")
    assert resp.get_json() == {"success": True}
    assert employees_repo.get(4, today).in_time is not None
    assert employees_repo.get(4, today).out_time is None

    resp = client.post("/mark-attendance/4/out")
    assert resp.get_json() == {"success": True}
    assert employees_repo.get(4, today).out_time is not None


def test_mark_attendance_unknown_type_reports_success_without_update(client, employees_repo):
    employees_repo.add(4, date.today(), None)

    resp = client.post("/mark-attendance/4/bogus")

    assert resp.status_code == 200
    assert resp.get_json() == {"success": True}
    assert employees_repo.clock_calls == []


def test_update_volume_statuses(client, inventory_repo):
    today = date.today()
    inventory_repo.add(VolumeKind.SUPPLY, 9, "Soap", 8, today)

    assert client.post("/supplies/update/supply/9", data={"current_volume": "-1"}).status_code == 400
    resp = client.post("/supplies/update/supply/9", data={"current_volume": "abc"})
    assert resp.status_code == 400
    assert resp.get_data(as_text=True) == "Invalid volume"
    resp = client.post("/supplies/update/crate/9", data={"current_volume": "3"})
    assert resp.status_code == 400
    assert resp.get_data(as_text=True) == "Invalid type"
    assert inventory_repo.get(VolumeKind.SUPPLY, 9, today).current_volume == 8

    resp = client.post("/supplies/update/supply/9", data={"current_volume": "3"})

    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == "Volume updated"
    assert inventory_repo.get(VolumeKind.SUPPLY, 9, today).current_volume == 3


def test_supplies_page_renders_selected_day(client, inventory_repo):
    inventory_repo.add(VolumeKind.BIN, 1, "Platform 2", 45, date(2024, 2, 10))

    resp = client.get("/supplies?date=2024-02-10")

    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert "Platform 2" in body
    assert "2024-02-01 to 2024-02-29" in body


def test_messages_page(client):
    resp = client.get("/messages")

    assert resp.status_code == 200
    assert "Vaishali" in resp.get_data(as_text=True)


def test_set_station_scopes_later_reads_case_insensitively(client, employees_repo, inventory_repo):
    today = date.today()
    employees_repo.add(1, today, None, station="Vaishali", name="Home Worker")
    employees_repo.add(2, today, None, station="Anand Vihar", name="Other Worker")
    inventory_repo.add(VolumeKind.SUPPLY, 1, "Other Soap", 1, today, station="ANAND VIHAR")

    before = client.get("/employees").get_data(as_text=True)
    assert "Home Worker" in before
    assert "Other Worker" not in before

    resp = client.post("/set-station", data={"station": "anand vihar"}, headers={"Referer": "/employees"})
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/employees")

    after = client.get("/employees").get_data(as_text=True)
    assert "Other Worker" in after
    assert "Home Worker" not in after
    assert "Other Soap" in client.get("/dashboard").get_data(as_text=True)

    client.post("/mark-attendance/2/in")
    assert employees_repo.get(2, today, station="Anand Vihar").in_time is not None


def test_set_station_ignores_blank_and_redirects_home_without_referer(client, inventory_repo):
    resp = client.post("/set-station", data={"station": "   "})

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/")
    client.get("/supplies")
    assert inventory_repo.range_calls[-1]["station"] == "Vaishali"


def test_station_selection_is_per_client(make_app, employees_repo):
    app = make_app(employees_repo)
    first, second = app.test_client(), app.test_client()
    employees_repo.add(1, date.today(), None, station="Vaishali", name="Home Worker")

    first.post("/set-station", data={"station": "Anand Vihar"})

    assert "Home Worker" not in first.get("/employees").get_data(as_text=True)
    assert "Home Worker" in second.get("/employees").get_data(as_text=True)


def test_backend_failures_map_to_generic_errors(make_app):
    client = make_app(BrokenRepo(), BrokenRepo()).test_client()

    resp = client.get("/employees")
    assert resp.status_code == 500
    assert resp.get_data(as_text=True) == "Error fetching employees data"

    resp = client.get("/dashboard")
    assert resp.status_code == 500
    assert resp.get_data(as_text=True) == "Error fetching dashboard data"

    resp = client.get("/supplies")
    assert resp.status_code == 500
    assert resp.get_data(as_text=True) == "Error loading supplies and bins"

    resp = client.post("/supplies/update/bin/1", data={"current_volume": "5"})
    assert resp.status_code == 500
    assert resp.get_data(as_text=True) == "Failed to update volume"

    # Validation still wins over the backend.
    assert client.post("/supplies/update/bin/1", data={"current_volume": "-5"}).status_code == 400


def test_mark_attendance_backend_failure_reports_false_with_200(make_app):
    client = make_app(BrokenRepo(), BrokenRepo()).test_client()

    resp = client.post("/mark-attendance/1/in")

    assert resp.status_code == 200
    assert resp.get_json() == {"success": False}


def test_mark_attendance_non_numeric_id_answers_json_failure(client, employees_repo):
    resp = client.post("/mark-attendance/abc/in")

    assert resp.status_code == 200
    assert resp.get_json() == {"success": False}
    assert employees_repo.clock_calls == []
