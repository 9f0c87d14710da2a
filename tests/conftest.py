from __future__ import annotations

import dataclasses
from datetime import date, datetime, time
from typing import Optional

import pytest

from src.station_ops.station_ops.container import build_services
from src.station_ops.station_ops.core.enums import AttendanceMark, VolumeKind
from src.station_ops.station_ops.employees.model import CheckInEntry, EmployeeDay
from src.station_ops.station_ops.employees.service import tally_check_ins
from src.station_ops.station_ops.inventory.model import InventoryItem


def _same_station(a: str, b: str) -> bool:
    return a.lower() == b.lower()


class InMemoryEmployees:
    def __init__(self, rows=None):
        self.rows: list[EmployeeDay] = list(rows or [])
        self.clock_calls: list[dict] = []

    def add(self, employee_id: int, work_date: date, in_time: Optional[time] = None, *, station="Vaishali", out_time=None, name=None):
        self.rows.append(
            EmployeeDay(
                employee_id=employee_id,
                station=station,
                work_date=work_date,
                in_time=in_time,
                out_time=out_time,
                name=name or f"Employee {employee_id}",
            )
        )

    def get(self, employee_id: int, work_date: date, station="Vaishali") -> Optional[EmployeeDay]:
        for r in self.rows:
            if r.employee_id == employee_id and r.work_date == work_date and _same_station(r.station, station):
                return r
        return None

    def list_for_date(self, *, station: str, work_date: date):
        items = [r for r in self.rows if _same_station(r.station, station) and r.work_date == work_date]
        return sorted(items, key=lambda r: r.employee_id)

    def list_check_ins(self, *, station: str, start: date, end: date):
        items = [
            CheckInEntry(employee_id=r.employee_id, work_date=r.work_date, in_time=r.in_time)
            for r in self.rows
            if _same_station(r.station, station) and start <= r.work_date <= end
        ]
        items.sort(key=lambda e: (-e.work_date.toordinal(), e.employee_id))
        return items

    def count_check_ins(self, *, station: str, end: date):
        entries = [
            CheckInEntry(employee_id=r.employee_id, work_date=r.work_date, in_time=r.in_time)
            for r in self.rows
            if _same_station(r.station, station) and r.work_date <= end
        ]
        return tally_check_ins(entries)

    def set_clock(self, *, station: str, employee_id: int, work_date: date, mark: AttendanceMark, value: time) -> bool:
        self.clock_calls.append({"station": station, "employee_id": employee_id, "work_date": work_date, "mark": mark})
        for i, r in enumerate(self.rows):
            if r.employee_id == employee_id and r.work_date == work_date and _same_station(r.station, station):
                column = "in_time" if mark is AttendanceMark.IN else "out_time"
                self.rows[i] = dataclasses.replace(r, **{column: value})
                return True
        return False


class InMemoryInventory:
    def __init__(self, items=None):
        self.items: list[InventoryItem] = list(items or [])
        self.range_calls: list[dict] = []

    def add(self, kind: VolumeKind, item_id: int, name: str, volume, work_date: date, *, station="Vaishali"):
        self.items.append(
            InventoryItem(item_id=item_id, kind=kind, name=name, station=station, work_date=work_date, current_volume=volume)
        )

    def get(self, kind: VolumeKind, item_id: int, work_date: date, station="Vaishali") -> Optional[InventoryItem]:
        for i in self.items:
            if i.kind is kind and i.item_id == item_id and i.work_date == work_date and _same_station(i.station, station):
                return i
        return None

    def list_range(self, *, kind: VolumeKind, station: str, start: date, end: date):
        self.range_calls.append({"kind": kind, "station": station, "start": start, "end": end})
        items = [
            i for i in self.items
            if i.kind is kind and _same_station(i.station, station) and start <= i.work_date <= end
        ]
        return sorted(items, key=lambda i: i.item_id)

    def update_volume(self, *, kind: VolumeKind, station: str, item_id: int, work_date: date, volume) -> bool:
        for n, i in enumerate(self.items):
            if i.kind is kind and i.item_id == item_id and i.work_date == work_date and _same_station(i.station, station):
                self.items[n] = dataclasses.replace(i, current_volume=volume)
                return True
        return False


class BrokenRepo:
    """Every query fails the way an unreachable database would."""

    def __getattr__(self, name):
        def _fail(*args, **kwargs):
            raise RuntimeError("connection lost")

        return _fail


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 1, 15, 10, 30, 0)


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees()


@pytest.fixture
def inventory_repo() -> InMemoryInventory:
    return InMemoryInventory()


@pytest.fixture
def make_app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.station_ops.station_ops.main import create_app

    def _make(employees=None, inventory=None):
        container = build_services(
            employees_repo=employees if employees is not None else InMemoryEmployees(),
            inventory_repo=inventory if inventory is not None else InMemoryInventory(),
        )
        return create_app(container=container)

    return _make


@pytest.fixture
def client(make_app, employees_repo, inventory_repo):
    return make_app(employees_repo, inventory_repo).test_client()
