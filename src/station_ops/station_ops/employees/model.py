from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import Optional


@dataclass(frozen=True)
class EmployeeDay:
    """One day's attendance row joined with the employee's profile fields."""

    employee_id: int
    station: str
    work_date: date
    in_time: Optional[time]
    out_time: Optional[time]
    name: Optional[str] = None
    age: Optional[int] = None
    blood_group: Optional[str] = None
    email: Optional[str] = None
    phone_no: Optional[str] = None


@dataclass(frozen=True)
class CheckInEntry:
    """Read-model for history and tallies: only the check-in clock matters."""

    employee_id: int
    work_date: date
    in_time: Optional[time]


@dataclass
class AttendanceCounts:
    ontime: int = 0
    late: int = 0
    absent: int = 0


@dataclass(frozen=True)
class EmployeeListView:
    station: str
    selected_date: date
    today: date
    rows: list[EmployeeDay]
    history: dict[int, list[CheckInEntry]] = field(default_factory=dict)
    counts: dict[int, AttendanceCounts] = field(default_factory=dict)

    def counts_for(self, employee_id: int) -> AttendanceCounts:
        return self.counts.get(employee_id) or AttendanceCounts()

    def history_for(self, employee_id: int) -> list[CheckInEntry]:
        return self.history.get(employee_id, [])
