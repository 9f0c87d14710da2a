from __future__ import annotations

from datetime import date, time
from typing import Protocol, Sequence

from ..core.enums import AttendanceMark
from .model import AttendanceCounts, CheckInEntry, EmployeeDay


class EmployeeRepository(Protocol):
    def list_for_date(self, *, station: str, work_date: date) -> Sequence[EmployeeDay]:
        """Attendance rows joined with profiles, ordered by employee id."""
        raise NotImplementedError

    def list_check_ins(self, *, station: str, start: date, end: date) -> Sequence[CheckInEntry]:
        """Check-ins between ``start`` and ``end`` inclusive, newest date first."""
        raise NotImplementedError

    def count_check_ins(self, *, station: str, end: date) -> dict[int, AttendanceCounts]:
        """Cumulative on-time/late/absent tallies per employee for dates up to ``end``."""
        raise NotImplementedError

    def set_clock(self, *, station: str, employee_id: int, work_date: date, mark: AttendanceMark, value: time) -> bool:
        raise NotImplementedError
