from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime, time, timedelta
from typing import Iterable, Optional

from ..common.datetime_utils import clock_value, now_local
from ..core.constants import HISTORY_DAYS, LATE_CUTOFF, ON_TIME_CUTOFF
from ..core.enums import AttendanceMark, CheckInStatus
from .model import AttendanceCounts, CheckInEntry, EmployeeListView
from .repository import EmployeeRepository


def classify_check_in(in_time: Optional[time]) -> Optional[CheckInStatus]:
    """Bucket a check-in clock value.

    Returns None for check-ins after LATE_CUTOFF: those count as neither
    on time nor late, and they are not absences either.
    """
    if in_time is None:
        return CheckInStatus.ABSENT
    if in_time <= ON_TIME_CUTOFF:
        return CheckInStatus.ON_TIME
    if in_time <= LATE_CUTOFF:
        return CheckInStatus.LATE
    return None


def tally_check_ins(entries: Iterable[CheckInEntry]) -> dict[int, AttendanceCounts]:
    counts: dict[int, AttendanceCounts] = {}
    for entry in entries:
        c = counts.setdefault(entry.employee_id, AttendanceCounts())
        status = classify_check_in(entry.in_time)
        if status is CheckInStatus.ON_TIME:
            c.ontime += 1
        elif status is CheckInStatus.LATE:
            c.late += 1
        elif status is CheckInStatus.ABSENT:
            c.absent += 1
    return counts


def group_history(entries: Iterable[CheckInEntry]) -> dict[int, list[CheckInEntry]]:
    history: dict[int, list[CheckInEntry]] = defaultdict(list)
    for entry in entries:
        history[entry.employee_id].append(entry)
    for items in history.values():
        items.sort(key=lambda e: e.work_date, reverse=True)
    return dict(history)


class EmployeeService:
    def __init__(self, employees: EmployeeRepository, *, history_days: int = HISTORY_DAYS):
        self._employees = employees
        self._history_days = int(history_days)

    def list_employees(self, *, station: str, selected_date: date | None = None, now: datetime | None = None) -> EmployeeListView:
        today = (now or now_local()).date()
        selected_date = selected_date or today

        rows = list(self._employees.list_for_date(station=station, work_date=selected_date))
        recent = self._employees.list_check_ins(
            station=station,
            start=today - timedelta(days=self._history_days),
            end=today,
        )
        # Cumulative tallies run up to today regardless of the selected date.
        counts = self._employees.count_check_ins(station=station, end=today)

        return EmployeeListView(
            station=station,
            selected_date=selected_date,
            today=today,
            rows=rows,
            history=group_history(recent),
            counts=dict(counts),
        )

    def mark_attendance(self, *, station: str, employee_id: int, mark: str, now: datetime | None = None) -> bool:
        """Stamp today's in/out clock with the current time.

        Unknown ``mark`` values are ignored and return False without touching
        the database; the caller still reports success for them.
        """
        try:
            column = AttendanceMark(mark)
        except ValueError:
            return False

        now = now or now_local()
        return self._employees.set_clock(
            station=station,
            employee_id=employee_id,
            work_date=now.date(),
            mark=column,
            value=clock_value(now),
        )
