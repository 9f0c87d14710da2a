from __future__ import annotations

from datetime import date, time
from typing import Sequence

from ..core.constants import LATE_CUTOFF, ON_TIME_CUTOFF
from ..core.enums import AttendanceMark
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_time, station_clause
from .model import AttendanceCounts, CheckInEntry, EmployeeDay
from .repository import EmployeeRepository

# One fixed statement per clock column
_SET_CLOCK_SQL = {
    AttendanceMark.IN: f"UPDATE employee SET in_time=%s WHERE id=%s AND date=%s AND {station_clause()}",
    AttendanceMark.OUT: f"UPDATE employee SET out_time=%s WHERE id=%s AND date=%s AND {station_clause()}",
}


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_date(self, *, station: str, work_date: date) -> Sequence[EmployeeDay]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT e.id, e.station, e.date, e.in_time, e.out_time, e.name,
                       d.age, d.blood_group, d.email, d.phone_no
                FROM employee e
                JOIN emp_data d ON e.id = d.id AND LOWER(e.station) = LOWER(d.station)
                WHERE {station_clause("e.station")} AND e.date = %s
                ORDER BY e.id
                """,
                (station, work_date),
            )
            rows = fetchall(cur)
            return [
                EmployeeDay(
                    employee_id=int(r["id"]),
                    station=r["station"],
                    work_date=r["date"],
                    in_time=normalize_mysql_time(r.get("in_time")),
                    out_time=normalize_mysql_time(r.get("out_time")),
                    name=r.get("name"),
                    age=r.get("age"),
                    blood_group=r.get("blood_group"),
                    email=r.get("email"),
                    phone_no=r.get("phone_no"),
                )
                for r in rows
            ]

    def list_check_ins(self, *, station: str, start: date, end: date) -> Sequence[CheckInEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT id, date, in_time
                FROM employee
                WHERE {station_clause()} AND date >= %s AND date <= %s
                ORDER BY date DESC, id ASC
                """,
                (station, start, end),
            )
            return [
                CheckInEntry(
                    employee_id=int(r["id"]),
                    work_date=r["date"],
                    in_time=normalize_mysql_time(r.get("in_time")),
                )
                for r in fetchall(cur)
            ]

    def count_check_ins(self, *, station: str, end: date) -> dict[int, AttendanceCounts]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT id,
                       SUM(in_time IS NOT NULL AND in_time <= %s) AS ontime,
                       SUM(in_time > %s AND in_time <= %s) AS late,
                       SUM(in_time IS NULL) AS absent
                FROM employee
                WHERE {station_clause()} AND date <= %s
                GROUP BY id
                """,
                (ON_TIME_CUTOFF, ON_TIME_CUTOFF, LATE_CUTOFF, station, end),
            )
            return {
                int(r["id"]): AttendanceCounts(
                    ontime=int(r.get("ontime") or 0),
                    late=int(r.get("late") or 0),
                    absent=int(r.get("absent") or 0),
                )
                for r in fetchall(cur)
            }

    def set_clock(self, *, station: str, employee_id: int, work_date: date, mark: AttendanceMark, value: time) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SET_CLOCK_SQL[mark], (value, employee_id, work_date, station))
            return cur.rowcount > 0
