from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import VolumeKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, station_clause
from .model import InventoryItem, Volume
from .repository import InventoryRepository

# Table names come only from this closed mapping, never from request input.
_SELECT_RANGE_SQL = {
    VolumeKind.SUPPLY: f"""
        SELECT id, station, date, item_name AS name, current_volume
        FROM supplies
        WHERE {station_clause()} AND date >= %s AND date <= %s
        ORDER BY id
    """,
    VolumeKind.BIN: f"""
        SELECT id, station, date, bin_name AS name, current_volume
        FROM bins
        WHERE {station_clause()} AND date >= %s AND date <= %s
        ORDER BY id
    """,
}

_UPDATE_VOLUME_SQL = {
    VolumeKind.SUPPLY: f"UPDATE supplies SET current_volume=%s WHERE id=%s AND date=%s AND {station_clause()}",
    VolumeKind.BIN: f"UPDATE bins SET current_volume=%s WHERE id=%s AND date=%s AND {station_clause()}",
}


class MySQLInventoryRepository(InventoryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_range(self, *, kind: VolumeKind, station: str, start: date, end: date) -> Sequence[InventoryItem]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_RANGE_SQL[kind], (station, start, end))
            return [
                InventoryItem(
                    item_id=int(r["id"]),
                    kind=kind,
                    name=r["name"],
                    station=r["station"],
                    work_date=r["date"],
                    current_volume=r["current_volume"] or 0,
                )
                for r in fetchall(cur)
            ]

    def update_volume(self, *, kind: VolumeKind, station: str, item_id: int, work_date: date, volume: Volume) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_UPDATE_VOLUME_SQL[kind], (volume, item_id, work_date, station))
            return cur.rowcount > 0
