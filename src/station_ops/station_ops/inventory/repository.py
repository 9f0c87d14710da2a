from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from ..core.enums import VolumeKind
from .model import InventoryItem, Volume


class InventoryRepository(Protocol):
    def list_range(self, *, kind: VolumeKind, station: str, start: date, end: date) -> Sequence[InventoryItem]:
        """Rows dated ``start`` through ``end`` inclusive, ordered by id."""
        raise NotImplementedError

    def update_volume(self, *, kind: VolumeKind, station: str, item_id: int, work_date: date, volume: Volume) -> bool:
        raise NotImplementedError
