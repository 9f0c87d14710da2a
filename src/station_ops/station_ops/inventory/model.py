from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Union

from ..core.enums import VolumeKind

Volume = Union[int, float, Decimal]


@dataclass(frozen=True)
class InventoryItem:
    """A supply item or a bin, as recorded for one station and day."""

    item_id: int
    kind: VolumeKind
    name: str
    station: str
    work_date: date
    current_volume: Volume


@dataclass(frozen=True)
class SuppliesView:
    station: str
    selected_date: date
    month_start: date
    month_end: date
    supplies_today: list[InventoryItem]
    bins_today: list[InventoryItem]
    supplies_monthly: list[InventoryItem]
    bins_monthly: list[InventoryItem]
    max_supply_volume: int
    max_bin_volume: int
