from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..employees.model import EmployeeDay
from ..inventory.model import InventoryItem


@dataclass(frozen=True)
class DashboardView:
    station: str
    today: date
    late_employees: list[EmployeeDay]
    absent_employees: list[EmployeeDay]
    red_supplies: list[InventoryItem]
    yellow_supplies: list[InventoryItem]
    red_bins: list[InventoryItem]
    yellow_bins: list[InventoryItem]
    max_supply_volume: int
    max_bin_volume: int
