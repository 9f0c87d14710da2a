from __future__ import annotations

from datetime import datetime

from ..common.datetime_utils import now_local
from ..core.constants import MAX_BIN_VOLUME, MAX_SUPPLY_VOLUME, ON_TIME_CUTOFF
from ..core.enums import VolumeKind
from ..employees.repository import EmployeeRepository
from ..inventory.classifier import split_alerts
from ..inventory.repository import InventoryRepository
from .model import DashboardView


class DashboardService:
    """Today's exceptions for one station: late or absent staff, low supplies, full bins."""

    def __init__(self, employees: EmployeeRepository, inventory: InventoryRepository):
        self._employees = employees
        self._inventory = inventory

    def build(self, *, station: str, now: datetime | None = None) -> DashboardView:
        today = (now or now_local()).date()

        rows = self._employees.list_for_date(station=station, work_date=today)
        late = [r for r in rows if r.in_time is not None and r.in_time > ON_TIME_CUTOFF]
        absent = [r for r in rows if r.in_time is None]

        supplies = sorted(
            self._inventory.list_range(kind=VolumeKind.SUPPLY, station=station, start=today, end=today),
            key=lambda i: i.name.casefold(),
        )
        bins = sorted(
            self._inventory.list_range(kind=VolumeKind.BIN, station=station, start=today, end=today),
            key=lambda i: i.name.casefold(),
        )
        red_supplies, yellow_supplies = split_alerts(supplies)
        red_bins, yellow_bins = split_alerts(bins)

        return DashboardView(
            station=station,
            today=today,
            late_employees=late,
            absent_employees=absent,
            red_supplies=red_supplies,
            yellow_supplies=yellow_supplies,
            red_bins=red_bins,
            yellow_bins=yellow_bins,
            max_supply_volume=MAX_SUPPLY_VOLUME,
            max_bin_volume=MAX_BIN_VOLUME,
        )
