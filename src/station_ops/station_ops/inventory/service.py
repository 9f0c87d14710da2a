from __future__ import annotations

from datetime import date, datetime

from ..common.datetime_utils import month_bounds, now_local
from ..common.validators import require_non_negative_number
from ..core.constants import MAX_BIN_VOLUME, MAX_SUPPLY_VOLUME
from ..core.enums import VolumeKind
from ..core.exceptions import ValidationError
from .model import SuppliesView
from .repository import InventoryRepository


def parse_kind(value: str) -> VolumeKind:
    try:
        return VolumeKind(value)
    except ValueError:
        raise ValidationError("Invalid type") from None


class InventoryService:
    def __init__(self, inventory: InventoryRepository):
        self._inventory = inventory

    def list_supplies(self, *, station: str, selected_date: date | None = None) -> SuppliesView:
        selected_date = selected_date or now_local().date()
        month_start, month_end = month_bounds(selected_date)

        def _day(kind: VolumeKind):
            return list(self._inventory.list_range(kind=kind, station=station, start=selected_date, end=selected_date))

        def _month(kind: VolumeKind):
            return list(self._inventory.list_range(kind=kind, station=station, start=month_start, end=month_end))

        return SuppliesView(
            station=station,
            selected_date=selected_date,
            month_start=month_start,
            month_end=month_end,
            supplies_today=_day(VolumeKind.SUPPLY),
            bins_today=_day(VolumeKind.BIN),
            supplies_monthly=_month(VolumeKind.SUPPLY),
            bins_monthly=_month(VolumeKind.BIN),
            max_supply_volume=MAX_SUPPLY_VOLUME,
            max_bin_volume=MAX_BIN_VOLUME,
        )

    def update_volume(self, *, station: str, kind: str, item_id: int, volume: object, now: datetime | None = None) -> bool:
        """Overwrite today's current volume for one supply item or bin.

        Raises ValidationError for an unknown kind or a volume that is not a
        non-negative number. No prior value is kept.
        """
        volume_kind = parse_kind(kind)
        new_volume = require_non_negative_number(volume, "volume")
        today = (now or now_local()).date()
        return self._inventory.update_volume(
            kind=volume_kind,
            station=station,
            item_id=item_id,
            work_date=today,
            volume=new_volume,
        )
