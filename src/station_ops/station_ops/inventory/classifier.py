from __future__ import annotations

from typing import Iterable, Optional

from ..core.constants import (
    BIN_RED_ABOVE,
    BIN_YELLOW_FROM,
    MAX_BIN_VOLUME,
    MAX_SUPPLY_VOLUME,
    SUPPLY_RED_BELOW,
    SUPPLY_YELLOW_BELOW,
)
from ..core.enums import AlertLevel, VolumeKind
from .model import InventoryItem, Volume

MAX_VOLUME = {
    VolumeKind.SUPPLY: MAX_SUPPLY_VOLUME,
    VolumeKind.BIN: MAX_BIN_VOLUME,
}


def fill_percent(volume: Volume, max_volume: int) -> float:
    return float(volume) / max_volume * 100


def classify_supply(volume: Volume) -> Optional[AlertLevel]:
    """Supplies alert when running low: red < 25%, yellow in [25%, 50%)."""
    percent = fill_percent(volume, MAX_SUPPLY_VOLUME)
    if percent < SUPPLY_RED_BELOW:
        return AlertLevel.RED
    if percent < SUPPLY_YELLOW_BELOW:
        return AlertLevel.YELLOW
    return None


def classify_bin(volume: Volume) -> Optional[AlertLevel]:
    """Bins alert when filling up: red > 75%, yellow in [50%, 75%]."""
    percent = fill_percent(volume, MAX_BIN_VOLUME)
    if percent > BIN_RED_ABOVE:
        return AlertLevel.RED
    if percent >= BIN_YELLOW_FROM:
        return AlertLevel.YELLOW
    return None


def classify(item: InventoryItem) -> Optional[AlertLevel]:
    if item.kind is VolumeKind.SUPPLY:
        return classify_supply(item.current_volume)
    return classify_bin(item.current_volume)


def split_alerts(items: Iterable[InventoryItem]) -> tuple[list[InventoryItem], list[InventoryItem]]:
    """Return (red, yellow) items, keeping input order; unclassified items are dropped."""
    red: list[InventoryItem] = []
    yellow: list[InventoryItem] = []
    for item in items:
        level = classify(item)
        if level is AlertLevel.RED:
            red.append(item)
        elif level is AlertLevel.YELLOW:
            yellow.append(item)
    return red, yellow
