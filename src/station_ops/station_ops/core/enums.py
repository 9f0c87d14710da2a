from __future__ import annotations

from enum import Enum


class AttendanceMark(str, Enum):
    """Which clock column a mark-attendance call writes."""

    IN = "in"
    OUT = "out"


class CheckInStatus(str, Enum):
    """Bucket an employee's check-in falls into for the cumulative tallies."""

    ON_TIME = "ontime"
    LATE = "late"
    ABSENT = "absent"


class VolumeKind(str, Enum):
    """Closed set of volume-tracked item kinds."""

    SUPPLY = "supply"
    BIN = "bin"


class AlertLevel(str, Enum):
    RED = "red"
    YELLOW = "yellow"
