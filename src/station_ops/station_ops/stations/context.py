from __future__ import annotations

from flask import current_app, session

from ..core.constants import DEFAULT_STATION

SESSION_KEY = "station"


def current_station() -> str:
    """Station the requesting operator is working on.

    Kept in the signed session cookie, so each browser has its own selection.
    """
    return session.get(SESSION_KEY) or current_app.config.get("DEFAULT_STATION", DEFAULT_STATION)


def select_station(name: str) -> bool:
    name = (name or "").strip()
    if not name:
        return False
    session[SESSION_KEY] = name
    return True
