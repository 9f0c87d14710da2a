import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module, development unless told otherwise
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def parse_stations(raw: str) -> list[str]:
    """Split a comma-separated STATIONS value, dropping blanks."""
    return [s.strip() for s in raw.split(",") if s.strip()]
