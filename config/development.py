import os

from config import parse_stations

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "station_ops"),
}

DEBUG = True

PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Station used until the operator picks another one
DEFAULT_STATION = os.getenv("DEFAULT_STATION", "Vaishali")
STATIONS = parse_stations(os.getenv("STATIONS", DEFAULT_STATION))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo rows for today on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
