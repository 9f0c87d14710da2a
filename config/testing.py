import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "station_ops_test"),
}

DEBUG = False
TESTING = True

PORT = 3000
LOG_LEVEL = "WARNING"

DEFAULT_STATION = "Vaishali"
STATIONS = ["Vaishali", "Anand Vihar"]

AUTO_INIT_DB = False
AUTO_SEED_DB = False
