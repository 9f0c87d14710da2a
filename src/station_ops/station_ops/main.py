from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path
from typing import Any, Mapping, Optional

import mysql.connector
from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_STATION
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .dashboard.controller import register as register_dashboard
from .employees.controller import register as register_employees
from .inventory.controller import register as register_inventory
from .messages.controller import register as register_messages
from .stations.controller import register as register_stations

REPO_ROOT = Path(__file__).resolve().parents[3]

_SETTING_NAMES = ("SECRET_KEY", "DEBUG", "TESTING", "PORT", "LOG_LEVEL", "DEFAULT_STATION", "STATIONS")


def _load_settings(overrides: Optional[Mapping[str, Any]]) -> tuple[str, dict]:
    settings_module = get_settings_module()
    module = importlib.import_module(settings_module)
    settings = {name: getattr(module, name) for name in dir(module) if name.isupper()}
    settings.update(overrides or {})
    return settings_module, settings


def create_app(settings_overrides: Optional[Mapping[str, Any]] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder=str(REPO_ROOT / "templates"))

    settings_module, settings = _load_settings(settings_overrides)
    for name in _SETTING_NAMES:
        if name in settings:
            app.config[name] = settings[name]
    app.secret_key = settings["SECRET_KEY"]
    app.config.setdefault("DEFAULT_STATION", DEFAULT_STATION)
    app.config.setdefault("STATIONS", [app.config["DEFAULT_STATION"]])

    log_level = str(settings.get("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=log_level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    app.logger.setLevel(log_level)

    if container is None:
        db_config = settings["DB_CONFIG"]
        app.logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if settings.get("AUTO_INIT_DB"):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            app.logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if settings.get("AUTO_SEED_DB"):
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            app.logger.info("demo seed ready")

        container = build_container(db_config=db_config)
        try:
            container.conn.ping()
        except mysql.connector.Error as e:
            app.logger.critical("Failed to connect to %s: %s", container.conn.target, e)
            sys.exit(1)
        app.logger.info("Connected to %s", container.conn.target)

    app.extensions["station_ops"] = container

    register_stations(app, container)
    register_employees(app, container)
    register_dashboard(app, container)
    register_inventory(app, container)
    register_messages(app, container)

    return app
