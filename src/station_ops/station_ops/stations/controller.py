from __future__ import annotations

from flask import Flask, current_app, redirect, request, url_for

from ..container import Container
from .context import current_station, select_station


def register(app: Flask, container: Container) -> None:
    @app.context_processor
    def inject_station():
        return {
            "station": current_station(),
            "stations": current_app.config.get("STATIONS", []),
        }

    @app.route("/", endpoint="home")
    def home():
        return redirect(url_for("dashboard"))

    @app.route("/set-station", methods=["POST"], endpoint="set_station")
    def set_station():
        if select_station(request.form.get("station", "")):
            current_app.logger.info("Station updated to: %s", current_station())
        return redirect(request.referrer or "/")
