from __future__ import annotations

from flask import Flask, current_app, render_template

from ..container import Container
from ..stations.context import current_station


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", endpoint="dashboard")
    def dashboard():
        try:
            view = container.dashboard_service.build(station=current_station())
        except Exception:
            current_app.logger.exception("Error fetching dashboard data")
            return "Error fetching dashboard data", 500

        return render_template(
            "dashboard.html",
            view=view,
            today=view.today.strftime("%Y-%m-%d"),
            active_tab="dashboard",
        )
