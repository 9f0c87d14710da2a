from __future__ import annotations

from flask import Flask, current_app, jsonify, render_template, request

from ..common.datetime_utils import format_clock, now_local, parse_iso_date_or
from ..container import Container
from ..stations.context import current_station


def register(app: Flask, container: Container) -> None:
    @app.template_filter("clock")
    def clock_filter(value):
        return format_clock(value)

    @app.route("/employees", methods=["GET"], endpoint="employees")
    def employees():
        today = now_local().date()
        selected = parse_iso_date_or(request.args.get("date"), today)
        try:
            view = container.employee_service.list_employees(station=current_station(), selected_date=selected)
        except Exception:
            current_app.logger.exception("Error fetching employees data")
            return "Error fetching employees data", 500

        return render_template(
            "employees.html",
            view=view,
            selected_date=view.selected_date.strftime("%Y-%m-%d"),
            today=view.today.strftime("%Y-%m-%d"),
            active_tab="employees",
        )

    @app.route("/mark-attendance/<employee_id>/<mark>", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance(employee_id: str, mark: str):
        if not employee_id.isdecimal():
            current_app.logger.warning("Rejected attendance mark for non-numeric id %r", employee_id)
            return jsonify({"success": False})
        try:
            container.employee_service.mark_attendance(
                station=current_station(),
                employee_id=int(employee_id),
                mark=mark,
            )
        except Exception:
            current_app.logger.exception("Error marking attendance for %s (%s)", employee_id, mark)
            return jsonify({"success": False})
        return jsonify({"success": True})
