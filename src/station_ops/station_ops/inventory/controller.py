from __future__ import annotations

from flask import Flask, current_app, render_template, request

from ..common.datetime_utils import now_local, parse_iso_date_or
from ..container import Container
from ..core.exceptions import ValidationError
from ..stations.context import current_station
from .classifier import fill_percent


def register(app: Flask, container: Container) -> None:
    @app.template_filter("fill_percent")
    def fill_percent_filter(volume, max_volume):
        return round(fill_percent(volume, max_volume))

    @app.route("/supplies", methods=["GET"], endpoint="supplies")
    def supplies():
        selected = parse_iso_date_or(request.args.get("date"), now_local().date())
        try:
            view = container.inventory_service.list_supplies(station=current_station(), selected_date=selected)
        except Exception:
            current_app.logger.exception("Error fetching supplies or bins")
            return "Error loading supplies and bins", 500

        return render_template(
            "supplies.html",
            view=view,
            today=view.selected_date.strftime("%Y-%m-%d"),
            active_tab="supplies",
        )

    @app.route("/supplies/update/<kind>/<int:item_id>", methods=["POST"], endpoint="supplies_update")
    def supplies_update(kind: str, item_id: int):
        try:
            container.inventory_service.update_volume(
                station=current_station(),
                kind=kind,
                item_id=item_id,
                volume=request.form.get("current_volume"),
            )
        except ValidationError as e:
            return str(e), 400
        except Exception:
            current_app.logger.exception("Error updating volume")
            return "Failed to update volume", 500
        return "Volume updated", 200
