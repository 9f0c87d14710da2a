"""Process entry point: `python app.py` or `flask --app app run`.

`create_app` exits with status 1 when the database is unreachable.
"""

from __future__ import annotations

from src.station_ops.station_ops.main import create_app

app = create_app()


def main() -> None:
    port = int(app.config.get("PORT", 3000))
    app.run(host="0.0.0.0", port=port, debug=app.config.get("DEBUG", False))


if __name__ == "__main__":
    main()
