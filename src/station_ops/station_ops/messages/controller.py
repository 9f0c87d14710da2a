from __future__ import annotations

from flask import Flask, render_template

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/messages", endpoint="messages")
    def messages():
        return render_template("messages.html", active_tab="messages")
