"""Blueprint registration helper."""

from __future__ import annotations

from flask import Flask

from .auth import bp as auth_bp
from .bids import bp as bids_bp
from .jobs import bp as jobs_bp

LIVENESS_MESSAGE = "Solo Sphere server is running"


def register_routes(app: Flask) -> None:
    """Register all application blueprints on the provided Flask app."""
    app.register_blueprint(auth_bp)
    app.register_blueprint(jobs_bp)
    app.register_blueprint(bids_bp)

    @app.get("/")
    def index():
        return LIVENESS_MESSAGE, 200, {"Content-Type": "text/plain; charset=utf-8"}
