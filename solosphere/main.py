"""Flask application setup and blueprint wiring."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS
from pymongo.database import Database
from pymongo.errors import PyMongoError

from solosphere.config import load_config
from solosphere.database import create_indexes, init_database
from solosphere.errors import register_error_handlers
from solosphere.routes import register_routes


def create_app(
    config: Optional[Mapping[str, Any]] = None,
    database: Optional[Database] = None,
) -> Flask:
    """Configure and return the Flask application instance.

    ``config`` overrides values read from the environment and ``database``
    replaces the MongoDB handle that would otherwise be created from them.
    """
    app = Flask(__name__)
    app.config.update(load_config())
    if config:
        app.config.update(config)

    if not app.config.get("ACCESS_TOKEN_SECRET"):
        raise RuntimeError("ACCESS_TOKEN_SECRET must be set.")

    CORS(app, origins=[app.config["CLIENT_ORIGIN"]], supports_credentials=True)

    register_error_handlers(app)
    register_routes(app)

    db = init_database(app, database)
    try:
        create_indexes(db)
        app.logger.info("MongoDB indexes created successfully")
    except PyMongoError as e:
        app.logger.warning(f"Failed to create MongoDB indexes: {e}")

    return app
