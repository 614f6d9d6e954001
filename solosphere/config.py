"""Environment-driven configuration for the Flask application."""

from __future__ import annotations

import os
from typing import Any, Dict

DEFAULT_CLIENT_ORIGIN = "http://localhost:5173"
DEFAULT_DATABASE_NAME = "soloSphereDB"
DEFAULT_CLUSTER_HOST = "cluster0.mongodb.net"


def load_config() -> Dict[str, Any]:
    """Read the recognised environment variables into a Flask config mapping."""
    app_env = os.getenv("APP_ENV", "development").strip().lower()

    return {
        "PORT": int(os.getenv("PORT", "5000")),
        "DB_USER": os.getenv("DB_USER"),
        "DB_PASS": os.getenv("DB_PASS"),
        "DB_CLUSTER": os.getenv("DB_CLUSTER", DEFAULT_CLUSTER_HOST),
        "MONGODB_URI": os.getenv("MONGODB_URI"),
        "MONGODB_DATABASE": os.getenv("MONGODB_DATABASE", DEFAULT_DATABASE_NAME),
        "ACCESS_TOKEN_SECRET": os.getenv("ACCESS_TOKEN_SECRET"),
        "APP_ENV": app_env,
        "PRODUCTION": app_env == "production",
        "CLIENT_ORIGIN": os.getenv("CLIENT_ORIGIN", DEFAULT_CLIENT_ORIGIN),
    }
