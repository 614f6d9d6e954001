"""MongoDB connection management and index setup."""

from __future__ import annotations

from typing import Any, Mapping, Optional
from urllib.parse import quote_plus

from flask import Flask, current_app
from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

EXTENSION_KEY = "mongo_db"

JOBS_COLLECTION = "jobs"
BIDS_COLLECTION = "bids"


def build_mongo_uri(config: Mapping[str, Any]) -> str:
    """Return the connection string, preferring an explicit MONGODB_URI."""
    if config.get("MONGODB_URI"):
        return config["MONGODB_URI"]

    user = config.get("DB_USER")
    password = config.get("DB_PASS")
    if not user or not password:
        raise RuntimeError("DB_USER and DB_PASS (or MONGODB_URI) must be set.")

    return (
        f"mongodb+srv://{quote_plus(user)}:{quote_plus(password)}@{config['DB_CLUSTER']}/"
        "?retryWrites=true&w=majority&appName=Cluster0"
    )


def create_mongo_client(uri: str) -> MongoClient:
    """Create a client pinned to the Stable API v1."""
    return MongoClient(
        uri,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
    )


def init_database(app: Flask, database: Optional[Database] = None) -> Database:
    """Attach a database handle to the app, creating a client if none was injected."""
    if database is None:
        client = create_mongo_client(build_mongo_uri(app.config))
        database = client[app.config["MONGODB_DATABASE"]]

    app.extensions[EXTENSION_KEY] = database
    return database


def get_database() -> Database:
    """Return the database handle owned by the current application."""
    return current_app.extensions[EXTENSION_KEY]


def ping(database: Database) -> bool:
    """Round-trip a ping command to confirm the deployment is reachable."""
    database.client.admin.command("ping")
    return True


def create_indexes(database: Database) -> None:
    """Create the indexes the job and bid queries rely on."""
    bids = database[BIDS_COLLECTION]
    jobs = database[JOBS_COLLECTION]

    # One bid per bidder per job
    bids.create_index([("email", ASCENDING), ("jobId", ASCENDING)], unique=True)
    bids.create_index("buyer_email")

    jobs.create_index("category")
    jobs.create_index("buyer.email")


def close_mongo_connection(app: Flask) -> None:
    """Close the client behind the app's database handle."""
    database = app.extensions.pop(EXTENSION_KEY, None)
    if database is not None:
        try:
            database.client.close()
        except PyMongoError as exc:
            app.logger.warning(f"Failed to close MongoDB client: {exc}")
