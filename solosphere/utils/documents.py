"""Helpers for converting between MongoDB documents and JSON payloads."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from solosphere.errors import BadRequest


def to_object_id(value: str) -> ObjectId:
    """Parse a path identifier, rejecting anything that is not an ObjectId."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as exc:
        raise BadRequest("invalid id") from exc


def serialize_document(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Convert the ObjectId in a document to a string for JSON serialization."""
    if document is None:
        return None
    if isinstance(document.get("_id"), ObjectId):
        document["_id"] = str(document["_id"])
    return document


def serialize_documents(documents: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [serialize_document(document) for document in documents]


def _stringify(value: Any) -> Any:
    return str(value) if isinstance(value, ObjectId) else value


def insert_ack(result: InsertOneResult) -> Dict[str, Any]:
    return {
        "acknowledged": result.acknowledged,
        "insertedId": _stringify(result.inserted_id),
    }


def update_ack(result: UpdateResult) -> Dict[str, Any]:
    upserted_id = result.upserted_id
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedCount": 0 if upserted_id is None else 1,
        "upsertedId": _stringify(upserted_id),
    }


def delete_ack(result: DeleteResult) -> Dict[str, Any]:
    return {
        "acknowledged": result.acknowledged,
        "deletedCount": result.deleted_count,
    }


def require_object(payload: Any) -> Dict[str, Any]:
    """Return the payload if it is a JSON object, otherwise reject the request."""
    if not isinstance(payload, dict):
        raise BadRequest("request body must be a JSON object")
    return payload
