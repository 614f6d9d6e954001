"""Service for managing job postings in MongoDB."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pymongo.collection import Collection
from pymongo.database import Database

from solosphere.database import JOBS_COLLECTION
from solosphere.utils.documents import (
    delete_ack,
    insert_ack,
    serialize_document,
    serialize_documents,
    to_object_id,
    update_ack,
)


def _jobs(db: Database) -> Collection:
    return db[JOBS_COLLECTION]


def list_jobs(db: Database) -> List[Dict[str, Any]]:
    """Return every job posting in natural order."""
    return serialize_documents(_jobs(db).find())


def count_jobs(db: Database) -> int:
    """Return the total number of job postings."""
    return _jobs(db).count_documents({})


def list_jobs_page(
    db: Database,
    page: int = 1,
    size: int = 0,
    category: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    Return one page of job postings, optionally filtered by category.

    Args:
        db: The database handle
        page: 1-based page number
        size: Page size; 0 means no limit
        category: Exact category to match, if given

    Returns:
        At most ``size`` jobs, starting at ``(page - 1) * size``
    """
    query: Dict[str, Any] = {}
    if category:
        query["category"] = category

    cursor = _jobs(db).find(query).skip((page - 1) * size).limit(size)
    return serialize_documents(cursor)


def get_job(db: Database, job_id: str) -> Optional[Dict[str, Any]]:
    """Return the job with the given id, or None."""
    return serialize_document(_jobs(db).find_one({"_id": to_object_id(job_id)}))


def create_job(db: Database, job: Dict[str, Any]) -> Dict[str, Any]:
    """Insert a new job posting and return the write acknowledgment."""
    document = dict(job)
    # Identifiers are always assigned by the store
    document.pop("_id", None)
    return insert_ack(_jobs(db).insert_one(document))


def replace_job(db: Database, job_id: str, job: Dict[str, Any]) -> Dict[str, Any]:
    """
    Set every provided field on a job, inserting it if the id is unknown.

    Fields not present in ``job`` are left untouched on an existing document.
    """
    fields = {key: value for key, value in job.items() if key != "_id"}
    object_id = to_object_id(job_id)

    if not fields:
        # An empty $set is rejected by the server
        result = _jobs(db).update_one(
            {"_id": object_id},
            {"$setOnInsert": {"_id": object_id}},
            upsert=True,
        )
    else:
        result = _jobs(db).update_one(
            {"_id": object_id},
            {"$set": fields},
            upsert=True,
        )
    return update_ack(result)


def delete_job(db: Database, job_id: str) -> Dict[str, Any]:
    """Delete a job posting by id."""
    return delete_ack(_jobs(db).delete_one({"_id": to_object_id(job_id)}))


def list_jobs_by_buyer(db: Database, email: str) -> List[Dict[str, Any]]:
    """Return the jobs posted by the buyer with the given email."""
    return serialize_documents(_jobs(db).find({"buyer.email": email}))
