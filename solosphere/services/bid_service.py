"""Service for managing bids on job postings in MongoDB."""

from __future__ import annotations

from typing import Any, Dict, List

from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from solosphere.database import BIDS_COLLECTION
from solosphere.errors import DuplicateBid
from solosphere.utils.documents import insert_ack, serialize_documents, to_object_id, update_ack


def _bids(db: Database) -> Collection:
    return db[BIDS_COLLECTION]


def has_bid(db: Database, email: Any, job_id: Any) -> bool:
    """Return True if the bidder already has a bid on the job."""
    return _bids(db).find_one({"email": email, "jobId": job_id}) is not None


def create_bid(db: Database, bid: Dict[str, Any]) -> Dict[str, Any]:
    """
    Insert a bid unless the bidder has already bid on the same job.

    Args:
        db: The database handle
        bid: Bid payload carrying at least ``email``, ``jobId`` and ``buyer_email``

    Returns:
        The write acknowledgment

    Raises:
        DuplicateBid: A bid for the same (email, jobId) pair exists
    """
    document = dict(bid)
    document.pop("_id", None)

    if has_bid(db, document.get("email"), document.get("jobId")):
        raise DuplicateBid()

    try:
        result = _bids(db).insert_one(document)
    except DuplicateKeyError as exc:
        # Lost a race against a concurrent submission for the same pair
        raise DuplicateBid() from exc

    return insert_ack(result)


def list_bids_by_bidder(db: Database, email: str) -> List[Dict[str, Any]]:
    """Return the bids placed by the given bidder."""
    return serialize_documents(_bids(db).find({"email": email}))


def list_bid_requests(db: Database, buyer_email: str) -> List[Dict[str, Any]]:
    """Return the bids received on jobs owned by the given buyer."""
    return serialize_documents(_bids(db).find({"buyer_email": buyer_email}))


def update_bid_status(db: Database, bid_id: str, status: Any) -> Dict[str, Any]:
    """Set the status field of a bid."""
    result = _bids(db).update_one(
        {"_id": to_object_id(bid_id)},
        {"$set": {"status": status}},
    )
    return update_ack(result)
