"""Bid routes for bidders and job owners."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from solosphere.database import get_database
from solosphere.errors import DuplicateBid
from solosphere.services import bid_service
from solosphere.utils.documents import require_object

bp = Blueprint("bids", __name__)


@bp.post("/bids")
def create_bid():
    """Place a bid, refusing a second bid by the same bidder on the same job."""
    bid = require_object(request.get_json(silent=True))
    try:
        result = bid_service.create_bid(get_database(), bid)
    except DuplicateBid:
        current_app.logger.info(
            f"Rejected duplicate bid from {bid.get('email')} on job {bid.get('jobId')}"
        )
        raise
    return jsonify(result)


@bp.get("/my-bids/<email>")
def list_my_bids(email: str):
    return jsonify(bid_service.list_bids_by_bidder(get_database(), email))


@bp.get("/bid-request/<email>")
def list_bid_requests(email: str):
    """Bids received on the jobs this buyer posted."""
    return jsonify(bid_service.list_bid_requests(get_database(), email))


@bp.patch("/bid-status/<bid_id>")
def update_bid_status(bid_id: str):
    payload = require_object(request.get_json(silent=True))
    return jsonify(bid_service.update_bid_status(get_database(), bid_id, payload.get("status")))
