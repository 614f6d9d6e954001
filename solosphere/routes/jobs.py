"""Job posting routes."""

from __future__ import annotations

from typing import Optional

from flask import Blueprint, jsonify, request

from solosphere.database import get_database
from solosphere.errors import BadRequest
from solosphere.services import job_service
from solosphere.utils.auth import require_session
from solosphere.utils.documents import require_object

bp = Blueprint("jobs", __name__)

PAGINATION_ERROR = "page and size must be positive integers"


def _positive_int(raw: Optional[str], default: int) -> int:
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise BadRequest(PAGINATION_ERROR) from exc
    if value < 1:
        raise BadRequest(PAGINATION_ERROR)
    return value


@bp.get("/jobs")
def list_jobs():
    return jsonify(job_service.list_jobs(get_database()))


@bp.get("/job-count")
def count_jobs():
    """Total number of jobs, used by clients to size pagination."""
    return jsonify(count=job_service.count_jobs(get_database()))


@bp.get("/all-jobs")
def list_jobs_page():
    """Return one page of jobs, optionally filtered by exact category."""
    page = _positive_int(request.args.get("page"), default=1)
    size = _positive_int(request.args.get("size"), default=0)
    category = request.args.get("filter") or None

    jobs = job_service.list_jobs_page(get_database(), page=page, size=size, category=category)
    return jsonify(jobs)


@bp.get("/job/<job_id>")
def get_job(job_id: str):
    return jsonify(job_service.get_job(get_database(), job_id))


@bp.put("/job/<job_id>")
def replace_job(job_id: str):
    """Set the posted fields on a job, creating it if the id is unknown."""
    job = require_object(request.get_json(silent=True))
    return jsonify(job_service.replace_job(get_database(), job_id, job))


@bp.get("/postedJob/<email>")
@require_session(match_param="email")
def list_posted_jobs(email: str):
    """Jobs posted by the signed-in buyer."""
    return jsonify(job_service.list_jobs_by_buyer(get_database(), email))


@bp.delete("/jobs/<job_id>")
def delete_job(job_id: str):
    return jsonify(job_service.delete_job(get_database(), job_id))


@bp.post("/job")
def create_job():
    job = require_object(request.get_json(silent=True))
    return jsonify(job_service.create_job(get_database(), job))
