"""Tests for job posting persistence in MongoDB."""

from __future__ import annotations

import pytest
from bson import ObjectId

from solosphere.errors import BadRequest
from solosphere.services import job_service


def _job(title: str, category: str = "Web Development", email: str = "buyer@example.com"):
    return {
        "job_title": title,
        "category": category,
        "minimum_price": 100,
        "maximum_price": 500,
        "deadline": "2026-12-31",
        "description": f"{title} description",
        "buyer": {"email": email, "name": "Buyer", "photo": "https://example.com/b.png"},
    }


def test_create_then_get_round_trip(mongo_db):
    job = _job("Landing page")

    ack = job_service.create_job(mongo_db, job)

    assert ack["acknowledged"] is True
    stored = job_service.get_job(mongo_db, ack["insertedId"])
    assert stored["_id"] == ack["insertedId"]
    for key, value in job.items():
        assert stored[key] == value


def test_create_ignores_client_supplied_id(mongo_db):
    supplied = str(ObjectId())

    ack = job_service.create_job(mongo_db, {**_job("Logo"), "_id": supplied})

    assert ack["insertedId"] != supplied


def test_get_unknown_job_returns_none(mongo_db):
    assert job_service.get_job(mongo_db, str(ObjectId())) is None


def test_malformed_id_is_rejected(mongo_db):
    with pytest.raises(BadRequest):
        job_service.get_job(mongo_db, "not-an-object-id")


def test_list_and_count(mongo_db):
    for title in ("A", "B", "C"):
        job_service.create_job(mongo_db, _job(title))

    jobs = job_service.list_jobs(mongo_db)

    assert [job["job_title"] for job in jobs] == ["A", "B", "C"]
    assert job_service.count_jobs(mongo_db) == 3


def test_page_is_a_slice_of_natural_order(mongo_db):
    for index in range(7):
        job_service.create_job(mongo_db, _job(f"job-{index}"))

    page = job_service.list_jobs_page(mongo_db, page=2, size=3)
    last = job_service.list_jobs_page(mongo_db, page=3, size=3)

    assert [job["job_title"] for job in page] == ["job-3", "job-4", "job-5"]
    assert [job["job_title"] for job in last] == ["job-6"]


def test_page_filters_by_exact_category(mongo_db):
    job_service.create_job(mongo_db, _job("web-1", category="Web Development"))
    job_service.create_job(mongo_db, _job("design-1", category="Graphics Design"))
    job_service.create_job(mongo_db, _job("web-2", category="Web Development"))
    job_service.create_job(mongo_db, _job("web-3", category="web development"))

    jobs = job_service.list_jobs_page(mongo_db, page=1, size=10, category="Web Development")

    assert [job["job_title"] for job in jobs] == ["web-1", "web-2"]


def test_page_without_size_returns_everything(mongo_db):
    for index in range(4):
        job_service.create_job(mongo_db, _job(f"job-{index}"))

    assert len(job_service.list_jobs_page(mongo_db)) == 4


def test_replace_existing_sets_listed_fields_only(mongo_db):
    ack = job_service.create_job(mongo_db, _job("Original"))

    result = job_service.replace_job(
        mongo_db, ack["insertedId"], {"job_title": "Updated", "maximum_price": 900}
    )

    assert result["matchedCount"] == 1
    assert result["modifiedCount"] == 1
    assert result["upsertedCount"] == 0
    stored = job_service.get_job(mongo_db, ack["insertedId"])
    assert stored["job_title"] == "Updated"
    assert stored["maximum_price"] == 900
    assert stored["category"] == "Web Development"


def test_replace_unknown_id_upserts_at_that_id(mongo_db):
    job_id = str(ObjectId())

    result = job_service.replace_job(mongo_db, job_id, _job("Fresh"))

    assert result["matchedCount"] == 0
    assert result["upsertedCount"] == 1
    assert result["upsertedId"] == job_id
    assert job_service.get_job(mongo_db, job_id)["job_title"] == "Fresh"


def test_replace_never_changes_the_id(mongo_db):
    ack = job_service.create_job(mongo_db, _job("Keep id"))

    job_service.replace_job(mongo_db, ack["insertedId"], {"_id": str(ObjectId()), "job_title": "Still"})

    assert job_service.get_job(mongo_db, ack["insertedId"])["job_title"] == "Still"
    assert job_service.count_jobs(mongo_db) == 1


def test_delete(mongo_db):
    ack = job_service.create_job(mongo_db, _job("Doomed"))

    assert job_service.delete_job(mongo_db, ack["insertedId"])["deletedCount"] == 1
    assert job_service.delete_job(mongo_db, ack["insertedId"])["deletedCount"] == 0
    assert job_service.get_job(mongo_db, ack["insertedId"]) is None


def test_list_by_buyer_matches_embedded_email(mongo_db):
    job_service.create_job(mongo_db, _job("mine-1", email="me@example.com"))
    job_service.create_job(mongo_db, _job("theirs", email="other@example.com"))
    job_service.create_job(mongo_db, _job("mine-2", email="me@example.com"))

    jobs = job_service.list_jobs_by_buyer(mongo_db, "me@example.com")

    assert [job["job_title"] for job in jobs] == ["mine-1", "mine-2"]
