"""Service layer modules for the SoloSphere API."""

from . import bid_service, job_service, token_service

__all__ = [
    "bid_service",
    "job_service",
    "token_service",
]
