"""Shared helpers for request handling and document conversion."""
