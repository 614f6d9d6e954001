"""Session issuance and logout routes."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, current_app, jsonify, request

from solosphere.errors import BadRequest
from solosphere.services import token_service
from solosphere.utils.auth import clear_token_cookie, set_token_cookie

bp = Blueprint("auth", __name__)


@bp.post("/jwt")
def issue_token():
    """Sign the posted identity into a session cookie."""
    user: Any = request.get_json(silent=True)
    if not isinstance(user, dict):
        raise BadRequest("request body must be a JSON object")

    token = token_service.issue(user, current_app.config["ACCESS_TOKEN_SECRET"])

    response = jsonify(success=True)
    return set_token_cookie(response, token)


@bp.get("/logout")
def logout():
    """Clear the session cookie."""
    response = jsonify(success=True)
    return clear_token_cookie(response)
