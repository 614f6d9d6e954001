"""Session cookie helpers and the route guard built on them."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, Dict, Optional

from flask import Response, current_app, g, request

from solosphere.errors import Forbidden, Unauthorized
from solosphere.services import token_service

TOKEN_COOKIE_NAME = "token"


def _cookie_options() -> Dict[str, Any]:
    """Cookie attributes, relaxed for cross-site use in production."""
    production = bool(current_app.config.get("PRODUCTION"))
    return {
        "httponly": True,
        "secure": production,
        "samesite": "None" if production else "Strict",
        "path": "/",
    }


def set_token_cookie(response: Response, token: str) -> Response:
    response.set_cookie(TOKEN_COOKIE_NAME, token, **_cookie_options())
    return response


def clear_token_cookie(response: Response) -> Response:
    response.set_cookie(TOKEN_COOKIE_NAME, "", max_age=0, expires=0, **_cookie_options())
    return response


def load_session() -> Dict[str, Any]:
    """Decode the session cookie on the current request.

    Raises Unauthorized when the cookie is missing or fails verification.
    """
    token = request.cookies.get(TOKEN_COOKIE_NAME)
    if not token:
        raise Unauthorized()

    try:
        return token_service.verify(token, current_app.config["ACCESS_TOKEN_SECRET"])
    except token_service.TokenError as exc:
        current_app.logger.debug(f"Rejected session token: {exc}")
        raise Unauthorized() from exc


def require_session(
    match_param: Optional[str] = None,
    claim: str = "email",
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Guard a view behind a verified session cookie.

    The decoded claims are stored on ``flask.g.user``. When ``match_param``
    is given, the view is only reached if the session's ``claim`` equals
    that URL parameter; otherwise the request is forbidden.
    """

    def decorator(view: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(view)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            g.user = load_session()
            if match_param is not None and g.user.get(claim) != kwargs.get(match_param):
                raise Forbidden()
            return view(*args, **kwargs)

        return wrapper

    return decorator
