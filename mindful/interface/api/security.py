"""Request authentication helpers.

The upstream identity provider issues the token; the API accepts it from the
auth cookie or from an ``Authorization: Bearer`` header.
"""

from fastapi import Request

from mindful.config import Settings

_BEARER_PREFIX = "bearer "


def read_auth_token(request: Request) -> str | None:
    """Extract the JWT from the request, cookie first.

    Args:
        request: Incoming request

    Returns:
        The raw token, or None when the request carries none
    """
    cookie_name = _cookie_name(request)
    token = request.cookies.get(cookie_name)
    if token:
        return token

    authorization = request.headers.get("authorization")
    if authorization and authorization.lower().startswith(_BEARER_PREFIX):
        return authorization[len(_BEARER_PREFIX) :].strip() or None
    return None


def _cookie_name(request: Request) -> str:
    settings: Settings | None = getattr(request.app.state, "settings", None)
    if settings is None:
        return "auth_token"
    return settings.auth.cookie_name
