"""Standard HTTP headers sent with every PostgREST request."""

from __future__ import annotations

from enum import Enum

_CLIENT_NAME = "supabase-rest"
_CLIENT_VERSION = "0.4.15"


class HeaderType(str, Enum):
    """Header names used when talking to the REST endpoint."""

    PROJECT_ACCESS = "apikey"
    AUTHORIZATION = "Authorization"
    CONTENT_TYPE = "Content-Type"
    PREFER = "prefer"
    CLIENT_INFO = "x_client_info"
    RANGE = "Range"
    ACCEPT_PROFILE = "Accept-Profile"


def client_info() -> str:
    """Return the ``name/version`` string identifying this client."""
    return f"{_CLIENT_NAME}/{_CLIENT_VERSION}"


def default_headers(api_key: str, auth_token: str) -> dict[str, str]:
    """Return the headers every request carries: client info, JSON content type and credentials."""
    return {
        HeaderType.CLIENT_INFO.value: client_info(),
        HeaderType.CONTENT_TYPE.value: "application/json",
        HeaderType.PROJECT_ACCESS.value: api_key,
        HeaderType.AUTHORIZATION.value: f"Bearer {auth_token}",
    }