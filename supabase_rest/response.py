"""Turning REST responses into records or errors."""

from __future__ import annotations

from typing import Any

import httpx

_STATUS_MESSAGES = {
    401: "authorization failed: check the API key and the row-level security policies",
    403: "API key missing or rejected",
    400: "invalid query",
}
_UNKNOWN_MESSAGE = "unknown error"


class SupabaseError(Exception):
    """A request to the REST endpoint failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _total_from_content_range(content_range: str | None) -> int | None:
    if content_range is None:
        return None
    parts = content_range.split("/")
    if len(parts) < 2:
        return None
    try:
        return int(parts[1])
    except ValueError:
        return None


def handle_response(response: httpx.Response) -> list[Any]:
    """Return the records of a successful response, or raise ``SupabaseError``.

    When the response carries a ``content-range`` total, a trailing
    ``{"total_records_count": n}`` record is appended.
    """
    if not response.is_success:
        message = _STATUS_MESSAGES.get(response.status_code, _UNKNOWN_MESSAGE)
        raise SupabaseError(message, response.status_code)

    total = _total_from_content_range(response.headers.get("content-range"))

    try:
        records = response.json()
    except ValueError as error:
        raise SupabaseError(f"invalid JSON in response: {error}", response.status_code) from error
    if not isinstance(records, list):
        raise SupabaseError("expected a JSON array of records", response.status_code)

    if total is not None:
        records.append({"total_records_count": total})
    return records