"""Update and upsert operations against REST tables."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import httpx

from supabase_rest.headers import HeaderType, client_info
from supabase_rest.response import SupabaseError


def _encode(body: Any) -> str:
    return json.dumps(body, separators=(",", ":"))


def _status_text(response: httpx.Response) -> str:
    reason = response.reason_phrase
    return f"{response.status_code} {reason}" if reason else str(response.status_code)


class WriteMixin:
    """Row modification methods.

    The class using this mixin provides ``api_key``, ``schema``, ``http_client``
    (an ``httpx.AsyncClient``) and ``endpoint(table_name)``.
    """

    api_key: str
    schema: str
    http_client: httpx.AsyncClient

    def endpoint(self, table_name: str) -> str:  # pragma: no cover - provided by the client
        raise NotImplementedError

    def _write_headers(self) -> list[tuple[str, str]]:
        return [
            (HeaderType.API_KEY.value, self.api_key),
            (HeaderType.AUTHORIZATION.value, f"Bearer {self.api_key}"),
            (HeaderType.CONTENT_TYPE.value, "application/json"),
            (HeaderType.CLIENT_INFO.value, client_info()),
            (HeaderType.ACCEPT_PROFILE.value, self.schema),
        ]

    async def _send(self, method: str, url: str, headers: list[tuple[str, str]], body: Any) -> None:
        try:
            response = await self.http_client.request(
                method, url, headers=headers, content=_encode(body)
            )
        except httpx.HTTPError as error:
            raise SupabaseError(str(error)) from error
        if not response.is_success:
            raise SupabaseError(_status_text(response), response.status_code)

    async def update(self, table_name: str, id: str, body: Any) -> str:
        """Update the row whose ``id`` matches; return the id."""
        return await self.update_with_column_name(table_name, "id", id, body)

    async def update_with_column_name(
        self, table_name: str, column_name: str, id: str, body: Any
    ) -> str:
        """Update rows where ``column_name`` equals ``id``; return ``id``."""
        url = f"{self.endpoint(table_name)}?{column_name}=eq.{id}"
        await self._send("PATCH", url, self._write_headers(), body)
        return id

    async def upsert(self, table_name: str, id: str, body: Any) -> str:
        """Insert the row with the given id, or merge into it if it exists; return the id."""
        if body is None:
            row: dict[str, Any] = {}
        elif isinstance(body, Mapping):
            row = dict(body)
        else:
            raise TypeError("upsert body must be a JSON object")
        row["id"] = id
        await self.upsert_without_defined_key(table_name, row)
        return id

    async def upsert_without_defined_key(self, table_name: str, body: Any) -> None:
        """Insert the row, merging into an existing one on conflict."""
        headers = self._write_headers()
        headers.append((HeaderType.PREFER.value, "resolution=merge-duplicates"))
        headers.append((HeaderType.PREFER.value, "return=representation"))
        await self._send("POST", self.endpoint(table_name), headers, body)