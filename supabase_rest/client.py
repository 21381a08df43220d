"""Client for reading from and writing to the REST tables of a project."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import httpx

from supabase_rest.builder import QueryBuilder
from supabase_rest.headers import HeaderType, default_headers
from supabase_rest.query import Query
from supabase_rest.response import SupabaseError, handle_response
from supabase_rest.writes import WriteMixin

_COUNT_SUFFIX = "?count=exact"


class SupabaseClient(WriteMixin):
    """Connection settings plus the HTTP client used for every request."""

    def __init__(
        self,
        url: str,
        api_key: str,
        schema: str = "public",
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.url = url.rstrip("/")
        self.api_key = api_key
        self.schema = schema
        self.http_client = http_client if http_client is not None else httpx.AsyncClient()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.http_client.aclose()

    async def __aenter__(self) -> SupabaseClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def endpoint(self, table_name: str) -> str:
        """Return the REST URL of ``table_name``."""
        return f"{self.url}/rest/v1/{table_name}"

    def select(self, table_name: str) -> QueryBuilder:
        """Start a query against ``table_name``."""
        return QueryBuilder(self, table_name)

    def from_(self, table_name: str) -> QueryBuilder:
        """Start a query against ``table_name``; same as ``select``."""
        return QueryBuilder(self, table_name)

    def _read_headers(self, query: Query | None = None) -> dict[str, str]:
        headers = default_headers(self.api_key, self.api_key)
        if query is not None and query.range is not None:
            start, end = query.range
            headers[HeaderType.RANGE.value] = f"{start}-{end}"
        headers[HeaderType.ACCEPT_PROFILE.value] = self.schema
        return headers

    def _url_for(self, table_name: str, query_string: str) -> str:
        url = f"{self.endpoint(table_name)}?{query_string}"
        if url.endswith(_COUNT_SUFFIX):
            url = url.replace(_COUNT_SUFFIX, "")
        return url

    async def _get(self, url: str, headers: dict[str, str]) -> list[Any]:
        try:
            response = await self.http_client.get(url, headers=headers)
        except httpx.HTTPError as error:
            raise SupabaseError(str(error)) from error
        return handle_response(response)

    async def execute(self, table_name: str, query_string: str) -> list[Any]:
        """Fetch records from ``table_name`` using a ready-made query string."""
        return await self._get(self._url_for(table_name, query_string), self._read_headers())

    async def execute_with_query(self, table_name: str, query: Query) -> list[Any]:
        """Fetch records from ``table_name`` as described by ``query``, including its range."""
        return await self._get(
            self._url_for(table_name, query.build()), self._read_headers(query)
        )

    async def get_id(self, email: str, table_name: str, column_name: str) -> str:
        """Return the JSON text of the ``id`` of the first row whose ``column_name`` equals ``email``."""
        records = await self.select(table_name).eq(column_name, email).execute()
        if not records:
            raise SupabaseError("No matching record found")
        first = records[0]
        value = first.get("id") if isinstance(first, Mapping) else None
        return json.dumps(value, separators=(",", ":"))