"""Fluent construction of select queries against a table."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from supabase_rest.query import Query


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must be non-negative")
    return value


class QueryBuilder:
    """Chainable filters, ordering and pagination for one table; run with ``execute``."""

    def __init__(self, client: Any, table_name: str) -> None:
        self.client = client
        self.table_name = table_name
        self.query = Query()

    def columns(self, columns: Iterable[str]) -> QueryBuilder:
        """Restrict the selected columns."""
        self.query.add_param("select", ",".join(columns))
        return self

    def _filter(self, column: str, op: str, value: str) -> QueryBuilder:
        self.query.add_param(column, f"{op}.{value}")
        return self

    def eq(self, column: str, value: str) -> QueryBuilder:
        """Keep rows where ``column`` equals ``value``."""
        return self._filter(column, "eq", value)

    def neq(self, column: str, value: str) -> QueryBuilder:
        """Keep rows where ``column`` differs from ``value``."""
        return self._filter(column, "neq", value)

    def gt(self, column: str, value: str) -> QueryBuilder:
        """Keep rows where ``column`` is greater than ``value``."""
        return self._filter(column, "gt", value)

    def lt(self, column: str, value: str) -> QueryBuilder:
        """Keep rows where ``column`` is less than ``value``."""
        return self._filter(column, "lt", value)

    def gte(self, column: str, value: str) -> QueryBuilder:
        """Keep rows where ``column`` is at least ``value``."""
        return self._filter(column, "gte", value)

    def lte(self, column: str, value: str) -> QueryBuilder:
        """Keep rows where ``column`` is at most ``value``."""
        return self._filter(column, "lte", value)

    def count(self) -> QueryBuilder:
        """Ask for the exact number of matching rows."""
        self.query.add_param("count", "exact")
        return self

    def limit(self, limit: int) -> QueryBuilder:
        """Return at most ``limit`` rows."""
        self.query.add_param("limit", str(_non_negative("limit", limit)))
        return self

    def offset(self, offset: int) -> QueryBuilder:
        """Skip the first ``offset`` rows."""
        self.query.add_param("offset", str(_non_negative("offset", offset)))
        return self

    def range(self, start: int, end: int) -> QueryBuilder:
        """Fetch rows ``start`` through ``end`` inclusive via the Range header."""
        self.query.set_range(start, end)
        return self

    def order(self, column: str, ascending: bool) -> QueryBuilder:
        """Order results by ``column``."""
        direction = "asc" if ascending else "desc"
        self.query.add_param("order", f"{column}.{direction}")
        return self

    def text_search(self, column: str, value: str) -> QueryBuilder:
        """Full-text search ``column`` for ``value``."""
        return self._filter(column, "fts", value)

    def in_(self, column: str, values: Iterable[Any]) -> QueryBuilder:
        """Keep rows where ``column`` is one of ``values``."""
        listed = ",".join(str(v) for v in values)
        self.query.add_param(column, f"in.({listed})")
        return self

    async def execute(self) -> list[Any]:
        """Run the query and return the fetched records."""
        return await self.client.execute_with_query(self.table_name, self.query)