"""Query state for PostgREST requests: filters, sorts, parameters and ranges."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Operator(Enum):
    """Comparison operators, valued by their PostgREST names."""

    EQUALS = "eq"
    NOT_EQUALS = "neq"
    GREATER_THAN = "gt"
    LESS_THAN = "lt"
    GREATER_THAN_OR_EQUALS = "gte"
    LESS_THAN_OR_EQUALS = "lte"


class SortOrder(Enum):
    """Sort directions, valued by their PostgREST names."""

    ASCENDING = "asc"
    DESCENDING = "desc"


@dataclass
class Filter:
    """A single ``column.operator=value`` filter condition."""

    column: str
    operator: Operator
    value: str

    def __str__(self) -> str:
        return f"{self.column}.{self.operator.value}={self.value}"


@dataclass
class Sort:
    """A ``column.direction`` sort specification."""

    column: str
    order: SortOrder

    def __str__(self) -> str:
        return f"{self.column}.{self.order.value}"


@dataclass
class Query:
    """Parameters, filters, sorts and an optional row range for one request."""

    params: list[tuple[str, str]] = field(default_factory=list)
    filters: list[Filter] = field(default_factory=list)
    sorts: list[Sort] = field(default_factory=list)
    range: tuple[int, int] | None = None

    def add_param(self, key: str, value: str) -> None:
        """Append a key/value parameter unless the identical pair is already present."""
        pair = (key, value)
        if pair not in self.params:
            self.params.append(pair)

    def add_filter(self, filter: Filter) -> None:
        """Append a filter condition."""
        self.filters.append(filter)

    def add_sort(self, sort: Sort) -> None:
        """Append a sort specification."""
        self.sorts.append(sort)

    def set_range(self, start: int, end: int) -> None:
        """Set the inclusive row range used for pagination."""
        if start < 0 or end < 0:
            raise ValueError("range bounds must be non-negative")
        self.range = (start, end)

    def build(self) -> str:
        """Return the query string: parameters, then filters, then sorts."""
        parts = [f"{key}={value}" for key, value in self.params]
        parts.extend(str(f) for f in self.filters)
        parts.extend(str(s) for s in self.sorts)
        return "&".join(parts)