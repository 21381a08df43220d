import pytest

from supabase_rest.builder import QueryBuilder
from supabase_rest.query import Query


class RecordingClient:
    def __init__(self, rows):
        self.rows = rows
        self.calls = []

    async def execute_with_query(self, table_name, query):
        self.calls.append((table_name, query))
        return self.rows


def make(table="test"):
    return QueryBuilder(RecordingClient([]), table)


def test_new_builder_has_empty_query():
    builder = make("users")
    assert builder.table_name == "users"
    assert builder.query == Query()


def test_columns_join_with_commas():
    builder = make().columns(["dog"])
    assert builder.query.params == [("select", "dog")]
    builder = make().columns(["id", "name"])
    assert builder.query.build() == "select=id,name"


@pytest.mark.parametrize("method", ["eq", "neq", "gt", "lt", "gte", "lte"])
def test_comparison_filters(method):
    builder = getattr(make(), method)("age", "18")
    assert builder.query.params == [("age", f"{method}.18")]


def test_eq_filter_value_from_source_case():
    builder = make().eq("dog", "what da dog doing")
    assert builder.query.build() == "dog=eq.what da dog doing"


def test_stacked_filters_on_same_column_are_kept():
    builder = make().gt("number", "10").gt("number", "20")
    assert builder.query.build() == "number=gt.10&number=gt.20"


def test_identical_filter_is_deduplicated():
    builder = make().eq("a", "1").eq("a", "1")
    assert builder.query.params == [("a", "eq.1")]


def test_count_limit_offset():
    builder = make().count().limit(10).offset(20)
    assert builder.query.params == [("count", "exact"), ("limit", "10"), ("offset", "20")]


@pytest.mark.parametrize("method", ["limit", "offset"])
def test_negative_pagination_rejected(method):
    with pytest.raises(ValueError):
        getattr(make(), method)(-1)


def test_range_is_stored_not_in_params():
    builder = make().range(0, 19)
    assert builder.query.range == (0, 19)
    assert builder.query.params == []


def test_order_directions():
    builder = make().order("created_at", False).order("name", True)
    assert builder.query.params == [("order", "created_at.desc"), ("order", "name.asc")]


def test_text_search():
    builder = make().text_search("description", "wireless")
    assert builder.query.params == [("description", "fts.wireless")]


def test_in_with_strings_and_numbers():
    builder = make().in_("category", ["electronics", "books"]).in_("id", [1, 2])
    assert builder.query.params == [
        ("category", "in.(electronics,books)"),
        ("id", "in.(1,2)"),
    ]


def test_chaining_returns_same_builder():
    builder = make()
    assert builder.eq("a", "1") is builder
    assert builder.range(0, 1) is builder


@pytest.mark.asyncio
async def test_execute_passes_table_and_query():
    rows = [{"id": 1}]
    client = RecordingClient(rows)
    builder = QueryBuilder(client, "pets").eq("name", "scooby").limit(5)
    result = await builder.execute()
    assert result == rows
    assert len(client.calls) == 1
    table, query = client.calls[0]
    assert table == "pets"
    assert query.build() == "name=eq.scooby&limit=5"