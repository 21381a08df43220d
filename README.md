# supabase_rest

A small asynchronous client for the REST (PostgREST) interface of a Supabase
project and for downloading files from its public storage buckets. It is built
on `httpx`.

## Installation

```
pip install supabase_rest
```

## The client

`supabase_rest.client.SupabaseClient(url, api_key, schema="public", http_client=None)`
holds the project URL, the API key, the schema sent in the `Accept-Profile`
header, and an `httpx.AsyncClient` (one is created when none is given). It can
be used as an async context manager, or closed with `await client.aclose()`.

`client.endpoint("users")` returns `<url>/rest/v1/users`.

## Querying tables

`SupabaseClient.select` (or its alias `from_`) returns a
`supabase_rest.builder.QueryBuilder`. Its methods chain, and nothing is sent
until `execute()` is awaited.

```python
import asyncio
from supabase_rest.client import SupabaseClient

async def main():
    async with SupabaseClient("https://project.supabase.co", "placeholder") as client:
        rows = await (
            client.from_("products")
            .columns(["id", "name", "price"])
            .gte("price", "10.00")
            .lte("price", "100.00")
            .in_("category", ["electronics", "books"])
            .text_search("description", "wireless")
            .order("price", True)
            .range(0, 19)
            .execute()
        )
        print(rows)

asyncio.run(main())
```

Builder methods:

- filters: `eq`, `neq`, `gt`, `lt`, `gte`, `lte`, `in_`, `text_search`
  (each adds a `column=op.value` parameter; `in_` adds `column=in.(a,b,...)`)
- column selection: `columns` (adds `select=a,b,...`)
- paging: `limit`, `offset` (both reject negative numbers), `range`
- ordering: `order(column, ascending)` (adds `order=column.asc` or `.desc`)
- counting: `count` (adds `count=exact`)

A parameter pair that is already present is not added a second time.
`range(start, end)` sends an inclusive `Range: start-end` header. When the
server's `Content-Range` header carries a total, the result list ends with an
extra `{"total_records_count": <n>}` record.

A query string can also be sent directly with
`await client.execute("users", "status=eq.active")`, or a `Query` object with
`await client.execute_with_query("users", query)`.

## Errors

A failed request raises `supabase_rest.response.SupabaseError`, which carries
`message` and, when a response arrived, `status_code`. Reads map 400, 401 and
403 to specific messages and other failures to `"unknown error"`; a response
body that is not a JSON array also raises. Transport errors from `httpx` are
wrapped in `SupabaseError` as well.

## Building a query string by hand

`supabase_rest.query.Query` collects parameters, filters and sorts;
`Query.build()` joins parameters, then filters, then sorts with `&`:

```python
from supabase_rest.query import Filter, Operator, Query, Sort, SortOrder

query = Query()
query.add_filter(Filter("age", Operator.GREATER_THAN, "30"))
query.add_sort(Sort("name", SortOrder.ASCENDING))
assert query.build() == "age.gt=30&name.asc"
```

`Query.set_range(start, end)` stores the row range used for the `Range` header.

## Updating and upserting

```python
await client.update("users", "123", {"name": "Alice"})
await client.update_with_column_name("users", "email", "alice@example.com", {"verified": True})
await client.upsert("settings", "user_123", {"theme": "dark"})
await client.upsert_without_defined_key("events", {"user_id": "123", "event": "view"})
```

`update` and `update_with_column_name` send a `PATCH` to
`<table>?<column>=eq.<value>` and return the matched value. `upsert` sets the
body's `id` and posts it with `Prefer: resolution=merge-duplicates`; it returns
the id. A non-success status raises `SupabaseError` with the status text.

## Looking up an id

```python
row_id = await client.get_id("alice@example.com", "users", "email")
```

This returns the JSON text of the first matching row's `id` (for example
`"42"` or `"\"abc\""`), and raises `SupabaseError` when no row matches.

## Headers

`supabase_rest.headers.default_headers(api_key, auth_token)` returns the
headers every read carries: `x_client_info`, `Content-Type: application/json`,
`apikey` and `Authorization: Bearer <auth_token>`. `client_info()` returns the
client's `name/version` string, and `HeaderType` lists the header names used.

## Downloading from storage

```python
from supabase_rest.storage import SupabaseStorage

storage = SupabaseStorage(
    supabase_url="https://project.supabase.co",
    bucket_name="avatars",
    filename="user-123/profile.jpg",
)
data = await storage.download()
await storage.save("profile.jpg")
```

`storage.url` is the public object URL. `download` returns the response body
as it came, without checking the status code; both methods accept an optional
`httpx.AsyncClient`.

## What this package does not do

It has no methods for inserting or deleting rows, no sign-in or session
handling, no realtime subscriptions, and no storage uploads or access to
private buckets. It has no command-line tool.