"""Books HTTP surface: status codes, JSON shape, defaults and error bodies.

Invariants:
    - POST /books -> 201 + book, 400 + {message} on bad data
    - GET /books answers with the combined listing (page/limit/sort on createdAt)
    - /books/filter, /books/paginate, /books/sort follow their own defaults
    - Store failures -> 500 + {message}
"""

BOOK_KEYS = {"id", "title", "author", "genre", "publicationDate", "createdAt"}


async def _create(client, **fields):
    res = await client.post("/books", json=fields)
    assert res.status_code == 201
    return res.json()


# --- POST /books --------------------------------------------------------------

async def test_create_returns_201_with_generated_id(client):
    res = await client.post("/books", json={"title": "Dune"})
    assert res.status_code == 201
    body = res.json()
    assert set(body) == BOOK_KEYS
    assert body["title"] == "Dune"
    assert body["id"]
    assert body["publicationDate"] is None


async def test_created_book_is_listed(client):
    created = await _create(client, title="Dune", author="Frank Herbert")
    res = await client.get("/books")
    assert res.status_code == 200
    assert created["id"] in [b["id"] for b in res.json()]


async def test_create_with_malformed_date_returns_400(client):
    res = await client.post(
        "/books", json={"title": "Dune", "publicationDate": "sometime"},
    )
    assert res.status_code == 400
    body = res.json()
    assert list(body) == ["message"]
    assert "publicationDate" in body["message"]


async def test_create_with_non_object_body_returns_400(client):
    res = await client.post("/books", json=["Dune"])
    assert res.status_code == 400
    assert list(res.json()) == ["message"]


async def test_create_with_invalid_json_returns_400(client):
    res = await client.post(
        "/books", content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert "message" in res.json()


# --- GET /books/filter --------------------------------------------------------

async def test_filter_by_author_any_case(client, seed_books):
    res = await client.get("/books/filter", params={"author": "TOLKIEN"})
    assert res.status_code == 200
    assert [b["author"] for b in res.json()] == ["J.R.R. Tolkien"]


async def test_filter_by_publication_date(client, seed_books):
    res = await client.get("/books/filter", params={"publicationDate": "1965-08-01"})
    assert [b["title"] for b in res.json()] == ["Dune"]


async def test_filter_without_params_returns_all(client, seed_books):
    res = await client.get("/books/filter")
    assert len(res.json()) == 5


async def test_filter_with_malformed_date_returns_500(client, seed_books):
    res = await client.get("/books/filter", params={"publicationDate": "someday"})
    assert res.status_code == 500
    assert list(res.json()) == ["message"]


# --- GET /books/paginate ------------------------------------------------------

async def test_paginate_second_page(client, seed_books):
    res = await client.get("/books/paginate", params={"page": 2, "pageSize": 2})
    assert res.status_code == 200
    body = res.json()
    assert set(body) == {"books", "totalBooks"}
    assert [b["id"] for b in body["books"]] == [
        str(seed_books[2].id), str(seed_books[3].id),
    ]
    assert body["totalBooks"] == 5


async def test_paginate_defaults_to_page_one_size_two(client, seed_books):
    body = (await client.get("/books/paginate")).json()
    assert [b["title"] for b in body["books"]] == ["Dune", "The Hobbit"]


async def test_paginate_non_numeric_uses_defaults(client, seed_books):
    body = (await client.get(
        "/books/paginate", params={"page": "two", "pageSize": "many"},
    )).json()
    assert len(body["books"]) == 2


async def test_paginate_zero_page_size_returns_empty_window(client, seed_books):
    body = (await client.get("/books/paginate", params={"pageSize": 0})).json()
    assert body == {"books": [], "totalBooks": 5}


async def test_paginate_zero_page_returns_500(client, seed_books):
    res = await client.get("/books/paginate", params={"page": 0})
    assert res.status_code == 500
    assert "message" in res.json()


# --- GET /books/sort ----------------------------------------------------------

async def test_sort_title_descending(client, seed_books):
    res = await client.get("/books/sort", params={"sort": "title", "order": "desc"})
    assert res.status_code == 200
    assert [b["title"] for b in res.json()] == [
        "The Hobbit", "Neuromancer", "Hyperion", "Foundation", "Dune",
    ]


async def test_sort_by_publication_date(client, seed_books):
    res = await client.get("/books/sort", params={"sort": "publicationDate"})
    assert [b["title"] for b in res.json()][0] == "The Hobbit"


# --- GET /books (combined) ----------------------------------------------------

async def test_list_defaults_to_ten(client):
    for i in range(12):
        await _create(client, title=f"Book {i:02d}")
    res = await client.get("/books")
    assert res.status_code == 200
    assert [b["title"] for b in res.json()] == [f"Book {i:02d}" for i in range(10)]


async def test_list_ignores_page_size_param(client):
    for i in range(4):
        await _create(client, title=f"Book {i}")
    res = await client.get("/books", params={"pageSize": 1})
    assert len(res.json()) == 4


async def test_list_page_and_limit(client, seed_books):
    res = await client.get("/books", params={"page": 2, "limit": 2})
    assert [b["title"] for b in res.json()] == ["Neuromancer", "Foundation"]


async def test_list_with_invalid_sort_returns_500(client, seed_books):
    res = await client.get("/books", params={"sort": "sideways"})
    assert res.status_code == 500
    assert list(res.json()) == ["message"]
