# tests/test_api.py
from fastapi.testclient import TestClient

from kbsearch.errors import StorageError
from kbsearch.main import create_app
from kbsearch.store import SqlArticleStore, make_engine


def _create(client, **body):
    return client.post("/api/create-articles", json=body)


def test_search_response_shape(client):
    _create(client, title="Go Basics", content="intro to goroutines", url="https://go.dev/tour", source="go.dev")
    _create(client, title="Rust Ownership", content="borrow checker")
    r = client.post("/api/search-query", params={"query": "go"})
    assert r.status_code == 200
    body = r.json()
    assert body["ai_summary_answer"] == "Summary of relevant articles: Go Basics"
    assert body["relevant_articles"] == [{
        "id": 1, "title": "Go Basics", "content": "intro to goroutines",
        "url": "https://go.dev/tour", "source": "go.dev",
    }]

def test_search_empty_store(client):
    r = client.post("/api/search-query", params={"query": "anything"})
    assert r.status_code == 200
    assert r.json() == {"relevant_articles": [], "ai_summary_answer": "No articles found"}

def test_search_no_match(client):
    _create(client, title="Go Basics", content="intro")
    r = client.post("/api/search-query", params={"query": "kotlin"})
    assert r.json()["ai_summary_answer"] == "No relevant articles found for the query: kotlin"

def test_search_without_query_is_bad_request(client):
    r = client.post("/api/search-query")
    assert r.status_code == 400
    assert r.json() == {"message": "Error in getting articles", "detail": "Query cannot be null or empty"}

def test_search_blank_query_is_bad_request(client):
    r = client.post("/api/search-query", params={"query": "   "})
    assert r.status_code == 400

def test_search_store_failure_is_server_error(client, memory_store, mocker):
    mocker.patch.object(memory_store, "retrieve_all", side_effect=StorageError("db down"))
    r = client.post("/api/search-query", params={"query": "go"})
    assert r.status_code == 500
    body = r.json()
    assert body["message"] == "Error in getting articles"
    assert body["detail"] == "Error processing AI search query: db down"

def test_create_returns_plain_text_with_id(client):
    r = _create(client, title="T", content="C")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/plain")
    assert r.text == "Article created successfully with ID: 1"
    found = client.post("/api/search-query", params={"query": "T"}).json()
    assert [a["id"] for a in found["relevant_articles"]] == [1]

def test_create_store_failure_is_server_error(client, memory_store, mocker):
    mocker.patch.object(memory_store, "insert", side_effect=StorageError("disk gone"))
    r = _create(client, title="T", content="C")
    assert r.status_code == 500
    assert r.json()["detail"] == "Error creating article: disk gone"

def test_create_rejects_invalid_bodies(client):
    bad = [
        {"title": "", "content": "x"},
        {"title": "   ", "content": "x"},
        {"content": "x"},
        {"title": "T"},
        {"title": "x" * 256, "content": "c"},
        {"title": "T", "content": "c", "url": "not a url"},
        {"title": "T", "content": "c", "url": "http://exa mple.com"},
        {"title": "T", "content": "c", "url": "https://e.com/" + "a" * 2083},
        {"title": "T", "content": "c", "source": "s" * 256},
    ]
    for body in bad:
        r = _create(client, **body)
        assert r.status_code == 400, body
        assert r.json()["message"] == "Unexpected error occurred"
    assert client.post("/api/search-query", params={"query": "x"}).json()["ai_summary_answer"] == "No articles found"

def test_unknown_route_uses_error_shape(client):
    r = client.get("/api/nope")
    assert r.status_code == 404
    assert r.json()["message"] == "HTTP error"

def test_runtime_error_is_internal_error(memory_store):
    app = create_app(memory_store)

    def explode():
        raise RuntimeError("unexpected state")
    app.add_api_route("/explode", explode)

    r = TestClient(app).get("/explode")
    assert r.status_code == 500
    assert r.json() == {"message": "INTERNAL_SERVER_ERROR", "detail": "unexpected state"}

def test_uncategorized_error_is_bad_request(memory_store):
    app = create_app(memory_store)

    def lookup():
        raise LookupError("no such thing")
    app.add_api_route("/lookup", lookup)

    r = TestClient(app, raise_server_exceptions=False).get("/lookup")
    assert r.status_code == 400
    assert r.json() == {"message": "Unexpected error occurred", "detail": "no such thing"}
    req_id = r.headers.get("X-Request-ID")
    assert req_id and len(req_id) == 12

def test_sql_backed_app_creates_table_on_startup(tmp_path):
    store = SqlArticleStore(make_engine(f"sqlite:///{tmp_path / 'api.db'}"))
    with TestClient(create_app(store)) as c:
        assert c.post("/api/create-articles", json={"title": "Go Basics", "content": "goroutines"}).status_code == 200
        r = c.post("/api/search-query", params={"query": "GOROUTINE"})
        assert r.json()["ai_summary_answer"] == "Summary of relevant articles: Go Basics"
