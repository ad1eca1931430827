"""Integration tests for the book HTTP API."""

import json
from concurrent.futures import ThreadPoolExecutor
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from bff_books.api.http.app import UNMATCHED_ROUTE
from bff_books.api.http.app_data import ApplicationDependencies
from tests.fixtures.dummies import FakeRedisClient

BOOKS_URL = "/api/v1/books/"
LABELS = {"ControllerName": "BookController", "ServiceName": "BookService"}


def deps(client: TestClient) -> ApplicationDependencies:
    return client.app.state.app_dependencies


def counter(client: TestClient, name: str) -> float:
    return deps(client).metrics.registry.get_sample_value(f"{name}_total", LABELS)


def create_book(client: TestClient, **overrides) -> dict:
    payload = {"authorId": str(uuid4()), "title": "T", "pages": 42}
    payload.update(overrides)
    response = client.post(BOOKS_URL, json=payload)
    assert response.status_code == 200
    return response.json()


class TestCreateBook:
    """POST /api/v1/books/"""

    def test_create_returns_new_book(self, client: TestClient):
        """Should answer with the stored fields and a fresh identifier."""
        author_id = str(uuid4())
        response = client.post(
            BOOKS_URL, json={"authorId": author_id, "title": "T", "pages": 42}
        )

        assert response.status_code == 200
        body = response.json()
        assert UUID(body["id"])
        assert body == {"id": body["id"], "authorId": author_id, "title": "T", "pages": 42}

    def test_create_publishes_notification(
        self, client: TestClient, fake_redis: FakeRedisClient
    ):
        """Should publish the created book on the configured channel."""
        body = create_book(client, title="Solaris", pages=204)

        assert len(fake_redis.published) == 1
        channel, message = fake_redis.published[0]
        assert channel == "books-test"
        assert json.loads(message) == body

    def test_publish_failure_does_not_fail_creation(
        self, client: TestClient, fake_redis: FakeRedisClient
    ):
        """Should still create the book when Redis is unreachable."""
        fake_redis.fail = True

        body = create_book(client)

        assert fake_redis.published == []
        assert client.get(f"{BOOKS_URL}{body['id']}").json() == body
        assert counter(client, "error_count") == 0

    def test_create_accepts_negative_pages(self, client: TestClient):
        body = create_book(client, pages=-1, title="")
        assert body["pages"] == -1
        assert body["title"] == ""

    def test_malformed_payload(self, client: TestClient):
        """Should reject bodies that do not fit the command and count the error."""
        response = client.post(
            BOOKS_URL, json={"authorId": "not-a-uuid", "title": "T", "pages": "x"}
        )

        assert response.status_code == 422
        assert counter(client, "error_count") == 1

    def test_create_without_trailing_slash(self, client: TestClient):
        """Should create on the bare collection path without a redirect."""
        response = client.post(
            BOOKS_URL.rstrip("/"),
            json={"authorId": str(uuid4()), "title": "T", "pages": 1},
            follow_redirects=False,
        )

        assert response.status_code == 200
        assert len(deps(client).book_store) == 1

    def test_concurrent_creation(self, client: TestClient):
        """Should keep every book created by parallel callers."""
        total = 25

        with ThreadPoolExecutor(max_workers=8) as pool:
            bodies = list(
                pool.map(lambda i: create_book(client, title=f"Book {i}"), range(total))
            )

        ids = {body["id"] for body in bodies}
        assert len(ids) == total

        listed = client.get(BOOKS_URL).json()
        assert len(listed) == total
        assert {book["id"] for book in listed} == ids
        for book_id in ids:
            assert client.get(f"{BOOKS_URL}{book_id}").status_code == 200


class TestReadBooks:
    """GET /api/v1/books/ and GET /api/v1/books/{id}"""

    def test_list_empty(self, client: TestClient):
        response = client.get(BOOKS_URL)
        assert response.status_code == 200
        assert response.json() == []

    def test_list_returns_all_books(self, client: TestClient):
        created = [create_book(client, title=f"Book {i}", pages=i) for i in range(3)]

        listed = client.get(BOOKS_URL).json()

        assert len(listed) == 3
        assert sorted(listed, key=lambda b: b["id"]) == sorted(
            created, key=lambda b: b["id"]
        )

    def test_list_without_trailing_slash(self, client: TestClient):
        created = create_book(client)

        response = client.get(BOOKS_URL.rstrip("/"), follow_redirects=False)

        assert response.status_code == 200
        assert response.json() == [created]

    def test_get_by_id(self, client: TestClient):
        created = create_book(client, title="Dune", pages=412)

        response = client.get(f"{BOOKS_URL}{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_unknown_id_is_server_error(self, client: TestClient):
        """Should report a missing book through the generic error response."""
        response = client.get(f"{BOOKS_URL}{uuid4()}")

        assert response.status_code == 500
        assert response.text == "Some error occurred Book isn't found"
        assert counter(client, "error_count") == 1

    def test_get_malformed_id(self, client: TestClient):
        response = client.get(f"{BOOKS_URL}not-a-uuid")
        assert response.status_code == 422


class TestStrictNotFound:
    @pytest.fixture
    def app_config(self, app_config):
        app_config.api.strict_not_found = True
        return app_config

    def test_get_unknown_id_is_not_found(self, client: TestClient):
        """Should answer 404 with the same message when strict mode is on."""
        response = client.get(f"{BOOKS_URL}{uuid4()}")

        assert response.status_code == 404
        assert response.text == "Some error occurred Book isn't found"
        assert counter(client, "error_count") == 1


class TestErrorHandling:
    def test_unexpected_failure(self, client: TestClient, monkeypatch):
        """Should turn any uncaught failure into the uniform error response."""

        def explode():
            raise RuntimeError("store unavailable")

        monkeypatch.setattr(deps(client).book_service, "get_books", explode)

        response = client.get(BOOKS_URL)

        assert response.status_code == 500
        assert response.text == "Some error occurred store unavailable"
        assert response.headers["content-type"].startswith("text/plain")
        assert counter(client, "error_count") == 1

    def test_request_id_echoed(self, client: TestClient):
        response = client.get(BOOKS_URL, headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"


class TestMetrics:
    def test_request_counter(self, client: TestClient):
        """Should count every book request."""
        book = create_book(client)
        client.get(BOOKS_URL)
        client.get(f"{BOOKS_URL}{book['id']}")
        client.get("/health")

        assert counter(client, "request_count") == 3
        assert counter(client, "error_count") == 0

    def test_metrics_endpoint(self, client: TestClient):
        client.get(BOOKS_URL)

        response = client.get("/metrics")

        assert response.status_code == 200
        assert "request_count_total" in response.text
        assert 'ControllerName="BookController"' in response.text
        assert "http_server_requests_seconds" in response.text

    def test_unknown_paths_share_one_series(self, client: TestClient):
        """Should not create a timer series per unmatched URL."""
        for _ in range(20):
            assert client.get(f"/scan/{uuid4()}").status_code == 404

        routes = {
            sample.labels["route"]
            for metric in deps(client).metrics.registry.collect()
            if metric.name == "http_server_requests_seconds"
            for sample in metric.samples
            if sample.name == "http_server_requests_seconds_count"
        }
        assert routes == {UNMATCHED_ROUTE}
