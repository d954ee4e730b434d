import logging

import pytest
from sqlalchemy.exc import OperationalError

from game_reviews.core.logging.middleware import REQUEST_ID_HEADER
from game_reviews.exceptions.base import (
    INTERNAL_ERROR_MESSAGE,
    INVALID_BODY_MESSAGE,
    ROUTE_NOT_FOUND_MESSAGE,
)
from game_reviews.services import review_service

ROUTE_NOT_FOUND_BODY = {"status": 404, "message": ROUTE_NOT_FOUND_MESSAGE}


@pytest.mark.asyncio
class TestRouteNotFound:

    @pytest.mark.parametrize("method", ["GET", "POST", "PATCH", "DELETE", "PUT"])
    async def test_unknown_path_any_method(self, client, method):
        response = await client.request(method, "/api/not-a-route")
        assert response.status_code == 404
        assert response.json() == ROUTE_NOT_FOUND_BODY

    async def test_path_outside_api_prefix(self, client):
        response = await client.get("/reviews")
        assert response.status_code == 404
        assert response.json() == ROUTE_NOT_FOUND_BODY

    @pytest.mark.parametrize(
        "method, path",
        [
            ("DELETE", "/api/reviews"),
            ("PUT", "/api/reviews/1"),
            ("GET", "/api/comments/1"),
            ("POST", "/api/categories"),
        ],
    )
    async def test_unsupported_method_on_known_path(self, client, method, path):
        response = await client.request(method, path)
        assert response.status_code == 404
        assert response.json() == ROUTE_NOT_FOUND_BODY


@pytest.mark.asyncio
class TestRequestBody:

    async def test_malformed_json(self, client):
        response = await client.patch(
            "/api/reviews/1",
            content=b'{"inc_votes": ',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"message": INVALID_BODY_MESSAGE}

    async def test_json_array_instead_of_object(self, client):
        response = await client.post("/api/reviews/1/comments", json=["username", "body"])
        assert response.status_code == 400
        assert response.json() == {"message": INVALID_BODY_MESSAGE}


@pytest.mark.asyncio
class TestServerErrors:

    async def test_unclassified_storage_error_is_generic_500(self, client, monkeypatch, caplog):
        async def broken(*args, **kwargs):
            raise OperationalError("SELECT 1", {}, Exception("password=hunter2 connection refused"))

        monkeypatch.setattr(review_service, "list_reviews", broken)

        with caplog.at_level(logging.ERROR, logger="game_reviews.exceptions.pipeline"):
            response = await client.get("/api/reviews")

        assert response.status_code == 500
        assert response.json() == {"message": INTERNAL_ERROR_MESSAGE}
        assert "hunter2" not in response.text
        assert any(r.message == "errors.unclassified" for r in caplog.records)

    async def test_unexpected_exception_is_generic_500(self, client, monkeypatch):
        async def broken(*args, **kwargs):
            raise RuntimeError("kaboom")

        monkeypatch.setattr(review_service, "get_review", broken)

        response = await client.get("/api/reviews/1")

        assert response.status_code == 500
        assert response.json() == {"message": INTERNAL_ERROR_MESSAGE}
        assert "kaboom" not in response.text


@pytest.mark.asyncio
class TestRequestId:

    async def test_generated_when_absent(self, client):
        response = await client.get("/api/categories")
        assert response.headers.get(REQUEST_ID_HEADER)

    async def test_echoed_when_provided(self, client):
        response = await client.get("/api/categories", headers={REQUEST_ID_HEADER: "req-123"})
        assert response.headers[REQUEST_ID_HEADER] == "req-123"

    async def test_present_on_error_responses(self, client):
        response = await client.get("/api/reviews/abc", headers={REQUEST_ID_HEADER: "req-400"})
        assert response.status_code == 400
        assert response.headers[REQUEST_ID_HEADER] == "req-400"
