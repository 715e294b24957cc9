# =============================================================================
# tests/test_body_limit.py - Request Body Limit Tests
# =============================================================================

import asyncio

import pytest
from fastapi.responses import JSONResponse

from alfa_techx.middleware.body_limit import BodyLimitMiddleware, is_limited_media_type
from tests import sample_routes

MB = 1024 * 1024


class TestDefaultLimit:
    """JSON and urlencoded bodies are capped at 10 MB."""

    def test_oversized_json_rejected_before_handler(self, client):
        payload = b'{"data": "' + b"x" * (10 * MB) + b'"}'

        response = client.post(
            "/api/public/echo",
            content=payload,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 413
        assert response.json() == {"success": False, "message": "Request entity too large"}
        assert sample_routes.calls == []

    def test_json_at_limit_accepted(self, client):
        payload = b"x" * (10 * MB)

        response = client.post(
            "/api/public/echo",
            content=payload,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 200
        assert response.json()["received"] == 10 * MB


class TestSmallLimit:
    """Same rules with a 1 MB limit to keep payloads small."""

    @pytest.fixture
    def small_client(self, make_client):
        return make_client(BODY_LIMIT_MB=1)

    def test_oversized_urlencoded_rejected(self, small_client):
        response = small_client.post(
            "/api/public/echo",
            content=b"field=" + b"a" * MB,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )

        assert response.status_code == 413
        assert sample_routes.calls == []

    def test_chunked_json_without_length_rejected(self, small_client):
        def chunks():
            for _ in range(3):
                yield b"x" * (MB // 2)

        response = small_client.post(
            "/api/public/echo",
            content=chunks(),
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 413
        assert sample_routes.calls == []

    def test_chunked_json_within_limit_reaches_handler(self, small_client):
        def chunks():
            yield b'{"a": '
            yield b"1}"

        response = small_client.post(
            "/api/public/echo",
            content=chunks(),
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 200
        assert response.json()["received"] == len(b'{"a": 1}')

    def test_other_content_types_not_limited(self, small_client):
        response = small_client.post(
            "/api/public/echo",
            content=b"a" * (MB + 1),
            headers={"Content-Type": "application/octet-stream"},
        )

        assert response.status_code == 200
        assert response.json()["received"] == MB + 1

    def test_invalid_content_length(self, small_client):
        response = small_client.post(
            "/api/public/echo",
            content=b"{}",
            headers={"Content-Type": "application/json", "Content-Length": "lots"},
        )

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Invalid Content-Length header"}

    def test_rejection_carries_security_headers(self, small_client):
        response = small_client.post(
            "/api/public/echo",
            content=b"x" * (MB + 1),
            headers={"Content-Type": "application/json"},
        )

        assert response.headers["x-frame-options"] == "SAMEORIGIN"


class TestStreamingCount:
    """Chunked bodies are counted as they arrive, not after buffering."""

    @staticmethod
    def run_chunked(chunk_count, chunk_size, limit_bytes):
        consumed = []
        sent = []
        app_calls = []

        async def inner_app(scope, receive, send):
            message = await receive()
            app_calls.append(len(message["body"]))
            response = JSONResponse({"success": True})
            await response(scope, receive, send)

        async def receive():
            consumed.append(chunk_size)
            more = len(consumed) < chunk_count
            return {"type": "http.request", "body": b"x" * chunk_size, "more_body": more}

        async def send(message):
            sent.append(message)

        scope = {
            "type": "http",
            "method": "POST",
            "path": "/api/public/echo",
            "headers": [(b"content-type", b"application/json")],
        }
        middleware = BodyLimitMiddleware(inner_app, limit_bytes=limit_bytes)
        asyncio.run(middleware(scope, receive, send))
        return consumed, sent, app_calls

    def test_stops_reading_once_limit_passed(self):
        consumed, sent, app_calls = self.run_chunked(
            chunk_count=20, chunk_size=MB // 2, limit_bytes=MB,
        )

        assert len(consumed) == 3
        assert sent[0]["status"] == 413
        assert app_calls == []

    def test_small_body_replayed_to_app(self):
        consumed, sent, app_calls = self.run_chunked(
            chunk_count=4, chunk_size=100, limit_bytes=MB,
        )

        assert len(consumed) == 4
        assert sent[0]["status"] == 200
        assert app_calls == [400]
class TestMediaTypes:

    @pytest.mark.parametrize("content_type,expected", [
        ("application/json", True),
        ("application/json; charset=utf-8", True),
        ("APPLICATION/JSON", True),
        ("application/vnd.api+json", True),
        ("application/x-www-form-urlencoded", True),
        ("multipart/form-data; boundary=abc", False),
        ("text/plain", False),
        ("application/octet-stream", False),
        ("", False),
    ])
    def test_is_limited_media_type(self, content_type, expected):
        assert is_limited_media_type(content_type) is expected
