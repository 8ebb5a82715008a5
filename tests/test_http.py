"""Tests for quire.http — Request from ASGI scope, Response transformations."""

from quire.http.request import Request
from quire.http.response import Response, redirect


def _scope(headers: list[tuple[bytes, bytes]] | None = None) -> dict:
    return {
        "type": "http",
        "method": "get",
        "path": "/docs/intro",
        "query_string": b"a=1",
        "headers": headers or [],
    }


class TestRequest:
    def test_from_asgi(self) -> None:
        request = Request.from_asgi(_scope())
        assert request.method == "GET"
        assert request.path == "/docs/intro"
        assert request.query_string == "a=1"

    def test_header_names_lowercased_first_wins(self) -> None:
        request = Request.from_asgi(_scope([(b"X-Thing", b"one"), (b"x-thing", b"two")]))
        assert request.headers["x-thing"] == "one"

    def test_fragment_detection(self) -> None:
        assert Request.from_asgi(_scope([(b"hx-request", b"true")])).is_fragment
        assert not Request.from_asgi(_scope()).is_fragment

    def test_history_restore(self) -> None:
        request = Request.from_asgi(
            _scope([(b"hx-request", b"true"), (b"hx-history-restore-request", b"true")])
        )
        assert request.is_history_restore


class TestResponse:
    def test_with_status_returns_new(self) -> None:
        original = Response("hi")
        changed = original.with_status(404)
        assert original.status == 200
        assert changed.status == 404

    def test_with_header_and_lookup(self) -> None:
        response = Response().with_header("X-Docs", "1")
        assert response.header("x-docs") == "1"
        assert response.header("missing") is None

    def test_body_conversions(self) -> None:
        assert Response("é").body_bytes == "é".encode()
        assert Response(b"abc").text == "abc"

    def test_redirect(self) -> None:
        response = redirect("/docs/getting-started")
        assert response.status == 302
        assert response.header("Location") == "/docs/getting-started"
        assert response.body == ""
