"""Tests for routekit.http.request — ambient request metadata."""

import pytest

from routekit.http.request import Request


class TestFromAsgi:
    def test_basic(self) -> None:
        scope = {
            "type": "http",
            "method": "POST",
            "path": "/users/42",
            "query_string": b"ajax=1",
        }
        request = Request.from_asgi(scope)

        assert request.method == "POST"
        assert request.path == "/users/42"
        assert request.query["ajax"] == "1"

    def test_defaults_for_missing_keys(self) -> None:
        request = Request.from_asgi({"type": "http"})

        assert request.method == "GET"
        assert request.path == "/"
        assert len(request.query) == 0


class TestFromUrl:
    def test_splits_query(self) -> None:
        request = Request.from_url("get", "/search?q=router")

        assert request.method == "GET"
        assert request.path == "/search"
        assert request.query["q"] == "router"

    def test_url_round_trips_query(self) -> None:
        assert Request.from_url("GET", "/search?q=router").url == "/search?q=router"
        assert Request.from_url("GET", "/search").url == "/search"

    def test_empty_path_becomes_root(self) -> None:
        assert Request.from_url("GET", "?x=1").path == "/"


def test_frozen() -> None:
    request = Request.from_url("GET", "/")
    with pytest.raises(AttributeError):
        request.path = "/other"  # type: ignore[misc]
