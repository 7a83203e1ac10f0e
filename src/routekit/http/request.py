"""Immutable ambient request metadata.

The router only needs to know what was asked for: method, path and
query string. Body access and headers belong to the host HTTP layer.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any

from routekit.http.query import QueryParams, split_url


@dataclass(frozen=True, slots=True)
class Request:
    """The request the router falls back to when ``match()`` gets no arguments."""

    method: str
    path: str
    query: QueryParams

    @property
    def url(self) -> str:
        """Request URL (path + query string)."""
        if self.query.raw:
            return f"{self.path}?{self.query.raw}"
        return self.path

    # -- Factories --

    @classmethod
    def from_asgi(cls, scope: MutableMapping[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        return cls(
            method=scope.get("method", "GET"),
            path=scope.get("path", "/"),
            query=QueryParams(scope.get("query_string", b"")),
        )

    @classmethod
    def from_url(cls, method: str, url: str) -> Request:
        """Create a Request from a method and a URL that may carry a query string."""
        path, query = split_url(url)
        return cls(method=method.upper(), path=path or "/", query=query)
