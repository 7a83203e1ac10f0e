"""Request-scoped context via ContextVar, plus the process-wide router.

Provides:
- ``request_var``: The current ``Request`` for this task/thread.
- ``router_var``: The ``Router`` session serving the current request.
- ``get_instance()``: One lazily built ``Router`` for the whole process.

The ContextVars are set by ``RouterMiddleware`` and reset after each
request. They are explicitly opt-in: if nothing sets them,
``get_request()`` raises ``LookupError`` and ``get_router()`` falls
back to the process-wide instance.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    threads. The process-wide instance is created under a lock, but a
    ``Router`` itself serves one request at a time; concurrent hosts
    should use one ``Router.new_session()`` per request.
"""

from __future__ import annotations

import threading
from contextvars import ContextVar
from typing import TYPE_CHECKING

from routekit.http.request import Request

if TYPE_CHECKING:
    from routekit.router import Router

# -- Request context --

request_var: ContextVar[Request] = ContextVar("routekit_request")
"""The current request. Set by the ASGI middleware before the app runs."""


def get_request() -> Request:
    """Return the current request.

    Raises ``LookupError`` if called outside a request context.
    """
    return request_var.get()


def find_request() -> Request | None:
    """Return the current request, or ``None`` outside a request context."""
    return request_var.get(None)


# -- Router access --

router_var: ContextVar[Router] = ContextVar("routekit_router")
"""The router session for the current request."""

_instance: Router | None = None
_instance_lock = threading.Lock()


def get_instance() -> Router:
    """Return the process-wide router, creating it on first use.

    There is no way to replace it once created. Applications that
    build their own ``Router`` at startup should pass it around (or
    install it through ``RouterMiddleware``) instead.
    """
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                from routekit.router import Router

                _instance = Router()
    return _instance


def get_router() -> Router:
    """Return the router serving the current request.

    Falls back to ``get_instance()`` outside a request context.
    """
    router = router_var.get(None)
    if router is None:
        return get_instance()
    return router
