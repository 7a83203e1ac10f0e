"""ASGI glue — match every HTTP request before the application runs.

``RouterMiddleware`` owns one configured ``Router`` and hands each
request its own session, so concurrent requests never share match
state. The session is reachable three ways while the app runs:

- ``scope["state"]["router"]``
- ``routekit.context.get_router()``
- ``routekit.context.get_request()`` for the request it matched
"""

import logging
from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

from routekit.context import request_var, router_var
from routekit.http.request import Request
from routekit.router import Router

logger = logging.getLogger("routekit.asgi")

Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]
ASGIApp: TypeAlias = Callable[[Scope, Receive, Send], Awaitable[None]]


class RouterMiddleware:
    """Wrap an ASGI app so every HTTP request is matched up front.

    Usage::

        router = Router(table, config=RouterConfig(parameters_to_target=("controller",)))
        app = RouterMiddleware(dispatcher_app, router)

    Freezes the router's table on construction. Non-HTTP scopes
    (lifespan, websocket) pass through untouched.
    """

    __slots__ = ("app", "router")

    def __init__(self, app: ASGIApp, router: Router) -> None:
        self.app = app
        self.router = router
        router.table.freeze()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request.from_asgi(scope)
        session = self.router.new_session()

        request_token = request_var.set(request)
        router_token = router_var.set(session)
        try:
            session.match()
            if not session.current_match:
                logger.debug("No route for %s %s", request.method, request.path)
            scope.setdefault("state", {})["router"] = session
            await self.app(scope, receive, send)
        finally:
            router_var.reset(router_token)
            request_var.reset(request_token)
