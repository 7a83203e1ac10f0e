"""Ordered route table with a name index.

Application routes are often registered after a wave of generic
fallback routes (login, assets, ...). The table keeps every named,
non-generic route ahead of the generic and unnamed ones so a generic
route can never shadow a structurally similar application route.
"""

import logging
from collections.abc import Iterator
from typing import Any

from routekit.errors import ConfigurationError, DuplicateRouteNameError, UnknownRouteNameError
from routekit.routing.matcher import PathMatcher, PatternMatcher
from routekit.routing.route import RouteDefinition

logger = logging.getLogger("routekit.routing")


class RouteTable:
    """Ordered route definitions plus a ``name -> pattern`` index.

    Usage::

        table = RouteTable()
        table.register("GET", "/login", "auth.login", name="generic.login")
        table.register("GET", "/users/{id:int}", {"controller": "user"}, name="app.user")
        table.freeze()
        [r.name for r in table]  # ["app.user", "generic.login"]
    """

    __slots__ = (
        "_app_routes",
        "_frozen",
        "_generic_prefix",
        "_generic_routes",
        "_matcher",
        "_names",
    )

    def __init__(
        self,
        matcher: PathMatcher | None = None,
        *,
        generic_prefix: str = "generic.",
    ) -> None:
        self._matcher: PathMatcher = matcher or PatternMatcher()
        self._generic_prefix = generic_prefix
        self._app_routes: list[RouteDefinition] = []
        self._generic_routes: list[RouteDefinition] = []
        self._names: dict[str, str] = {}
        self._frozen = False

    @property
    def matcher(self) -> PathMatcher:
        return self._matcher

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def generic_prefix(self) -> str:
        """Route names starting with this are matched after app routes."""
        return self._generic_prefix

    def register(
        self,
        method: str,
        pattern: str,
        target: Any,
        name: str | None = None,
    ) -> RouteDefinition:
        """Add a route and return its definition.

        Raises ``DuplicateRouteNameError`` if *name* is already taken,
        ``ConfigurationError`` if the table is frozen or *pattern* does
        not compile.
        """
        return self.add(RouteDefinition(method=method, pattern=pattern, target=target, name=name))

    def add(self, route: RouteDefinition) -> RouteDefinition:
        """Add an already built ``RouteDefinition``. See ``register``."""
        if self._frozen:
            msg = "Cannot register routes after the route table was frozen."
            raise ConfigurationError(msg)
        if not route.methods:
            msg = f"Route {route.pattern!r} has no HTTP method."
            raise ConfigurationError(msg)
        if route.name and route.name in self._names:
            raise DuplicateRouteNameError(route.name)

        # Fail at startup, not on the first request
        self._matcher.compile(route.pattern)

        if route.is_generic(self._generic_prefix):
            self._generic_routes.append(route)
        else:
            self._app_routes.append(route)

        if route.name:
            self._names[route.name] = route.pattern

        logger.debug(
            "Registered %s %s as %r (%s)",
            route.method,
            route.pattern,
            route.name,
            "generic" if route.is_generic(self._generic_prefix) else "app",
        )
        return route

    def freeze(self) -> None:
        """Make the table read-only. No more routes can be registered."""
        self._frozen = True

    @property
    def routes(self) -> tuple[RouteDefinition, ...]:
        """All routes in match order: app routes first, then generic and unnamed."""
        return (*self._app_routes, *self._generic_routes)

    def resolve_pattern(self, name: str) -> str:
        """Return the pattern registered under *name*.

        Raises ``UnknownRouteNameError`` if no route has that name.
        """
        try:
            return self._names[name]
        except KeyError:
            raise UnknownRouteNameError(name) from None

    def has_route(self, name: str) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[RouteDefinition]:
        return iter(self.routes)

    def __len__(self) -> int:
        return len(self._app_routes) + len(self._generic_routes)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"<RouteTable {len(self)} routes, {state}>"
