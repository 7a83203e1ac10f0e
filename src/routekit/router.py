"""Router — per-request routing state over a shared route table.

The router matches one request at a time and remembers the outcome:
the current ``MatchResult``, whether the request is an AJAX request,
and which output format was asked for. The rest of the request
lifecycle reads that state through accessors or through the uniform
key view over the match (``router["params"]``, ``"name" in router``).

Usage::

    table = RouteTable()
    table.register("GET", "/users/{id:int}.{format?}", {"app": "core"}, name="user.show")
    table.freeze()

    router = Router(table, config=RouterConfig(parameters_to_target=("controller",)))
    router.match("/users/5.json", "GET")
    router.current_route     # "user.show"
    router.format            # "json"
    router.get_param("id")   # "5"

A ``Router`` is not safe to share between concurrently handled
requests. Use ``new_session()`` to get a fresh router per request; the
route table is shared read-only.
"""

import logging
from collections.abc import Collection, Mapping
from typing import Any

from routekit.config import RouterConfig
from routekit.context import find_request
from routekit.errors import ConfigurationError, EmptyParameterNameError, InvalidFormatError
from routekit.http.query import QueryParams, split_url
from routekit.http.request import Request
from routekit.routing.matcher import PathMatcher
from routekit.routing.resolver import Controls, resolve
from routekit.routing.route import MATCH_FIELDS, MatchResult, RouteDefinition
from routekit.routing.table import RouteTable

logger = logging.getLogger("routekit.router")


class Router:
    """Matches requests against a ``RouteTable`` and holds the result."""

    __slots__ = (
        "_ajax",
        "_base_url",
        "_config",
        "_format",
        "_match",
        "_matcher",
        "_request_method",
        "_request_url",
        "_table",
        "_target_keys",
    )

    def __init__(
        self,
        table: RouteTable | None = None,
        *,
        matcher: PathMatcher | None = None,
        config: RouterConfig | None = None,
    ) -> None:
        self._config = config or RouterConfig()
        if table is None:
            table = RouteTable(matcher, generic_prefix=self._config.generic_prefix)
        elif table.generic_prefix != self._config.generic_prefix:
            msg = (
                f"Route table orders routes by generic prefix {table.generic_prefix!r} "
                f"but the router is configured with {self._config.generic_prefix!r}."
            )
            raise ConfigurationError(msg)
        self._table = table
        self._matcher: PathMatcher = matcher or table.matcher
        self._base_url = self._config.base_url
        self._target_keys: frozenset[str] = frozenset(self._config.parameters_to_target)

        self._request_url = ""
        self._request_method = ""
        self._ajax = False
        self._format = self._config.default_format
        self._match = MatchResult()

    # -- Setup --

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def table(self) -> RouteTable:
        return self._table

    def register(
        self,
        method: str,
        pattern: str,
        target: Any,
        name: str | None = None,
    ) -> RouteDefinition:
        """Register a route on the underlying table. See ``RouteTable.register``."""
        return self._table.register(method, pattern, target, name)

    @property
    def routes(self) -> tuple[RouteDefinition, ...]:
        """Registered routes in match order."""
        return self._table.routes

    def set_parameters_to_target(self, names: Collection[str]) -> None:
        """Set the captured parameter names that belong to the target."""
        self._target_keys = frozenset(names)

    @property
    def parameters_to_target(self) -> frozenset[str]:
        return self._target_keys

    def new_session(self) -> "Router":
        """Return a fresh router sharing this one's table, matcher, and settings."""
        session = Router(self._table, matcher=self._matcher, config=self._config)
        session._base_url = self._base_url
        session._target_keys = self._target_keys
        return session

    # -- Matching --

    def match(
        self,
        request_url: str | None = None,
        request_method: str | None = None,
    ) -> MatchResult:
        """Match a request and store the outcome on this router.

        Missing arguments are taken from the ambient request (see
        ``routekit.context``) and default to ``"/"`` and ``"GET"``.
        Returns the new ``MatchResult``, which is falsy if no route
        matched. A miss is not an error.
        """
        request = find_request()
        if request_url is None:
            request_url = request.url if request is not None else self._config.default_url
        if request_method is None:
            request_method = request.method if request is not None else self._config.default_method

        self._request_url = request_url
        self._request_method = request_method.upper()

        path, query = split_url(request_url)
        suffix = self._config.ajax_suffix
        if suffix and path.endswith(suffix):
            self._ajax = True
            path = path[: -len(suffix)] or "/"
            logger.debug("AJAX suffix on %s, matching %s", request_url, path)
        elif self._ajax_requested(query, request):
            self._ajax = True
            logger.debug("AJAX query parameter on %s", request_url)

        found = self._matcher.match(self._request_method, path, self._table.routes)
        if found is None:
            self._match = MatchResult()
            logger.debug("No route matches %s %s", self._request_method, path)
            return self._match

        route = found.route
        seed = route.target if isinstance(route.target, Mapping) else None
        resolution = resolve(found.params, route.name, self._target_keys, target=seed)
        resolution.match.route = route
        self._apply_controls(resolution.controls)
        self._match = resolution.match

        logger.debug(
            "Matched %s %s to %r (%s)", self._request_method, path, route.name, route.pattern
        )
        return self._match

    def _ajax_requested(self, query: QueryParams, request: Request | None) -> bool:
        param = self._config.ajax_query_param
        if not param:
            return False
        if param in query:
            return True
        return request is not None and param in request.query

    def _apply_controls(self, controls: Controls) -> None:
        if controls.ajax:
            self._ajax = True
        if controls.format is not None:
            # Captured formats are taken as they come; only explicit assignment validates
            self._format = controls.format

    # -- Accessors --

    @property
    def current_match(self) -> MatchResult:
        return self._match

    @property
    def current_route(self) -> str | None:
        """Name of the matched route, ``None`` if unnamed or nothing matched."""
        return self._match.name

    @property
    def request_url(self) -> str:
        return self._request_url

    @property
    def request_method(self) -> str:
        return self._request_method

    @property
    def is_ajax(self) -> bool:
        return self._ajax

    @property
    def format(self) -> str:
        """The requested output format."""
        return self._format

    @format.setter
    def format(self, value: str) -> None:
        allowed = self._config.allowed_formats
        normalized = value.lower()
        if normalized not in allowed:
            raise InvalidFormatError(value, allowed)
        self._format = normalized

    def get_format(self) -> str:
        return self._format

    def set_format(self, value: str) -> None:
        """Set the output format. Raises ``InvalidFormatError`` if not allowed."""
        self.format = value

    def get_param(self, key: str, default: Any = None) -> Any:
        """Return a captured parameter, or *default* if missing or empty."""
        value = self._match.params.get(key)
        if value is None or value == "":
            return default
        return value

    def set_param(self, key: str, value: Any) -> None:
        """Set a parameter on the current match.

        Raises ``EmptyParameterNameError`` if *key* is empty.
        """
        if not key:
            raise EmptyParameterNameError
        self._match.params[key] = value

    @property
    def params(self) -> dict[str, Any]:
        """Copy of the current match's public params."""
        return dict(self._match.params)

    def get_target(self, key: str, default: Any = None) -> Any:
        """Return one dispatch target value (``"app"``, ``"controller"``, ...)."""
        value = self._match.target.get(key)
        if value is None or value == "":
            return default
        return value

    @property
    def target(self) -> dict[str, Any]:
        """Copy of the current match's dispatch target."""
        return dict(self._match.target)

    def status(self) -> dict[str, Any]:
        """Snapshot of the request-related state, for diagnostics and logging."""
        return {
            "url": self._request_url,
            "route": self.current_route,
            "ajax": self._ajax,
            "method": self._request_method,
            "format": self._format,
            "match": self._match.as_dict(),
        }

    # -- URL generation --

    @property
    def base_url(self) -> str:
        """Prefix for generated URLs."""
        return self._base_url

    @base_url.setter
    def base_url(self, value: str) -> None:
        self._base_url = value

    def get_base_url(self) -> str:
        return self._base_url

    def set_base_url(self, value: str) -> None:
        self._base_url = value

    def url_for(self, name: str, params: Mapping[str, Any] | None = None, **kwargs: Any) -> str:
        """Build the URL of the route called *name*.

        Raises ``UnknownRouteNameError`` if no route has that name.
        """
        pattern = self._table.resolve_pattern(name)
        url = self._matcher.generate(pattern, {**(params or {}), **kwargs})
        if self._base_url:
            url = self._base_url.rstrip("/") + url
        return url

    generate = url_for

    # -- Uniform key view over the current match --

    def _check_key(self, key: str) -> None:
        if key not in MATCH_FIELDS:
            msg = f"{key!r} is not a match field; expected one of {', '.join(MATCH_FIELDS)}"
            raise KeyError(msg)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str) or key not in MATCH_FIELDS:
            return False
        value = getattr(self._match, key)
        return value not in (None, "", {})

    def __getitem__(self, key: str) -> Any:
        self._check_key(key)
        return getattr(self._match, key)

    def __setitem__(self, key: str, value: Any) -> None:
        self._check_key(key)
        if key == "name":
            if value is not None and not isinstance(value, str):
                msg = f"Route name must be a string, got {type(value).__name__}"
                raise TypeError(msg)
            self._match.name = value
            return
        if not isinstance(value, Mapping):
            msg = f"Match {key!r} must be a mapping, got {type(value).__name__}"
            raise TypeError(msg)
        setattr(self._match, key, dict(value))

    def __delitem__(self, key: str) -> None:
        self._check_key(key)
        self._match.reset(key)

    def get(self, key: str, default: Any = None) -> Any:
        """Return a match field, or *default* if it is unset or not a field."""
        if key not in self:
            return default
        return getattr(self._match, key)

    def __repr__(self) -> str:
        return (
            f"<Router route={self.current_route!r} ajax={self._ajax} "
            f"format={self._format!r} routes={len(self._table)}>"
        )
