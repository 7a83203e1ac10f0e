"""routekit — request routing with ordered route tables and dispatch targets.

Picks the route for a request, strips control parameters (``ajax``,
``format``) out of the captured values, and moves dispatch keys
(``app``, ``controller``, ``action``, ...) into the match target.

Basic usage::

    from routekit import RouteTable, Router, RouterConfig

    table = RouteTable()
    table.register("GET", "/{controller}/{action}/{id:int}", {"app": "shop"}, name="shop.item")
    table.freeze()

    router = Router(table, config=RouterConfig(parameters_to_target=("controller", "action")))
    router.match("/cart/view/7/ajax", "GET")
    router.is_ajax                  # True
    router.get_target("controller") # "cart"
    router.params                   # {"id": "7"}
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DuplicateRouteNameError",
    "EmptyParameterNameError",
    "InvalidFormatError",
    "MatchResult",
    "PathMatcher",
    "PatternMatcher",
    "Request",
    "RouteDefinition",
    "RouteTable",
    "Router",
    "RouterConfig",
    "RouterError",
    "RouterMiddleware",
    "UnknownRouteNameError",
    "get_instance",
    "get_request",
    "get_router",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routekit`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from routekit.router import Router

        return Router

    if name == "RouterConfig":
        from routekit.config import RouterConfig

        return RouterConfig

    if name == "RouteTable":
        from routekit.routing.table import RouteTable

        return RouteTable

    if name in ("RouteDefinition", "MatchResult"):
        from routekit.routing import route as _route

        return getattr(_route, name)

    if name in ("PathMatcher", "PatternMatcher"):
        from routekit.routing import matcher as _matcher

        return getattr(_matcher, name)

    if name == "Request":
        from routekit.http.request import Request

        return Request

    if name == "RouterMiddleware":
        from routekit.asgi import RouterMiddleware

        return RouterMiddleware

    if name in ("get_instance", "get_request", "get_router"):
        from routekit import context as _ctx

        return getattr(_ctx, name)

    if name in (
        "ConfigurationError",
        "DuplicateRouteNameError",
        "EmptyParameterNameError",
        "InvalidFormatError",
        "RouterError",
        "UnknownRouteNameError",
    ):
        from routekit import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
