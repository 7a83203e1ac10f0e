"""routekit exception hierarchy.

Shared across RouteTable, Router, and the ASGI glue so every module
raises and catches the same types. All errors surface synchronously to
the direct caller; a request that matches no route is not an error.
"""


class RouterError(Exception):
    """Base for all routekit-specific errors."""


class ConfigurationError(RouterError):
    """Raised when the route table or router is set up incorrectly.

    Typically raised at startup: a malformed pattern, an unknown
    placeholder type, or a registration after the table was frozen.
    """


class DuplicateRouteNameError(RouterError):
    """A route name was registered twice.

    Fatal at startup. The table keeps the first registration.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Can not redeclare route {name!r}")


class UnknownRouteNameError(RouterError):
    """No route is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Route {name!r} does not exist")


class InvalidFormatError(RouterError, ValueError):
    """The requested output format is not one of the allowed formats.

    The router keeps its previous format when this is raised.
    """

    def __init__(self, value: str, allowed: tuple[str, ...]) -> None:
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Format {value!r} is not an allowed format. Use one of: {', '.join(allowed)}"
        )


class EmptyParameterNameError(RouterError, ValueError):
    """A parameter was set with an empty name."""

    def __init__(self) -> None:
        super().__init__("Empty parameter names are not allowed. Provide a proper name.")
