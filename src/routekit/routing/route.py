"""RouteDefinition, MatchResult, and PathSegment."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed piece of a route pattern.

    Static:  ``/users``  (is_param=False)
    Param:   ``/{id}``   (is_param=True, param_name="id")
    Typed:   ``/{id:int}`` (is_param=True, param_name="id", param_type="int")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str = "str"


@dataclass(frozen=True, slots=True)
class RouteDefinition:
    """A frozen route definition.

    ``method`` is a single verb or several joined with ``|``
    (``"GET|POST"``). ``target`` is opaque to the router.
    """

    method: str
    pattern: str
    target: Any
    name: str | None = None

    @property
    def methods(self) -> frozenset[str]:
        """Upper-cased verbs this route answers to."""
        return frozenset(m.strip().upper() for m in self.method.split("|") if m.strip())

    def allows(self, method: str) -> bool:
        return method.upper() in self.methods

    def is_generic(self, prefix: str = "generic.") -> bool:
        """True for unnamed routes and routes named with the generic prefix."""
        return not self.name or self.name.startswith(prefix)


MATCH_FIELDS: tuple[str, ...] = ("name", "target", "params")
"""Keys exposed by the router's uniform key view over a match."""


@dataclass(slots=True)
class MatchResult:
    """The outcome of one ``Router.match()`` call.

    Falsy when no route matched. The shape is fixed: ``name``,
    ``target`` and ``params``. A fresh instance replaces the previous
    one on every match.
    """

    name: str | None = None
    target: dict[str, Any] = field(default_factory=dict)
    params: dict[str, Any] = field(default_factory=dict)
    route: RouteDefinition | None = field(default=None, repr=False)

    def __bool__(self) -> bool:
        return self.route is not None

    @property
    def route_target(self) -> Any:
        """The matched route's own target, whatever its type."""
        if self.route is None:
            return None
        return self.route.target

    def reset(self, key: str) -> None:
        """Put one field back to its empty value."""
        if key == "name":
            self.name = None
        elif key == "target":
            self.target = {}
        elif key == "params":
            self.params = {}
        else:
            raise KeyError(key)

    def as_dict(self) -> dict[str, Any]:
        """Snapshot copy for diagnostics."""
        return {
            "name": self.name,
            "target": dict(self.target),
            "params": dict(self.params),
        }
