"""Path matching — the ``PathMatcher`` protocol and its default implementation.

The router never looks inside a pattern. It hands patterns to a matcher
at registration time (``compile``), asks it for the first matching route
at request time (``match``), and asks it to fill a pattern back in for
URL generation (``generate``).

``PatternMatcher`` understands ``{name}`` and ``{name:type}``
placeholders. A trailing ``?`` makes a placeholder optional, together
with the ``/`` or ``.`` in front of it::

    "/users/{id:int}"            -> /users/42
    "/users/{id:int}.{format?}"  -> /users/42, /users/42.json
    "/files/{filepath:path}"     -> /files/docs/api/index.html
    "*"                          -> anything
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable
from urllib.parse import quote, urlencode

from routekit.errors import ConfigurationError
from routekit.routing.params import CONVERTERS, converter_regex
from routekit.routing.route import PathSegment, RouteDefinition

_PLACEHOLDER_RE = re.compile(r"\{(\w+)(?::(\w+))?(\?)?\}")
_OPTIONAL_SEPARATORS = ("/", ".")


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """A route pattern turned into a regex."""

    pattern: str
    regex: re.Pattern[str]
    segments: tuple[PathSegment, ...]

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(s.param_name for s in self.segments if s.is_param and s.param_name)


@dataclass(frozen=True, slots=True)
class PathMatch:
    """The route that matched and the raw values its placeholders captured."""

    route: RouteDefinition
    params: dict[str, str | None]


@runtime_checkable
class PathMatcher(Protocol):
    """What the router needs from a path matching engine."""

    def compile(self, pattern: str) -> CompiledPattern: ...

    def match(
        self, method: str, path: str, routes: Iterable[RouteDefinition]
    ) -> PathMatch | None: ...

    def generate(self, pattern: str, params: Mapping[str, Any]) -> str: ...


def parse_pattern(pattern: str) -> list[PathSegment]:
    """Split a route pattern into static text and placeholders.

    Examples::

        "/users"           -> [PathSegment("/users")]
        "/users/{id:int}"  -> [PathSegment("/users/"),
                               PathSegment("{id:int}", is_param=True,
                                           param_name="id", param_type="int")]
    """
    if "<" in pattern and ">" in pattern:
        msg = (
            f"Route pattern {pattern!r} uses <param> placeholders. "
            "Use {param} or {param:type} instead."
        )
        raise ConfigurationError(msg)

    segments: list[PathSegment] = []
    last_end = 0
    for m in _PLACEHOLDER_RE.finditer(pattern):
        if m.start() > last_end:
            segments.append(PathSegment(value=pattern[last_end : m.start()]))
        param_type = m.group(2) or "str"
        if param_type not in CONVERTERS:
            msg = f"Unknown placeholder type {param_type!r} in route pattern {pattern!r}"
            raise ConfigurationError(msg)
        segments.append(
            PathSegment(
                value=m.group(0),
                is_param=True,
                param_name=m.group(1),
                param_type=param_type,
            )
        )
        last_end = m.end()
    if last_end < len(pattern):
        segments.append(PathSegment(value=pattern[last_end:]))

    leftover = "".join(s.value for s in segments if not s.is_param)
    if "{" in leftover or "}" in leftover:
        msg = f"Malformed placeholder in route pattern {pattern!r}"
        raise ConfigurationError(msg)
    return segments


def _is_optional(segment: PathSegment) -> bool:
    return segment.is_param and segment.value.endswith("?}")


def _ends_with_separator(segment: PathSegment | None) -> bool:
    """True if *segment* is static text ending in an optional-placeholder separator."""
    return (
        segment is not None
        and not segment.is_param
        and segment.value.endswith(_OPTIONAL_SEPARATORS)
    )


def _normalize(path: str) -> str:
    # Root normalizes to the empty string so "/" and "/{x?}" line up
    return path.rstrip("/")


class PatternMatcher:
    """Default ``PathMatcher``: one anchored regex per pattern, first match wins.

    Usage::

        matcher = PatternMatcher()
        route = RouteDefinition("GET", "/users/{id:int}", "users.show")
        found = matcher.match("GET", "/users/42", [route])
        found.params  # {"id": "42"}
    """

    __slots__ = ("_cache",)

    def __init__(self) -> None:
        self._cache: dict[str, CompiledPattern] = {}

    def compile(self, pattern: str) -> CompiledPattern:
        """Compile *pattern*, reusing an earlier compilation when possible."""
        compiled = self._cache.get(pattern)
        if compiled is None:
            compiled = self._compile(pattern)
            self._cache[pattern] = compiled
        return compiled

    def _compile(self, pattern: str) -> CompiledPattern:
        if pattern == "*":
            return CompiledPattern(pattern=pattern, regex=re.compile(r"^.*$"), segments=())

        segments = parse_pattern(_normalize(pattern))
        seen: set[str] = set()
        parts: list[str] = []
        for i, seg in enumerate(segments):
            if not seg.is_param:
                text = seg.value
                nxt = segments[i + 1] if i + 1 < len(segments) else None
                # The separator in front of an optional placeholder is optional too
                if nxt is not None and _is_optional(nxt) and text.endswith(_OPTIONAL_SEPARATORS):
                    text = text[:-1]
                parts.append(re.escape(text))
                continue

            name = seg.param_name or ""
            if name in seen:
                msg = f"Placeholder {name!r} appears twice in route pattern {pattern!r}"
                raise ConfigurationError(msg)
            seen.add(name)

            group = f"(?P<{name}>{converter_regex(seg.param_type)})"
            if _is_optional(seg):
                prev = segments[i - 1] if i > 0 else None
                sep = re.escape(prev.value[-1]) if prev and _ends_with_separator(prev) else ""
                group = f"(?:{sep}{group})?"
            parts.append(group)

        regex = re.compile("^" + "".join(parts) + "$")
        return CompiledPattern(pattern=pattern, regex=regex, segments=tuple(segments))

    def match(
        self, method: str, path: str, routes: Iterable[RouteDefinition]
    ) -> PathMatch | None:
        """Return the first route in *routes* matching *method* and *path*.

        A query string on *path* is ignored. Trailing slashes are ignored.
        Returns ``None`` when nothing matches.
        """
        path = _normalize(path.partition("?")[0])
        method = method.upper()
        for route in routes:
            if not route.allows(method):
                continue
            m = self.compile(route.pattern).regex.match(path)
            if m is not None:
                return PathMatch(route=route, params=m.groupdict())
        return None

    def generate(self, pattern: str, params: Mapping[str, Any]) -> str:
        """Fill *pattern*'s placeholders from *params*.

        Optional placeholders without a value are dropped together with
        their separator. Parameters the pattern does not use are appended
        as a query string.

        Raises ``ValueError`` if a required placeholder has no value.
        """
        compiled = self.compile(pattern)
        if pattern == "*":
            return "/"

        used: set[str] = set()
        out: list[str] = []
        prev: PathSegment | None = None
        for seg in compiled.segments:
            last, prev = prev, seg
            if not seg.is_param:
                out.append(seg.value)
                continue
            name = seg.param_name or ""
            used.add(name)
            value = params.get(name)
            if value is None or value == "":
                if not _is_optional(seg):
                    msg = f"Missing value for placeholder {name!r} in route pattern {pattern!r}"
                    raise ValueError(msg)
                # Only a static separator goes away, never a placeholder value
                if _ends_with_separator(last):
                    out[-1] = out[-1][:-1]
                continue
            safe = "/" if seg.param_type == "path" else ""
            out.append(quote(str(value), safe=safe))

        url = "".join(out) or "/"
        extra = {k: v for k, v in params.items() if k not in used and v is not None}
        if extra:
            url = f"{url}?{urlencode(extra)}"
        return url
