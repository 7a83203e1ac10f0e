"""Match resolution — turn raw placeholder captures into a ``MatchResult``.

Some captured values steer the router instead of the application:
``ajax`` and ``format``. They are handled by a closed lookup of
control handlers and never reach the public params. Captures named in
the parameter-to-target set move into the dispatch target.

Only the first control key present is applied, in ``CONTROL_KEYS``
order, but every control key is removed from the params.
"""

from collections.abc import Callable, Collection, Mapping
from dataclasses import dataclass, field
from typing import Any

from routekit.routing.route import MatchResult


@dataclass(slots=True)
class Controls:
    """Control values collected from one match. ``None`` means untouched."""

    ajax: bool | None = None
    format: str | None = None


def _apply_ajax(controls: Controls, value: Any) -> None:
    controls.ajax = True


def _apply_format(controls: Controls, value: Any) -> None:
    controls.format = str(value)


# Ordered: the first key present wins
CONTROL_HANDLERS: dict[str, Callable[[Controls, Any], None]] = {
    "ajax": _apply_ajax,
    "format": _apply_format,
}

CONTROL_KEYS: tuple[str, ...] = tuple(CONTROL_HANDLERS)


@dataclass(slots=True)
class Resolution:
    """A resolved match plus the control values the router should apply."""

    match: MatchResult
    controls: Controls = field(default_factory=Controls)


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def resolve(
    raw_captures: Mapping[str, Any],
    name: str | None,
    target_keys: Collection[str],
    *,
    target: Mapping[str, Any] | None = None,
) -> Resolution:
    """Partition *raw_captures* into control values, target, and params.

    *target* seeds the match target (a route's own mapping target);
    promoted captures override seeded keys. *raw_captures* is copied,
    never mutated.
    """
    match = MatchResult(name=name, target=dict(target or {}), params=dict(raw_captures))
    controls = Controls()

    # An optional placeholder that captured nothing does not count as present
    for key in CONTROL_KEYS:
        if not _is_empty(match.params.get(key)):
            CONTROL_HANDLERS[key](controls, match.params[key])
            break
    for key in CONTROL_KEYS:
        match.params.pop(key, None)

    for key in list(match.params):
        value = match.params[key]
        if _is_empty(value):
            del match.params[key]
        elif key in target_keys:
            match.target[key] = match.params.pop(key)

    return Resolution(match=match, controls=controls)
