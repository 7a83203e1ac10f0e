"""Tests for routekit.routing.route — RouteDefinition, MatchResult, PathSegment."""

import pytest

from routekit.routing.route import MATCH_FIELDS, MatchResult, PathSegment, RouteDefinition


class TestPathSegment:
    def test_static(self) -> None:
        seg = PathSegment(value="/users")
        assert seg.is_param is False
        assert seg.param_name is None
        assert seg.param_type == "str"

    def test_frozen(self) -> None:
        seg = PathSegment(value="/users")
        with pytest.raises(AttributeError):
            seg.value = "other"  # type: ignore[misc]


class TestRouteDefinition:
    def test_creation(self) -> None:
        route = RouteDefinition("GET", "/users", "users.list")
        assert route.pattern == "/users"
        assert route.target == "users.list"
        assert route.name is None

    def test_methods_split_and_upper(self) -> None:
        route = RouteDefinition("get|Post", "/form", None)
        assert route.methods == frozenset({"GET", "POST"})
        assert route.allows("post")
        assert not route.allows("DELETE")

    @pytest.mark.parametrize(
        ("name", "generic"),
        [
            (None, True),
            ("", True),
            ("generic.login", True),
            ("app.user", False),
            ("user.generic.x", False),
        ],
    )
    def test_is_generic(self, name: str | None, generic: bool) -> None:
        assert RouteDefinition("GET", "/", None, name).is_generic() is generic

    def test_frozen(self) -> None:
        route = RouteDefinition("GET", "/", None)
        with pytest.raises(AttributeError):
            route.pattern = "/other"  # type: ignore[misc]


class TestMatchResult:
    def test_empty_is_falsy(self) -> None:
        result = MatchResult()
        assert not result
        assert result.name is None
        assert result.target == {}
        assert result.params == {}
        assert result.route_target is None

    def test_matched_is_truthy_even_without_params(self) -> None:
        route = RouteDefinition("GET", "/", "home")
        result = MatchResult(route=route)
        assert result
        assert result.route_target == "home"

    def test_fresh_dicts_per_instance(self) -> None:
        a = MatchResult()
        b = MatchResult()
        a.params["x"] = "1"
        assert b.params == {}

    def test_reset(self) -> None:
        result = MatchResult(name="n", target={"a": "b"}, params={"id": "1"})
        for key in MATCH_FIELDS:
            result.reset(key)
        assert result.name is None
        assert result.target == {}
        assert result.params == {}

    def test_reset_unknown_key(self) -> None:
        with pytest.raises(KeyError):
            MatchResult().reset("route")

    def test_as_dict_is_a_copy(self) -> None:
        result = MatchResult(name="n", params={"id": "1"})
        snapshot = result.as_dict()
        snapshot["params"]["id"] = "2"
        assert snapshot == {"name": "n", "target": {}, "params": {"id": "2"}}
        assert result.params == {"id": "1"}
