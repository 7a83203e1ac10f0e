"""Tests for routekit.routing.resolver — control keys, pruning, target promotion."""

from routekit.routing.resolver import CONTROL_KEYS, Controls, resolve


class TestControlKeys:
    def test_order(self) -> None:
        assert CONTROL_KEYS == ("ajax", "format")

    def test_first_control_key_wins(self) -> None:
        res = resolve({"ajax": "1", "format": "json", "id": "7"}, "app.item", set())

        assert res.controls.ajax is True
        assert res.controls.format is None
        assert res.match.params == {"id": "7"}

    def test_format_alone(self) -> None:
        res = resolve({"format": "xml", "id": "7"}, None, set())

        assert res.controls == Controls(ajax=None, format="xml")
        assert res.match.params == {"id": "7"}

    def test_no_control_keys(self) -> None:
        res = resolve({"id": "7"}, None, set())
        assert res.controls == Controls()

    def test_empty_control_value_is_not_present(self) -> None:
        res = resolve({"ajax": None, "format": "json"}, None, set())

        assert res.controls.ajax is None
        assert res.controls.format == "json"
        assert res.match.params == {}

    def test_control_keys_never_promoted(self) -> None:
        res = resolve({"format": "json"}, None, {"format"})
        assert res.match.target == {}
        assert res.match.params == {}


class TestPartitioning:
    def test_target_promotion(self) -> None:
        res = resolve(
            {"controller": "user", "action": "view", "id": "5"},
            "app.user",
            {"controller", "action"},
        )

        assert res.match.name == "app.user"
        assert res.match.target == {"controller": "user", "action": "view"}
        assert res.match.params == {"id": "5"}

    def test_empty_values_pruned(self) -> None:
        res = resolve({"id": "", "page": None, "q": "x"}, None, set())
        assert res.match.params == {"q": "x"}

    def test_empty_values_never_promoted(self) -> None:
        res = resolve({"controller": ""}, None, {"controller"})

        assert res.match.target == {}
        assert res.match.params == {}

    def test_zero_is_not_empty(self) -> None:
        res = resolve({"page": "0"}, None, set())
        assert res.match.params == {"page": "0"}

    def test_seed_target(self) -> None:
        res = resolve(
            {"action": "edit"},
            None,
            {"action"},
            target={"app": "shop", "action": "index"},
        )
        assert res.match.target == {"app": "shop", "action": "edit"}

    def test_input_not_mutated(self) -> None:
        raw = {"ajax": "1", "controller": "user", "id": ""}
        seed = {"app": "core"}
        resolve(raw, None, {"controller"}, target=seed)

        assert raw == {"ajax": "1", "controller": "user", "id": ""}
        assert seed == {"app": "core"}

    def test_match_has_no_route(self) -> None:
        # The resolver only partitions; the router attaches the route
        assert resolve({}, "x", set()).match.route is None
