"""Tests for routekit.config — RouterConfig frozen dataclass."""

import pytest

from routekit.config import RouterConfig


class TestRouterConfig:
    def test_defaults(self) -> None:
        cfg = RouterConfig()

        assert cfg.base_url == ""
        assert cfg.default_format == "html"
        assert cfg.allowed_formats == ("html", "xml", "json", "file")
        assert cfg.parameters_to_target == ()
        assert cfg.ajax_suffix == "/ajax"
        assert cfg.ajax_query_param == "ajax"
        assert cfg.generic_prefix == "generic."
        assert cfg.default_method == "GET"
        assert cfg.default_url == "/"

    def test_override(self) -> None:
        cfg = RouterConfig(
            base_url="https://example.com",
            parameters_to_target=("controller", "action"),
            ajax_query_param=None,
        )

        assert cfg.base_url == "https://example.com"
        assert cfg.parameters_to_target == ("controller", "action")
        assert cfg.ajax_query_param is None

    def test_frozen(self) -> None:
        cfg = RouterConfig()

        with pytest.raises(AttributeError):
            cfg.base_url = "/x"  # type: ignore[misc]
