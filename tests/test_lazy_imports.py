"""Tests for routekit.__init__ — lazy import registry covers all public names."""

import pytest

import routekit


@pytest.mark.parametrize("name", routekit.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(routekit, name)
    assert obj is not None, f"routekit.{name} resolved to None"


def test_unknown_name_raises_attribute_error() -> None:
    """Accessing an unregistered name raises AttributeError."""
    with pytest.raises(AttributeError, match="no attribute"):
        routekit.__getattr__("ThisDoesNotExist")
