"""Tests for curve identifiers."""

from __future__ import annotations

import pytest

from tweenease import EaseFunction as PublicEaseFunction
from tweenease.core.curves.library import EaseFunction


class TestEaseFunction:
    """Tests for EaseFunction enum."""

    def test_member_count(self) -> None:
        """Linear plus ten families of three variants."""
        assert len(EaseFunction) == 31

    def test_values_are_snake_case(self) -> None:
        for tag in EaseFunction:
            assert tag.value == tag.name.lower()

    def test_is_str_enum(self) -> None:
        assert EaseFunction.IN_CUBIC == "in_cubic"

    def test_lookup_by_value(self) -> None:
        assert EaseFunction("out_bounce") is EaseFunction.OUT_BOUNCE

    def test_unknown_value_raises(self) -> None:
        with pytest.raises(ValueError):
            EaseFunction("in_cubic_spline")

    def test_exported_from_package_root(self) -> None:
        assert PublicEaseFunction is EaseFunction
