"""Tests for curve sample models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tweenease.core.curves.models import CurvePoint


class TestCurvePoint:
    """Tests for CurvePoint model."""

    def test_create(self) -> None:
        point = CurvePoint(t=0.5, v=0.25)
        assert point.t == 0.5
        assert point.v == 0.25

    def test_value_may_overshoot(self) -> None:
        """Values outside [0, 1] are allowed for overshooting curves."""
        assert CurvePoint(t=0.5, v=1.375).v == 1.375
        assert CurvePoint(t=0.5, v=-24.0).v == -24.0

    @pytest.mark.parametrize("t", [-0.1, 1.1])
    def test_time_outside_unit_range_rejected(self, t: float) -> None:
        with pytest.raises(ValidationError):
            CurvePoint(t=t, v=0.0)

    def test_is_frozen(self) -> None:
        point = CurvePoint(t=0.0, v=0.0)
        with pytest.raises(ValidationError):
            point.v = 1.0  # type: ignore[misc]

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            CurvePoint(t=0.0, v=0.0, w=1.0)  # type: ignore[call-arg]
