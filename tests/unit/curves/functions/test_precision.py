"""Tests for precision preservation across curve functions."""

from __future__ import annotations

import numpy as np
import pytest

from tweenease.core.curves import CURVE_FUNCTIONS
from tweenease.core.curves.functions import (
    in_cubic,
    in_out_bounce,
    in_out_exponential,
    in_sine,
    linear,
    preserve_precision,
)


class TestPreservePrecision:
    """Tests for the preserve_precision decorator."""

    def test_python_float_in_python_float_out(self) -> None:
        assert type(in_cubic(0.5)) is float
        assert type(in_sine(0.5)) is float

    def test_int_input_promoted_to_float(self) -> None:
        """Python ints come back as Python floats."""
        result = in_cubic(2)
        assert type(result) is float
        assert result == 8.0

    @pytest.mark.parametrize("dtype", [np.float32, np.float64])
    @pytest.mark.parametrize("curve", list(CURVE_FUNCTIONS.values()))
    def test_numpy_scalar_type_preserved(self, curve, dtype) -> None:
        """Every curve returns the numpy scalar type it was given."""
        assert type(curve(dtype(0.3))) is dtype

    def test_float32_close_to_float64(self) -> None:
        """Single precision results agree with double precision ones."""
        for p in (0.1, 0.4, 0.6, 0.9):
            assert float(in_out_bounce(np.float32(p))) == pytest.approx(
                in_out_bounce(p), abs=1e-5
            )

    def test_passthrough_keeps_precision(self) -> None:
        """Boundary passthrough values keep the input's type."""
        result = in_out_exponential(np.float32(1.0))
        assert type(result) is np.float32
        assert result == np.float32(1.0)

    def test_linear_float32_is_exact(self) -> None:
        p = np.float32(0.3)
        assert linear(p) == p

    def test_wraps_metadata(self) -> None:
        """Decorated curves keep their name and docstring."""

        @preserve_precision
        def double(p):
            """Twice the input."""
            return 2 * p

        assert double.__name__ == "double"
        assert double.__doc__ == "Twice the input."
        assert double(np.float32(1.5)) == np.float32(3.0)
