"""Curve sampling helpers.

Evaluates an easing curve over a set of progress values, either as
:class:`CurvePoint` lists or as numpy arrays.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import numpy as np
from numpy.typing import DTypeLike, NDArray

from tweenease.core.curves.library import EaseFunction
from tweenease.core.curves.models import CurvePoint
from tweenease.core.curves.registry import require_curve

CurveSpec = EaseFunction | str | Callable[[Any], Any]


def sample_uniform_grid(n: int) -> list[float]:
    """Generate N evenly-spaced samples in [0, 1], endpoints included.

    Args:
        n: Number of samples to generate. Must be >= 2.

    Raises:
        ValueError: If n < 2.

    Example:
        >>> sample_uniform_grid(5)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    return [i / (n - 1) for i in range(n)]


def _as_callable(curve: CurveSpec) -> Callable[[Any], Any]:
    if isinstance(curve, (EaseFunction, str)):
        return require_curve(curve)
    if not callable(curve):
        raise TypeError(f"{type(curve).__name__} is not a curve identifier or callable")
    return curve


def sample_curve(curve: CurveSpec, n_samples: int) -> list[CurvePoint]:
    """Sample a curve on a uniform grid.

    Args:
        curve: Curve tag, curve name, or curve function.
        n_samples: Number of samples (must be >= 2).

    Returns:
        List of CurvePoints from t=0 to t=1.

    Raises:
        ValueError: If n_samples < 2.
        UnknownCurveError: If a tag or name matches no curve.
    """
    if n_samples < 2:
        raise ValueError("n_samples must be >= 2")

    ease = _as_callable(curve)
    return [CurvePoint(t=t, v=float(ease(t))) for t in sample_uniform_grid(n_samples)]


def evaluate(
    curve: CurveSpec,
    values: Iterable[float] | NDArray[np.floating],
    dtype: DTypeLike | None = None,
) -> NDArray[np.floating]:
    """Evaluate a curve at each progress value.

    Args:
        curve: Curve tag, curve name, or curve function.
        values: Progress values. Values outside [0, 1] are extrapolated.
        dtype: Output precision. Defaults to the dtype of ``values`` when it is
            a floating numpy array, float64 otherwise.

    Returns:
        1-D array of eased values in the requested precision.

    Example:
        >>> evaluate("in_quadratic", [0.0, 0.5, 1.0]).tolist()
        [0.0, 0.25, 1.0]
    """
    ease = _as_callable(curve)
    arr = np.asarray(values)
    if dtype is None:
        dtype = arr.dtype if np.issubdtype(arr.dtype, np.floating) else np.float64
    scalar = np.dtype(dtype).type
    return np.fromiter((ease(scalar(p)) for p in arr.ravel()), dtype=dtype, count=arr.size)
