"""Precision handling shared by the curve functions.

Curves accept Python floats and numpy float32/float64 scalars. The result is
returned in the caller's precision: numpy scalars come back as the same numpy
type, everything else as a Python float.
"""

from __future__ import annotations

import functools
import math
from collections.abc import Callable
from typing import Any, Protocol, TypeVar

import numpy as np

Progress = TypeVar("Progress", float, np.float32, np.float64)

HALF_PI = math.pi / 2


class EaseFn(Protocol):
    """A curve function mapping a progress value to an eased value."""

    __name__: str

    def __call__(self, p: Progress, /) -> Progress: ...


def preserve_precision(func: Callable[[Any], Any]) -> EaseFn:
    """Round a curve's result back to the precision of its input."""

    @functools.wraps(func)
    def wrapper(p):
        result = func(p)
        # np.float64 subclasses float, so numpy scalars are checked first
        if isinstance(p, np.floating):
            return p.dtype.type(result)
        return float(result)

    return wrapper  # type: ignore[return-value]


def squared(x: Any) -> Any:
    """Square of x, standing in for ``2 ** x`` in the exponential curves."""
    return x * x


# Transcendentals run in double precision. Outside the real domain numpy
# yields NaN with a RuntimeWarning instead of raising.
def sin(x: Any) -> np.float64:
    return np.sin(np.float64(x))


def cos(x: Any) -> np.float64:
    return np.cos(np.float64(x))


def sqrt(x: Any) -> np.float64:
    return np.sqrt(np.float64(x))
