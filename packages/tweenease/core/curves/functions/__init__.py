"""Easing curve functions.

Every function maps a progress value (nominally in [0, 1]) to an eased value
and returns it in the input's precision.
"""

from tweenease.core.curves.functions._precision import EaseFn, Progress, preserve_precision
from tweenease.core.curves.functions.dynamic import (
    in_bounce,
    in_elastic,
    in_exponential,
    in_out_bounce,
    in_out_elastic,
    in_out_exponential,
    out_bounce,
    out_elastic,
    out_exponential,
)
from tweenease.core.curves.functions.polynomial import (
    in_cubic,
    in_out_cubic,
    in_out_quadratic,
    in_out_quartic,
    in_out_quintic,
    in_quadratic,
    in_quartic,
    in_quintic,
    linear,
    out_cubic,
    out_quadratic,
    out_quartic,
    out_quintic,
)
from tweenease.core.curves.functions.trigonometric import (
    in_back,
    in_circular,
    in_out_back,
    in_out_circular,
    in_out_sine,
    in_sine,
    out_back,
    out_circular,
    out_sine,
)

__all__ = [
    "EaseFn",
    "Progress",
    "preserve_precision",
    "linear",
    "in_quadratic",
    "out_quadratic",
    "in_out_quadratic",
    "in_cubic",
    "out_cubic",
    "in_out_cubic",
    "in_quartic",
    "out_quartic",
    "in_out_quartic",
    "in_quintic",
    "out_quintic",
    "in_out_quintic",
    "in_sine",
    "out_sine",
    "in_out_sine",
    "in_circular",
    "out_circular",
    "in_out_circular",
    "in_exponential",
    "out_exponential",
    "in_out_exponential",
    "in_elastic",
    "out_elastic",
    "in_out_elastic",
    "in_back",
    "out_back",
    "in_out_back",
    "in_bounce",
    "out_bounce",
    "in_out_bounce",
]
