"""Easing curves, taxonomy and lookup."""

from tweenease.core.curves.errors import UnknownCurveError
from tweenease.core.curves.library import EaseFunction
from tweenease.core.curves.registry import (
    CURVE_FUNCTIONS,
    get_curve,
    identify,
    require_curve,
    resolve_by_name,
    resolve_by_tag,
)
from tweenease.core.curves.taxonomy import EaseFamily, EaseVariant

__all__ = [
    "CURVE_FUNCTIONS",
    "EaseFamily",
    "EaseFunction",
    "EaseVariant",
    "UnknownCurveError",
    "get_curve",
    "identify",
    "require_curve",
    "resolve_by_name",
    "resolve_by_tag",
]
