"""Tweenease: easing curve functions with tag and name lookup."""

from tweenease.core.curves import (
    EaseFamily,
    EaseFunction,
    EaseVariant,
    UnknownCurveError,
    get_curve,
    require_curve,
    resolve_by_name,
    resolve_by_tag,
)

__all__ = [
    "EaseFamily",
    "EaseFunction",
    "EaseVariant",
    "UnknownCurveError",
    "get_curve",
    "require_curve",
    "resolve_by_name",
    "resolve_by_tag",
]
