"""Curve lookup by tag or by name.

The lookup table is a read-only mapping built at import time. Lookups that
return ``None`` on a miss never raise; :func:`require_curve` is the strict
variant for callers that must fail loudly.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any

from tweenease.core.curves import functions as fn
from tweenease.core.curves.errors import UnknownCurveError
from tweenease.core.curves.functions import EaseFn
from tweenease.core.curves.library import EaseFunction
from tweenease.core.curves.names import consume_prefix_ignore_case, equals_ignore_case
from tweenease.core.curves.taxonomy import EaseFamily, EaseVariant, find_curve
from tweenease.core.utils.logging import get_logger

logger = logging.getLogger(__name__)

CURVE_FUNCTIONS: MappingProxyType[EaseFunction, EaseFn] = MappingProxyType(
    {
        EaseFunction.LINEAR: fn.linear,
        EaseFunction.IN_QUADRATIC: fn.in_quadratic,
        EaseFunction.OUT_QUADRATIC: fn.out_quadratic,
        EaseFunction.IN_OUT_QUADRATIC: fn.in_out_quadratic,
        EaseFunction.IN_CUBIC: fn.in_cubic,
        EaseFunction.OUT_CUBIC: fn.out_cubic,
        EaseFunction.IN_OUT_CUBIC: fn.in_out_cubic,
        EaseFunction.IN_QUARTIC: fn.in_quartic,
        EaseFunction.OUT_QUARTIC: fn.out_quartic,
        EaseFunction.IN_OUT_QUARTIC: fn.in_out_quartic,
        EaseFunction.IN_QUINTIC: fn.in_quintic,
        EaseFunction.OUT_QUINTIC: fn.out_quintic,
        EaseFunction.IN_OUT_QUINTIC: fn.in_out_quintic,
        EaseFunction.IN_SINE: fn.in_sine,
        EaseFunction.OUT_SINE: fn.out_sine,
        EaseFunction.IN_OUT_SINE: fn.in_out_sine,
        EaseFunction.IN_CIRCULAR: fn.in_circular,
        EaseFunction.OUT_CIRCULAR: fn.out_circular,
        EaseFunction.IN_OUT_CIRCULAR: fn.in_out_circular,
        EaseFunction.IN_EXPONENTIAL: fn.in_exponential,
        EaseFunction.OUT_EXPONENTIAL: fn.out_exponential,
        EaseFunction.IN_OUT_EXPONENTIAL: fn.in_out_exponential,
        EaseFunction.IN_ELASTIC: fn.in_elastic,
        EaseFunction.OUT_ELASTIC: fn.out_elastic,
        EaseFunction.IN_OUT_ELASTIC: fn.in_out_elastic,
        EaseFunction.IN_BACK: fn.in_back,
        EaseFunction.OUT_BACK: fn.out_back,
        EaseFunction.IN_OUT_BACK: fn.in_out_back,
        EaseFunction.IN_BOUNCE: fn.in_bounce,
        EaseFunction.OUT_BOUNCE: fn.out_bounce,
        EaseFunction.IN_OUT_BOUNCE: fn.in_out_bounce,
    }
)

_TAGS_BY_FUNCTION: MappingProxyType[Any, EaseFunction] = MappingProxyType(
    {f: tag for tag, f in CURVE_FUNCTIONS.items()}
)

# Families that take an in/out prefix, i.e. everything except linear.
_PREFIXED_FAMILIES = tuple(f for f in EaseFamily if f is not EaseFamily.LINEAR)


def resolve_by_tag(tag: EaseFunction | str) -> EaseFn | None:
    """Get the curve function for a tag.

    Args:
        tag: An EaseFunction member or its value (e.g. "in_out_cubic").

    Returns:
        The curve function, or None for values outside the enumeration.
    """
    try:
        key = EaseFunction(tag)
    except ValueError:
        get_logger(__name__, curve=tag).debug("No easing curve for tag %r", tag)
        return None
    return CURVE_FUNCTIONS.get(key)


def _match_family(name: str, variant: EaseVariant) -> EaseFunction | None:
    for family in _PREFIXED_FAMILIES:
        if equals_ignore_case(name, family.value):
            return find_curve(family, variant)
    return None


def _parse_name(name: str) -> EaseFunction | None:
    if equals_ignore_case(name, "linear"):
        return EaseFunction.LINEAR

    rest = consume_prefix_ignore_case(name, "in")
    if rest is not None:
        after_out = consume_prefix_ignore_case(rest, "out")
        if after_out is not None:
            return _match_family(after_out, EaseVariant.IN_OUT)
        return _match_family(rest, EaseVariant.IN)

    rest = consume_prefix_ignore_case(name, "out")
    if rest is not None:
        return _match_family(rest, EaseVariant.OUT)

    return None


def resolve_by_name(name: str) -> EaseFn | None:
    """Get the curve function for a free-form name.

    Any casing is accepted, as are spaces, ``-`` and ``_`` after the "in" and
    "out" prefixes, so "IN_CUBIC", "InCubic" and "in cubic" are the same curve.

    Args:
        name: Curve name.

    Returns:
        The curve function, or None if the name matches no curve.

    Example:
        >>> resolve_by_name("in-out-bounce") is resolve_by_tag(EaseFunction.IN_OUT_BOUNCE)
        True
        >>> resolve_by_name("inside") is None
        True
    """
    if not isinstance(name, str):
        logger.debug("Curve name must be a string, got %s", type(name).__name__)
        return None

    tag = _parse_name(name)
    if tag is None:
        get_logger(__name__, curve=name).debug("No easing curve named %r", name)
        return None
    return CURVE_FUNCTIONS[tag]


def get_curve(identifier: EaseFunction | str) -> EaseFn | None:
    """Get a curve function from a tag or a name.

    EaseFunction members are looked up by tag, anything else by name.
    """
    if isinstance(identifier, EaseFunction):
        return resolve_by_tag(identifier)
    return resolve_by_name(identifier)


def require_curve(identifier: EaseFunction | str) -> EaseFn:
    """Get a curve function from a tag or a name.

    Raises:
        UnknownCurveError: If the identifier matches no curve.
    """
    curve = get_curve(identifier)
    if curve is None:
        raise UnknownCurveError(identifier)
    return curve


def identify(curve: Any) -> EaseFunction | None:
    """Get the tag of a built-in curve function, or None for other callables."""
    try:
        return _TAGS_BY_FUNCTION.get(curve)
    except TypeError:
        return None
