"""Identifiers for the built-in easing curves."""

from __future__ import annotations

from enum import Enum


class EaseFunction(str, Enum):
    """Identifiers for built-in easing curves.

    The value of each member is its snake_case name, which is also accepted by
    name lookup.
    """

    LINEAR = "linear"

    IN_QUADRATIC = "in_quadratic"
    OUT_QUADRATIC = "out_quadratic"
    IN_OUT_QUADRATIC = "in_out_quadratic"

    IN_CUBIC = "in_cubic"
    OUT_CUBIC = "out_cubic"
    IN_OUT_CUBIC = "in_out_cubic"

    IN_QUARTIC = "in_quartic"
    OUT_QUARTIC = "out_quartic"
    IN_OUT_QUARTIC = "in_out_quartic"

    IN_QUINTIC = "in_quintic"
    OUT_QUINTIC = "out_quintic"
    IN_OUT_QUINTIC = "in_out_quintic"

    IN_SINE = "in_sine"
    OUT_SINE = "out_sine"
    IN_OUT_SINE = "in_out_sine"

    IN_CIRCULAR = "in_circular"
    OUT_CIRCULAR = "out_circular"
    IN_OUT_CIRCULAR = "in_out_circular"

    IN_EXPONENTIAL = "in_exponential"
    OUT_EXPONENTIAL = "out_exponential"
    IN_OUT_EXPONENTIAL = "in_out_exponential"

    IN_ELASTIC = "in_elastic"
    OUT_ELASTIC = "out_elastic"
    IN_OUT_ELASTIC = "in_out_elastic"

    IN_BACK = "in_back"  # Pulls back before moving (anticipation)
    OUT_BACK = "out_back"  # Overshoots target then settles
    IN_OUT_BACK = "in_out_back"

    IN_BOUNCE = "in_bounce"
    OUT_BOUNCE = "out_bounce"
    IN_OUT_BOUNCE = "in_out_bounce"
