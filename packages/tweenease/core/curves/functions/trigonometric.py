"""Sine, circular and back (overshooting cubic) easing curves."""

from __future__ import annotations

import math

from tweenease.core.curves.functions._precision import HALF_PI, cos, preserve_precision, sin, sqrt


@preserve_precision
def in_sine(p):
    """Modeled after a quarter-cycle of a sine wave."""
    return sin((p - 1) * HALF_PI) + 1


@preserve_precision
def out_sine(p):
    """Modeled after a quarter-cycle of a sine wave (different phase)."""
    return sin(p * HALF_PI)


@preserve_precision
def in_out_sine(p):
    """Modeled after a half sine wave."""
    return 0.5 * (1 - cos(p * math.pi))


@preserve_precision
def in_circular(p):
    """Modeled after the shifted quadrant IV of the unit circle."""
    return 1 - sqrt(1 - (p * p))


@preserve_precision
def out_circular(p):
    """Modeled after the shifted quadrant II of the unit circle."""
    return sqrt((2 - p) * p)


@preserve_precision
def in_out_circular(p):
    """Piecewise circular.

    y = (1/2)(1 - sqrt(1 - 4x^2))           ; [0, 0.5)
    y = (1/2)(sqrt(-(2x - 3)*(2x - 1)) + 1) ; [0.5, 1]
    """
    if p < 0.5:
        return 0.5 * (1 - sqrt(1 - 4 * (p * p)))
    return 0.5 * (sqrt(-((2 * p) - 3) * ((2 * p) - 1)) + 1)


@preserve_precision
def in_back(p):
    """Modeled after the overshooting cubic y = x^3 - x*sin(x*pi)."""
    return p * p * p - p * sin(p * math.pi)


@preserve_precision
def out_back(p):
    """Modeled after the overshooting cubic y = 1 - ((1-x)^3 - (1-x)*sin((1-x)*pi))."""
    f = 1 - p
    return 1 - (f * f * f - f * sin(f * math.pi))


@preserve_precision
def in_out_back(p):
    """Piecewise overshooting cubic.

    y = (1/2)*((2x)^3 - (2x)*sin(2*x*pi))                ; [0, 0.5)
    y = (1/2)*(1 - ((1-x)^3 - (1-x)*sin((1-x)*pi))) + 1/2 ; [0.5, 1]
    """
    if p < 0.5:
        f = 2 * p
        return 0.5 * (f * f * f - f * sin(f * math.pi))
    f = 1 - (2 * p - 1)
    return 0.5 * (1 - (f * f * f - f * sin(f * math.pi))) + 0.5
