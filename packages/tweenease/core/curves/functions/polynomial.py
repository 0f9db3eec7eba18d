"""Linear and polynomial easing curves (quadratic through quintic).

Each in-out curve evaluates the scaled "in" shape on [0, 0.5) and the scaled
"out" shape on [0.5, 1]. Inputs outside [0, 1] are extrapolated with the same
formula, never clamped.
"""

from __future__ import annotations

from tweenease.core.curves.functions._precision import preserve_precision


@preserve_precision
def linear(p):
    """Modeled after the line y = x."""
    return p


@preserve_precision
def in_quadratic(p):
    """Modeled after the parabola y = x^2."""
    return p * p


@preserve_precision
def out_quadratic(p):
    """Modeled after the parabola y = -x^2 + 2x."""
    return -(p * (p - 2))


@preserve_precision
def in_out_quadratic(p):
    """Piecewise quadratic.

    y = (1/2)((2x)^2)             ; [0, 0.5)
    y = -(1/2)((2x-1)*(2x-3) - 1) ; [0.5, 1]
    """
    if p < 0.5:
        return 2 * p * p
    return (-2 * p * p) + (4 * p) - 1


@preserve_precision
def in_cubic(p):
    """Modeled after the cubic y = x^3."""
    return p * p * p


@preserve_precision
def out_cubic(p):
    """Modeled after the cubic y = (x - 1)^3 + 1."""
    f = p - 1
    return f * f * f + 1


@preserve_precision
def in_out_cubic(p):
    """Piecewise cubic.

    y = (1/2)((2x)^3)       ; [0, 0.5)
    y = (1/2)((2x-2)^3 + 2) ; [0.5, 1]
    """
    if p < 0.5:
        return 4 * p * p * p
    f = (2 * p) - 2
    return 0.5 * f * f * f + 1


@preserve_precision
def in_quartic(p):
    """Modeled after the quartic y = x^4."""
    return p * p * p * p


@preserve_precision
def out_quartic(p):
    """Modeled after the quartic y = 1 - (x - 1)^4."""
    f = p - 1
    return f * f * f * (1 - p) + 1


@preserve_precision
def in_out_quartic(p):
    """Piecewise quartic.

    y = (1/2)((2x)^4)        ; [0, 0.5)
    y = -(1/2)((2x-2)^4 - 2) ; [0.5, 1]
    """
    if p < 0.5:
        return 8 * p * p * p * p
    f = p - 1
    return -8 * f * f * f * f + 1


@preserve_precision
def in_quintic(p):
    """Modeled after the quintic y = x^5."""
    return p * p * p * p * p


@preserve_precision
def out_quintic(p):
    """Modeled after the quintic y = (x - 1)^5 + 1."""
    f = p - 1
    return f * f * f * f * f + 1


@preserve_precision
def in_out_quintic(p):
    """Piecewise quintic.

    y = (1/2)((2x)^5)       ; [0, 0.5)
    y = (1/2)((2x-2)^5 + 2) ; [0.5, 1]
    """
    if p < 0.5:
        return 16 * p * p * p * p * p
    f = (2 * p) - 2
    return 0.5 * f * f * f * f * f + 1
