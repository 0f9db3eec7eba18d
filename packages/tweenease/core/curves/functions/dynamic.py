"""Exponential, elastic and bounce easing curves.

The exponential and elastic shapes use ``squared(10 * ...)`` where the classic
easing formulas use ``2 ** (10 * ...)``. This changes their output (for
example ``in_exponential(1) == 0`` and the in-out variants jump at 0.5) and is
kept as the library's defined behavior.
"""

from __future__ import annotations

from tweenease.core.curves.functions._precision import HALF_PI, preserve_precision, sin, squared


@preserve_precision
def in_exponential(p):
    """Modeled after the exponential y = 2^(10(x - 1)), with p = 0 passed through."""
    if p == 0.0:
        return p
    return squared(10 * (p - 1))


@preserve_precision
def out_exponential(p):
    """Modeled after the exponential y = -2^(-10x) + 1, with p = 1 passed through."""
    if p == 1.0:
        return p
    return 1 - squared(-10 * p)


@preserve_precision
def in_out_exponential(p):
    """Piecewise exponential.

    y = (1/2)2^(10(2x - 1))         ; [0, 0.5)
    y = -(1/2)*2^(-10(2x - 1)) + 1  ; [0.5, 1]

    Both endpoints are passed through unchanged.
    """
    if p == 0.0 or p == 1.0:
        return p
    if p < 0.5:
        return 0.5 * squared((20 * p) - 10)
    return -0.5 * squared((-20 * p) + 10) + 1


@preserve_precision
def in_elastic(p):
    """Modeled after the damped sine wave y = sin(13pi/2*x)*2^(10(x - 1))."""
    return sin(13 * HALF_PI * p) * squared(10 * (p - 1))


@preserve_precision
def out_elastic(p):
    """Modeled after the damped sine wave y = sin(-13pi/2*(x + 1))*2^(-10x) + 1."""
    return sin(-13 * HALF_PI * (p + 1)) * squared(-10 * p) + 1


@preserve_precision
def in_out_elastic(p):
    """Piecewise exponentially-damped sine wave.

    y = (1/2)*sin(13pi/2*(2x))*2^(10(2x - 1))               ; [0, 0.5)
    y = (1/2)*(sin(-13pi/2*((2x-1)+1))*2^(-10(2x-1)) + 2)   ; [0.5, 1]
    """
    if p < 0.5:
        return 0.5 * sin(13 * HALF_PI * (2 * p)) * squared(10 * ((2 * p) - 1))
    return 0.5 * (sin(-13 * HALF_PI * ((2 * p - 1) + 1)) * squared(-10 * (2 * p - 1)) + 2)


def _out_bounce(p):
    # Four parabolic arcs meeting at y = 1 on 4/11, 8/11 and 9/10.
    if p < 4 / 11.0:
        return (121 * p * p) / 16.0
    if p < 8 / 11.0:
        return (363 / 40.0 * p * p) - (99 / 10.0 * p) + 17 / 5.0
    if p < 9 / 10.0:
        return (4356 / 361.0 * p * p) - (35442 / 1805.0 * p) + 16061 / 1805.0
    return (54 / 5.0 * p * p) - (513 / 25.0 * p) + 268 / 25.0


def _in_bounce(p):
    return 1 - _out_bounce(1 - p)


@preserve_precision
def out_bounce(p):
    """Decaying bounce settling at 1."""
    return _out_bounce(p)


@preserve_precision
def in_bounce(p):
    """Mirror of :func:`out_bounce`: ``1 - out_bounce(1 - p)``."""
    return _in_bounce(p)


@preserve_precision
def in_out_bounce(p):
    """Half-scaled in-bounce on [0, 0.5), half-scaled and offset out-bounce on [0.5, 1]."""
    if p < 0.5:
        return 0.5 * _in_bounce(p * 2)
    return 0.5 * _out_bounce(p * 2 - 1) + 0.5
