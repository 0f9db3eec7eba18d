"""Curve taxonomy.

Classifies every curve by family and variant. Name lookup is built on top of
this table.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from tweenease.core.curves.library import EaseFunction


class EaseFamily(Enum):
    """Named curve shape shared by up to three variants."""

    LINEAR = "linear"
    QUADRATIC = "quadratic"
    CUBIC = "cubic"
    QUARTIC = "quartic"
    QUINTIC = "quintic"
    SINE = "sine"
    CIRCULAR = "circular"
    EXPONENTIAL = "exponential"
    ELASTIC = "elastic"
    BACK = "back"
    BOUNCE = "bounce"


class EaseVariant(Enum):
    """Which end(s) of the progress range a curve eases."""

    IN = "in"  # Eases at the start
    OUT = "out"  # Eases at the end
    IN_OUT = "in_out"  # Eases at both ends


CURVE_TAXONOMY: Mapping[EaseFunction, tuple[EaseFamily, EaseVariant | None]] = MappingProxyType(
    {
        EaseFunction.LINEAR: (EaseFamily.LINEAR, None),
        # Polynomial
        EaseFunction.IN_QUADRATIC: (EaseFamily.QUADRATIC, EaseVariant.IN),
        EaseFunction.OUT_QUADRATIC: (EaseFamily.QUADRATIC, EaseVariant.OUT),
        EaseFunction.IN_OUT_QUADRATIC: (EaseFamily.QUADRATIC, EaseVariant.IN_OUT),
        EaseFunction.IN_CUBIC: (EaseFamily.CUBIC, EaseVariant.IN),
        EaseFunction.OUT_CUBIC: (EaseFamily.CUBIC, EaseVariant.OUT),
        EaseFunction.IN_OUT_CUBIC: (EaseFamily.CUBIC, EaseVariant.IN_OUT),
        EaseFunction.IN_QUARTIC: (EaseFamily.QUARTIC, EaseVariant.IN),
        EaseFunction.OUT_QUARTIC: (EaseFamily.QUARTIC, EaseVariant.OUT),
        EaseFunction.IN_OUT_QUARTIC: (EaseFamily.QUARTIC, EaseVariant.IN_OUT),
        EaseFunction.IN_QUINTIC: (EaseFamily.QUINTIC, EaseVariant.IN),
        EaseFunction.OUT_QUINTIC: (EaseFamily.QUINTIC, EaseVariant.OUT),
        EaseFunction.IN_OUT_QUINTIC: (EaseFamily.QUINTIC, EaseVariant.IN_OUT),
        # Trigonometric
        EaseFunction.IN_SINE: (EaseFamily.SINE, EaseVariant.IN),
        EaseFunction.OUT_SINE: (EaseFamily.SINE, EaseVariant.OUT),
        EaseFunction.IN_OUT_SINE: (EaseFamily.SINE, EaseVariant.IN_OUT),
        EaseFunction.IN_CIRCULAR: (EaseFamily.CIRCULAR, EaseVariant.IN),
        EaseFunction.OUT_CIRCULAR: (EaseFamily.CIRCULAR, EaseVariant.OUT),
        EaseFunction.IN_OUT_CIRCULAR: (EaseFamily.CIRCULAR, EaseVariant.IN_OUT),
        EaseFunction.IN_BACK: (EaseFamily.BACK, EaseVariant.IN),
        EaseFunction.OUT_BACK: (EaseFamily.BACK, EaseVariant.OUT),
        EaseFunction.IN_OUT_BACK: (EaseFamily.BACK, EaseVariant.IN_OUT),
        # Dynamic
        EaseFunction.IN_EXPONENTIAL: (EaseFamily.EXPONENTIAL, EaseVariant.IN),
        EaseFunction.OUT_EXPONENTIAL: (EaseFamily.EXPONENTIAL, EaseVariant.OUT),
        EaseFunction.IN_OUT_EXPONENTIAL: (EaseFamily.EXPONENTIAL, EaseVariant.IN_OUT),
        EaseFunction.IN_ELASTIC: (EaseFamily.ELASTIC, EaseVariant.IN),
        EaseFunction.OUT_ELASTIC: (EaseFamily.ELASTIC, EaseVariant.OUT),
        EaseFunction.IN_OUT_ELASTIC: (EaseFamily.ELASTIC, EaseVariant.IN_OUT),
        EaseFunction.IN_BOUNCE: (EaseFamily.BOUNCE, EaseVariant.IN),
        EaseFunction.OUT_BOUNCE: (EaseFamily.BOUNCE, EaseVariant.OUT),
        EaseFunction.IN_OUT_BOUNCE: (EaseFamily.BOUNCE, EaseVariant.IN_OUT),
    }
)

_BY_FAMILY_AND_VARIANT: Mapping[tuple[EaseFamily, EaseVariant | None], EaseFunction] = (
    MappingProxyType({classification: curve for curve, classification in CURVE_TAXONOMY.items()})
)


def get_curve_family(curve: EaseFunction) -> EaseFamily:
    """Get the family classification for a curve.

    Raises:
        KeyError: If curve not in taxonomy
    """
    return CURVE_TAXONOMY[curve][0]


def get_curve_variant(curve: EaseFunction) -> EaseVariant | None:
    """Get the variant of a curve (None for linear).

    Raises:
        KeyError: If curve not in taxonomy
    """
    return CURVE_TAXONOMY[curve][1]


def curves_in_family(family: EaseFamily) -> list[EaseFunction]:
    """List the curves of a family in declaration order."""
    return [curve for curve, (fam, _) in CURVE_TAXONOMY.items() if fam == family]


def find_curve(family: EaseFamily, variant: EaseVariant | None) -> EaseFunction | None:
    """Find the curve with the given family and variant, if one exists."""
    return _BY_FAMILY_AND_VARIANT.get((family, variant))
