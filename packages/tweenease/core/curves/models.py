"""Curve sample models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CurvePoint(BaseModel):
    """A single sampled point on an easing curve.

    ``t`` is normalized progress in [0, 1]. ``v`` is left unbounded since
    back and elastic curves overshoot the [0, 1] range.

    Example:
        >>> point = CurvePoint(t=0.5, v=0.125)
        >>> point.v
        0.125
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    t: float = Field(..., ge=0.0, le=1.0, description="Normalized progress [0,1]")
    v: float = Field(..., description="Eased value")
