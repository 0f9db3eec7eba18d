"""Curve lookup errors."""

from __future__ import annotations

from typing import Any


class UnknownCurveError(ValueError):
    """Raised by strict lookups when an identifier matches no curve."""

    def __init__(self, identifier: Any) -> None:
        self.identifier = identifier
        super().__init__(f"Unknown easing curve: {identifier!r}")
