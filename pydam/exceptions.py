"""Exceptions raised by the stability engine.

All errors derive from :class:`DamStabilityError`, itself a
``ValueError``, so callers that only catch ``ValueError`` keep working.
"""

from __future__ import annotations

from typing import Sequence


class DamStabilityError(ValueError):
    """Base class for every error raised by pydam."""


class MissingDimensionError(DamStabilityError):
    """A dimension required by the chosen profile or solve run is absent."""


class UnsupportedProfileError(DamStabilityError):
    """The profile tag is not one of rectangle, triangle or trapezoid."""


class DegenerateReactionError(DamStabilityError):
    """The net vertical reaction is exactly zero.

    The resultant location (and any quantity divided by the vertical
    reaction) is undefined in that case.
    """


class InputValidationError(DamStabilityError):
    """Form-level validation failed.

    Attributes:
        errors: Mapping of field name to error message.
    """

    def __init__(self, errors: dict[str, str] | Sequence[tuple[str, str]]) -> None:
        self.errors: dict[str, str] = dict(errors)
        message = "; ".join(f"{k}: {v}" for k, v in self.errors.items())
        super().__init__(message or "Invalid inputs")
