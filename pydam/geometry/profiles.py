"""Cross-section profiles of a gravity dam.

Three closed-form profiles are supported, all with the upstream face
vertical at x = 0 (the heel) and the base running to x = b (the toe):

rectangle
    Constant width *b* over the full height.
triangle
    Right triangle; the downstream face slopes from the crest at
    x = 0 down to the toe.
trapezoid
    Crest width *c* at the top, base width *b* at the bottom.

Areas are per unit length of dam, so "volume" is an area (m²/m).
"""

from __future__ import annotations

from enum import Enum

import numpy as np

from pydam.exceptions import MissingDimensionError, UnsupportedProfileError


class StructureProfile(str, Enum):
    """Closed set of section shapes."""

    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"
    TRAPEZOID = "trapezoid"

    @classmethod
    def parse(cls, value: StructureProfile | str) -> StructureProfile:
        """Coerce *value* to a profile.

        Raises:
            UnsupportedProfileError: If *value* names no known profile.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise UnsupportedProfileError(
                f"Unknown structure profile {value!r}. "
                f"Choose from {[p.value for p in cls]}"
            ) from None


def _require_crest(crest_width: float | None) -> float:
    if crest_width is None:
        raise MissingDimensionError(
            "Crest width is required for a trapezoid profile"
        )
    return crest_width


def volume(
    profile: StructureProfile | str,
    base_width: float,
    height: float,
    crest_width: float | None = None,
) -> float:
    """Cross-sectional area of the dam per unit length.

    Args:
        profile: Section shape.
        base_width: Base width *b*.
        height: Dam height *h*.
        crest_width: Crest width *c* (trapezoid only).

    Returns:
        Area of the section.

    Raises:
        MissingDimensionError: Trapezoid without *crest_width*.
        UnsupportedProfileError: Unknown *profile*.
    """
    profile = StructureProfile.parse(profile)
    if profile is StructureProfile.RECTANGLE:
        return base_width * height
    if profile is StructureProfile.TRIANGLE:
        return base_width * height / 2
    c = _require_crest(crest_width)
    return (base_width + c) / 2 * height


def centroid_offset(
    profile: StructureProfile | str,
    base_width: float,
    crest_width: float | None = None,
) -> float:
    """Horizontal distance from the heel to the section centroid.

    rectangle: b / 2; triangle: b / 3;
    trapezoid: (b + 2c) / (3 (b + c)) · b.

    The trapezoid expression equals the centroid of
    :func:`section_outline` only for c = 0 and c = b.
    """
    profile = StructureProfile.parse(profile)
    if profile is StructureProfile.RECTANGLE:
        return base_width / 2
    if profile is StructureProfile.TRIANGLE:
        return base_width / 3
    c = _require_crest(crest_width)
    return (base_width + 2 * c) / (3 * (base_width + c)) * base_width


def section_outline(
    profile: StructureProfile | str,
    base_width: float,
    height: float,
    crest_width: float | None = None,
) -> np.ndarray:
    """Polygon vertices of the section, counter-clockwise from the heel.

    Returns:
        Array of shape ``(n, 2)`` with ``(x, y)`` coordinates.
    """
    profile = StructureProfile.parse(profile)
    if profile is StructureProfile.RECTANGLE:
        pts = [(0, 0), (base_width, 0), (base_width, height), (0, height)]
    elif profile is StructureProfile.TRIANGLE:
        pts = [(0, 0), (base_width, 0), (0, height)]
    else:
        c = _require_crest(crest_width)
        pts = [(0, 0), (base_width, 0), (c, height), (0, height)]
    return np.array(pts, dtype=float)
