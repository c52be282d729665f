"""Geometry: section profiles, areas and centroids."""

from pydam.geometry.profiles import (
    StructureProfile,
    volume,
    centroid_offset,
    section_outline,
)

__all__ = [
    "StructureProfile",
    "volume",
    "centroid_offset",
    "section_outline",
]
