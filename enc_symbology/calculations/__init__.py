"""
Geometric calculations for enc_symbology.

This module provides the pure numeric functions used while indexing a cell
and while symbolizing lights:
- Bounding-box overlap, point-on-line and point-in-area predicates
- Sector sweep normalization across north and sector-overlap dominance

Main Functions:
    From geometry module:
        - extents_overlap: Bounding boxes overlap or touch
        - point_on_line: Point lies on a polyline
        - point_in_area: Point lies inside or on a polygon ring
        - point_in_set: Point touches a line or area feature

    From sectors module:
        - compare_sectors: Which of two overlapping sectors is narrower

Example:
    >>> from enc_symbology.calculations import Sector, compare_sectors
    >>> compare_sectors(Sector(100, 130), Sector(90, 180))
    <SectorDominance.A_DOMINANT: 1>
"""

from .geometry import (
    extents_overlap,
    point_on_line,
    point_in_area,
    point_in_set,
    same_position
)
from .sectors import Sector, SectorDominance, compare_sectors

__all__ = [
    "extents_overlap",
    "point_on_line",
    "point_in_area",
    "point_in_set",
    "same_position",
    "Sector",
    "SectorDominance",
    "compare_sectors",
]
