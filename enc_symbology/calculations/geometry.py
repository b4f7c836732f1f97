"""
Spatial predicates for chart features.

This module provides the containment and overlap tests used by the
cross-reference index to decide whether two features touch. Coordinates
are numpy arrays of shape (N, 2) or (N, 3); only the first two columns
are used. Points on an area boundary count as inside the area.
"""

import logging

import numpy as np

from ..chart.feature import Extent, Feature

logger = logging.getLogger("enc_symbology.calculations.geometry")

# Distance under which a point is considered to lie on a segment
DEFAULT_TOLERANCE = 1e-9


def extents_overlap(a: Extent, b: Extent) -> bool:
    """
    Check whether two bounding boxes overlap; touching edges count.

    Example:
        >>> extents_overlap(Extent(0, 0, 1, 1), Extent(1, 1, 2, 2))
        True
    """
    return not (a.xmax < b.xmin or b.xmax < a.xmin or
                a.ymax < b.ymin or b.ymax < a.ymin)


def point_on_line(
    coordinates: np.ndarray,
    x: float,
    y: float,
    tolerance: float = DEFAULT_TOLERANCE
) -> bool:
    """
    Check whether a point lies on a polyline.

    Args:
        coordinates: Polyline vertices, shape (N, 2+)
        x: Point x coordinate
        y: Point y coordinate
        tolerance: Maximum distance from a segment

    Returns:
        True if the point is within ``tolerance`` of any segment
    """
    xy = np.asarray(coordinates, dtype=float)[:, :2]
    point = np.array([x, y])

    if len(xy) == 1:
        return bool(np.hypot(*(xy[0] - point)) <= tolerance)

    start = xy[:-1]
    seg = xy[1:] - start
    length2 = np.einsum("ij,ij->i", seg, seg)

    # Project onto each segment, clamped to its end points
    with np.errstate(invalid="ignore", divide="ignore"):
        t = np.einsum("ij,ij->i", point - start, seg) / length2
    t = np.where(length2 > 0, np.clip(t, 0.0, 1.0), 0.0)

    nearest = start + seg * t[:, None]
    distance = np.hypot(nearest[:, 0] - x, nearest[:, 1] - y)
    return bool(np.any(distance <= tolerance))


def point_in_area(
    coordinates: np.ndarray,
    x: float,
    y: float,
    tolerance: float = DEFAULT_TOLERANCE
) -> bool:
    """
    Check whether a point lies inside or on the boundary of a polygon ring.

    Uses the even-odd ray casting rule. The ring may be given open or
    closed (first vertex repeated at the end).

    Args:
        coordinates: Ring vertices, shape (N, 2+)
        x: Point x coordinate
        y: Point y coordinate
        tolerance: Boundary distance counted as inside

    Returns:
        True if the point is inside the ring or on its boundary
    """
    xy = np.asarray(coordinates, dtype=float)[:, :2]
    if len(xy) < 3:
        return point_on_line(xy, x, y, tolerance)

    if not np.array_equal(xy[0], xy[-1]):
        xy = np.vstack([xy, xy[:1]])

    if point_on_line(xy, x, y, tolerance):
        return True

    x1, y1 = xy[:-1, 0], xy[:-1, 1]
    x2, y2 = xy[1:, 0], xy[1:, 1]

    straddles = (y1 > y) != (y2 > y)
    with np.errstate(invalid="ignore", divide="ignore"):
        x_cross = x1 + (y - y1) * (x2 - x1) / (y2 - y1)
    crossings = np.count_nonzero(straddles & (x < x_cross))
    return bool(crossings % 2 == 1)


def point_in_set(feature: Feature, x: float, y: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """
    Check whether a point touches a line or area feature.

    Lines use the on-line test and areas the in-area test; a point feature
    matches only at its own position.
    """
    if feature.is_area:
        return point_in_area(feature.coordinates, x, y, tolerance)
    if feature.is_line:
        return point_on_line(feature.coordinates, x, y, tolerance)
    fx, fy = feature.vertex(0)
    return bool(np.hypot(fx - x, fy - y) <= tolerance)


def same_position(a: Feature, b: Feature, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Check whether the first vertices of two features coincide."""
    ax, ay = a.vertex(0)
    bx, by = b.vertex(0)
    return bool(np.hypot(ax - bx, ay - by) <= tolerance)
