"""
Sector-overlap comparison for co-located sector lights.

When two sector lights share a position, only one of them gets its sector
arc drawn at the extended radius. The light with the narrower sweep wins
wherever the two sectors overlap.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from ..chart.feature import Feature

logger = logging.getLogger("enc_symbology.calculations.sectors")


class SectorDominance(IntEnum):
    """Result of comparing sector A against sector B."""

    A_DOMINANT = 1
    NONE = 0
    B_DOMINANT = -1


@dataclass(frozen=True)
class Sector:
    """Sector bounded by two bearings in degrees, clockwise from ``start`` to ``end``.

    ``end`` may be smaller than ``start`` when the sector crosses north.
    """

    start: float
    end: float

    @classmethod
    def from_feature(cls, feature: Feature) -> Optional["Sector"]:
        """Build the sector of a light, or None when SECTR1/SECTR2 are missing."""
        start = feature.attribute_number("SECTR1")
        end = feature.attribute_number("SECTR2")
        if start is None or end is None:
            return None
        return cls(start, end)

    @property
    def unwrapped_end(self) -> float:
        return self.end + 360.0 if self.start > self.end else self.end

    @property
    def sweep(self) -> float:
        """Angular sweep in degrees, normalized to [0, 360)."""
        sweep = self.unwrapped_end - self.start
        if sweep >= 360.0:
            sweep -= 360.0
        return sweep

    @property
    def head(self) -> float:
        return self.start + self.sweep

    @property
    def tail(self) -> float:
        return self.end - self.sweep


def _limits_inside(a: Sector, b: Sector) -> bool:
    # A bearing of b falls strictly between a's guard angle and a's limit
    return (
        a.tail < b.start < a.end or
        a.tail < b.end < a.end or
        a.start < b.start < a.head or
        a.start < b.end < a.head
    )


def compare_sectors(a: Sector, b: Sector) -> SectorDominance:
    """
    Compare two sectors of lights sharing a position.

    Args:
        a: First sector
        b: Second sector

    Returns:
        A_DOMINANT if the sectors overlap and ``a`` sweeps less than ``b``,
        B_DOMINANT if they overlap otherwise (equal sweeps included),
        NONE if they do not overlap

    Example:
        >>> compare_sectors(Sector(100, 130), Sector(90, 180))
        <SectorDominance.A_DOMINANT: 1>
        >>> compare_sectors(Sector(90, 180), Sector(100, 130))
        <SectorDominance.B_DOMINANT: -1>
    """
    if not (_limits_inside(a, b) or _limits_inside(b, a)):
        return SectorDominance.NONE

    if a.sweep < b.sweep:
        return SectorDominance.A_DOMINANT
    return SectorDominance.B_DOMINANT
