"""
In-memory chart feature model.

This module provides the Feature class read by the cross-reference index
and the symbology procedures. A feature carries its class acronym,
geometry kind, coordinates, raw coded attributes and the mutable touch
references and scale-minimum override written while a cell is indexed.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

import numpy as np

from ..exceptions import FeatureError
from ..logging_config import DiagnosticLog
from .attributes import ABSENT, CodedList, decode_list, decode_number, decode_text

logger = logging.getLogger("enc_symbology.chart.feature")


class GeometryKind(str, Enum):
    """Geometry primitive of a feature."""

    POINT = "Point"
    LINE = "Line"
    AREA = "Area"


class TouchCategory(Enum):
    """Cross-reference slots; each feature holds at most one target per slot."""

    PLATFORM = "platform"
    LIGHT_CHAIN = "light_chain"
    CONTOUR = "contour"
    HAZARD = "hazard"
    LEAST_DEPTH = "least_depth"


class ScaleMinimum(Enum):
    """Scale-minimum override of a feature."""

    UNSET = "unset"
    RESET = "reset"
    ALWAYS_VISIBLE = "always_visible"


@dataclass(frozen=True)
class Extent:
    """Bounding box of a feature's coordinates."""

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    @classmethod
    def from_coordinates(cls, coordinates: np.ndarray) -> "Extent":
        xy = coordinates[:, :2]
        xmin, ymin = xy.min(axis=0)
        xmax, ymax = xy.max(axis=0)
        return cls(float(xmin), float(ymin), float(xmax), float(ymax))


@dataclass(eq=False)
class Feature:
    """A charted object instance.

    Attributes:
        feature_id: Stable identifier, unique within a cell.
        class_name: Object class acronym (e.g. ``DEPARE``, ``LIGHTS``).
        geometry_kind: Point, Line or Area.
        coordinates: Array of shape (N, 2), or (N, 3) for soundings with depth.
        attributes: Raw attribute values keyed by attribute code.
        scale_minimum: Scale-minimum override written by procedures.
        touches: Identifier of the related feature per touch category.
        derived: Per-feature memoized flags computed by procedures.
    """

    feature_id: int
    class_name: str
    geometry_kind: GeometryKind
    coordinates: np.ndarray
    attributes: Dict[str, Any] = field(default_factory=dict)
    scale_minimum: ScaleMinimum = ScaleMinimum.UNSET
    touches: Dict[TouchCategory, int] = field(default_factory=dict)
    derived: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        try:
            self.geometry_kind = GeometryKind(self.geometry_kind)
        except ValueError:
            raise FeatureError(f"Feature {self.feature_id}: unknown geometry kind {self.geometry_kind!r}")

        coordinates = np.asarray(self.coordinates, dtype=float)
        if coordinates.ndim == 1 and coordinates.size in (2, 3):
            coordinates = coordinates.reshape(1, -1)
        if coordinates.ndim != 2 or coordinates.shape[0] == 0 or coordinates.shape[1] not in (2, 3):
            raise FeatureError(
                f"Feature {self.feature_id}: coordinates must have shape (N, 2) or (N, 3), "
                f"got {coordinates.shape}"
            )
        self.coordinates = coordinates
        self.extent = Extent.from_coordinates(coordinates)

    def __repr__(self) -> str:
        return f"Feature({self.class_name}:{self.geometry_kind.value}:{self.feature_id})"

    @property
    def is_point(self) -> bool:
        return self.geometry_kind is GeometryKind.POINT

    @property
    def is_line(self) -> bool:
        return self.geometry_kind is GeometryKind.LINE

    @property
    def is_area(self) -> bool:
        return self.geometry_kind is GeometryKind.AREA

    @property
    def point_count(self) -> int:
        return int(self.coordinates.shape[0])

    def vertex(self, index: int = 0) -> Tuple[float, float]:
        x, y = self.coordinates[index, :2]
        return float(x), float(y)

    # Attribute accessors

    def has_attribute(self, code: str) -> bool:
        return code in self.attributes

    def attribute_list(self, code: str, diagnostics: Optional[DiagnosticLog] = None) -> CodedList:
        if code not in self.attributes:
            return ABSENT
        return decode_list(self.attributes[code], code, diagnostics)

    def attribute_number(self, code: str, diagnostics: Optional[DiagnosticLog] = None) -> Optional[float]:
        """Numeric attribute value; None when absent or present but empty."""
        if code not in self.attributes:
            return None
        return decode_number(self.attributes[code], code, diagnostics)

    def attribute_text(self, code: str) -> Optional[str]:
        if code not in self.attributes:
            return None
        return decode_text(self.attributes[code])

    # Touch references

    def get_touch_id(self, category: TouchCategory) -> Optional[int]:
        return self.touches.get(category)

    def set_touch(self, category: TouchCategory, target_id: int) -> bool:
        """Set a touch reference once.

        Returns:
            False if the slot already holds a different target.
        """
        current = self.touches.get(category)
        if current is not None and current != target_id:
            return False
        self.touches[category] = target_id
        return True

    def set_scale_minimum(self, value: ScaleMinimum) -> None:
        self.scale_minimum = ScaleMinimum(value)
