"""
Cross-reference index for a chart cell.

The symbology of several objects depends on their neighbours: a topmark
on a floating platform, co-located sector lights, the depth area behind a
contour, the group-1 area under an isolated danger. The index is built in
two passes over the features of one cell. ``classify`` sorts every
feature into the buckets it can be found through, then ``link`` resolves
each feature's touch references against the completed buckets.

Touch references hold feature identifiers; the index resolves them back
to features for the procedures.
"""

import logging
from typing import Dict, Iterable, List, Optional

from .calculations.geometry import (
    extents_overlap,
    point_in_area,
    point_in_set,
    point_on_line,
    same_position,
)
from .chart.feature import Feature, TouchCategory
from .constants import (
    BUOY_CLASS_PREFIX,
    DEPTH_AREA_CLASS,
    DEPTH_CONTOUR_CLASS,
    DREDGED_AREA_CLASS,
    HAZARD_CLASSES,
    LATERAL_BUOY_CLASS,
    LIGHT_CLASS,
    LIGHT_PLATFORM_CLASSES,
    TOPMARK_CLASS,
    UNSURVEYED_AREA_CLASS,
)
from .exceptions import DataIntegrityError, IndexStateError
from .logging_config import DiagnosticLog, get_diagnostics

logger = logging.getLogger("enc_symbology.crossref")


class CrossReferenceIndex:
    """
    Per-cell index of features used to resolve touch references.

    Buckets:
        light_platforms: LITFLT, LITVES and buoys (BOY*)
        lights: LIGHTS
        contour_refs: DEPARE and DRGARE areas
        hazard_refs: DEPARE areas and lines, DRGARE
        least_depth_refs: DEPARE areas and lines, UNSARE

    Args:
        diagnostics: Diagnostics log (process default when omitted)

    Example:
        >>> index = CrossReferenceIndex()
        >>> index.build(features)
        >>> area = index.get_touch(contour, TouchCategory.CONTOUR)
    """

    def __init__(self, diagnostics: Optional[DiagnosticLog] = None):
        self.diagnostics = diagnostics or get_diagnostics()

        self.light_platforms: List[Feature] = []
        self.lights: List[Feature] = []
        self.contour_refs: List[Feature] = []
        self.hazard_refs: List[Feature] = []
        self.least_depth_refs: List[Feature] = []

        self._features: Dict[int, Feature] = {}
        self._linking = False

    def __len__(self) -> int:
        return len(self._features)

    @property
    def is_linking(self) -> bool:
        return self._linking

    def resolve(self, feature_id: Optional[int]) -> Optional[Feature]:
        """Return the feature registered under an identifier."""
        if feature_id is None:
            return None
        return self._features.get(feature_id)

    def get_touch(self, feature: Feature, category: TouchCategory) -> Optional[Feature]:
        """Resolve one of a feature's touch references."""
        return self.resolve(feature.get_touch_id(category))

    def features(self) -> List[Feature]:
        return list(self._features.values())

    # ------------------------------------------------------------------
    # Pass 1: classification
    # ------------------------------------------------------------------

    def classify(self, feature: Feature) -> None:
        """
        Register a feature and sort it into its buckets.

        Raises:
            IndexStateError: If linking has already started
            DataIntegrityError: If another feature uses the same identifier
        """
        if self._linking:
            raise IndexStateError(
                f"Cannot classify {feature!r}: linking has already started for this cell"
            )

        registered = self._features.get(feature.feature_id)
        if registered is feature:
            return
        if registered is not None:
            raise DataIntegrityError(
                f"Duplicate feature id {feature.feature_id}: {registered!r} and {feature!r}"
            )
        self._features[feature.feature_id] = feature

        name = feature.class_name

        if name in LIGHT_PLATFORM_CLASSES or name.startswith(BUOY_CLASS_PREFIX):
            self.light_platforms.append(feature)

        if name == LIGHT_CLASS:
            self.lights.append(feature)

        if name in (DEPTH_AREA_CLASS, DREDGED_AREA_CLASS) and feature.is_area:
            self.contour_refs.append(feature)

        if (name == DEPTH_AREA_CLASS and (feature.is_area or feature.is_line)) or name == DREDGED_AREA_CLASS:
            self.hazard_refs.append(feature)

        if (name == DEPTH_AREA_CLASS and (feature.is_area or feature.is_line)) or name == UNSURVEYED_AREA_CLASS:
            self.least_depth_refs.append(feature)

    # ------------------------------------------------------------------
    # Pass 2: linking
    # ------------------------------------------------------------------

    def link(self, feature: Feature) -> None:
        """Resolve the touch references of a classified feature."""
        if feature.feature_id not in self._features:
            raise IndexStateError(f"Cannot link {feature!r}: it was never classified")
        self._linking = True

        name = feature.class_name

        if name == TOPMARK_CLASS:
            self._link_platform(feature)
        elif name == LATERAL_BUOY_CLASS:
            self._link_buoy_light(feature)
        elif name == LIGHT_CLASS:
            self._link_light_chain(feature)
        elif name in HAZARD_CLASSES:
            self._link_hazard(feature)
            self._link_least_depth(feature)

        if feature.is_line and name in (DEPTH_CONTOUR_CLASS, DEPTH_AREA_CLASS):
            self._link_contour(feature)

    def build(self, features: Iterable[Feature]) -> "CrossReferenceIndex":
        """Classify then link every feature of a cell."""
        features = list(features)
        for feature in features:
            self.classify(feature)
        for feature in features:
            self.link(feature)
        logger.debug(
            f"Indexed {len(features)} features: {len(self.light_platforms)} platforms, "
            f"{len(self.lights)} lights, {len(self.contour_refs)} contour refs, "
            f"{len(self.hazard_refs)} hazard refs, {len(self.least_depth_refs)} least-depth refs"
        )
        return self

    def _set_touch(self, feature: Feature, category: TouchCategory, target: Feature) -> bool:
        if feature.set_touch(category, target.feature_id):
            return True
        self.diagnostics.report(
            "link", f"{category.value} reference already set",
            f"{feature!r} keeps {feature.get_touch_id(category)}, ignored {target!r}"
        )
        return False

    def _link_platform(self, topmark: Feature) -> None:
        for candidate in self.light_platforms:
            if not extents_overlap(topmark.extent, candidate.extent):
                continue
            if topmark.get_touch_id(TouchCategory.PLATFORM) is None:
                self._set_touch(topmark, TouchCategory.PLATFORM, candidate)
            else:
                self.diagnostics.report(
                    "link", "several platforms under one topmark",
                    f"{topmark!r} also on {candidate!r}"
                )

    def _link_buoy_light(self, buoy: Feature) -> None:
        for light in self.lights:
            if not same_position(buoy, light):
                continue
            if light.get_touch_id(TouchCategory.PLATFORM) is None:
                self._set_touch(light, TouchCategory.PLATFORM, buoy)
                return
            self.diagnostics.report(
                "link", "light already on a platform",
                f"{light!r} on {light.get_touch_id(TouchCategory.PLATFORM)}, also at {buoy!r}"
            )

    def _link_light_chain(self, light: Feature) -> None:
        for other in self.lights:
            if other.feature_id <= light.feature_id:
                continue
            if same_position(light, other):
                self._set_touch(light, TouchCategory.LIGHT_CHAIN, other)
                return

    def _link_contour(self, line: Feature) -> None:
        code = "VALDCO" if line.class_name == DEPTH_CONTOUR_CLASS else "DRVAL1"
        if not line.has_attribute(code):
            self.diagnostics.report("link", f"contour line without {code}", repr(line))
            return

        # An unknown own depth is seeded by the first touching area, which is not linked
        tracked = line.attribute_number(code, self.diagnostics)
        x, y = line.vertex(0)
        best = None

        for candidate in self.contour_refs:
            if candidate.feature_id == line.feature_id:
                continue
            if not extents_overlap(line.extent, candidate.extent):
                continue
            if not point_in_set(candidate, x, y):
                continue

            depth = candidate.attribute_number("DRVAL1", self.diagnostics)
            if depth is None:
                continue
            if tracked is None:
                tracked = depth
                continue
            if depth > tracked:
                tracked = depth
                best = candidate

        if best is None:
            self.diagnostics.report("link", "no deeper area behind contour", repr(line))
            return
        self._set_touch(line, TouchCategory.CONTOUR, best)

    def _touches(self, feature: Feature, candidate: Feature, x: float, y: float) -> bool:
        if not extents_overlap(feature.extent, candidate.extent):
            return False
        if feature.is_point:
            if candidate.is_line:
                return point_on_line(candidate.coordinates, x, y)
            if candidate.is_area:
                return point_in_area(candidate.coordinates, x, y)
            return False
        return point_in_set(candidate, x, y)

    def _link_hazard(self, danger: Feature) -> None:
        x, y = danger.vertex(0)
        deepest = None
        best = None

        for candidate in self.hazard_refs:
            if not self._touches(danger, candidate, x, y):
                continue
            # Lines are ranked by their deeper side, areas by their shallower
            code = "DRVAL2" if candidate.is_line else "DRVAL1"
            depth = candidate.attribute_number(code, self.diagnostics)
            if depth is None:
                continue
            if deepest is None or depth > deepest:
                deepest = depth
                best = candidate

        if best is None:
            self.diagnostics.report("link", "no group 1 area under danger", repr(danger))
            return
        self._set_touch(danger, TouchCategory.HAZARD, best)

    def _link_least_depth(self, danger: Feature) -> None:
        x, y = danger.vertex(1 if danger.point_count > 2 else 0)
        shallowest = None
        best = None
        depthless = None

        for candidate in self.least_depth_refs:
            if not self._touches(danger, candidate, x, y):
                continue
            if candidate.class_name == UNSURVEYED_AREA_CLASS:
                best = candidate
                break
            depth = candidate.attribute_number("DRVAL1", self.diagnostics)
            if depth is None:
                if depthless is None:
                    depthless = candidate
                continue
            if shallowest is None or depth < shallowest:
                shallowest = depth
                best = candidate

        best = best or depthless
        if best is None:
            self.diagnostics.report("link", "no least-depth area under danger", repr(danger))
            return
        self._set_touch(danger, TouchCategory.LEAST_DEPTH, best)

    def light_group(self, light: Feature) -> List[Feature]:
        """
        Return the other lights chained with ``light``, in identifier order.

        Includes lights reached by following the chain forward and lights
        whose forward chain reaches ``light``.
        """
        group = {}
        current = self.get_touch(light, TouchCategory.LIGHT_CHAIN)
        while current is not None and current.feature_id not in group:
            group[current.feature_id] = current
            current = self.get_touch(current, TouchCategory.LIGHT_CHAIN)

        for other in self.lights:
            if other is light or other.feature_id in group:
                continue
            current = self.get_touch(other, TouchCategory.LIGHT_CHAIN)
            seen = set()
            while current is not None and current.feature_id not in seen:
                if current is light:
                    group[other.feature_id] = other
                    break
                seen.add(current.feature_id)
                current = self.get_touch(current, TouchCategory.LIGHT_CHAIN)

        group.pop(light.feature_id, None)
        return [group[key] for key in sorted(group)]
