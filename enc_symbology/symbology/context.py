"""
Shared state passed to every symbology procedure.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..chart.attributes import CodedList
from ..chart.feature import Feature, TouchCategory
from ..config import MarinerParam, MarinerParameters
from ..constants import LOW_ACCURACY_QUAPOS
from ..crossref import CrossReferenceIndex
from ..logging_config import DiagnosticLog, get_diagnostics

logger = logging.getLogger("enc_symbology.symbology.context")


@dataclass
class ProcedureContext:
    """Mariner parameters, cell index and diagnostics for one render pass.

    Procedures only read the index; the scale-minimum override and the
    memoized ``derived`` flags of the feature being symbolized are the
    only state they write.
    """

    params: MarinerParameters
    index: CrossReferenceIndex
    diagnostics: DiagnosticLog = field(default_factory=get_diagnostics)

    def param(self, name: MarinerParam) -> float:
        return self.params.get(name)

    @property
    def safety_contour(self) -> float:
        return self.param(MarinerParam.SAFETY_CONTOUR)

    @property
    def datum_offset(self) -> float:
        return self.param(MarinerParam.DATUM_OFFSET)

    def flag(self, name: MarinerParam) -> bool:
        return bool(self.param(name))

    def adjust(self, depth: Optional[float]) -> Optional[float]:
        """Apply the datum offset to a known depth."""
        if depth is None:
            return None
        return depth + self.datum_offset

    def touch(self, feature: Feature, category: TouchCategory) -> Optional[Feature]:
        return self.index.get_touch(feature, category)

    def report(self, procedure: str, condition: str, feature: Optional[Feature] = None) -> None:
        self.diagnostics.report(procedure, condition, repr(feature) if feature is not None else None)

    def attribute_list(self, feature: Feature, code: str) -> CodedList:
        return feature.attribute_list(code, self.diagnostics)

    def attribute_number(self, feature: Feature, code: str) -> Optional[float]:
        return feature.attribute_number(code, self.diagnostics)

    def low_accuracy(self, feature: Feature) -> Optional[bool]:
        """QUAPOS check: None when absent, True for a low accuracy position."""
        quapos = self.attribute_list(feature, "QUAPOS")
        if quapos.is_absent:
            return None
        return quapos.contains_any(*LOW_ACCURACY_QUAPOS)
