"""
Procedure dispatch.

The look-up tables name a conditional procedure for each object class;
``SymbologyEngine.run`` resolves that name and calls the procedure with
the current mariner parameters and the linked cross-reference index.
"""

import logging
from enum import Enum
from typing import Callable, Dict, Optional, Union

from ..chart.feature import Feature
from ..config import MarinerParameters, get_default_parameters
from ..crossref import CrossReferenceIndex
from ..logging_config import DiagnosticLog, get_diagnostics
from .context import ProcedureContext
from .coverage import datcvr01
from .hazards import depval01, obstrn04, udwhaz03, wrecks02
from .instructions import RenderInstruction
from .lights import lights05, litdsn01, topmar01
from .mariners import clrlin01, leglin02, ownshp02, pastrk01, quesmrk1, vessel01, vrmebl01
from .quality import quapnt01, qualin01, quapos01, slcons03
from .restrictions import rescsp01, resare02, restrn01
from .seabed import depare01, depcnt02, seabed01
from .soundings import sndfrm02, soundg02

logger = logging.getLogger("enc_symbology.symbology.engine")

ProcedureFunction = Callable[[ProcedureContext, Feature], RenderInstruction]


class Procedure(str, Enum):
    """Conditional procedures callable from the look-up tables."""

    CLRLIN01 = "CLRLIN01"
    DATCVR01 = "DATCVR01"
    DEPARE01 = "DEPARE01"
    DEPCNT02 = "DEPCNT02"
    LEGLIN02 = "LEGLIN02"
    LIGHTS05 = "LIGHTS05"
    OBSTRN04 = "OBSTRN04"
    OWNSHP02 = "OWNSHP02"
    PASTRK01 = "PASTRK01"
    QUAPOS01 = "QUAPOS01"
    RESARE02 = "RESARE02"
    RESTRN01 = "RESTRN01"
    SLCONS03 = "SLCONS03"
    SOUNDG02 = "SOUNDG02"
    TOPMAR01 = "TOPMAR01"
    VESSEL01 = "VESSEL01"
    VRMEBL01 = "VRMEBL01"
    WRECKS02 = "WRECKS02"
    QUESMRK1 = "QUESMRK1"

    # Later editions, drawn with the procedure they replace
    DATCVR02 = "DATCVR02"
    DEPARE02 = "DEPARE02"
    DEPARE03 = "DEPARE03"
    DEPCNT03 = "DEPCNT03"
    LEGLIN03 = "LEGLIN03"
    LIGHTS06 = "LIGHTS06"
    OBSTRN05 = "OBSTRN05"
    OBSTRN06 = "OBSTRN06"
    RESARE03 = "RESARE03"
    VESSEL02 = "VESSEL02"
    VRMEBL02 = "VRMEBL02"
    WRECKS03 = "WRECKS03"
    WRECKS04 = "WRECKS04"
    WRECKS05 = "WRECKS05"

    @classmethod
    def lookup(cls, name: Union["Procedure", str]) -> Optional["Procedure"]:
        """Procedure for a name, or None when the name is unknown."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().upper())
        except ValueError:
            return None

    @property
    def is_alias(self) -> bool:
        return self in ALIASES

    @property
    def canonical(self) -> "Procedure":
        return ALIASES.get(self, self)


PROCEDURES: Dict[Procedure, ProcedureFunction] = {
    Procedure.CLRLIN01: clrlin01,
    Procedure.DATCVR01: datcvr01,
    Procedure.DEPARE01: depare01,
    Procedure.DEPCNT02: depcnt02,
    Procedure.LEGLIN02: leglin02,
    Procedure.LIGHTS05: lights05,
    Procedure.OBSTRN04: obstrn04,
    Procedure.OWNSHP02: ownshp02,
    Procedure.PASTRK01: pastrk01,
    Procedure.QUAPOS01: quapos01,
    Procedure.RESARE02: resare02,
    Procedure.RESTRN01: restrn01,
    Procedure.SLCONS03: slcons03,
    Procedure.SOUNDG02: soundg02,
    Procedure.TOPMAR01: topmar01,
    Procedure.VESSEL01: vessel01,
    Procedure.VRMEBL01: vrmebl01,
    Procedure.WRECKS02: wrecks02,
    Procedure.QUESMRK1: quesmrk1,
}

ALIASES: Dict[Procedure, Procedure] = {
    Procedure.DATCVR02: Procedure.DATCVR01,
    Procedure.DEPARE02: Procedure.DEPARE01,
    Procedure.DEPARE03: Procedure.DEPARE01,
    Procedure.DEPCNT03: Procedure.DEPCNT02,
    Procedure.LEGLIN03: Procedure.LEGLIN02,
    Procedure.LIGHTS06: Procedure.LIGHTS05,
    Procedure.OBSTRN05: Procedure.OBSTRN04,
    Procedure.OBSTRN06: Procedure.OBSTRN04,
    Procedure.RESARE03: Procedure.RESARE02,
    Procedure.VESSEL02: Procedure.VESSEL01,
    Procedure.VRMEBL02: Procedure.VRMEBL01,
    Procedure.WRECKS03: Procedure.WRECKS02,
    Procedure.WRECKS04: Procedure.WRECKS02,
    Procedure.WRECKS05: Procedure.WRECKS02,
}

# Helpers called by the procedures above; not reachable from a look-up table
SUB_PROCEDURES: Dict[str, Callable] = {
    "SEABED01": seabed01,
    "RESCSP01": rescsp01,
    "DEPVAL01": depval01,
    "UDWHAZ03": udwhaz03,
    "SNDFRM02": sndfrm02,
    "QUAPNT01": quapnt01,
    "QUALIN01": qualin01,
    "LITDSN01": litdsn01,
}


class SymbologyEngine:
    """
    Runs conditional procedures against a linked cross-reference index.

    The engine keeps no results between calls, so changing the mariner
    parameters and re-running gives the instructions for the new
    settings.

    Example:
        >>> engine = SymbologyEngine(index)
        >>> engine.run("DEPARE01", feature).serialize()
        ';AC(DEPMS)'
    """

    def __init__(
        self,
        index: CrossReferenceIndex,
        params: Optional[MarinerParameters] = None,
        diagnostics: Optional[DiagnosticLog] = None
    ):
        self.index = index
        self.context = ProcedureContext(
            params if params is not None else get_default_parameters(),
            index,
            diagnostics if diagnostics is not None else get_diagnostics(),
        )

    @property
    def params(self) -> MarinerParameters:
        return self.context.params

    @params.setter
    def params(self, value: MarinerParameters) -> None:
        self.context.params = value

    def run(self, name: Union[Procedure, str], feature: Feature) -> RenderInstruction:
        """
        Run one procedure on a feature.

        Args:
            name: Procedure name as found in the look-up table
            feature: Feature to symbolize

        Returns:
            Render instruction; a question mark when the name is unknown

        Raises:
            DataIntegrityError: If the feature cannot be symbolized at all
        """
        procedure = Procedure.lookup(name)
        if procedure is None:
            self.context.report("ENGINE", f"unknown procedure {name}", feature)
            return quesmrk1(self.context, feature)

        if procedure.is_alias:
            self.context.report(procedure.value, f"drawn with {procedure.canonical.value}")
            procedure = procedure.canonical

        logger.debug(f"{procedure.value} on {feature!r}")
        return PROCEDURES[procedure](self.context, feature)
