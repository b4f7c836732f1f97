"""
Data coverage meta objects.

Procedures:
    DATCVR01: Limit of ENC coverage
"""

import logging

from ..chart.feature import Feature
from .context import ProcedureContext
from .instructions import LineComposed, RenderInstruction

logger = logging.getLogger("enc_symbology.symbology.coverage")

COVERAGE_CLASS = "M_COVR"
COMPILATION_SCALE_CLASS = "M_CSCL"


def datcvr01(ctx: ProcedureContext, feature: Feature) -> RenderInstruction:
    """
    Coverage limit for M_COVR.

    Overscale indication and scale boundaries need the display scale,
    which is not known here, so they are reported and left undrawn.
    """
    if feature.class_name == COVERAGE_CLASS:
        return RenderInstruction.of(LineComposed("HODATA01"))

    if feature.class_name == COMPILATION_SCALE_CLASS:
        ctx.report("DATCVR01", "overscale indication from M_CSCL not computed")
    else:
        ctx.report("DATCVR01", f"no coverage presentation for {feature.class_name}")
    return RenderInstruction.empty()
