"""
Positional accuracy and shoreline construction procedures.

Procedures:
    QUAPOS01: Dispatch to QUALIN01 for lines, QUAPNT01 otherwise
    QUALIN01: Coastline and land area edges
    QUAPNT01: Low accuracy marker for points and areas
    SLCONS03: Shoreline constructions
"""

import logging

from ..chart.feature import Feature
from ..constants import COASTLINE_CLASS
from .context import ProcedureContext
from .instructions import LineComposed, LineStyle, PointSymbol, RenderInstruction
from .seabed import seabed01

logger = logging.getLogger("enc_symbology.symbology.quality")


def quapnt01(ctx: ProcedureContext, feature: Feature) -> RenderInstruction:
    """Low accuracy symbol when QUAPOS marks the position unreliable."""
    if ctx.low_accuracy(feature):
        return RenderInstruction.of(PointSymbol("LOWACC01"))
    return RenderInstruction.empty()


def qualin01(ctx: ProcedureContext, feature: Feature) -> RenderInstruction:
    if ctx.low_accuracy(feature):
        return RenderInstruction.of(LineComposed("LOWACC21"))

    if feature.class_name == COASTLINE_CLASS:
        conrad = ctx.attribute_list(feature, "CONRAD")
        if conrad.first == 1:
            # Radar conspicuous coastline
            return RenderInstruction.of(LineStyle("SOLD", 3, "CHMGF"), LineStyle("SOLD", 1, "CSTLN"))

    return RenderInstruction.of(LineStyle("SOLD", 1, "CSTLN"))


def quapos01(ctx: ProcedureContext, feature: Feature) -> RenderInstruction:
    if feature.is_line:
        return qualin01(ctx, feature)
    return quapnt01(ctx, feature)


def slcons03(ctx: ProcedureContext, feature: Feature) -> RenderInstruction:
    """
    Shoreline construction outline.

    Points only get the low accuracy marker. Lines and area edges are
    styled by accuracy, condition, category and water level, in that
    order. Areas are shaded from DRVAL1/DRVAL2 first; an area without
    depths shades as intertidal.
    """
    low_accuracy = ctx.low_accuracy(feature)

    if feature.is_point:
        if low_accuracy:
            return RenderInstruction.of(PointSymbol("LOWACC01"))
        return RenderInstruction.empty()

    if low_accuracy:
        outline = LineComposed("LOWACC01")
    else:
        condtn = ctx.attribute_list(feature, "CONDTN")
        catslc = ctx.attribute_list(feature, "CATSLC")
        watlev = ctx.attribute_list(feature, "WATLEV")

        if condtn.first in (1, 2):
            # Under construction or ruined
            outline = LineStyle("DASH", 1, "CSTLN")
        elif catslc.first in (6, 15, 16):
            # Wharf, ramp or slipway
            outline = LineStyle("SOLD", 4, "CSTLN")
        elif watlev.first == 2:
            outline = LineStyle("SOLD", 2, "CSTLN")
        elif watlev.first in (3, 4):
            outline = LineStyle("DASH", 2, "CSTLN")
        else:
            outline = LineStyle("SOLD", 2, "CSTLN")

    instruction = RenderInstruction.empty()
    if feature.is_area:
        drval1 = ctx.adjust(ctx.attribute_number(feature, "DRVAL1"))
        drval2 = ctx.adjust(ctx.attribute_number(feature, "DRVAL2"))
        instruction = seabed01(ctx, drval1, drval2)

    return instruction + outline
