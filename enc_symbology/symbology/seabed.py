"""
Depth area shading and depth contour highlighting.

Procedures:
    SEABED01: Shade band of a depth range against the mariner's contours
    DEPARE01: Depth and dredged areas
    DEPCNT02: Depth contours and depth area boundary lines
"""

import logging
from enum import IntEnum
from typing import Optional

from ..chart.feature import Feature, ScaleMinimum, TouchCategory
from ..config import MarinerParam
from ..constants import DEPTH_AREA_CLASS, DREDGED_AREA_CLASS
from .context import ProcedureContext
from .instructions import (
    AreaColor,
    AreaPattern,
    DisplayPriorityOverride,
    LineStyle,
    RenderInstruction,
)
from .restrictions import rescsp01

logger = logging.getLogger("enc_symbology.symbology.seabed")

# Added to DRVAL1 when an area has no DRVAL2
DRVAL2_EPSILON = 0.01


class DepthShade(IntEnum):
    """Water shade bands, shallowest first."""

    DEPIT = 0  # intertidal
    DEPVS = 1  # very shallow
    DEPMS = 2  # medium shallow
    DEPMD = 3  # medium deep
    DEPDW = 4  # deep


def _deeper_than(drval1: Optional[float], drval2: Optional[float], threshold: float) -> bool:
    if drval1 is None or drval2 is None:
        return False
    return drval1 >= threshold and drval2 > threshold


def select_depth_shade(
    ctx: ProcedureContext,
    drval1: Optional[float],
    drval2: Optional[float]
) -> DepthShade:
    """
    Select the shade band of a datum-adjusted depth range.

    An unknown depth never passes a threshold, so it shades as intertidal.

    Args:
        ctx: Procedure context holding the mariner contours
        drval1: Shallow end of the range (m)
        drval2: Deep end of the range (m)

    Returns:
        DepthShade band
    """
    shade = DepthShade.DEPIT
    if _deeper_than(drval1, drval2, 0.0):
        shade = DepthShade.DEPVS

    if ctx.flag(MarinerParam.TWO_SHADES):
        if _deeper_than(drval1, drval2, ctx.safety_contour):
            shade = DepthShade.DEPDW
        return shade

    if _deeper_than(drval1, drval2, ctx.param(MarinerParam.SHALLOW_CONTOUR)):
        shade = DepthShade.DEPMS
    if _deeper_than(drval1, drval2, ctx.safety_contour):
        shade = DepthShade.DEPMD
    if _deeper_than(drval1, drval2, ctx.param(MarinerParam.DEEP_CONTOUR)):
        shade = DepthShade.DEPDW
    return shade


def seabed01(ctx: ProcedureContext, drval1: Optional[float], drval2: Optional[float]) -> RenderInstruction:
    """Area colour for a depth range, plus the shallow pattern on the shallowest band."""
    shade = select_depth_shade(ctx, drval1, drval2)
    instruction = RenderInstruction.of(AreaColor(shade.name))
    if ctx.flag(MarinerParam.SHALLOW_PATTERN) and shade <= DepthShade.DEPVS:
        instruction += AreaPattern("DIAMOND1")
    return instruction


def depare01(ctx: ProcedureContext, feature: Feature) -> RenderInstruction:
    """
    Shade a depth area or dredged area.

    Missing DRVAL1 is taken as -1 m (drying); missing DRVAL2 as DRVAL1 plus
    one centimetre. Dredged areas also get their pattern, boundary and
    any restriction symbol.
    """
    drval1 = ctx.attribute_number(feature, "DRVAL1")
    if drval1 is None:
        ctx.report("DEPARE01", "missing DRVAL1, using -1.0", feature)
        drval1 = -1.0
    drval2 = ctx.attribute_number(feature, "DRVAL2")
    if drval2 is None:
        drval2 = drval1 + DRVAL2_EPSILON

    instruction = seabed01(ctx, ctx.adjust(drval1), ctx.adjust(drval2))

    if feature.class_name == DREDGED_AREA_CLASS:
        instruction += RenderInstruction.of(AreaPattern("DRGARE01"), LineStyle("DASH", 1, "CHGRF"))
        restrn = ctx.attribute_list(feature, "RESTRN")
        if restrn.is_present:
            instruction += rescsp01(ctx, restrn)

    return instruction


def is_safety_contour_area(ctx: ProcedureContext, line: Feature) -> bool:
    """Check whether the area linked behind a contour straddles the safety contour."""
    area = ctx.touch(line, TouchCategory.CONTOUR)
    if area is None:
        ctx.report("DEPCNT02", "no area linked behind contour", line)
        return False

    drval1 = ctx.adjust(ctx.attribute_number(area, "DRVAL1"))
    drval2 = ctx.adjust(ctx.attribute_number(area, "DRVAL2"))
    if drval1 is None or drval2 is None:
        return False
    return drval1 < ctx.safety_contour <= drval2


def depcnt02(ctx: ProcedureContext, feature: Feature) -> RenderInstruction:
    """
    Style a depth contour, highlighting the safety contour.

    The safety contour is drawn heavier, always visible and with raised
    display priority. Low accuracy positions (QUAPOS 2-9) are dashed.
    """
    feature.set_scale_minimum(ScaleMinimum.RESET)
    safety = ctx.safety_contour

    if feature.class_name == DEPTH_AREA_CLASS:
        drval1 = ctx.attribute_number(feature, "DRVAL1")
        if drval1 is None:
            drval1 = 0.0
        drval2 = ctx.attribute_number(feature, "DRVAL2")
        if drval2 is None:
            drval2 = drval1
        drval1, drval2 = ctx.adjust(drval1), ctx.adjust(drval2)

        if drval1 <= safety:
            safety_contour = drval2 >= safety
        else:
            safety_contour = is_safety_contour_area(ctx, feature)
    else:
        valdco = ctx.attribute_number(feature, "VALDCO")
        if valdco is None:
            ctx.report("DEPCNT02", "missing VALDCO, using 0.0", feature)
            valdco = 0.0
        valdco = ctx.adjust(valdco)

        if valdco == safety:
            safety_contour = True
        elif valdco > safety:
            safety_contour = is_safety_contour_area(ctx, feature)
        else:
            safety_contour = False

    pattern = "DASH" if ctx.low_accuracy(feature) else "SOLD"
    if safety_contour:
        line = LineStyle(pattern, 2, "DEPSC")
    else:
        line = LineStyle(pattern, 1, "DEPCN")

    if safety_contour:
        feature.set_scale_minimum(ScaleMinimum.ALWAYS_VISIBLE)
        return RenderInstruction.of(DisplayPriorityOverride("8OD13010"), line)
    return RenderInstruction.of(DisplayPriorityOverride("---33020"), line)
