"""
Isolated dangers: obstructions, underwater rocks and wrecks.

A danger is drawn with the isolated danger symbol when it is shallower
than the safety contour while the group-1 area it lies in is not, i.e.
when it is a hazard in otherwise safe water.

Procedures:
    UDWHAZ03: Isolated danger flag and its display override
    DEPVAL01: Least depth from the area under a danger
    OBSTRN04: Obstructions and underwater rocks
    WRECKS02: Wrecks
"""

import logging
from typing import Optional, Tuple

from ..chart.feature import Feature, ScaleMinimum, TouchCategory
from ..constants import (
    AWASH_DEPTH,
    CATOBS_FOUL_GROUND,
    COVERS_UNCOVERS_DEPTH,
    DANGER_DEPTH_LIMIT,
    FOUL_GROUND_DEPTH,
    NON_DANGEROUS_WRECK_DEPTH,
    UNSURVEYED_AREA_CLASS,
    WATLEV_AWASH,
    WATLEV_COVERS_UNCOVERS,
    WATLEV_DEFAULT_DEPTH,
    WATLEV_DRY,
    WATLEV_PARTLY_SUBMERGED,
    WATLEV_SUBMERGED,
)
from .context import ProcedureContext
from .instructions import (
    AreaColor,
    AreaPattern,
    DisplayPriorityOverride,
    LineComposed,
    LineStyle,
    PointSymbol,
    RenderInstruction,
)
from .quality import quapnt01
from .soundings import sndfrm02

logger = logging.getLogger("enc_symbology.symbology.hazards")

ISOLATED_DANGER = PointSymbol("ISODGR01")

ABOVE_WATER = (WATLEV_PARTLY_SUBMERGED, WATLEV_DRY)


def udwhaz03(ctx: ProcedureContext, feature: Feature, depth: float) -> RenderInstruction:
    """
    Flag a danger lying in water deeper than the safety contour.

    Args:
        ctx: Procedure context
        feature: The danger
        depth: Datum-adjusted depth of the danger

    Returns:
        The hazard override (and symbol), or an empty instruction when the
        danger is not hazardous or no group-1 area was linked to it
    """
    feature.set_scale_minimum(ScaleMinimum.RESET)
    safety = ctx.safety_contour

    if depth > safety:
        return RenderInstruction.empty()

    area = ctx.touch(feature, TouchCategory.HAZARD)
    if area is None:
        ctx.report("UDWHAZ03", "no group 1 area under danger", feature)
        return RenderInstruction.empty()

    if area.is_line:
        reference = ctx.adjust(ctx.attribute_number(area, "DRVAL2"))
        danger = reference is not None and reference > safety
    else:
        reference = ctx.adjust(ctx.attribute_number(area, "DRVAL1"))
        danger = reference is not None and reference >= safety

    if not danger:
        return RenderInstruction.empty()

    if ctx.attribute_list(feature, "WATLEV").first in ABOVE_WATER:
        return RenderInstruction.of(DisplayPriorityOverride("--D14050"))

    feature.set_scale_minimum(ScaleMinimum.ALWAYS_VISIBLE)
    if feature.is_line:
        return RenderInstruction.of(DisplayPriorityOverride("8O-14010"))
    return RenderInstruction.of(DisplayPriorityOverride("8OD14010"), ISOLATED_DANGER)


def depval01(ctx: ProcedureContext, feature: Feature) -> Optional[float]:
    """Datum-adjusted DRVAL1 of the least-depth area under a danger; None if unknown."""
    area = ctx.touch(feature, TouchCategory.LEAST_DEPTH)
    if area is None:
        ctx.report("DEPVAL01", "no least-depth area under danger", feature)
        return None
    if area.class_name == UNSURVEYED_AREA_CLASS:
        return None
    return ctx.adjust(ctx.attribute_number(area, "DRVAL1"))


def _is_isolated_danger(udwhaz: RenderInstruction) -> bool:
    return ISOLATED_DANGER in udwhaz.tokens


def _obstruction_default_depth(ctx: ProcedureContext, feature: Feature) -> float:
    if ctx.attribute_list(feature, "CATOBS").first == CATOBS_FOUL_GROUND:
        return FOUL_GROUND_DEPTH

    watlev = ctx.attribute_list(feature, "WATLEV")
    if watlev.is_absent:
        ctx.report("OBSTRN04", "missing WATLEV, using -15.0", feature)
    if watlev.first == WATLEV_AWASH:
        return AWASH_DEPTH
    if watlev.first == WATLEV_SUBMERGED:
        return COVERS_UNCOVERS_DEPTH
    return WATLEV_DEFAULT_DEPTH


def _wreck_default_depth(ctx: ProcedureContext, feature: Feature) -> float:
    watlev = ctx.attribute_list(feature, "WATLEV")
    if watlev.is_absent:
        ctx.report("WRECKS02", "missing WATLEV, using -15.0", feature)
        return WATLEV_DEFAULT_DEPTH

    if watlev.first == WATLEV_SUBMERGED:
        depth = COVERS_UNCOVERS_DEPTH
    elif watlev.first == WATLEV_AWASH:
        depth = AWASH_DEPTH
    else:
        depth = WATLEV_DEFAULT_DEPTH

    catwrk = ctx.attribute_list(feature, "CATWRK").first
    if catwrk == 1:
        # Non-dangerous wreck
        depth = NON_DANGEROUS_WRECK_DEPTH
    elif catwrk == 2:
        depth = AWASH_DEPTH
    elif catwrk in (4, 5):
        depth = WATLEV_DEFAULT_DEPTH
    return depth


def _danger_depth(ctx: ProcedureContext, feature: Feature, default_depth) -> Tuple[Optional[float], float]:
    """VALSOU (datum-adjusted, None if absent) and the depth used for the hazard test."""
    valsou = ctx.adjust(ctx.attribute_number(feature, "VALSOU"))
    if valsou is not None:
        return valsou, valsou

    # Only area dangers take the depth of the area they lie in
    if feature.is_area:
        least_depth = depval01(ctx, feature)
        if least_depth is not None:
            return None, least_depth
    return None, default_depth(ctx, feature)


def obstrn04(ctx: ProcedureContext, feature: Feature) -> RenderInstruction:
    """
    Symbolize an obstruction or underwater rock.

    Point dangers are drawn with the isolated danger symbol when
    hazardous, otherwise with a symbol chosen by VALSOU and WATLEV. Lines
    and areas are outlined, and areas filled, the same way.
    """
    valsou, depth = _danger_depth(ctx, feature, _obstruction_default_depth)
    sounding = sndfrm02(ctx, feature, valsou) if valsou is not None else RenderInstruction.empty()
    udwhaz = udwhaz03(ctx, feature, depth)

    if feature.is_point:
        return _obstruction_point(ctx, feature, valsou, sounding, udwhaz)
    if feature.is_line:
        return _obstruction_line(ctx, feature, valsou, sounding, udwhaz)
    return _obstruction_area(ctx, feature, valsou, sounding, udwhaz)


def _obstruction_point(ctx, feature, valsou, sounding, udwhaz) -> RenderInstruction:
    quapnt = quapnt01(ctx, feature)
    if udwhaz:
        return udwhaz + quapnt

    watlev = ctx.attribute_list(feature, "WATLEV")
    rock = feature.class_name == "UWTROC"
    show_sounding = False

    if valsou is not None:
        if valsou <= DANGER_DEPTH_LIMIT:
            show_sounding = True
            symbol = "DANGER01"
            if rock:
                if watlev.first in (WATLEV_COVERS_UNCOVERS, WATLEV_AWASH):
                    symbol, show_sounding = "UWTROC04", False
            elif watlev.first in ABOVE_WATER:
                symbol, show_sounding = "OBSTRN11", False
            elif watlev.first in (WATLEV_COVERS_UNCOVERS, WATLEV_AWASH):
                symbol = "DANGER03"
        else:
            symbol = "DANGER02"
    elif rock:
        symbol = "UWTROC03" if watlev.first == WATLEV_SUBMERGED else "UWTROC04"
    elif watlev.first in ABOVE_WATER:
        symbol = "OBSTRN11"
    elif watlev.first in (WATLEV_COVERS_UNCOVERS, WATLEV_AWASH):
        symbol = "OBSTRN03"
    else:
        symbol = "OBSTRN01"

    instruction = RenderInstruction.of(PointSymbol(symbol))
    if show_sounding:
        instruction += sounding
    return instruction + quapnt


def _obstruction_line(ctx, feature, valsou, sounding, udwhaz) -> RenderInstruction:
    if ctx.low_accuracy(feature):
        line = LineComposed("LOWACC41" if udwhaz else "LOWACC31")
    elif udwhaz:
        line = LineStyle("DOTT", 2, "CHBLK")
    elif valsou is not None and valsou > DANGER_DEPTH_LIMIT:
        line = LineStyle("DASH", 2, "CHBLK")
    else:
        line = LineStyle("DOTT", 2, "CHBLK")

    instruction = RenderInstruction.of(line)
    if udwhaz:
        return instruction + udwhaz
    if valsou is not None and valsou <= DANGER_DEPTH_LIMIT:
        return instruction + sounding
    return instruction


def _obstruction_area(ctx, feature, valsou, sounding, udwhaz) -> RenderInstruction:
    quapnt = quapnt01(ctx, feature)

    if _is_isolated_danger(udwhaz):
        return RenderInstruction.of(
            AreaColor("DEPVS"), AreaPattern("FOULAR01"), LineStyle("DOTT", 2, "CHBLK")
        ) + udwhaz + quapnt

    if valsou is not None:
        if valsou <= DANGER_DEPTH_LIMIT:
            instruction = RenderInstruction.of(LineStyle("DOTT", 2, "CHBLK"))
        else:
            instruction = RenderInstruction.of(LineStyle("DASH", 2, "CHGRD"))
        return instruction + sounding + quapnt

    watlev = ctx.attribute_list(feature, "WATLEV").first
    catobs = ctx.attribute_list(feature, "CATOBS").first

    if watlev == WATLEV_SUBMERGED and catobs == CATOBS_FOUL_GROUND:
        instruction = RenderInstruction.of(AreaColor("DEPVS"))
    elif watlev in ABOVE_WATER:
        instruction = RenderInstruction.of(AreaColor("CHBRN"), LineStyle("SOLD", 2, "CSTLN"))
    elif watlev == WATLEV_COVERS_UNCOVERS:
        instruction = RenderInstruction.of(AreaColor("DEPIT"), LineStyle("DASH", 2, "CSTLN"))
    else:
        instruction = RenderInstruction.of(AreaColor("DEPVS"), LineStyle("DOTT", 2, "CHBLK"))
    return instruction + quapnt


def wrecks02(ctx: ProcedureContext, feature: Feature) -> RenderInstruction:
    """
    Symbolize a wreck.

    Point wrecks with a known depth use the danger symbols, others a wreck
    symbol chosen by CATWRK and WATLEV. Area wrecks are outlined by
    accuracy and depth and filled by water level when VALSOU is unknown.
    """
    valsou, depth = _danger_depth(ctx, feature, _wreck_default_depth)
    sounding = sndfrm02(ctx, feature, valsou) if valsou is not None else RenderInstruction.empty()
    udwhaz = udwhaz03(ctx, feature, depth)
    quapnt = quapnt01(ctx, feature)

    if feature.is_point:
        if _is_isolated_danger(udwhaz):
            return udwhaz + quapnt

        if valsou is not None:
            if valsou <= DANGER_DEPTH_LIMIT:
                instruction = RenderInstruction.of(PointSymbol("DANGER01")) + sounding
            else:
                instruction = RenderInstruction.of(PointSymbol("DANGER02"))
            return instruction + udwhaz + quapnt

        catwrk = ctx.attribute_list(feature, "CATWRK")
        watlev = ctx.attribute_list(feature, "WATLEV")
        symbol = "WRECKS05"
        if catwrk.first == 1 and watlev.first == WATLEV_SUBMERGED:
            symbol = "WRECKS04"
        if catwrk.first in (4, 5):
            symbol = "WRECKS01"
        if watlev.first in (WATLEV_PARTLY_SUBMERGED, WATLEV_DRY, WATLEV_COVERS_UNCOVERS, WATLEV_AWASH):
            symbol = "WRECKS01"
        return RenderInstruction.of(PointSymbol(symbol)) + quapnt

    watlev = ctx.attribute_list(feature, "WATLEV").first

    if ctx.low_accuracy(feature):
        line = LineComposed("LOWACC41")
    elif udwhaz:
        line = LineStyle("DOTT", 2, "CHBLK")
    elif valsou is not None:
        line = LineStyle("DOTT" if valsou <= DANGER_DEPTH_LIMIT else "DASH", 2, "CHBLK")
    elif watlev in ABOVE_WATER:
        line = LineStyle("SOLD", 2, "CSTLN")
    elif watlev == WATLEV_COVERS_UNCOVERS:
        line = LineStyle("DASH", 2, "CSTLN")
    else:
        line = LineStyle("DOTT", 2, "CSTLN")

    instruction = RenderInstruction.of(line)

    if valsou is not None:
        instruction += udwhaz + quapnt
        if valsou <= DANGER_DEPTH_LIMIT:
            instruction += sounding
        return instruction

    if feature.is_area:
        if watlev in ABOVE_WATER:
            fill = "CHBRN"
        elif watlev == WATLEV_COVERS_UNCOVERS:
            fill = "DEPIT"
        else:
            fill = "DEPVS"
        instruction += AreaColor(fill)

    return instruction + udwhaz + quapnt
