"""
Lights and topmarks.

Procedures:
    LIGHTS05: Light flares, directional lights and sector lights
    LITDSN01: Light description text (e.g. ``Fl(2)WR 10s 12m 15M``)
    TOPMAR01: Topmarks, upright on rigid and sloping on floating platforms
"""

import logging
from typing import Optional, Sequence

from ..calculations.sectors import Sector, SectorDominance, compare_sectors
from ..chart.feature import Feature, TouchCategory
from ..constants import (
    CATLIT_ABBREVIATIONS,
    CATLIT_DIRECTIONAL,
    CATLIT_EMERGENCY,
    CATLIT_FLOOD,
    CATLIT_MOIRE,
    CATLIT_SILENT,
    CATLIT_STRIP,
    COLOUR_ABBREVIATIONS,
    COLOUR_GREEN,
    COLOUR_MAGENTA,
    COLOUR_RED,
    COLOUR_WHITE,
    FLARE_COLOURS,
    LITCHR_ABBREVIATIONS,
    LITVIS_FAINT,
    STATUS_ABBREVIATIONS,
    TOPMARK_FLOATING,
    TOPMARK_FLOATING_DEFAULT,
    TOPMARK_RIGID,
    TOPMARK_RIGID_DEFAULT,
    UNKNOWN_CODE_TEMPLATE,
    YELLOWISH_COLOURS,
)
from .context import ProcedureContext
from .instructions import AreaColor, LineStyle, PointSymbol, RenderInstruction, Text

logger = logging.getLogger("enc_symbology.symbology.lights")

EXTEND_ARC_RADIUS = "extend_arc_radius"

SECTOR_LEG = LineStyle("DASH", 1, "CHBLK")
QUESTION_MARK = PointSymbol("QUESMRK1")

ORIENT_TEXT = Text("%03.0lf deg", hjust=3, vjust=3, space=3, chars="15110",
                   x_offset=3, y_offset=1, colour="CHBLK", display_group=23,
                   attributes=("ORIENT",))


def placeholder(attribute: str, code) -> str:
    return UNKNOWN_CODE_TEMPLATE.format(attribute=attribute, code=code)


def light_symbol(colours: Sequence[int]) -> str:
    """Flare symbol for a light's colours."""
    if len(colours) == 1:
        if COLOUR_RED in colours:
            return "LIGHTS01"
        if COLOUR_GREEN in colours:
            return "LIGHTS02"
        if any(colour in YELLOWISH_COLOURS for colour in colours):
            return "LIGHTS03"
    elif len(colours) == 2 and COLOUR_WHITE in colours:
        if COLOUR_RED in colours:
            return "LIGHTS01"
        if COLOUR_GREEN in colours:
            return "LIGHTS02"
    return "LIGHTDEF"


def arc_colour(colours: Sequence[int]) -> str:
    """Sector arc colour token for a light's colours."""
    symbol = light_symbol(colours)
    return {"LIGHTS01": "LITRD", "LIGHTS02": "LITGN", "LIGHTS03": "LITYW"}.get(symbol, "CHMGD")


def litdsn01(ctx: ProcedureContext, feature: Feature) -> Optional[str]:
    """
    Build the light description text.

    The text concatenates the category, character, group, colours,
    period, height, range and status of the light. Codes without an
    abbreviation are kept as a ``<ATTR?code>`` placeholder.

    Returns:
        Description text, or None for emergency lights and lights with
        nothing to describe
    """
    parts = []

    catlit = ctx.attribute_list(feature, "CATLIT")
    category = None
    for code in catlit:
        if code == CATLIT_EMERGENCY:
            return None
        if code in CATLIT_ABBREVIATIONS:
            category = CATLIT_ABBREVIATIONS[code]
        elif code not in CATLIT_SILENT:
            ctx.report("LITDSN01", f"no abbreviation for CATLIT {code}", feature)
            category = placeholder("CATLIT", code) + " "
    if category:
        parts.append(category)

    litchr = ctx.attribute_list(feature, "LITCHR")
    if litchr.first is not None:
        if len(litchr) > 1:
            ctx.report("LITDSN01", "several LITCHR values, only the first is shown", feature)
        code = litchr.first
        if code in LITCHR_ABBREVIATIONS:
            parts.append(LITCHR_ABBREVIATIONS[code])
        else:
            ctx.report("LITDSN01", f"no abbreviation for LITCHR {code}", feature)
            parts.append(placeholder("LITCHR", code))

    siggrp = feature.attribute_text("SIGGRP")
    if siggrp:
        parts.append(siggrp)

    colours = ctx.attribute_list(feature, "COLOUR")
    if colours.first is not None:
        for code in colours:
            if code in COLOUR_ABBREVIATIONS:
                parts.append(COLOUR_ABBREVIATIONS[code])
            else:
                ctx.report("LITDSN01", f"no abbreviation for COLOUR {code}", feature)
                parts.append(placeholder("COLOUR", code))
        parts.append(" ")

    sigper = feature.attribute_text("SIGPER")
    if sigper:
        parts.append(f"{sigper}s ")

    height = feature.attribute_text("HEIGHT")
    if height:
        offset = ctx.datum_offset
        value = ctx.attribute_number(feature, "HEIGHT")
        if offset != 0.0 and value is not None:
            # Heights are measured upward, depths downward
            parts.append(f"{value - offset:.1f}m ")
        else:
            parts.append(f"{height}m ")

    valnmr = feature.attribute_text("VALNMR")
    if valnmr:
        value = ctx.attribute_number(feature, "VALNMR")
        if len(valnmr) > 3 and value is not None:
            valnmr = f"{value:.1f}"
            if valnmr.endswith(".0"):
                valnmr = valnmr[:-2]
        parts.append(f"{valnmr}M")

    status = ctx.attribute_list(feature, "STATUS")
    if status.first is not None:
        if len(status) > 1:
            ctx.report("LITDSN01", "several STATUS values, only the first is shown", feature)
        code = status.first
        if code in STATUS_ABBREVIATIONS:
            text = STATUS_ABBREVIATIONS[code]
        else:
            ctx.report("LITDSN01", f"no abbreviation for STATUS {code}", feature)
            text = placeholder("STATUS", code)
        if parts and not parts[-1].endswith(" "):
            parts.append(" ")
        parts.append(text)

    description = "".join(parts).strip()
    return description or None


def extend_arc_radius(ctx: ProcedureContext, feature: Feature) -> bool:
    """
    Decide whether a sector light's legs extend to its nominal range.

    A sector light gets the extended radius when it overlaps at least one
    chained co-located light and none of them sweeps a narrower sector.
    The result only depends on the cell, so it is memoized on the feature.
    """
    if EXTEND_ARC_RADIUS in feature.derived:
        return feature.derived[EXTEND_ARC_RADIUS]

    extend = False
    sector = Sector.from_feature(feature)
    if sector is not None:
        for other in ctx.index.light_group(feature):
            other_sector = Sector.from_feature(other)
            if other_sector is None:
                continue
            dominance = compare_sectors(sector, other_sector)
            if dominance is SectorDominance.B_DOMINANT:
                extend = False
                break
            if dominance is SectorDominance.A_DOMINANT:
                extend = True

    feature.derived[EXTEND_ARC_RADIUS] = extend
    return extend


def _description_text(description: str, flare_at_45: bool) -> Text:
    if flare_at_45:
        return Text(description, hjust=3, vjust=3, space=3, chars="15110",
                    x_offset=2, y_offset=-1, colour="CHBLK", display_group=23)
    return Text(description, hjust=3, vjust=2, space=3, chars="15110",
                x_offset=2, y_offset=0, colour="CHBLK", display_group=23)


def lights05(ctx: ProcedureContext, feature: Feature) -> RenderInstruction:
    """
    Symbolize a light.

    Flood and strip lights have their own symbol and emergency lights are
    not drawn. Lights without sectors get a flare (at 45 degrees when
    sharing a position with another light) or, when directional, a flare
    along ORIENT. Sector lights get their legs and a coloured arc; the
    light whose sector is narrowest among overlapping co-located lights
    gets the extended leg radius.
    """
    catlit = ctx.attribute_list(feature, "CATLIT")

    if catlit.contains_any(*CATLIT_FLOOD):
        return RenderInstruction.of(PointSymbol("LIGHTS82"))
    if CATLIT_STRIP in catlit:
        return RenderInstruction.of(PointSymbol("LIGHTS81"))
    if CATLIT_EMERGENCY in catlit:
        return RenderInstruction.empty()

    directional = catlit.contains_any(CATLIT_DIRECTIONAL, CATLIT_MOIRE)
    has_orient = ctx.attribute_number(feature, "ORIENT") is not None

    instruction = RenderInstruction.empty()
    if directional and has_orient:
        instruction += SECTOR_LEG

    colours = ctx.attribute_list(feature, "COLOUR").codes
    if not colours:
        ctx.report("LIGHTS05", "missing COLOUR, using magenta", feature)
        colours = (COLOUR_MAGENTA,)
    symbol = light_symbol(colours)

    sector = Sector.from_feature(feature)

    if sector is None:
        shared_position = (feature.get_touch_id(TouchCategory.LIGHT_CHAIN) is not None or
                           feature.get_touch_id(TouchCategory.PLATFORM) is not None)
        flare_at_45 = shared_position and any(colour in FLARE_COLOURS for colour in colours)

        if directional:
            if has_orient:
                instruction += RenderInstruction.of(PointSymbol(symbol, "ORIENT"), ORIENT_TEXT)
            else:
                ctx.report("LIGHTS05", "directional light without ORIENT", feature)
                instruction += QUESTION_MARK
        else:
            instruction += PointSymbol(symbol, 45 if flare_at_45 else 135)

        description = litdsn01(ctx, feature)
        if description:
            instruction += _description_text(description, flare_at_45)
        return instruction

    sweep = sector.sweep
    if sweep < 1.0 or sweep == 360.0:
        # All-round light
        instruction += PointSymbol(symbol, 135)
        description = litdsn01(ctx, feature)
        if description:
            instruction += _description_text(description, False)
        return instruction

    instruction += SECTOR_LEG
    extend_arc_radius(ctx, feature)

    litvis = ctx.attribute_list(feature, "LITVIS")
    if litvis.contains_any(*LITVIS_FAINT):
        instruction += SECTOR_LEG
    else:
        instruction += AreaColor(arc_colour(colours))
    return instruction


def topmar01(ctx: ProcedureContext, feature: Feature) -> RenderInstruction:
    """Topmark symbol by TOPSHP, sloping when a floating platform was linked."""
    topshp = ctx.attribute_list(feature, "TOPSHP")
    if topshp.first is None:
        ctx.report("TOPMAR01", "missing TOPSHP", feature)
        return RenderInstruction.of(QUESTION_MARK)

    floating = ctx.touch(feature, TouchCategory.PLATFORM) is not None
    if floating:
        symbol = TOPMARK_FLOATING.get(topshp.first, TOPMARK_FLOATING_DEFAULT)
    else:
        symbol = TOPMARK_RIGID.get(topshp.first, TOPMARK_RIGID_DEFAULT)
    return RenderInstruction.of(PointSymbol(symbol))
