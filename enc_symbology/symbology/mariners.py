"""
Mariner and navigation objects.

These objects are created by the navigation system rather than read from
a cell, so their attributes use lowercase codes. Label attributes whose
code starts with an underscore are filled in by the host application.

Procedures:
    CLRLIN01: Clearing lines
    LEGLIN02: Planned and alternate route legs
    OWNSHP02: Own ship
    PASTRK01: Past track
    VESSEL01: ARPA targets and AIS reports
    VRMEBL01: Range rings and bearing lines
    QUESMRK1: Catch-all for objects without a procedure
"""

import logging

from ..chart.feature import Feature, GeometryKind
from .context import ProcedureContext
from .instructions import (
    AreaColor,
    AreaPattern,
    LineComposed,
    LineStyle,
    PointSymbol,
    RenderInstruction,
    Text,
)

logger = logging.getLogger("enc_symbology.symbology.mariners")

# Vessel report sources (vesrce)
REPORT_ARPA = 1
REPORT_AIS = 2
REPORT_VTS = 3


def _label(attribute: str, colour: str, group: int, hjust=3, vjust=3, space=3,
           chars="15110", x_offset=1, y_offset=1) -> Text:
    return Text(attribute, hjust=hjust, vjust=vjust, space=space, chars=chars,
                x_offset=x_offset, y_offset=y_offset, colour=colour,
                display_group=group, attribute_ref=True)


def _motion_labels(colour: str) -> RenderInstruction:
    """Name, course and speed labels of a vessel."""
    return RenderInstruction.of(
        _label("_vessel_label", colour, 76 if colour == "ARPAT" else 75),
        Text("%03.0lf deg", 3, 3, 3, "15109", 1, 2, colour, 77, attributes=("cogcrs",)),
        Text("%3.1lf kts", 3, 3, 3, "15109", 5, 2, colour, 78, attributes=("sogspd",)),
    )


def _yes(feature: Feature, attribute: str, accepted: str = "Y") -> bool:
    value = feature.attribute_text(attribute)
    return bool(value) and value[0] in accepted


def clrlin01(ctx: ProcedureContext, feature: Feature) -> RenderInstruction:
    """Clearing line with its NMT/NLT label."""
    instruction = RenderInstruction.of(PointSymbol("CLRLIN01"), LineStyle("SOLD", 1, "NINFO"))

    catclr = ctx.attribute_list(feature, "catclr")
    labels = {1: "NMT", 2: "NLT"}
    if catclr.first in labels:
        instruction += Text(labels[catclr.first], hjust=2, vjust=1, space=2, chars="15110",
                            x_offset=-1, y_offset=-1, colour="CHBLK", display_group=51)
    return instruction


def leglin02(ctx: ProcedureContext, feature: Feature) -> RenderInstruction:
    """
    Route leg.

    Selected (planned) legs use the heavy complex line, alternate legs a
    dotted line. Course made good is labelled on every leg and the
    planned speed only when it is positive.
    """
    select = ctx.attribute_list(feature, "select")
    if select.first == 1:
        instruction = RenderInstruction.of(PointSymbol("PLNSPD03"), LineComposed("PLNRTE03"))
    else:
        instruction = RenderInstruction.of(PointSymbol("PLNSPD04"), LineStyle("DOTT", 2, "APLRT"))

    instruction += _label("leglin", "CHBLK", 51, hjust=3, vjust=1, space=2,
                          chars="15111", x_offset=0, y_offset=0)

    plnspd = ctx.attribute_number(feature, "plnspd")
    if plnspd is not None and plnspd > 0.0:
        instruction += _label("plnspd", "CHBLK", 51, hjust=1, vjust=2, space=2,
                              x_offset=0, y_offset=0)
    return instruction


def ownshp02(ctx: ProcedureContext, feature: Feature) -> RenderInstruction:
    """Own ship symbol, outline, vectors, time marks and beam bearing line."""
    instruction = RenderInstruction.empty()
    if feature.attribute_text("_vessel_label"):
        instruction += _motion_labels("SHIPS")

    return instruction + RenderInstruction.of(
        LineStyle("SOLD", 1, "SHIPS"),
        PointSymbol("OWNSHP05"),
        PointSymbol("OWNSHP01"),
        PointSymbol("VECGND01"),
        PointSymbol("VECWTR01"),
        LineStyle("SOLD", 2, "SHIPS"),
        PointSymbol("OSPSIX02"),
        PointSymbol("OSPONE02"),
        LineStyle("SOLD", 1, "SHIPS"),
    )


def pastrk01(ctx: ProcedureContext, feature: Feature) -> RenderInstruction:
    catpst = ctx.attribute_list(feature, "catpst")
    if catpst.first == 1:
        return RenderInstruction.of(LineStyle("SOLD", 2, "PSTRK"), PointSymbol("PASTRK01"))
    if catpst.first == 2:
        return RenderInstruction.of(LineStyle("SOLD", 1, "SYTRK"), PointSymbol("PASTRK02"))
    return RenderInstruction.empty()


def vessel01(ctx: ProcedureContext, feature: Feature) -> RenderInstruction:
    """
    Other vessel, by report source.

    ARPA targets get the target symbol and ARPA time marks; AIS reports
    get the AIS symbols, heading line and time marks. VTS reports have
    no presentation of their own and only get the common vectors.
    """
    instruction = RenderInstruction.empty()
    if feature.attribute_text("_vessel_label"):
        instruction += _motion_labels("ARPAT")

    instruction += RenderInstruction.of(
        PointSymbol("VECGND21"),
        PointSymbol("VECWTR21"),
        LineStyle("SOLD", 2, "ARPAT"),
        PointSymbol("OWNSHP05"),
    )

    vesrce = ctx.attribute_list(feature, "vesrce").first
    if vesrce == REPORT_ARPA:
        instruction += RenderInstruction.of(
            PointSymbol("ARPATG01"), PointSymbol("ARPSIX01"), PointSymbol("ARPONE01"),
        )
    elif vesrce == REPORT_AIS:
        instruction += RenderInstruction.of(
            PointSymbol("AISDEF01"),
            PointSymbol("AISSLP01"),
            PointSymbol("AISVES01"),
            LineStyle("SOLD", 1, "ARPAT"),
            PointSymbol("AISSIX01"),
            PointSymbol("AISONE01"),
        )
    elif vesrce == REPORT_VTS:
        ctx.report("VESSEL01", "no presentation for VTS reports", feature)
    return instruction


def vrmebl01(ctx: ProcedureContext, feature: Feature) -> RenderInstruction:
    instruction = RenderInstruction.empty()
    if _yes(feature, "_setOrigin", accepted="YI"):
        # Freely movable origin
        instruction += PointSymbol("EBLVRM11")

    if _yes(feature, "_normallinestyle"):
        instruction += LineComposed("ERBLNA01")
    else:
        instruction += LineComposed("ERBLNB01")

    if _yes(feature, "_symbrngmrk"):
        instruction += PointSymbol("ERBLTIK1")
    else:
        instruction += AreaColor("CURSR")

    return instruction + _label("_vrmebl_label", "CURSR", 77)


def quesmrk1(ctx: ProcedureContext, feature: Feature) -> RenderInstruction:
    """Question mark drawn in the form of the feature's geometry."""
    if feature.geometry_kind is GeometryKind.LINE:
        return RenderInstruction.of(LineComposed("QUESMRK1"))
    if feature.geometry_kind is GeometryKind.AREA:
        return RenderInstruction.of(AreaPattern("QUESMRK1"))
    return RenderInstruction.of(PointSymbol("QUESMRK1"))
