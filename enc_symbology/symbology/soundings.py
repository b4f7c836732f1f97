"""
Sounding labels.

A sounding is drawn as a row of digit glyphs. Each glyph name is the
prefix (``SOUNDS`` for depths no deeper than the safety depth, ``SOUNDG``
otherwise), a slot character fixing where the digit sits in the label,
and the digit itself. Slot ``5`` holds tenths of a metre.

Procedures:
    SNDFRM02: Glyphs for one depth value
    SOUNDG02: Sounding point features
"""

import logging
import math
from typing import List

from ..chart.feature import Feature
from ..config import MarinerParam
from ..constants import (
    LOW_ACCURACY_QUASOU,
    SOUNDING_BIAS,
    STATUS_EXISTENCE_DOUBTFUL,
    TECSOU_SWEPT,
)
from ..exceptions import DataIntegrityError
from .context import ProcedureContext
from .instructions import PointSymbol, RenderInstruction

logger = logging.getLogger("enc_symbology.symbology.soundings")

# Soundings at or beyond this magnitude have no glyph layout
MAX_SOUNDING = 100000.0


def sounding_glyphs(depth: float) -> List[str]:
    """
    Slot and digit pairs for the magnitude of a (biased) depth.

    Depths under 10 m always show tenths; depths under 31 m show tenths
    unless they are zero; deeper soundings are whole metres.

    Example:
        >>> sounding_glyphs(7.51)
        ['17', '55']
        >>> sounding_glyphs(1234.01)
        ['21', '12', '03', '44']
    """
    magnitude = abs(depth)
    whole = int(magnitude)
    tenths = min(int((magnitude - whole) * 10), 9)

    if magnitude < 10.0:
        return [f"1{whole}", f"5{tenths}"]
    if magnitude < 31.0 and tenths != 0:
        return [f"2{whole // 10}", f"1{whole % 10}", f"5{tenths}"]
    if whole < 100:
        return [f"1{whole // 10}", f"0{whole % 10}"]
    if whole < 1000:
        return [f"2{whole // 100}", f"1{whole // 10 % 10}", f"0{whole % 10}"]
    if whole < 10000:
        return [f"2{whole // 1000}", f"1{whole // 100 % 10}", f"0{whole // 10 % 10}", f"4{whole % 10}"]
    return [
        f"3{whole // 10000}",
        f"2{whole // 1000 % 10}",
        f"1{whole // 100 % 10}",
        f"0{whole // 10 % 10}",
        f"4{whole % 10}",
    ]


def sndfrm02(ctx: ProcedureContext, feature: Feature, depth: float) -> RenderInstruction:
    """
    Compose the glyphs of a datum-adjusted depth.

    Args:
        ctx: Procedure context
        feature: Feature carrying the sounding quality attributes
        depth: Depth in metres, negative above the datum

    Returns:
        Swept and low accuracy markers, digit glyphs, then the drying
        marker for negative depths
    """
    # Keeps whole-metre depths from truncating to the metre below
    depth += SOUNDING_BIAS if depth >= 0.0 else -SOUNDING_BIAS

    if depth <= ctx.param(MarinerParam.SAFETY_DEPTH):
        prefix = "SOUNDS"
    else:
        prefix = "SOUNDG"

    symbols = []

    if TECSOU_SWEPT in ctx.attribute_list(feature, "TECSOU"):
        symbols.append(f"{prefix}B1")

    quasou = ctx.attribute_list(feature, "QUASOU")
    status = ctx.attribute_list(feature, "STATUS")
    if (quasou.contains_any(*LOW_ACCURACY_QUASOU) or STATUS_EXISTENCE_DOUBTFUL in status
            or ctx.low_accuracy(feature)):
        symbols.append(f"{prefix}C2")

    if abs(depth) >= MAX_SOUNDING:
        ctx.report("SNDFRM02", "sounding out of range", feature)
        symbols.append("QUESMRK1")
        return RenderInstruction(tuple(PointSymbol(name) for name in symbols))

    symbols.extend(f"{prefix}{glyph}" for glyph in sounding_glyphs(depth))

    if depth < 0.0:
        symbols.append(f"{prefix}A1")

    return RenderInstruction(tuple(PointSymbol(name) for name in symbols))


def soundg02(ctx: ProcedureContext, feature: Feature) -> RenderInstruction:
    """
    Label a sounding point.

    Raises:
        DataIntegrityError: If the feature is not a single point with a depth
    """
    if not feature.is_point:
        raise DataIntegrityError(f"{feature!r}: sounding must be a point feature")
    if feature.point_count > 1:
        raise DataIntegrityError(
            f"{feature!r}: sounding holds {feature.point_count} points instead of one"
        )
    if feature.coordinates.shape[1] < 3:
        raise DataIntegrityError(f"{feature!r}: sounding has no depth coordinate")

    depth = float(feature.coordinates[0, 2])
    if not math.isfinite(depth):
        raise DataIntegrityError(f"{feature!r}: sounding depth is not a number")
    return sndfrm02(ctx, feature, ctx.adjust(depth))
