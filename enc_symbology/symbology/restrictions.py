"""
Restricted area symbols.

A RESTRN list selects one symbol by tier: entry restrictions first, then
anchoring, then fishing, then everything else. Inside a tier the symbol
variant is raised to the stricter form when the list also restricts
anchoring or fishing (or, for restricted areas, when CATREA names a
strict category), and to the informational form when it carries an
information restriction.

Procedures:
    RESCSP01: Restriction symbol from RESTRN alone
    RESTRN01: Restricted activity areas (anchorages, cable areas, ...)
    RESARE02: Restricted areas, with CATREA refinement and boundary
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..chart.attributes import ABSENT, CodedList
from ..chart.feature import Feature
from ..config import MarinerParam
from ..constants import (
    CATREA_INFORMATION,
    CATREA_STRICT,
    RESTRN_ANCHORING,
    RESTRN_ENTRY,
    RESTRN_FISHING,
    RESTRN_INFORMATION,
    RESTRN_PROHIBITIVE,
)
from .context import ProcedureContext
from .instructions import (
    DisplayPriorityOverride,
    LineComposed,
    LineStyle,
    PointSymbol,
    RenderInstruction,
)

logger = logging.getLogger("enc_symbology.symbology.restrictions")


@dataclass(frozen=True)
class RestrictionTier:
    name: str
    codes: Tuple[int, ...]
    stricter_codes: Tuple[int, ...]
    strict_symbol: str
    information_symbol: str
    base_symbol: str
    boundary: str


RESTRICTION_TIERS: Tuple[RestrictionTier, ...] = (
    RestrictionTier("entry", RESTRN_ENTRY, RESTRN_PROHIBITIVE,
                    "ENTRES61", "ENTRES71", "ENTRES51", "CTYARE51"),
    RestrictionTier("anchoring", RESTRN_ANCHORING, RESTRN_FISHING,
                    "ACHRES61", "ACHRES71", "ACHRES51", "ACHRES51"),
    RestrictionTier("fishing", RESTRN_FISHING, (),
                    "FSHRES51", "FSHRES71", "FSHRES51", "FSHRES51"),
)

OTHER_BOUNDARY = "CTYARE51"


def select_restriction_symbol(
    restrn: CodedList,
    catrea: CodedList = ABSENT
) -> Tuple[Optional[RestrictionTier], str]:
    """
    Select the restriction symbol for a RESTRN list.

    Args:
        restrn: Decoded RESTRN list (may be empty)
        catrea: Decoded CATREA list refining the choice

    Returns:
        Tuple of the matching tier (None for "other") and the symbol name

    Example:
        >>> select_restriction_symbol(decode_list("7,1"))[1]
        'ENTRES61'
    """
    for tier in RESTRICTION_TIERS:
        if not restrn.contains_any(*tier.codes):
            continue
        if restrn.contains_any(*tier.stricter_codes) or catrea.contains_any(*CATREA_STRICT):
            return tier, tier.strict_symbol
        if restrn.contains_any(*RESTRN_INFORMATION) or catrea.contains_any(*CATREA_INFORMATION):
            return tier, tier.information_symbol
        return tier, tier.base_symbol

    if restrn.contains_any(*RESTRN_INFORMATION):
        return None, "INFARE51"
    return None, "RSRDEF51"


def rescsp01(ctx: ProcedureContext, restrn: CodedList) -> RenderInstruction:
    """Restriction symbol for a RESTRN list."""
    _, symbol = select_restriction_symbol(restrn)
    return RenderInstruction.of(PointSymbol(symbol))


def restrn01(ctx: ProcedureContext, feature: Feature) -> RenderInstruction:
    """Restriction symbol of an area where some activity is restricted; nothing without RESTRN."""
    restrn = ctx.attribute_list(feature, "RESTRN")
    if restrn.is_absent:
        return RenderInstruction.empty()
    return rescsp01(ctx, restrn)


def _boundary(ctx: ProcedureContext, composed: str):
    if ctx.flag(MarinerParam.SYMBOLIZED_BOUNDARIES):
        return LineComposed(composed)
    return LineStyle("DASH", 2, "CHMGD")


def resare02(ctx: ProcedureContext, feature: Feature) -> RenderInstruction:
    """
    Restricted area: priority override, boundary and centred symbol.

    Without RESTRN the symbol depends on CATREA alone. A RESTRN that is
    present but empty still takes the RESTRN path.
    """
    restrn = ctx.attribute_list(feature, "RESTRN")
    catrea = ctx.attribute_list(feature, "CATREA")

    if restrn.is_present:
        tier, symbol = select_restriction_symbol(restrn, catrea)
        if tier is None:
            return RenderInstruction.of(_boundary(ctx, OTHER_BOUNDARY), PointSymbol(symbol))
        return RenderInstruction.of(
            DisplayPriorityOverride("6---"),
            _boundary(ctx, tier.boundary),
            PointSymbol(symbol),
        )

    strict = catrea.contains_any(*CATREA_STRICT)
    information = catrea.contains_any(*CATREA_INFORMATION)
    if strict:
        symbol = "CTYARE71" if information else "CTYARE51"
    elif information:
        symbol = "INFARE71"
    else:
        symbol = "RSRDEF51"

    return RenderInstruction.of(_boundary(ctx, OTHER_BOUNDARY), PointSymbol(symbol))
