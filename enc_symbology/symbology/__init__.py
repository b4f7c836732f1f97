"""
Conditional symbology procedures for enc_symbology.

This module turns linked chart features into render instructions:
- Render instruction tokens with exact string serialization and parsing
- Depth shading, safety contour highlighting and underwater hazards
- Obstruction, wreck and sounding labels
- Light flares, sectors and descriptions, topmarks
- Restricted areas, shoreline constructions and mariner objects

Main Classes:
    SymbologyEngine: Resolves a procedure name and runs it on a feature
    Procedure: Enum of the procedures callable from the look-up tables
    RenderInstruction: Immutable token sequence handed to the renderer

Example:
    >>> from enc_symbology.crossref import CrossReferenceIndex
    >>> from enc_symbology.symbology import SymbologyEngine
    >>>
    >>> index = CrossReferenceIndex().build(features)
    >>> engine = SymbologyEngine(index)
    >>> print(engine.run("LIGHTS05", light))
    ;LS(DASH,1,CHBLK);AC(LITRD)
"""

from .context import ProcedureContext
from .engine import ALIASES, PROCEDURES, SUB_PROCEDURES, Procedure, SymbologyEngine
from .instructions import (
    AreaColor,
    AreaPattern,
    DisplayPriorityOverride,
    LineComposed,
    LineStyle,
    PointSymbol,
    RenderInstruction,
    Text,
    Token,
    parse_token,
)
from .lights import extend_arc_radius
from .seabed import DepthShade, select_depth_shade
from .soundings import sounding_glyphs

__all__ = [
    "ProcedureContext",
    "ALIASES",
    "PROCEDURES",
    "SUB_PROCEDURES",
    "Procedure",
    "SymbologyEngine",
    "AreaColor",
    "AreaPattern",
    "DisplayPriorityOverride",
    "LineComposed",
    "LineStyle",
    "PointSymbol",
    "RenderInstruction",
    "Text",
    "Token",
    "parse_token",
    "extend_arc_radius",
    "DepthShade",
    "select_depth_shade",
    "sounding_glyphs",
]
