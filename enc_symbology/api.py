"""
Main API module for enc_symbology.

This module provides user-facing functions that wrap the two-pass index
build and the procedure engine. ``symbolize_cell()`` handles the complete
workflow from a list of features to one render instruction per feature.

Example:
    >>> from enc_symbology import load_cell, symbolize_cell
    >>>
    >>> features = load_cell("harbour.yaml")
    >>> for feature_id, instruction in symbolize_cell(features).items():
    ...     print(feature_id, instruction)

    >>> # Re-render with different mariner settings
    >>> params = MarinerParameters(safety_contour=10.0, two_shades=True)
    >>> instructions = symbolize_cell(features, params=params)
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from .chart.feature import Feature
from .chart.loader import load_cell
from .config import MarinerParameters
from .constants import DEFAULT_LOOKUP
from .crossref import CrossReferenceIndex
from .logging_config import DiagnosticLog
from .symbology.engine import Procedure, SymbologyEngine
from .symbology.instructions import RenderInstruction

logger = logging.getLogger(__name__)

LookupTable = Dict[Tuple[str, str], str]

__all__ = [
    "build_index",
    "load_cell",
    "lookup_procedure",
    "symbolize_cell",
    "symbolize_feature",
]


def build_index(
    features: Iterable[Feature],
    diagnostics: Optional[DiagnosticLog] = None
) -> CrossReferenceIndex:
    """
    Classify and then link every feature of a cell.

    Args:
        features: All features of one cell
        diagnostics: Diagnostic sink (default: process-wide instance)

    Returns:
        Linked cross-reference index

    Raises:
        DataIntegrityError: If two features share an identifier
    """
    return CrossReferenceIndex(diagnostics=diagnostics).build(features)


def lookup_procedure(feature: Feature, lookup: Optional[LookupTable] = None) -> str:
    """
    Procedure name for a feature from a (class, geometry kind) look-up table.

    A ``"*"`` geometry entry matches any kind. Features with no entry get
    ``QUESMRK1``.

    Example:
        >>> lookup_procedure(Feature(1, "DEPCNT", "Line", [[0, 0], [1, 1]]))
        'DEPCNT02'
    """
    table = DEFAULT_LOOKUP if lookup is None else lookup
    kind = feature.geometry_kind.value
    name = table.get((feature.class_name, kind)) or table.get((feature.class_name, "*"))
    if name is None:
        logger.debug(f"No look-up entry for {feature!r}")
        return Procedure.QUESMRK1.value
    return name


def symbolize_feature(
    feature: Feature,
    procedure: Optional[str] = None,
    index: Optional[CrossReferenceIndex] = None,
    params: Optional[MarinerParameters] = None,
    lookup: Optional[LookupTable] = None,
    diagnostics: Optional[DiagnosticLog] = None
) -> RenderInstruction:
    """
    Symbolize one feature.

    Args:
        feature: Feature to symbolize
        procedure: Procedure name (default: from the look-up table)
        index: Linked index of the feature's cell. Without one the feature
            is indexed on its own and has no cross-references.
        params: Mariner parameters (default: standard settings)
        lookup: Look-up table used when ``procedure`` is not given
        diagnostics: Diagnostic sink

    Returns:
        Render instruction for the feature
    """
    if index is None:
        index = build_index([feature], diagnostics=diagnostics)
    if procedure is None:
        procedure = lookup_procedure(feature, lookup)

    engine = SymbologyEngine(index, params, diagnostics)
    return engine.run(procedure, feature)


def symbolize_cell(
    features: Iterable[Feature],
    params: Optional[MarinerParameters] = None,
    lookup: Optional[LookupTable] = None,
    diagnostics: Optional[DiagnosticLog] = None
) -> Dict[int, RenderInstruction]:
    """
    Build the index of a cell and symbolize every feature in it.

    Args:
        features: All features of one cell
        params: Mariner parameters (default: standard settings)
        lookup: (class, geometry kind) to procedure table
            (default: ``DEFAULT_LOOKUP``)
        diagnostics: Diagnostic sink

    Returns:
        Dictionary mapping feature id to render instruction, in id order

    Raises:
        DataIntegrityError: If a feature cannot be symbolized at all
    """
    features: List[Feature] = list(features)
    index = build_index(features, diagnostics=diagnostics)
    engine = SymbologyEngine(index, params, diagnostics)

    logger.info(f"Symbolizing {len(features)} features")
    results = {}
    for feature in sorted(features, key=lambda f: f.feature_id):
        name = lookup_procedure(feature, lookup)
        results[feature.feature_id] = engine.run(name, feature)

    drawn = sum(1 for instruction in results.values() if instruction)
    logger.info(f"Symbolized {len(results)} features ({drawn} with instructions)")
    return results
