"""
enc_symbology - S-52 conditional symbology for electronic navigational charts.

This package computes the render instructions of chart features whose
presentation depends on their attributes, on neighbouring features and
on the mariner's settings: depth area shading, safety contour
highlighting, isolated dangers, sounding labels, light sectors, topmarks
and restricted areas.

Quick Start:
    >>> from enc_symbology import load_cell, symbolize_cell
    >>>
    >>> features = load_cell("harbour.yaml")
    >>> instructions = symbolize_cell(features)
    >>> print(instructions[12])
    ;OP(8OD13010);LS(SOLD,2,DEPSC)

Advanced Usage:
    >>> # Build the index once and re-run procedures with new settings
    >>> from enc_symbology import build_index, MarinerParameters, SymbologyEngine
    >>>
    >>> index = build_index(features)
    >>> engine = SymbologyEngine(index, MarinerParameters(safety_contour=10.0))
    >>> engine.run("DEPARE01", depth_area).serialize()
    ';AC(DEPDW)'
"""

__version__ = "0.1.0"

# Initialize logging with default settings
from .logging_config import DiagnosticLog, get_diagnostics, setup_logging
setup_logging()

# Configuration
from .config import MarinerParam, MarinerParameters

# Chart model and index
from .chart import Feature, GeometryKind, ScaleMinimum, TouchCategory
from .crossref import CrossReferenceIndex

# Calculations
from . import calculations

# Procedures
from .symbology import Procedure, RenderInstruction, SymbologyEngine

# User-facing API
from .api import build_index, load_cell, lookup_procedure, symbolize_cell, symbolize_feature

# Exceptions
from .exceptions import (
    SymbologyError,
    DataIntegrityError,
    FeatureError,
    IndexStateError,
    InstructionSyntaxError,
    InvalidParameterError
)

__all__ = [
    # Version info
    "__version__",

    # Logging and diagnostics
    "setup_logging",
    "DiagnosticLog",
    "get_diagnostics",

    # Configuration
    "MarinerParam",
    "MarinerParameters",

    # Core components
    "Feature",
    "GeometryKind",
    "ScaleMinimum",
    "TouchCategory",
    "CrossReferenceIndex",
    "calculations",
    "Procedure",
    "RenderInstruction",
    "SymbologyEngine",

    # User-facing API
    "build_index",
    "load_cell",
    "lookup_procedure",
    "symbolize_cell",
    "symbolize_feature",

    # Exceptions
    "SymbologyError",
    "DataIntegrityError",
    "FeatureError",
    "IndexStateError",
    "InstructionSyntaxError",
    "InvalidParameterError",
]
