"""Shared fixtures for enc_symbology tests.

Provides:
- make_feature: factory for point, line and area features with raw attributes
- diagnostics: a fresh DiagnosticLog per test, so ``seen()`` starts empty
- make_context: builds a linked index and a ProcedureContext over it
"""

import pytest

from enc_symbology.chart.feature import Feature
from enc_symbology.config import MarinerParameters
from enc_symbology.crossref import CrossReferenceIndex
from enc_symbology.logging_config import DiagnosticLog, setup_logging
from enc_symbology.symbology.context import ProcedureContext


SQUARE = [[0.0, 0.0], [10.0, 0.0], [10.0, 10.0], [0.0, 10.0], [0.0, 0.0]]
DIAGONAL = [[0.0, 0.0], [10.0, 10.0]]
CENTRE = [[5.0, 5.0]]


def _default_coordinates(kind):
    if kind == "Area":
        return SQUARE
    if kind == "Line":
        return DIAGONAL
    return CENTRE


@pytest.fixture
def make_feature():
    """Factory: make_feature(id, class, kind="Point", coordinates=None, **attributes)."""

    def _make(feature_id, class_name, kind="Point", coordinates=None, **attributes):
        if coordinates is None:
            coordinates = _default_coordinates(kind)
        return Feature(feature_id, class_name, kind, coordinates, attributes=attributes)

    return _make


@pytest.fixture
def diagnostics():
    return DiagnosticLog(logger_name="enc_symbology.diagnostics.tests")


@pytest.fixture
def params():
    return MarinerParameters()


@pytest.fixture
def make_context(params, diagnostics):
    """Factory: make_context(features=(), **parameter_overrides)."""

    def _make(features=(), **overrides):
        index = CrossReferenceIndex(diagnostics=diagnostics).build(features)
        settings = params.with_overrides(**overrides) if overrides else params
        return ProcedureContext(settings, index, diagnostics)

    return _make


@pytest.fixture(autouse=True)
def restore_logging():
    """Reinstall the default console handler once a test has replaced it."""
    yield
    setup_logging()
