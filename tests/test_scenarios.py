"""End-to-end cell scenarios through build_index and SymbologyEngine."""

import pytest

from enc_symbology.api import build_index
from enc_symbology.chart.feature import ScaleMinimum
from enc_symbology.config import MarinerParameters
from enc_symbology.symbology import SymbologyEngine
from enc_symbology.symbology.lights import EXTEND_ARC_RADIUS


def _engine(features, diagnostics, **settings):
    index = build_index(features, diagnostics=diagnostics)
    return SymbologyEngine(index, MarinerParameters(**settings), diagnostics)


def test_depth_area_between_shallow_and_safety_contour(make_feature, diagnostics):
    area = make_feature(1, "DEPARE", "Area", DRVAL1=5, DRVAL2=8)
    engine = _engine([area], diagnostics, safety_contour=10.0, shallow_contour=5.0, two_shades=False)
    instruction = engine.run("DEPARE01", area)
    assert instruction.serialize() == ";AC(DEPMS)"
    assert not [token for token in instruction if token.code == "AP"]


def test_contour_at_safety_contour(make_feature, diagnostics):
    contour = make_feature(1, "DEPCNT", "Line", VALDCO=10)
    engine = _engine([contour], diagnostics, safety_contour=10.0)
    assert engine.run("DEPCNT02", contour).serialize() == ";OP(8OD13010);LS(SOLD,2,DEPSC)"
    assert contour.scale_minimum is ScaleMinimum.ALWAYS_VISIBLE


def test_obstruction_without_attributes(make_feature, diagnostics):
    danger = make_feature(1, "OBSTRN")
    engine = _engine([danger], diagnostics)
    assert engine.run("OBSTRN04", danger).serialize() == ";SY(OBSTRN01)"


@pytest.mark.parametrize("order", [(0, 1), (1, 0)])
def test_narrow_sector_gets_extended_radius(make_feature, diagnostics, order):
    narrow = make_feature(1, "LIGHTS", COLOUR="3", SECTR1=100, SECTR2=130)
    wide = make_feature(2, "LIGHTS", COLOUR="4", SECTR1=90, SECTR2=180)
    lights = (narrow, wide)
    engine = _engine(list(lights), diagnostics)

    for position in order:
        engine.run("LIGHTS05", lights[position])

    assert narrow.derived[EXTEND_ARC_RADIUS] is True
    assert wide.derived[EXTEND_ARC_RADIUS] is False


@pytest.mark.parametrize("safety_depth, prefix", [(30.0, "SOUNDS"), (5.0, "SOUNDG")])
def test_sounding_prefix_against_safety_depth(make_feature, diagnostics, safety_depth, prefix):
    sounding = make_feature(1, "SOUNDG", coordinates=[[0.0, 0.0, 7.5]])
    engine = _engine([sounding], diagnostics, safety_depth=safety_depth)
    assert engine.run("SOUNDG02", sounding).serialize() == f";SY({prefix}17);SY({prefix}55)"


def test_rerun_after_parameter_change(make_feature, diagnostics):
    contour = make_feature(1, "DEPCNT", "Line", VALDCO=10)
    engine = _engine([contour], diagnostics, safety_contour=10.0)
    assert engine.run("DEPCNT02", contour).serialize() == ";OP(8OD13010);LS(SOLD,2,DEPSC)"

    engine.params = MarinerParameters(safety_contour=20.0)
    assert engine.run("DEPCNT02", contour).serialize() == ";OP(---33020);LS(SOLD,1,DEPCN)"
    assert contour.scale_minimum is ScaleMinimum.RESET
