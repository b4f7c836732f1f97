"""Tests for light flares, sector lights, light descriptions and topmarks."""

import pytest

from enc_symbology.symbology.lights import (
    EXTEND_ARC_RADIUS,
    arc_colour,
    extend_arc_radius,
    light_symbol,
    lights05,
    litdsn01,
    placeholder,
    topmar01,
)


def _tx(text, vjust=2, y_offset=0):
    return f"TX('{text}',3,{vjust},3,'15110',2,{y_offset},CHBLK,23)"


class TestLightSymbol:

    @pytest.mark.parametrize("colours, expected", [
        ((3,), "LIGHTS01"),
        ((4,), "LIGHTS02"),
        ((1,), "LIGHTS03"),
        ((6,), "LIGHTS03"),
        ((1, 3), "LIGHTS01"),
        ((4, 1), "LIGHTS02"),
        ((3, 4), "LIGHTDEF"),
        ((1, 3, 4), "LIGHTDEF"),
        ((12,), "LIGHTDEF"),
    ])
    def test_symbol(self, colours, expected):
        assert light_symbol(colours) == expected

    def test_arc_colour(self):
        assert arc_colour((3,)) == "LITRD"
        assert arc_colour((1, 4)) == "LITGN"
        assert arc_colour((11,)) == "LITYW"
        assert arc_colour((5,)) == "CHMGD"


class TestLitdsn01:

    def test_full_description(self, make_context, make_feature):
        light = make_feature(1, "LIGHTS", LITCHR="2", SIGGRP="(2)", COLOUR="1,3",
                             SIGPER=10, HEIGHT=12, VALNMR=15)
        assert litdsn01(make_context([light]), light) == "Fl(2)WR 10s 12m 15M"

    def test_status_is_separated(self, make_context, make_feature):
        light = make_feature(1, "LIGHTS", LITCHR="1", COLOUR="3", VALNMR=5, STATUS="2")
        assert litdsn01(make_context([light]), light) == "FR 5M occas"

    def test_category_prefix(self, make_context, make_feature):
        light = make_feature(1, "LIGHTS", CATLIT="1", LITCHR="1", COLOUR="1")
        assert litdsn01(make_context([light]), light) == "Dir FW"

    def test_unknown_codes_are_placeholders(self, make_context, make_feature, diagnostics):
        light = make_feature(1, "LIGHTS", LITCHR="99", COLOUR="3")
        assert litdsn01(make_context([light]), light) == "<LITCHR?99>R"
        assert diagnostics.seen("LITDSN01", "no abbreviation for LITCHR 99")
        assert placeholder("STATUS", 40) == "<STATUS?40>"

    def test_height_uses_datum_offset(self, make_context, make_feature):
        light = make_feature(1, "LIGHTS", HEIGHT=12)
        assert litdsn01(make_context([light], datum_offset=1.0), light) == "11.0m"

    def test_long_range_value_is_rounded(self, make_context, make_feature):
        light = make_feature(1, "LIGHTS", VALNMR="15.00")
        assert litdsn01(make_context([light]), light) == "15M"

    def test_nothing_to_describe(self, make_context, make_feature):
        light = make_feature(1, "LIGHTS")
        assert litdsn01(make_context([light]), light) is None

    def test_emergency_light(self, make_context, make_feature):
        light = make_feature(1, "LIGHTS", CATLIT="17", COLOUR="1")
        assert litdsn01(make_context([light]), light) is None


class TestLights05:

    @pytest.mark.parametrize("catlit, expected", [
        ("8", ";SY(LIGHTS82)"),
        ("11", ";SY(LIGHTS82)"),
        ("9", ";SY(LIGHTS81)"),
        ("17", ""),
    ])
    def test_special_categories(self, make_context, make_feature, catlit, expected):
        light = make_feature(1, "LIGHTS", CATLIT=catlit, COLOUR="1")
        assert lights05(make_context([light]), light).serialize() == expected

    def test_single_light_flare(self, make_context, make_feature):
        light = make_feature(1, "LIGHTS", COLOUR="3")
        assert lights05(make_context([light]), light).serialize() == (
            ";SY(LIGHTS01,135);" + _tx("R")
        )

    def test_missing_colour(self, make_context, make_feature, diagnostics):
        light = make_feature(1, "LIGHTS")
        assert lights05(make_context([light]), light).serialize() == ";SY(LIGHTDEF,135)"
        assert diagnostics.seen("LIGHTS05", "missing COLOUR, using magenta")

    def test_white_light_sharing_position_flares_at_45(self, make_context, make_feature):
        first = make_feature(1, "LIGHTS", COLOUR="1", LITCHR="2")
        second = make_feature(2, "LIGHTS", COLOUR="3")
        ctx = make_context([first, second])
        assert lights05(ctx, first).serialize() == (
            ";SY(LIGHTS03,45);" + _tx("FlW", vjust=3, y_offset=-1)
        )

    def test_red_light_sharing_position_keeps_135(self, make_context, make_feature):
        first = make_feature(1, "LIGHTS", COLOUR="3")
        second = make_feature(2, "LIGHTS", COLOUR="1")
        ctx = make_context([first, second])
        assert lights05(ctx, first).serialize() == ";SY(LIGHTS01,135);" + _tx("R")

    def test_light_on_buoy_flares_at_45(self, make_context, make_feature):
        light = make_feature(1, "LIGHTS", COLOUR="1")
        buoy = make_feature(2, "BOYLAT")
        ctx = make_context([light, buoy])
        assert lights05(ctx, light).serialize() == (
            ";SY(LIGHTS03,45);" + _tx("W", vjust=3, y_offset=-1)
        )

    def test_directional_light(self, make_context, make_feature):
        light = make_feature(1, "LIGHTS", CATLIT="1", ORIENT=90, COLOUR="4")
        assert lights05(make_context([light]), light).serialize() == (
            ";LS(DASH,1,CHBLK);SY(LIGHTS02,ORIENT);"
            "TE('%03.0lf deg','ORIENT',3,3,3,'15110',3,1,CHBLK,23);" + _tx("Dir G")
        )

    def test_directional_light_without_orient(self, make_context, make_feature, diagnostics):
        light = make_feature(1, "LIGHTS", CATLIT="1", COLOUR="4")
        assert lights05(make_context([light]), light).serialize() == (
            ";SY(QUESMRK1);" + _tx("Dir G")
        )
        assert diagnostics.seen("LIGHTS05", "directional light without ORIENT")

    def test_all_round_sector(self, make_context, make_feature):
        light = make_feature(1, "LIGHTS", COLOUR="3", SECTR1=0, SECTR2=360)
        assert lights05(make_context([light]), light).serialize() == (
            ";SY(LIGHTS01,135);" + _tx("R")
        )

    def test_sector_light(self, make_context, make_feature):
        light = make_feature(1, "LIGHTS", COLOUR="3", SECTR1=100, SECTR2=130)
        assert lights05(make_context([light]), light).serialize() == ";LS(DASH,1,CHBLK);AC(LITRD)"

    def test_sector_light_is_not_described(self, make_context, make_feature, diagnostics):
        light = make_feature(1, "LIGHTS", COLOUR="3", LITCHR="99", SECTR1=100, SECTR2=130)
        assert "TX(" not in lights05(make_context([light]), light).serialize()
        assert not diagnostics.seen("LITDSN01", "no abbreviation for LITCHR 99")

    def test_faint_sector(self, make_context, make_feature):
        light = make_feature(1, "LIGHTS", COLOUR="4", SECTR1=100, SECTR2=130, LITVIS="3")
        assert lights05(make_context([light]), light).serialize() == (
            ";LS(DASH,1,CHBLK);LS(DASH,1,CHBLK)"
        )


class TestExtendArcRadius:

    def test_lone_sector_light(self, make_context, make_feature):
        light = make_feature(1, "LIGHTS", SECTR1=100, SECTR2=130)
        ctx = make_context([light])
        assert extend_arc_radius(ctx, light) is False
        assert light.derived[EXTEND_ARC_RADIUS] is False

    def test_narrowest_overlapping_sector_extends(self, make_context, make_feature):
        narrow = make_feature(1, "LIGHTS", SECTR1=100, SECTR2=130)
        wide = make_feature(2, "LIGHTS", SECTR1=90, SECTR2=180)
        middle = make_feature(3, "LIGHTS", SECTR1=95, SECTR2=150)
        ctx = make_context([narrow, wide, middle])
        assert extend_arc_radius(ctx, middle) is False
        assert extend_arc_radius(ctx, wide) is False
        assert extend_arc_radius(ctx, narrow) is True

    def test_disjoint_sectors_do_not_extend(self, make_context, make_feature):
        first = make_feature(1, "LIGHTS", SECTR1=0, SECTR2=40)
        second = make_feature(2, "LIGHTS", SECTR1=90, SECTR2=180)
        ctx = make_context([first, second])
        assert extend_arc_radius(ctx, first) is False
        assert extend_arc_radius(ctx, second) is False

    def test_lights_without_sectors_are_ignored(self, make_context, make_feature):
        sector = make_feature(1, "LIGHTS", SECTR1=100, SECTR2=130)
        flare = make_feature(2, "LIGHTS", COLOUR="1")
        ctx = make_context([sector, flare])
        assert extend_arc_radius(ctx, sector) is False

    def test_memoized(self, make_context, make_feature):
        light = make_feature(1, "LIGHTS", SECTR1=100, SECTR2=130)
        light.derived[EXTEND_ARC_RADIUS] = True
        assert extend_arc_radius(make_context([light]), light) is True


class TestTopmar01:

    def test_floating_platform(self, make_context, make_feature):
        topmark = make_feature(1, "TOPMAR", TOPSHP="1")
        ctx = make_context([topmark, make_feature(2, "LITFLT")])
        assert topmar01(ctx, topmark).serialize() == ";SY(TOPMAR02)"

    def test_rigid_platform(self, make_context, make_feature):
        topmark = make_feature(1, "TOPMAR", TOPSHP="1")
        ctx = make_context([topmark, make_feature(2, "BCNCAR")])
        assert topmar01(ctx, topmark).serialize() == ";SY(TOPMAR22)"

    def test_unknown_shape(self, make_context, make_feature):
        floating = make_feature(1, "TOPMAR", TOPSHP="99")
        ctx = make_context([floating, make_feature(2, "BOYCAR")])
        assert topmar01(ctx, floating).serialize() == ";SY(TMARDEF2)"

    def test_missing_shape(self, make_context, make_feature, diagnostics):
        topmark = make_feature(1, "TOPMAR")
        assert topmar01(make_context([topmark]), topmark).serialize() == ";SY(QUESMRK1)"
        assert diagnostics.seen("TOPMAR01", "missing TOPSHP")
