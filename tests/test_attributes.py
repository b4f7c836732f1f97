"""Tests for coded attribute decoding and the Feature model."""

import numpy as np
import pytest

from enc_symbology.chart.attributes import (
    ABSENT,
    EMPTY,
    ListState,
    decode_list,
    decode_number,
    decode_text,
)
from enc_symbology.chart.feature import Feature, GeometryKind, ScaleMinimum, TouchCategory
from enc_symbology.chart.loader import feature_from_dict, load_cell
from enc_symbology.exceptions import FeatureError


class TestDecodeList:
    """Three-way coded list decoding."""

    def test_string_list(self, diagnostics):
        codes = decode_list("1,3", "COLOUR", diagnostics)
        assert codes.state is ListState.VALUES
        assert codes.codes == (1, 3)
        assert codes.first == 1
        assert 3 in codes

    def test_present_but_empty(self, diagnostics):
        for raw in (None, "", "  ", []):
            assert decode_list(raw, "RESTRN", diagnostics) is EMPTY

    def test_absent_and_empty_differ(self, make_feature):
        feature = make_feature(1, "RESARE", "Area", RESTRN="")
        assert feature.attribute_list("RESTRN").is_present
        assert feature.attribute_list("RESTRN").first is None
        assert feature.attribute_list("CATREA") is ABSENT
        assert not ABSENT.is_present

    def test_integer_sequence_and_scalar(self, diagnostics):
        assert decode_list([7, 1], "RESTRN", diagnostics).codes == (7, 1)
        assert decode_list(4, "COLOUR", diagnostics).codes == (4,)
        assert decode_list("6.0", "CATOBS", diagnostics).codes == (6,)

    def test_malformed_codes_dropped(self, diagnostics):
        codes = decode_list("1,x,300,-2,2.5,3", "COLOUR", diagnostics)
        assert codes.codes == (1, 3)
        assert diagnostics.seen("attributes", "malformed code in COLOUR")

    def test_only_malformed_codes_is_empty(self, diagnostics):
        assert decode_list("abc", "COLOUR", diagnostics) is EMPTY

    def test_truncated_at_fifteen(self, diagnostics):
        raw = ",".join(str(code) for code in range(1, 21))
        codes = decode_list(raw, "COLOUR", diagnostics)
        assert len(codes) == 15
        assert codes.codes[-1] == 15
        assert diagnostics.seen("attributes", "COLOUR longer than 15 codes")

    def test_contains_any(self, diagnostics):
        codes = decode_list("8,2", "RESTRN", diagnostics)
        assert codes.contains_any(7, 8, 14)
        assert not codes.contains_any(3, 4)
        assert not EMPTY.contains_any(1)


class TestDecodeScalars:

    def test_number(self, diagnostics):
        assert decode_number("5.5", "VALSOU", diagnostics) == 5.5
        assert decode_number(12, "VALSOU", diagnostics) == 12.0
        assert decode_number("", "VALSOU", diagnostics) is None
        assert decode_number(None, "VALSOU", diagnostics) is None

    def test_non_numeric_reported(self, diagnostics):
        assert decode_number("deep", "VALSOU", diagnostics) is None
        assert diagnostics.seen("attributes", "non-numeric VALSOU")

    def test_non_finite_is_unknown(self, diagnostics):
        assert decode_number(float("nan"), "VALSOU", diagnostics) is None

    def test_text(self):
        assert decode_text("2") == "2"
        assert decode_text(10.0) == "10"
        assert decode_text(2.5) == "2.5"
        assert decode_text("") is None


class TestFeature:

    def test_geometry_kind_and_extent(self):
        feature = Feature(3, "DEPARE", "Area", [[0, 0], [4, 0], [4, 2], [0, 2]])
        assert feature.geometry_kind is GeometryKind.AREA
        assert feature.is_area
        assert feature.extent.xmax == 4.0
        assert feature.extent.ymax == 2.0
        assert repr(feature) == "Feature(DEPARE:Area:3)"

    def test_single_point_reshaped(self):
        feature = Feature(1, "SOUNDG", "Point", [1.0, 2.0, 7.5])
        assert feature.coordinates.shape == (1, 3)
        assert feature.point_count == 1

    def test_bad_coordinates(self):
        with pytest.raises(FeatureError):
            Feature(1, "DEPARE", "Area", np.zeros((0, 2)))
        with pytest.raises(FeatureError):
            Feature(1, "DEPARE", "Area", [[1, 2, 3, 4]])

    def test_bad_geometry_kind(self):
        with pytest.raises(FeatureError, match="unknown geometry kind"):
            Feature(1, "DEPARE", "Volume", [[0, 0]])

    def test_touch_set_once(self, make_feature):
        topmark = make_feature(1, "TOPMAR")
        assert topmark.set_touch(TouchCategory.PLATFORM, 5)
        assert topmark.set_touch(TouchCategory.PLATFORM, 5)
        assert not topmark.set_touch(TouchCategory.PLATFORM, 6)
        assert topmark.get_touch_id(TouchCategory.PLATFORM) == 5

    def test_scale_minimum(self, make_feature):
        contour = make_feature(1, "DEPCNT", "Line")
        assert contour.scale_minimum is ScaleMinimum.UNSET
        contour.set_scale_minimum(ScaleMinimum.ALWAYS_VISIBLE)
        assert contour.scale_minimum is ScaleMinimum.ALWAYS_VISIBLE


class TestLoader:

    def test_feature_from_dict(self):
        feature = feature_from_dict({
            "id": "4",
            "class": "LIGHTS",
            "kind": "point",
            "coordinates": [[1, 1]],
            "attributes": {"COLOUR": "3"},
        })
        assert feature.feature_id == 4
        assert feature.is_point
        assert feature.attribute_list("COLOUR").codes == (3,)

    def test_missing_keys(self):
        with pytest.raises(FeatureError, match="missing"):
            feature_from_dict({"id": 1, "class": "LIGHTS"})

    def test_load_yaml_cell(self, tmp_path):
        path = tmp_path / "cell.yaml"
        path.write_text(
            "name: test\n"
            "features:\n"
            "  - id: 1\n"
            "    class: DEPARE\n"
            "    kind: Area\n"
            "    coordinates: [[0, 0], [10, 0], [10, 10], [0, 10]]\n"
            "    attributes: {DRVAL1: 5, DRVAL2: 8}\n"
        )
        features = load_cell(path)
        assert len(features) == 1
        assert features[0].attribute_number("DRVAL2") == 8.0

    def test_load_json_list(self, tmp_path):
        path = tmp_path / "cell.json"
        path.write_text('[{"id": 2, "class": "SOUNDG", "kind": "Point", "coordinates": [[0, 0, 7.5]]}]')
        features = load_cell(path)
        assert features[0].coordinates[0, 2] == 7.5

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "cell.txt"
        path.write_text("")
        with pytest.raises(ValueError, match="Unsupported"):
            load_cell(path)
