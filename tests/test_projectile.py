import math
from dataclasses import FrozenInstanceError, replace

import pytest

from py_mcdrag import (BoundaryLayer, InvalidBoundaryLayerCode, InvalidGeometry, ParseError,
                       ProjectileGeometry, Settings)


class TestValidation:

    @pytest.mark.parametrize(
        "changes, field",
        [
            ({'nose_length': 0.0}, 'nose_length'),
            ({'nose_length': -1.0}, 'nose_length'),
            ({'total_length': 1.5}, 'total_length'),
            ({'total_length': 1.0}, 'total_length'),
            ({'ref_diameter': 0.0}, 'ref_diameter'),
            ({'ref_diameter': -7.62}, 'ref_diameter'),
            ({'meplat_diameter': 1.5}, 'meplat_diameter'),
            ({'ref_diameter': 1e-5}, 'ref_diameter'),
            ({'ref_diameter': 2e-5, 'total_length': 2.0}, 'ref_diameter'),
            ({'rt_r': math.nan}, 'rt_r'),
            ({'band_diameter': math.inf}, 'band_diameter'),
            ({'cg_location': "2.0"}, 'cg_location'),
            ({'base_diameter': True}, 'base_diameter'),
        ],
    )
    def test_invalid_geometry(self, example_geometry, changes, field):
        with pytest.raises(InvalidGeometry) as ei:
            replace(example_geometry, **changes)
        assert ei.value.field == field
        assert field in str(ei.value)

    def test_flat_faced_nose_accepted(self, example_geometry):
        geometry = replace(example_geometry, meplat_diameter=1.0)
        assert geometry.meplat_diameter == 1.0

    def test_small_diameter_message(self):
        with pytest.raises(InvalidGeometry, match="Reynolds number"):
            ProjectileGeometry(1e-5, 4.0, 1.5)
        assert ProjectileGeometry(1e-4, 4.0, 1.5).ref_diameter == 1e-4

    def test_boundary_layer_code_string(self, example_geometry):
        geometry = replace(example_geometry, boundary_layer="t/t")
        assert geometry.boundary_layer is BoundaryLayer.TURBULENT_TURBULENT

    def test_bad_boundary_layer_code(self, example_geometry):
        with pytest.raises(InvalidBoundaryLayerCode):
            replace(example_geometry, boundary_layer="Q/Q")

    def test_ints_become_floats(self):
        geometry = ProjectileGeometry(20, 5, 2)
        assert isinstance(geometry.ref_diameter, float)
        assert geometry.afterbody_length == 3.0

    def test_frozen(self, example_geometry):
        with pytest.raises(FrozenInstanceError):
            example_geometry.nose_length = 2.0  # type: ignore[misc]


class TestSerialization:

    def test_to_dict(self, example_geometry):
        data = example_geometry.to_dict()
        assert data['boundary_layer'] == 'L/T'
        assert data['ref_diameter'] == 7.62
        assert data['identification'] == "7.62mm example"

    def test_from_dict_round_trip(self, example_geometry):
        assert ProjectileGeometry.from_dict(example_geometry.to_dict()) == example_geometry

    def test_from_dict_defaults(self):
        geometry = ProjectileGeometry.from_dict({'ref_diameter': "30", 'total_length': 4, 'nose_length': 2})
        assert geometry.ref_diameter == 30.0
        assert geometry.base_diameter == 1.0
        assert geometry.boundary_layer is BoundaryLayer.LAMINAR_TURBULENT
        assert geometry.identification == ''

    def test_from_dict_uses_settings(self):
        Settings.set_defaults(boundary_layer="t/t", band_diameter=1.01)
        geometry = ProjectileGeometry.from_dict({'ref_diameter': 30, 'total_length': 4, 'nose_length': 2})
        assert geometry.boundary_layer is BoundaryLayer.TURBULENT_TURBULENT
        assert geometry.band_diameter == 1.01

    @pytest.mark.parametrize(
        "data, message",
        [
            ({'total_length': 4, 'nose_length': 2}, "ref_diameter"),
            ({'ref_diameter': 30, 'total_length': 4, 'nose_length': 2, 'mass': 1}, "mass"),
            ({'ref_diameter': "abc", 'total_length': 4, 'nose_length': 2}, "input.ref_diameter"),
            ({'ref_diameter': None, 'total_length': 4, 'nose_length': 2}, "input.ref_diameter"),
            ({'ref_diameter': False, 'total_length': 4, 'nose_length': 2}, "input.ref_diameter"),
        ],
    )
    def test_from_dict_parse_errors(self, data, message):
        with pytest.raises(ParseError) as ei:
            ProjectileGeometry.from_dict(data)
        assert message in str(ei.value)

    def test_from_dict_not_a_mapping(self):
        with pytest.raises(ParseError):
            ProjectileGeometry.from_dict([1, 2, 3])  # type: ignore[arg-type]
