import math
from dataclasses import replace

import pytest

from py_mcdrag import BoundaryLayer, InvalidGeometry, MACH_SWEEP, ProjectileGeometry
from py_mcdrag.drag_model import (MachSweepPoint, band_drag, base_drag, base_pressure_ratio, boattail_drag,
                                  evaluate, evaluate_point, head_drag, meplat_drag, skin_friction_drag)


def test_mach_sweep_is_fixed():
    assert MACH_SWEEP == (
        0.5, 0.6, 0.7, 0.8, 0.85, 0.9, 0.925, 0.95, 0.975, 1.0,
        1.1, 1.2, 1.3, 1.4, 1.5, 1.6, 1.7, 1.8, 2.0, 2.2,
        2.5, 3.0, 3.5, 4.0, 4.5, 5.0,
    )
    assert list(MACH_SWEEP) == sorted(MACH_SWEEP)


class TestDragTable:

    def test_one_point_per_mach(self, example_geometry):
        table = evaluate(example_geometry)
        assert len(table) == 26
        assert [p.mach for p in table] == list(MACH_SWEEP)
        assert all(isinstance(p, MachSweepPoint) for p in table)

    @pytest.mark.parametrize("boundary_layer", list(BoundaryLayer))
    def test_total_is_sum_of_components(self, example_geometry, flat_base_geometry, boundary_layer):
        for geometry in (example_geometry, flat_base_geometry):
            for p in evaluate(replace(geometry, boundary_layer=boundary_layer)):
                total = p.cdh + p.cdsf + p.cdbnd + p.cdbt + p.cdb
                assert p.cd0 == pytest.approx(total, rel=1e-9)

    def test_base_pressure_never_negative(self, example_geometry):
        flared = replace(example_geometry, base_diameter=2.0, boattail_length=0.0)
        for geometry in (example_geometry, flared):
            assert all(p.pb_pinf >= 0.0 for p in evaluate(geometry))
        # steep flare drives the raw ratio below zero at high Mach
        assert evaluate_point(flared, 5.0).pb_pinf == 0.0

    def test_evaluate_is_idempotent(self, example_geometry):
        assert evaluate(example_geometry) == evaluate(example_geometry)

    def test_all_values_finite(self, example_geometry, flat_base_geometry):
        for geometry in (example_geometry, flat_base_geometry):
            for p in evaluate(geometry):
                assert all(math.isfinite(v) for v in p)

    def test_boundary_layer_changes_only_skin_friction(self, example_geometry):
        tables = [evaluate(replace(example_geometry, boundary_layer=bl)) for bl in BoundaryLayer]
        for rows in zip(*tables):
            for name in ('mach', 'cdh', 'cdbnd', 'cdbt', 'cdb', 'pb_pinf'):
                assert len({getattr(row, name) for row in rows}) == 1, name

    def test_laminar_friction_below_turbulent(self, example_geometry):
        for mach in MACH_SWEEP:
            ll, lt, tt = (skin_friction_drag(replace(example_geometry, boundary_layer=bl), mach)
                          for bl in (BoundaryLayer.LAMINAR_LAMINAR,
                                     BoundaryLayer.LAMINAR_TURBULENT,
                                     BoundaryLayer.TURBULENT_TURBULENT))
            assert 0 < ll < lt < tt


class TestExampleProjectile:

    def test_first_row(self, example_geometry):
        first = evaluate(example_geometry)[0]
        assert first.mach == 0.5
        assert first.cdbt == 0.0
        assert first.cdh == 0.0
        assert first.cdbnd == pytest.approx(math.pow(0.5, 12.5) * (1.02 - 1.0))
        assert first.cdbnd > 0

    def test_subsonic_boattail_fit(self, example_geometry):
        assert boattail_drag(example_geometry, 0.85) == 0.0
        assert boattail_drag(example_geometry, 0.9) == pytest.approx(0.0020343, rel=1e-3)

    def test_mach_one_uses_subsonic_branch(self, example_geometry):
        row = evaluate_point(example_geometry, 1.0)
        # c15 == 0 at Mach 1: head drag reduces to 0.368 * t1^1.8
        assert row.cdh == pytest.approx(0.368 * math.pow(1.0 / 1.5, 1.8))
        assert row.cdh == pytest.approx(0.17737, rel=1e-3)
        assert row.cdbt == pytest.approx(0.0451051, rel=1e-3)

    def test_low_supersonic_boattail_fit(self, example_geometry):
        assert boattail_drag(example_geometry, 1.1) == pytest.approx(0.0280208, rel=1e-3)

    def test_subsonic_head_drag_zero_below_critical_mach(self, example_geometry):
        for mach in (0.5, 0.6, 0.7, 0.8):
            assert head_drag(example_geometry, mach) == 0.0
        assert head_drag(example_geometry, 0.85) > 0.0

    @pytest.mark.parametrize("mach, cdh", [(1.1, 0.369718), (1.2, 0.364721), (2.0, 0.307246), (5.0, 0.255159)])
    def test_supersonic_head_drag_fit(self, example_geometry, mach, cdh):
        assert head_drag(example_geometry, mach) == pytest.approx(cdh, rel=1e-3)

    def test_supersonic_head_drag_near_mach_one(self, example_geometry):
        # s4 ~ 1.1738: Mach 1.1 takes z from s4, Mach 1.2 from the Mach number
        t1 = 1.0 / 1.5
        s4 = 1.0 + 0.368 * math.pow(t1, 1.85)
        assert 1.1 < s4 < 1.2
        z = math.sqrt(s4 * s4 - 1.0)
        expected = (0.7793 - 0.1575 * t1 * t1) / (z * z) * math.pow(t1 * z, 1.636 + 0.278 * t1)
        assert head_drag(example_geometry, 1.1) == pytest.approx(expected, rel=1e-9)

    @pytest.mark.parametrize("mach, cdbt", [(1.1, 0.0280208), (1.2, 0.0364676), (2.0, 0.0219329), (5.0, 0.00723925)])
    def test_supersonic_boattail_fit(self, example_geometry, mach, cdbt):
        assert boattail_drag(example_geometry, mach) == pytest.approx(cdbt, rel=1e-3)
        assert evaluate_point(example_geometry, mach).cdbt == pytest.approx(cdbt, rel=1e-3)

    @pytest.mark.parametrize("mach", [m for m in MACH_SWEEP if m > 1.0])
    def test_supersonic_head_drag_positive(self, example_geometry, mach):
        assert head_drag(example_geometry, mach) > 0.0


class TestComponents:

    def test_band_drag_branches(self, example_geometry):
        assert band_drag(example_geometry, 2.0) == pytest.approx((0.21 + 0.28 / 4.0) * 0.02)
        assert band_drag(example_geometry, 0.9) == pytest.approx(math.pow(0.9, 12.5) * 0.02)
        assert band_drag(replace(example_geometry, band_diameter=1.0), 2.0) == 0.0

    def test_base_pressure_supersonic(self):
        geometry = ProjectileGeometry(10.0, 4.0, 1.5, base_diameter=1.0)
        assert base_pressure_ratio(geometry, 2.0) == pytest.approx(0.523222, rel=1e-4)

    def test_base_drag(self, example_geometry):
        assert base_drag(example_geometry, 2.0, 1.0) == 0.0
        assert base_drag(example_geometry, 2.0, 0.5) == pytest.approx(1.4286 * 0.5 * 0.81 / 4.0)

    def test_meplat_drag(self, example_geometry, flat_base_geometry):
        for mach in MACH_SWEEP:
            assert meplat_drag(example_geometry, mach) == 0.0
        assert meplat_drag(flat_base_geometry, 0.9) == 0.0
        assert meplat_drag(flat_base_geometry, 0.95) > 0.0
        assert meplat_drag(flat_base_geometry, 2.0) > 0.0

    def test_flat_faced_nose(self):
        # meplat of one caliber leaves no nose wave drag, only meplat drag
        geometry = ProjectileGeometry(20.0, 3.0, 0.5, meplat_diameter=1.0)
        table = evaluate(geometry)
        assert len(table) == len(MACH_SWEEP)
        for p in table:
            assert all(math.isfinite(v) for v in p)
            assert p.cdh == pytest.approx(meplat_drag(geometry, p.mach))
        assert evaluate_point(geometry, 0.9).cdh == 0.0
        assert evaluate_point(geometry, 2.0).cdh > 0.0

    def test_no_boattail(self, flat_base_geometry):
        for mach in MACH_SWEEP:
            assert boattail_drag(flat_base_geometry, mach) == 0.0

    def test_supersonic_boattail_positive(self, example_geometry):
        for mach in (1.2, 1.5, 2.0, 3.0):
            assert boattail_drag(example_geometry, mach) > 0.0


def test_too_small_reynolds_number_rejected_before_evaluation(example_geometry):
    with pytest.raises(InvalidGeometry) as ei:
        replace(example_geometry, ref_diameter=1e-6)
    assert ei.value.field == 'ref_diameter'
    # a diameter just above the limit evaluates over the whole sweep
    table = evaluate(replace(example_geometry, ref_diameter=1e-4))
    assert all(math.isfinite(v) for p in table for v in p)


@pytest.mark.parametrize("mach", [0.0, -0.5])
def test_non_positive_mach_rejected(example_geometry, mach):
    with pytest.raises(ValueError, match="Mach number must be positive"):
        evaluate_point(example_geometry, mach)


def test_formatted_point(example_geometry):
    cells = evaluate_point(example_geometry, 0.5).formatted()
    assert cells[0] == ' 0.500'
    assert len(cells) == 8
    assert all(len(cell) == 7 for cell in cells[1:])
