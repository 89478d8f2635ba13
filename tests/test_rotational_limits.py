"""
Tests for the rotor's structural speed limit.
"""

import math

import pytest

from config import StructureGeometry, MATERIAL_PROPERTIES, InvalidGeometryError
from structural.rotational_limits import (
    validate_geometry, hoop_and_disk_terms, max_omega_squared_from_structure,
    max_rotational_speed, max_safe_rpm, print_rotational_limits,
)


class TestMaxOmegaSquared:
    """Equations (9)-(11)."""

    def test_small_preset(self, small):
        assert math.isclose(max_omega_squared_from_structure(small), 9.189e9, rel_tol=1e-3)

    def test_sum_of_terms(self, small):
        w1, w2 = hoop_and_disk_terms(small)
        assert w1 > 0 and w2 > 0
        assert math.isclose(max_omega_squared_from_structure(small), w1 + w2, rel_tol=1e-12)

    def test_hoop_term_by_hand(self, small):
        m = MATERIAL_PROPERTIES
        wall = small.r2**2 - small.r1**2
        denom = small.r3**2 * (m.solid_density * wall + m.liquid_density * small.r1**2)
        w1, _ = hoop_and_disk_terms(small)
        assert math.isclose(w1, wall * m.yield_strength / denom, rel_tol=1e-12)

    def test_non_negative(self, valid_geometries):
        for g in valid_geometries:
            assert max_omega_squared_from_structure(g) >= 0.0

    def test_scaling_between_presets(self, small, medium, large):
        # Every dimension x4 per step -> omega^2 / 16
        w_small = max_omega_squared_from_structure(small)
        assert math.isclose(max_omega_squared_from_structure(medium), w_small / 16, rel_tol=1e-9)
        assert math.isclose(max_omega_squared_from_structure(large), w_small / 256, rel_tol=1e-9)

    def test_stronger_material_spins_faster(self, small):
        from dataclasses import replace
        stronger = replace(MATERIAL_PROPERTIES, yield_strength=2 * MATERIAL_PROPERTIES.yield_strength)
        assert math.isclose(max_omega_squared_from_structure(small, stronger),
                            2 * max_omega_squared_from_structure(small), rel_tol=1e-12)


class TestSpeedConversions:
    """rad/s and rpm views of the limit."""

    def test_small_rpm(self, small):
        assert 9.1e5 < max_safe_rpm(small) < 9.2e5

    def test_consistency(self, small):
        omega = max_rotational_speed(small)
        assert math.isclose(omega**2, max_omega_squared_from_structure(small), rel_tol=1e-12)
        assert math.isclose(max_safe_rpm(small), omega * 60 / (2 * math.pi), rel_tol=1e-12)


class TestGeometryValidation:
    """Rejected geometries."""

    @pytest.mark.parametrize("geometry", [
        StructureGeometry(r1=0.004, r2=0.003, r3=0.005, d=0.002),     # r2 < r1
        StructureGeometry(r1=0.003, r2=0.003, r3=0.005, d=0.002),     # r2 == r1
        StructureGeometry(r1=0.0025, r2=0.00355, r3=0.005, d=0.0),    # d = 0
        StructureGeometry(r1=0.0025, r2=0.00355, r3=-0.005, d=0.002), # r3 < 0
        StructureGeometry(r1=0.0, r2=0.00355, r3=0.005, d=0.002),     # r1 = 0
        StructureGeometry(r1=float('nan'), r2=0.00355, r3=0.005, d=0.002),
        StructureGeometry(r1=0.0025, r2=float('inf'), r3=0.005, d=0.002),
    ])
    def test_invalid(self, geometry):
        with pytest.raises(InvalidGeometryError) as exc_info:
            max_omega_squared_from_structure(geometry)
        assert exc_info.value.geometry is geometry

    def test_invalid_is_value_error(self):
        with pytest.raises(ValueError):
            validate_geometry(StructureGeometry(r1=0.004, r2=0.003, r3=0.005, d=0.002))

    def test_valid_returned(self, valid_geometries):
        for g in valid_geometries:
            assert validate_geometry(g) is g


def test_print_rotational_limits(small, capsys):
    print_rotational_limits(small)
    out = capsys.readouterr().out
    assert 'Hoop term' in out
    assert 'rpm' in out
