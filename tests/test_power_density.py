"""
Tests for the power density chain.
"""

import math
import dataclasses

import numpy as np
import pytest

from config import (
    STRUCTURE_PRESETS, STRUCTURAL_EFFICIENCY, UnknownSpeciesError, InvalidGeometryError,
    StructureGeometry,
)
from power.power_density import (
    calculate_power_density, calculate_operating_power, power_curve, volume_fraction,
    print_power_result,
)
from structural.rotational_limits import max_safe_rpm
from validation.paper_table import PAPER_TABLE_1


class TestTable1Reproduction:
    """HI electrolyte at the structural limit with paper masses."""

    @pytest.mark.parametrize("name", ['SMALL', 'MEDIUM', 'LARGE'])
    def test_preset(self, name, tolerance_values):
        r = calculate_power_density('I-', 'H+', STRUCTURE_PRESETS[name], 0.85,
                                    use_paper_masses=True)
        expected = PAPER_TABLE_1[name]
        assert math.isclose(r.max_omega_squared, expected['omega_squared'],
                            rel_tol=tolerance_values['omega_squared'])
        assert math.isclose(r.max_acceleration, expected['acceleration'],
                            rel_tol=tolerance_values['acceleration'])
        assert math.isclose(r.electric_field, expected['electric_field'],
                            rel_tol=tolerance_values['electric_field'])
        assert math.isclose(r.power_density_liquid, expected['power_density_liquid'],
                            rel_tol=tolerance_values['power_density_liquid'])
        assert math.isclose(r.power_density_combined, expected['power_density_combined'],
                            rel_tol=tolerance_values['power_density_combined'])

    def test_chain_consistency(self, small):
        r = calculate_power_density('I-', 'H+', small)
        assert r.output_voltage == r.voltage_difference / 2
        assert math.isclose(r.resistance, 1 / 0.85, rel_tol=1e-12)
        assert math.isclose(r.power_density_liquid, r.output_voltage**2 * 0.85, rel_tol=1e-12)
        assert math.isclose(r.power_density_combined,
                            r.power_density_liquid * r.volume_fraction, rel_tol=1e-12)
        assert r.power_density == r.power_density_combined

    def test_volume_fraction(self, small):
        expected = (small.r1 / small.r2)**2 * STRUCTURAL_EFFICIENCY
        assert math.isclose(volume_fraction(small), expected, rel_tol=1e-12)

    def test_mass_source_changes_result(self, small):
        ref = calculate_power_density('I-', 'H+', small)
        paper = calculate_power_density('I-', 'H+', small, use_paper_masses=True)
        assert ref.electric_field != paper.electric_field
        assert math.isclose(ref.electric_field, paper.electric_field, rel_tol=2e-3)


class TestInputs:
    """Failures and sign behaviour."""

    @pytest.mark.parametrize("anion, cation", [('Xx-', 'H+'), ('I-', 'Xx+')])
    def test_unknown_species(self, anion, cation):
        with pytest.raises(UnknownSpeciesError):
            calculate_power_density(anion, cation, use_paper_masses=True)

    @pytest.mark.parametrize("sigma", [0.0, -0.5])
    def test_non_positive_conductivity(self, sigma):
        with pytest.raises(ValueError):
            calculate_power_density('I-', 'H+', conductivity=sigma)

    def test_invalid_geometry(self):
        bad = StructureGeometry(r1=0.004, r2=0.003, r3=0.005, d=0.002)
        with pytest.raises(InvalidGeometryError):
            calculate_power_density('I-', 'H+', bad)

    def test_light_anion_gives_negative_field(self, small):
        r = calculate_power_density('Cl-', 'K+', small, 0.6)
        assert r.electric_field < 0
        assert r.power_density_combined > 0

    def test_power_rises_with_conductivity(self, small):
        powers = [calculate_power_density('I-', 'H+', small, sigma).power_density_combined
                  for sigma in (0.1, 0.5, 0.85, 2.0)]
        assert powers == sorted(powers)
        resistances = [1 / s for s in (0.1, 0.5, 0.85, 2.0)]
        assert resistances == sorted(resistances, reverse=True)

    def test_result_is_immutable(self, small):
        r = calculate_power_density('I-', 'H+', small)
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.power_density_combined = 0.0


class TestOperatingPower:
    """Power density below the structural limit."""

    def test_matches_limit_at_max_rpm(self, small):
        limit = calculate_power_density('I-', 'H+', small)
        op = calculate_operating_power('I-', 'H+', max_safe_rpm(small), small)
        assert math.isclose(op.power_density_combined, limit.power_density_combined,
                            rel_tol=1e-9)
        assert math.isclose(op.max_omega_squared, limit.max_omega_squared, rel_tol=1e-9)

    def test_zero_rpm(self, small):
        op = calculate_operating_power('I-', 'H+', 0, small)
        assert op.electric_field == 0.0
        assert op.power_density_combined == 0.0

    def test_quartic_in_rpm(self, small):
        p1 = calculate_operating_power('I-', 'H+', 1e5, small).power_density_combined
        p2 = calculate_operating_power('I-', 'H+', 2e5, small).power_density_combined
        assert math.isclose(p2 / p1, 16.0, rel_tol=1e-9)

    def test_negative_rpm(self, small):
        with pytest.raises(ValueError):
            calculate_operating_power('I-', 'H+', -1.0, small)

    def test_power_curve_monotonic(self, small):
        rpms = np.linspace(0, 1e6, 51)
        curve = power_curve('I-', 'H+', rpms, small)
        assert curve.shape == rpms.shape
        assert curve[0] == 0.0
        assert np.all(np.diff(curve) > 0)


def test_print_power_result(small, capsys):
    print_power_result(calculate_power_density('I-', 'H+', small), "HI")
    out = capsys.readouterr().out
    assert '--- HI ---' in out
    assert 'Power density (combined)' in out
