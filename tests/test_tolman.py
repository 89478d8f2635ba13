"""
Tests for the Tolman (1910) comparison.
"""

import math

from config import ion_mass
from physics.electric_field import centrifugal_acceleration
from validation.tolman import (
    compare_with_tolman, cation_for_solution, print_tolman_comparison,
    TOLMAN_DATA, TOLMAN_RADIUS, TOLMAN_HEIGHT,
)


def test_one_row_per_data_point():
    comparisons = compare_with_tolman()
    assert len(comparisons) == len(TOLMAN_DATA)
    assert [c.solution for c in comparisons] == [row[0] for row in TOLMAN_DATA]


def test_cation_for_solution():
    assert cation_for_solution('LiI') == 'Li+'
    assert cation_for_solution('KI') == 'K+'


def test_baselines_have_no_accuracy():
    for c in compare_with_tolman():
        if c.rpm == 0:
            assert c.theoretical_voltage == 0.0
            assert c.accuracy is None


def test_theoretical_voltage():
    c = compare_with_tolman(use_paper_masses=True)[0]
    G = centrifugal_acceleration(70, TOLMAN_RADIUS)
    expected = ((ion_mass('I-', True) - ion_mass('Li+', True)) * G * TOLMAN_HEIGHT
                / (2 * 1.602176634e-19))
    assert math.isclose(c.theoretical_voltage, expected, rel_tol=1e-12)
    assert c.theoretical_voltage > 0


def test_accuracy():
    for c in compare_with_tolman():
        if c.measured_voltage:
            expected = abs(c.measured_voltage - c.theoretical_voltage) / c.measured_voltage * 100
            assert math.isclose(c.accuracy, expected, rel_tol=1e-12)


def test_print(capsys):
    print_tolman_comparison(compare_with_tolman())
    out = capsys.readouterr().out
    assert 'Tolman' in out
    assert 'n/a' in out


def test_accuracy_is_float_or_none():
    for c in compare_with_tolman():
        assert c.accuracy is None if c.measured_voltage == 0 else isinstance(c.accuracy, float)
