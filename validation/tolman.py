"""
Comparison With Tolman's Centrifuge Measurements
==================================================

Tolman (1910) spun iodide salt solutions and measured the voltage between
the rim and the axis. This module evaluates the field theory at the same
operating points and reports the deviation from the measurement.

Theoretical voltage:
    G  = omega^2 * r          (r = 5 cm rotor radius)
    dV = (m_I - m_cation) G H / (2q)   (H = 10 cm column)

Zero-rpm rows are baselines: both voltages are zero and the deviation is
undefined (None).
"""

import os
import sys
from dataclasses import dataclass
from typing import Optional

# ---------------------------------------------------------------------------
# Path setup
# ---------------------------------------------------------------------------
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import config
from physics.electric_field import voltage_difference, centrifugal_acceleration


# =============================================================================
# Experimental Data
# =============================================================================

TOLMAN_RADIUS = 0.05                # m, rotor radius
TOLMAN_HEIGHT = 0.1                 # m, liquid column

# (solution, rpm, measured voltage [V], notes)
TOLMAN_DATA = (
    ('LiI', 70, 4.3e-3, 'Lithium Iodide'),
    ('KI', 70, 3.5e-3, 'Potassium Iodide'),
    ('LiI', 0, 0.0, 'Baseline'),
    ('KI', 0, 0.0, 'Baseline'),
)


@dataclass(frozen=True)
class TolmanComparison:
    """Measured vs theoretical voltage for one Tolman data point."""

    solution: str
    rpm: float                      # rev/min
    measured_voltage: float         # V
    theoretical_voltage: float      # V
    accuracy: Optional[float]       # % deviation |meas - theory| / meas, None if meas == 0
    notes: str = ''


def cation_for_solution(solution):
    """Cation of an iodide salt solution ('LiI' -> 'Li+', otherwise 'K+')."""
    return 'Li+' if 'Li' in solution else 'K+'


def compare_with_tolman(use_paper_masses=False, radius=TOLMAN_RADIUS, height=TOLMAN_HEIGHT):
    """Evaluate every Tolman data point.

    Args:
        use_paper_masses: Mass table selector
        radius: Rotor radius (m)
        height: Liquid column height (m)

    Returns:
        list of TolmanComparison
    """
    anion_mass = config.ion_mass('I-', use_paper_masses)

    comparisons = []
    for solution, rpm, measured, notes in TOLMAN_DATA:
        cation_mass = config.ion_mass(cation_for_solution(solution), use_paper_masses)
        acceleration = centrifugal_acceleration(rpm, radius)
        theoretical = voltage_difference(anion_mass, cation_mass, acceleration, height)

        if measured == 0:
            accuracy = None
        else:
            accuracy = abs(measured - theoretical) / measured * 100.0

        comparisons.append(TolmanComparison(
            solution=solution,
            rpm=rpm,
            measured_voltage=measured,
            theoretical_voltage=theoretical,
            accuracy=accuracy,
            notes=notes,
        ))
    return comparisons


def print_tolman_comparison(comparisons):
    """Print the Tolman comparison table.

    Args:
        comparisons: List of TolmanComparison
    """
    print("\n--- Tolman (1910) Centrifuge Comparison ---")
    print(f"  {'Solution':<9s} {'rpm':>5s} {'Measured (V)':>13s} {'Theory (V)':>13s} {'Dev. (%)':>10s}")
    for c in comparisons:
        dev = f"{c.accuracy:10.2f}" if c.accuracy is not None else f"{'n/a':>10s}"
        print(f"  {c.solution:<9s} {c.rpm:5.0f} {c.measured_voltage:13.4e} "
              f"{c.theoretical_voltage:13.4e} {dev}")


if __name__ == '__main__':
    print_tolman_comparison(compare_with_tolman())
