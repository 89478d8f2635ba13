"""
Validation Against Paper Table 1
==================================

Re-runs the power density chain for the three Table 1 structures
(SMALL, MEDIUM, LARGE) with the HI electrolyte (I- / H+, sigma = 0.85 S/m)
and pairs each computed quantity with the value published in the paper.

Compared quantities:
    omega_squared          rad2/s2
    acceleration           m/s2
    electric_field         V/m
    power_density_liquid   W/m3
    power_density_combined W/m3

validate_against_paper_table() does no tolerance check of its own;
relative_errors() and check_table() are provided for callers that do.
The paper mass table reproduces the published values to about 1e-3
(combined power density carries the rounding of STRUCTURAL_EFFICIENCY).
"""

import os
import sys

# ---------------------------------------------------------------------------
# Path setup
# ---------------------------------------------------------------------------
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from config import STRUCTURE_PRESETS, mass_source_name
from power.power_density import calculate_power_density


# =============================================================================
# Reference Values (paper Table 1)
# =============================================================================

TABLE_ANION = 'I-'
TABLE_CATION = 'H+'
TABLE_CONDUCTIVITY = 0.85           # S/m

PAPER_TABLE_1 = {
    'SMALL': {
        'omega_squared': 9.189e9,
        'acceleration': 4.594e7,
        'electric_field': 29.97,
        'power_density_liquid': 190.92,
        'power_density_combined': 72.23,
    },
    'MEDIUM': {
        'omega_squared': 5.743e8,
        'acceleration': 1.1486e7,
        'electric_field': 7.494,
        'power_density_liquid': 11.933,
        'power_density_combined': 4.514,
    },
    'LARGE': {
        'omega_squared': 3.589e7,
        'acceleration': 2.872e6,
        'electric_field': 1.8734,
        'power_density_liquid': 0.7458,
        'power_density_combined': 0.2821,
    },
}

QUANTITY_UNITS = {
    'omega_squared': 'rad2/s2',
    'acceleration': 'm/s2',
    'electric_field': 'V/m',
    'power_density_liquid': 'W/m3',
    'power_density_combined': 'W/m3',
}


# =============================================================================
# Validation
# =============================================================================

def validate_against_paper_table(use_paper_masses=True):
    """Compute Table 1 quantities and pair them with the published values.

    One mass table per call; see validate_both_mass_sources() for both.

    Args:
        use_paper_masses: Mass table selector (paper masses by default)

    Returns:
        dict: preset name -> {'structure', 'mass_source', 'computed', 'expected'}
    """
    results = {}
    for name, structure in STRUCTURE_PRESETS.items():
        r = calculate_power_density(TABLE_ANION, TABLE_CATION, structure,
                                    TABLE_CONDUCTIVITY, use_paper_masses)
        results[name] = {
            'structure': structure,
            'mass_source': mass_source_name(use_paper_masses),
            'computed': {
                'omega_squared': r.max_omega_squared,
                'acceleration': r.max_acceleration,
                'electric_field': r.electric_field,
                'power_density_liquid': r.power_density_liquid,
                'power_density_combined': r.power_density_combined,
            },
            'expected': dict(PAPER_TABLE_1[name]),
        }
    return results


def validate_both_mass_sources():
    """Run the Table 1 comparison once per mass table.

    validate_against_paper_table() evaluates a single mass table per call;
    this runs the paper table first, then the reference table.

    Returns:
        dict: mass source name ('paper', 'reference') -> validate_against_paper_table() output
    """
    return {
        mass_source_name(paper): validate_against_paper_table(use_paper_masses=paper)
        for paper in (True, False)
    }


def relative_errors(entry):
    """Relative error of each computed quantity against its expected value.

    Args:
        entry: One value of the validate_against_paper_table() result

    Returns:
        dict: quantity -> |calculated - expected| / |expected|
    """
    calc = entry['computed']
    return {
        key: abs(calc[key] - expected) / abs(expected)
        for key, expected in entry['expected'].items()
    }


def check_table(results, rel_tol=2e-3):
    """List quantities whose relative error exceeds ``rel_tol``.

    Args:
        results: validate_against_paper_table() output
        rel_tol: Relative tolerance

    Returns:
        list of (preset, quantity, relative_error); empty when all agree
    """
    failures = []
    for name, entry in results.items():
        for key, err in relative_errors(entry).items():
            if not err <= rel_tol:
                failures.append((name, key, err))
    return failures


# =============================================================================
# Printing
# =============================================================================

def print_table_validation(results):
    """Print computed vs expected Table 1 values.

    Args:
        results: validate_against_paper_table() output
    """
    for name, entry in results.items():
        errors = relative_errors(entry)
        print(f"\n--- Table 1: {name} ({entry['mass_source']} masses) ---")
        print(f"  {'Quantity':<24s} {'Computed':>12s} {'Paper':>12s} {'Rel. err':>10s}")
        for key, expected in entry['expected'].items():
            calc = entry['computed'][key]
            print(f"  {key:<24s} {calc:12.4e} {expected:12.4e} {errors[key]:10.2e}"
                  f"  {QUANTITY_UNITS[key]}")


if __name__ == '__main__':
    for res in validate_both_mass_sources().values():
        print_table_validation(res)
        print(f"\n  Outside 2e-3: {check_table(res) or 'none'}")
