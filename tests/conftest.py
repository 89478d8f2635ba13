"""
Pytest configuration and shared fixtures.

Puts the project root on sys.path so the flat top-level modules
(config, physics, structural, ...) import the same way main.py does.
"""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import STRUCTURE_PRESETS, StructureGeometry  # noqa: E402


@pytest.fixture
def small():
    """SMALL Table 1 structure."""
    return STRUCTURE_PRESETS['SMALL']


@pytest.fixture
def medium():
    """MEDIUM Table 1 structure."""
    return STRUCTURE_PRESETS['MEDIUM']


@pytest.fixture
def large():
    """LARGE Table 1 structure."""
    return STRUCTURE_PRESETS['LARGE']


@pytest.fixture
def valid_geometries():
    """Assorted geometries satisfying r2 > r1 > 0, r3 > 0, d > 0."""
    return [
        StructureGeometry(r1=0.0025, r2=0.00355, r3=0.005, d=0.0021),
        StructureGeometry(r1=0.001, r2=0.0011, r3=0.5, d=0.0001),
        StructureGeometry(r1=0.3, r2=2.0, r3=0.01, d=5.0),
        StructureGeometry(r1=0.05, r2=0.06, r3=0.02, d=0.001),  # r3 < r1
        StructureGeometry(r1=1e-6, r2=1e-3, r3=1e3, d=1e-6),
    ]


@pytest.fixture
def tolerance_values():
    """Relative tolerances for Table 1 reproduction."""
    return {
        'omega_squared': 1e-3,
        'acceleration': 1e-3,
        'electric_field': 1e-3,
        'power_density_liquid': 1e-3,
        # STRUCTURAL_EFFICIENCY = 0.762 is rounded; combined values land ~1.1e-3 low
        'power_density_combined': 2e-3,
    }
