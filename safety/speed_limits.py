"""
Rotor Speed Safety Classification
===================================

Compares an operating rotation speed against the structural limit from
structural.rotational_limits and assigns a discrete warning level.

Safety factor:  SF = omega / omega_max

  SF <= 0.6          safe
  0.6 < SF <= 0.8    caution
  0.8 < SF <= 1.0    warning
  SF > 1.0           danger

A structure whose limit evaluates to zero has SF = +inf (danger).
"""

import os
import sys
import math
import logging
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Path setup
# ---------------------------------------------------------------------------
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from config import (
    DEFAULT_STRUCTURE, SAFE_LIMIT, CAUTION_LIMIT, WARNING_LIMIT,
    BASELINE_POWER_DENSITY,
)
from physics.electric_field import angular_velocity, rpm_from_angular_velocity
from structural.rotational_limits import max_rotational_speed

logger = logging.getLogger(__name__)


# =============================================================================
# SafetyResult Dataclass
# =============================================================================

@dataclass(frozen=True)
class SafetyResult:
    """Safety check of one operating speed."""

    current_rpm: float              # rev/min
    max_safe_rpm: float             # rev/min
    safety_factor: float            # omega / omega_max (inf if omega_max == 0)
    is_within_limits: bool          # safety_factor <= 1
    warning_level: str              # safe / caution / warning / danger


# =============================================================================
# Classification
# =============================================================================

def classify_warning(safety_factor):
    """Map a safety factor to a warning level.

    Args:
        safety_factor: omega / omega_max (non-negative, may be inf)

    Returns:
        str: 'safe', 'caution', 'warning' or 'danger'
    """
    if safety_factor <= SAFE_LIMIT:
        return 'safe'
    if safety_factor <= CAUTION_LIMIT:
        return 'caution'
    if safety_factor <= WARNING_LIMIT:
        return 'warning'
    return 'danger'


def evaluate_safety(rpm, structure=DEFAULT_STRUCTURE):
    """Check an operating speed against the structural limit.

    Args:
        rpm: Operating rotation speed (rev/min), >= 0
        structure: StructureGeometry

    Returns:
        SafetyResult

    Raises:
        InvalidGeometryError: structure fails validation
    """
    if rpm < 0:
        raise ValueError(f"Rotation speed must be non-negative, got {rpm} rpm")

    omega = angular_velocity(rpm)
    omega_max = max_rotational_speed(structure)

    safety_factor = omega / omega_max if omega_max > 0 else math.inf
    level = classify_warning(safety_factor)

    if level == 'danger':
        logger.warning("Rotation speed %.0f rpm exceeds structural limit (SF = %.3g)",
                       rpm, safety_factor)

    return SafetyResult(
        current_rpm=rpm,
        max_safe_rpm=rpm_from_angular_velocity(omega_max),
        safety_factor=safety_factor,
        is_within_limits=safety_factor <= WARNING_LIMIT,
        warning_level=level,
    )


# =============================================================================
# Overall Assessment
# =============================================================================

def assess_feasibility(warning_level, power_density):
    """Qualitative feasibility of an operating point.

    Args:
        warning_level: Result of classify_warning
        power_density: Combined power density (W/m3)

    Returns:
        str: 'excellent', 'good', 'marginal' or 'theoretical'
    """
    if warning_level == 'safe' and power_density > 0:
        return 'excellent'
    if warning_level == 'caution':
        return 'good'
    if warning_level == 'warning':
        return 'marginal'
    return 'theoretical'


def efficiency_multiplier(power_density):
    """Power density relative to the HI/SMALL Table 1 baseline."""
    return power_density / BASELINE_POWER_DENSITY


# =============================================================================
# Printing
# =============================================================================

def print_safety_result(result):
    """Print a formatted safety check.

    Args:
        result: SafetyResult instance
    """
    status = "OK" if result.is_within_limits else "EXCEEDED"
    print("\n--- Rotor Speed Safety ---")
    print(f"  Operating speed:            {result.current_rpm:12.0f} rpm")
    print(f"  Max safe speed:             {result.max_safe_rpm:12.0f} rpm")
    print(f"  Safety factor (w/w_max):    {result.safety_factor:12.4f}")
    print(f"  Within limits:              {status:>12s}")
    print(f"  Warning level:              {result.warning_level:>12s}")


if __name__ == '__main__':
    for rpm in (0, 100_000, 600_000, 850_000, 1_000_000):
        print_safety_result(evaluate_safety(rpm))
