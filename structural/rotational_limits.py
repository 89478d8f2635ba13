"""
Rotational Speed Limits of the Annular Rotor
==============================================

Maximum angular velocity of the rotating electrolyte vessel before the
wall material yields (paper equations 9-11).

Geometry (StructureGeometry):
  - r1: inner radius of the liquid channel
  - r2: outer radius of the wall
  - r3: distance from the channel to the rotation axis
  - d:  wall material thickness

Two independent stress paths carry the centrifugal load of the wall and
the liquid it contains:

  Eq. (9)  annular hoop term:
      w1^2 = (r2^2 - r1^2) Y / [r3^2 (rho_s (r2^2 - r1^2) + rho_l r1^2)]

  Eq. (10) inward disk term:
      w2^2 = Y (r3 - r1) d / [pi r3^2 (rho_s (r2^2 - r1^2) + rho_l r1^2)]

  Eq. (11) w_max^2 = w1^2 + w2^2

Geometries with non-positive dimensions or r2 <= r1 are rejected before
evaluation. The final max(0, .) floor is a numerical safety net only.
"""

import os
import sys
import math
import logging

# ---------------------------------------------------------------------------
# Path setup
# ---------------------------------------------------------------------------
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from config import (
    MATERIAL_PROPERTIES, DEFAULT_STRUCTURE, InvalidGeometryError,
)
from physics.electric_field import rpm_from_angular_velocity

logger = logging.getLogger(__name__)


# =============================================================================
# Geometry Validation
# =============================================================================

def validate_geometry(structure):
    """Reject geometries that cannot describe an annular vessel.

    Args:
        structure: StructureGeometry

    Returns:
        The same StructureGeometry

    Raises:
        InvalidGeometryError: non-finite or non-positive dimension, or r2 <= r1
    """
    for field_name in ('r1', 'r2', 'r3', 'd'):
        value = getattr(structure, field_name)
        if not math.isfinite(value):
            raise InvalidGeometryError(structure, f"{field_name} is not finite ({value})")
        if value <= 0:
            raise InvalidGeometryError(structure, f"{field_name} must be positive, got {value}")

    if structure.r2 <= structure.r1:
        raise InvalidGeometryError(
            structure,
            f"outer radius r2={structure.r2} must exceed inner radius r1={structure.r1}",
        )

    return structure


# =============================================================================
# Maximum Angular Velocity
# =============================================================================

def _rotating_mass_term(structure, material):
    """Common denominator r3^2 (rho_s (r2^2 - r1^2) + rho_l r1^2)."""
    r1, r2, r3 = structure.r1, structure.r2, structure.r3
    wall_area = r2**2 - r1**2
    return r3**2 * (material.solid_density * wall_area + material.liquid_density * r1**2)


def hoop_and_disk_terms(structure=DEFAULT_STRUCTURE, material=MATERIAL_PROPERTIES):
    """Individual stress-limited terms of equation (11).

    Args:
        structure: StructureGeometry
        material: MaterialProperties

    Returns:
        tuple: (omega1_squared, omega2_squared) in rad2/s2
    """
    validate_geometry(structure)
    r1, r2, r3, d = structure.r1, structure.r2, structure.r3, structure.d
    Y = material.yield_strength
    denominator = _rotating_mass_term(structure, material)

    # Eq. (9): annular structure tensile strength
    omega1_sq = (r2**2 - r1**2) * Y / denominator

    # Eq. (10): inward disk tensile force
    omega2_sq = Y * (r3 - r1) * d / (math.pi * denominator)

    return omega1_sq, omega2_sq


def max_omega_squared_from_structure(structure=DEFAULT_STRUCTURE, material=MATERIAL_PROPERTIES):
    """Maximum squared angular velocity allowed by the wall material.

    Args:
        structure: StructureGeometry
        material: MaterialProperties

    Returns:
        float: omega_max^2 in rad2/s2 (never negative)

    Raises:
        InvalidGeometryError: if the geometry fails validation
    """
    omega1_sq, omega2_sq = hoop_and_disk_terms(structure, material)
    omega_sq = max(0.0, omega1_sq + omega2_sq)
    logger.debug("omega_max^2 = %.4e rad2/s2 (hoop %.4e, disk %.4e) for %s",
                 omega_sq, omega1_sq, omega2_sq, structure)
    return omega_sq


def max_rotational_speed(structure=DEFAULT_STRUCTURE, material=MATERIAL_PROPERTIES):
    """Maximum angular velocity in rad/s."""
    return math.sqrt(max_omega_squared_from_structure(structure, material))


def max_safe_rpm(structure=DEFAULT_STRUCTURE, material=MATERIAL_PROPERTIES):
    """Maximum rotation speed in rev/min."""
    return rpm_from_angular_velocity(max_rotational_speed(structure, material))


# =============================================================================
# Printing
# =============================================================================

def print_rotational_limits(structure=DEFAULT_STRUCTURE, material=MATERIAL_PROPERTIES):
    """Print the rotational limit breakdown for one structure.

    Args:
        structure: StructureGeometry
        material: MaterialProperties
    """
    omega1_sq, omega2_sq = hoop_and_disk_terms(structure, material)
    omega_sq = max_omega_squared_from_structure(structure, material)
    omega = math.sqrt(omega_sq)

    print("\n--- Rotor Geometry ---")
    print(f"  Inner radius r1:            {structure.r1 * 1e3:10.3f} mm")
    print(f"  Outer radius r2:            {structure.r2 * 1e3:10.3f} mm")
    print(f"  Axis distance r3:           {structure.r3 * 1e3:10.3f} mm")
    print(f"  Wall thickness d:           {structure.d * 1e3:10.3f} mm")

    print("\n--- Rotational Limits (Eq. 9-11) ---")
    print(f"  Hoop term w1^2:             {omega1_sq:10.4e} rad2/s2")
    print(f"  Disk term w2^2:             {omega2_sq:10.4e} rad2/s2")
    print(f"  Max w^2:                    {omega_sq:10.4e} rad2/s2")
    print(f"  Max angular velocity:       {omega:10.1f} rad/s")
    print(f"  Max rotation speed:         {rpm_from_angular_velocity(omega):10.0f} rpm")
    print(f"  Max acceleration at r3:     {omega_sq * structure.r3:10.4e} m/s2")


# =============================================================================
# Main
# =============================================================================

if __name__ == '__main__':
    from config import STRUCTURE_PRESETS

    for name, s in STRUCTURE_PRESETS.items():
        print(f"\n===== {name} =====")
        print_rotational_limits(s)
