"""
Electrical Power Density of a Rotating Ion Cell
=================================================

Power density of the gravity-ion thermoelectric rotor at its structural
speed limit (paper section 5.1, Table 1).

Calculation chain:
  1. Ion masses from the selected mass table
  2. omega_max^2 from the wall strength (structural.rotational_limits)
  3. Acceleration at the channel: G = omega_max^2 * r3
  4. Electric field E = (m_anion - m_cation) G / (2q)
  5. Open-circuit voltage across UNIT_HEIGHT (1 m)
  6. Output voltage = half the open-circuit value (matched load)
  7. Unit-cube resistance R = 1 / sigma
  8. Liquid power density P_l = V_out^2 / R
  9. Combined power density P_c = P_l * (r1^2 / r2^2) * STRUCTURAL_EFFICIENCY

The unit height is a normalisation: results are power per cubic metre of
structure, not a physical column height.
"""

import os
import sys
import math
import logging
from dataclasses import dataclass

import numpy as np

# ---------------------------------------------------------------------------
# Path setup
# ---------------------------------------------------------------------------
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import config
from config import (
    DEFAULT_STRUCTURE, DEFAULT_CONDUCTIVITY, STRUCTURAL_EFFICIENCY, UNIT_HEIGHT,
    StructureGeometry,
)
from physics.electric_field import electric_field, centrifugal_acceleration
from structural.rotational_limits import (
    validate_geometry, max_omega_squared_from_structure,
)

logger = logging.getLogger(__name__)


# =============================================================================
# PowerResult Dataclass
# =============================================================================

@dataclass(frozen=True)
class PowerResult:
    """Power density evaluation for one ion pair and structure."""

    # --- Electrical ---
    voltage_difference: float       # V, open circuit across UNIT_HEIGHT
    output_voltage: float           # V, matched load (half of open circuit)
    electric_field: float           # V/m
    power_density_liquid: float     # W/m3, liquid volume only
    power_density_combined: float   # W/m3, total structure volume
    resistance: float               # Ohm, unit cube
    conductivity: float             # S/m

    # --- Ions ---
    anion_mass: float               # kg
    cation_mass: float              # kg

    # --- Rotation ---
    max_acceleration: float         # m/s2, at r3
    max_omega_squared: float        # rad2/s2

    # --- Structure ---
    structure: StructureGeometry
    volume_fraction: float          # effective liquid / total fraction

    @property
    def power_density(self):
        """Combined power density (W/m3)."""
        return self.power_density_combined


# =============================================================================
# Power Density
# =============================================================================

def volume_fraction(structure):
    """Effective liquid/total volume fraction of the rotor cross-section.

    Args:
        structure: StructureGeometry

    Returns:
        float: (pi r1^2 / pi r2^2) * STRUCTURAL_EFFICIENCY
    """
    liquid_area = math.pi * structure.r1**2
    total_area = math.pi * structure.r2**2
    return liquid_area / total_area * STRUCTURAL_EFFICIENCY


def _power_at_acceleration(anion_mass, cation_mass, acceleration, omega_squared,
                           structure, conductivity):
    """Steps 4-9 of the calculation chain at a given acceleration."""
    if not conductivity > 0:
        raise ValueError(f"Conductivity must be positive, got {conductivity} S/m")

    field = electric_field(anion_mass, cation_mass, acceleration)
    voltage = field * UNIT_HEIGHT
    output_voltage = voltage / 2.0

    resistance = 1.0 / conductivity
    p_liquid = output_voltage**2 / resistance

    fraction = volume_fraction(structure)
    p_combined = p_liquid * fraction

    return PowerResult(
        voltage_difference=voltage,
        output_voltage=output_voltage,
        electric_field=field,
        power_density_liquid=p_liquid,
        power_density_combined=p_combined,
        resistance=resistance,
        conductivity=conductivity,
        anion_mass=anion_mass,
        cation_mass=cation_mass,
        max_acceleration=acceleration,
        max_omega_squared=omega_squared,
        structure=structure,
        volume_fraction=fraction,
    )


def calculate_power_density(anion, cation, structure=DEFAULT_STRUCTURE,
                            conductivity=DEFAULT_CONDUCTIVITY, use_paper_masses=False):
    """Power density of an ion pair at the structural speed limit.

    Args:
        anion: Anion tag (e.g. 'I-', 'Cl-'); treated as the heavy ion
        cation: Cation tag (e.g. 'H+', 'Li+', 'K+')
        structure: StructureGeometry
        conductivity: Solution conductivity (S/m), must be > 0
        use_paper_masses: Mass table selector

    Returns:
        PowerResult

    Raises:
        UnknownSpeciesError: either species missing from the mass table
        InvalidGeometryError: structure fails validation
    """
    anion_mass = config.ion_mass(anion, use_paper_masses)
    cation_mass = config.ion_mass(cation, use_paper_masses)

    omega_sq = max_omega_squared_from_structure(structure)
    acceleration = omega_sq * structure.r3

    result = _power_at_acceleration(anion_mass, cation_mass, acceleration, omega_sq,
                                    structure, conductivity)
    logger.debug("%s/%s sigma=%.3g S/m: E=%.4g V/m, P_liquid=%.4g W/m3, P_combined=%.4g W/m3",
                 anion, cation, conductivity, result.electric_field,
                 result.power_density_liquid, result.power_density_combined)
    return result


def calculate_operating_power(anion, cation, rpm, structure=DEFAULT_STRUCTURE,
                              conductivity=DEFAULT_CONDUCTIVITY, use_paper_masses=False):
    """Power density at an operating rotation speed instead of the limit.

    Same chain as calculate_power_density with G = omega^2 * r3 at ``rpm``.
    The acceleration and omega^2 fields of the result hold the operating
    values. Speeds beyond the structural limit are evaluated as given;
    use safety.speed_limits.evaluate_safety to classify them.

    Args:
        anion: Anion tag
        cation: Cation tag
        rpm: Rotation speed (rev/min), >= 0
        structure: StructureGeometry
        conductivity: Solution conductivity (S/m)
        use_paper_masses: Mass table selector

    Returns:
        PowerResult
    """
    anion_mass = config.ion_mass(anion, use_paper_masses)
    cation_mass = config.ion_mass(cation, use_paper_masses)
    validate_geometry(structure)

    acceleration = centrifugal_acceleration(rpm, structure.r3)
    omega_sq = acceleration / structure.r3
    return _power_at_acceleration(anion_mass, cation_mass, acceleration, omega_sq,
                                  structure, conductivity)


def power_curve(anion, cation, rpms, structure=DEFAULT_STRUCTURE,
                conductivity=DEFAULT_CONDUCTIVITY, use_paper_masses=False):
    """Combined power density over a sweep of rotation speeds.

    Args:
        anion: Anion tag
        cation: Cation tag
        rpms: Iterable of rotation speeds (rev/min)
        structure: StructureGeometry
        conductivity: Solution conductivity (S/m)
        use_paper_masses: Mass table selector

    Returns:
        np.ndarray: Combined power density (W/m3) at each speed
    """
    return np.array([
        calculate_operating_power(anion, cation, rpm, structure, conductivity,
                                  use_paper_masses).power_density_combined
        for rpm in rpms
    ])


# =============================================================================
# Printing
# =============================================================================

def print_power_result(result, title="Power Density"):
    """Print formatted power density results.

    Args:
        result: PowerResult instance
        title: Section heading
    """
    print(f"\n--- {title} ---")
    print(f"  Anion mass:                 {result.anion_mass:12.4e} kg")
    print(f"  Cation mass:                {result.cation_mass:12.4e} kg")
    print(f"  w^2:                        {result.max_omega_squared:12.4e} rad2/s2")
    print(f"  Acceleration at r3:         {result.max_acceleration:12.4e} m/s2")
    print(f"  Electric field:             {result.electric_field:12.4f} V/m")
    print(f"  Open-circuit voltage (1 m): {result.voltage_difference:12.4f} V")
    print(f"  Output voltage:             {result.output_voltage:12.4f} V")
    print(f"  Conductivity:               {result.conductivity:12.3f} S/m")
    print(f"  Resistance (unit cube):     {result.resistance:12.4f} Ohm")
    print(f"  Volume fraction:            {result.volume_fraction:12.4f}")
    print(f"  Power density (liquid):     {result.power_density_liquid:12.4f} W/m3")
    print(f"  Power density (combined):   {result.power_density_combined:12.4f} W/m3")


# =============================================================================
# Main
# =============================================================================

if __name__ == '__main__':
    r = calculate_power_density('I-', 'H+', use_paper_masses=True)
    print_power_result(r, "HI, SMALL structure, paper masses")
