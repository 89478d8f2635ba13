"""
Central Configuration for the Gravity-Ion Thermoelectric Calculations

This file defines ALL constants for the gravity-ion thermoelectric concept
in a tiered structure:
  Tier 1: Physical Constants
  Tier 2: Ion Masses (reference and paper tables)
  Tier 3: Material Properties
  Tier 4: Structure Geometry Presets
  Tier 5: Ion Systems and Calibration Constants
  Tier 6: Safety Limits

All values in SI units. Units noted in comments.

Reference: Chen, "An Exception to Carnot's Theorem Inferred from Tolman's
Experiment" (2024), equations (1)-(11) and Table 1.

Usage:
    from config import get_structure, ion_mass, print_summary
    structure = get_structure('SMALL')
    print_summary(use_paper_masses=True)
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType

from scipy import constants as sc

logger = logging.getLogger(__name__)


# =============================================================================
# ERRORS
# =============================================================================

class CalculationError(Exception):
    """Base class for all calculation failures."""


class UnknownSpeciesError(CalculationError, LookupError):
    """Ion species tag not present in the selected mass table."""

    def __init__(self, species, mass_source):
        self.species = species
        self.mass_source = mass_source
        super().__init__(f"Unknown ion species '{species}' in {mass_source} mass table")


class UnknownStructureError(CalculationError, LookupError):
    """Structure preset name not defined."""

    def __init__(self, name):
        self.name = name
        super().__init__(
            f"Unknown structure preset '{name}'. "
            f"Available: {', '.join(STRUCTURE_PRESETS)}"
        )


class UnknownIonSystemError(CalculationError, LookupError):
    """Ion system name not defined."""

    def __init__(self, name):
        self.name = name
        super().__init__(
            f"Unknown ion system '{name}'. "
            f"Available: {', '.join(s.name for s in ION_SYSTEMS)}"
        )


class InvalidGeometryError(CalculationError, ValueError):
    """Structural dimensions that cannot describe an annular vessel."""

    def __init__(self, geometry, reason):
        self.geometry = geometry
        self.reason = reason
        super().__init__(f"Invalid structure geometry {geometry}: {reason}")


# =============================================================================
# TIER 1: PHYSICAL CONSTANTS
# =============================================================================

@dataclass(frozen=True)
class PhysicalConstants:
    """Fundamental constants (CODATA exact values)."""

    boltzmann: float                # J/K
    elementary_charge: float        # C


BOLTZMANN_CONSTANT = sc.k           # J/K  (1.380649e-23)
ELEMENTARY_CHARGE = sc.e            # C    (1.602176634e-19)

PHYSICAL_CONSTANTS = PhysicalConstants(
    boltzmann=BOLTZMANN_CONSTANT,
    elementary_charge=ELEMENTARY_CHARGE,
)

ROOM_TEMPERATURE = 298.15           # K (25 C)


# =============================================================================
# TIER 2: ION MASSES
# =============================================================================

# Reference values from CODATA 2018 atomic masses
ION_MASSES = MappingProxyType({
    'H+': 1.6737236191e-27,         # kg (1.00782503223 u)
    'I-': 2.1092473836e-25,         # kg (126.9044719 u)
    'Li+': 1.1650544317e-26,        # kg (7.0160034366 u)
    'Cl-': 5.8058934782e-26,        # kg (34.968852682 u)
    'K+': 6.4659006555e-26,         # kg (38.9637064864 u)
})

# Values as published in the paper (reproduce Table 1 exactly)
PAPER_ION_MASSES = MappingProxyType({
    'H+': 1.6735575e-27,            # kg (paper ref. 7)
    'I-': 2.1073e-25,               # kg (paper ref. 7)
    'Li+': 1.1526e-26,              # kg (paper estimate)
    'Cl-': 5.887e-26,               # kg (paper estimate)
    'K+': 6.493e-26,                # kg (paper estimate)
})


def mass_source_name(use_paper_masses=False):
    """Label of the selected mass table ('paper' or 'reference')."""
    return 'paper' if use_paper_masses else 'reference'


def get_ion_masses(use_paper_masses=False):
    """Return the selected ion mass table.

    Args:
        use_paper_masses: True for the paper's published masses,
                          False for the reference metrology values

    Returns:
        Read-only mapping species -> mass in kg
    """
    return PAPER_ION_MASSES if use_paper_masses else ION_MASSES


def ion_mass(species, use_paper_masses=False):
    """Look up the mass of one ion species.

    Args:
        species: Ion tag, e.g. 'H+', 'I-'
        use_paper_masses: Mass table selector

    Returns:
        float: Ion mass in kg

    Raises:
        UnknownSpeciesError: if the species is not in the selected table
    """
    masses = get_ion_masses(use_paper_masses)
    try:
        return masses[species]
    except KeyError:
        raise UnknownSpeciesError(species, mass_source_name(use_paper_masses)) from None


# =============================================================================
# TIER 3: MATERIAL PROPERTIES
# =============================================================================

@dataclass(frozen=True)
class MaterialProperties:
    """Rotor wall and electrolyte properties."""

    yield_strength: float           # Pa
    solid_density: float            # kg/m3
    liquid_density: float           # kg/m3


# High-strength aluminium alloy wall, aqueous electrolyte
MATERIAL_PROPERTIES = MaterialProperties(
    yield_strength=670e6,
    solid_density=2700,
    liquid_density=1000,
)


# =============================================================================
# TIER 4: STRUCTURE GEOMETRY PRESETS
# =============================================================================

@dataclass(frozen=True)
class StructureGeometry:
    """Annular rotating vessel (all lengths in m).

    r1: inner radius of the liquid channel
    r2: outer radius of the wall
    r3: distance from the channel to the rotation axis
    d:  wall material thickness
    """

    r1: float
    r2: float
    r3: float
    d: float


# Paper Table 1 geometries: r2 = 1.42 r1, r3 = 2 r1, d = 0.84 r1
STRUCTURE_PRESETS = MappingProxyType({
    'SMALL': StructureGeometry(r1=0.0025, r2=0.00355, r3=0.005, d=0.0021),
    'MEDIUM': StructureGeometry(r1=0.01, r2=0.0142, r3=0.02, d=0.0084),
    'LARGE': StructureGeometry(r1=0.04, r2=0.0568, r3=0.08, d=0.0336),
})

DEFAULT_STRUCTURE_NAME = 'SMALL'
DEFAULT_STRUCTURE = STRUCTURE_PRESETS[DEFAULT_STRUCTURE_NAME]


def get_structure(name, default=None):
    """Look up a named structure preset.

    Names are case-insensitive; 'DEFAULT' resolves to DEFAULT_STRUCTURE.
    Unknown names fail unless the caller opts into a fallback by passing
    ``default``.

    Args:
        name: Preset name ('SMALL', 'MEDIUM', 'LARGE', 'DEFAULT')
        default: StructureGeometry returned for unknown names (opt-in)

    Returns:
        StructureGeometry

    Raises:
        UnknownStructureError: unknown name and no default given
    """
    key = str(name).upper()
    if key == 'DEFAULT':
        return DEFAULT_STRUCTURE
    if key in STRUCTURE_PRESETS:
        return STRUCTURE_PRESETS[key]
    if default is not None:
        logger.warning("Unknown structure preset %r, falling back to %s", name, default)
        return default
    raise UnknownStructureError(name)


# =============================================================================
# TIER 5: ION SYSTEMS AND CALIBRATION CONSTANTS
# =============================================================================

@dataclass(frozen=True)
class IonSystem:
    """Electrolyte pair with its solution conductivity."""

    name: str
    anion: str
    cation: str
    conductivity: float             # S/m


ION_SYSTEMS = (
    IonSystem(name='HI', anion='I-', cation='H+', conductivity=0.85),
    IonSystem(name='LiCl', anion='Cl-', cation='Li+', conductivity=0.7),
    IonSystem(name='KCl', anion='Cl-', cation='K+', conductivity=0.6),
)

DEFAULT_CONDUCTIVITY = 0.85         # S/m (HI solution)


def get_ion_system(name):
    """Look up an ion system by name ('HI', 'LiCl', 'KCl').

    Raises:
        UnknownIonSystemError: if no system has that name
    """
    for system in ION_SYSTEMS:
        if system.name == name:
            return system
    raise UnknownIonSystemError(name)


# Combined/liquid power density ratio of Table 1 (0.378, identical for all
# three presets) divided by the liquid area fraction r1^2/r2^2 (0.496).
# Empirical calibration, not derived.
STRUCTURAL_EFFICIENCY = 0.762

# Power density is per unit structure volume: voltage is taken across 1 m.
UNIT_HEIGHT = 1.0                   # m

# HI system, SMALL preset, paper masses (Table 1)
BASELINE_POWER_DENSITY = 72.23      # W/m3


# =============================================================================
# TIER 6: SAFETY LIMITS
# =============================================================================

# Upper bounds of the safety factor (omega / omega_max) per warning level
SAFE_LIMIT = 0.6
CAUTION_LIMIT = 0.8
WARNING_LIMIT = 1.0

WARNING_LEVELS = ('safe', 'caution', 'warning', 'danger')


# =============================================================================
# SUMMARY OUTPUT
# =============================================================================

def print_summary(use_paper_masses=False):
    """Print a formatted summary of the constants table.

    Args:
        use_paper_masses: Mass table to list
    """
    masses = get_ion_masses(use_paper_masses)
    m = MATERIAL_PROPERTIES

    print("=" * 72)
    print("     GRAVITY-ION THERMOELECTRIC - CONSTANTS TABLE")
    print("=" * 72)

    print("\n--- Physical Constants ---")
    print(f"  Boltzmann constant:     {BOLTZMANN_CONSTANT:14.6e} J/K")
    print(f"  Elementary charge:      {ELEMENTARY_CHARGE:14.6e} C")
    print(f"  Room temperature:       {ROOM_TEMPERATURE:14.2f} K")

    print(f"\n--- Ion Masses ({mass_source_name(use_paper_masses)}) ---")
    for species, mass in masses.items():
        print(f"  {species:<24s}{mass:14.6e} kg")

    print("\n--- Material Properties ---")
    print(f"  Yield strength:         {m.yield_strength / 1e6:14.1f} MPa")
    print(f"  Solid density:          {m.solid_density:14.1f} kg/m3")
    print(f"  Liquid density:         {m.liquid_density:14.1f} kg/m3")

    print("\n--- Structure Presets ---")
    for name, s in STRUCTURE_PRESETS.items():
        tag = " (default)" if name == DEFAULT_STRUCTURE_NAME else ""
        print(f"  {name + tag:<18s} r1={s.r1 * 1e3:7.2f} mm  r2={s.r2 * 1e3:7.2f} mm  "
              f"r3={s.r3 * 1e3:7.2f} mm  d={s.d * 1e3:7.2f} mm")

    print("\n--- Ion Systems ---")
    for system in ION_SYSTEMS:
        print(f"  {system.name:<8s} {system.anion:>4s} / {system.cation:<4s}"
              f"  sigma = {system.conductivity:5.2f} S/m")

    print("\n--- Calibration ---")
    print(f"  Structural efficiency:  {STRUCTURAL_EFFICIENCY:14.3f}")
    print(f"  Unit height:            {UNIT_HEIGHT:14.1f} m")
    print(f"  Baseline power density: {BASELINE_POWER_DENSITY:14.2f} W/m3")

    print("\n--- Safety Limits (omega / omega_max) ---")
    print(f"  safe    <= {SAFE_LIMIT:.2f}")
    print(f"  caution <= {CAUTION_LIMIT:.2f}")
    print(f"  warning <= {WARNING_LIMIT:.2f}")
    print(f"  danger  >  {WARNING_LIMIT:.2f}")

    print("\n" + "=" * 72)


# =============================================================================
# MAIN
# =============================================================================

if __name__ == "__main__":
    print_summary()
    print()
    print_summary(use_paper_masses=True)
