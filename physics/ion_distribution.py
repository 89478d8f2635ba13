"""
Ion Distribution in an Accelerated Electrolyte
================================================

Boltzmann distribution of a charged species between two points separated
by a height difference in a gravitational or centrifugal field
(paper equation 1):

    C(h + dh) / C(h) = exp(-m * G * dh / (k * T))

Heavier ions settle more strongly than lighter ones; the difference in
their distributions is what sets up the internal electric field
(see physics.electric_field).
"""

import os
import sys
import logging
from dataclasses import dataclass

import numpy as np

# ---------------------------------------------------------------------------
# Path setup
# ---------------------------------------------------------------------------
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import config
from config import BOLTZMANN_CONSTANT, ROOM_TEMPERATURE

logger = logging.getLogger(__name__)


# =============================================================================
# BoltzmannDistribution Dataclass
# =============================================================================

@dataclass(frozen=True)
class BoltzmannDistribution:
    """Concentration ratios of an anion/cation pair over one height step."""

    anion: float                    # C(h+dh)/C(h) for the anion
    cation: float                   # C(h+dh)/C(h) for the cation
    ratio: float                    # anion / cation
    separation: float               # |anion - cation|


# =============================================================================
# Boltzmann Ratio
# =============================================================================

def boltzmann_ratio(ion_mass, acceleration, height, temperature=ROOM_TEMPERATURE):
    """Concentration ratio of one ion species across a height difference.

    Args:
        ion_mass: Ion mass (kg)
        acceleration: Gravitational or centrifugal acceleration (m/s2)
        height: Height difference (m); negative values look "upward"
        temperature: Absolute temperature (K), must be > 0

    Returns:
        float: exp(-m*G*h/(k*T)). Underflows to 0.0 or overflows to inf
               for extreme exponents; never clamped.
    """
    if not temperature > 0:
        raise ValueError(f"Temperature must be positive, got {temperature} K")

    exponent = -(ion_mass * acceleration * height) / (BOLTZMANN_CONSTANT * temperature)
    with np.errstate(over='ignore', under='ignore'):
        return float(np.exp(exponent))


def boltzmann_distribution(anion_mass, cation_mass, acceleration, height,
                           temperature=ROOM_TEMPERATURE):
    """Boltzmann ratios for both ions of an electrolyte pair.

    Args:
        anion_mass: Anion mass (kg)
        cation_mass: Cation mass (kg)
        acceleration: Acceleration (m/s2)
        height: Height difference (m)
        temperature: Absolute temperature (K)

    Returns:
        BoltzmannDistribution
    """
    anion = boltzmann_ratio(anion_mass, acceleration, height, temperature)
    cation = boltzmann_ratio(cation_mass, acceleration, height, temperature)

    # Both ratios underflow together only for absurd inputs; keep the IEEE result
    with np.errstate(divide='ignore', invalid='ignore'):
        ratio = float(np.divide(anion, cation))

    logger.debug("Boltzmann ratios: anion=%.6g cation=%.6g (G=%.4g m/s2, h=%.4g m, T=%.2f K)",
                 anion, cation, acceleration, height, temperature)

    return BoltzmannDistribution(
        anion=anion,
        cation=cation,
        ratio=ratio,
        separation=abs(anion - cation),
    )


def species_distribution(anion, cation, acceleration, height,
                         temperature=ROOM_TEMPERATURE, use_paper_masses=False):
    """Boltzmann ratios for an ion pair given by species tags.

    Raises:
        UnknownSpeciesError: if either species is not in the mass table
    """
    return boltzmann_distribution(
        config.ion_mass(anion, use_paper_masses),
        config.ion_mass(cation, use_paper_masses),
        acceleration, height, temperature,
    )


# =============================================================================
# Printing
# =============================================================================

def print_distribution(dist, label=''):
    """Print a Boltzmann distribution summary.

    Args:
        dist: BoltzmannDistribution instance
        label: Optional heading suffix (e.g. 'HI @ 9.81 m/s2')
    """
    print(f"\n--- Boltzmann Distribution {label} ---".rstrip())
    print(f"  Anion ratio:                {dist.anion:14.10f}")
    print(f"  Cation ratio:               {dist.cation:14.10f}")
    print(f"  Anion / cation:             {dist.ratio:14.10f}")
    print(f"  Separation:                 {dist.separation:14.6e}")


# =============================================================================
# Main
# =============================================================================

if __name__ == '__main__':
    d = species_distribution('I-', 'H+', acceleration=9.81, height=0.1)
    print_distribution(d, "(HI, 1 g, 10 cm)")
