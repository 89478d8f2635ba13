"""
Ion System Performance Comparison
===================================

Runs the power density calculation for each electrolyte pair in
config.ION_SYSTEMS (HI, LiCl, KCl) on a common structure, each with its
own solution conductivity.
"""

import os
import sys
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Path setup
# ---------------------------------------------------------------------------
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from config import DEFAULT_STRUCTURE, ION_SYSTEMS, mass_source_name
from power.power_density import PowerResult, calculate_power_density


@dataclass(frozen=True)
class SystemPerformance:
    """Power density of one named ion system."""

    name: str
    anion: str
    cation: str
    conductivity: float             # S/m
    result: PowerResult

    @property
    def power_density(self):
        """Combined power density (W/m3)."""
        return self.result.power_density_combined


def compare_ion_systems(structure=DEFAULT_STRUCTURE, use_paper_masses=False, systems=ION_SYSTEMS):
    """Evaluate every ion system on one structure.

    Args:
        structure: StructureGeometry
        use_paper_masses: Mass table selector
        systems: Sequence of IonSystem (default: config.ION_SYSTEMS)

    Returns:
        list of SystemPerformance, in the order of ``systems``
    """
    return [
        SystemPerformance(
            name=s.name,
            anion=s.anion,
            cation=s.cation,
            conductivity=s.conductivity,
            result=calculate_power_density(s.anion, s.cation, structure,
                                           s.conductivity, use_paper_masses),
        )
        for s in systems
    ]


def rank_ion_systems(structure=DEFAULT_STRUCTURE, use_paper_masses=False, systems=ION_SYSTEMS):
    """Ion systems sorted by combined power density, highest first."""
    performances = compare_ion_systems(structure, use_paper_masses, systems)
    return sorted(performances, key=lambda p: p.power_density, reverse=True)


def print_system_performance(performances, use_paper_masses=False):
    """Print a comparison table of ion systems.

    Args:
        performances: List of SystemPerformance
        use_paper_masses: Mass table used (for the heading only)
    """
    print(f"\n--- Ion System Comparison ({mass_source_name(use_paper_masses)} masses) ---")
    print(f"  {'System':<8s} {'Pair':<10s} {'sigma':>7s} {'E (V/m)':>12s} "
          f"{'P_liq (W/m3)':>14s} {'P_comb (W/m3)':>14s}")
    print(f"  {'-' * 68}")
    for p in performances:
        r = p.result
        pair = f"{p.anion}/{p.cation}"
        print(f"  {p.name:<8s} {pair:<10s} {p.conductivity:7.2f} {r.electric_field:12.4f} "
              f"{r.power_density_liquid:14.4f} {r.power_density_combined:14.4f}")


if __name__ == '__main__':
    print_system_performance(rank_ion_systems(use_paper_masses=True), use_paper_masses=True)
