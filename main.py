#!/usr/bin/env python3
"""
Gravity-Ion Thermoelectric Calculations - Master Runner
=========================================================

Executes ALL calculation modules for one operating configuration and
collects results into a design summary.

Calculation sequence:
  [1/7] Constants         - Physical constants, ion masses, presets
  [2/7] Ion Physics       - Boltzmann distribution, electric field, voltage
  [3/7] Structural        - Rotational speed limits of the rotor
  [4/7] Power             - Power density at the limit and at the operating speed
  [5/7] Safety            - Operating speed classification
  [6/7] Ion Systems       - HI / LiCl / KCl comparison
  [7/7] Validation        - Paper Table 1 and Tolman (1910) comparison

Usage:
    python main.py
    python main.py --structure MEDIUM --rpm 300000 --paper-masses --plots
"""

import os
import sys
import time
import logging
import argparse
import traceback
from datetime import datetime

import numpy as np

# Ensure project root is on path
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, PROJECT_ROOT)

import config
from config import (
    get_structure, get_ion_system, mass_source_name, print_summary,
    ROOM_TEMPERATURE, SAFE_LIMIT, CAUTION_LIMIT, WARNING_LIMIT,
)
from utils.tables import format_value, format_display_value, results_to_markdown

logger = logging.getLogger("main")


# =============================================================================
# Banner
# =============================================================================

BANNER = r"""
================================================================================

     Gravity-Ion Thermoelectric Generator
     Design Calculation Package

     Basis:      Chen, "An Exception to Carnot's Theorem Inferred
                 from Tolman's Experiment"
     Rotor:      Aluminium-alloy annular vessel
     Electrolyte: HI / LiCl / KCl aqueous solutions

================================================================================
"""

N_STEPS = 7


# =============================================================================
# Helper
# =============================================================================

def step_header(step, total, title):
    """Print a progress step header."""
    tag = f"[{step}/{total}]"
    print(f"\n{'=' * 80}")
    print(f"  {tag} {title}")
    print(f"{'=' * 80}")


# =============================================================================
# Module runners - each returns a results dict
# =============================================================================

def run_constants(args):
    """[1/7] Constants table."""
    step_header(1, N_STEPS, "CONSTANTS - Physical Constants, Ion Masses & Presets")

    print_summary(use_paper_masses=args.paper_masses)

    structure = get_structure(args.structure)
    system = get_ion_system(args.system)

    return {
        "Mass source": (mass_source_name(args.paper_masses), ""),
        "Structure": (args.structure.upper(), ""),
        "r1": (structure.r1 * 1e3, "mm"),
        "r2": (structure.r2 * 1e3, "mm"),
        "r3": (structure.r3 * 1e3, "mm"),
        "d": (structure.d * 1e3, "mm"),
        "Ion system": (f"{system.name} ({system.anion}/{system.cation})", ""),
        "Conductivity": (system.conductivity, "S/m"),
    }


def run_ion_physics(args):
    """[2/7] Ion physics: Boltzmann distribution and field at operating speed."""
    step_header(2, N_STEPS, "ION PHYSICS - Boltzmann Distribution & Electric Field")

    from physics.ion_distribution import species_distribution, print_distribution
    from physics.electric_field import (
        electric_field, voltage_difference, centrifugal_acceleration,
    )

    system = get_ion_system(args.system)
    structure = get_structure(args.structure)

    dist = species_distribution(system.anion, system.cation, args.acceleration,
                                args.height, args.temperature, args.paper_masses)
    print_distribution(dist, f"({system.name}, G = {args.acceleration} m/s2, H = {args.height} m)")

    m_anion = config.ion_mass(system.anion, args.paper_masses)
    m_cation = config.ion_mass(system.cation, args.paper_masses)
    G_op = centrifugal_acceleration(args.rpm, structure.r3)
    E_op = electric_field(m_anion, m_cation, G_op)
    V_op = voltage_difference(m_anion, m_cation, G_op, args.height)

    print("\n--- Electric Field at Operating Speed ---")
    print(f"  Rotation speed:             {args.rpm:12.0f} rpm")
    print(f"  Centrifugal accel. at r3:   {G_op:12.4e} m/s2")
    print(f"  Electric field:             {E_op:12.4e} V/m")
    print(f"  Voltage over {args.height:5.3f} m:        {V_op:12.4e} V")

    return {
        "Anion Boltzmann ratio": (dist.anion, ""),
        "Cation Boltzmann ratio": (dist.cation, ""),
        "Concentration separation": (dist.separation, ""),
        "Operating acceleration": (G_op, "m/s2"),
        "Operating electric field": (E_op, "V/m"),
        "Operating voltage": (V_op, "V"),
    }


def run_structural(args):
    """[3/7] Structural: rotational speed limit."""
    step_header(3, N_STEPS, "STRUCTURAL - Rotational Speed Limits (Eq. 9-11)")

    from structural.rotational_limits import (
        max_omega_squared_from_structure, max_rotational_speed, max_safe_rpm,
        print_rotational_limits,
    )

    structure = get_structure(args.structure)
    print_rotational_limits(structure)

    return {
        "Max omega^2": (max_omega_squared_from_structure(structure), "rad2/s2"),
        "Max angular velocity": (max_rotational_speed(structure), "rad/s"),
        "Max safe speed": (max_safe_rpm(structure), "rpm"),
    }


def run_power(args):
    """[4/7] Power density at the structural limit and at the operating speed."""
    step_header(4, N_STEPS, "POWER - Power Density at Limit & Operating Speed")

    from power.power_density import (
        calculate_power_density, calculate_operating_power, print_power_result,
    )
    from safety.speed_limits import efficiency_multiplier

    system = get_ion_system(args.system)
    structure = get_structure(args.structure)

    limit = calculate_power_density(system.anion, system.cation, structure,
                                    system.conductivity, args.paper_masses)
    print_power_result(limit, f"{system.name} at Structural Limit")

    operating = calculate_operating_power(system.anion, system.cation, args.rpm, structure,
                                          system.conductivity, args.paper_masses)
    print_power_result(operating, f"{system.name} at {args.rpm:,.0f} rpm")

    return {
        "Electric field (limit)": (limit.electric_field, "V/m"),
        "Output voltage (limit)": (limit.output_voltage, "V"),
        "Power density liquid (limit)": (limit.power_density_liquid, "W/m3"),
        "Power density combined (limit)": (limit.power_density_combined, "W/m3"),
        "Volume fraction": (limit.volume_fraction, ""),
        "Power density combined (operating)": (operating.power_density_combined, "W/m3"),
        "Efficiency multiplier (operating)": (efficiency_multiplier(operating.power_density_combined), "x"),
        "Daily energy (operating)": (operating.power_density_combined * 24, "Wh/m3"),
    }


def run_safety(args):
    """[5/7] Safety classification of the operating speed."""
    step_header(5, N_STEPS, "SAFETY - Operating Speed Classification")

    from safety.speed_limits import evaluate_safety, assess_feasibility, print_safety_result
    from power.power_density import calculate_operating_power

    system = get_ion_system(args.system)
    structure = get_structure(args.structure)

    s = evaluate_safety(args.rpm, structure)
    print_safety_result(s)

    operating = calculate_operating_power(system.anion, system.cation, args.rpm, structure,
                                          system.conductivity, args.paper_masses)
    feasibility = assess_feasibility(s.warning_level, operating.power_density_combined)
    print(f"  Feasibility:                {feasibility:>12s}")

    return {
        "Operating speed": (args.rpm, "rpm"),
        "Max safe speed": (s.max_safe_rpm, "rpm"),
        "Safety factor": (s.safety_factor, ""),
        "Within limits": ("Yes" if s.is_within_limits else "NO", ""),
        "Warning level": (s.warning_level, ""),
        "Feasibility": (feasibility, ""),
    }


def run_ion_systems(args):
    """[6/7] Ion system comparison."""
    step_header(6, N_STEPS, "ION SYSTEMS - HI / LiCl / KCl Comparison")

    from power.system_performance import rank_ion_systems, print_system_performance

    structure = get_structure(args.structure)
    ranked = rank_ion_systems(structure, args.paper_masses)
    print_system_performance(ranked, args.paper_masses)

    results = {}
    for i, p in enumerate(ranked, start=1):
        results[f"#{i} {p.name} combined power density"] = (p.power_density, "W/m3")
    return results


def run_validation(args):
    """[7/7] Validation against paper Table 1 and Tolman (1910)."""
    step_header(7, N_STEPS, "VALIDATION - Paper Table 1 & Tolman (1910)")

    from validation.paper_table import (
        validate_both_mass_sources, print_table_validation, check_table, relative_errors,
    )
    from validation.tolman import compare_with_tolman, print_tolman_comparison

    results = {}
    for label, table in validate_both_mass_sources().items():
        print_table_validation(table)
        failures = check_table(table, rel_tol=args.rel_tol)
        worst = max(max(relative_errors(e).values()) for e in table.values())
        results[f"Table 1 max rel. error ({label})"] = (worst, "")
        results[f"Table 1 within {args.rel_tol:g} ({label})"] = ("Yes" if not failures else "NO", "")
        for name, key, err in failures:
            logger.warning("Table 1 %s %s off by %.2e (%s masses)", name, key, err, label)

    comparisons = compare_with_tolman(use_paper_masses=args.paper_masses)
    print_tolman_comparison(comparisons)
    for c in comparisons:
        if c.accuracy is not None:
            results[f"Tolman {c.solution} @ {c.rpm} rpm theory"] = (c.theoretical_voltage, "V")

    return results


# =============================================================================
# Figures
# =============================================================================

def make_figures(args, output_dir):
    """Write the power, system comparison and safety figures."""
    from utils.plotting import plot_power_curve, plot_system_comparison, plot_safety_bands
    from power.power_density import power_curve
    from power.system_performance import compare_ion_systems
    from structural.rotational_limits import max_safe_rpm

    system = get_ion_system(args.system)
    structure = get_structure(args.structure)
    rpm_max = max_safe_rpm(structure)
    rpms = np.linspace(0.0, 1.2 * rpm_max, 121)

    power = power_curve(system.anion, system.cation, rpms, structure,
                        system.conductivity, args.paper_masses)
    plot_power_curve(rpms, power, rpm_max, current_rpm=args.rpm,
                     title=f"{system.name} Power Density ({args.structure.upper()})",
                     output_dir=output_dir)

    plot_system_comparison(compare_ion_systems(structure, args.paper_masses),
                           output_dir=output_dir)

    factors = rpms / rpm_max
    plot_safety_bands(factors, rpms, (SAFE_LIMIT, CAUTION_LIMIT, WARNING_LIMIT),
                      output_dir=output_dir)


# =============================================================================
# Design summary printer
# =============================================================================

def print_design_summary(all_results):
    """Print the collected results of every step."""
    width = 80
    print("\n" + "=" * width)
    print("  CALCULATION SUMMARY")
    print("  Gravity-Ion Thermoelectric Generator")
    print("=" * width)

    for section_name, section_results in all_results.items():
        if section_results is None:
            print(f"\n  --- {section_name} --- [FAILED - see errors above]")
            continue

        print(f"\n  --- {section_name} ---")
        for key, (value, unit) in section_results.items():
            print(f"    {key:<40s}  {format_value(value):>20s}  {unit}")

    print("\n" + "=" * width)


KEY_RESULTS = (
    ("4. Power", "Power density combined (limit)"),
    ("4. Power", "Power density combined (operating)"),
    ("3. Structural", "Max safe speed"),
    ("5. Safety", "Safety factor"),
    ("5. Safety", "Feasibility"),
)


def print_key_results(all_results):
    """Print the headline figures of a run as a compact panel."""
    print("\n  KEY RESULTS")
    for section, key in KEY_RESULTS:
        section_results = all_results.get(section)
        if not section_results or key not in section_results:
            continue
        value, unit = section_results[key]
        print(f"    {key:<40s}  {format_display_value(value, unit):>24s}")


def save_results(all_results, output_dir):
    """Save the summary as markdown under ``output_dir``."""
    os.makedirs(output_dir, exist_ok=True)

    md_results = {}
    for section_name, section_results in all_results.items():
        if section_results is None:
            md_results[section_name] = "Calculation FAILED - see console output for errors."
        else:
            md_results[section_name] = section_results

    md_path = os.path.join(output_dir, "summary.md")
    results_to_markdown(md_results, md_path)
    return md_path


# =============================================================================
# Main
# =============================================================================

STEPS = (
    ("1. Constants", run_constants),
    ("2. Ion Physics", run_ion_physics),
    ("3. Structural", run_structural),
    ("4. Power", run_power),
    ("5. Safety", run_safety),
    ("6. Ion Systems", run_ion_systems),
    ("7. Validation", run_validation),
)


def build_parser():
    """Command-line options."""
    parser = argparse.ArgumentParser(
        description="Gravity-ion thermoelectric design calculations")
    parser.add_argument('--structure', default=config.DEFAULT_STRUCTURE_NAME,
                        help="Structure preset: SMALL, MEDIUM, LARGE (default: %(default)s)")
    parser.add_argument('--system', default=config.ION_SYSTEMS[0].name,
                        choices=[s.name for s in config.ION_SYSTEMS],
                        help="Ion system (default: %(default)s)")
    parser.add_argument('--rpm', type=float, default=100_000.0,
                        help="Operating rotation speed in rpm (default: %(default)s)")
    parser.add_argument('--paper-masses', action='store_true',
                        help="Use the paper's ion masses instead of reference values")
    parser.add_argument('--temperature', type=float, default=ROOM_TEMPERATURE,
                        help="Temperature in K (default: %(default)s)")
    parser.add_argument('--acceleration', type=float, default=9.81,
                        help="Acceleration for the Boltzmann distribution, m/s2 (default: %(default)s)")
    parser.add_argument('--height', type=float, default=0.1,
                        help="Height difference in m (default: %(default)s)")
    parser.add_argument('--rel-tol', type=float, default=2e-3,
                        help="Relative tolerance for the Table 1 check (default: %(default)s)")
    parser.add_argument('--output-dir', default=os.path.join(PROJECT_ROOT, "results"),
                        help="Directory for the summary and figures")
    parser.add_argument('--plots', action='store_true', help="Write figures")
    parser.add_argument('-v', '--verbose', action='store_true', help="Debug logging")
    return parser


def main(argv=None):
    """Execute the complete calculation sequence.

    Returns:
        int: 0 if every step succeeded, 1 otherwise
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )

    print(BANNER)
    print(f"  Run started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print(f"  Python {sys.version.split()[0]}, NumPy {np.__version__}")
    print()

    t_start = time.time()

    all_results = {}
    errors = []

    for name, runner in STEPS:
        try:
            all_results[name] = runner(args)
        except Exception as e:
            print(f"\n  *** {name.split('. ', 1)[-1].upper()} FAILED: {e} ***")
            traceback.print_exc()
            errors.append((name, str(e)))
            all_results[name] = None

    t_elapsed = time.time() - t_start

    print_design_summary(all_results)
    print_key_results(all_results)
    save_results(all_results, args.output_dir)

    if args.plots:
        try:
            make_figures(args, os.path.join(args.output_dir, "figures"))
        except Exception as e:
            logger.exception("Figure generation failed")
            errors.append(("Figures", str(e)))

    n_ok = sum(1 for v in all_results.values() if v is not None)
    print(f"\n{'=' * 80}")
    print("  CALCULATION COMPLETE")
    print(f"  Steps passed:   {n_ok}/{len(all_results)}")
    print(f"  Elapsed time:   {t_elapsed:.2f} s")
    if errors:
        print(f"\n  ERRORS ({len(errors)}):")
        for mod, err in errors:
            print(f"    - {mod}: {err}")
    else:
        print("  Status:         ALL STEPS PASSED")
    print(f"\n  Results saved to: {args.output_dir}/")
    print(f"{'=' * 80}\n")

    return 1 if errors else 0


if __name__ == '__main__':
    sys.exit(main())
