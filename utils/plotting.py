"""
Gravity-Ion Thermoelectric Report - Plotting Utilities
Provides consistent figure formatting for the calculation report.
"""
import os
import logging

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt
import numpy as np

logger = logging.getLogger(__name__)

plt.rcParams['font.size'] = 11
plt.rcParams['figure.figsize'] = (10, 7)
plt.rcParams['figure.dpi'] = 150
plt.rcParams['axes.grid'] = True
plt.rcParams['grid.alpha'] = 0.3
plt.rcParams['axes.labelsize'] = 12
plt.rcParams['axes.titlesize'] = 13
plt.rcParams['legend.fontsize'] = 10
plt.rcParams['lines.linewidth'] = 1.5

FIGURES_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'figures')

# Color palette (colorblind-safe)
COLORS = {
    'primary': '#0EA5E9',
    'secondary': '#EA580C',
    'dark': '#374151',
    'safe': '#4CAF50',
    'caution': '#FFC107',
    'warning': '#FF9800',
    'danger': '#F44336',
}

SYSTEM_COLORS = ['#0EA5E9', '#9C27B0', '#607D8B']


def save_figure(fig, name, output_dir=None, tight=True):
    """Save figure as PNG.

    Args:
        fig: matplotlib Figure object
        name: Base filename (without extension)
        output_dir: Target directory (default: figures/ next to the package)
        tight: Apply tight_layout before saving (default True)

    Returns:
        str: Path to saved file
    """
    output_dir = output_dir or FIGURES_DIR
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, f'{name}.png')
    if tight:
        fig.tight_layout()
    fig.savefig(path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    logger.info("Figure saved: %s", path)
    return path


def plot_power_curve(rpms, power, max_safe_rpm, current_rpm=None, title=None,
                     filename='power_vs_rpm', output_dir=None):
    """Combined power density against rotation speed.

    Args:
        rpms: Rotation speed array (rev/min)
        power: Combined power density array (W/m3)
        max_safe_rpm: Structural speed limit, drawn as a vertical line
        current_rpm: Operating point to mark (optional)
        title: Plot title
        filename: Base filename for saving
        output_dir: Target directory

    Returns:
        str: Path to saved file
    """
    rpms = np.asarray(rpms)
    power = np.asarray(power)

    fig, ax = plt.subplots()
    ax.plot(rpms, power, color=COLORS['primary'], linewidth=2, label='Power density')
    ax.fill_between(rpms, power, color=COLORS['primary'], alpha=0.1)
    ax.axvline(max_safe_rpm, color=COLORS['danger'], linestyle='--',
               label=f'Structural limit ({max_safe_rpm:,.0f} rpm)')

    if current_rpm is not None:
        current_power = np.interp(current_rpm, rpms, power)
        ax.plot([current_rpm], [current_power], 'o', markersize=8,
                color=COLORS['secondary'], label='Operating point')

    ax.set_xlabel('Rotation speed (rpm)')
    ax.set_ylabel('Power density (W/m³)')
    ax.set_title(title or 'Power Density vs Rotation Speed')
    ax.legend()
    return save_figure(fig, filename, output_dir)


def plot_system_comparison(performances, filename='ion_systems', output_dir=None):
    """Bar chart of liquid and combined power density per ion system.

    Args:
        performances: List of SystemPerformance
        filename: Base filename for saving
        output_dir: Target directory

    Returns:
        str: Path to saved file
    """
    names = [p.name for p in performances]
    liquid = [p.result.power_density_liquid for p in performances]
    combined = [p.result.power_density_combined for p in performances]
    x = np.arange(len(names))
    width = 0.38

    fig, ax = plt.subplots()
    ax.bar(x - width / 2, liquid, width, label='Liquid only', color=SYSTEM_COLORS[0])
    ax.bar(x + width / 2, combined, width, label='Combined', color=SYSTEM_COLORS[1])
    ax.set_xticks(x)
    ax.set_xticklabels(names)
    ax.set_ylabel('Power density (W/m³)')
    ax.set_title('Ion System Comparison at Structural Limit')
    ax.legend()
    return save_figure(fig, filename, output_dir)


def plot_safety_bands(safety_factors, rpms, limits, filename='safety_bands', output_dir=None):
    """Safety factor against rotation speed with warning bands shaded.

    Args:
        safety_factors: Safety factor array
        rpms: Rotation speed array (rev/min)
        limits: (safe, caution, warning) upper bounds
        filename: Base filename for saving
        output_dir: Target directory

    Returns:
        str: Path to saved file
    """
    safe, caution, warning = limits
    sf = np.asarray(safety_factors)
    top = max(float(np.nanmax(sf[np.isfinite(sf)])) if np.isfinite(sf).any() else 0.0,
              warning) * 1.1

    fig, ax = plt.subplots()
    ax.axhspan(0, safe, color=COLORS['safe'], alpha=0.15, label='safe')
    ax.axhspan(safe, caution, color=COLORS['caution'], alpha=0.15, label='caution')
    ax.axhspan(caution, warning, color=COLORS['warning'], alpha=0.15, label='warning')
    ax.axhspan(warning, top, color=COLORS['danger'], alpha=0.15, label='danger')
    ax.plot(rpms, sf, color=COLORS['dark'], linewidth=2)
    ax.set_ylim(0, top)
    ax.set_xlabel('Rotation speed (rpm)')
    ax.set_ylabel('Safety factor ω/ω_max')
    ax.set_title('Rotor Safety Classification')
    ax.legend(loc='upper left')
    return save_figure(fig, filename, output_dir)
