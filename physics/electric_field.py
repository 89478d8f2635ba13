"""
Electric Field from Differential Ion Settling
===============================================

When an electrolyte of unlike-mass ions is held in a gravitational or
centrifugal field, the heavier ion settles more than the lighter one.
The resulting charge separation builds an internal field that exactly
balances the difference in body forces (paper equations 3 and 4):

    E  = (m_heavy - m_light) * G / (2 q)
    dV = E * H

For a rotor, the acceleration at radius r is the centrifugal value
G = omega^2 * r with omega = 2 pi rpm / 60.

Sign convention: E is positive when the first mass is the heavier one.
Swapping the masses flips the sign; the caller owns the ordering.
"""

import os
import sys
import math

# ---------------------------------------------------------------------------
# Path setup
# ---------------------------------------------------------------------------
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from config import ELEMENTARY_CHARGE


# =============================================================================
# Field and Voltage
# =============================================================================

def electric_field(heavy_mass, light_mass, acceleration):
    """Electric field strength inside the ion-containing fluid.

    Args:
        heavy_mass: Mass of the heavier ion (kg)
        light_mass: Mass of the lighter ion (kg)
        acceleration: Gravitational or centrifugal acceleration (m/s2)

    Returns:
        float: Electric field (V/m)
    """
    return (heavy_mass - light_mass) * acceleration / (2.0 * ELEMENTARY_CHARGE)


def voltage_difference(heavy_mass, light_mass, acceleration, height):
    """Voltage across a column of the given height.

    Args:
        heavy_mass: Mass of the heavier ion (kg)
        light_mass: Mass of the lighter ion (kg)
        acceleration: Acceleration (m/s2)
        height: Column height (m)

    Returns:
        float: Voltage difference (V)
    """
    return electric_field(heavy_mass, light_mass, acceleration) * height


# =============================================================================
# Rotation
# =============================================================================

def angular_velocity(rpm):
    """Convert rotations per minute to angular velocity in rad/s."""
    return 2.0 * math.pi * rpm / 60.0


def rpm_from_angular_velocity(omega):
    """Convert angular velocity in rad/s to rotations per minute."""
    return omega * 60.0 / (2.0 * math.pi)


def centrifugal_acceleration(rpm, radius):
    """Centrifugal acceleration G = omega^2 * r.

    Args:
        rpm: Rotation speed (rev/min), must be >= 0
        radius: Distance from the rotation axis (m)

    Returns:
        float: Acceleration (m/s2)
    """
    if rpm < 0:
        raise ValueError(f"Rotation speed must be non-negative, got {rpm} rpm")
    omega = angular_velocity(rpm)
    return omega * omega * radius
