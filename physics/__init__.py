"""
Ion Physics Package for the Gravity-Ion Thermoelectric Concept
================================================================

Modules:
  - ion_distribution: Boltzmann concentration ratio of ions in an accelerated frame
  - electric_field:   Electric field and voltage from unlike ion masses, centrifugal acceleration
"""
