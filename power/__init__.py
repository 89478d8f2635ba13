"""
Power Output Package for the Gravity-Ion Thermoelectric Rotor
===============================================================

Modules:
  - power_density:      Power density at the structural limit or an operating speed
  - system_performance: Comparison of the HI, LiCl and KCl electrolyte systems
"""
