"""
Structural Analysis Package
===========================

Modules:
  - rotational_limits: Geometry validation and material-limited rotor speed (Eq. 9-11)
"""
