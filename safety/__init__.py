"""
Safety Package
==============

Modules:
  - speed_limits: Safety factor, warning levels and feasibility of an operating speed
"""
