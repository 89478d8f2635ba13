"""
Report Utilities
================

Modules:
  - tables:   Console and markdown table formatting
  - plotting: matplotlib figures for the calculation report
"""
