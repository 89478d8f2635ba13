"""
Validation Package
==================

Modules:
  - paper_table: Reproduction of the paper's Table 1 (SMALL / MEDIUM / LARGE)
  - tolman:      Comparison with Tolman's 1910 centrifuge measurements
"""
