"""
finplan - Source Package

A personal finance ledger and planning engine: monthly income and expenses,
derived budget metrics, six financial calculators and savings goals, kept in
locally persisted state.

DESIGN PRINCIPLES:
1. Validate first, then mutate, then persist - every time
2. Derived numbers are recomputed, never stored
3. Calculators are pure and independent of the ledger
4. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "finplan Team"
