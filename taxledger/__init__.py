"""
taxledger - Tax & Budget Calculation Engine

The numeric core of a small-business accounting tool. Turns recorded
transactions into VAT liability, withholding-tax liability, progressive
personal income tax (PND 90 / PND 94) and budget-vs-spend status.

DESIGN PRINCIPLES:
1. Every calculation is a pure function of its inputs
2. Invalid numbers become zero, they never raise
3. No rounding inside the engine - formatting belongs to the caller
4. Inputs are fresh snapshots, nothing is cached between calls
"""

__version__ = "1.0.0"
__author__ = "taxledger Team"
