"""
Personal Ledger - Source Package

Derives the figures a personal finance app displays (balances, monthly
trends, category breakdowns, budget and goal progress, CSV exports) from
an in-memory snapshot of the user's ledger.

DESIGN PRINCIPLES:
1. Builders take plain data in and return plain data out
2. Missing references degrade to a fallback, never an exception
3. Amounts are aggregated by magnitude, never by storage sign
4. Storage is an external collaborator behind an interface
"""

__version__ = "1.0.0"
__author__ = "Personal Ledger Team"
