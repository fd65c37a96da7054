# This project was developed with assistance from AI tools.
"""Shared schema components."""

from .calculator import DerivedBreakdown, LoanParameters, Unit

__all__ = [
    "DerivedBreakdown",
    "LoanParameters",
    "Unit",
]
