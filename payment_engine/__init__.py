# This project was developed with assistance from AI tools.
"""Unit payment estimator -- derived mortgage payment state for priced units."""

from .schemas.calculator import DerivedBreakdown, LoanParameters, Unit
from .services.calculator import compute, derive_property_tax
from .services.controller import DerivedStateController

__all__ = [
    "DerivedBreakdown",
    "DerivedStateController",
    "LoanParameters",
    "Unit",
    "compute",
    "derive_property_tax",
]
