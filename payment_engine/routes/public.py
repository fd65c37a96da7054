# This project was developed with assistance from AI tools.
"""Public API routes -- unit catalog and stateless calculation."""

from fastapi import APIRouter, HTTPException, status

from ..core.config import settings
from ..schemas.calculator import CalculationRequest, CatalogUnit, DerivedBreakdown
from ..services.calculator import compute, derive_property_tax
from ..services.units import get_unit, list_units

router = APIRouter()


@router.get("/units", response_model=list[CatalogUnit])
async def list_catalog_units() -> list[CatalogUnit]:
    """Return the units shown on the project map."""
    return list_units()


@router.get("/units/{unit_id}", response_model=CatalogUnit)
async def get_catalog_unit(unit_id: str) -> CatalogUnit:
    unit = get_unit(unit_id)
    if unit is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unit not found")
    return unit


@router.get("/loan-terms", response_model=list[int])
async def list_loan_terms() -> list[int]:
    """Loan terms offered in the term picker."""
    return settings.LOAN_TERM_OPTIONS


@router.post("/calculate", response_model=DerivedBreakdown)
async def calculate_payment(req: CalculationRequest) -> DerivedBreakdown:
    """Compute a payment breakdown without opening a session.

    The yearly tax is derived from the unit's rate (or the configured
    fallback) unless the request pins it explicitly.
    """
    yearly_tax = req.property_tax_yearly
    if yearly_tax is None:
        yearly_tax = derive_property_tax(req.unit, settings.DEFAULT_TAX_RATE)
    return compute(req.unit.price, yearly_tax, req.parameters)
