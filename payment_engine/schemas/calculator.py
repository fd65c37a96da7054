# This project was developed with assistance from AI tools.
"""Payment calculator schemas.

Numeric fields deliberately accept NaN and infinities: the engine degrades
those to a zero breakdown instead of rejecting them.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Unit(BaseModel):
    """A priced property candidate."""

    model_config = ConfigDict(frozen=True)

    price: float
    tax_rate: float | None = Field(
        default=None,
        description="Property tax rate as a fraction (0.0078). None uses the configured fallback.",
    )
    unit_id: str = ""
    plan: str = ""

    @property
    def label(self) -> str:
        """Display label, e.g. ``Lot-12 • Plan-A``."""
        return " • ".join(part for part in (self.unit_id, self.plan) if part)


class CatalogUnit(Unit):
    """A unit as shown on the subdivision map."""

    plan_type: str = ""
    address: str = ""
    map_x: str = "0%"
    map_y: str = "0%"
    floor_plan_image_url: str = ""


class LoanParameters(BaseModel):
    """User-editable primary inputs independent of the unit.

    No range validation: the form lets users type transient invalid values.
    """

    model_config = ConfigDict(frozen=True)

    down_payment_percent: float = 20.0
    interest_rate_percent: float = 7.5
    loan_term_years: int | float = 30
    insurance_yearly: float = 1200.0


class DerivedBreakdown(BaseModel):
    """Monthly payment breakdown derived from a unit and loan parameters."""

    model_config = ConfigDict(frozen=True)

    down_payment_amount: float = 0.0
    yearly_property_tax: float = 0.0
    monthly_principal_interest: float = 0.0
    monthly_tax: float = 0.0
    monthly_insurance: float = 0.0
    monthly_total: float = 0.0
    is_valid: bool = False


# ---------------------------------------------------------------------------
# HTTP payloads
# ---------------------------------------------------------------------------


class CalculationRequest(BaseModel):
    """Input for the stateless calculator endpoint."""

    unit: Unit
    parameters: LoanParameters = Field(default_factory=LoanParameters)
    property_tax_yearly: float | None = Field(
        default=None,
        description="Explicit yearly tax. When omitted it is derived from the unit's rate.",
    )


class ParametersUpdate(BaseModel):
    """Loosely typed form edits; each present field is coerced to a number."""

    down_payment_percent: Any = None
    interest_rate_percent: Any = None
    loan_term_years: Any = None
    insurance_yearly: Any = None


class TaxOverrideUpdate(BaseModel):
    """Explicit tax overrides. A null field removes that override."""

    tax_rate: Any = None
    property_tax_yearly: Any = None


class LineItem(BaseModel):
    """One row of the payment breakdown as displayed."""

    label: str
    amount: float
    display: str
    color: str


class ChartDataset(BaseModel):
    label: str
    data: list[float]
    background_color: list[str]
    border_color: list[str]
    border_width: int = 1


class ChartData(BaseModel):
    """Doughnut chart payload for the breakdown."""

    labels: list[str]
    datasets: list[ChartDataset]


class PaymentDisplay(BaseModel):
    """Everything the results panel renders."""

    unit_label: str
    monthly_total_display: str
    down_payment_display: str
    tax_rate_display: str
    line_items: list[LineItem]
    chart: ChartData | None = None


class SessionState(BaseModel):
    """Full snapshot of one calculator session."""

    session_id: str
    unit: Unit | None = None
    parameters: LoanParameters
    effective_tax_rate: float
    breakdown: DerivedBreakdown
    display: PaymentDisplay
