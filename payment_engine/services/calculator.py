# This project was developed with assistance from AI tools.
"""Monthly payment calculation logic.

Pure math, no I/O. Shared by the session controller and the public API route.

Nothing here raises for numeric input: out-of-range or non-finite values
produce the degenerate breakdown (all zero except monthly insurance).
"""

import math

from ..schemas.calculator import DerivedBreakdown, LoanParameters, Unit


def round_half_up(value: float) -> float:
    """Round to the nearest whole unit, halves toward +infinity.

    >>> round_half_up(422.5)
    423.0
    >>> round_half_up(-2.5)
    -2.0
    """
    return float(math.floor(value + 0.5))


def _finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


def degenerate_breakdown(insurance_yearly: float) -> DerivedBreakdown:
    """Breakdown returned when the loan cannot be computed.

    Insurance is independent of loan validity, so it is still reported.
    """
    monthly_insurance = insurance_yearly / 12 if math.isfinite(insurance_yearly) else 0.0
    return DerivedBreakdown(monthly_insurance=monthly_insurance, is_valid=False)


def monthly_principal_interest(
    loan_amount: float, monthly_rate: float, num_payments: float
) -> float:
    """Standard fixed-rate amortization payment.

    M = L * [r(1+r)^n / ((1+r)^n - 1)], straight-line L / n when r == 0.
    """
    if monthly_rate > 0:
        try:
            compound = (1 + monthly_rate) ** num_payments
        except OverflowError:
            # (1+r)^n / ((1+r)^n - 1) -> 1
            return loan_amount * monthly_rate
        if compound != 1:
            return loan_amount * (monthly_rate * compound) / (compound - 1)
    # r == 0, or r too small to move (1+r)^n off 1.0
    return loan_amount / num_payments


def compute(price: float, yearly_tax: float, params: LoanParameters) -> DerivedBreakdown:
    """Compute the current month's payment breakdown."""
    down_pct = params.down_payment_percent
    rate = params.interest_rate_percent
    term = params.loan_term_years

    if (
        not _finite(price, yearly_tax, down_pct, rate, term)
        or price <= 0
        or down_pct < 0
        or rate < 0
        or term <= 0
    ):
        return degenerate_breakdown(params.insurance_yearly)

    down_payment = price * (down_pct / 100)
    loan_amount = price - down_payment
    monthly_rate = rate / 100 / 12
    num_payments = term * 12

    principal_interest = monthly_principal_interest(loan_amount, monthly_rate, num_payments)
    monthly_tax = round_half_up(yearly_tax / 12)
    monthly_insurance = params.insurance_yearly / 12
    total = principal_interest + monthly_tax + monthly_insurance

    if not _finite(down_payment, principal_interest, monthly_tax, monthly_insurance, total):
        return degenerate_breakdown(params.insurance_yearly)

    return DerivedBreakdown(
        down_payment_amount=down_payment,
        yearly_property_tax=yearly_tax,
        monthly_principal_interest=principal_interest,
        monthly_tax=monthly_tax,
        monthly_insurance=monthly_insurance,
        monthly_total=total,
        is_valid=True,
    )


def effective_tax_rate(
    unit: Unit | None, fallback_rate: float, *, override_rate: float | None = None
) -> float:
    """An explicit override, else the unit's own tax rate, else the fallback."""
    if override_rate is not None:
        return override_rate
    if unit is not None and unit.tax_rate is not None:
        return unit.tax_rate
    return fallback_rate


def derive_property_tax(
    unit: Unit | None, fallback_rate: float, *, override_rate: float | None = None
) -> float:
    """Yearly property tax for a unit, rounded to whole currency units.

    Returns 0 when there is no usable unit. A non-finite rate yields a
    non-finite tax, which `compute` turns into the degenerate breakdown.
    """
    if unit is None or not math.isfinite(unit.price) or unit.price <= 0:
        return 0.0
    tax = unit.price * effective_tax_rate(unit, fallback_rate, override_rate=override_rate)
    if not math.isfinite(tax):
        return tax
    return round_half_up(tax)
