# This project was developed with assistance from AI tools.
"""Derived state controller -- owns one session's calculator inputs.

The controller holds the selected unit, the loan parameters and optional
tax overrides, and keeps the payment breakdown consistent with them. Every
external call runs the whole derivation as one step:

    derive_property_tax(unit) -> yearly tax -> compute(price, tax, params)

so the breakdown never reads a yearly tax left over from the previous unit.

Setters never validate; the calculator degrades invalid values to a zero
breakdown. Only ``select_unit`` checks its input, and it ignores a unit
without a usable price rather than raising.
"""

import logging
import math
from collections.abc import Callable

from ..core.config import settings
from ..schemas.calculator import DerivedBreakdown, LoanParameters, Unit
from .calculator import compute, derive_property_tax, effective_tax_rate

logger = logging.getLogger(__name__)

BreakdownObserver = Callable[[DerivedBreakdown], None]


def default_parameters() -> LoanParameters:
    """Loan parameters a new session starts with."""
    return LoanParameters(
        down_payment_percent=settings.DEFAULT_DOWN_PAYMENT_PERCENT,
        interest_rate_percent=settings.DEFAULT_INTEREST_RATE,
        loan_term_years=settings.DEFAULT_LOAN_TERM_YEARS,
        insurance_yearly=settings.DEFAULT_INSURANCE_YEARLY,
    )


def is_usable_unit(unit: Unit | None) -> bool:
    """A unit is usable when its price is finite and positive."""
    return unit is not None and math.isfinite(unit.price) and unit.price > 0


class DerivedStateController:
    """Single source of truth for what one calculator session shows."""

    def __init__(
        self,
        *,
        unit: Unit | None = None,
        parameters: LoanParameters | None = None,
        fallback_tax_rate: float | None = None,
    ) -> None:
        self._defaults = parameters or default_parameters()
        self._params = self._defaults
        self._fallback_tax_rate = (
            settings.DEFAULT_TAX_RATE if fallback_tax_rate is None else fallback_tax_rate
        )
        self._unit: Unit | None = unit if is_usable_unit(unit) else None
        self._tax_rate_override: float | None = None
        self._tax_yearly_override: float | None = None
        self._observers: list[BreakdownObserver] = []
        self._yearly_tax = 0.0
        self._breakdown = DerivedBreakdown()
        self._recompute(rederive_tax=True)

    # -- read side --

    @property
    def unit(self) -> Unit | None:
        return self._unit

    @property
    def parameters(self) -> LoanParameters:
        return self._params

    @property
    def yearly_property_tax(self) -> float:
        """Yearly tax the current breakdown was computed from."""
        return self._yearly_tax

    @property
    def effective_tax_rate(self) -> float:
        return effective_tax_rate(
            self._unit, self._fallback_tax_rate, override_rate=self._tax_rate_override
        )

    def current_breakdown(self) -> DerivedBreakdown:
        """Return the latest computed breakdown."""
        return self._breakdown

    def subscribe(self, observer: BreakdownObserver) -> Callable[[], None]:
        """Register an observer called whenever the breakdown changes.

        Returns:
            A callable that removes the observer.
        """
        self._observers.append(observer)

        def _unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return _unsubscribe

    # -- unit port --

    def select_unit(self, unit: Unit | None) -> None:
        """Select a unit. Units without a finite positive price are ignored."""
        if not is_usable_unit(unit):
            logger.debug("Ignoring unit without a usable price: %r", unit)
            return
        if unit != self._unit:
            self._tax_yearly_override = None
        self._unit = unit
        self._recompute(rederive_tax=True)

    def clear_unit(self) -> None:
        self._unit = None
        self._tax_yearly_override = None
        self._recompute(rederive_tax=True)

    # -- loan parameter setters (no validation) --

    def set_down_payment_percent(self, value: float) -> None:
        self._update(down_payment_percent=value)

    def set_interest_rate(self, value: float) -> None:
        self._update(interest_rate_percent=value)

    def set_loan_term(self, value: float) -> None:
        self._update(loan_term_years=value)

    def set_insurance_yearly(self, value: float) -> None:
        self._update(insurance_yearly=value)

    # -- tax overrides --

    def set_tax_rate(self, rate: float | None) -> None:
        """Override the tax rate for this session. None restores the unit/fallback rate."""
        self._tax_rate_override = rate
        self._recompute(rederive_tax=True)

    def set_property_tax_yearly(self, amount: float | None) -> None:
        """Pin the yearly tax to an explicit amount. None re-derives it from the rate."""
        self._tax_yearly_override = amount
        self._recompute(rederive_tax=True)

    def reset(self) -> None:
        """Restore default loan parameters and drop tax overrides. The unit is kept."""
        self._params = self._defaults
        self._tax_rate_override = None
        self._tax_yearly_override = None
        self._recompute(rederive_tax=True)

    # -- derivation --

    def _update(self, **fields: float) -> None:
        self._params = self._params.model_copy(update=fields)
        self._recompute(rederive_tax=False)

    def _derive_tax(self) -> float:
        if self._tax_yearly_override is not None:
            return self._tax_yearly_override
        return derive_property_tax(
            self._unit, self._fallback_tax_rate, override_rate=self._tax_rate_override
        )

    def _recompute(self, *, rederive_tax: bool) -> None:
        if rederive_tax:
            self._yearly_tax = self._derive_tax()
        price = self._unit.price if self._unit is not None else 0.0
        breakdown = compute(price, self._yearly_tax, self._params)

        if breakdown == self._breakdown:
            return
        self._breakdown = breakdown
        for observer in list(self._observers):
            observer(breakdown)
