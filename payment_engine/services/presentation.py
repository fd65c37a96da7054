# This project was developed with assistance from AI tools.
"""Read-only display payload for the results panel.

Amounts are shown as whole dollars with thousands separators; halves round
away from zero, as the browser's ``toLocaleString`` does.
"""

from decimal import ROUND_HALF_UP, Decimal

from ..schemas.calculator import (
    ChartData,
    ChartDataset,
    DerivedBreakdown,
    LineItem,
    PaymentDisplay,
    Unit,
)

# (label, color) in display order
_COMPONENTS = [
    ("Principal & Interest", "#1f78b4"),
    ("Property Tax", "#ff7f00"),
    ("Home Insurance", "#33a02c"),
]


def format_currency(amount: float) -> str:
    """Whole-dollar display string, e.g. ``$3,636``."""
    whole = Decimal(amount).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return f"${whole:,}"


def format_rate(rate: float) -> str:
    """Tax rate fraction as a percentage with two decimals (0.0125 -> ``1.25%``)."""
    return f"{rate * 100:.2f}%"


def build_chart(breakdown: DerivedBreakdown) -> ChartData | None:
    """Doughnut chart data, or None when there is no payment to chart."""
    if breakdown.monthly_total <= 0:
        return None
    colors = [color for _, color in _COMPONENTS]
    return ChartData(
        labels=[label for label, _ in _COMPONENTS],
        datasets=[
            ChartDataset(
                label="Payment Components",
                data=[
                    breakdown.monthly_principal_interest,
                    breakdown.monthly_tax,
                    breakdown.monthly_insurance,
                ],
                background_color=colors,
                border_color=colors,
            )
        ],
    )


def build_display(
    breakdown: DerivedBreakdown,
    unit: Unit | None,
    tax_rate: float,
) -> PaymentDisplay:
    amounts = [
        breakdown.monthly_principal_interest,
        breakdown.monthly_tax,
        breakdown.monthly_insurance,
    ]
    line_items = [
        LineItem(label=label, amount=amount, display=format_currency(amount), color=color)
        for (label, color), amount in zip(_COMPONENTS, amounts, strict=True)
    ]
    return PaymentDisplay(
        unit_label=unit.label if unit is not None else "",
        monthly_total_display=format_currency(breakdown.monthly_total),
        down_payment_display=format_currency(breakdown.down_payment_amount),
        tax_rate_display=format_rate(tax_rate),
        line_items=line_items,
        chart=build_chart(breakdown),
    )
