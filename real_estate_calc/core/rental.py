from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .amortization import MONTHS_IN_YEAR, monthly_payment


CLOSING_COST_PCT: Final[float] = 3.0
COMPARISON_TERM_YEARS: Final[int] = 30


@dataclass(frozen=True)
class PropertyInputs:
    price: float = 300_000.0
    down_payment: float = 75_000.0
    rate: float = 5.0  # annual, percent
    rent: float = 2_000.0  # monthly
    expenses: float = 400.0  # monthly


@dataclass(frozen=True)
class PropertyMetrics:
    monthly_payment: float
    monthly_cash_flow: float
    coc: float  # cash-on-cash return, percent
    cap_rate: float  # percent
    investment: float

    @property
    def annual_cash_flow(self) -> float:
        return self.monthly_cash_flow * MONTHS_IN_YEAR


def compare_property(
    price: float,
    down: float,
    annual_rate_pct: float,
    rent: float,
    expenses: float,
    years: int,
    closing_cost_pct: float = CLOSING_COST_PCT,
) -> PropertyMetrics:
    """Rental metrics for a financed property.

    The loan is ``price - down``. Total cash invested is the down payment
    plus the closing-cost estimate. Returns and cap rate are percentages and
    fall back to 0 when their denominator is not positive.
    """
    loan = price - down
    payment = monthly_payment(loan, annual_rate_pct, years)
    monthly_cash_flow = rent - expenses - payment
    annual_cash_flow = monthly_cash_flow * MONTHS_IN_YEAR
    investment = down + price * closing_cost_pct / 100.0

    coc = annual_cash_flow / investment * 100.0 if investment > 0 else 0.0
    noi = rent * MONTHS_IN_YEAR - expenses * MONTHS_IN_YEAR
    cap_rate = noi / price * 100.0 if price > 0 else 0.0

    return PropertyMetrics(
        monthly_payment=payment,
        monthly_cash_flow=monthly_cash_flow,
        coc=coc,
        cap_rate=cap_rate,
        investment=investment,
    )


def property_metrics(
    inputs: PropertyInputs,
    years: int = COMPARISON_TERM_YEARS,
    closing_cost_pct: float = CLOSING_COST_PCT,
) -> PropertyMetrics:
    return compare_property(
        inputs.price,
        inputs.down_payment,
        inputs.rate,
        inputs.rent,
        inputs.expenses,
        years,
        closing_cost_pct=closing_cost_pct,
    )


@dataclass(frozen=True)
class ComparisonOutcome:
    first: PropertyMetrics
    second: PropertyMetrics
    winner: str


def compare_properties(
    first: PropertyInputs,
    second: PropertyInputs,
    years: int = COMPARISON_TERM_YEARS,
    closing_cost_pct: float = CLOSING_COST_PCT,
) -> ComparisonOutcome:
    """Compare two properties on cash-on-cash return.

    Property 1 wins only with a strictly higher return; ties go to Property 2.
    """
    m1 = property_metrics(first, years, closing_cost_pct)
    m2 = property_metrics(second, years, closing_cost_pct)
    winner = "Property 1" if m1.coc > m2.coc else "Property 2"
    return ComparisonOutcome(first=m1, second=m2, winner=winner)
