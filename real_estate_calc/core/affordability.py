from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from .amortization import MONTHS_IN_YEAR, annuity_discount, monthly_rate


logger = logging.getLogger(__name__)

MAX_DEBT_TO_INCOME_PCT: Final[float] = 36.0


@dataclass(frozen=True)
class AffordabilityResult:
    affordable: bool
    max_payment: float
    loan: float = 0.0
    price: float = 0.0
    down_payment: float = 0.0


def max_monthly_payment(
    annual_income: float,
    monthly_debts: float,
    max_dti_pct: float = MAX_DEBT_TO_INCOME_PCT,
) -> float:
    """Housing payment left once existing debts take their share of income."""
    return annual_income / MONTHS_IN_YEAR * max_dti_pct / 100.0 - monthly_debts


def loan_from_payment(payment: float, annual_rate_pct: float, years: int) -> float:
    """Loan amount a fixed monthly payment can carry (inverse annuity)."""
    n_months = years * MONTHS_IN_YEAR
    if payment <= 0 or n_months <= 0:
        return 0.0
    rate = monthly_rate(annual_rate_pct)
    discount = annuity_discount(rate, n_months)
    if discount == 0:
        return payment * n_months
    return payment * discount / rate


def affordability(
    annual_income: float,
    monthly_debts: float,
    down_pct: float,
    annual_rate_pct: float,
    years: int,
    max_dti_pct: float = MAX_DEBT_TO_INCOME_PCT,
) -> AffordabilityResult:
    """Estimate the most expensive home the income can support.

    The price is the affordable loan grossed up by the down payment share.
    Negative headroom, a non-positive term or a down payment of 100% or more
    give a result with ``affordable=False``.
    """
    max_payment = max_monthly_payment(annual_income, monthly_debts, max_dti_pct)
    if max_payment <= 0 or years <= 0 or down_pct >= 100:
        logger.debug(
            "Not affordable: max_payment=%.2f years=%s down_pct=%s",
            max_payment,
            years,
            down_pct,
        )
        return AffordabilityResult(affordable=False, max_payment=max_payment)

    down_share = down_pct / 100.0
    loan = loan_from_payment(max_payment, annual_rate_pct, years)
    price = loan / (1 - down_share)
    return AffordabilityResult(
        affordable=True,
        max_payment=max_payment,
        loan=loan,
        price=price,
        down_payment=price * down_share,
    )
