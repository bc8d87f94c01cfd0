from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Final

import pandas as pd


logger = logging.getLogger(__name__)

MONTHS_IN_YEAR: Final[int] = 12
SCHEDULE_COLUMNS: Final[list] = ["month", "payment", "principal", "interest", "balance"]
YEARLY_COLUMNS: Final[list] = ["year", "payment", "principal", "interest", "end_balance"]


def monthly_rate(annual_rate_pct: float) -> float:
    """Nominal annual percentage (e.g. 4.5) to a monthly decimal rate."""
    return annual_rate_pct / 100.0 / MONTHS_IN_YEAR


def annuity_discount(rate: float, n_months: int) -> float:
    """Annuity denominator ``1 - (1 + rate) ** -n_months``.

    Evaluated with log1p/expm1: rates too small to change ``1 + rate`` keep
    their precision and long or expensive loans saturate at 1. Zero when the
    rate is zero or at or below -100%.
    """
    if rate == 0 or rate <= -1:
        return 0.0
    return -math.expm1(-n_months * math.log1p(rate))


def monthly_payment(principal: float, annual_rate_pct: float, years: int) -> float:
    """Compute the fixed monthly payment for a fully amortizing loan.

    Parameters
    ----------
    principal : float
        Initial loan amount.
    annual_rate_pct : float
        Nominal annual interest rate in percent (e.g., 4.5 for 4.5%).
    years : int
        Loan term in years.

    Returns
    -------
    float
        The constant monthly payment. Zero when the principal or the term
        is not positive.
    """
    if principal <= 0 or years <= 0:
        return 0.0
    n_months = years * MONTHS_IN_YEAR
    rate = monthly_rate(annual_rate_pct)
    discount = annuity_discount(rate, n_months)
    if discount == 0:
        return principal / n_months
    return principal * rate / discount


def _empty(columns: list) -> pd.DataFrame:
    return pd.DataFrame(columns=columns, data=[])


def amort_schedule(loan: float, annual_rate_pct: float, years: int) -> pd.DataFrame:
    """Generate a monthly amortization schedule.

    Columns: month (1..N), payment, principal, interest, balance

    Notes
    -----
    - A non-positive loan, rate or term gives an empty schedule.
    - Balance is clamped at zero so the last row never overshoots below it.
    """
    if loan <= 0 or annual_rate_pct <= 0 or years <= 0:
        logger.debug(
            "Empty schedule for loan=%s rate=%s years=%s", loan, annual_rate_pct, years
        )
        return _empty(SCHEDULE_COLUMNS)

    n_months = years * MONTHS_IN_YEAR
    payment = monthly_payment(loan, annual_rate_pct, years)
    rate = monthly_rate(annual_rate_pct)

    rows = []
    balance = float(loan)
    for m in range(1, n_months + 1):
        interest = balance * rate
        principal_component = payment - interest
        balance = max(balance - principal_component, 0.0)
        rows.append(
            {
                "month": m,
                "payment": float(payment),
                "principal": float(principal_component),
                "interest": float(interest),
                "balance": float(balance),
            }
        )

    logger.debug("Generated %d-month schedule, payment %.2f", n_months, payment)
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def aggregate_yearly(schedule: pd.DataFrame) -> pd.DataFrame:
    """Aggregate a monthly amortization schedule by loan year.

    Returns a DataFrame with columns: year, payment, principal, interest, end_balance
    """
    if schedule.empty:
        return _empty(YEARLY_COLUMNS)

    schedule = schedule.copy()
    schedule["year"] = (schedule["month"] - 1) // MONTHS_IN_YEAR + 1
    agg = (
        schedule.groupby("year", as_index=False)[["payment", "principal", "interest"]]
        .sum()
        .sort_values("year")
    )
    # Capture ending balance per year
    end_balances = (
        schedule.groupby("year", as_index=False)["balance"].last().rename(columns={"balance": "end_balance"})
    )
    return agg.merge(end_balances, on="year", how="left")[YEARLY_COLUMNS]


@dataclass(frozen=True)
class AmortizationSummary:
    payment_monthly: float
    schedule_monthly: pd.DataFrame
    schedule_yearly: pd.DataFrame

    @property
    def total_paid(self) -> float:
        return float(self.schedule_monthly["payment"].sum()) if not self.schedule_monthly.empty else 0.0

    @property
    def total_interest(self) -> float:
        return float(self.schedule_monthly["interest"].sum()) if not self.schedule_monthly.empty else 0.0


def summarize(loan: float, annual_rate_pct: float, years: int) -> AmortizationSummary:
    """Convenience wrapper returning payment and schedules."""
    schedule = amort_schedule(loan, annual_rate_pct, years)
    yearly = aggregate_yearly(schedule)
    payment = monthly_payment(loan, annual_rate_pct, years)
    return AmortizationSummary(payment_monthly=payment, schedule_monthly=schedule, schedule_yearly=yearly)


def schedule_preview(schedule: pd.DataFrame, limit: int = 24) -> pd.DataFrame:
    """First ``limit`` payments of a schedule, for on-screen display."""
    return schedule.head(max(limit, 0)).reset_index(drop=True)
