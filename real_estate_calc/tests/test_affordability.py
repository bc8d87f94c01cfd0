import math

from real_estate_calc.core.affordability import (
    affordability,
    loan_from_payment,
    max_monthly_payment,
)
from real_estate_calc.core.amortization import monthly_payment


def test_default_scenario():
    res = affordability(75_000, 500, 20, 4.5, 30)
    assert res.affordable
    assert math.isclose(res.max_payment, 1_750.0)
    # The affordable loan is exactly what the max payment amortizes
    assert math.isclose(monthly_payment(res.loan, 4.5, 30), 1_750.0)
    assert math.isclose(res.price * 0.8, res.loan)
    assert math.isclose(res.down_payment, res.price * 0.2)


def test_debts_above_threshold_not_affordable():
    res = affordability(30_000, 1_000, 20, 4.5, 30)
    assert not res.affordable
    assert res.max_payment < 0
    assert res.price == 0.0
    assert res.loan == 0.0


def test_zero_rate_uses_straight_multiple():
    assert loan_from_payment(3_600, 0.0, 30) == 3_600 * 360
    res = affordability(120_000, 0, 0, 0.0, 30)
    assert math.isclose(res.loan, 1_296_000.0)
    assert math.isclose(res.price, res.loan)
    assert res.down_payment == 0.0


def test_degenerate_term_and_down_payment():
    assert not affordability(75_000, 500, 20, 4.5, 0).affordable
    assert not affordability(75_000, 500, 100, 4.5, 30).affordable


def test_threshold_is_a_parameter():
    assert math.isclose(max_monthly_payment(120_000, 0, max_dti_pct=28.0), 2_800.0)
    assert math.isclose(max_monthly_payment(120_000, 600), 3_000.0)


def test_tiny_rate_matches_zero_rate():
    res = affordability(75_000, 500, 20, 1e-15, 30)
    assert res.affordable
    assert math.isclose(res.loan, 1_750.0 * 360)


def test_extreme_rate_does_not_overflow():
    assert math.isclose(loan_from_payment(1_750, 10_000, 30), 1_750 * 1_200 / 10_000)
    assert math.isclose(loan_from_payment(1_750, 100, 1_000), 1_750 * 12)
    res = affordability(75_000, 500, 20, 10_000, 30)
    assert res.affordable
    assert math.isclose(res.price * 0.8, res.loan)
