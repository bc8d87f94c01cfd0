import math

from real_estate_calc.core.rental import (
    PropertyInputs,
    compare_properties,
    compare_property,
)


def test_rental_scenario():
    m = compare_property(300_000, 75_000, 5.0, 2_000, 400, 30)
    assert math.isclose(m.monthly_payment, 1207.85, abs_tol=5e-3)
    assert math.isclose(m.monthly_cash_flow, 2_000 - 400 - m.monthly_payment)
    assert math.isclose(m.monthly_cash_flow, 392.15, abs_tol=5e-3)
    assert math.isclose(m.investment, 84_000.0)
    assert math.isclose(m.coc, m.annual_cash_flow / 84_000 * 100)
    assert math.isclose(m.cap_rate, 6.4)


def test_zero_price_gives_zero_cap_rate():
    m = compare_property(0, 0, 5.0, 2_000, 400, 30)
    assert m.cap_rate == 0.0
    assert m.coc == 0.0
    assert m.investment == 0.0
    assert math.isfinite(m.monthly_cash_flow)


def test_zero_investment_gives_zero_coc():
    # Negative down payment cancels the closing costs exactly
    m = compare_property(100_000, -3_000, 5.0, 1_000, 100, 30)
    assert m.investment == 0.0
    assert m.coc == 0.0


def test_closing_cost_policy_is_a_parameter():
    m = compare_property(200_000, 40_000, 4.0, 1_500, 300, 30, closing_cost_pct=5.0)
    assert math.isclose(m.investment, 50_000.0)


def test_fully_paid_property_has_no_payment():
    m = compare_property(200_000, 200_000, 4.0, 1_500, 300, 30)
    assert m.monthly_payment == 0.0
    assert math.isclose(m.monthly_cash_flow, 1_200.0)


def test_compare_properties_picks_higher_coc():
    first = PropertyInputs(price=300_000, down_payment=60_000, rate=4.5, rent=2_000, expenses=500)
    second = PropertyInputs(price=250_000, down_payment=50_000, rate=4.5, rent=1_800, expenses=450)
    outcome = compare_properties(first, second)
    expected = "Property 1" if outcome.first.coc > outcome.second.coc else "Property 2"
    assert outcome.winner == expected
    assert outcome.second.coc > outcome.first.coc
    assert outcome.winner == "Property 2"


def test_compare_properties_tie_goes_to_second():
    same = PropertyInputs()
    outcome = compare_properties(same, same)
    assert outcome.first == outcome.second
    assert outcome.winner == "Property 2"


def test_compare_properties_first_wins():
    strong = PropertyInputs(rent=3_000)
    weak = PropertyInputs(rent=1_500)
    assert compare_properties(strong, weak).winner == "Property 1"


def test_metrics_at_tiny_rate():
    m = compare_property(300_000, 75_000, 1e-15, 2_000, 400, 30)
    assert math.isclose(m.monthly_payment, 225_000 / 360)
    outcome = compare_properties(PropertyInputs(rate=1e-15), PropertyInputs(rate=10_000))
    assert outcome.winner == "Property 1"
