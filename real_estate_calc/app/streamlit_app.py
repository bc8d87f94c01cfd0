from __future__ import annotations

import logging
import os
import sys

import pandas as pd
import streamlit as st

# Ensure package import works on Streamlit Cloud when CWD != repo root
_THIS_DIR = os.path.dirname(__file__)
_REPO_ROOT = os.path.abspath(os.path.join(_THIS_DIR, "..", ".."))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

from real_estate_calc.core import plots
from real_estate_calc.core.affordability import affordability
from real_estate_calc.core.amortization import monthly_payment, summarize, schedule_preview
from real_estate_calc.core.exceptions import ExportError
from real_estate_calc.core.export import default_export_filename, schedule_to_csv, write_schedule_csv
from real_estate_calc.core.rental import PropertyInputs, compare_properties, compare_property
from real_estate_calc.core.report import schedule_report_pdf
from real_estate_calc.core.utils import currency, parse_number, percent, whole_currency
from config import (
    CLOSING_COST_PCT,
    MAX_DEBT_TO_INCOME_PCT,
    COMPARISON_TERM_YEARS,
    SCHEDULE_PREVIEW_ROWS,
    MORTGAGE_PRICE,
    MORTGAGE_DOWN_PAYMENT,
    MORTGAGE_RATE,
    MORTGAGE_YEARS,
    AFFORDABILITY_INCOME,
    AFFORDABILITY_DEBTS,
    AFFORDABILITY_DOWN_PCT,
    AFFORDABILITY_RATE,
    AFFORDABILITY_YEARS,
    RENTAL_PRICE,
    RENTAL_DOWN_PAYMENT,
    RENTAL_RATE,
    RENTAL_RENT,
    RENTAL_EXPENSES,
    PROPERTY_1,
    PROPERTY_2,
    SCHEDULE_LOAN,
    SCHEDULE_RATE,
    SCHEDULE_YEARS,
)


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Real Estate Finance Calculator", layout="centered")

VERSION = "1.0"


def _fmt(value: float) -> str:
    # Whole numbers without a trailing ".0" in the text fields
    return f"{value:g}"


def number_field(label: str, default: float, key: str) -> float:
    """Text input parsed into a float; unparseable text counts as 0."""
    text = st.text_input(label, value=_fmt(default), key=key)
    return parse_number(text)


def style_money(df: pd.DataFrame):
    num_cols = [c for c in df.select_dtypes(include=["number"]).columns if c not in ("month", "year")]
    if len(num_cols) == 0:
        return df
    return df.style.format({col: "{:,.2f}" for col in num_cols})


def render_mortgage():
    st.subheader("Mortgage Calculator")
    price = number_field("Home Price ($):", MORTGAGE_PRICE, "mortgage_price")
    down = number_field("Down Payment ($):", MORTGAGE_DOWN_PAYMENT, "mortgage_down")
    rate = number_field("Interest Rate (%):", MORTGAGE_RATE, "mortgage_rate")
    years = int(number_field("Loan Term (years):", MORTGAGE_YEARS, "mortgage_years"))

    if st.button("Calculate", key="mortgage_calculate"):
        payment = monthly_payment(price - down, rate, years)
        st.success(f"Monthly Payment: {currency(payment)}")


def render_affordability():
    st.subheader("Affordability Calculator")
    income = number_field("Annual Income ($):", AFFORDABILITY_INCOME, "afford_income")
    debts = number_field("Monthly Debts ($):", AFFORDABILITY_DEBTS, "afford_debts")
    down_pct = number_field("Down Payment (%):", AFFORDABILITY_DOWN_PCT, "afford_down_pct")
    rate = number_field("Interest Rate (%):", AFFORDABILITY_RATE, "afford_rate")
    years = int(number_field("Loan Term (years):", AFFORDABILITY_YEARS, "afford_years"))

    if st.button("Calculate", key="afford_calculate"):
        res = affordability(income, debts, down_pct, rate, years, max_dti_pct=MAX_DEBT_TO_INCOME_PCT)
        if not res.affordable:
            st.warning("Not affordable with current debts.")
            return
        st.code(
            "\n".join(
                [
                    f"Affordable Home Price: {whole_currency(res.price)}",
                    f"Down Payment: {whole_currency(res.down_payment)}",
                    f"Loan Amount: {whole_currency(res.loan)}",
                    f"Max Monthly Payment: {currency(res.max_payment)}",
                ]
            ),
            language=None,
        )


def render_rental():
    st.subheader("Rental ROI Calculator")
    price = number_field("Purchase Price ($):", RENTAL_PRICE, "rental_price")
    down = number_field("Down Payment ($):", RENTAL_DOWN_PAYMENT, "rental_down")
    rate = number_field("Interest Rate (%):", RENTAL_RATE, "rental_rate")
    rent = number_field("Monthly Rent ($):", RENTAL_RENT, "rental_rent")
    expenses = number_field("Monthly Expenses ($):", RENTAL_EXPENSES, "rental_expenses")

    if st.button("Calculate", key="rental_calculate"):
        m = compare_property(
            price, down, rate, rent, expenses, COMPARISON_TERM_YEARS, closing_cost_pct=CLOSING_COST_PCT
        )
        c1, c2 = st.columns(2)
        with c1:
            st.metric("Monthly Cash Flow", currency(m.monthly_cash_flow))
            st.metric("Cash-on-Cash Return", percent(m.coc))
        with c2:
            st.metric("Capitalization Rate", percent(m.cap_rate))
            st.metric("Total Investment", currency(m.investment))


def property_inputs(title: str, defaults: dict, key: str) -> PropertyInputs:
    st.markdown(f"**{title}**")
    return PropertyInputs(
        price=number_field("Price:", defaults["price"], f"{key}_price"),
        down_payment=number_field("Down:", defaults["down_payment"], f"{key}_down"),
        rate=number_field("Rate %:", defaults["rate"], f"{key}_rate"),
        rent=number_field("Rent:", defaults["rent"], f"{key}_rent"),
        expenses=number_field("Expenses:", defaults["expenses"], f"{key}_expenses"),
    )


def render_compare():
    st.subheader("Property Comparison")
    c1, c2 = st.columns(2)
    with c1:
        first = property_inputs("Property 1", PROPERTY_1, "p1")
    with c2:
        second = property_inputs("Property 2", PROPERTY_2, "p2")

    if st.button("Compare Properties"):
        outcome = compare_properties(
            first, second, years=COMPARISON_TERM_YEARS, closing_cost_pct=CLOSING_COST_PCT
        )
        st.markdown(f"Property 1 CoC: {percent(outcome.first.coc)}")
        st.markdown(f"Property 2 CoC: {percent(outcome.second.coc)}")
        st.info(f"Winner: {outcome.winner}")
        st.plotly_chart(plots.comparison_bars(outcome), use_container_width=True)


def render_schedule():
    st.subheader("Amortization Schedule")
    loan = number_field("Loan Amount ($):", SCHEDULE_LOAN, "schedule_loan")
    rate = number_field("Interest Rate (%):", SCHEDULE_RATE, "schedule_rate")
    years = int(number_field("Loan Term (years):", SCHEDULE_YEARS, "schedule_years"))

    if st.button("Generate Schedule"):
        st.session_state["schedule"] = {
            "summary": summarize(loan, rate, years),
            "loan": loan,
            "rate": rate,
            "years": years,
        }

    last = st.session_state.get("schedule")
    if last is None:
        st.caption("Generate a schedule to see the payments.")
        return

    summary = last["summary"]
    schedule = summary.schedule_monthly
    if schedule.empty:
        st.warning("No schedule for these inputs: loan, rate and term must all be positive.")
        return

    st.markdown(f"Amortization Schedule (First {SCHEDULE_PREVIEW_ROWS} payments)")
    st.dataframe(style_money(schedule_preview(schedule, SCHEDULE_PREVIEW_ROWS)), use_container_width=True)

    c1, c2 = st.columns(2)
    with c1:
        st.plotly_chart(plots.balance_curve(schedule), use_container_width=True)
    with c2:
        st.plotly_chart(plots.yearly_breakdown_bars(summary.schedule_yearly), use_container_width=True)

    st.download_button(
        "Export to CSV",
        data=schedule_to_csv(schedule).encode("utf-8"),
        file_name=default_export_filename(),
        mime="text/csv",
    )

    path = st.text_input("Save to file", value=default_export_filename(), key="schedule_path")
    if st.button("Save"):
        try:
            write_schedule_csv(schedule, path)
        except ExportError as exc:
            st.error(exc.message)
        else:
            st.success("Schedule exported successfully!")

    st.download_button(
        "Download PDF",
        data=schedule_report_pdf(summary, last["loan"], last["rate"], last["years"]),
        file_name="amortization.pdf",
        mime="application/pdf",
    )


def render_about():
    st.subheader("About")
    st.markdown(
        f"""
        **Real Estate Finance Calculator**

        Version {VERSION}

        Provides mortgage, affordability, ROI, property comparison, and amortization tools.

        - Closing costs are estimated at {CLOSING_COST_PCT:g}% of the purchase price.
        - Affordability allows {MAX_DEBT_TO_INCOME_PCT:g}% of gross monthly income for debt payments.
        - ROI and comparison figures assume a {COMPARISON_TERM_YEARS}-year loan.
        """
    )


def main():
    st.title("Real Estate Finance Calculator")
    tabs = st.tabs(["Mortgage", "Affordability", "ROI", "Compare", "Schedule", "About"])
    with tabs[0]:
        render_mortgage()
    with tabs[1]:
        render_affordability()
    with tabs[2]:
        render_rental()
    with tabs[3]:
        render_compare()
    with tabs[4]:
        render_schedule()
    with tabs[5]:
        render_about()


if __name__ == "__main__":
    main()
