import streamlit as st

from core.calculators import calculate_investment
from core.state import investment_input
from core.utils import format_currency
from ui.components import numeric_field


def render_investment_analyzer():
    """Three input columns plus a quick payment / investment preview.

    Returns the parsed input and its result; both are also kept in session
    state for the exports.
    """

    st.subheader("Real Estate Investment Analyzer")
    st.caption(
        "Analyze cash-on-cash return (CoC), internal rate of return (IRR), and net present value (NPV)"
    )
    prop, income, params = st.columns(3)
    with prop:
        st.markdown("#### Property Details")
        numeric_field("Purchase Price", "purchase_price")
        numeric_field("Down Payment (%)", "down_payment_percent")
        numeric_field("Interest Rate (%)", "interest_rate")
        numeric_field("Loan Term (Years)", "loan_term_years")
    with income:
        st.markdown("#### Income & Expenses")
        numeric_field("Annual Rental Income", "annual_rental_income")
        numeric_field("Monthly Property Taxes", "monthly_taxes")
        numeric_field("Monthly Insurance", "monthly_insurance")
        numeric_field("Monthly Maintenance", "monthly_maintenance")

    inp = investment_input()
    res = calculate_investment(inp)
    with params:
        st.markdown("#### Analysis Parameters")
        numeric_field("Holding Period (Years)", "holding_period_years")
        numeric_field("Expected Appreciation (%)", "appreciation_rate")
        numeric_field("Discount Rate (%)", "discount_rate")
        st.caption(f"Monthly Payment: {format_currency(res.monthly_payment)}")
        st.caption(f"Total Investment: {format_currency(res.total_investment)}")

    st.session_state["investment_input"] = inp
    st.session_state["investment_result"] = res
    return inp, res
