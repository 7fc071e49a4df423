import streamlit as st

from core.calculators import calculate_entitlement
from core.models import EntitlementResult
from core.presets import FHFA_LOAN_LIMITS_URL
from core.state import entitlement_input
from core.utils import format_currency
from ui.components import numeric_field, result_line


def render_entitlement_calculator() -> EntitlementResult:
    """VA entitlement inputs on the left, benefits on the right."""
    st.subheader("🇺🇸 VA Loan Entitlement Calculator")
    st.caption("Calculate your remaining VA loan entitlement and maximum zero-down loan amount")
    left, right = st.columns(2)
    with left:
        numeric_field("County Conforming Loan Limit", "county_limit")
        st.link_button("Find Your County Limit", FHFA_LOAN_LIMITS_URL)
        numeric_field("Existing VA Loan Amount (Optional)", "existing_loan_amount")

    inp = entitlement_input()
    res = calculate_entitlement(inp)
    with right:
        st.markdown("#### Your VA Loan Benefits")
        result_line("Maximum Entitlement", format_currency(res.max_entitlement))
        result_line("Entitlement Used", format_currency(res.used_entitlement))
        result_line("Remaining Entitlement", format_currency(res.remaining_entitlement))
        st.metric("Max Loan (Zero Down)", format_currency(res.max_new_loan))

    st.session_state["entitlement_input"] = inp
    st.session_state["entitlement_result"] = res
    return res
