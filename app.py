import streamlit as st

from core.config import config
from core.logging_utils import get_logger
from core.state import init_state
from ui.actions import render_action_buttons
from ui.bottombar import render_footer
from ui.dashboard import render_results_dashboard
from ui.entitlement import render_entitlement_calculator
from ui.investment import render_investment_analyzer
from ui.topbar import render_hero

logger = get_logger(__name__)

PAGES = {
    "Investor Toolkit": "toolkit",
    "VA Loan Demystified": "va_only",
}


def render_toolkit_page():
    render_hero("toolkit")
    render_entitlement_calculator()
    st.divider()
    inp, res = render_investment_analyzer()
    st.divider()
    render_results_dashboard(inp, res)
    st.divider()
    render_action_buttons()
    render_footer()


def render_va_only_page():
    render_hero("va_only")
    render_entitlement_calculator()
    render_footer()


def main():
    st.set_page_config(page_title=f"{config.APP_TITLE} - VA Loan & Investment Calculator", layout="wide")
    init_state()
    nav = st.sidebar.radio("Navigate", list(PAGES), key="page")
    logger.debug("rendering page", extra={"context": {"page": PAGES[nav]}})
    if PAGES[nav] == "va_only":
        render_va_only_page()
    else:
        render_toolkit_page()


if __name__ == "__main__":
    main()
