import streamlit as st

from core.config import config
from core.presets import VA_LOAN_INTRO
from core.version import __version__

HEROES = {
    "toolkit": (
        config.APP_TITLE,
        "Empowering Veteran Real Estate Investors",
        "Calculate your VA loan entitlement and analyze investment properties with precision. "
        "Built by veterans, for veterans who understand the power of strategic real estate investing.",
    ),
    "va_only": (
        "The VA Home Loan Demystified",
        "VA home loan entitlement made easy.",
        "Built by veterans, for veterans who understand the benefits of using the VA home loan. "
        "You earned it, so why not use it.",
    ),
}


def render_hero(page: str) -> None:
    """Render the page header for ``page`` (``toolkit`` or ``va_only``)."""
    title, tagline, blurb = HEROES[page]
    st.title(title)
    st.markdown(f"### {tagline}")
    st.caption(blurb)
    if page == "va_only":
        st.write(VA_LOAN_INTRO)
    st.sidebar.markdown(f"**{config.APP_TITLE.upper()} v{__version__}**")
