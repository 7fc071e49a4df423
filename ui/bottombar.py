import streamlit as st

from core.presets import DISCLAIMER


def render_footer():
    st.divider()
    st.caption(f"**Disclaimer:** {DISCLAIMER}")
    st.caption("🇺🇸 Built with pride for our veterans • No data stored or tracked • 100% in-session calculations")
