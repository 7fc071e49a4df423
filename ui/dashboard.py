import streamlit as st

from core.calculators import cash_flow_schedule
from core.models import InvestmentInput, InvestmentResult
from core.presets import BENCHMARKS
from core.rules import metric_benchmark, score_investment
from core.utils import format_currency, format_percentage
from export.csv_export import cash_flow_csv

_BAND_STYLE = {
    "STRONG BUY": st.success,
    "CONSIDER": st.info,
    "MARGINAL": st.warning,
    "AVOID": st.error,
}


def render_results_dashboard(inp: InvestmentInput, res: InvestmentResult):
    """Render headline metrics, the recommendation and the yearly schedule."""
    st.markdown("### Investment Analysis Results")
    cols = st.columns(3)
    coc_tier = metric_benchmark("coc_return", res.coc_return)
    irr_tier = metric_benchmark("irr", res.irr)
    cols[0].metric("Cash-on-Cash Return", format_percentage(res.coc_return), help=BENCHMARKS["coc_return"])
    cols[0].caption("Annual Cash Flow / Total Investment" + (f" • {coc_tier}" if coc_tier else ""))
    cols[1].metric("Internal Rate of Return", format_percentage(res.irr), help=BENCHMARKS["irr"])
    # Simplified annualized return, not a solved IRR.
    cols[1].caption("Annualized total return" + (f" • {irr_tier}" if irr_tier else ""))
    cols[2].metric("Net Present Value", format_currency(res.npv), help=BENCHMARKS["npv"])
    cols[2].caption("Present value of future cash flows")
    st.metric("Annual Cash Flow", format_currency(res.annual_cash_flow))

    rec = score_investment(res)
    _BAND_STYLE.get(rec.band, st.info)(f"{rec.band} ({rec.score}/11): {rec.summary}")
    for r in rec.warnings:
        st.warning(f"[{r.code}] {r.message}")
    st.session_state["recommendation"] = rec

    schedule = cash_flow_schedule(inp)
    with st.expander("Year-by-Year Cash Flows"):
        if schedule.empty:
            st.caption("Enter a purchase price and holding period to see the schedule.")
        else:
            st.dataframe(schedule, hide_index=True)
            st.download_button(
                "Download Cash Flows (CSV)",
                data=cash_flow_csv(schedule),
                file_name="invest-isense-cash-flows.csv",
                mime="text/csv",
            )
    return rec
