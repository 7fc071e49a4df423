"""Share, export and reset actions."""
from __future__ import annotations

import io
import json

import streamlit as st
from streamlit.components.v1 import html

from core.config import config
from core.logging_utils import get_logger
from core.state import reset_inputs
from export.pdf_export import build_analysis_pdf
from export.text_export import build_analysis_report, report_payload

logger = get_logger(__name__)

NOTICE_KEY = "action_notice"


def build_share_script(url: str, title: str, text: str) -> str:
    """Browser script: share sheet when available, clipboard copy otherwise.

    The outcome is written into the component frame since the browser is the
    only place it is known.
    """

    data = json.dumps({"title": title, "text": text, "url": url})
    return f"""
        <div id="share-status" style="font-family:sans-serif;font-size:14px;"></div>
        <script>
        const data = {data};
        const status = document.getElementById('share-status');
        (async () => {{
            try {{
                if (navigator.share && navigator.canShare && navigator.canShare(data)) {{
                    await navigator.share(data);
                    status.innerText = 'Shared successfully! Thanks for spreading the word to fellow veterans.';
                }} else {{
                    await navigator.clipboard.writeText(data.url);
                    status.innerText = 'Link copied! Share this link with your fellow veteran investors.';
                }}
            }} catch (err) {{
                status.innerText = 'Share failed. Please copy the URL manually: ' + data.url;
            }}
        }})();
        </script>
        """


def _current_report() -> dict:
    ss = st.session_state
    return dict(
        ent_in=ss["entitlement_input"],
        ent_res=ss["entitlement_result"],
        inv_in=ss["investment_input"],
        inv_res=ss["investment_result"],
        rec=ss["recommendation"],
    )


def _on_reset() -> None:
    reset_inputs()
    st.session_state[NOTICE_KEY] = ("Calculator reset", "All fields have been cleared. Start fresh!")


def _on_export() -> None:
    logger.info("text report exported", extra={"context": {"file": config.EXPORT_FILENAME}})
    st.session_state[NOTICE_KEY] = ("Results exported!", "Your analysis has been saved to a text file.")


def _flash() -> None:
    notice = st.session_state.pop(NOTICE_KEY, None)
    if notice:
        title, body = notice
        st.toast(f"**{title}** {body}")


def render_action_buttons() -> None:
    """Action row; expects the calculators to have rendered earlier in the run."""
    share_col, export_col, pdf_col, reset_col = st.columns(4)

    if share_col.button("Share Results", key="share_results"):
        html(build_share_script(config.APP_URL, config.SHARE_TITLE, config.SHARE_TEXT), height=40)
        logger.info("share requested", extra={"context": {"url": config.APP_URL}})

    try:
        report = build_analysis_report(**_current_report())
    except Exception:
        logger.exception("text report failed")
        export_col.error("Export unavailable. Your calculations are unaffected.")
    else:
        export_col.download_button(
            "Export Analysis",
            data=report,
            file_name=config.EXPORT_FILENAME,
            mime="text/plain",
            on_click=_on_export,
            key="export_analysis",
        )

    if pdf_col.button("Prepare PDF", key="prepare_pdf"):
        buf = io.BytesIO()
        try:
            build_analysis_pdf(buf, report_payload(**_current_report()))
        except Exception:
            logger.exception("pdf report failed")
            st.toast("**Export failed** Could not build the PDF report.")
        else:
            pdf_col.download_button(
                "Download PDF",
                data=buf.getvalue(),
                file_name=config.EXPORT_FILENAME.rsplit(".", 1)[0] + ".pdf",
                mime="application/pdf",
                key="download_pdf",
            )

    reset_col.button("Reset Calculator", key="reset_calculator", on_click=_on_reset)
    _flash()
    st.caption("💡 **Pro Tip:** Bookmark this page for quick access to your calculations!")
