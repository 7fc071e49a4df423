from streamlit.testing.v1 import AppTest

from core.config import config
from core.state import INPUT_KEYS
from ui.actions import build_share_script


def full_app():
    import app

    app.main()


def _filled_app():
    at = AppTest.from_function(full_app, default_timeout=30)
    at.session_state["county_limit"] = "806500"
    at.session_state["purchase_price"] = "500000"
    at.session_state["annual_rental_income"] = "48000"
    at.run()
    return at


def test_reset_clears_every_input():
    at = _filled_app()
    assert at.session_state["entitlement_result"].max_new_loan == 806500.0
    at.button(key="reset_calculator").click().run()
    assert not at.exception
    for key in INPUT_KEYS:
        assert at.session_state[key] == ""
    assert at.session_state["entitlement_result"].max_new_loan == 0.0
    assert at.session_state["investment_result"].npv == 0.0


def test_share_and_pdf_buttons_run_cleanly():
    at = _filled_app()
    at.button(key="share_results").click().run()
    assert not at.exception
    at.button(key="prepare_pdf").click().run()
    assert not at.exception


def test_va_only_page_has_no_investment_section():
    at = _filled_app()
    at.radio(key="page").set_value("VA Loan Demystified").run()
    assert at.title[0].value == "The VA Home Loan Demystified"
    assert not [b for b in at.button if b.key == "reset_calculator"]


def test_share_script_embeds_link_and_fallback():
    script = build_share_script("https://example.org/app", config.SHARE_TITLE, "it's great")
    assert '"url": "https://example.org/app"' in script
    assert "navigator.share" in script
    assert "navigator.clipboard.writeText" in script
    assert "Share failed. Please copy the URL manually" in script
