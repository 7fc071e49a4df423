from streamlit.testing.v1 import AppTest


def entitlement_app():
    from core.state import init_state
    from ui.entitlement import render_entitlement_calculator

    init_state()
    render_entitlement_calculator()


def test_county_limit_drives_results():
    at = AppTest.from_function(entitlement_app)
    at.run()
    at.text_input(key="county_limit").set_value("806500").run()
    res = at.session_state["entitlement_result"]
    assert res.max_entitlement == 201625.0
    assert res.max_new_loan == 806500.0
    assert at.metric[0].value == "$806,500"


def test_existing_loan_reduces_max_loan():
    at = AppTest.from_function(entitlement_app)
    at.session_state["county_limit"] = "806500"
    at.session_state["existing_loan_amount"] = "300000"
    at.run()
    res = at.session_state["entitlement_result"]
    assert res.used_entitlement == 75000.0
    assert res.remaining_entitlement == 126625.0
    assert res.max_new_loan == 506500.0


def test_input_is_sanitized_on_change():
    at = AppTest.from_function(entitlement_app)
    at.run()
    at.text_input(key="county_limit").set_value("$806,500").run()
    assert at.session_state["county_limit"] == "806500"
    assert at.session_state["entitlement_result"].max_new_loan == 806500.0


def test_blank_form_shows_zero():
    at = AppTest.from_function(entitlement_app)
    at.run()
    assert not at.exception
    assert at.metric[0].value == "$0"
