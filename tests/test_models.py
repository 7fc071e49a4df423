import pytest
from pydantic import ValidationError

from core.models import EntitlementInput, InvestmentInput, InvestmentResult
from core.utils import format_currency, format_percentage, nz, sanitize_numeric_input


@pytest.mark.parametrize("raw,expected", [("", 0.0), (None, 0.0), ("abc", 0.0), ("nan", 0.0), ("inf", 0.0), (" 12.5 ", 12.5), (7, 7.0)])
def test_nz(raw, expected):
    assert nz(raw) == expected


def test_inputs_coerce_strings():
    inp = InvestmentInput(purchase_price="500000", down_payment_percent="20", interest_rate="oops")
    assert inp.purchase_price == 500000.0
    assert inp.interest_rate == 0.0
    assert inp.down_payment == 100000.0
    assert inp.loan_amount == 400000.0


def test_entitlement_defaults():
    inp = EntitlementInput(county_limit="766550")
    assert inp.existing_loan_amount == 0.0


def test_results_are_frozen():
    res = InvestmentResult(npv=1.0)
    with pytest.raises(ValidationError):
        res.npv = 2.0


def test_sanitize_strips_and_clamps():
    assert sanitize_numeric_input("$500,000") == "500000"
    assert sanitize_numeric_input("1.2.3") == "1.23"
    assert sanitize_numeric_input("250000000") == "100000000"
    assert sanitize_numeric_input("-5000000") == "-1000000"
    assert sanitize_numeric_input("") == ""
    assert sanitize_numeric_input("-") == "-"


def test_formatting():
    assert format_currency(806500) == "$806,500"
    assert format_currency(-1249.6) == "-$1,250"
    assert format_currency("junk") == "$0"
    assert format_percentage(7.456) == "7.46%"
