import io
from datetime import date

import pandas as pd
import pytest

from core.calculators import calculate_entitlement, calculate_investment, cash_flow_schedule
from core.models import EntitlementInput, InvestmentInput
from core.rules import score_investment
from export.csv_export import cash_flow_csv
from export.pdf_export import build_analysis_pdf
from export.text_export import TITLE, build_analysis_report, report_payload


@pytest.fixture
def analysis():
    ent_in = EntitlementInput(county_limit="806500", existing_loan_amount="")
    inv_in = InvestmentInput(
        purchase_price="500000",
        down_payment_percent="20",
        interest_rate="7.5",
        loan_term_years="30",
        annual_rental_income="48000",
        monthly_taxes="400",
        monthly_insurance="100",
        monthly_maintenance="200",
        holding_period_years="10",
        appreciation_rate="3",
        discount_rate="8",
    )
    inv_res = calculate_investment(inv_in)
    return dict(
        ent_in=ent_in,
        ent_res=calculate_entitlement(ent_in),
        inv_in=inv_in,
        inv_res=inv_res,
        rec=score_investment(inv_res),
    )


def test_text_report_layout(analysis):
    text = build_analysis_report(**analysis, generated_on=date(2024, 3, 5)).decode("utf-8")
    lines = text.splitlines()
    assert lines[0] == TITLE
    assert "Generated on: 03/05/2024" in lines
    for heading in (
        "VA Loan Entitlement Results:",
        "Investment Analysis Inputs:",
        "Investment Analysis Results:",
        "Investment Recommendation:",
        "Warnings:",
    ):
        assert heading in lines
    assert "• Max Loan Amount (Zero Down): $806,500" in lines
    assert "• Purchase Price: $500,000" in lines
    assert "• Monthly Payment: $2,797" in lines
    assert f"• Recommendation: {analysis['rec'].band}" in lines
    assert lines[-1].startswith("Disclaimer: This tool is for educational")


def test_text_report_lists_warnings(analysis):
    rec = analysis["rec"]
    text = build_analysis_report(**analysis).decode("utf-8")
    if rec.warnings:
        for w in rec.warnings:
            assert f"⚠ {w.message}" in text
    else:
        assert "None. All metrics meet the minimum thresholds." in text


def test_pdf_report_to_buffer(analysis):
    buf = io.BytesIO()
    build_analysis_pdf(buf, report_payload(**analysis))
    assert buf.getvalue().startswith(b"%PDF")


def test_pdf_report_to_file(tmp_path, analysis):
    out = tmp_path / "report.pdf"
    assert build_analysis_pdf(str(out), report_payload(**analysis)) == str(out)
    assert out.read_bytes().startswith(b"%PDF")


def test_cash_flow_csv(analysis):
    data = cash_flow_csv(cash_flow_schedule(analysis["inv_in"]))
    df = pd.read_csv(io.BytesIO(data))
    assert list(df.columns) == ["Year", "CashFlow", "DiscountFactor", "PresentValue"]
    assert len(df) == 10
    assert df["Year"].tolist() == list(range(1, 11))
