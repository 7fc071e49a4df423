"""Plain-text analysis report."""
from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from core.models import EntitlementInput, EntitlementResult, InvestmentInput, InvestmentResult
from core.presets import DISCLAIMER
from core.rules import Recommendation
from core.utils import format_currency, format_percentage

TITLE = "Invest iSense - Analysis Results"


def report_sections(
    ent_in: EntitlementInput,
    ent_res: EntitlementResult,
    inv_in: InvestmentInput,
    inv_res: InvestmentResult,
    rec: Recommendation,
) -> List[Tuple[str, List[Tuple[str, str]]]]:
    """Ordered ``(heading, [(label, value), ...])`` pairs shared by all exports."""

    return [
        (
            "VA Loan Entitlement Results",
            [
                ("County Loan Limit", format_currency(ent_in.county_limit)),
                ("Existing VA Loan", format_currency(ent_in.existing_loan_amount)),
                ("Maximum Entitlement", format_currency(ent_res.max_entitlement)),
                ("Entitlement Used", format_currency(ent_res.used_entitlement)),
                ("Remaining Entitlement", format_currency(ent_res.remaining_entitlement)),
                ("Max Loan Amount (Zero Down)", format_currency(ent_res.max_new_loan)),
            ],
        ),
        (
            "Investment Analysis Inputs",
            [
                ("Purchase Price", format_currency(inv_in.purchase_price)),
                ("Down Payment", format_percentage(inv_in.down_payment_percent)),
                ("Interest Rate", format_percentage(inv_in.interest_rate)),
                ("Loan Term", f"{inv_in.loan_term_years:g} years"),
                ("Annual Rental Income", format_currency(inv_in.annual_rental_income)),
                ("Monthly Property Taxes", format_currency(inv_in.monthly_taxes)),
                ("Monthly Insurance", format_currency(inv_in.monthly_insurance)),
                ("Monthly Maintenance", format_currency(inv_in.monthly_maintenance)),
                ("Holding Period", f"{inv_in.holding_period_years:g} years"),
                ("Expected Appreciation", format_percentage(inv_in.appreciation_rate)),
                ("Discount Rate", format_percentage(inv_in.discount_rate)),
            ],
        ),
        (
            "Investment Analysis Results",
            [
                ("Monthly Payment", format_currency(inv_res.monthly_payment)),
                ("Total Investment", format_currency(inv_res.total_investment)),
                ("Annual Cash Flow", format_currency(inv_res.annual_cash_flow)),
                ("Cash-on-Cash Return", format_percentage(inv_res.coc_return)),
                ("Internal Rate of Return", format_percentage(inv_res.irr)),
                ("Net Present Value", format_currency(inv_res.npv)),
            ],
        ),
        (
            "Investment Recommendation",
            [
                ("Score", f"{rec.score}/11"),
                ("Recommendation", rec.band),
                ("Summary", rec.summary),
            ],
        ),
    ]


def build_analysis_report(
    ent_in: EntitlementInput,
    ent_res: EntitlementResult,
    inv_in: InvestmentInput,
    inv_res: InvestmentResult,
    rec: Recommendation,
    generated_on: Optional[date] = None,
) -> bytes:
    """Build the downloadable text report from current inputs and results.

    Warnings from the recommendation are listed under the recommendation
    section; a clean analysis says so explicitly.
    """

    generated_on = generated_on or date.today()
    lines = [TITLE, "=" * 37, "", f"Generated on: {generated_on.strftime('%m/%d/%Y')}", ""]
    for heading, rows in report_sections(ent_in, ent_res, inv_in, inv_res, rec):
        lines.append(f"{heading}:")
        for label, value in rows:
            lines.append(f"• {label}: {value}")
        lines.append("")
    lines.append("Warnings:")
    if rec.warnings:
        for w in rec.warnings:
            lines.append(f"⚠ {w.message}")
    else:
        lines.append("None. All metrics meet the minimum thresholds.")
    lines.append("")
    lines.append(f"Disclaimer: {DISCLAIMER}")
    return "\n".join(lines).encode("utf-8")


def report_payload(
    ent_in: EntitlementInput,
    ent_res: EntitlementResult,
    inv_in: InvestmentInput,
    inv_res: InvestmentResult,
    rec: Recommendation,
) -> Dict[str, Any]:
    """Structured form of the report for the PDF renderer."""
    return {
        "title": TITLE,
        "sections": report_sections(ent_in, ent_res, inv_in, inv_res, rec),
        "warnings": [w.model_dump() for w in rec.warnings],
    }
