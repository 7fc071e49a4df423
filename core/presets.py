DISCLAIMER = (
    "This tool is for educational and informational purposes only. "
    "Results are estimates and should not be considered financial advice. "
    "Always consult with qualified financial advisors, real estate professionals, "
    "and VA loan specialists before making investment decisions."
)

# The VA guarantees 25% of the applicable county loan limit; lenders will
# generally finance four times the remaining guaranty with no down payment.
VA_GUARANTY_PCT = 0.25
VA_LOAN_MULTIPLIER = 4

# Closing costs are estimated as a flat share of the purchase price.
CLOSING_COST_PCT = 0.02

FHFA_LOAN_LIMITS_URL = "https://www.fhfa.gov/DataTools/Downloads/Pages/Conforming-Loan-Limits.aspx"

ENTITLEMENT_DEFAULTS = {"county_limit": "", "existing_loan_amount": ""}

INVESTMENT_DEFAULTS = {
    "purchase_price": "",
    "down_payment_percent": "20",
    "interest_rate": "7.5",
    "loan_term_years": "30",
    "annual_rental_income": "",
    "monthly_taxes": "",
    "monthly_insurance": "",
    "monthly_maintenance": "",
    "holding_period_years": "10",
    "appreciation_rate": "3",
    "discount_rate": "8",
}

# Placeholder hints shown in empty inputs.
PLACEHOLDERS = {
    "county_limit": "766550",
    "existing_loan_amount": "0",
    "purchase_price": "500000",
    "annual_rental_income": "60000",
    "monthly_taxes": "800",
    "monthly_insurance": "200",
    "monthly_maintenance": "400",
}

FIELD_GUIDANCE = {
    "county_limit": "The maximum loan amount allowed in your county.",
    "existing_loan_amount": "Current outstanding balance of any existing VA loan.",
    "holding_period_years": "How long you plan to hold the property.",
    "discount_rate": "Required rate of return for NPV calculation.",
}

BENCHMARKS = {
    "coc_return": (
        "Cash-on-Cash Return Standards:\n"
        "- 6%-10%: average to decent return (stable, lower-risk markets)\n"
        "- 10%-15%: strong return (value-add or emerging markets)\n"
        "- 15%+: excellent return (higher risk, distressed properties, or creative financing)"
    ),
    "irr": (
        "What's a \"Good\" IRR?\n"
        "- Passive investors: 10%-15% (lower risk, stable markets)\n"
        "- Active investors (value-add): 15%-25% (requires hands-on effort)\n"
        "- Aggressive investors (development, short-term rentals): 20%-30%+ (high risk/reward)"
    ),
    "npv": (
        "NPV Guidelines:\n"
        "- Positive NPV = good (exceeds your required return)\n"
        "- Higher NPV = better (more profit in present-value terms)\n"
        "- Negative NPV = walk away (doesn't meet your return threshold)"
    ),
}

# (lower bound %, label) tiers, highest first.
COC_TIERS = [(15.0, "Excellent"), (10.0, "Strong"), (6.0, "Average")]
IRR_TIERS = [(20.0, "Aggressive"), (15.0, "Active"), (10.0, "Passive")]

VA_LOAN_INTRO = (
    "The VA home loan entitlement is one of the most underused VA benefits available to "
    "veterans, mainly because realtors and some lenders don't understand how they work and "
    "make it sound complicated, which deters buyers. The entitlement is the amount the "
    "Department of Veterans Affairs (VA) guarantees on a home loan, which helps determine how "
    "much a veteran can borrow without a down payment. Essentially, it's the maximum amount "
    "the VA will repay a lender if a veteran defaults on the loan. Use the fields below to "
    "determine what your total entitlement is. If you already have a VA backed home loan, "
    "this tool can show you how much entitlement you have left."
)
