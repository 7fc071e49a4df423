from __future__ import annotations

import math
from typing import Iterator, Tuple

import pandas as pd

from core.logging_utils import get_logger
from core.models import EntitlementInput, EntitlementResult, InvestmentInput, InvestmentResult
from core.presets import CLOSING_COST_PCT, VA_GUARANTY_PCT, VA_LOAN_MULTIPLIER
from core.utils import nz

logger = get_logger(__name__)

SCHEDULE_COLUMNS = ["Year", "CashFlow", "DiscountFactor", "PresentValue"]
MAX_SCHEDULE_YEARS = 100


def _finite(x: float) -> float:
    return x if math.isfinite(x) else 0.0


def _compound(rate_pct: float, periods: float) -> float:
    """``(1 + rate_pct/100) ** periods`` or NaN where that is undefined."""
    try:
        return math.pow(1 + rate_pct / 100, periods)
    except (OverflowError, ValueError, ZeroDivisionError):
        return math.nan


def calculate_entitlement(inp: EntitlementInput) -> EntitlementResult:
    """Remaining VA entitlement and the zero-down loan it supports.

    The VA guarantees a quarter of the county loan limit.  Entitlement tied up
    in an existing VA loan is a quarter of that loan's balance; what remains
    (never below zero) backs a new loan of four times its value.
    """

    max_ent = inp.county_limit * VA_GUARANTY_PCT
    used = inp.existing_loan_amount * VA_GUARANTY_PCT
    remaining = max(0.0, max_ent - used)
    return EntitlementResult(
        max_entitlement=max_ent,
        used_entitlement=used,
        remaining_entitlement=remaining,
        max_new_loan=remaining * VA_LOAN_MULTIPLIER,
    )


def monthly_payment(principal, annual_rate_pct, term_years):
    """Calculate the fully amortizing monthly payment for a loan.

    ``principal`` is the starting loan amount, ``annual_rate_pct`` is the
    nominal yearly interest rate (e.g. ``7.5`` for 7.5%), and ``term_years`` is
    the amortization period in years.  A zero rate amortizes straight-line.
    """

    L = nz(principal)
    r = nz(annual_rate_pct) / 100 / 12
    n = nz(term_years) * 12
    if n <= 0:
        return 0.0
    if abs(r) < 1e-9:
        return L / n
    if 1 + r <= 0:
        return 0.0
    try:
        return _finite((r * L) / (1 - (1 + r) ** (-n)))
    except (OverflowError, ZeroDivisionError):
        return 0.0


def simplified_irr(purchase_price, future_value, annual_cash_flow, holding_years, total_investment):
    """Annualized total return, reported as "IRR".

    This is not a true internal rate of return (no root-finding over the cash
    flows).  It annualizes the holding-period gain, appreciation plus
    cumulative cash flow, relative to the cash invested:

        ((1 + gain / invested) ** (1 / years) - 1) * 100

    Returns 0 when the holding period or invested cash is not positive and
    -100 when the losses exceed the invested cash.
    """

    years = nz(holding_years)
    invested = nz(total_investment)
    if years <= 0 or invested <= 0:
        return 0.0
    total_return = (future_value - purchase_price + annual_cash_flow * years) / invested
    growth = total_return + 1
    if growth <= 0:
        return -100.0
    try:
        return _finite((math.pow(growth, 1 / years) - 1) * 100)
    except OverflowError:
        return 0.0


def _held_years(inp: InvestmentInput) -> int:
    return int(math.floor(inp.holding_period_years)) if inp.holding_period_years > 0 else 0


def net_present_value(total_investment, annual_cash_flow, gain, discount_rate_pct, years):
    """NPV of holding for ``years`` full years at ``discount_rate_pct``.

    Each year's cash flow is discounted back to today and the appreciation
    ``gain`` is realized in the final year, net of the cash invested up front.
    Uses the closed form of the yearly sum so long holding periods cost the
    same as short ones.
    """

    if years <= 0:
        return -total_investment
    v_n = _compound(discount_rate_pct, -years)
    d = discount_rate_pct / 100
    if abs(d) < 1e-12:
        flows = annual_cash_flow * years
    else:
        flows = annual_cash_flow * (1 - v_n) / d
    return -total_investment + flows + gain * v_n


def _yearly_cash_flows(
    inp: InvestmentInput, annual_cash_flow: float, future_value: float
) -> Iterator[Tuple[int, float, float, float]]:
    """Yield ``(year, cash_flow, discount_factor, present_value)`` per held year.

    Stops after ``MAX_SCHEDULE_YEARS`` rows.
    """

    last_year = _held_years(inp)
    gain = future_value - inp.purchase_price
    for year in range(1, min(last_year, MAX_SCHEDULE_YEARS) + 1):
        cf = annual_cash_flow + gain if year == last_year else annual_cash_flow
        growth = _compound(inp.discount_rate, year)
        factor = 1 / growth if growth else math.nan
        yield year, cf, factor, cf * factor


def _future_value(inp: InvestmentInput) -> float:
    return inp.purchase_price * _compound(inp.appreciation_rate, inp.holding_period_years)


def calculate_investment(inp: InvestmentInput) -> InvestmentResult:
    """Cash-on-cash return, simplified IRR and NPV for a rental purchase.

    Everything is zero when no purchase price is entered.  Closing costs are a
    flat 2% of price and count toward the cash invested.
    """

    if inp.purchase_price == 0:
        return InvestmentResult()

    payment = monthly_payment(inp.loan_amount, inp.interest_rate, inp.loan_term_years)
    monthly_costs = payment + inp.monthly_taxes + inp.monthly_insurance + inp.monthly_maintenance
    annual_cash_flow = inp.annual_rental_income - monthly_costs * 12

    closing_costs = inp.purchase_price * CLOSING_COST_PCT
    total_investment = inp.down_payment + closing_costs
    coc = annual_cash_flow / total_investment * 100 if total_investment > 0 else 0.0

    future_value = _future_value(inp)
    irr = simplified_irr(
        inp.purchase_price, future_value, annual_cash_flow, inp.holding_period_years, total_investment
    )
    npv = net_present_value(
        total_investment,
        annual_cash_flow,
        future_value - inp.purchase_price,
        inp.discount_rate,
        _held_years(inp),
    )

    res = InvestmentResult(
        monthly_payment=_finite(payment),
        total_investment=_finite(total_investment),
        annual_cash_flow=_finite(annual_cash_flow),
        coc_return=_finite(coc),
        irr=_finite(irr),
        npv=_finite(npv),
    )
    logger.debug(
        "investment computed",
        extra={"context": {"purchase_price": inp.purchase_price, **res.model_dump()}},
    )
    return res


def cash_flow_schedule(inp: InvestmentInput) -> pd.DataFrame:
    """Year-by-year discounted cash flows behind the NPV figure.

    Present values plus the negative initial investment sum to the NPV for
    holding periods up to ``MAX_SCHEDULE_YEARS``.
    """

    if inp.purchase_price == 0:
        return pd.DataFrame(columns=SCHEDULE_COLUMNS)
    res = calculate_investment(inp)
    rows = list(_yearly_cash_flows(inp, res.annual_cash_flow, _future_value(inp)))
    df = pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)
    for c in ["CashFlow", "DiscountFactor", "PresentValue"]:
        df[c] = pd.to_numeric(df[c], errors="coerce").fillna(0.0)
    return df
