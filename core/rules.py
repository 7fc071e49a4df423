from __future__ import annotations
from typing import Literal, List, Dict, Any, Optional
from pydantic import BaseModel, Field

from core.models import InvestmentResult
from core.presets import COC_TIERS, IRR_TIERS

MAX_SCORE = 11

# (minimum score, band, summary), highest first.
BANDS = [
    (9, "STRONG BUY", "Excellent investment opportunity with strong returns across all metrics."),
    (6, "CONSIDER", "Good investment potential. Review the weaker metrics before committing."),
    (3, "MARGINAL", "Below-average returns. Negotiate price or terms before proceeding."),
    (0, "AVOID", "Returns do not justify the investment at current terms."),
]

# (threshold, points), highest first; a metric earns the points of the first
# threshold it meets.
COC_POINTS = [(15.0, 3), (10.0, 2), (8.0, 1)]
IRR_POINTS = [(20.0, 3), (15.0, 2), (12.0, 1)]
NPV_POINTS = [(50000.0, 3), (10000.0, 2), (0.0, 1)]
CASH_FLOW_POINTS = [(3600.0, 2)]


class RuleResult(BaseModel):
    code: str
    severity: Literal["info", "warn", "critical"]
    message: str
    context: Dict[str, Any] = Field(default_factory=dict)


class Recommendation(BaseModel):
    score: int
    band: str
    summary: str
    warnings: List[RuleResult] = Field(default_factory=list)


def _points(value: float, table) -> int:
    for threshold, pts in table:
        if value >= threshold:
            return pts
    return 0


def score_metrics(res: InvestmentResult) -> int:
    """Integer score 0-11 over CoC, IRR, NPV and annual cash flow."""
    score = _points(res.coc_return, COC_POINTS)
    score += _points(res.irr, IRR_POINTS)
    score += _points(res.npv, NPV_POINTS)
    cf_pts = _points(res.annual_cash_flow, CASH_FLOW_POINTS)
    if cf_pts == 0 and res.annual_cash_flow > 0:
        cf_pts = 1
    return score + cf_pts


def band_for_score(score: int):
    for minimum, band, summary in BANDS:
        if score >= minimum:
            return band, summary
    return BANDS[-1][1], BANDS[-1][2]


def evaluate_rules(res: InvestmentResult) -> List[RuleResult]:
    out: List[RuleResult] = []

    if res.annual_cash_flow <= 0:
        out.append(
            RuleResult(
                code="NEGATIVE_CASH_FLOW",
                severity="warn",
                message="Negative or zero cash flow: the property will not cover its own costs.",
                context={"annual_cash_flow": res.annual_cash_flow},
            )
        )
    if res.coc_return < 8:
        out.append(
            RuleResult(
                code="LOW_COC_RETURN",
                severity="warn",
                message="Cash-on-cash return is below 8%.",
                context={"actual": res.coc_return, "limit": 8.0},
            )
        )
    if res.npv < 0:
        out.append(
            RuleResult(
                code="NEGATIVE_NPV",
                severity="warn",
                message="Negative NPV: the deal does not meet your required rate of return.",
                context={"npv": res.npv},
            )
        )
    if res.irr < 12:
        out.append(
            RuleResult(
                code="LOW_IRR",
                severity="warn",
                message="IRR is below 12%.",
                context={"actual": res.irr, "limit": 12.0},
            )
        )
    return out


def score_investment(res: InvestmentResult) -> Recommendation:
    score = score_metrics(res)
    band, summary = band_for_score(score)
    return Recommendation(score=score, band=band, summary=summary, warnings=evaluate_rules(res))


def metric_benchmark(metric: str, value: float) -> Optional[str]:
    """Label a CoC or IRR figure with the investor tier it falls in."""
    tiers = {"coc_return": COC_TIERS, "irr": IRR_TIERS}.get(metric)
    if tiers is None:
        raise KeyError(metric)
    for lower, label in tiers:
        if value >= lower:
            return label
    return None
