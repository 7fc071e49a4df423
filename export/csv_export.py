from __future__ import annotations

import io

import pandas as pd


def cash_flow_csv(schedule: pd.DataFrame) -> bytes:
    """CSV bytes of the yearly cash-flow schedule, values rounded to cents."""
    buf = io.StringIO()
    schedule.round({"CashFlow": 2, "DiscountFactor": 6, "PresentValue": 2}).to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")
