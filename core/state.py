"""Session state defaults and reset for the calculator forms."""
from __future__ import annotations

import streamlit as st

from core.logging_utils import get_logger
from core.models import EntitlementInput, InvestmentInput
from core.presets import ENTITLEMENT_DEFAULTS, INVESTMENT_DEFAULTS

logger = get_logger(__name__)

# Widget keys double as model field names so a form can be rebuilt straight
# from ``st.session_state``.
ENTITLEMENT_KEYS = list(ENTITLEMENT_DEFAULTS)
INVESTMENT_KEYS = list(INVESTMENT_DEFAULTS)
INPUT_KEYS = ENTITLEMENT_KEYS + INVESTMENT_KEYS


def init_state() -> None:
    ss = st.session_state
    for key, val in {**ENTITLEMENT_DEFAULTS, **INVESTMENT_DEFAULTS}.items():
        ss.setdefault(key, val)


def entitlement_input() -> EntitlementInput:
    return EntitlementInput(**{k: st.session_state.get(k, "") for k in ENTITLEMENT_KEYS})


def investment_input() -> InvestmentInput:
    return InvestmentInput(**{k: st.session_state.get(k, "") for k in INVESTMENT_KEYS})


def reset_inputs() -> None:
    """Blank every calculator input; results follow on the next rerun.

    Meant for use as a widget ``on_click`` callback, which runs before the
    input widgets are instantiated.
    """

    for key in INPUT_KEYS:
        st.session_state[key] = ""
    logger.info("calculator reset", extra={"context": {"fields": len(INPUT_KEYS)}})
