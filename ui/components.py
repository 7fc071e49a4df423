import streamlit as st

from core.presets import FIELD_GUIDANCE, PLACEHOLDERS
from core.utils import sanitize_numeric_input


def _sanitize(key: str) -> None:
    st.session_state[key] = sanitize_numeric_input(st.session_state.get(key, ""))


def numeric_field(label: str, key: str) -> str:
    """Free-text numeric input; the stored value is sanitized on every edit.

    Unparsable text is left for the models to coerce to zero, so a half-typed
    number never interrupts the calculation.
    """

    help = FIELD_GUIDANCE.get(key)
    return st.text_input(
        label,
        key=key,
        placeholder=PLACEHOLDERS.get(key, ""),
        help=help,
        on_change=_sanitize,
        args=(key,),
    )


def result_line(label: str, value: str, emphasize: bool = False) -> None:
    left, right = st.columns([3, 2])
    left.markdown(f"**{label}:**" if emphasize else f"{label}:")
    right.markdown(f"**{value}**")
