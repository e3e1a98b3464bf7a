"""Coach tip banner."""

from __future__ import annotations

import html

import streamlit as st


def render_coach_tip(tip: str | None, loading: bool = False) -> None:
    if not tip and not loading:
        return
    text = "Thinking..." if loading and not tip else html.escape(tip or "")
    st.markdown(
        '<div class="coach-tip">'
        '<div class="label">&#10024; Coach</div>'
        f"<div>{text}</div>"
        "</div>",
        unsafe_allow_html=True,
    )
