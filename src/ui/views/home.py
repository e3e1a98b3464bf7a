"""Menu page - title, rules and the start button."""

from __future__ import annotations

import streamlit as st

from src.config.settings import get_settings
from src.engine.base import Team
from src.ui.state import get_match_session


def render_home_page() -> None:
    """Render the menu / landing page."""
    settings = get_settings()
    team_a = settings.team_name(Team.A)
    team_b = settings.team_name(Team.B)

    st.title("Hand Cricket")
    st.caption(f"{team_a} vs {team_b}")
    if settings.ai_enabled:
        st.caption("✨ AI commentary enabled")

    st.markdown(
        f"""
Welcome to the big match! You play as **Team {team_a}** {settings.team_flag(Team.A)}.

**Rules:**
1. Choose a number (1-6).
2. Same number as the opponent = **OUT**.
3. Different number = **RUNS** (your number).

You bat first and set a target, then bowl to defend it.
"""
    )

    if st.button("Start Match", type="primary", use_container_width=True):
        get_match_session().start_match()
        st.rerun()

    st.caption("Tip: use keyboard numbers 1-6")
