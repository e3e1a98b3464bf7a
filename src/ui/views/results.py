"""Results panel - winner or tie and the final scores."""

from __future__ import annotations

import streamlit as st

from src.config.settings import get_settings
from src.engine.base import MatchState, Team
from src.realtime.session import MatchSession
from src.ui.themes.animations import render_tie_animation, render_victory_animation


def render_results_page(session: MatchSession) -> None:
    """Render the match-over panel with play-again and menu actions."""
    settings = get_settings()
    state: MatchState = session.state

    if state.winner is None:
        render_tie_animation()
    else:
        render_victory_animation(settings.team_name(state.winner))

    st.markdown(
        f"**{settings.team_name(Team.A)}**: {state.score_a} &nbsp;|&nbsp; "
        f"**{settings.team_name(Team.B)}**: {state.score_b} "
        f"(target {state.target})"
    )

    st.divider()

    col1, col2 = st.columns(2)

    with col1:
        if st.button("Play Again", type="primary", use_container_width=True):
            session.restart_match()
            st.rerun()

    with col2:
        if st.button("Return to Menu", use_container_width=True):
            session.return_to_menu()
            st.rerun()
