"""Game page - scoreboard, coach tip, last ball and the number pad."""

from __future__ import annotations

import streamlit as st

from src.config.settings import get_settings
from src.engine.base import MatchPhase, MatchState, Team
from src.realtime.session import MatchSession
from src.ui.components.coach_tip import render_coach_tip
from src.ui.components.game_feed import render_game_feed
from src.ui.components.scoreboard import render_scoreboard
from src.ui.components.turn_controls import render_turn_controls
from src.ui.state import get_match_session
from src.ui.themes.animations import render_score_popup, render_wicket_animation
from src.ui.views.results import render_results_page

_PHASE_TITLES: dict[MatchPhase, str] = {
    MatchPhase.FIRST_INNINGS: "1st Innings",
    MatchPhase.INNINGS_BREAK: "Innings Break",
    MatchPhase.SECOND_INNINGS: "2nd Innings",
    MatchPhase.MATCH_OVER: "Match Ended",
}


def render_game_page() -> None:
    """Render the main match page."""
    session = get_match_session()
    state = session.state
    st.session_state["_seen_revision"] = session.revision

    _render_header(session, state)
    render_scoreboard(state, session.venue)
    render_coach_tip(session.coach_tip, session.is_ai_loading)

    if state.phase is MatchPhase.INNINGS_BREAK:
        _render_innings_break(session, state)
    elif state.phase is MatchPhase.MATCH_OVER:
        render_results_page(session)
    else:
        _render_innings(session, state)

    _poll_enrichment()


def _render_header(session: MatchSession, state: MatchState) -> None:
    left, middle, right = st.columns([1, 2, 1])
    with left:
        if st.button("← Menu", key="btn_menu"):
            session.return_to_menu()
            st.rerun()
    with middle:
        st.subheader(_PHASE_TITLES.get(state.phase, ""))
    with right:
        if st.button("Restart ↻", key="btn_restart"):
            session.restart_match()
            st.rerun()


def _render_innings(session: MatchSession, state: MatchState) -> None:
    ball = state.last_ball
    render_game_feed(ball)
    if ball is not None and not ball.is_out and ball.runs >= 4:
        render_score_popup(ball.runs)

    move = render_turn_controls(state)
    if move is not None:
        session.play_ball(move)
        st.rerun()


def _render_innings_break(session: MatchSession, state: MatchState) -> None:
    settings = get_settings()
    render_game_feed(state.last_ball)
    render_wicket_animation()

    st.markdown(
        f"{settings.team_name(Team.A)} has set a target of **{state.target}** runs.\n\n"
        f"Can {settings.team_name(Team.B)} chase it down?"
    )
    if st.button("Start 2nd Innings", type="primary", use_container_width=True):
        session.start_second_innings()
        st.rerun()


@st.fragment(run_every=1)
def _poll_enrichment() -> None:
    """Rerun the app when background commentary, tips or voice land.

    Enrichment is applied on the worker thread, which cannot trigger a
    Streamlit rerun itself.
    """
    session = get_match_session()
    if session.revision != st.session_state.get("_seen_revision"):
        st.rerun(scope="app")
