"""Number pad - the human's 1-6 choice for each ball."""

from __future__ import annotations

import streamlit as st

from src.engine.base import HUMAN_TEAM, MAX_MOVE, MIN_MOVE, MatchState


def render_turn_controls(state: MatchState, disabled: bool = False) -> int | None:
    """Render the six number buttons.

    Button labels are the bare digits so the keyboard bridge can press
    them for keys 1-6.

    Returns:
        The chosen number, or ``None`` if no button was pressed.
    """
    if state.phase.is_innings:
        role = "Batting" if state.batting_team is HUMAN_TEAM else "Bowling"
        st.caption(f"You are {role}. Pick a number (or press 1-6)")

    choice: int | None = None
    cols = st.columns(MAX_MOVE)
    for move, col in zip(range(MIN_MOVE, MAX_MOVE + 1), cols):
        with col:
            if st.button(
                str(move),
                key=f"btn_move_{move}_{len(state.history)}",
                use_container_width=True,
                disabled=disabled or not state.phase.is_innings,
                type="primary",
            ):
                choice = move
    return choice
