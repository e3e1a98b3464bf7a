"""Game feed - the last ball's numbers and commentary."""

from __future__ import annotations

import html

import streamlit as st

from src.config.settings import get_settings
from src.engine.base import BallOutcome


def render_game_feed(last_ball: BallOutcome | None) -> None:
    """Render the most recent delivery, or a prompt before the first ball."""
    if last_ball is None:
        st.markdown(
            '<div class="game-feed">'
            '<span class="placeholder">Waiting for the first delivery...</span>'
            "</div>",
            unsafe_allow_html=True,
        )
        return

    settings = get_settings()
    batting = html.escape(settings.team_name(last_ball.batting_team))
    bowling = html.escape(settings.team_name(last_ball.bowling_team))
    result = "OUT!" if last_ball.is_out else f"+{last_ball.runs}"

    st.markdown(
        '<div class="game-feed">'
        '<div class="moves">'
        f'<div><div class="move-label">{batting} bat</div>'
        f'<div class="move">{last_ball.batting_move}</div></div>'
        f'<div><div class="move-label">Result</div><div class="move">{result}</div></div>'
        f'<div><div class="move-label">{bowling} bowl</div>'
        f'<div class="move">{last_ball.bowling_move}</div></div>'
        "</div>"
        f'<div class="commentary">&ldquo;{html.escape(last_ball.commentary)}&rdquo;</div>'
        "</div>",
        unsafe_allow_html=True,
    )
