"""Scoreboard component - both sides' scores, target and venue."""

from __future__ import annotations

import html

import streamlit as st

from src.config.settings import get_settings
from src.engine.base import MatchState, Team, format_overs
from src.services.models import VenueInfo


def render_scoreboard(state: MatchState, venue: VenueInfo | None = None) -> None:
    """Render the scoreboard panel.

    Args:
        state: Current match state.
        venue: Optional display-only venue annotation.
    """
    settings = get_settings()
    batting = state.batting_team

    parts = ['<div class="scoreboard"><div class="sides">']
    for team in (Team.A, Team.B):
        classes = ["side", f"team-{team.value}"]
        if team is batting:
            classes.append("batting")

        tag = ""
        if team is batting:
            overs = format_overs(state.balls_in_innings(team))
            tag = f'<div class="batting-tag">Batting &middot; {overs} ov</div>'

        parts.append(
            f'<div class="{" ".join(classes)}">'
            f'<div class="flag">{settings.team_flag(team)}</div>'
            f'<div class="name">{html.escape(settings.team_name(team))}</div>'
            f'<div class="score">{state.score_for(team)}</div>'
            f"{tag}</div>"
        )

        if team is Team.A:
            target = ""
            if state.target is not None:
                target = f'<div class="target">Target: {state.target}</div>'
            parts.append(f'<div class="versus">VS{target}</div>')

    parts.append("</div>")

    if venue is not None:
        name = html.escape(venue.name)
        if venue.link:
            name = f'<a href="{html.escape(venue.link)}" target="_blank">{name}</a>'
        parts.append(f'<div class="venue">&#127967; {name}</div>')

    parts.append("</div>")
    st.markdown("".join(parts), unsafe_allow_html=True)
