"""Hand Cricket - Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st


_RULES = """\
**Goal:** Outscore the computer over two innings!

**Each ball:**
- Both sides pick a number from 1 to 6
- **Same number** = OUT, the innings ends
- **Different number** = the batting side scores its number

**Innings:**
- You bat first and set a target (your score + 1)
- Then you bowl: get the computer out before it reaches the target
- Out exactly one run short of the target = **Tie**

**Controls:** tap a number or press keys 1-6
"""


def _render_sidebar_rules() -> None:
    """Show the rules in the sidebar during a match."""
    with st.sidebar:
        st.divider()
        st.markdown("### Rules")
        st.markdown(_RULES)


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Hand Cricket",
        page_icon="🏏",
        layout="centered",
        initial_sidebar_state="collapsed",
    )

    from src.config import configure_logging, get_settings
    configure_logging(get_settings().log_level)

    # Load stadium theme CSS and sound system
    from src.ui.themes import (
        load_css,
        queue_event_sounds,
        queue_voice_clip,
        render_audio_system,
        render_sound_controls,
    )
    from src.engine.base import MatchPhase
    from src.ui.state import get_match_session
    load_css()

    session = get_match_session()

    # Page routing (lazy imports to avoid circular deps)
    if session.state.phase is MatchPhase.MENU:
        from src.ui.views.home import render_home_page
        render_home_page()
    else:
        from src.ui.views.game import render_game_page
        render_game_page()
        _render_sidebar_rules()

    # Sound system (sidebar controls + browser-side synth)
    render_sound_controls()
    queue_event_sounds(session.drain_events())
    queue_voice_clip(session.take_voice_clip())
    render_audio_system()


if __name__ == "__main__":
    main()
