"""Per-browser-session wiring of the match controller."""

from __future__ import annotations

import streamlit as st

from src.realtime.session import MatchSession
from src.realtime.worker import get_enrichment_worker
from src.services.provider import get_commentary_provider

_SESSION_KEY = "match_session"


def get_match_session() -> MatchSession:
    """The MatchSession owned by this browser session, created on first use."""
    session = st.session_state.get(_SESSION_KEY)
    if session is None:
        session = MatchSession(
            provider=get_commentary_provider(),
            worker=get_enrichment_worker(),
        )
        st.session_state[_SESSION_KEY] = session
    return session
