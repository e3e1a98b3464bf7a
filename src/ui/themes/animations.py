"""CSS injection and HTML animation helpers for the stadium theme."""

import html
from pathlib import Path

import streamlit as st


def load_css() -> None:
    """Inject the stadium CSS theme into the Streamlit app."""
    css_path = Path(__file__).parent / "stadium.css"
    css_text = css_path.read_text(encoding="utf-8")
    st.markdown(f"<style>{css_text}</style>", unsafe_allow_html=True)


def render_wicket_animation() -> None:
    """Render the wicket banner with shake animation."""
    st.markdown(
        '<div class="wicket-overlay">'
        "<h2>OUT!</h2>"
        "<p>Same number, the innings is over.</p>"
        "</div>",
        unsafe_allow_html=True,
    )


def render_victory_animation(name: str) -> None:
    """Render the victory overlay with glow animation."""
    st.markdown(
        '<div class="victory-overlay">'
        '<span class="trophy">&#127942;</span>'
        f"<h1>{html.escape(name)} Wins!</h1>"
        "<p>What a match!</p>"
        "</div>",
        unsafe_allow_html=True,
    )


def render_tie_animation() -> None:
    st.markdown(
        '<div class="victory-overlay tie">'
        '<span class="trophy">&#129309;</span>'
        "<h1>It's a Tie!</h1>"
        "<p>Nothing to separate the sides.</p>"
        "</div>",
        unsafe_allow_html=True,
    )


def render_score_popup(runs: int) -> None:
    """Render an animated runs popup."""
    st.markdown(
        f'<div class="score-popup">+{runs}</div>',
        unsafe_allow_html=True,
    )
