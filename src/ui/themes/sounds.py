"""Sound effects, voice clips and the keyboard bridge for Hand Cricket.

Sound effects are synthesised in the browser with Web Audio oscillators,
so no audio assets ship with the app. The synth is installed ONCE into
``window.parent._hc_audio``; subsequent Streamlit reruns send only a tiny
``play('<name>')`` command.

Preferences (SFX on/off, volume) are stored in non-widget session-state
keys (``_sfx_pref``, ``_sfx_volume``) so they survive Streamlit's widget-
lifecycle cleanup during page transitions.
"""

from __future__ import annotations

import base64

import streamlit as st
import streamlit.components.v1 as components

from src.config.settings import get_settings
from src.realtime.events import EventPayload, MatchEvent

# ---------------------------------------------------------------------------
# Sound mappings
# ---------------------------------------------------------------------------

# Each tone: (frequency Hz, end frequency Hz, oscillator type, start offset s,
# duration s, volume)
_SFX_TONES: dict[str, list[tuple[float, float, str, float, float, float]]] = {
    "click": [(800, 800, "sine", 0.0, 0.1, 0.05)],
    "hit": [
        (300, 300, "square", 0.0, 0.1, 0.1),
        (150, 150, "triangle", 0.0, 0.15, 0.1),
    ],
    "four": [
        (400, 400, "sine", 0.0, 0.3, 0.1),
        (600, 600, "sine", 0.1, 0.3, 0.1),
        (800, 800, "sine", 0.2, 0.3, 0.1),
    ],
    "six": [(200, 800, "sine", 0.0, 0.8, 0.1)],
    "wicket": [
        (150, 50, "sawtooth", 0.0, 0.5, 0.15),
        (120, 50, "sawtooth", 0.0, 0.5, 0.15),
    ],
    "win": [
        (523.25, 523.25, "triangle", 0.0, 0.4, 0.1),
        (659.25, 659.25, "triangle", 0.15, 0.4, 0.1),
        (783.99, 783.99, "triangle", 0.3, 0.4, 0.1),
        (1046.50, 1046.50, "triangle", 0.45, 0.4, 0.1),
    ],
}

# Highest priority first; only one effect plays per rerun
_EVENT_SFX: tuple[tuple[MatchEvent, str], ...] = (
    (MatchEvent.MATCH_WON, "win"),
    (MatchEvent.MATCH_TIED, "win"),
    (MatchEvent.WICKET, "wicket"),
    (MatchEvent.MAXIMUM, "six"),
    (MatchEvent.BOUNDARY, "four"),
    (MatchEvent.RUNS_SCORED, "hit"),
    (MatchEvent.MATCH_STARTED, "click"),
    (MatchEvent.SECOND_INNINGS_STARTED, "click"),
    (MatchEvent.RETURNED_TO_MENU, "click"),
)

_SYNTH_JS = """
if (!p._hc_audio) {
  p._hc_audio = {
    ctx: null,
    play: function(tones, master) {
      var A = p.AudioContext || p.webkitAudioContext;
      if (!this.ctx) this.ctx = new A();
      var ctx = this.ctx, now = ctx.currentTime;
      tones.forEach(function(t) {
        var osc = ctx.createOscillator(), gain = ctx.createGain();
        osc.type = t[2];
        osc.frequency.setValueAtTime(t[0], now + t[3]);
        osc.frequency.linearRampToValueAtTime(t[1], now + t[3] + t[4]);
        gain.gain.setValueAtTime(t[5] * master, now + t[3]);
        gain.gain.linearRampToValueAtTime(0, now + t[3] + t[4]);
        osc.connect(gain); gain.connect(ctx.destination);
        osc.start(now + t[3]); osc.stop(now + t[3] + t[4]);
      });
    }
  };
}
"""

_KEYBOARD_JS = """
if (!p._hc_keys) {
  p._hc_keys = true;
  p.document.addEventListener('keydown', function(e) {
    if (['1','2','3','4','5','6'].indexOf(e.key) === -1) return;
    var tag = (e.target && e.target.tagName) || '';
    if (tag === 'INPUT' || tag === 'TEXTAREA') return;
    var buttons = p.document.querySelectorAll('button');
    for (var i = 0; i < buttons.length; i++) {
      var b = buttons[i];
      if (b.innerText.trim() === e.key && !b.disabled) { b.click(); break; }
    }
  });
}
"""

# ---------------------------------------------------------------------------
# Public API - SFX
# ---------------------------------------------------------------------------


def play_sfx(name: str) -> None:
    """Queue a sound effect to be played on the next render cycle.

    The actual playback happens in :func:`render_audio_system`.
    """
    if not st.session_state.get("_sfx_pref", get_settings().enable_sounds):
        return
    if name not in _SFX_TONES:
        return
    st.session_state["_sfx_pending"] = name


def sfx_for_events(events: list[EventPayload]) -> str | None:
    """Pick the most significant sound effect for a batch of events."""
    raised = {payload.event for payload in events}
    for event, name in _EVENT_SFX:
        if event in raised:
            return name
    return None


def queue_event_sounds(events: list[EventPayload]) -> None:
    """Queue the sound effect for the events of the last action."""
    name = sfx_for_events(events)
    if name:
        play_sfx(name)


def queue_voice_clip(clip: bytes | None) -> None:
    """Queue a WAV clip of spoken commentary."""
    if clip and st.session_state.get("_voice_pref", get_settings().enable_voice):
        st.session_state["_voice_pending"] = base64.b64encode(clip).decode("ascii")


# ---------------------------------------------------------------------------
# Public API - sidebar controls
# ---------------------------------------------------------------------------


def _sync_sfx_pref() -> None:
    st.session_state["_sfx_pref"] = st.session_state["_sfx_widget"]


def _sync_voice_pref() -> None:
    st.session_state["_voice_pref"] = st.session_state["_voice_widget"]


def _sync_sfx_volume() -> None:
    st.session_state["_sfx_volume"] = st.session_state["_sfx_vol_widget"]


def render_sound_controls() -> None:
    """Render SFX and voice toggles with a volume slider in the sidebar."""
    settings = get_settings()
    with st.sidebar:
        st.session_state.setdefault("_sfx_pref", settings.enable_sounds)
        st.session_state.setdefault("_voice_pref", settings.enable_voice)
        st.session_state.setdefault("_sfx_volume", 50)

        st.toggle(
            "Sound Effects",
            value=st.session_state["_sfx_pref"],
            key="_sfx_widget",
            on_change=_sync_sfx_pref,
        )
        if st.session_state["_sfx_pref"]:
            st.slider(
                "SFX Volume",
                min_value=0,
                max_value=100,
                value=st.session_state["_sfx_volume"],
                key="_sfx_vol_widget",
                on_change=_sync_sfx_volume,
                format="%d%%",
            )

        if settings.ai_enabled:
            st.toggle(
                "Voice Commentary",
                value=st.session_state["_voice_pref"],
                key="_voice_widget",
                on_change=_sync_voice_pref,
            )


# ---------------------------------------------------------------------------
# Public API - audio system renderer
# ---------------------------------------------------------------------------


def _tones_js(name: str) -> str:
    tones = ",".join(
        f"[{f0},{f1},'{kind}',{start},{dur},{vol}]"
        for f0, f1, kind, start, dur, vol in _SFX_TONES[name]
    )
    return f"[{tones}]"


def render_audio_system() -> None:
    """Render pending SFX and voice plus the keyboard bridge.

    Uses a single ``components.html`` call. The synth and the key
    listener are installed into the parent window once and reused.
    """
    sfx_volume = st.session_state.get("_sfx_volume", 50) / 100.0

    sfx_pending = st.session_state.pop("_sfx_pending", None)
    if not st.session_state.get("_sfx_pref", True):
        sfx_pending = None
    voice_pending = st.session_state.pop("_voice_pending", None)

    control_parts: list[str] = []
    if sfx_pending:
        control_parts.append(f"p._hc_audio.play({_tones_js(sfx_pending)}, {sfx_volume});")
    if voice_pending:
        control_parts.append(
            f"new p.Audio('data:audio/wav;base64,{voice_pending}')"
            ".play().catch(function(){});"
        )

    html = (
        "<script>\n"
        "(function() {\n"
        "  try {\n"
        "    var p = window.parent;\n"
        + _SYNTH_JS + "\n"
        + _KEYBOARD_JS + "\n"
        + "\n".join(control_parts) + "\n"
        "  } catch(e) { console.warn('HC audio:', e); }\n"
        "})();\n"
        "</script>"
    )

    components.html(html, height=0)
