"""Stadium theme for Hand Cricket."""

from src.ui.themes.animations import load_css
from src.ui.themes.sounds import (
    play_sfx,
    queue_event_sounds,
    queue_voice_clip,
    render_audio_system,
    render_sound_controls,
)

__all__ = [
    "load_css",
    "play_sfx",
    "queue_event_sounds",
    "queue_voice_clip",
    "render_audio_system",
    "render_sound_controls",
]
