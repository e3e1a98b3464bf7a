"""
Hand Cricket - Application Settings

Loads configuration from environment variables using Pydantic Settings.
On Streamlit Cloud, bridges st.secrets into env vars so Pydantic can read them.
"""

import os
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from src.engine.base import Team

_SECRET_KEYS = (
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "GEMINI_TTS_MODEL",
    "GEMINI_VOICE",
    "GEMINI_BASE_URL",
    "REQUEST_TIMEOUT",
    "AI_COMMENTARY_PROBABILITY",
    "TEAM_A_NAME",
    "TEAM_B_NAME",
    "TEAM_A_FLAG",
    "TEAM_B_FLAG",
    "DEBUG",
    "LOG_LEVEL",
    "ENABLE_SOUNDS",
    "ENABLE_VOICE",
)


def _load_streamlit_secrets() -> None:
    """Bridge Streamlit Cloud secrets into environment variables."""
    try:
        import streamlit as st

        for key in _SECRET_KEYS:
            if key not in os.environ and key in st.secrets:
                os.environ[key] = str(st.secrets[key])
    except Exception:
        # No secrets file outside Streamlit Cloud
        pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Gemini (optional; without a key all AI features fall back to local text)
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash"
    gemini_tts_model: str = "gemini-2.5-flash-preview-tts"
    gemini_voice: str = "Kore"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    request_timeout: float = Field(default=8.0, gt=0)
    ai_commentary_probability: float = Field(default=0.2, ge=0.0, le=1.0)

    # Teams
    team_a_name: str = "India"
    team_b_name: str = "Pakistan"
    team_a_flag: str = "\U0001F1EE\U0001F1F3"
    team_b_flag: str = "\U0001F1F5\U0001F1F0"

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Audio
    enable_sounds: bool = True
    enable_voice: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def ai_enabled(self) -> bool:
        """Returns True if a Gemini credential is configured."""
        return bool(self.gemini_api_key)

    def team_name(self, team: Team) -> str:
        return self.team_a_name if team is Team.A else self.team_b_name

    def team_flag(self, team: Team) -> str:
        return self.team_a_flag if team is Team.A else self.team_b_flag


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    _load_streamlit_secrets()
    return Settings()
