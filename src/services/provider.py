"""
Hand Cricket - Gemini Commentary Provider

Optional AI flavor: ball commentary, coach tips, voice clips and a venue
for the scoreboard, fetched from the Gemini REST API with httpx.

Every public coroutine returns ``None`` when the credential is missing or
the call fails for any reason. Callers keep their local text in that case.
"""

from __future__ import annotations

import base64
import io
import logging
import wave
from functools import lru_cache
from typing import Any

import httpx
from pydantic import ValidationError

from src.config.settings import Settings, get_settings
from src.engine.base import MatchPhase, MatchState, Team, format_overs
from src.services.models import GeminiResponse, VenueInfo

logger = logging.getLogger(__name__)

# Gemini speech output is raw 16-bit mono PCM at 24 kHz
_PCM_SAMPLE_RATE = 24000
_PCM_SAMPLE_WIDTH = 2

_FAILURES = (httpx.HTTPError, ValidationError, ValueError, KeyError, IndexError)


class CommentaryProvider:
    """Async client for the optional Gemini-backed collaborators.

    A fresh ``httpx.AsyncClient`` is opened per call so the provider can be
    used from whichever event loop the enrichment worker runs.
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    @property
    def available(self) -> bool:
        """Returns True if a credential is configured."""
        return self._settings.ai_enabled

    def team_name(self, team: Team) -> str:
        return self._settings.team_name(team)

    # -- Public API ------------------------------------------------------

    async def fetch_ball_commentary(
        self,
        batting_team: Team,
        bowling_team: Team,
        runs: int,
        is_out: bool,
        context_label: str,
    ) -> str | None:
        """One line of TV-style commentary for a ball."""
        batting = self.team_name(batting_team)
        bowling = self.team_name(bowling_team)
        event = "WICKET!" if is_out else f"{runs} runs scored"
        prompt = (
            "Write a short, exciting, TV-style cricket commentary sentence (max 15 words).\n"
            f"Match: {self._settings.team_a_name} vs {self._settings.team_b_name}.\n"
            f"Batter: {batting}. Bowler: {bowling}.\n"
            f"Event: {event}.\n"
            f"Context: {context_label}\n"
            "Reply with the sentence only."
        )
        return await self._generate_text(prompt, "commentary")

    async def fetch_coach_tip(self, state: MatchState) -> str | None:
        """A short tactical tip for the human, None outside an innings."""
        team_a = self._settings.team_a_name
        team_b = self._settings.team_b_name
        overs = format_overs(len(state.history))

        if state.phase is MatchPhase.FIRST_INNINGS:
            focus = "Starting steady" if len(state.history) < 12 else "Accelerating"
            prompt = (
                f"You are a cricket coach for {team_a}. Current Score: {team_a} "
                f"{state.score_a}. Overs: {overs}.\n"
                "Give 1 short piece of advice (max 10 words) to the batter.\n"
                f"Focus on: {focus}."
            )
        elif state.phase is MatchPhase.SECOND_INNINGS:
            prompt = (
                f"You are a cricket coach for {team_a} (Bowling). {team_b} needs "
                f"{state.runs_needed} runs to win.\n"
                "Give 1 short piece of tactical advice (max 10 words) to the "
                "bowler to defend the target."
            )
        else:
            return None

        return await self._generate_text(prompt, "coach tip")

    async def synthesize_speech(self, text: str) -> bytes | None:
        """Spoken commentary as WAV bytes."""
        if not self.available or not text:
            return None

        body = {
            "contents": [{"parts": [{"text": f"Say excitedly like a cricket commentator: {text}"}]}],
            "generationConfig": {
                "responseModalities": ["AUDIO"],
                "speechConfig": {
                    "voiceConfig": {
                        "prebuiltVoiceConfig": {"voiceName": self._settings.gemini_voice},
                    },
                },
            },
        }
        try:
            response = await self._post(self._settings.gemini_tts_model, body)
            audio = response.first_audio()
            if audio is None:
                return None
            return pcm_to_wav(base64.b64decode(audio.data))
        except _FAILURES as exc:
            logger.warning("Voice synthesis failed: %s", exc)
            return None

    async def lookup_venue(self) -> VenueInfo | None:
        """A famous cricket stadium to host the match."""
        if not self.available:
            return None

        body = {
            "contents": [{"parts": [{"text": (
                f"Pick one famous international cricket stadium for a "
                f"{self._settings.team_a_name} vs {self._settings.team_b_name} match. "
                'Reply as JSON: {"name": "<stadium, city>", '
                '"link": "<Google Maps URL or null>"}'
            )}]}],
            "generationConfig": {"responseMimeType": "application/json"},
        }
        try:
            response = await self._post(self._settings.gemini_model, body)
            text = response.first_text()
            if text is None:
                return None
            return VenueInfo.model_validate_json(text)
        except _FAILURES as exc:
            logger.warning("Venue lookup failed: %s", exc)
            return None

    # -- HTTP ------------------------------------------------------------

    async def _generate_text(self, prompt: str, purpose: str) -> str | None:
        if not self.available:
            return None

        body = {"contents": [{"parts": [{"text": prompt}]}]}
        try:
            response = await self._post(self._settings.gemini_model, body)
            return response.first_text()
        except _FAILURES as exc:
            logger.warning("Gemini %s request failed: %s", purpose, exc)
            return None

    async def _post(self, model: str, body: dict[str, Any]) -> GeminiResponse:
        url = f"{self._settings.gemini_base_url}/models/{model}:generateContent"
        async with httpx.AsyncClient(
            timeout=self._settings.request_timeout,
            transport=self._transport,
        ) as client:
            response = await client.post(
                url,
                json=body,
                headers={"x-goog-api-key": self._settings.gemini_api_key or ""},
            )
            response.raise_for_status()
            return GeminiResponse.model_validate(response.json())


def pcm_to_wav(pcm: bytes) -> bytes:
    """Wrap raw speech PCM in a WAV container the browser can play."""
    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as wav:
        wav.setnchannels(1)
        wav.setsampwidth(_PCM_SAMPLE_WIDTH)
        wav.setframerate(_PCM_SAMPLE_RATE)
        wav.writeframes(pcm)
    return buffer.getvalue()


@lru_cache(maxsize=1)
def get_commentary_provider() -> CommentaryProvider:
    """Create and cache the provider from application settings."""
    return CommentaryProvider(get_settings())
