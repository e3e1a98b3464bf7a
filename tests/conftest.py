"""
Hand Cricket - Test Configuration and Fixtures

Common fixtures and test doubles for all test modules.
"""

import asyncio
import random
from typing import Any, Callable, Coroutine, Sequence
from unittest.mock import MagicMock

import pytest

from src.config.settings import Settings
from src.engine.base import MatchPhase, MatchState
from src.services.provider import CommentaryProvider


class ScriptedRandom(random.Random):
    """Random source that replays scripted ``randint``/``random`` values.

    Once a script runs out, values come from the seeded generator.
    ``choice`` and friends are left to the seeded generator.
    """

    def __init__(
        self,
        ints: Sequence[int] = (),
        floats: Sequence[float] = (),
        seed: int = 0,
    ) -> None:
        self.ints = list(ints)
        self.floats = list(floats)
        super().__init__(seed)

    def randint(self, a: int, b: int) -> int:
        if self.ints:
            return self.ints.pop(0)
        return super().randint(a, b)

    def random(self) -> float:
        if self.floats:
            return self.floats.pop(0)
        return super().random()

    # Overriding random() alone would make choice() consume the float script
    def getrandbits(self, k: int) -> int:
        return super().getrandbits(k)


class InlineWorker:
    """Enrichment worker double that runs jobs only when told to."""

    def __init__(self) -> None:
        self.jobs: list[tuple[Coroutine, Callable | None]] = []

    def submit(self, coro: Coroutine, on_result: Callable | None = None) -> None:
        self.jobs.append((coro, on_result))

    def run(self, index: int = 0) -> Any:
        coro, on_result = self.jobs.pop(index)
        result = asyncio.run(coro)
        if on_result is not None:
            on_result(result)
        return result

    def run_all(self) -> None:
        while self.jobs:
            self.run()

    def discard_all(self) -> None:
        for coro, _ in self.jobs:
            coro.close()
        self.jobs.clear()


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRandom]:
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom


@pytest.fixture
def settings() -> Settings:
    """Settings with AI enabled and no .env lookup."""
    return Settings(
        _env_file=None,
        gemini_api_key="test-key",
        ai_commentary_probability=1.0,
        enable_voice=True,
    )


@pytest.fixture
def offline_settings() -> Settings:
    """Settings with no Gemini credential."""
    return Settings(_env_file=None, gemini_api_key=None)


@pytest.fixture
def mock_provider() -> MagicMock:
    """Provider double; its async methods are AsyncMocks."""
    provider = MagicMock(spec=CommentaryProvider)
    provider.available = True
    provider.fetch_ball_commentary.return_value = "AI Commentary"
    provider.fetch_coach_tip.return_value = "Coach Tip"
    provider.synthesize_speech.return_value = b"RIFF-voice"
    provider.lookup_venue.return_value = None
    return provider


@pytest.fixture
def inline_worker():
    worker = InlineWorker()
    yield worker
    worker.discard_all()


@pytest.fixture
def first_innings_state() -> MatchState:
    """Fresh first innings."""
    return MatchState(phase=MatchPhase.FIRST_INNINGS, match_id="match-1")


@pytest.fixture
def chase_state() -> Callable[..., MatchState]:
    """Factory for second-innings states."""
    def make(score_b: int, target: int, score_a: int | None = None) -> MatchState:
        return MatchState(
            phase=MatchPhase.SECOND_INNINGS,
            score_a=target - 1 if score_a is None else score_a,
            score_b=score_b,
            target=target,
            match_id="match-1",
        )
    return make
